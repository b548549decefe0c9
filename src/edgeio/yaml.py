"""Load edgeio configuration from yaml."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Any

from pydantic import ValidationError
from yaml import MarkedYAMLError, SafeLoader, load

from edgeio.config import Config
from edgeio.exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)

__all__ = ["ConfigurationError", "EdgeIOLoader", "load_config", "load_yaml_file"]


class EdgeIOLoader(SafeLoader):
    """Loader which support for include in yaml files."""

    def __init__(self, stream: IO[str]) -> None:
        self._root = os.path.split(stream.name)[0]
        super().__init__(stream)

    def include(self, node: Any) -> Any:
        filename = os.path.join(self._root, self.construct_scalar(node))
        if not os.path.isfile(filename):
            raise MarkedYAMLError(
                problem=f"Included file '{filename}' not found",
                problem_mark=node.start_mark,
            )
        return load_yaml_file(filename)


EdgeIOLoader.add_constructor("!include", EdgeIOLoader.include)


def load_yaml_file(filename: str | Path) -> Any:
    with open(filename, encoding="utf-8") as f:
        data = load(f, EdgeIOLoader)
    return {} if data is None else data


def load_config(config_file_path: Path) -> Config:
    """Read yaml file and validate it against Config model."""
    if not config_file_path.is_file():
        raise ConfigurationError(f"Config file {config_file_path} not found.")
    _LOGGER.debug("Loading config from %s", config_file_path)
    try:
        raw = load_yaml_file(config_file_path)
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigurationError(
            f"Config file {config_file_path} cannot be read: {err}"
        ) from err
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Config file {config_file_path} must contain a mapping, "
            f"got {type(raw).__name__}."
        )
    try:
        return Config.model_validate(raw)
    except ValidationError as err:
        raise ConfigurationError(str(err)) from err
