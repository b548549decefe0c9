"""Shared logging configuration for edgeio."""

import logging
import os
from logging import Formatter

from colorlog import ColoredFormatter

from edgeio.config import LoggerConfig
from edgeio.const import EDGEIO
from edgeio.version import __version__

_LOGGER = logging.getLogger(__name__)
_nameToLevel = {
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.FATAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

LOG_FORMAT = "%(asctime)s %(levelname)s (%(threadName)s) [%(name)s] %(message)s"
SYSTEMD_LOG_FORMAT = "%(levelname)s (%(threadName)s) [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logger(debug: int, log_config: LoggerConfig | None = None) -> None:
    """Configure logger based on config yaml."""

    def debug_logger() -> None:
        if debug == 0:
            logging.getLogger().setLevel(logging.INFO)
        if debug > 0:
            logging.getLogger().setLevel(logging.DEBUG)
            _LOGGER.info("Debug mode active")
            _LOGGER.debug("Lib version is %s", __version__)
        if debug > 1:
            logging.getLogger(EDGEIO).setLevel(logging.DEBUG)

    if log_config is None:
        debug_logger()
        return
    if log_config.default is not None:
        logging.getLogger().setLevel(get_log_level(log_config.default))
        if debug == 0:
            debug = -1

    for log_key, log_level in log_config.logs.items():
        _LOGGER.info("Setting %s log level to %s", log_key, log_level)
        logging.getLogger(log_key).setLevel(get_log_level(log_level))
    debug_logger()


def get_log_level(level_name: str) -> int:
    """Convert string log level to logging constant."""
    return _nameToLevel.get(level_name.upper(), logging.INFO)


def is_running_under_systemd() -> bool:
    """Check if the process is running under systemd."""
    return os.getenv("JOURNAL_STREAM") is not None


def get_log_formatter(color: bool = True) -> Formatter:
    """Get log formatter with optional color support."""
    # journald adds its own timestamp
    log_format = SYSTEMD_LOG_FORMAT if is_running_under_systemd() else LOG_FORMAT

    if color:
        return ColoredFormatter(
            fmt="%(log_color)s" + log_format + "%(reset)s",
            datefmt=DATE_FORMAT,
            reset=True,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red",
            },
        )
    return Formatter(log_format, datefmt=DATE_FORMAT)


def setup_logging(debug_level: int = 0, color: bool = True) -> None:
    """Setup logging configuration."""
    level = logging.INFO if debug_level == 0 else logging.DEBUG
    root = logging.getLogger()
    if not root.handlers:
        root.addHandler(logging.StreamHandler())
    root.setLevel(level)
    formatter = get_log_formatter(color=color)
    for handler in root.handlers:
        handler.setFormatter(formatter)
