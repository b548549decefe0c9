"""Edgecli script."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Annotated

import typer
from yaml import MarkedYAMLError

from edgeio.const import (
    AFTER,
    BEFORE,
    EDGE_SEPARATOR,
    EQUAL,
    INTEGER_PATTERN,
)
from edgeio.edge import Edge
from edgeio.exceptions import ConfigurationError
from edgeio.logger import configure_logger, setup_logging
from edgeio.version import __version__

_LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Inspect timestamped signal edges.")

ConfigOption = Annotated[
    str | None,
    typer.Option(
        "-c",
        "--config",
        metavar="path_to_config",
        help="Yaml file with logger configuration",
    ),
]
DebugOption = Annotated[
    int,
    typer.Option("-d", "--debug", count=True, help="Increase log verbosity"),
]


def parse_edge(value: str) -> Edge:
    """Parse TIME:SIGNAL into an Edge."""
    time_part, sep, signal_part = value.rpartition(EDGE_SEPARATOR)
    if not sep:
        raise typer.BadParameter(
            f"'{value}' is not in TIME{EDGE_SEPARATOR}SIGNAL form"
        )
    if not (
        re.fullmatch(INTEGER_PATTERN, time_part, flags=re.ASCII)
        and re.fullmatch(INTEGER_PATTERN, signal_part, flags=re.ASCII)
    ):
        raise typer.BadParameter(
            f"'{value}' must contain plain decimal integer time and signal"
        )
    return Edge(int(time_part), int(signal_part))


def _parse_edges(values: list[str]) -> list[Edge]:
    return [parse_edge(value) for value in values]


def _setup(debug: int, config: str | None) -> None:
    from edgeio.yaml import load_config

    setup_logging(debug_level=debug)
    if config is None:
        configure_logger(debug=debug)
        return
    try:
        config_parsed = load_config(config_file_path=Path(config).resolve())
    except (ConfigurationError, MarkedYAMLError) as err:
        _LOGGER.error("Failed to load config. %s Exiting.", err)
        raise typer.Exit(1)
    configure_logger(debug=debug, log_config=config_parsed.logger)


def _order(a: Edge, b: Edge) -> str:
    result = a.compare_to(b)
    if result < 0:
        return BEFORE
    if result > 0:
        return AFTER
    return EQUAL


@app.command()
def show(
    edges: Annotated[
        list[str],
        typer.Argument(
            metavar="EDGE...",
            help="Edges as TIME:SIGNAL, e.g. 1000:1. Use -- before negative times.",
        ),
    ],
    config: ConfigOption = None,
    debug: DebugOption = 0,
) -> None:
    """Print edges ordered by time with their sign and distance to the previous edge."""
    ordered = sorted(_parse_edges(edges))
    _setup(debug=debug, config=config)
    _LOGGER.debug("Showing %s edge(s)", len(ordered))
    previous: Edge | None = None
    for edge in ordered:
        diff = "-" if previous is None else str(edge.diff(previous))
        typer.echo(f"{edge} sign={edge.sign()} diff={diff}")
        previous = edge


@app.command()
def compare(
    first: Annotated[
        str, typer.Argument(metavar="A", help="First edge as TIME:SIGNAL")
    ],
    second: Annotated[
        str, typer.Argument(metavar="B", help="Second edge as TIME:SIGNAL")
    ],
    config: ConfigOption = None,
    debug: DebugOption = 0,
) -> None:
    """Compare two edges."""
    a = parse_edge(first)
    b = parse_edge(second)
    _setup(debug=debug, config=config)
    _LOGGER.debug("Comparing %s with %s", a, b)
    typer.echo(f"{a} is {_order(a, b)} {b}")
    typer.echo(f"diff A-B: {a.diff(b)}")
    typer.echo(f"diff B-A: {b.diff(a)}")
    typer.echo(f"same sign: {'yes' if a.same_sign(b) else 'no'}")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Inspect timestamped signal edges."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


def main() -> None:
    """Start edgecli with typer."""
    app()


if __name__ == "__main__":
    main()
