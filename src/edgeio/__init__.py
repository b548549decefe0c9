"""Timestamped signal edges."""

from edgeio.edge import Edge
from edgeio.exceptions import ConfigurationError, EdgeContractError, EdgeIOError
from edgeio.version import __version__

__all__ = [
    "Edge",
    "EdgeIOError",
    "EdgeContractError",
    "ConfigurationError",
    "__version__",
]
