"""EdgeIO Errors"""


class EdgeIOError(Exception):
    """Base EdgeIO exception."""


class EdgeContractError(EdgeIOError, TypeError):
    """Edge argument or operand of the wrong type."""


class ConfigurationError(EdgeIOError):
    """Configuration exception."""
