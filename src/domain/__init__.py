"""Domain layer: errors and constants."""

from .errors import ErrorCodes, GatewayToolError

__all__ = [
    "GatewayToolError",
    "ErrorCodes",
]
