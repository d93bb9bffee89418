"""
Shared utilities.
"""

from .exceptions import EasiwarePieceException, NotFoundError, PropValidationError

__all__ = [
    "EasiwarePieceException",
    "NotFoundError",
    "PropValidationError",
]
