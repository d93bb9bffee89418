"""
Custom exception classes for the piece host contract.
"""

from typing import Any, Dict, Optional


class EasiwarePieceException(Exception):
    """Base exception class for the Easiware piece."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class PropValidationError(EasiwarePieceException):
    """Exception raised when supplied props do not match an action or trigger schema."""

    def __init__(self, message: str, prop: Optional[str] = None, **kwargs):
        self.prop = prop
        super().__init__(message, error_code="VALIDATION_ERROR", **kwargs)


class NotFoundError(EasiwarePieceException):
    """Exception raised when an action or trigger is not registered on the piece."""

    def __init__(self, message: str = "Resource not found", **kwargs):
        super().__init__(message, error_code="NOT_FOUND", **kwargs)
