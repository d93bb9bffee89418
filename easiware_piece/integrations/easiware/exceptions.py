"""
Easiware-specific exception classes.

Only transport failures and webhook registration failures are raised. A
non-success status on an action is returned to the host as a response.
"""

from typing import Any, Optional


class EasiwareError(Exception):
    """Custom exception for Easiware API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Optional[Any] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class EasiwareTimeoutError(EasiwareError):
    """Error raised when an Easiware request times out."""

    def __init__(self, message: str, timeout: Optional[float] = None, **kwargs):
        super().__init__(message, 408, **kwargs)
        self.timeout = timeout


class EasiwareConnectionError(EasiwareError):
    """Error raised when the Easiware API cannot be reached."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, 503, **kwargs)


class EasiwareWebhookError(EasiwareError):
    """Error raised when a webhook subscription cannot be created or detached."""

    def __init__(self, message: str, trigger_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.trigger_name = trigger_name
