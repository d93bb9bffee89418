"""
Easiware integration package.
"""

from .client import EasiwareClient
from .models import (
    ApiRequest,
    AuthValidationResult,
    EasiwareAuth,
    HttpMethod,
    HttpResponse,
    WebhookPayload,
)
from .exceptions import (
    EasiwareConnectionError,
    EasiwareError,
    EasiwareTimeoutError,
    EasiwareWebhookError,
)

__all__ = [
    "EasiwareClient",
    "ApiRequest",
    "AuthValidationResult",
    "EasiwareAuth",
    "HttpMethod",
    "HttpResponse",
    "WebhookPayload",
    "EasiwareConnectionError",
    "EasiwareError",
    "EasiwareTimeoutError",
    "EasiwareWebhookError",
]
