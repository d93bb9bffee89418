"""
Easiware data models.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import BaseModel, ConfigDict, Field

from easiware_piece.core.config import settings


DEFAULT_APP_URL = "https://api.easiware.com"


class HttpMethod(str, Enum):
    """HTTP methods accepted by the Easiware API."""
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"


class EasiwareAuth(BaseModel):
    """Credentials for one configured Easiware connection."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Aliases match the field names of the host credential form
    app_url: str = Field(DEFAULT_APP_URL, alias="appUrl")
    api_key: str = Field(alias="apiKey")

    @classmethod
    def from_settings(cls) -> "EasiwareAuth":
        """Build credentials from the environment settings."""
        return cls(app_url=settings.EASIWARE_API_URL, api_key=settings.EASIWARE_API_KEY)

    @property
    def base_url(self) -> str:
        """API root with a single trailing slash removed."""
        return normalize_base_url(self.app_url)

    def headers(self) -> Dict[str, str]:
        """Headers sent with every request."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }


class ApiRequest(BaseModel):
    """One outgoing request, built from action props before dispatch."""
    method: HttpMethod
    path: str
    params: List[Tuple[str, str]] = Field(default_factory=list)
    body: Optional[Any] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    # None means every status is handed back as the raw response
    expected_status: Optional[int] = 200


class HttpResponse(BaseModel):
    """Response returned to the host when the status is not the expected one."""
    status: int
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Any = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "HttpResponse":
        try:
            body = response.json()
        except ValueError:
            body = response.text

        return cls(status=response.status_code, headers=dict(response.headers), body=body)


class WebhookPayload(BaseModel):
    """Inbound webhook delivery as handed over by the host."""
    body: Any = None
    headers: Dict[str, str] = Field(default_factory=dict)
    query_params: Dict[str, str] = Field(default_factory=dict)


class AuthValidationResult(BaseModel):
    """Outcome of probing a set of credentials."""
    valid: bool
    error: Optional[str] = None


def normalize_base_url(url: str) -> str:
    """Strip one trailing slash. Repeated trailing slashes are left as they are."""
    if url.endswith("/"):
        return url[:-1]
    return url
