"""
Easiware API client for making REST API calls.
"""

from typing import Optional

import httpx
from loguru import logger

from easiware_piece.core.config import settings
from .models import ApiRequest, EasiwareAuth, HttpResponse
from .exceptions import (
    EasiwareConnectionError,
    EasiwareError,
    EasiwareTimeoutError,
)


class EasiwareClient:
    """Client for interacting with the Easiware REST API."""

    def __init__(self,
                 auth: Optional[EasiwareAuth] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 timeout: Optional[float] = None):
        """Initialize the Easiware client."""
        self.auth = auth or EasiwareAuth.from_settings()

        # Validate configuration
        if not self.auth.app_url:
            raise EasiwareError("API URL is required")
        if not self.auth.api_key:
            raise EasiwareError("API key is required")

        self.base_url = self.auth.base_url
        self.timeout = timeout if timeout is not None else settings.EASIWARE_HTTP_TIMEOUT

        # HTTP client configuration
        headers = self.auth.headers()
        headers["User-Agent"] = settings.EASIWARE_USER_AGENT
        self.client = httpx.AsyncClient(
            headers=headers,
            timeout=self.timeout,
            transport=transport,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    def url_for(self, path: str) -> str:
        """Resolve an API path against the base URL. Absolute URLs pass through."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def send(self, request: ApiRequest) -> HttpResponse:
        """
        Send one request and wrap whatever the API answered.

        Args:
            request: Request built from action props

        Returns:
            HttpResponse with status, headers and parsed body

        Raises:
            EasiwareTimeoutError: The request timed out
            EasiwareConnectionError: The API could not be reached
            EasiwareError: A malformed URL or any other transport failure
        """
        method = request.method.value
        url = self.url_for(request.path)

        try:
            logger.debug(f"Making {method} request to {url}")
            response = await self.client.request(
                method,
                url,
                params=request.params or None,
                json=request.body,
                headers=request.headers or None,
            )
        except httpx.TimeoutException as e:
            logger.error(f"Timeout during {method} {url}: {e}")
            raise EasiwareTimeoutError(f"Request timeout: {str(e)}", timeout=self.timeout) from e
        except httpx.ConnectError as e:
            logger.error(f"Connection error during {method} {url}: {e}")
            raise EasiwareConnectionError(f"Connection failed: {str(e)}") from e
        except httpx.RequestError as e:
            logger.error(f"Network error during {method} {url}: {e}")
            raise EasiwareError(f"Network error: {str(e)}") from e
        except httpx.InvalidURL as e:
            logger.error(f"Invalid URL for {method} request: {e}")
            raise EasiwareError(f"Invalid URL: {str(e)}") from e

        logger.debug(f"{method} {url} answered {response.status_code}")
        return HttpResponse.from_httpx(response)

    async def request(self, method: str, path: str, **kwargs) -> HttpResponse:
        """Shortcut for ad-hoc calls: ``await client.request("GET", "/v1/status")``."""
        return await self.send(ApiRequest(method=method, path=path, expected_status=None, **kwargs))
