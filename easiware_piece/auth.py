"""
Easiware credential form and validation probe.
"""

from typing import Optional

import httpx
from loguru import logger

from easiware_piece.framework import CustomAuth, Property
from easiware_piece.integrations.easiware import (
    ApiRequest,
    AuthValidationResult,
    EasiwareAuth,
    EasiwareClient,
    EasiwareError,
    HttpMethod,
)
from easiware_piece.integrations.easiware.models import DEFAULT_APP_URL


INVALID_CREDENTIALS_MESSAGE = "Please provide correct API URL and API key."

AUTH_DESCRIPTION = """
  **Enable API key:**
  1. Login to your easiware account
  2. On the Bottom-left, click on Parameters
  3. Select 'General'
  4. Select 'API key management'
  5. On the right panel, click on '+' Generate a new key
  6. Enter the 'API key Label' to name the key
  7. Click on 'Generate a new key'
  8. Copy the API key and paste it below.

  **APP URL:**
  - The API URL for easiware, for example the cloud is at https://api.easiware.com
"""


async def validate_auth(auth: EasiwareAuth,
                        transport: Optional[httpx.AsyncBaseTransport] = None) -> AuthValidationResult:
    """
    Probe ``GET /v1/auth/info`` with the given credentials.

    Network failures and rejected keys both come back as the same invalid
    result; this never raises.
    """
    try:
        async with EasiwareClient(auth, transport=transport) as client:
            response = await client.send(ApiRequest(method=HttpMethod.GET, path="/v1/auth/info"))
    except EasiwareError as e:
        logger.warning(f"Easiware credential check failed: {e}")
        return AuthValidationResult(valid=False, error=INVALID_CREDENTIALS_MESSAGE)

    if not response.is_success:
        logger.warning(f"Easiware credential check rejected with status {response.status}")
        return AuthValidationResult(valid=False, error=INVALID_CREDENTIALS_MESSAGE)

    return AuthValidationResult(valid=True)


easiware_auth = CustomAuth(
    description=AUTH_DESCRIPTION,
    required=True,
    props={
        "appUrl": Property.short_text(
            "Api URL",
            description="Enter the api URL",
            required=True,
            default_value=DEFAULT_APP_URL,
        ),
        "apiKey": Property.short_text(
            "API Key",
            description="Enter the API key",
            required=True,
        ),
    },
    validate=validate_auth,
)
