"""
HTTP client for the remote credential service.

The credential service answers POST /credentials/lookup with an
OperationOutcome envelope:

    {"success": true, "errors": [], "body": {"user_id": ..., "password_hash": ...,
                                            "salt": ..., "login_data": ...}}
    {"success": false, "errors": ["User email not found"], "body": null}
"""
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from authservice.config import get_settings
from authservice.core.errors import InfrastructureFailure, LoginStage
from authservice.models.credential import OperationOutcome, StoredCredential

logger = logging.getLogger(__name__)

LOOKUP_PATH = "/credentials/lookup"
HEALTH_PATH = "/health"


class CredentialServiceClient:
    """
    Async client for the credential service.

    Each fetch() is exactly one request/response exchange; nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client with connection pooling."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def fetch(self, login_data: str) -> OperationOutcome[StoredCredential]:
        """
        Fetch stored credentials for a login identifier.

        Args:
            login_data: Login identifier to look up

        Returns:
            Successful outcome with the StoredCredential, or failed outcome
            with the service's error messages

        Raises:
            InfrastructureFailure: On transport errors, timeouts, non-2xx
                statuses or a malformed response envelope
        """
        client = await self._get_client()

        try:
            response = await client.post(LOOKUP_PATH, json={"login_data": login_data})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Credential service returned HTTP {e.response.status_code}")
            raise InfrastructureFailure(
                LoginStage.LOOKING_UP,
                detail=f"HTTP {e.response.status_code} from credential service",
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Credential service request failed: {e!r}")
            raise InfrastructureFailure(LoginStage.LOOKING_UP, detail=repr(e)) from e

        try:
            return OperationOutcome[StoredCredential].model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Malformed credential service response: {e}")
            raise InfrastructureFailure(
                LoginStage.LOOKING_UP,
                detail="malformed credential service response",
            ) from e

    async def ping(self) -> bool:
        """Return True if the credential service health endpoint answers 2xx."""
        client = await self._get_client()
        response = await client.get(HEALTH_PATH)
        return response.is_success


# Process-wide client instance
_credential_client: Optional[CredentialServiceClient] = None


async def get_credential_client() -> CredentialServiceClient:
    """Get or create the credential service client."""
    global _credential_client
    if _credential_client is None:
        settings = get_settings()
        _credential_client = CredentialServiceClient(
            settings.credential_service_url,
            timeout=settings.credential_service_timeout_seconds,
        )
    return _credential_client


async def close_credential_client() -> None:
    """Close the credential service client."""
    global _credential_client
    if _credential_client is not None:
        await _credential_client.close()
        _credential_client = None
