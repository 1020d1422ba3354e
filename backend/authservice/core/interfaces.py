"""
Collaborator contracts for the login flow.

AuthService depends only on these structural types; the HTTP-backed
implementations live in authservice.services and tests substitute
in-memory fakes.
"""
from typing import Protocol
from uuid import UUID

from authservice.models.credential import OperationOutcome, StoredCredential
from authservice.schemas.auth import LoginRequest, ValidationOutcome


class RequestValidator(Protocol):
    """Structural check of a login request."""
    def validate(self, request: LoginRequest) -> ValidationOutcome: ...


class CredentialLookup(Protocol):
    """One request/response exchange with the credential store."""
    async def fetch(self, login_data: str) -> OperationOutcome[StoredCredential]: ...


class TokenIssuer(Protocol):
    """Mints a session token for a verified user."""
    def issue(self, user_id: UUID) -> str: ...
