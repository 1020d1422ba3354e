"""
Backend-specific test fixtures.

In-memory stand-ins for the remote collaborators of the login flow. Each one
records its calls so tests can assert which stages ran.
"""

import sys
from pathlib import Path
from uuid import UUID

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))

from authservice.models.credential import OperationOutcome, StoredCredential  # noqa: E402


# =============================================================================
# Fake Collaborators
# =============================================================================

class InMemoryCredentialLookup:
    """Credential store backed by a dict keyed by login identifier."""

    def __init__(
        self,
        credentials: list[StoredCredential] | None = None,
        not_found_message: str = "User email not found",
        error: Exception | None = None,
    ):
        self.credentials = {c.login_data: c for c in credentials or []}
        self.not_found_message = not_found_message
        self.error = error
        self.calls: list[str] = []

    async def fetch(self, login_data: str) -> OperationOutcome[StoredCredential]:
        self.calls.append(login_data)
        if self.error is not None:
            raise self.error

        stored = self.credentials.get(login_data)
        if stored is None:
            return OperationOutcome[StoredCredential].fail(self.not_found_message)
        return OperationOutcome[StoredCredential].ok(stored)


class StubTokenIssuer:
    """Returns a fixed token for every user id."""

    def __init__(self, token: str = "Example_jwt", error: Exception | None = None):
        self.token = token
        self.error = error
        self.calls: list[UUID] = []

    def issue(self, user_id: UUID) -> str:
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        return self.token


# =============================================================================
# Login Flow Fixtures
# =============================================================================

@pytest.fixture
def credential_store(stored_credential) -> InMemoryCredentialLookup:
    """Credential store holding the example credential."""
    return InMemoryCredentialLookup([stored_credential])


@pytest.fixture
def token_issuer() -> StubTokenIssuer:
    """Token issuer stubbed to return 'Example_jwt'."""
    return StubTokenIssuer("Example_jwt")


@pytest.fixture
def validator():
    """LoginValidator with default rules."""
    from authservice.services.login_validator import LoginValidator

    return LoginValidator()


@pytest.fixture
def make_auth_service(validator, hasher):
    """
    Factory building an AuthService around the given fakes.

    Usage:
        service = make_auth_service(credential_store, token_issuer)
    """
    from authservice.services.auth_service import AuthService

    def _make(credentials, issuer) -> AuthService:
        return AuthService(
            validator=validator,
            credentials=credentials,
            hasher=hasher,
            token_issuer=issuer,
        )

    return _make


@pytest.fixture
def auth_service(make_auth_service, credential_store, token_issuer):
    """AuthService wired to the example credential store and stub issuer."""
    return make_auth_service(credential_store, token_issuer)


@pytest.fixture
def fakes():
    """Expose the fake classes for tests that need custom instances."""
    class Fakes:
        CredentialLookup = InMemoryCredentialLookup
        TokenIssuer = StubTokenIssuer

    return Fakes
