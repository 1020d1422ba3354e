"""
Authentication service: the end-to-end login flow.
"""
import logging

from authservice.core.errors import (
    ForbiddenFailure,
    InfrastructureFailure,
    LoginError,
    LoginStage,
    NotFoundFailure,
    ValidationFailure,
)
from authservice.core.interfaces import CredentialLookup, RequestValidator, TokenIssuer
from authservice.core.security import PasswordHasher
from authservice.schemas.auth import LoginRequest, LoginResult

logger = logging.getLogger(__name__)


class AuthService:
    """Service for login operations."""

    def __init__(
        self,
        validator: RequestValidator,
        credentials: CredentialLookup,
        hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ):
        """Initialize with the login flow collaborators."""
        self.validator = validator
        self.credentials = credentials
        self.hasher = hasher
        self.token_issuer = token_issuer

    async def login(self, request: LoginRequest) -> LoginResult:
        """
        Authenticate a login identifier and password and issue a session token.

        Stages run in order (validate, look up, verify, issue), each at most
        once. The credential lookup is the only remote exchange.

        Args:
            request: Login request with login identifier and password

        Returns:
            LoginResult with the stored user ID and the issued token

        Raises:
            ValidationFailure: If the request fails the structural check
            NotFoundFailure: If the credential service has no such login
            ForbiddenFailure: If the password does not match
            InfrastructureFailure: If the lookup or token issuance call fails
        """
        # Validate before any remote call
        validation = self.validator.validate(request)
        if not validation.is_valid:
            logger.info(f"Login rejected at {LoginStage.VALIDATING.value}: {validation.errors}")
            raise ValidationFailure(validation.errors)

        # Fetch stored credentials
        try:
            outcome = await self.credentials.fetch(request.login_data)
        except LoginError:
            raise
        except Exception as e:
            logger.error(f"Credential lookup failed: {e!r}")
            raise InfrastructureFailure(LoginStage.LOOKING_UP, detail=repr(e)) from e

        if not outcome.success:
            message = outcome.errors[0] if outcome.errors else "Login not found"
            logger.warning(f"Login rejected at {LoginStage.LOOKING_UP.value}: {message}")
            raise NotFoundFailure(message)

        stored = outcome.body

        # Verify password with the salt from the lookup response
        if not self.hasher.verify(request, stored):
            logger.warning(
                f"Login rejected at {LoginStage.VERIFYING.value} for user {stored.user_id}"
            )
            raise ForbiddenFailure()

        # Issue session token
        try:
            token = self.token_issuer.issue(stored.user_id)
        except LoginError:
            raise
        except Exception as e:
            logger.error(f"Token issuance failed for user {stored.user_id}: {e!r}")
            raise InfrastructureFailure(LoginStage.ISSUING, detail=repr(e)) from e

        logger.info(f"Login {LoginStage.SUCCEEDED.value} for user {stored.user_id}")

        return LoginResult(user_id=stored.user_id, token=token)
