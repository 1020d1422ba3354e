"""
JWT session token issuer.
"""
from datetime import timedelta
from typing import Any
from uuid import UUID

from authservice.core.security import create_access_token, decode_token


class JwtTokenIssuer:
    """Issues signed JWT access tokens for verified users."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 30,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expire_minutes)

    def issue(self, user_id: UUID) -> str:
        """Create a token whose subject is the user id."""
        return create_access_token(
            user_id,
            self.secret_key,
            algorithm=self.algorithm,
            expires_delta=self.expires_delta,
        )

    def decode(self, token: str) -> dict[str, Any]:
        """Decode a token issued by this issuer."""
        return decode_token(token, self.secret_key, algorithm=self.algorithm)
