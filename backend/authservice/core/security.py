"""
Security utilities for password hashing and JWT token management.
"""
import hmac
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from jose import jwt
from passlib.hash import pbkdf2_sha512

from authservice.models.credential import StoredCredential
from authservice.schemas.auth import LoginRequest


class PasswordHasher:
    """
    Deterministic salted password hashing.

    The stored per-credential salt is the PBKDF2 salt; login identifier,
    password and the service-wide pepper form the secret. Same inputs always
    give the same hash string.
    """

    def __init__(self, rounds: int = 29000, pepper: str = ""):
        self.rounds = rounds
        self.pepper = pepper

    def hash(self, login_data: str, salt: str, password: str) -> str:
        """
        Hash a password for a login identifier with the given salt.

        Args:
            login_data: Login identifier the password belongs to
            salt: Per-credential salt from the credential store
            password: Plain text password

        Returns:
            PBKDF2-SHA512 hash string
        """
        handler = pbkdf2_sha512.using(salt=salt.encode("utf-8"), rounds=self.rounds)
        return handler.hash(f"{login_data}{password}{self.pepper}")

    def verify(self, request: LoginRequest, stored: StoredCredential) -> bool:
        """
        Check a submitted password against stored credentials.

        The hash is recomputed with the salt from the stored credential and
        compared in constant time.

        Returns:
            True if password matches, False otherwise
        """
        computed = self.hash(request.login_data, stored.salt, request.password)
        return hmac.compare_digest(
            computed.encode("utf-8"),
            stored.password_hash.encode("utf-8"),
        )


def create_access_token(
    user_id: UUID,
    secret_key: str,
    algorithm: str = "HS256",
    expires_delta: timedelta = timedelta(minutes=30),
) -> str:
    """
    Create a JWT access token.

    Args:
        user_id: Unique user identifier
        secret_key: Signing key
        algorithm: JWS algorithm
        expires_delta: Token lifetime

    Returns:
        Encoded JWT token string
    """
    now = datetime.now(timezone.utc)

    payload = {
        "sub": str(user_id),
        "exp": now + expires_delta,
        "iat": now,
    }

    return jwt.encode(payload, secret_key, algorithm=algorithm)


def decode_token(token: str, secret_key: str, algorithm: str = "HS256") -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Returns:
        Decoded payload dictionary with keys: sub, exp, iat

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(token, secret_key, algorithms=[algorithm])

