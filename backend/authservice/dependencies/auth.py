"""
Dependency wiring for the login flow.
"""
from typing import Annotated

from fastapi import Depends

from authservice.config import Settings, get_settings
from authservice.core.security import PasswordHasher
from authservice.schemas.auth import ValidationRules
from authservice.services.auth_service import AuthService
from authservice.services.credential_client import (
    CredentialServiceClient,
    get_credential_client,
)
from authservice.services.login_validator import LoginValidator
from authservice.services.token_issuer import JwtTokenIssuer


def build_validator(settings: Settings) -> LoginValidator:
    """Build a LoginValidator from configured field rules."""
    return LoginValidator(
        ValidationRules(
            login_min_length=settings.login_min_length,
            login_max_length=settings.login_max_length,
            login_pattern=settings.login_pattern,
            password_min_length=settings.password_min_length,
            password_max_length=settings.password_max_length,
        )
    )


def build_token_issuer(settings: Settings) -> JwtTokenIssuer:
    """Build the JWT issuer from configured signing settings."""
    return JwtTokenIssuer(
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.jwt_access_token_expire_minutes,
    )


async def get_auth_service(
    settings: Annotated[Settings, Depends(get_settings)],
    credentials: Annotated[CredentialServiceClient, Depends(get_credential_client)],
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(
        validator=build_validator(settings),
        credentials=credentials,
        hasher=PasswordHasher(
            rounds=settings.password_hash_rounds,
            pepper=settings.password_pepper,
        ),
        token_issuer=build_token_issuer(settings),
    )
