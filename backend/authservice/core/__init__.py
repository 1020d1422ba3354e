"""
Core module - Failure taxonomy, collaborator contracts and security utilities.
"""
from authservice.core.errors import (
    ForbiddenFailure,
    InfrastructureFailure,
    LoginError,
    LoginStage,
    NotFoundFailure,
    ValidationFailure,
)
from authservice.core.interfaces import CredentialLookup, RequestValidator, TokenIssuer
from authservice.core.security import PasswordHasher, create_access_token, decode_token

__all__ = [
    "ForbiddenFailure",
    "InfrastructureFailure",
    "LoginError",
    "LoginStage",
    "NotFoundFailure",
    "ValidationFailure",
    "CredentialLookup",
    "RequestValidator",
    "TokenIssuer",
    "PasswordHasher",
    "create_access_token",
    "decode_token",
]
