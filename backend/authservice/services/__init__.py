"""
Service layer for the login flow.
"""
from authservice.services.auth_service import AuthService
from authservice.services.credential_client import CredentialServiceClient
from authservice.services.login_validator import LoginValidator
from authservice.services.token_issuer import JwtTokenIssuer

__all__ = [
    "AuthService",
    "CredentialServiceClient",
    "LoginValidator",
    "JwtTokenIssuer",
]
