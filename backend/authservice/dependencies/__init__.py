"""
Dependencies for dependency injection in routes.
"""
from authservice.dependencies.auth import (
    build_token_issuer,
    build_validator,
    get_auth_service,
)

__all__ = [
    "build_token_issuer",
    "build_validator",
    "get_auth_service",
]
