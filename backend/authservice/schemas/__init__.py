"""
Request and response schemas for the login flow.
"""
from authservice.schemas.auth import (
    ErrorDetail,
    LoginRequest,
    LoginResult,
    ValidationOutcome,
    ValidationRules,
)

__all__ = [
    "ErrorDetail",
    "LoginRequest",
    "LoginResult",
    "ValidationOutcome",
    "ValidationRules",
]
