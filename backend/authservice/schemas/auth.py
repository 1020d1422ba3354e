"""
Authentication request/response schemas.
"""
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LoginRequest(BaseModel):
    """
    Login request body.

    Shape rules (non-empty, lengths, pattern) are checked by LoginValidator,
    not here, so a malformed request still reaches the validator.
    """
    model_config = ConfigDict(frozen=True)

    login_data: str = Field(..., description="Login identifier (username or email)")
    password: str = Field(..., description="Plaintext password")


class LoginResult(BaseModel):
    """Successful login: user id and session token."""
    user_id: UUID = Field(..., description="Authenticated user ID")
    token: str = Field(..., description="Session token")


class ValidationOutcome(BaseModel):
    """Result of the structural check of a login request."""
    is_valid: bool = Field(..., description="Whether all rules passed")
    errors: list[str] = Field(default_factory=list, description="Field-level failure messages")


class ValidationRules(BaseModel):
    """Configurable bounds for login request fields."""
    login_min_length: int = Field(default=1, ge=1)
    login_max_length: int = Field(default=320, ge=1)
    login_pattern: str | None = Field(default=None, description="Regex the login must match")
    password_min_length: int = Field(default=1, ge=1)
    password_max_length: int = Field(default=128, ge=1)

    @model_validator(mode="after")
    def check_bounds(self) -> "ValidationRules":
        if self.login_min_length > self.login_max_length:
            raise ValueError("login_min_length exceeds login_max_length")
        if self.password_min_length > self.password_max_length:
            raise ValueError("password_min_length exceeds password_max_length")
        return self


class ErrorDetail(BaseModel):
    """Error body returned by the HTTP layer."""
    detail: str | list[str] = Field(..., description="Error message or messages")
