"""
Credential data returned by the remote credential service.
"""
from typing import Generic, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class StoredCredential(BaseModel):
    """
    Stored credential material for one account.

    Owned by the credential service; the login flow only keeps this copy
    for the duration of one request.
    """
    model_config = ConfigDict(frozen=True)

    user_id: UUID = Field(..., description="User primary key")
    password_hash: str = Field(..., description="Salted password hash")
    salt: str = Field(..., description="Per-credential salt")
    login_data: str = Field(..., description="Login identifier the credential belongs to")


class OperationOutcome(BaseModel, Generic[T]):
    """
    Success/failure envelope of a remote call.

    A failed outcome has no body and at least one error; a successful one
    has a body and no errors.
    """
    success: bool = Field(..., description="Whether the remote operation succeeded")
    errors: list[str] = Field(default_factory=list, description="Ordered error messages")
    body: Optional[T] = Field(None, description="Payload of a successful operation")

    @model_validator(mode="after")
    def check_envelope(self) -> "OperationOutcome[T]":
        if self.success:
            if self.body is None:
                raise ValueError("successful outcome must carry a body")
            if self.errors:
                raise ValueError("successful outcome must not carry errors")
        else:
            if self.body is not None:
                raise ValueError("failed outcome must not carry a body")
            if not self.errors:
                raise ValueError("failed outcome must carry at least one error")
        return self

    @classmethod
    def ok(cls, body: T) -> "OperationOutcome[T]":
        """Build a successful outcome."""
        return cls(success=True, errors=[], body=body)

    @classmethod
    def fail(cls, *errors: str) -> "OperationOutcome[T]":
        """Build a failed outcome."""
        return cls(success=False, errors=list(errors), body=None)
