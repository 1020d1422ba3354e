"""
Login failure taxonomy.

Every failure the login flow can end with is one of the four LoginError
subclasses below. Each is raised once, by the stage that detects it, and
reaches the caller unchanged.
"""
from enum import Enum
from typing import Optional


class LoginStage(str, Enum):
    """Stages of a single login attempt, in execution order."""
    VALIDATING = "validating"
    LOOKING_UP = "looking_up"
    VERIFYING = "verifying"
    ISSUING = "issuing"
    SUCCEEDED = "succeeded"


class LoginError(Exception):
    """Base exception for all login failures."""

    http_status: int = 500

    def __init__(self, message: str, stage: LoginStage):
        super().__init__(message)
        self.message = message
        self.stage = stage


class ValidationFailure(LoginError):
    """Login request failed the structural check."""

    http_status = 400

    def __init__(self, messages: list[str]):
        super().__init__("Login request is not valid", LoginStage.VALIDATING)
        self.messages = list(messages)


class NotFoundFailure(LoginError):
    """Credential service has no credentials for the login identifier."""

    http_status = 404

    def __init__(self, message: str = "Login not found"):
        super().__init__(message, LoginStage.LOOKING_UP)


class ForbiddenFailure(LoginError):
    """Submitted password does not match the stored hash."""

    http_status = 403

    def __init__(self):
        super().__init__("Credentials do not match", LoginStage.VERIFYING)


class InfrastructureFailure(LoginError):
    """A remote call (credential lookup or token issuance) failed."""

    http_status = 503

    def __init__(
        self,
        stage: LoginStage,
        message: str = "Authentication service temporarily unavailable",
        detail: Optional[str] = None,
    ):
        super().__init__(message, stage)
        # Internal only, never sent to the caller
        self.detail = detail
