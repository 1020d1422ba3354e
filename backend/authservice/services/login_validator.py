"""
Structural validation of login requests.
"""
from pydantic import Field, ValidationError, create_model, field_validator

from authservice.schemas.auth import LoginRequest, ValidationOutcome, ValidationRules


def _not_blank(cls, value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


class LoginValidator:
    """
    Checks a login request against configurable field rules.

    Rules are compiled once into a pydantic model; validation itself has no
    side effects and makes no remote calls.
    """

    def __init__(self, rules: ValidationRules | None = None):
        self.rules = rules or ValidationRules()
        self._model = create_model(
            "LoginRequestRules",
            login_data=(
                str,
                Field(
                    min_length=self.rules.login_min_length,
                    max_length=self.rules.login_max_length,
                    pattern=self.rules.login_pattern,
                ),
            ),
            password=(
                str,
                Field(
                    min_length=self.rules.password_min_length,
                    max_length=self.rules.password_max_length,
                ),
            ),
            __validators__={
                "not_blank": field_validator("login_data", "password")(_not_blank),
            },
        )

    def validate(self, request: LoginRequest) -> ValidationOutcome:
        """
        Validate a login request.

        Args:
            request: Login request to check

        Returns:
            ValidationOutcome with one message per failed rule
        """
        try:
            self._model.model_validate(request.model_dump())
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            return ValidationOutcome(is_valid=False, errors=errors)

        return ValidationOutcome(is_valid=True, errors=[])
