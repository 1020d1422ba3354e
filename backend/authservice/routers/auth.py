"""
Authentication router for login.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from authservice.config import Settings, get_settings
from authservice.core.errors import (
    ForbiddenFailure,
    InfrastructureFailure,
    LoginError,
    NotFoundFailure,
    ValidationFailure,
)
from authservice.dependencies.auth import get_auth_service
from authservice.schemas.auth import ErrorDetail, LoginRequest, LoginResult
from authservice.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])

INVALID_CREDENTIALS = "Invalid login or password"


def to_http_exception(error: LoginError, expose_failure_kind: bool) -> HTTPException:
    """
    Map a login failure to an HTTP error.

    Unknown login and wrong password share one 401 response unless
    expose_failure_kind is set, in which case they become 404 and 403.
    """
    if isinstance(error, ValidationFailure):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.messages,
        )

    if isinstance(error, (NotFoundFailure, ForbiddenFailure)):
        if expose_failure_kind:
            return HTTPException(status_code=error.http_status, detail=error.message)
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
            headers={"WWW-Authenticate": "Bearer"},
        )

    if isinstance(error, InfrastructureFailure):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=error.message,
        )

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Login failed",
    )


@router.post(
    "/login",
    response_model=LoginResult,
    summary="Login and get session token",
    responses={
        400: {"model": ErrorDetail},
        401: {"model": ErrorDetail},
        503: {"model": ErrorDetail},
    },
)
async def login(
    body: LoginRequest,
    settings: Annotated[Settings, Depends(get_settings)],
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with login identifier and password to receive a session token.

    - **login_data**: Username or email
    - **password**: Account password
    """
    try:
        return await auth_service.login(body)
    except LoginError as e:
        raise to_http_exception(e, settings.expose_auth_failure_kind) from e
