"""
Mapping of application exceptions to HTTP responses.

Routes that let a repository call fail get a JSON body with a stable
`error` field, never a traceback.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    FoodOrderError,
    NotFoundError,
    ValidationError,
)
from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)


def status_for(exc: FoodOrderError) -> int:
    """HTTP status for an application exception."""
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, AuthorizationError):
        return status.HTTP_403_FORBIDDEN
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(exc: FoodOrderError) -> JSONResponse:
    """Render an application exception as a JSON error response."""
    body = ErrorResponse.from_exception(exc)
    return JSONResponse(
        content=body.model_dump(exclude_none=True),
        status_code=status_for(exc),
    )


async def handle_app_error(request: Request, exc: FoodOrderError) -> JSONResponse:
    """Exception handler registered on the application."""
    response = error_response(exc)
    if response.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message} {exc.details}")
    return response
