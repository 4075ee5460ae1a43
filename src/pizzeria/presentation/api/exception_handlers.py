"""Centralized exception handlers for the FastAPI application.

Domain and auth exceptions are mapped to HTTP responses with a
consistent error format.

Error Response Format:
    {
        "message": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pizzeria.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
)
from pizzeria_auth import (
    AuthError,
    InvalidCredentialsError,
    InvalidIdentifierError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 409 Conflict - already exists
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

AUTH_ERROR_TO_STATUS: dict[type[AuthError], int] = {
    InvalidIdentifierError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    WeakPasswordError: status.HTTP_400_BAD_REQUEST,
}


def _get_status_for_exception(exc: DomainException) -> int:
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "message": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Log details, return only the safe message and code."""
        status_code = _get_status_for_exception(exc)

        server_error = status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR
        log = logger.error if server_error else logger.warning
        log(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        status_code = AUTH_ERROR_TO_STATUS.get(
            type(exc),
            status.HTTP_400_BAD_REQUEST,
        )
        logger.info(
            "Auth error on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code,
        )
        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for anything the handlers above did not claim."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
