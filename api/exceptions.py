"""Exception handlers for the termweb FastAPI application.

Shell-level failures never reach this module: the dispatcher turns them into
``status: "error"`` command responses. The handlers here cover what is left,
malformed requests and genuine server faults, and convert them into
consistent JSON responses.
"""

import logging

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    """Handle request bodies that don't match the expected model.

    For example a POST /api/command without a ``command`` string.

    Args:
        request: The incoming request that triggered the error.
        exc: The RequestValidationError raised by FastAPI.

    Returns:
        JSONResponse with 422 status and the validation errors.
    """
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "detail": "The request data failed validation",
            "validation_errors": jsonable_encoder(exc.errors()),
        },
    )


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors raised inside handlers.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValidationError exception.

    Returns:
        JSONResponse with 422 status and the validation errors.
    """
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "detail": "The request data failed validation",
            "validation_errors": jsonable_encoder(exc.errors()),
        },
    )


async def runtime_error_handler(request: Request, exc: RuntimeError):
    """Handle RuntimeError exceptions.

    Raised, for instance, when a request arrives before the shell session
    has been initialized.

    Args:
        request: The incoming request that triggered the error.
        exc: The RuntimeError exception.

    Returns:
        JSONResponse with 500 status and the error message.
    """
    logger.error(f"Runtime error handling {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Runtime Error",
            "detail": str(exc),
            "type": "RuntimeError",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    Logs the full traceback and returns a generic message so internals are
    not exposed to clients.

    Args:
        request: The incoming request that triggered the error.
        exc: The exception that was raised.

    Returns:
        JSONResponse with 500 status and a generic error message.
    """
    logger.error(f"Unhandled exception: {exc!r}", exc_info=exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred",
            "type": type(exc).__name__,
        },
    )
