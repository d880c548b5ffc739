"""API error types and exception handlers

Every error response has the shape {"error": "<message>", "code": "<CODE>"},
optionally with "details" for payload validation failures.
"""

import logging
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """Raised by routes to turn a use case Error into an HTTP response"""

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.error = error
        self.status_code = status_code
        super().__init__(error.message)


def create_error_response(
    status_code: int,
    message: str,
    code: str,
    details: Optional[list] = None,
) -> JSONResponse:
    content = {"error": message, "code": code}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.error.code} - {exc.error.reason}"
        )
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.error.code}")

    return create_error_response(
        status_code=exc.status_code,
        message=exc.error.message,
        code=exc.error.code,
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle malformed invoice payloads (wrong types, unparsable numbers)"""
    logger.warning(f"Validation error on {request.url.path}")

    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append({
            "field": field,
            "message": error["msg"],
            "type": error["type"],
        })

    return create_error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        message="Invalid invoice payload",
        code="VALIDATION_ERROR",
        details=errors,
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle anything unexpected without exposing internal details"""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)

    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="An unexpected error occurred",
        code="INTERNAL_SERVER_ERROR",
    )


def register_exception_handlers(app):
    """Register all API exception handlers with the FastAPI app"""
    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
