"""
Error handling utilities for the Code Analysis API.
"""

import logging
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class CodeAnalysisError(Exception):
    """Base exception for Code Analysis API errors."""

    def __init__(
        self,
        error: str = "Internal server error",
        message: Optional[str] = None,
        status_code: int = 500
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        super().__init__(message or error)

    def to_dict(self) -> dict:
        """Convert to the error envelope."""
        content = {
            "success": False,
            "error": self.error
        }
        if self.message is not None:
            content["message"] = self.message
        return content


class InvalidRequestError(CodeAnalysisError):
    """Invalid request payload."""

    def __init__(self, error: str = "Code is required", message: Optional[str] = None):
        super().__init__(error=error, message=message, status_code=400)


class ProviderError(CodeAnalysisError):
    """The generation provider failed. Not retried."""

    def __init__(self, error: str, message: str):
        super().__init__(error=error, message=message, status_code=500)


class RouteNotFoundError(CodeAnalysisError):
    """No route matches the request."""

    def __init__(self):
        super().__init__(error="Endpoint not found", status_code=404)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Request validation failed"

    first_error = errors[0]
    location = ".".join(str(loc) for loc in first_error.get("loc", []) if loc != "body")
    message = first_error.get("msg", "Validation error")
    return f"{location}: {message}" if location else message


async def error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global error handler for the API.

    Converts every exception into the JSON error envelope.
    """
    # Handle our custom exceptions
    if isinstance(exc, CodeAnalysisError):
        if exc.status_code >= 500:
            logger.error(f"{exc.error}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict()
        )

    # Handle malformed bodies and wrongly typed fields
    if isinstance(exc, RequestValidationError):
        error = InvalidRequestError(
            error="Invalid request body",
            message=_validation_message(exc)
        )
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    # Unknown paths and unsupported methods both count as unmatched routes
    if isinstance(exc, StarletteHTTPException):
        if exc.status_code in (404, 405):
            error = RouteNotFoundError()
        else:
            error = CodeAnalysisError(
                error="Request failed",
                message=str(exc.detail),
                status_code=exc.status_code
            )
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    # Handle unexpected errors
    logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc}", exc_info=exc)

    error = CodeAnalysisError(error="Internal server error", message=str(exc))
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict()
    )
