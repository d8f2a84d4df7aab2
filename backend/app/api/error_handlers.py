"""Error Handlers — global exception handlers for the Bloglist API.

Invariants:
    - BloglistError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level error details
      (covers malformed path ids as well as bad bodies)
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (BloglistError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py: main only wires, handlers live here
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import BloglistError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bloglist_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_bloglist_error_handler(app: FastAPI) -> None:
    """Register Bloglist domain/infrastructure error handler."""

    @app.exception_handler(BloglistError)
    async def bloglist_error_handler(request: Request, exc: BloglistError):
        """Handle all Bloglist domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"BloglistError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if exc.http_status == status.HTTP_401_UNAUTHORIZED else None
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
            headers=headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
