"""Error Handlers — global exception handlers for the Academia API.

Invariants:
    - AcademiaError -> structured JSON with code, message, severity; status from its category
    - RequestValidationError -> same envelope as PayloadValidationError, field-level details
    - Exception (catch-all) -> never leaks internal details

Design Decisions:
    - Three-layer handler: domain (AcademiaError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import (
    AcademiaError, ErrorSeverity, PayloadValidationError,
)
from app.schemas.validation import violations_from_errors

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AcademiaError)
    async def academia_error_handler(request: Request, exc: AcademiaError):
        """Handle all Academia domain/infrastructure errors."""
        level = (
            logging.ERROR if exc.http_status >= 500 else logging.WARNING
        )
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        error = PayloadValidationError(violations_from_errors(exc.errors()))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
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
