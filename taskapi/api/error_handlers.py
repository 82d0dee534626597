"""Error Handlers — global exception handlers producing the failure envelopes.

Invariants:
    - TaskApiError → {"message": "failure", "payload": {code, message, ...}} with its own status
    - RequestValidationError → 400 {"message": "validation failure", "payload": [violations]}
    - Exception (catch-all) → 500 failure envelope, never leaks internal details

Design Decisions:
    - Centralized here so routes carry no try/except boilerplate
    - Three-layer handler: domain (TaskApiError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskapi.core.errors import ErrorCategory, ErrorSeverity, TaskApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TaskApiError)
    async def task_api_error_handler(request: Request, exc: TaskApiError):
        """Handle all classified domain/infrastructure errors."""
        logger.error(
            f"TaskApiError: {exc.message}",
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
        """Handle request validation errors — the controller never ran."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_failure(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

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
                "message": "failure",
                "payload": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def build_validation_failure(exc: RequestValidationError) -> dict:
    """Build the validation-failure envelope, one entry per violated rule."""
    return {
        "message": "validation failure",
        "payload": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
