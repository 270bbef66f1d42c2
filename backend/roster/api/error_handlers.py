"""Error Handlers — map every failure to the roster's JSON error envelope.

Invariants:
    - RosterError → its own to_response(), logged at the level its severity names
    - Malformed requests (bad query/body shape) → 400 VALIDATION_ERROR, one
      detail per offending parameter, same envelope as field-rule failures
    - Anything else → 500 INTERNAL_ERROR, never leaks internal details

Design Decisions:
    - Log extras carry the acting username and target user id from ErrorContext
    - Request locations ("body", "query", "path") are stripped from field names:
      the UI shows the record field, not the transport slot
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from roster.core.errors import ErrorCategory, ErrorSeverity, RosterError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}

_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def register_error_handlers(app: FastAPI) -> None:
    """Install the roster, request-shape and catch-all handlers on app."""

    @app.exception_handler(RosterError)
    async def roster_error_handler(request: Request, exc: RosterError):
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "username": exc.context.username,
                "user_id": exc.context.user_id,
                "operation": exc.context.operation,
            },
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_shape_handler(request: Request, exc: RequestValidationError):
        details = request_error_details(exc)
        logger.warning(
            f"Rejected request on {request.url.path}: "
            f"{', '.join(d['field'] for d in details)}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Validation Error",
                    "category": ErrorCategory.VALIDATION.value,
                    "severity": ErrorSeverity.WARNING.value,
                    "details": details,
                },
            },
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def request_error_details(exc: RequestValidationError) -> list[dict]:
    """One {field, message} entry per pydantic error, transport prefix removed."""
    details = []
    for error in exc.errors():
        loc = [str(part) for part in error["loc"] if part not in _REQUEST_LOCATIONS]
        details.append({
            "field": ".".join(loc) or "request",
            "message": error["msg"],
        })
    return details
