"""Error Handlers — global exception handlers for the Users API.

Invariants:
    - InvalidUserIdError → 400 plain text "Invalid user ID"
    - PerqaraError → {"message": ...} with the error's status
    - NotFoundError → 500 unless settings.not_found_as_404 is on
    - RequestValidationError → 400 {"message": ...}; malformed JSON reported as a
      bind error, rule violations as field errors
    - Exception (catch-all) → 500 {"message": "Internal Server Error"}, process keeps running

Design Decisions:
    - Three-layer handler: domain (PerqaraError), validation (Pydantic), catch-all (Exception)
    - Settings read per request so the not-found switch can change without a rebuild
    - Log level follows the error severity; category and code go into the record
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from perqara_api.config import get_settings
from perqara_api.core.errors import (
    ErrorSeverity, FieldValidationError, InputParseError, InvalidUserIdError,
    NotFoundError, PerqaraError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_perqara_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_perqara_error_handler(app: FastAPI) -> None:
    """Register domain/data-access error handler."""

    @app.exception_handler(PerqaraError)
    async def perqara_error_handler(request: Request, exc: PerqaraError):
        """Handle all Users API domain and store errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "error_category": exc.category.value,
                "path": request.url.path,
            },
        )
        if isinstance(exc, InvalidUserIdError):
            return PlainTextResponse(
                exc.message, status_code=status.HTTP_400_BAD_REQUEST,
            )
        return JSONResponse(
            status_code=_status_for(exc), content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle body bind/validation errors."""
        error = build_input_error(exc.errors())
        logger.warning(
            f"Validation error on {request.url.path}: {error.message}",
            extra={
                "error_code": error.code,
                "error_category": error.category.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal Server Error"},
        )


def _status_for(exc: PerqaraError) -> int:
    if isinstance(exc, NotFoundError) and get_settings().not_found_as_404:
        return status.HTTP_404_NOT_FOUND
    return exc.http_status


def build_input_error(errors) -> InputParseError | FieldValidationError:
    """Turn pydantic error dicts into a single 400-level domain error."""
    if any(e["type"] == "json_invalid" for e in errors):
        detail = next(e for e in errors if e["type"] == "json_invalid")
        reason = (detail.get("ctx") or {}).get("error")
        message = detail["msg"] + (f": {reason}" if reason else "")
        return InputParseError(message)
    fields = [_field_name(e["loc"]) for e in errors]
    message = "; ".join(
        f"{field}: {e['msg']}" for field, e in zip(fields, errors)
    )
    return FieldValidationError(message, fields)


def _field_name(loc) -> str:
    """("body", "name") → "name"; a bare ("body",) stays "body"."""
    parts = loc[1:] if len(loc) > 1 and loc[0] == "body" else loc
    return ".".join(str(p) for p in parts)
