"""
Exception handlers.

Every failure leaves the API as ``{"error": "<message>"}``. Typed domain
errors carry their own status code and a machine-readable ``code``;
anything unexpected is logged in full and reported as a bare 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import StandoffError
from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, code: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def describe_validation_errors(exc: RequestValidationError) -> str:
    """
    Summarize request validation failures in one line.

    Missing fields are listed together; other problems are reported with
    the offending field name.
    """
    missing: list[str] = []
    invalid: list[str] = []

    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc)
        if err.get("type") == "missing" or (
            err.get("type") == "string_too_short" and err.get("ctx", {}).get("min_length") == 1
        ):
            missing.append(field or "body")
        elif field:
            invalid.append(f"{field}: {err.get('msg')}")
        else:
            invalid.append(str(err.get("msg")))

    parts = []
    if missing:
        parts.append("Missing required fields: " + ", ".join(missing))
    if invalid:
        parts.append("Invalid fields: " + "; ".join(invalid))
    return ". ".join(parts) or "Invalid request"


async def standoff_error_handler(request: Request, exc: StandoffError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
        return _error_response(exc.status_code, "Internal server error")
    return _error_response(exc.status_code, exc.message, exc.code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_errors(exc)
    logger.info(f"{request.method} {request.url.path} rejected: {message}")
    return _error_response(400, message, "VALIDATION_ERROR")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on an application instance."""
    app.add_exception_handler(StandoffError, standoff_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
