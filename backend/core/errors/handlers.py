"""FastAPI error handling.

Route handlers call ``raise_result`` on engine results; the registered
handlers render every failure, including request validation and unexpected
exceptions, with the same ``AppError.to_dict`` body.
"""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.logging import api_logger

from .builders import internal_error, validation_error
from .types import AppError, ErrorCode, Result

log = api_logger()

CORRELATION_HEADER = "X-Correlation-ID"


class AppErrorException(Exception):
    """Carries an AppError out of a route handler."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))


def raise_result(result: Result) -> None:
    """Raise AppErrorException if ``result`` is an Err."""
    if result.is_err():
        raise AppErrorException(result.unwrap_err())


def error_response(request: Request, error: AppError) -> JSONResponse:
    error = error.with_correlation_id(request.headers.get(CORRELATION_HEADER))
    status_code = error.code.http_status

    log_method = log.warning if status_code < 500 else log.error
    log_method(
        "error_response",
        status=status_code,
        error_code=error.code.name,
        message=error.message,
        origin=error.context.origin,
        metadata=error.metadata,
    )
    return JSONResponse(status_code=status_code, content=error.to_dict())


async def app_error_handler(request: Request, exc: AppErrorException) -> JSONResponse:
    return error_response(request, exc.error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes and wrong methods keep their own status code."""
    code = ErrorCode.E2000_VALIDATION_GENERIC if exc.status_code < 500 else ErrorCode.E9001_UNEXPECTED_ERROR
    error = AppError(code=code, message=str(exc.detail) or f"HTTP {exc.status_code}")
    error = error.with_correlation_id(request.headers.get(CORRELATION_HEADER))
    log.warning("http_exception", status=exc.status_code, message=error.message)
    return JSONResponse(status_code=exc.status_code, content=error.to_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [
        {
            "field": ".".join(str(loc) for loc in e.get("loc", ())),
            "message": e.get("msg", "Validation failed"),
        }
        for e in exc.errors()
    ]
    error = validation_error("Request validation failed", origin="request", errors=fields)
    return error_response(request, error.unwrap_err())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("unhandled_exception", error_type=type(exc).__name__)
    error = internal_error("An unexpected error occurred", origin="unhandled", cause=exc)
    return error_response(request, error.unwrap_err())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppErrorException, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
