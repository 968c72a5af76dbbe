"""FastAPI Exception Handlers

Integrates the structured error types with FastAPI's exception handling.
Converts AppErrors and standard exceptions to proper HTTP responses.
"""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.logging import get_logger

from .builders import internal_error
from .types import AppError, ErrorCode, ErrorContext

log = get_logger("errors.handlers")


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Raise this (or a subclass) from code paths that report failure by
    exception rather than by return value.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)


def error_to_response(error: AppError) -> JSONResponse:
    """Convert AppError to FastAPI JSONResponse."""
    status_code = error.code.http_status

    log_method = log.warning if status_code < 500 else log.error
    log_method(
        "error_response",
        error_code=error.code.name,
        error_code_num=error.code.value,
        message=error.message,
        category=error.code.category,
        correlation_id=error.context.correlation_id,
        origin=error.context.origin,
        metadata=error.metadata,
    )

    return JSONResponse(
        status_code=status_code,
        content=error.to_dict(),
    )


async def app_error_handler(request: Request, exc: AppErrorException) -> JSONResponse:
    """Handle AppErrorException raised in route handlers."""
    error = exc.error.with_context(
        request_id=request.headers.get("X-Request-ID"),
        correlation_id=request.headers.get("X-Correlation-ID"),
    )
    return error_to_response(error)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle standard HTTP exceptions with structured error response."""
    status_code = exc.status_code
    code_map = {
        400: ErrorCode.E2000_VALIDATION_GENERIC,
        404: ErrorCode.E4010_NOT_FOUND,
        422: ErrorCode.E2000_VALIDATION_GENERIC,
    }

    code = code_map.get(status_code)
    if code is None:
        code = ErrorCode.E9001_UNEXPECTED_ERROR if status_code >= 500 else ErrorCode.E9000_INTERNAL_GENERIC

    error = AppError(
        code=code,
        message=str(exc.detail) if exc.detail else f"HTTP {status_code}",
        context=ErrorContext(
            correlation_id=request.headers.get("X-Correlation-ID", ""),
            origin="http",
        ),
    )
    response = error_to_response(error)
    # Keep the framework's status (405 etc.) rather than the code's mapping
    response.status_code = status_code
    return response


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Catch-all handler for unhandled exceptions.

    Converts to internal error and logs full traceback.
    """
    error = internal_error(origin="unhandled", cause=exc).with_context(
        correlation_id=request.headers.get("X-Correlation-ID", ""),
    )

    log.exception(
        "unhandled_exception",
        error_type=type(exc).__name__,
        error_message=str(exc),
        correlation_id=error.context.correlation_id,
    )

    return error_to_response(error)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on FastAPI app.

    Usage in main.py:
        app = FastAPI(...)
        register_error_handlers(app)
    """
    app.add_exception_handler(AppErrorException, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


def raise_error(error: AppError) -> None:
    """Raise AppError as exception.

    Usage:
        if entry is None:
            raise_error(not_found("Locale", code))
    """
    raise AppErrorException(error)
