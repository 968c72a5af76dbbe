"""Structured Error Handling

Key components:
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction
- AppErrorException + FastAPI handlers: HTTP boundary

Usage:
    from core.errors import raise_error, not_found

    entry = registry.get_supported_locale(code)
    if entry is None:
        raise_error(not_found("Locale", code, origin="api.locales"))
"""
from .types import (
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    unsupported_locale,
    not_found,
    internal_error,
)

from .handlers import (
    AppErrorException,
    register_error_handlers,
    error_to_response,
    raise_error,
)

__all__ = [
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "unsupported_locale",
    "not_found",
    "internal_error",
    "AppErrorException",
    "register_error_handlers",
    "error_to_response",
    "raise_error",
]
