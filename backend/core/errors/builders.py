"""Error Builders

Ergonomic constructors for the errors this service raises.
"""
from __future__ import annotations

from typing import Iterable

from .types import AppError, ErrorCode, ErrorContext


def _ctx(origin: str) -> ErrorContext:
    return ErrorContext(origin=origin)


def unsupported_locale(
    locale: str | None,
    supported: Iterable[str] = (),
    *,
    origin: str = "",
) -> AppError:
    """Locale code missing from the supported locales whitelist."""
    return AppError(
        code=ErrorCode.E2030_UNSUPPORTED_LOCALE,
        message=f"The locale [{locale}] is not in the supported locales array.",
        context=_ctx(origin),
        metadata={"locale": locale, "supported": list(supported)},
    )


def not_found(
    entity: str,
    identifier: object = None,
    *,
    origin: str = "",
) -> AppError:
    """Requested entity does not exist."""
    message = f"{entity} not found" if identifier is None else f"{entity} '{identifier}' not found"
    return AppError(
        code=ErrorCode.E4010_NOT_FOUND,
        message=message,
        context=_ctx(origin),
        metadata={"entity": entity, "id": None if identifier is None else str(identifier)},
    )


def internal_error(message: str = "An unexpected error occurred", *, origin: str = "", cause: Exception | None = None) -> AppError:
    return AppError(
        code=ErrorCode.E9001_UNEXPECTED_ERROR,
        message=message,
        context=_ctx(origin),
        cause=cause,
    )
