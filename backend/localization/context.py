"""Request-scoped current locale.

Each asyncio task (and so each request) sees its own value, so binding a
locale in one request never leaks into another.
"""
from contextvars import ContextVar, Token

_current_locale: ContextVar[str | None] = ContextVar("current_locale", default=None)


def get_bound_locale() -> str | None:
    """Locale bound for this unit of work, or None if nothing was bound."""
    return _current_locale.get()


def bind_locale(code: str) -> Token:
    """Bind `code` as the current locale. Returns a token for `reset_locale`."""
    return _current_locale.set(code)


def reset_locale(token: Token) -> None:
    """Restore the value that was current before the matching `bind_locale`."""
    _current_locale.reset(token)
