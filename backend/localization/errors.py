"""Localization errors."""
from typing import Iterable

from core.errors import AppErrorException, unsupported_locale


class UnsupportedLocaleError(AppErrorException):
    """A locale code was required to be supported but is not configured."""

    def __init__(self, locale: str | None, supported: Iterable[str] = (), *, origin: str = "localization"):
        self.locale = locale
        super().__init__(unsupported_locale(locale, supported, origin=origin))
