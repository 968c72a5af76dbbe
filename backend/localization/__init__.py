"""Domain-based localization.

Maps request domains to locales and rewrites URLs onto another locale's domain.
"""
from .types import Direction, LocaleConfig, LocaleEntry
from .errors import UnsupportedLocaleError
from .registry import LocaleRegistry
from .middleware import DomainLocaleMiddleware

__all__ = [
    "Direction",
    "LocaleConfig",
    "LocaleEntry",
    "UnsupportedLocaleError",
    "LocaleRegistry",
    "DomainLocaleMiddleware",
]
