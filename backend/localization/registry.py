"""Locale registry - supported locales, TLD mapping and localized URLs."""
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from core.logging import locale_logger

from .context import bind_locale, get_bound_locale, reset_locale
from .errors import UnsupportedLocaleError
from .types import LocaleEntry

log = locale_logger()


class LocaleRegistry:
    """Authoritative set of supported locales.

    Built once from configuration and read-only afterwards. The current
    locale is not stored here; it lives in request-scoped context
    (see `localization.context`).
    """

    def __init__(
        self,
        default_locale: str,
        supported_locales: Mapping[str, LocaleEntry | Mapping[str, str]],
    ):
        entries = {
            code: entry if isinstance(entry, LocaleEntry) else LocaleEntry.from_dict(entry)
            for code, entry in supported_locales.items()
        }
        self._supported_locales: Mapping[str, LocaleEntry] = MappingProxyType(entries)
        self._default_locale = default_locale

        self._validate_locale(default_locale)
        self._warn_duplicate_tlds()

        log.info(
            "locale_registry_loaded",
            default_locale=default_locale,
            locales=list(entries),
        )

    @classmethod
    def from_settings(cls, settings: Any) -> "LocaleRegistry":
        """Build a registry from application settings."""
        return cls(
            settings.DEFAULT_LOCALE,
            {code: LocaleEntry.from_config(cfg) for code, cfg in settings.SUPPORTED_LOCALES.items()},
        )

    # === Supported locales ===

    def get_default_locale(self) -> str:
        return self._default_locale

    def get_supported_locales(self) -> Mapping[str, LocaleEntry]:
        """All supported locales as a read-only mapping, in configured order."""
        return self._supported_locales

    def has_supported_locale(self, code: str) -> bool:
        return code in self._supported_locales

    def get_supported_locale(self, code: str) -> LocaleEntry | None:
        return self._supported_locales.get(code)

    def get_supported_locale_name_by_tld(self, tld: str) -> str | None:
        """Code of the first configured locale whose tld equals `tld` exactly."""
        for code, entry in self._supported_locales.items():
            if entry.tld == tld:
                return code
        return None

    def has_supported_locale_by_tld(self, tld: str) -> bool:
        return self.get_supported_locale_name_by_tld(tld) is not None

    def get_supported_locale_by_tld(self, tld: str) -> LocaleEntry | None:
        code = self.get_supported_locale_name_by_tld(tld)
        if code is None:
            return None
        return self._supported_locales[code]

    # === Field projections ===

    def _field_for_locale(self, code: str, field: str) -> str | None:
        entry = self.get_supported_locale(code)
        return None if entry is None else getattr(entry, field)

    def get_tld_for_locale(self, code: str) -> str | None:
        return self._field_for_locale(code, "tld")

    def get_name_for_locale(self, code: str) -> str | None:
        return self._field_for_locale(code, "name")

    def get_direction_for_locale(self, code: str) -> str | None:
        return self._field_for_locale(code, "direction")

    def get_script_for_locale(self, code: str) -> str | None:
        return self._field_for_locale(code, "script")

    def get_native_for_locale(self, code: str) -> str | None:
        return self._field_for_locale(code, "native")

    # === Current locale ===

    def get_current_locale(self) -> str:
        """Locale bound for the current request, else the default locale."""
        return get_bound_locale() or self._default_locale

    def set_current_locale(self, code: str) -> None:
        """Bind `code` as the current locale for this unit of work.

        Raises:
            UnsupportedLocaleError: `code` is not a supported locale.
        """
        self._validate_locale(code)
        bind_locale(code)

    @contextmanager
    def use_locale(self, code: str) -> Iterator[str]:
        """Bind `code` for the duration of the block, then restore the previous locale."""
        self._validate_locale(code)
        token = bind_locale(code)
        try:
            yield code
        finally:
            reset_locale(token)

    def get_tld_for_current_locale(self) -> str | None:
        return self.get_tld_for_locale(self.get_current_locale())

    def get_name_for_current_locale(self) -> str | None:
        return self.get_name_for_locale(self.get_current_locale())

    def get_direction_for_current_locale(self) -> str | None:
        return self.get_direction_for_locale(self.get_current_locale())

    def get_script_for_current_locale(self) -> str | None:
        return self.get_script_for_locale(self.get_current_locale())

    def get_native_for_current_locale(self) -> str | None:
        return self.get_native_for_locale(self.get_current_locale())

    # === Hosts and URLs ===

    @staticmethod
    def get_tld(host: str) -> str:
        """Final dot-segment of `host` including the dot ("www.example.co.uk" -> ".uk").

        A trailing ":port" is ignored. Returns "" when the host has no dot.
        """
        hostname = _strip_port(host or "")
        index = hostname.rfind(".")
        if index == -1:
            return ""
        return hostname[index:]

    def get_locale_for_host(self, host: str) -> str:
        """Locale configured for the host's TLD, falling back to the default locale."""
        return self.get_supported_locale_name_by_tld(self.get_tld(host)) or self._default_locale

    def get_localized_url(self, target_locale: str, current_host: str, current_uri: str) -> str:
        """Return `current_uri` pointing at the domain of `target_locale`.

        Only the URI's host is rewritten: its trailing TLD, when equal to the
        TLD of `current_host`, is swapped for the target locale's TLD. Path,
        query and fragment are left untouched.

        Raises:
            UnsupportedLocaleError: `target_locale` is not a supported locale.
        """
        # Validate before building anything so a bad locale never yields a URL
        self._validate_locale(target_locale)

        current_tld = self.get_tld(current_host)
        target_tld = self.get_tld_for_locale(target_locale)
        if not current_tld:
            return current_uri

        parts = urlsplit(current_uri)
        if not parts.netloc:
            return current_uri

        userinfo, sep, hostport = parts.netloc.rpartition("@")
        hostname = _strip_port(hostport)
        if not hostname.endswith(current_tld):
            return current_uri

        new_netloc = (
            userinfo + sep
            + hostname[: len(hostname) - len(current_tld)] + target_tld
            + hostport[len(hostname):]
        )
        # Rebuilt from the parsed parts: urlsplit drops tabs and newlines
        return urlunsplit(parts._replace(netloc=new_netloc))

    def get_localized_urls(self, current_host: str, current_uri: str) -> dict[str, str]:
        """Localized `current_uri` for every supported locale, keyed by code."""
        return {
            code: self.get_localized_url(code, current_host, current_uri)
            for code in self._supported_locales
        }

    # === Validation ===

    def _validate_locale(self, code: str) -> None:
        if not self.has_supported_locale(code):
            raise UnsupportedLocaleError(code, self._supported_locales)

    def _warn_duplicate_tlds(self) -> None:
        owners: dict[str, str] = {}
        for code, entry in self._supported_locales.items():
            if entry.tld in owners:
                log.warning(
                    "duplicate_locale_tld",
                    tld=entry.tld,
                    winner=owners[entry.tld],
                    shadowed=code,
                )
            else:
                owners[entry.tld] = code


def _strip_port(host: str) -> str:
    """Drop a ":port" suffix, keeping bracketed IPv6 literals intact."""
    if host.startswith("["):
        end = host.find("]")
        return host if end == -1 else host[: end + 1]
    name, sep, port = host.rpartition(":")
    if sep and port.isdigit():
        return name
    return host
