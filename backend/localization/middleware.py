"""Domain Locale Middleware

Resolves the request locale from the Host header's TLD and binds it as the
current locale for the lifetime of the request.
"""
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from core.logging import bind_context, locale_logger, unbind_context

from .context import bind_locale, reset_locale
from .registry import LocaleRegistry

log = locale_logger()


class DomainLocaleMiddleware(BaseHTTPMiddleware):
    """Attach the host's locale to each request.

    Sets `request.state.locale` and a `Content-Language` response header.
    Hosts whose TLD matches no configured locale get the default locale.
    """

    def __init__(self, app: ASGIApp, registry: LocaleRegistry):
        super().__init__(app)
        self.registry = registry

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        host = request.headers.get("host", "")
        tld = self.registry.get_tld(host)
        locale = self.registry.get_locale_for_host(host)

        request.state.locale = locale
        bind_context(locale=locale)
        log.debug(
            "locale_resolved",
            host=host,
            tld=tld,
            locale=locale,
            fallback=not self.registry.has_supported_locale_by_tld(tld),
        )

        token = bind_locale(locale)
        try:
            response = await call_next(request)
        finally:
            reset_locale(token)
            unbind_context("locale")

        response.headers.setdefault("Content-Language", locale)
        return response
