"""Locales API Routes

Exposes the supported locales and locale-aware URLs of the current request.
"""
from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from core.errors import not_found, raise_error
from core.logging import api_logger
from localization import LocaleRegistry

log = api_logger()

router = APIRouter()


# === Response Models ===

class LocaleInfoResponse(BaseModel):
    code: str
    tld: str
    name: str
    direction: str
    script: str
    native: str


class CurrentLocaleResponse(LocaleInfoResponse):
    default: str


class LocalizedUrlResponse(BaseModel):
    locale: str
    url: str


# === Dependencies ===

def get_registry(request: Request) -> LocaleRegistry:
    """Registry created at startup and stored on the application state."""
    return request.app.state.locales


def _locale_info(registry: LocaleRegistry, code: str) -> dict:
    entry = registry.get_supported_locale(code)
    if entry is None:
        raise_error(not_found("Locale", code, origin="api.locales"))
    return {"code": code, **entry.to_dict()}


def _request_host(request: Request) -> str:
    return request.headers.get("host", "")


# === Endpoints ===

@router.get("/", response_model=list[LocaleInfoResponse])
async def list_locales(registry: LocaleRegistry = Depends(get_registry)):
    """Get all supported locales in configured order."""
    return [
        {"code": code, **entry.to_dict()}
        for code, entry in registry.get_supported_locales().items()
    ]


@router.get("/current", response_model=CurrentLocaleResponse)
async def get_current_locale(registry: LocaleRegistry = Depends(get_registry)):
    """Get the locale resolved for this request's domain."""
    code = registry.get_current_locale()
    return {**_locale_info(registry, code), "default": registry.get_default_locale()}


@router.get("/alternates", response_model=list[LocalizedUrlResponse])
async def get_alternate_urls(request: Request, registry: LocaleRegistry = Depends(get_registry)):
    """Get this request's URL on every locale's domain (hreflang alternates)."""
    urls = registry.get_localized_urls(_request_host(request), str(request.url))
    return [{"locale": code, "url": url} for code, url in urls.items()]


@router.get("/{code}", response_model=LocaleInfoResponse)
async def get_locale(code: str, registry: LocaleRegistry = Depends(get_registry)):
    """Get metadata for one locale."""
    return _locale_info(registry, code)


@router.get("/{code}/url", response_model=LocalizedUrlResponse)
async def get_localized_url(code: str, request: Request, registry: LocaleRegistry = Depends(get_registry)):
    """Get the current request URL rewritten onto the domain of `code`."""
    url = registry.get_localized_url(code, _request_host(request), str(request.url))
    return {"locale": code, "url": url}


@router.get("/{code}/switch")
async def switch_locale(code: str, request: Request, registry: LocaleRegistry = Depends(get_registry)):
    """Redirect to the equivalent page on the domain of `code`."""
    host = _request_host(request)
    referer = request.headers.get("referer", "")
    # Only follow a referer from our own host; anything else lands on the home page
    if referer and urlsplit(referer).netloc == host:
        current_uri = referer
    else:
        current_uri = str(request.base_url)
    url = registry.get_localized_url(code, host, current_uri)
    log.info("locale_switch", target=code, url=url)
    return RedirectResponse(url, status_code=302)
