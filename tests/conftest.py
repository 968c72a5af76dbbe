"""
Pytest configuration and shared fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from localization import LocaleRegistry


LOCALES = {
    "en": {"tld": ".com", "name": "English", "direction": "ltr", "script": "Latn", "native": "English"},
    "fr": {"tld": ".fr", "name": "French", "direction": "ltr", "script": "Latn", "native": "français"},
    "ar": {"tld": ".ae", "name": "Arabic", "direction": "rtl", "script": "Arab", "native": "العربية"},
}


@pytest.fixture
def locales():
    """Raw locale configuration, as it would come from settings"""
    return {code: dict(fields) for code, fields in LOCALES.items()}


@pytest.fixture
def registry(locales):
    """Registry with en (default), fr and ar"""
    return LocaleRegistry("en", locales)


@pytest.fixture
def settings(locales):
    return Settings(DEFAULT_LOCALE="en", SUPPORTED_LOCALES=locales)


@pytest.fixture
def app(settings):
    from main import create_app
    return create_app(settings)


@pytest.fixture
def client_for(app):
    """Factory for a test client whose requests carry the given Host"""
    def _make(host: str) -> TestClient:
        return TestClient(app, base_url=f"http://{host}")
    return _make
