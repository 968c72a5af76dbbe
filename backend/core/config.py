from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from localization.types import LocaleConfig

DEFAULT_SUPPORTED_LOCALES: dict[str, dict[str, str]] = {
    "en": {"tld": ".com", "name": "English", "direction": "ltr", "script": "Latn", "native": "English"},
    "fr": {"tld": ".fr", "name": "French", "direction": "ltr", "script": "Latn", "native": "français"},
    "de": {"tld": ".de", "name": "German", "direction": "ltr", "script": "Latn", "native": "Deutsch"},
    "es": {"tld": ".es", "name": "Spanish", "direction": "ltr", "script": "Latn", "native": "español"},
    "nl": {"tld": ".nl", "name": "Dutch", "direction": "ltr", "script": "Latn", "native": "Nederlands"},
    "ar": {"tld": ".ae", "name": "Arabic", "direction": "rtl", "script": "Arab", "native": "العربية"},
}


class Settings(BaseSettings):
    # Localization
    DEFAULT_LOCALE: str = "en"
    # JSON object in the environment: {"en": {"tld": ".com", ...}, ...}
    SUPPORTED_LOCALES: dict[str, LocaleConfig] = {
        code: LocaleConfig(**fields) for code, fields in DEFAULT_SUPPORTED_LOCALES.items()
    }

    # Backend
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    @property
    def is_production(self) -> bool:
        return not self.APP_DEBUG

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
