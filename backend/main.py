from contextlib import asynccontextmanager

from fastapi import FastAPI

from api import locales
from core.config import Settings, settings
from core.errors import register_error_handlers
from core.logging import configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware
from localization import DomainLocaleMiddleware, LocaleRegistry

log = get_logger(__name__)


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the application for the given settings.

    The locale registry is validated here, so a misconfigured default
    locale fails at startup rather than on the first request.
    """
    registry = LocaleRegistry.from_settings(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info(
            "startup",
            message="Domain localization API starting up",
            default_locale=registry.get_default_locale(),
        )
        yield
        log.info("shutdown", message="Domain localization API shutting down")

    app = FastAPI(
        title="Domain Localization API",
        description="Resolves locales from request domains and builds localized URLs",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.locales = registry

    register_error_handlers(app)

    # Middleware (order matters: last added = first executed)
    app.add_middleware(DomainLocaleMiddleware, registry=registry)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(locales.router, prefix="/api/locales", tags=["locales"])

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": "0.1.0"}

    return app


# Initialize logging before anything else
configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, debug=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # Disable uvicorn's default logging, we handle it
    )
