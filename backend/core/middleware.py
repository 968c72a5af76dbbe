"""Request Middleware for Logging and Tracing

Provides:
- Request correlation IDs for tracing
- Request/response logging with timing
- Context propagation for structured logs
"""
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from core.logging import (
    generate_correlation_id,
    bind_context,
    clear_context,
    api_logger,
)

log = api_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs requests/responses and manages correlation context."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID") or generate_correlation_id()

        clear_context()
        bind_context(
            correlation_id=correlation_id,
            method=request.method,
            host=request.headers.get("host", ""),
            path=request.url.path,
        )

        start = time.perf_counter()
        log.info(
            "request_started",
            query=str(request.query_params) if request.query_params else None,
        )

        try:
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start) * 1000

            response.headers["X-Correlation-ID"] = correlation_id

            status = response.status_code
            log_method = log.info if status < 400 else (log.warning if status < 500 else log.error)
            log_method(
                "request_completed",
                status=status,
                duration_ms=round(duration_ms, 2),
            )

            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            log.exception(
                "request_failed",
                error=str(exc),
                error_type=type(exc).__name__,
                duration_ms=round(duration_ms, 2),
            )
            raise
        finally:
            clear_context()
