"""Request logging with correlation IDs.

Every request is logged on completion with status and duration, under a
correlation ID taken from ``X-Correlation-ID`` or generated. The same ID is
echoed back in the response header.
"""
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from core.errors.handlers import CORRELATION_HEADER
from core.logging import api_logger, bind_context, clear_context, generate_correlation_id

log = api_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        clear_context()
        bind_context(correlation_id=correlation_id, method=request.method, path=request.url.path)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            log.exception("request_failed", duration_ms=_elapsed_ms(start))
            raise
        finally:
            clear_context()

        response.headers[CORRELATION_HEADER] = correlation_id
        status = response.status_code
        log_method = log.info if status < 400 else (log.warning if status < 500 else log.error)
        log_method(
            "request_completed",
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
            status=status,
            duration_ms=_elapsed_ms(start),
        )
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
