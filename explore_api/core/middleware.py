import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from explore_api.core.trace import (
    TRACE_HEADER, bind_trace_id, get_trace_id, reset_trace_id,
)

alog = logging.getLogger("access")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds a trace id per request and writes one JSON access record."""

    async def dispatch(self, request: Request, call_next):
        token = bind_trace_id(request.headers.get(TRACE_HEADER))
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            response.headers[TRACE_HEADER] = get_trace_id()
            return response
        finally:
            dur_ms = int((time.perf_counter() - start) * 1000)
            alog.info(
                "access",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "query": str(request.url.query)
                    if request.url.query else "",
                    "status": status,
                    "latency_ms": dur_ms,
                    "client_ip": request.client.host
                    if request.client else None,
                },
            )
            reset_trace_id(token)
