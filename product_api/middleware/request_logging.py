"""
Access log middleware: one line per request in the compact "short" format
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from product_api.core.logger import logger


def format_short(request: Request, response: Response, duration_ms: float) -> str:
    """remote-addr method url HTTP/version status content-length - response-time ms"""
    client_ip = request.client.host if request.client else "-"
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    http_version = request.scope.get("http_version", "1.1")
    content_length = response.headers.get("content-length", "-")
    return (
        f"{client_ip} {request.method} {url} HTTP/{http_version} "
        f"{response.status_code} {content_length} - {duration_ms:.3f} ms"
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every completed request with its status and duration"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        level = "warning" if response.status_code >= 400 else "info"
        getattr(logger, level)(
            format_short(request, response, duration_ms),
            metadata={
                "event": "http_request",
                "request": {"method": request.method, "path": request.url.path},
                "response": {"statusCode": response.status_code},
                "durationMs": round(duration_ms, 3),
            }
        )

        return response
