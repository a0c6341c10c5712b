"""
Single-origin CORS policy

The decision is a pure function of the request's Origin header and the
configured frontend URL; the middleware applies it before routing. Response
headers and preflight answers for allowed requests come from CORSMiddleware.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from product_api.core.errors import CorsRejection
from product_api.core.logger import logger

ALLOWED_METHODS = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]


@dataclass(frozen=True)
class OriginDecision:
    allowed: bool
    reason: Optional[str] = None


def check_origin(origin: Optional[str], allowed_origin: Optional[str]) -> OriginDecision:
    """
    Decide whether a request may proceed.

    The request's origin must equal the configured one exactly. A missing
    Origin header only matches when no frontend URL is configured.
    """
    if origin == allowed_origin:
        return OriginDecision(allowed=True)
    return OriginDecision(
        allowed=False,
        reason=(
            f"CORS Error: la solicitud fue bloqueada porque el origen {origin} "
            f"no coincide con la URL permitida configurada en FRONTEND_URL: {allowed_origin}"
        ),
    )


class OriginPolicyMiddleware(BaseHTTPMiddleware):
    """Rejects requests from origins other than the configured frontend"""

    def __init__(self, app, allowed_origin: Optional[str] = None):
        super().__init__(app)
        self.allowed_origin = allowed_origin

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        decision = check_origin(origin, self.allowed_origin)

        if decision.allowed:
            return await call_next(request)

        logger.warning(
            "Request blocked by CORS policy",
            metadata={
                "event": "cors_rejected",
                "origin": origin,
                "method": request.method,
                "path": request.url.path,
            }
        )
        rejection = CorsRejection(decision.reason)
        return JSONResponse(status_code=rejection.status_code, content=rejection.to_content())
