"""
Middleware modules for the Product API
"""

from .correlation_id import CorrelationIdMiddleware
from .cors import ALLOWED_METHODS, OriginPolicyMiddleware, OriginDecision, check_origin
from .request_logging import RequestLoggingMiddleware

__all__ = [
    "ALLOWED_METHODS",
    "CorrelationIdMiddleware",
    "OriginPolicyMiddleware",
    "OriginDecision",
    "check_origin",
    "RequestLoggingMiddleware",
]
