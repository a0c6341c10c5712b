"""
Core module initialization
"""

from .config import config
from .errors import ErrorResponse, ErrorResponseModel, RequestValidationFailed, CorsRejection
from .logger import logger

__all__ = [
    "config",
    "ErrorResponse",
    "ErrorResponseModel",
    "RequestValidationFailed",
    "CorsRejection",
    "logger",
]
