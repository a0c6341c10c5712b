"""
Error types and FastAPI exception handlers
"""

import traceback
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from product_api.core.config import config
from product_api.core.logger import logger


class ErrorResponse(Exception):
    """Custom exception for application errors"""

    def __init__(self, message: str, status_code: int = 400, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_content(self) -> Dict[str, Any]:
        content = {"error": self.message}
        if self.details:
            content["details"] = self.details
        return content


class RequestValidationFailed(ErrorResponse):
    """Raised when a request fails its validation chain; carries every violated rule"""

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        super().__init__("Request validation failed", status_code=400)

    def to_content(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class CorsRejection(ErrorResponse):
    """Raised when a request comes from an origin that is not allowed"""

    def __init__(self, reason: str):
        super().__init__(reason, status_code=403)


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses"""
    error: str
    details: Optional[dict] = None


class ValidationErrorItem(BaseModel):
    """A single violated validation rule"""
    type: str = "field"
    value: Any = None
    msg: str
    path: str
    location: str


class ValidationErrorResponseModel(BaseModel):
    """Pydantic model for validation failure responses"""
    errors: List[ValidationErrorItem]


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for custom ErrorResponse exceptions"""
    metadata = {
        "event": "error_response",
        "status_code": exc.status_code,
        "url": str(request.url),
        "method": request.method,
        **exc.details,
    }

    if isinstance(exc, RequestValidationFailed):
        metadata["errors"] = [error["msg"] for error in exc.errors]
        logger.warning(f"Validation failed: {len(exc.errors)} error(s)", metadata=metadata)
    else:
        if config.is_development:
            metadata["traceback"] = traceback.format_exc()
        logger.error(f"Error: {exc.message}", metadata=metadata)

    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handler for FastAPI HTTPException"""
    metadata = {
        "event": "http_exception",
        "status_code": exc.status_code,
        "url": str(request.url),
        "method": request.method,
    }

    logger.error(f"HTTPException: {exc.detail}", metadata=metadata)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )
