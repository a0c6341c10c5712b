"""
Home/Root API endpoints
Service information endpoints
"""

from fastapi import APIRouter

from product_api.core.config import config

router = APIRouter()


@router.get("/")
async def root():
    """
    Root endpoint - Service information.
    Returns basic service metadata and where to find the documentation.
    """
    return {
        "service": config.service_name,
        "version": config.service_version,
        "environment": config.environment,
        "message": "Product API is running",
        "docs": "/docs",
    }
