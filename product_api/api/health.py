"""
Health endpoints
"""

import time
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from product_api.core.config import config
from product_api.core.logger import logger
from product_api.db.database import Database
from product_api.dependencies.product import get_database

router = APIRouter()

# Track service start time
start_time = time.time()


@router.get("/health")
def health_check():
    """Liveness probe - the process is up"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "timestamp": datetime.now().isoformat(),
        "version": config.service_version,
        "uptime": round(time.time() - start_time, 2),
    }


@router.get("/health/ready")
async def readiness_check(database: Database = Depends(get_database)):
    """Readiness probe - the database answers queries"""
    if await database.ping():
        return {
            "status": "ready",
            "service": config.service_name,
            "timestamp": datetime.now().isoformat(),
            "checks": [{"name": "database", "status": "healthy"}],
        }

    logger.warning(
        "Readiness check failed - database unreachable",
        metadata={"event": "readiness_check_failed", "failed_checks": ["database"]}
    )
    return JSONResponse(
        status_code=503,
        content={
            "status": "not ready",
            "service": config.service_name,
            "timestamp": datetime.now().isoformat(),
            "checks": [{"name": "database", "status": "unhealthy"}],
        },
    )
