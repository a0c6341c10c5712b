"""
FastAPI Application - Product API
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_api.api import health, home, products
from product_api.core.config import Config, config
from product_api.core.errors import ErrorResponse, error_response_handler, http_exception_handler
from product_api.core.logger import logger
from product_api.core.telemetry import instrument_app, instrument_engine
from product_api.db.database import Database
from product_api.middleware import (
    ALLOWED_METHODS,
    CorrelationIdMiddleware,
    OriginPolicyMiddleware,
    RequestLoggingMiddleware,
)


def create_app(database: Optional[Database] = None, settings: Config = config) -> FastAPI:
    """
    Build the application around a database handle.

    When no handle is given one is created from ``settings.database_url``.
    The handle is opened on startup and closed on shutdown.
    """
    if database is None:
        database = Database(settings.database_url, echo=settings.database_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info("Starting Product API...")
        await database.connect()
        if settings.enable_tracing:
            instrument_engine(database.engine)

        logger.info(
            "Product API started successfully",
            metadata={
                "service_name": settings.service_name,
                "version": settings.service_version,
                "environment": settings.environment,
                "port": settings.port,
            }
        )

        yield

        logger.info("Shutting down Product API...")
        await database.close()

    app = FastAPI(
        title="Product API",
        description="CRUD API for products: name, price and availability",
        version=settings.service_version,
        docs_url="/docs",
        lifespan=lifespan,
    )
    app.state.database = database

    if settings.enable_tracing:
        instrument_app(app)

    # Configure error handlers
    app.add_exception_handler(ErrorResponse, error_response_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Last added runs first: correlation id, access log, origin check, then CORS headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url] if settings.frontend_url else [],
        allow_methods=ALLOWED_METHODS,
        allow_headers=["*"],
    )
    app.add_middleware(OriginPolicyMiddleware, allowed_origin=settings.frontend_url)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    # Include API routers
    app.include_router(home.router, tags=["home"])
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(products.router, prefix="/api/products", tags=["Products"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(
        f"REST API en puerto {config.port}",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port,
        }
    )

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.environment == "development"
    )
