"""
OpenTelemetry instrumentation for FastAPI and SQLAlchemy

Exporting spans is left to whatever tracer provider the deployment installs.
"""

from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor

from product_api.core.logger import logger


def instrument_app(app) -> bool:
    """
    Instrument FastAPI application with OpenTelemetry for automatic span creation.
    Must run before the application starts serving.
    """
    try:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI instrumented with OpenTelemetry")
        return True
    except Exception as e:
        logger.error("Failed to instrument application", error=e)
        return False


def instrument_engine(engine) -> bool:
    """
    Emit a span per query on the given AsyncEngine.
    """
    try:
        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
        logger.info("SQLAlchemy instrumented with OpenTelemetry")
        return True
    except Exception as e:
        logger.error("Failed to instrument database engine", error=e)
        return False
