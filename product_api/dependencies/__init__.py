"""
Dependencies module initialization
"""

from .product import (
    get_database,
    get_session,
    get_product_repository,
    get_product_service,
    validate_request,
    to_schema,
)

__all__ = [
    "get_database",
    "get_session",
    "get_product_repository",
    "get_product_service",
    "validate_request",
    "to_schema",
]
