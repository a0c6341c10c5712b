"""
Validators module initialization
"""

from .rules import Rule, RequestInput, validate, build_input
from .product import (
    GET_PRODUCT_RULES,
    PRODUCT_ID_RULES,
    CREATE_PRODUCT_RULES,
    UPDATE_PRODUCT_RULES,
    parse_product_id,
)

__all__ = [
    "Rule",
    "RequestInput",
    "validate",
    "build_input",
    "GET_PRODUCT_RULES",
    "PRODUCT_ID_RULES",
    "CREATE_PRODUCT_RULES",
    "UPDATE_PRODUCT_RULES",
    "parse_product_id",
]
