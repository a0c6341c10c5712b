"""
Services module initialization
"""

from .product import ProductService

__all__ = [
    "ProductService",
]
