"""
Models module initialization
"""

from .product import Base, Product

__all__ = [
    "Base",
    "Product",
]
