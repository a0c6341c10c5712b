"""
API module initialization
"""

from . import products, health, home

__all__ = ["products", "health", "home"]
