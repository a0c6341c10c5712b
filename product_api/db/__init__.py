"""
Database module initialization
"""

from .database import Database

__all__ = ["Database"]
