"""
Product API - CRUD REST service for products backed by a relational database
"""

__version__ = "1.0.0"
