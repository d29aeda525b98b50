"""
Query Package - Lookups, Filters and Search.
"""

from hospital_directory.query.engine import NotFound, QueryEngine

__all__ = ["NotFound", "QueryEngine"]
