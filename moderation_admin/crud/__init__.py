"""Query builders for the admin listings."""

from . import admin_queries

__all__ = ["admin_queries"]
