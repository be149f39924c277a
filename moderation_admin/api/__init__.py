# moderation_admin/api/__init__.py
# This file makes the api directory a Python package.

from . import admin

__all__ = ["admin"]
