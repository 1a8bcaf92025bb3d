"""
Admin router package.

Exports the router for course administration endpoints.
"""

from .admin_router import router

__all__ = ["router"]
