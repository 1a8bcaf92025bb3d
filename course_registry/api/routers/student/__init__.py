"""
Student router package.

Exports the router for browsing, registration and withdrawal endpoints.
"""

from .student_router import router

__all__ = ["router"]
