"""
API routes module.

FastAPI routers and application factory for all HTTP endpoints.
"""
