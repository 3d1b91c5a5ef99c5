"""
API Routers Package

Contains all FastAPI routers grouped by functionality.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Routers are thin wrappers around Application Layer use cases
    - All routers are mounted under the /api prefix by create_app()

Available Routers:
    - submissions_router: POST /submit
    - diagnostics_router: GET /health, GET /test
"""

from .diagnostics import router as diagnostics_router
from .submissions import router as submissions_router

__all__ = ["diagnostics_router", "submissions_router"]
