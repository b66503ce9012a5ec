"""
Combined router for all web endpoints.

Aggregates the web routers into a single router under the /api/web prefix.
"""

from fastapi import APIRouter

from mediabrowse.interfaces.api.web import browse_if

router = APIRouter(prefix="/api/web")

router.include_router(browse_if.router)
