"""
FastAPI application setup and configuration.
Main entry point for the MediaBrowse API service.

Architecture:
- /api/web: browse, search, menu and reload endpoints
- /api/health: liveness check
- No bare paths that don't start with /api
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from mediabrowse.__version__ import __version__
from mediabrowse.helpers.logging_helper import sanitize_exception_message
from mediabrowse.interfaces.api import web
from mediabrowse.interfaces.api.types.browse_types import HealthResponse


# ----------------------------------------------------------------------
#  App lifecycle
# ----------------------------------------------------------------------
@asynccontextmanager
async def lifespan(_app_instance: FastAPI):
    """
    FastAPI lifespan context manager.

    start.py calls Application.start() before uvicorn runs; when the app is
    served some other way the application is started here.
    """
    from mediabrowse.app import application

    if not application.is_running():
        application.start()
    logging.info("[API] FastAPI starting (Application initialized)")

    try:
        yield
    finally:
        logging.info("[API] FastAPI shutting down...")
        application.stop()
        logging.info("[API] Shutdown complete")


# ----------------------------------------------------------------------
#  FastAPI app
# ----------------------------------------------------------------------
api_app = FastAPI(title="MediaBrowse", version=__version__, lifespan=lifespan)


# Global exception handler
@api_app.exception_handler(Exception)
async def exception_handler(request, exc: Exception):
    return JSONResponse(status_code=500, content={"error": sanitize_exception_message(exc)})


@api_app.get("/api/health")
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


api_app.include_router(web.router)
