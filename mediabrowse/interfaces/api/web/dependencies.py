"""
FastAPI dependency injection helpers for web endpoints.

ARCHITECTURE:
- Endpoints should ONLY inject services, never the library or raw infrastructure
- Services encapsulate all browse logic and data access
- Endpoints are thin presentation layers that call services and format responses
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException

if TYPE_CHECKING:
    from mediabrowse.app import Application
    from mediabrowse.services.content_directory_svc import ContentDirectoryService


def get_application() -> Application:
    """Get the Application singleton."""
    from mediabrowse.app import application

    return application


def get_content_directory() -> ContentDirectoryService:
    """Get ContentDirectoryService instance."""
    from mediabrowse.app import application

    service = application.services.get("content_directory")
    if service is None:
        raise HTTPException(status_code=503, detail="Content directory service not available")
    return service  # type: ignore[no-any-return]
