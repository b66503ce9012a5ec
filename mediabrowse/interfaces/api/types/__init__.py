"""
API response types package.

External API contracts organized by domain.
Each module defines Pydantic models with .from_dto() transformation methods.
"""

from mediabrowse.interfaces.api.types.browse_types import (
    BrowseNodeResponse,
    BrowseResultResponse,
    HealthResponse,
    ReloadResponse,
    ResourceResponse,
)

__all__ = [
    "BrowseNodeResponse",
    "BrowseResultResponse",
    "HealthResponse",
    "ReloadResponse",
    "ResourceResponse",
]
