"""
Browse API response types.

External API contracts for browse and search endpoints.
These are Pydantic models that transform internal DTOs into API responses.

Architecture:
- These types are owned by the interface layer
- They transform internal DTOs via .from_dto() classmethods
- Services and lower layers should NOT import from this module
"""

from __future__ import annotations

from pydantic import BaseModel
from typing_extensions import Self

from mediabrowse.helpers.dto.browse_dto import BrowseNode, BrowseResult, Resource

# ──────────────────────────────────────────────────────────────────────
# Browse Response Types (DTO → Pydantic mappings)
# ──────────────────────────────────────────────────────────────────────


class ResourceResponse(BaseModel):
    """Playable resource of an item node."""

    uri: str
    mime_type: str | None = None
    duration: str | None = None
    size: int | None = None

    @classmethod
    def from_dto(cls, resource: Resource) -> Self:
        return cls(uri=resource.uri, mime_type=resource.mime_type, duration=resource.duration, size=resource.size)


class BrowseNodeResponse(BaseModel):
    """
    One rendered container or item.

    Maps directly to BrowseNode DTO from helpers/dto/browse_dto.py
    """

    id: str
    parent_id: str
    title: str
    upnp_class: str
    container: bool
    child_count: int | None = None
    searchable: bool = False
    album_art_uri: str | None = None
    artist: str | None = None
    album: str | None = None
    genre: str | None = None
    date: str | None = None
    track_number: int | None = None
    description: str | None = None
    resource: ResourceResponse | None = None

    @classmethod
    def from_dto(cls, node: BrowseNode) -> Self:
        return cls(
            id=node.id,
            parent_id=node.parent_id,
            title=node.title,
            upnp_class=node.upnp_class,
            container=node.container,
            child_count=node.child_count,
            searchable=node.searchable,
            album_art_uri=node.album_art_uri,
            artist=node.artist,
            album=node.album,
            genre=node.genre,
            date=node.date,
            track_number=node.track_number,
            description=node.description,
            resource=ResourceResponse.from_dto(node.resource) if node.resource else None,
        )


class BrowseResultResponse(BaseModel):
    """
    Result of a browse or search call.

    number_returned is the length of nodes; total_matches is the total under
    the same parent (or the clipped hit count for searches).
    """

    nodes: list[BrowseNodeResponse]
    number_returned: int
    total_matches: int

    @classmethod
    def from_dto(cls, result: BrowseResult) -> Self:
        """
        Transform internal BrowseResult DTO to external API response.

        Args:
            result: Internal result DTO from service layer

        Returns:
            API response model
        """
        return cls(
            nodes=[BrowseNodeResponse.from_dto(node) for node in result.nodes],
            number_returned=result.count,
            total_matches=result.total_matches,
        )


class HealthResponse(BaseModel):
    status: str
    version: str


class ReloadResponse(BaseModel):
    status: str
    folders: list[int]
