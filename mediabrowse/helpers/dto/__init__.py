"""
Domain DTOs (Data Transfer Objects) used across multiple layers.

Rules for DTO modules:
- Import only stdlib, typing and other DTO modules
- Contain ONLY dataclass/enum definitions and simple type aliases
- No I/O, no business logic
"""

from __future__ import annotations

from mediabrowse.helpers.dto.browse_dto import (
    ROOT_PARENT_ID,
    BrowseFlag,
    BrowseNode,
    BrowseResult,
    NodeType,
    Page,
    Resource,
)
from mediabrowse.helpers.dto.config_dto import BrowseSettings, GenreSort, MenuToggles, SearchMethod
from mediabrowse.helpers.dto.library_dto import (
    AUDIO_TYPES,
    Album,
    Artist,
    Genre,
    LibraryScope,
    ListOrder,
    MediaFile,
    MediaType,
    MusicFolder,
    MusicIndex,
    Playlist,
    PodcastChannel,
    PodcastEpisode,
)
from mediabrowse.helpers.dto.search_dto import SearchCriteria, SearchResult, SearchTarget, SearchTerm

__all__ = [
    "AUDIO_TYPES",
    "ROOT_PARENT_ID",
    "Album",
    "Artist",
    "BrowseFlag",
    "BrowseNode",
    "BrowseResult",
    "BrowseSettings",
    "Genre",
    "GenreSort",
    "LibraryScope",
    "ListOrder",
    "MediaFile",
    "MediaType",
    "MenuToggles",
    "MusicFolder",
    "MusicIndex",
    "NodeType",
    "Page",
    "Playlist",
    "PodcastChannel",
    "PodcastEpisode",
    "Resource",
    "SearchCriteria",
    "SearchMethod",
    "SearchResult",
    "SearchTarget",
    "SearchTerm",
]
