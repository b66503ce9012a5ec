"""
DTOs for search requests and results.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from mediabrowse.helpers.dto.library_dto import MediaType, MusicFolder

T = TypeVar("T")


class SearchTarget(str, Enum):
    """Entity kind a search is run against."""

    ARTIST = "artist"
    ARTIST_ID3 = "artist_id3"
    ALBUM = "album"
    ALBUM_ID3 = "album_id3"
    SONG = "song"
    VIDEO = "video"


@dataclass(frozen=True)
class SearchTerm:
    """One property expression from a search query, e.g. dc:title contains "x"."""

    field: str
    value: str
    exact: bool = False


@dataclass(frozen=True)
class SearchCriteria:
    """Parsed search request passed to the search collaborator."""

    target: SearchTarget
    terms: tuple[SearchTerm, ...]
    offset: int
    count: int
    any_term: bool = False
    media_types: tuple[MediaType, ...] = ()
    folders: tuple[MusicFolder, ...] = ()


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """Ranked items and the total number of hits."""

    items: tuple[T, ...]
    total_hits: int


__all__ = ["SearchCriteria", "SearchResult", "SearchTarget", "SearchTerm"]
