"""
DTOs for the browse core.

NodeType is the closed set of node type tokens. Page is what handlers return,
BrowseResult is what the content directory hands to its caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")

ROOT_PARENT_ID = "-1"


class NodeType(str, Enum):
    """Node type tokens. The token is the first component of every object id."""

    ROOT = "0"
    PLAYLIST = "playlist"
    MEDIA_FILE = "folder"
    MEDIA_FILE_BY_FOLDER = "mfbf"
    ALBUM = "album"
    ALBUM_ID3 = "alid3"
    ALBUM_ID3_BY_FOLDER = "alid3bf"
    RECENT = "recent"
    RECENT_ID3 = "recentId3"
    RECENT_ID3_BY_FOLDER = "recentId3bf"
    ARTIST = "artist"
    ARTIST_BY_FOLDER = "artistbf"
    ALBUM_BY_GENRE = "abg"
    ALBUM_ID3_BY_GENRE = "aibg"
    ALBUM_ID3_BY_FOLDER_GENRE = "aibfg"
    SONG_BY_GENRE = "sbg"
    SONG_BY_FOLDER_GENRE = "sbfg"
    AUDIOBOOK_BY_GENRE = "abbg"
    INDEX = "index"
    INDEX_ID3 = "indexId3"
    PODCAST = "podcast"
    RANDOM_ALBUM = "randomAlbum"
    RANDOM_SONG = "randomSong"
    RANDOM_SONG_BY_ARTIST = "rsbar"
    RANDOM_SONG_BY_FOLDER_ARTIST = "rsbfar"
    RANDOM_SONG_BY_GENRE = "rsbg"
    RANDOM_SONG_BY_FOLDER_GENRE = "rsbfg"


class BrowseFlag(str, Enum):
    """UPnP BrowseFlag argument."""

    METADATA = "BrowseMetadata"
    DIRECT_CHILDREN = "BrowseDirectChildren"


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of records plus the total available under the same parent."""

    records: tuple[T, ...]
    total: int

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class Resource:
    """Playable resource attached to an item node."""

    uri: str
    mime_type: str | None = None
    duration: str | None = None
    size: int | None = None


@dataclass(frozen=True)
class BrowseNode:
    """Rendered container or item, ready for a protocol serializer."""

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
    resource: Resource | None = None


@dataclass(frozen=True)
class BrowseResult:
    """Rendered nodes of one browse or search call and the total match count."""

    nodes: tuple[BrowseNode, ...]
    total_matches: int

    @property
    def count(self) -> int:
        return len(self.nodes)

    @classmethod
    def empty(cls) -> BrowseResult:
        return cls(nodes=(), total_matches=0)


__all__ = [
    "ROOT_PARENT_ID",
    "BrowseFlag",
    "BrowseNode",
    "BrowseResult",
    "NodeType",
    "Page",
    "Resource",
]
