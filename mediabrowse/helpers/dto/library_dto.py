"""
DTOs for library entities.

Read-only records handed to the browse core by the library collaborators.
The core never mutates them and never looks past id, name and counts
except when rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MediaType(str, Enum):
    """Kind of a media file record."""

    MUSIC = "MUSIC"
    PODCAST = "PODCAST"
    AUDIOBOOK = "AUDIOBOOK"
    VIDEO = "VIDEO"
    DIRECTORY = "DIRECTORY"
    ALBUM = "ALBUM"

    @property
    def is_audio(self) -> bool:
        return self in AUDIO_TYPES

    @property
    def is_directory(self) -> bool:
        return self in (MediaType.DIRECTORY, MediaType.ALBUM)


AUDIO_TYPES = frozenset({MediaType.MUSIC, MediaType.PODCAST, MediaType.AUDIOBOOK})


class ListOrder(str, Enum):
    """Ordering requested from a repository listing."""

    ALPHABETICAL = "alphabetical"
    NEWEST = "newest"
    BY_YEAR = "by_year"
    TRACK = "track"
    FREQUENCY = "frequency"


@dataclass(frozen=True)
class MusicFolder:
    """A configured top-level library folder."""

    id: int
    name: str
    path: str


@dataclass(frozen=True)
class Artist:
    """ID3 artist record."""

    id: int
    name: str
    album_count: int = 0
    cover_art_path: str | None = None
    folder_ids: tuple[int, ...] = ()
    reading: str | None = None


@dataclass(frozen=True)
class Album:
    """ID3 album record."""

    id: int
    name: str
    artist: str | None = None
    artist_id: int | None = None
    song_count: int = 0
    duration_seconds: int = 0
    year: int | None = None
    genre: str | None = None
    cover_art_path: str | None = None
    folder_id: int | None = None
    created: int = 0
    comment: str | None = None


@dataclass(frozen=True)
class MediaFile:
    """A file or directory below a music folder."""

    id: int
    path: str
    media_type: MediaType
    title: str
    folder_id: int
    parent_id: int | None = None
    artist: str | None = None
    album_artist: str | None = None
    album_name: str | None = None
    album_id: int | None = None
    artist_id: int | None = None
    genre: str | None = None
    year: int | None = None
    track_number: int | None = None
    disc_number: int | None = None
    duration_seconds: int | None = None
    format: str | None = None
    file_size: int | None = None
    cover_art_path: str | None = None
    created: int = 0
    index_key: str | None = None

    @property
    def is_directory(self) -> bool:
        return self.media_type.is_directory

    @property
    def is_audio(self) -> bool:
        return self.media_type.is_audio


@dataclass(frozen=True)
class Genre:
    """Genre facet with its album and song counts inside some scope."""

    name: str
    album_count: int = 0
    song_count: int = 0


@dataclass(frozen=True)
class MusicIndex:
    """One index bucket (an initial letter or a named group) and its entry count."""

    key: str
    count: int = 0


@dataclass(frozen=True)
class Playlist:
    id: int
    name: str
    comment: str | None = None
    file_count: int = 0
    duration_seconds: int = 0
    song_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class PodcastChannel:
    id: int
    title: str
    description: str | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class PodcastEpisode:
    id: int
    channel_id: int
    title: str
    media_file_id: int | None = None
    published: int = 0
    duration_seconds: int | None = None
    status: str = "completed"


@dataclass(frozen=True)
class LibraryScope:
    """
    Narrowing applied to a repository listing or count.

    Empty tuples mean "no restriction" for media types, while an empty
    folder tuple means "no folders", which always yields nothing.
    """

    folders: tuple[MusicFolder, ...] = ()
    media_types: tuple[MediaType, ...] = ()
    genre: str | None = None
    artist: Artist | None = None
    album: Album | None = None
    parent: MediaFile | None = None
    index_key: str | None = None
    top_level: bool = False
    order: ListOrder = ListOrder.ALPHABETICAL

    @property
    def folder_ids(self) -> frozenset[int]:
        return frozenset(f.id for f in self.folders)


__all__ = [
    "AUDIO_TYPES",
    "Album",
    "Artist",
    "Genre",
    "LibraryScope",
    "ListOrder",
    "MediaFile",
    "MediaType",
    "MusicFolder",
    "MusicIndex",
    "Playlist",
    "PodcastChannel",
    "PodcastEpisode",
]
