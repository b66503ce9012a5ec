"""
DTOs for browse configuration.

BrowseSettings is an immutable snapshot taken from ConfigService per request,
so every handler call sees a consistent set of values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SearchMethod(str, Enum):
    """Which entity family search results are drawn from."""

    FILE_STRUCTURE = "file_structure"
    ID3 = "id3"


class GenreSort(str, Enum):
    """Ordering of genre facets."""

    FREQUENCY = "frequency"
    NAME = "name"


@dataclass(frozen=True)
class MenuToggles:
    """Root menu feature toggles. Field order is not the menu order."""

    index: bool = True
    index_id3: bool = False
    folder: bool = True
    artist: bool = True
    artist_by_folder: bool = False
    album: bool = True
    album_id3: bool = False
    playlist: bool = True
    album_by_genre: bool = True
    album_id3_by_genre: bool = False
    album_id3_by_folder_genre: bool = False
    song_by_genre: bool = True
    song_by_folder_genre: bool = False
    audiobook_by_genre: bool = False
    recent_album: bool = True
    recent_album_id3: bool = False
    recent_album_id3_by_folder: bool = False
    media_file_by_folder: bool = False
    album_id3_by_folder: bool = False
    random_song: bool = True
    random_album: bool = True
    random_song_by_artist: bool = True
    random_song_by_folder_artist: bool = False
    random_song_by_genre: bool = False
    random_song_by_folder_genre: bool = False
    podcast: bool = True


@dataclass(frozen=True)
class BrowseSettings:
    """Configuration values read by node handlers."""

    base_url: str = "http://127.0.0.1:4040"
    server_name: str = "mediabrowse"
    random_max: int = 50
    recent_max: int = 50
    search_max: int = 50
    search_method: SearchMethod = SearchMethod.FILE_STRUCTURE
    genre_count_visible: bool = False
    sort_albums_by_year: bool = True
    album_genre_sort: GenreSort = GenreSort.FREQUENCY
    song_genre_sort: GenreSort = GenreSort.FREQUENCY
    cover_art_size: int = 300
    menu: MenuToggles = field(default_factory=MenuToggles)

    def __post_init__(self) -> None:
        for name in ("random_max", "recent_max", "search_max"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                msg = f"{name} must be a non-negative integer, got {value!r}"
                raise ValueError(msg)
        if self.cover_art_size <= 0:
            msg = f"cover_art_size must be positive, got {self.cover_art_size!r}"
            raise ValueError(msg)


__all__ = ["BrowseSettings", "GenreSort", "MenuToggles", "SearchMethod"]
