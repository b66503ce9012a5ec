"""
Read contracts the browse core needs from the library.

Every listing is a paged read (scope, offset, count) paired with a count over
the same scope. Implementations must return listings in a stable order so
consecutive pages neither repeat nor skip records. Lookups by id return None
for a missing entity; deciding whether that is an error is up to the caller.

Nothing here writes. Indexing, scanning and transcoding live elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from mediabrowse.helpers.dto.config_dto import BrowseSettings
from mediabrowse.helpers.dto.library_dto import (
    Album,
    Artist,
    Genre,
    LibraryScope,
    MediaFile,
    MusicFolder,
    MusicIndex,
    Playlist,
    PodcastChannel,
    PodcastEpisode,
)
from mediabrowse.helpers.dto.search_dto import SearchCriteria, SearchResult


@runtime_checkable
class FolderDirectory(Protocol):
    """Source of the configured music folders."""

    def list_configured_folders(self) -> list[MusicFolder]:
        """Folders visible to DLNA clients, in display order."""
        ...


class ArtistRepository(Protocol):
    def list_artists(self, scope: LibraryScope, offset: int, count: int) -> list[Artist]: ...

    def count_artists(self, scope: LibraryScope) -> int: ...

    def get_artist(self, artist_id: int) -> Artist | None: ...


class AlbumRepository(Protocol):
    def list_albums(self, scope: LibraryScope, offset: int, count: int) -> list[Album]: ...

    def count_albums(self, scope: LibraryScope) -> int: ...

    def get_album(self, album_id: int) -> Album | None: ...


class MediaFileRepository(Protocol):
    def list_media_files(self, scope: LibraryScope, offset: int, count: int) -> list[MediaFile]: ...

    def count_media_files(self, scope: LibraryScope) -> int: ...

    def get_media_file(self, media_file_id: int) -> MediaFile | None: ...

    def get_folder_root(self, folder: MusicFolder) -> MediaFile | None:
        """Directory record standing for the folder itself."""
        ...


class SearchIndex(Protocol):
    """Full-text search and aggregate queries backed by the search index."""

    def search(self, criteria: SearchCriteria) -> SearchResult:
        """Ranked hits for criteria.target, best match first."""
        ...

    def genre_facets(self, scope: LibraryScope) -> list[Genre]:
        """Genres present in scope with their album and song counts."""
        ...

    def random_songs(self, scope: LibraryScope, count: int, server_max: int) -> list[MediaFile]:
        """A fresh sample of at most count songs drawn from at most server_max candidates."""
        ...

    def random_albums(self, scope: LibraryScope, count: int, server_max: int) -> list[Album]: ...


class IndexRepository(Protocol):
    def file_indexes(self, scope: LibraryScope) -> list[MusicIndex]:
        """Index buckets over top-level artist directories."""
        ...

    def artist_indexes(self, scope: LibraryScope) -> list[MusicIndex]:
        """Index buckets over ID3 artists."""
        ...


class PlaylistRepository(Protocol):
    def list_playlists(self, offset: int, count: int) -> list[Playlist]: ...

    def count_playlists(self) -> int: ...

    def get_playlist(self, playlist_id: int) -> Playlist | None: ...

    def list_playlist_songs(self, playlist: Playlist, offset: int, count: int) -> list[MediaFile]: ...

    def count_playlist_songs(self, playlist: Playlist) -> int: ...


class PodcastRepository(Protocol):
    def list_channels(self, offset: int, count: int) -> list[PodcastChannel]: ...

    def count_channels(self) -> int: ...

    def get_channel(self, channel_id: int) -> PodcastChannel | None: ...

    def list_episodes(self, channel: PodcastChannel, offset: int, count: int) -> list[PodcastEpisode]: ...

    def count_episodes(self, channel: PodcastChannel) -> int: ...

    def get_episode(self, episode_id: int) -> PodcastEpisode | None: ...


class TextResources(Protocol):
    def get_text(self, key: str) -> str:
        """Localized text for key; the key itself when no text is known."""
        ...


class SettingsProvider(Protocol):
    def get_browse_settings(self) -> BrowseSettings:
        """Current settings snapshot. Called on every request."""
        ...


@dataclass(frozen=True)
class LibraryCollaborators:
    """The read contracts handed to node handlers."""

    folders: FolderDirectory
    artists: ArtistRepository
    albums: AlbumRepository
    media_files: MediaFileRepository
    search: SearchIndex
    indexes: IndexRepository
    playlists: PlaylistRepository
    podcasts: PodcastRepository


__all__ = [
    "AlbumRepository",
    "ArtistRepository",
    "FolderDirectory",
    "IndexRepository",
    "LibraryCollaborators",
    "MediaFileRepository",
    "PlaylistRepository",
    "PodcastRepository",
    "SearchIndex",
    "SettingsProvider",
    "TextResources",
]
