"""
MemoryLibrary - in-memory implementation of every library read contract.

Mirrors a database facade: one operations object per contract, all sharing
one LibraryStore.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from mediabrowse.helpers.dto.library_dto import MusicFolder
from mediabrowse.persistence.contracts import LibraryCollaborators
from mediabrowse.persistence.memory.albums_ops import AlbumOperations
from mediabrowse.persistence.memory.artists_ops import ArtistOperations
from mediabrowse.persistence.memory.folders_ops import FolderOperations
from mediabrowse.persistence.memory.indexes_ops import IndexOperations
from mediabrowse.persistence.memory.media_files_ops import MediaFileOperations
from mediabrowse.persistence.memory.playlists_ops import PlaylistOperations, PodcastOperations
from mediabrowse.persistence.memory.search_ops import SearchOperations
from mediabrowse.persistence.memory.store import LibrarySnapshot, LibraryStore, load_snapshot

logger = logging.getLogger(__name__)


class MemoryLibrary:
    """In-memory library serving the browse core's read contracts."""

    def __init__(self, snapshot: LibrarySnapshot | None = None, rng: random.Random | None = None) -> None:
        self.store = LibraryStore(snapshot)
        self.folders = FolderOperations(self.store)
        self.artists = ArtistOperations(self.store)
        self.albums = AlbumOperations(self.store)
        self.media_files = MediaFileOperations(self.store)
        self.search = SearchOperations(self.store, rng)
        self.indexes = IndexOperations(self.store)
        self.playlists = PlaylistOperations(self.store)
        self.podcasts = PodcastOperations(self.store)

    @classmethod
    def from_yaml(cls, path: str | Path) -> MemoryLibrary:
        return cls(load_snapshot(path))

    def collaborators(self) -> LibraryCollaborators:
        return LibraryCollaborators(
            folders=self.folders,
            artists=self.artists,
            albums=self.albums,
            media_files=self.media_files,
            search=self.search,
            indexes=self.indexes,
            playlists=self.playlists,
            podcasts=self.podcasts,
        )

    def reload(self, path: str | Path) -> None:
        self.store.replace(load_snapshot(path))

    def configure_folders(self, folder_ids: list[int] | None) -> list[MusicFolder]:
        """Change which folders are configured; takes effect on the next request."""
        self.store.configure_folders(folder_ids)
        folders = list(self.store.folders)
        logger.info("[Library] Configured folders: %s", [f.id for f in folders])
        return folders
