"""Folder directory over a LibraryStore."""

from __future__ import annotations

from mediabrowse.helpers.dto.library_dto import MusicFolder
from mediabrowse.persistence.memory.store import LibraryStore


class FolderOperations:
    def __init__(self, store: LibraryStore) -> None:
        self._store = store

    def list_configured_folders(self) -> list[MusicFolder]:
        return list(self._store.folders)
