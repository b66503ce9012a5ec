"""Media file listings over a LibraryStore."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mediabrowse.helpers.dto.library_dto import LibraryScope, ListOrder, MediaFile, MusicFolder
from mediabrowse.persistence.memory.store import LibrarySnapshot, LibraryStore, index_key_of, sort_text


def _track_key(mf: MediaFile) -> tuple[Any, ...]:
    # directories first, then disc/track order
    return (0 if mf.is_directory else 1, mf.disc_number or 0, mf.track_number or 0, sort_text(mf.title), mf.id)


_ORDER_KEYS: dict[ListOrder, Callable[[MediaFile], tuple[Any, ...]]] = {
    ListOrder.TRACK: _track_key,
    ListOrder.ALPHABETICAL: lambda mf: (sort_text(mf.title), mf.id),
    ListOrder.NEWEST: lambda mf: (-mf.created, mf.id),
    ListOrder.BY_YEAR: lambda mf: (mf.year or 0, sort_text(mf.title), mf.id),
    ListOrder.FREQUENCY: lambda mf: (sort_text(mf.title), mf.id),
}


def matches_scope(mf: MediaFile, scope: LibraryScope, snap: LibrarySnapshot) -> bool:
    if mf.folder_id not in scope.folder_ids:
        return False
    if scope.media_types and mf.media_type not in scope.media_types:
        return False
    if scope.genre is not None and mf.genre != scope.genre:
        return False
    if scope.artist is not None and mf.artist_id != scope.artist.id:
        return False
    if scope.album is not None and mf.album_id != scope.album.id:
        return False
    if scope.parent is not None and mf.parent_id != scope.parent.id:
        return False
    if scope.top_level and mf.parent_id not in snap.folder_root_ids:
        return False
    if scope.index_key is not None and (mf.index_key or index_key_of(mf.title)) != scope.index_key:
        return False
    return True


def select_media_files(scope: LibraryScope, snap: LibrarySnapshot) -> list[MediaFile]:
    selected = [mf for mf in snap.media_files if matches_scope(mf, scope, snap)]
    selected.sort(key=_ORDER_KEYS[scope.order])
    return selected


class MediaFileOperations:
    def __init__(self, store: LibraryStore) -> None:
        self._store = store

    def list_media_files(self, scope: LibraryScope, offset: int, count: int) -> list[MediaFile]:
        return select_media_files(scope, self._store.snapshot)[offset : offset + count]

    def count_media_files(self, scope: LibraryScope) -> int:
        snap = self._store.snapshot
        return sum(1 for mf in snap.media_files if matches_scope(mf, scope, snap))

    def get_media_file(self, media_file_id: int) -> MediaFile | None:
        return self._store.snapshot.media_files_by_id.get(media_file_id)

    def get_folder_root(self, folder: MusicFolder) -> MediaFile | None:
        snap = self._store.snapshot
        for mf in snap.media_files:
            if mf.folder_id == folder.id and mf.id in snap.folder_root_ids:
                return mf
        return None
