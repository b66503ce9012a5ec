"""ID3 album listings over a LibraryStore."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mediabrowse.helpers.dto.library_dto import Album, LibraryScope, ListOrder
from mediabrowse.persistence.memory.store import LibraryStore, sort_text

_ORDER_KEYS: dict[ListOrder, Callable[[Album], tuple[Any, ...]]] = {
    ListOrder.ALPHABETICAL: lambda a: (sort_text(a.name), a.id),
    ListOrder.NEWEST: lambda a: (-a.created, a.id),
    ListOrder.BY_YEAR: lambda a: (a.year or 0, sort_text(a.name), a.id),
    ListOrder.TRACK: lambda a: (sort_text(a.name), a.id),
    ListOrder.FREQUENCY: lambda a: (-a.song_count, sort_text(a.name), a.id),
}


def matches_scope(album: Album, scope: LibraryScope) -> bool:
    if album.folder_id not in scope.folder_ids:
        return False
    if scope.genre is not None and album.genre != scope.genre:
        return False
    if scope.artist is not None and album.artist_id != scope.artist.id:
        return False
    return True


class AlbumOperations:
    def __init__(self, store: LibraryStore) -> None:
        self._store = store

    def _select(self, scope: LibraryScope) -> list[Album]:
        selected = [a for a in self._store.snapshot.albums if matches_scope(a, scope)]
        selected.sort(key=_ORDER_KEYS[scope.order])
        return selected

    def list_albums(self, scope: LibraryScope, offset: int, count: int) -> list[Album]:
        return self._select(scope)[offset : offset + count]

    def count_albums(self, scope: LibraryScope) -> int:
        return sum(1 for a in self._store.snapshot.albums if matches_scope(a, scope))

    def get_album(self, album_id: int) -> Album | None:
        return next((a for a in self._store.snapshot.albums if a.id == album_id), None)
