"""ID3 artist listings over a LibraryStore."""

from __future__ import annotations

from mediabrowse.helpers.dto.library_dto import Artist, LibraryScope
from mediabrowse.persistence.memory.store import LibraryStore, index_key_of, sort_text


def artist_index_key(artist: Artist) -> str:
    return index_key_of(artist.reading or artist.name)


def matches_scope(artist: Artist, scope: LibraryScope) -> bool:
    if not scope.folder_ids.intersection(artist.folder_ids):
        return False
    if scope.index_key is not None and artist_index_key(artist) != scope.index_key:
        return False
    return True


class ArtistOperations:
    def __init__(self, store: LibraryStore) -> None:
        self._store = store

    def list_artists(self, scope: LibraryScope, offset: int, count: int) -> list[Artist]:
        selected = [a for a in self._store.snapshot.artists if matches_scope(a, scope)]
        selected.sort(key=lambda a: (sort_text(a.reading or a.name), a.id))
        return selected[offset : offset + count]

    def count_artists(self, scope: LibraryScope) -> int:
        return sum(1 for a in self._store.snapshot.artists if matches_scope(a, scope))

    def get_artist(self, artist_id: int) -> Artist | None:
        return next((a for a in self._store.snapshot.artists if a.id == artist_id), None)
