"""Index buckets over a LibraryStore."""

from __future__ import annotations

from collections import Counter

from mediabrowse.helpers.dto.library_dto import LibraryScope, MediaType, MusicIndex
from mediabrowse.persistence.memory import artists_ops, media_files_ops
from mediabrowse.persistence.memory.store import LibraryStore, index_key_of


def _buckets(counter: Counter[str]) -> list[MusicIndex]:
    # "#" sorts after the letters
    keys = sorted(counter, key=lambda k: (k == "#", k))
    return [MusicIndex(key=k, count=counter[k]) for k in keys]


class IndexOperations:
    def __init__(self, store: LibraryStore) -> None:
        self._store = store

    def file_indexes(self, scope: LibraryScope) -> list[MusicIndex]:
        snap = self._store.snapshot
        dirs = LibraryScope(folders=scope.folders, top_level=True, media_types=(MediaType.DIRECTORY, MediaType.ALBUM))
        counter: Counter[str] = Counter(
            mf.index_key or index_key_of(mf.title)
            for mf in snap.media_files
            if media_files_ops.matches_scope(mf, dirs, snap)
        )
        return _buckets(counter)

    def artist_indexes(self, scope: LibraryScope) -> list[MusicIndex]:
        counter: Counter[str] = Counter(
            artists_ops.artist_index_key(a)
            for a in self._store.snapshot.artists
            if artists_ops.matches_scope(a, LibraryScope(folders=scope.folders))
        )
        return _buckets(counter)
