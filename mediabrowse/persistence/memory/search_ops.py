"""
Search, genre facets and random sampling over a LibraryStore.

Matching is case-insensitive substring (or equality for exact terms) over
title, artist, album and genre. Hits are ranked exact-title first, then by
name, which keeps paging through one query stable.
"""

from __future__ import annotations

import random
from collections import defaultdict
from typing import Any

from mediabrowse.helpers.dto.library_dto import (
    AUDIO_TYPES,
    Album,
    Artist,
    Genre,
    LibraryScope,
    ListOrder,
    MediaFile,
    MediaType,
)
from mediabrowse.helpers.dto.search_dto import SearchCriteria, SearchResult, SearchTarget, SearchTerm
from mediabrowse.persistence.memory import albums_ops, artists_ops, media_files_ops
from mediabrowse.persistence.memory.store import LibraryStore, sort_text


def _fields_of(entity: Any) -> dict[str, str | None]:
    if isinstance(entity, Artist):
        return {"title": entity.name, "artist": entity.name, "album": None, "genre": None}
    if isinstance(entity, Album):
        return {"title": entity.name, "artist": entity.artist, "album": entity.name, "genre": entity.genre}
    return {
        "title": entity.title,
        "artist": entity.artist or entity.album_artist,
        "album": entity.album_name,
        "genre": entity.genre,
    }


def _term_matches(term: SearchTerm, values: dict[str, str | None]) -> bool:
    value = values.get(term.field)
    if value is None:
        return False
    if term.exact:
        return value.casefold() == term.value.casefold()
    return term.value.casefold() in value.casefold()


def _criteria_matches(criteria: SearchCriteria, entity: Any) -> bool:
    if not criteria.terms:
        return True
    values = _fields_of(entity)
    hits = (_term_matches(t, values) for t in criteria.terms)
    return any(hits) if criteria.any_term else all(hits)


class SearchOperations:
    def __init__(self, store: LibraryStore, rng: random.Random | None = None) -> None:
        self._store = store
        self._rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Full text
    # ------------------------------------------------------------------
    def _candidates(self, criteria: SearchCriteria) -> list[Any]:
        snap = self._store.snapshot
        scope = LibraryScope(folders=criteria.folders)
        target = criteria.target
        if target == SearchTarget.ARTIST_ID3:
            return [a for a in snap.artists if artists_ops.matches_scope(a, scope)]
        if target == SearchTarget.ALBUM_ID3:
            return [a for a in snap.albums if albums_ops.matches_scope(a, scope)]
        if target == SearchTarget.ARTIST:
            scope = LibraryScope(folders=criteria.folders, top_level=True, media_types=(MediaType.DIRECTORY,))
        elif target == SearchTarget.ALBUM:
            scope = LibraryScope(folders=criteria.folders, media_types=(MediaType.ALBUM,))
        elif target == SearchTarget.VIDEO:
            scope = LibraryScope(folders=criteria.folders, media_types=(MediaType.VIDEO,))
        else:
            scope = LibraryScope(folders=criteria.folders, media_types=criteria.media_types or tuple(AUDIO_TYPES))
        return [mf for mf in snap.media_files if media_files_ops.matches_scope(mf, scope, snap)]

    def search(self, criteria: SearchCriteria) -> SearchResult:
        matches = [e for e in self._candidates(criteria) if _criteria_matches(criteria, e)]
        exact_titles = {t.value.casefold() for t in criteria.terms if t.field == "title"}

        def rank(entity: Any) -> tuple[Any, ...]:
            title = sort_text(_fields_of(entity)["title"])
            return (0 if title in exact_titles else 1, title, entity.id)

        matches.sort(key=rank)
        window = matches[criteria.offset : criteria.offset + criteria.count]
        return SearchResult(items=tuple(window), total_hits=len(matches))

    # ------------------------------------------------------------------
    # Genres
    # ------------------------------------------------------------------
    def genre_facets(self, scope: LibraryScope) -> list[Genre]:
        snap = self._store.snapshot
        songs: dict[str, int] = defaultdict(int)
        albums: dict[str, set[int]] = defaultdict(set)
        song_scope = LibraryScope(folders=scope.folders, media_types=scope.media_types or tuple(AUDIO_TYPES))
        for mf in snap.media_files:
            if not mf.genre or not media_files_ops.matches_scope(mf, song_scope, snap):
                continue
            songs[mf.genre] += 1
            album_key = mf.album_id if mf.album_id is not None else mf.parent_id
            if album_key is not None:
                albums[mf.genre].add(album_key)
        genres = [Genre(name=name, album_count=len(albums[name]), song_count=n) for name, n in songs.items()]
        if scope.order == ListOrder.FREQUENCY:
            genres.sort(key=lambda g: (-g.album_count, -g.song_count, sort_text(g.name)))
        else:
            genres.sort(key=lambda g: sort_text(g.name))
        return genres

    # ------------------------------------------------------------------
    # Random
    # ------------------------------------------------------------------
    def random_songs(self, scope: LibraryScope, count: int, server_max: int) -> list[MediaFile]:
        snap = self._store.snapshot
        if not scope.media_types:
            scope = LibraryScope(
                folders=scope.folders,
                media_types=(MediaType.MUSIC,),
                genre=scope.genre,
                artist=scope.artist,
            )
        candidates = [mf for mf in snap.media_files if media_files_ops.matches_scope(mf, scope, snap)]
        return self._rng.sample(candidates, min(count, server_max, len(candidates)))

    def random_albums(self, scope: LibraryScope, count: int, server_max: int) -> list[Album]:
        candidates = [a for a in self._store.snapshot.albums if albums_ops.matches_scope(a, scope)]
        return self._rng.sample(candidates, min(count, server_max, len(candidates)))
