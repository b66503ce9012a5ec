"""
UPnP search criteria parsing workflow.

Reads the subset of the ContentDirectory SearchCriteria grammar that control
points send for music search:

    upnp:class derivedfrom "object.container.person.musicArtist"
        and (dc:title contains "beat" or upnp:artist contains "beat")

- upnp:class clauses pick the search target. derivedfrom accepts the
  artist, album, audioItem, musicTrack and videoItem branches; "=" accepts
  the leaf classes. Two derivedfrom clauses joined by "or" are accepted when
  both are item classes (MediaMonkey asks for audio or video in one query).
- property clauses (contains or =) on dc:title, dc:creator, upnp:artist,
  upnp:albumArtist, upnp:album and upnp:genre become search terms. Any "or"
  between them makes a hit on a single term sufficient.

Artist and album classes map to the file-structure or the ID3 target
depending on the configured search method.
"""

from __future__ import annotations

import logging
import re

from mediabrowse.helpers.dto.config_dto import SearchMethod
from mediabrowse.helpers.dto.library_dto import MediaType, MusicFolder
from mediabrowse.helpers.dto.search_dto import SearchCriteria, SearchTarget, SearchTerm
from mediabrowse.helpers.exceptions import SearchCriteriaError

logger = logging.getLogger(__name__)

_QUOTED = r'"((?:[^"\\]|\\.)*)"'
_CLASS_CLAUSE = re.compile(r"upnp:class\s+(derivedfrom|=)\s+" + _QUOTED)
_PROPERTY_CLAUSE = re.compile(r"([a-z]+:[A-Za-z]+)\s+(contains|=)\s+" + _QUOTED)
_OR = re.compile(r"\bor\b")

_FIELDS = {
    "dc:title": "title",
    "dc:creator": "artist",
    "upnp:artist": "artist",
    "upnp:albumArtist": "artist",
    "upnp:album": "album",
    "upnp:genre": "genre",
}

_ARTIST_CLASSES = {"object.container.person", "object.container.person.musicArtist"}
_ALBUM_CLASSES = {"object.container.album", "object.container.album.musicAlbum"}

# derivedfrom: class -> media types of an item search
_DERIVED_ITEM_CLASSES: dict[str, tuple[MediaType, ...]] = {
    "object.item.audioItem.musicTrack": (MediaType.MUSIC,),
    "object.item.audioItem": (MediaType.MUSIC, MediaType.PODCAST, MediaType.AUDIOBOOK),
    "object.item.videoItem": (MediaType.VIDEO,),
}

# "=": class -> media types of an item search
_EXACT_ITEM_CLASSES: dict[str, tuple[MediaType, ...]] = {
    "object.item.audioItem.musicTrack": (MediaType.MUSIC,),
    "object.item.audioItem.audioBroadcast": (MediaType.PODCAST,),
    "object.item.audioItem.audioBook": (MediaType.AUDIOBOOK,),
    "object.item.videoItem.movie": (MediaType.VIDEO,),
    "object.item.videoItem.videoBroadcast": (MediaType.VIDEO,),
    "object.item.videoItem.musicVideoClip": (MediaType.VIDEO,),
}


def _unescape(value: str) -> str:
    return re.sub(r"\\(.)", r"\1", value)


def _container_target(upnp_class: str, op: str, method: SearchMethod) -> SearchTarget | None:
    artist_classes = _ARTIST_CLASSES if op == "derivedfrom" else {"object.container.person.musicArtist"}
    album_classes = _ALBUM_CLASSES if op == "derivedfrom" else {"object.container.album.musicAlbum"}
    if upnp_class in artist_classes:
        return SearchTarget.ARTIST_ID3 if method == SearchMethod.ID3 else SearchTarget.ARTIST
    if upnp_class in album_classes:
        return SearchTarget.ALBUM_ID3 if method == SearchMethod.ID3 else SearchTarget.ALBUM
    return None


def _item_types(upnp_class: str, op: str) -> tuple[MediaType, ...] | None:
    table = _DERIVED_ITEM_CLASSES if op == "derivedfrom" else _EXACT_ITEM_CLASSES
    return table.get(upnp_class)


def _resolve_target(
    clauses: list[tuple[str, str]], method: SearchMethod, query: str
) -> tuple[SearchTarget, tuple[MediaType, ...]]:
    if not clauses:
        msg = f"Search query has no upnp:class clause: {query!r}"
        raise SearchCriteriaError(msg)
    if len(clauses) == 1:
        op, upnp_class = clauses[0]
        target = _container_target(upnp_class, op, method)
        if target is not None:
            return target, ()
        media_types = _item_types(upnp_class, op)
        if media_types is None:
            msg = f"Unsupported search class: upnp:class {op} {upnp_class!r}"
            raise SearchCriteriaError(msg)
        if media_types == (MediaType.VIDEO,):
            return SearchTarget.VIDEO, media_types
        return SearchTarget.SONG, media_types
    combined: list[MediaType] = []
    for op, upnp_class in clauses:
        media_types = _item_types(upnp_class, op) if op == "derivedfrom" else None
        if media_types is None:
            msg = f"Unsupported compound class expression: {query!r}"
            raise SearchCriteriaError(msg)
        combined.extend(t for t in media_types if t not in combined)
    return SearchTarget.SONG, tuple(combined)


def parse_search_criteria(
    query: str,
    method: SearchMethod,
    offset: int,
    count: int,
    folders: tuple[MusicFolder, ...] = (),
) -> SearchCriteria:
    """
    Parse a UPnP search query.

    Args:
        query: SearchCriteria argument of the Search action
        method: Configured search method (file structure or ID3)
        offset: Index of the first hit to return
        count: Number of hits to return, already clipped by the caller
        folders: Folders the search is restricted to

    Returns:
        SearchCriteria for the search collaborator

    Raises:
        SearchCriteriaError: If the query names an unsupported class or property
    """
    clauses = [(m.group(1), _unescape(m.group(2))) for m in _CLASS_CLAUSE.finditer(query)]
    target, media_types = _resolve_target(clauses, method, query)

    remainder = _CLASS_CLAUSE.sub("", query)
    terms = []
    any_term = False
    previous_end = None
    for match in _PROPERTY_CLAUSE.finditer(remainder):
        if previous_end is not None and _OR.search(remainder[previous_end : match.start()]):
            any_term = True
        previous_end = match.end()
        prop, op, value = match.group(1), match.group(2), _unescape(match.group(3))
        field = _FIELDS.get(prop)
        if field is None:
            msg = f"Unsupported search property: {prop}"
            raise SearchCriteriaError(msg)
        terms.append(SearchTerm(field=field, value=value, exact=op == "="))

    logger.debug(f"[Search] {query!r} -> {target.value}, {len(terms)} terms")
    return SearchCriteria(
        target=target,
        terms=tuple(terms),
        offset=offset,
        count=count,
        any_term=any_term,
        media_types=media_types,
        folders=folders,
    )
