"""
Windows Media Player search pre-filter workflow.

WMP crawls a media server with a handful of fixed search requests instead of
browsing it. They are recognized by the filter argument and answered here
directly, before the generic search path runs:

    filter "dc:title,microsoft:folderPath"
        folder path crawl; always answered with an empty result
    filter "*"
        audioItem query   every song, paged (total = song count)
        videoItem query   every video, paged
        imageItem query   empty
        dc:title = "<n>"  the single song n (empty if n is not audio)

ARCHITECTURE:
- Pure workflow: callers pass the media file repository, the configured
  folders and the item renderer
- Returns None when the request is not a WMP request, so the caller can fall
  through to the generic search; an empty BrowseResult is a final answer

USAGE:
    from mediabrowse.workflows.browse.wmp_prefilter_wf import wmp_prefilter

    result = wmp_prefilter(query, filter, offset, count, media_files, folders, render)
    if result is None:
        ...  # generic search
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from mediabrowse.helpers.dto.browse_dto import BrowseNode, BrowseResult
from mediabrowse.helpers.dto.library_dto import AUDIO_TYPES, LibraryScope, ListOrder, MediaFile, MediaType, MusicFolder
from mediabrowse.persistence.contracts import MediaFileRepository

logger = logging.getLogger(__name__)

FILTER_FOLDER_PATH = "dc:title,microsoft:folderPath"
FILTER_ALL = "*"

QUERY_PLAYLIST_CONTAINER_ALL = (
    'upnp:class derivedfrom "object.container.playlistContainer" and @refID exists false'
)
QUERY_AUDIO_ITEM_ALL = 'upnp:class derivedfrom "object.item.audioItem" and @refID exists false'
QUERY_VIDEO_ITEM_ALL = 'upnp:class derivedfrom "object.item.videoItem" and @refID exists false'
QUERY_IMAGE_ITEM_ALL = 'upnp:class derivedfrom "object.item.imageItem" and @refID exists false'
QUERY_AUDIO_ITEM_SINGLE = re.compile(r'dc:title = "([0-9]+)"')

PROGRESS_INTERVAL = 1000


def is_wmp_filter(filter: str | None) -> bool:
    return filter in (FILTER_FOLDER_PATH, FILTER_ALL)


def _crawl(
    label: str,
    scope: LibraryScope,
    offset: int,
    count: int,
    media_files: MediaFileRepository,
    render: Callable[[MediaFile], BrowseNode],
) -> BrowseResult:
    if offset == 0:
        logger.info(f"[WMP] {label} crawling started")
    records = media_files.list_media_files(scope, offset, count)
    total = media_files.count_media_files(scope)
    end = offset + len(records)
    if offset % PROGRESS_INTERVAL == 0 or len(records) != count or end == total:
        percent = round(end / total * 100) if total else 100
        logger.info(f"[WMP] {label} {offset}-{end}/{total} ({percent}%)")
    return BrowseResult(nodes=tuple(render(mf) for mf in records), total_matches=total)


def _single_song(
    query: str, song_id: int, media_files: MediaFileRepository, render: Callable[[MediaFile], BrowseNode]
) -> BrowseResult:
    media_file = media_files.get_media_file(song_id)
    if media_file is not None and media_file.is_audio:
        return BrowseResult(nodes=(render(media_file),), total_matches=1)
    logger.debug(f"[WMP] Unexpected object: filter={FILTER_ALL}, query={query}")
    return BrowseResult.empty()


def wmp_prefilter(
    query: str,
    filter: str | None,
    offset: int,
    count: int,
    media_files: MediaFileRepository,
    folders: tuple[MusicFolder, ...],
    render: Callable[[MediaFile], BrowseNode],
) -> BrowseResult | None:
    """
    Answer a WMP crawl request.

    Returns:
        The result for a recognized request (possibly empty), None otherwise
    """
    if filter == FILTER_FOLDER_PATH:
        if query != QUERY_PLAYLIST_CONTAINER_ALL:
            logger.debug(f"[WMP] Unexpected query: filter={filter}, {query}")
        return BrowseResult.empty()
    if filter != FILTER_ALL:
        return None
    if query == QUERY_AUDIO_ITEM_ALL:
        scope = LibraryScope(folders=folders, media_types=tuple(AUDIO_TYPES), order=ListOrder.ALPHABETICAL)
        return _crawl("audioItem", scope, offset, count, media_files, render)
    if query == QUERY_VIDEO_ITEM_ALL:
        scope = LibraryScope(folders=folders, media_types=(MediaType.VIDEO,), order=ListOrder.ALPHABETICAL)
        return _crawl("videoItem", scope, offset, count, media_files, render)
    if query == QUERY_IMAGE_ITEM_ALL:
        return BrowseResult.empty()
    match = QUERY_AUDIO_ITEM_SINGLE.fullmatch(query)
    if match:
        return _single_song(query, int(match.group(1)), media_files, render)
    return None
