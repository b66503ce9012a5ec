"""
Unit tests for the Windows Media Player search pre-filter.
"""

from __future__ import annotations

import logging

import pytest

from mediabrowse.components.browse.node_factory_comp import NodeFactory
from mediabrowse.helpers.dto.browse_dto import BrowseResult
from mediabrowse.persistence.library import MemoryLibrary
from mediabrowse.workflows.browse.wmp_prefilter_wf import (
    FILTER_ALL,
    FILTER_FOLDER_PATH,
    QUERY_AUDIO_ITEM_ALL,
    QUERY_IMAGE_ITEM_ALL,
    QUERY_PLAYLIST_CONTAINER_ALL,
    QUERY_VIDEO_ITEM_ALL,
    is_wmp_filter,
    wmp_prefilter,
)

AUDIO_BY_TITLE = ["folder/108", "folder/103", "folder/109", "folder/107", "folder/202", "folder/104"]


@pytest.fixture
def prefilter(library: MemoryLibrary, factory: NodeFactory):
    folders = tuple(library.folders.list_configured_folders())

    def run(query: str, filter: str | None, offset: int = 0, count: int = 100) -> BrowseResult | None:
        def render(mf):
            return factory.media_item(mf, parent_id="folder")

        return wmp_prefilter(query, filter, offset, count, library.media_files, folders, render)

    return run


class TestIsWmpFilter:
    @pytest.mark.unit
    def test_known_filters(self) -> None:
        assert is_wmp_filter(FILTER_ALL)
        assert is_wmp_filter(FILTER_FOLDER_PATH)
        assert not is_wmp_filter(None)
        assert not is_wmp_filter("dc:title")


class TestWmpPrefilter:
    """Tests for wmp_prefilter."""

    @pytest.mark.unit
    def test_folder_path_crawl_is_empty(self, prefilter) -> None:
        """The folder path crawl is always answered empty, whatever the query."""
        assert prefilter(QUERY_PLAYLIST_CONTAINER_ALL, FILTER_FOLDER_PATH) == BrowseResult.empty()
        assert prefilter("anything", FILTER_FOLDER_PATH) == BrowseResult.empty()

    @pytest.mark.unit
    def test_audio_crawl(self, prefilter) -> None:
        """Every audio file, by title, with the full count as total."""
        result = prefilter(QUERY_AUDIO_ITEM_ALL, FILTER_ALL)
        assert [n.id for n in result.nodes] == AUDIO_BY_TITLE
        assert result.total_matches == 6

    @pytest.mark.unit
    def test_audio_crawl_paged(self, prefilter) -> None:
        result = prefilter(QUERY_AUDIO_ITEM_ALL, FILTER_ALL, offset=4, count=10)
        assert [n.id for n in result.nodes] == AUDIO_BY_TITLE[4:]
        assert result.total_matches == 6

    @pytest.mark.unit
    def test_crawl_logs_progress(self, prefilter, caplog: pytest.LogCaptureFixture) -> None:
        """The first page of a crawl is announced."""
        with caplog.at_level(logging.INFO, logger="mediabrowse.workflows.browse.wmp_prefilter_wf"):
            prefilter(QUERY_AUDIO_ITEM_ALL, FILTER_ALL, offset=0, count=2)
        assert any("crawling started" in r.getMessage() for r in caplog.records)

    @pytest.mark.unit
    def test_video_crawl(self, prefilter) -> None:
        result = prefilter(QUERY_VIDEO_ITEM_ALL, FILTER_ALL)
        assert [n.id for n in result.nodes] == ["folder/110"]
        assert result.total_matches == 1

    @pytest.mark.unit
    def test_image_crawl_is_empty(self, prefilter) -> None:
        assert prefilter(QUERY_IMAGE_ITEM_ALL, FILTER_ALL) == BrowseResult.empty()

    @pytest.mark.unit
    def test_single_song(self, prefilter) -> None:
        """A numeric title asks for that one song."""
        result = prefilter('dc:title = "103"', FILTER_ALL)
        assert [n.id for n in result.nodes] == ["folder/103"]
        assert result.total_matches == 1

    @pytest.mark.unit
    @pytest.mark.parametrize("media_file_id", ["110", "100", "999"])
    def test_single_non_song_is_empty(self, prefilter, media_file_id: str) -> None:
        """Videos, directories and unknown ids give an empty answer, not an error."""
        assert prefilter(f'dc:title = "{media_file_id}"', FILTER_ALL) == BrowseResult.empty()

    @pytest.mark.unit
    def test_other_requests_fall_through(self, prefilter) -> None:
        """Anything else is left to the generic search."""
        assert prefilter(QUERY_AUDIO_ITEM_ALL, None) is None
        assert prefilter('upnp:class derivedfrom "object.item.audioItem"', FILTER_ALL) is None
