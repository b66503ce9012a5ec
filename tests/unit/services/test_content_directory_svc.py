"""
Unit tests for mediabrowse.services.content_directory_svc module.

Tests cover:
- Handler registry completeness
- Browse dispatch and request validation
- Error propagation from collaborators
- Search: WMP requests, target renderers, search_max clipping
"""

from __future__ import annotations

from dataclasses import replace
from unittest.mock import MagicMock

import pytest
from conftest import StaticSettings, node_ids

from mediabrowse.helpers.dto.browse_dto import NodeType
from mediabrowse.helpers.dto.config_dto import SearchMethod
from mediabrowse.helpers.exceptions import InvalidRequestError, SearchCriteriaError, UnknownNodeTypeError
from mediabrowse.persistence.library import MemoryLibrary
from mediabrowse.services.content_directory_svc import ContentDirectoryService
from mediabrowse.workflows.browse.wmp_prefilter_wf import FILTER_ALL, QUERY_AUDIO_ITEM_ALL

SONGS_WITH_E = 'upnp:class derivedfrom "object.item.audioItem" and dc:title contains "e"'


class TestRegistry:
    """Tests for handler registration."""

    @pytest.mark.unit
    def test_every_node_type_has_a_handler(self, content_directory: ContentDirectoryService) -> None:
        for node_type in NodeType:
            assert content_directory.find_handler(node_type).node_type == node_type

    @pytest.mark.unit
    def test_missing_handler_rejected(self, content_directory: ContentDirectoryService, library: MemoryLibrary) -> None:
        handlers = {nt: content_directory.find_handler(nt) for nt in NodeType if nt != NodeType.PODCAST}
        with pytest.raises(ValueError, match="podcast"):
            ContentDirectoryService(handlers, library.collaborators(), StaticSettings())

    @pytest.mark.unit
    def test_mismatched_handler_rejected(
        self, content_directory: ContentDirectoryService, library: MemoryLibrary
    ) -> None:
        handlers = {nt: content_directory.find_handler(nt) for nt in NodeType}
        handlers[NodeType.ALBUM] = content_directory.find_handler(NodeType.ARTIST)
        with pytest.raises(ValueError, match="registered as"):
            ContentDirectoryService(handlers, library.collaborators(), StaticSettings())


class TestBrowse:
    """Tests for ContentDirectoryService.browse request handling."""

    @pytest.mark.unit
    def test_unknown_token(self, content_directory: ContentDirectoryService) -> None:
        with pytest.raises(UnknownNodeTypeError) as exc_info:
            content_directory.browse("bogus/1")
        assert exc_info.value.token == "bogus"

    @pytest.mark.unit
    def test_unknown_browse_flag(self, content_directory: ContentDirectoryService) -> None:
        with pytest.raises(InvalidRequestError, match="BrowseEverything"):
            content_directory.browse("artist", "BrowseEverything")

    @pytest.mark.unit
    def test_flag_as_string(self, content_directory: ContentDirectoryService) -> None:
        """Flags arrive as plain strings from the wire."""
        (node,) = content_directory.browse("artist/2", "BrowseMetadata").nodes
        assert node.id == "artist/2"

    @pytest.mark.unit
    @pytest.mark.parametrize(("offset", "count"), [(-1, 0), (0, -5)])
    def test_negative_window(self, content_directory: ContentDirectoryService, offset: int, count: int) -> None:
        with pytest.raises(InvalidRequestError):
            content_directory.browse("artist", offset=offset, count=count)

    @pytest.mark.unit
    def test_count_zero_means_all(self, content_directory: ContentDirectoryService) -> None:
        """RequestedCount 0 returns every remaining child."""
        assert content_directory.browse("artist", offset=1, count=0).count == 2

    @pytest.mark.unit
    def test_collaborator_failure_propagates(
        self,
        library: MemoryLibrary,
        factory,
        settings: StaticSettings,
        titles,
    ) -> None:
        """A failing repository is not turned into an empty listing."""
        playlists = MagicMock()
        playlists.count_playlists.side_effect = RuntimeError("playlist store offline")
        playlists.list_playlists.side_effect = RuntimeError("playlist store offline")
        collaborators = replace(library.collaborators(), playlists=playlists)
        directory = ContentDirectoryService.build(collaborators, factory, settings, titles)

        with pytest.raises(RuntimeError, match="offline"):
            directory.browse("playlist")


class TestSearch:
    """Tests for ContentDirectoryService.search."""

    @pytest.mark.unit
    def test_songs(self, content_directory: ContentDirectoryService) -> None:
        """Songs match across every configured folder and render as folder items."""
        result = content_directory.search("0", SONGS_WITH_E)
        assert result.total_matches == 6
        assert result.count == 6
        assert all(n.id.startswith("folder/") for n in result.nodes)

    @pytest.mark.unit
    def test_clipped_to_search_max(self, settings: StaticSettings, content_directory: ContentDirectoryService) -> None:
        """Neither the total nor the window exceed search_max."""
        settings.update(search_max=2)
        result = content_directory.search("0", SONGS_WITH_E)
        assert result.total_matches == 2
        assert result.count == 2

        beyond = content_directory.search("0", SONGS_WITH_E, offset=2, count=10)
        assert beyond.count == 0
        assert beyond.total_matches == 2

    @pytest.mark.unit
    def test_exact_title_first(self, content_directory: ContentDirectoryService) -> None:
        query = 'upnp:class derivedfrom "object.item.audioItem" and dc:title contains "blue train"'
        assert node_ids(content_directory.search("0", query)) == ["folder/108"]

    @pytest.mark.unit
    def test_artist_directories(self, content_directory: ContentDirectoryService) -> None:
        """With the file structure method artists are top-level directories."""
        query = 'upnp:class derivedfrom "object.container.person.musicArtist" and dc:title contains "abba"'
        result = content_directory.search("0", query)
        assert node_ids(result) == ["folder/101"]
        assert result.nodes[0].container

    @pytest.mark.unit
    def test_id3_targets(self, settings: StaticSettings, content_directory: ContentDirectoryService) -> None:
        """With the ID3 method artists and albums render through their own views."""
        settings.update(search_method=SearchMethod.ID3)
        artists = 'upnp:class derivedfrom "object.container.person.musicArtist" and dc:title contains "coltrane"'
        albums = 'upnp:class = "object.container.album.musicAlbum" and dc:title contains "hobbit"'
        assert node_ids(content_directory.search("0", artists)) == ["artist/2"]
        assert node_ids(content_directory.search("0", albums)) == ["alid3/12"]

    @pytest.mark.unit
    def test_restricted_to_configured_folders(
        self, library: MemoryLibrary, content_directory: ContentDirectoryService
    ) -> None:
        library.configure_folders([2])
        assert node_ids(content_directory.search("0", SONGS_WITH_E)) == ["folder/202"]

    @pytest.mark.unit
    def test_wmp_crawl_answered_first(
        self, settings: StaticSettings, content_directory: ContentDirectoryService
    ) -> None:
        """WMP crawls are not clipped to search_max."""
        settings.update(search_max=1)
        result = content_directory.search("0", QUERY_AUDIO_ITEM_ALL, FILTER_ALL)
        assert result.total_matches == 6

    @pytest.mark.unit
    def test_unsupported_query(self, content_directory: ContentDirectoryService) -> None:
        with pytest.raises(SearchCriteriaError):
            content_directory.search("0", 'upnp:class derivedfrom "object.item.imageItem"')

    @pytest.mark.unit
    def test_unknown_container(self, content_directory: ContentDirectoryService) -> None:
        with pytest.raises(UnknownNodeTypeError):
            content_directory.search("bogus", SONGS_WITH_E)

    @pytest.mark.unit
    def test_search_index_failure_propagates(
        self, library: MemoryLibrary, factory, settings: StaticSettings, titles
    ) -> None:
        index = MagicMock()
        index.search.side_effect = RuntimeError("index offline")
        collaborators = replace(library.collaborators(), search=index)
        directory = ContentDirectoryService.build(collaborators, factory, settings, titles)

        with pytest.raises(RuntimeError, match="index offline"):
            directory.search("0", SONGS_WITH_E)
