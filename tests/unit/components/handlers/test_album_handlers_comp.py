"""
Unit tests for mediabrowse.components.handlers.album_handlers_comp module.

Browses go through the content directory so ids, parents and counts are
checked as a control point sees them.
"""

from __future__ import annotations

from typing import Any

import pytest
from conftest import StaticSettings, node_ids

from mediabrowse.components.browse.node_factory_comp import CLASS_MUSIC_ALBUM
from mediabrowse.helpers.dto.browse_dto import BrowseFlag
from mediabrowse.helpers.exceptions import NotFoundError
from mediabrowse.persistence.library import MemoryLibrary
from mediabrowse.services.content_directory_svc import ContentDirectoryService


def _many_albums(n: int) -> dict[str, Any]:
    return {
        "folders": [{"id": 1, "name": "Music", "path": "/music"}],
        "albums": [
            {"id": i, "name": f"Album {i:03d}", "folder_id": 1, "created": i, "song_count": 0} for i in range(1, n + 1)
        ],
        "media_files": [{"id": 1000, "path": "/music", "media_type": "DIRECTORY", "title": "music", "folder_id": 1}]
        + [
            {
                "id": 1000 + i,
                "path": f"/music/a{i}",
                "media_type": "ALBUM",
                "title": f"Album {i:03d}",
                "folder_id": 1,
                "parent_id": 1000,
                "created": i,
            }
            for i in range(1, n + 1)
        ],
    }


class TestAlbumHandler:
    """Tests for the file-structure album view."""

    @pytest.mark.unit
    def test_lists_album_directories(self, content_directory: ContentDirectoryService) -> None:
        """Album directories of every folder, alphabetical."""
        result = content_directory.browse("album")
        assert node_ids(result) == ["album/102", "album/106"]
        assert result.total_matches == 2
        assert result.nodes[0].upnp_class == CLASS_MUSIC_ALBUM
        assert result.nodes[0].child_count == 2

    @pytest.mark.unit
    def test_album_songs_in_track_order(self, content_directory: ContentDirectoryService) -> None:
        """Songs of an album are listed by track and rendered as folder items."""
        result = content_directory.browse("album/102")
        assert node_ids(result) == ["folder/104", "folder/103"]
        assert {n.parent_id for n in result.nodes} == {"album/102"}
        assert result.total_matches == 2

    @pytest.mark.unit
    def test_song_is_not_an_album(self, content_directory: ContentDirectoryService) -> None:
        """A plain file id is not an album."""
        with pytest.raises(NotFoundError):
            content_directory.browse("album/103")


class TestAlbumId3Handler:
    """Tests for the ID3 album view."""

    @pytest.mark.unit
    def test_lists_albums(self, content_directory: ContentDirectoryService) -> None:
        """ID3 albums of every folder, alphabetical."""
        result = content_directory.browse("alid3")
        assert node_ids(result) == ["alid3/10", "alid3/11", "alid3/12"]
        assert [n.title for n in result.nodes] == ["Arrival", "Blue Train", "The Hobbit"]

    @pytest.mark.unit
    def test_album_metadata(self, content_directory: ContentDirectoryService) -> None:
        """Metadata browse of an album renders the album container."""
        result = content_directory.browse("alid3/10", BrowseFlag.METADATA)
        (node,) = result.nodes
        assert node.id == "alid3/10"
        assert node.parent_id == "alid3"
        assert node.child_count == 2
        assert node.date == "1976-01-01"

    @pytest.mark.unit
    def test_missing_album(self, content_directory: ContentDirectoryService) -> None:
        """An unknown album id is not found."""
        with pytest.raises(NotFoundError):
            content_directory.browse("alid3/99")


class TestRecentAlbums:
    """Recent views are cut at recent_max."""

    @pytest.mark.unit
    def test_recent_id3_window(self, make_content_directory) -> None:
        """120 albums, recent_max 50: total 50 and (45, 10) returns 5."""
        directory = make_content_directory(_many_albums(120))
        assert directory.browse("recentId3", offset=0, count=0).total_matches == 50

        result = directory.browse("recentId3", offset=45, count=10)
        assert result.total_matches == 50
        assert node_ids(result) == [f"recentId3/{i}" for i in range(75, 70, -1)]

        assert directory.browse("recentId3", offset=50, count=10).count == 0

    @pytest.mark.unit
    def test_recent_directories_window(self, make_content_directory, settings: StaticSettings) -> None:
        """The file-structure recent view obeys the same window."""
        settings.update(recent_max=3)
        directory = make_content_directory(_many_albums(10))
        result = directory.browse("recent", offset=0, count=0)
        assert result.total_matches == 3
        assert node_ids(result) == ["recent/1010", "recent/1009", "recent/1008"]

    @pytest.mark.unit
    def test_recent_by_folder_collapsed(self, make_content_directory) -> None:
        """With one folder the recent-by-folder view lists albums directly, cut at recent_max."""
        directory = make_content_directory(_many_albums(60))
        result = directory.browse("recentId3bf", offset=48, count=10)
        assert result.total_matches == 50
        assert node_ids(result) == ["recentId3bf/al:12", "recentId3bf/al:11"]

    @pytest.mark.unit
    def test_small_library_reports_actual_count(self, content_directory: ContentDirectoryService) -> None:
        """Fewer albums than recent_max report their own number, newest first."""
        result = content_directory.browse("recentId3")
        assert result.total_matches == 3
        assert node_ids(result) == ["recentId3/11", "recentId3/10", "recentId3/12"]


class TestAlbumId3ByFolder:
    """Folder x album."""

    @pytest.mark.unit
    def test_several_folders(self, content_directory: ContentDirectoryService) -> None:
        """Folders first, then the albums of a folder carrying the folder id."""
        assert node_ids(content_directory.browse("alid3bf")) == ["alid3bf/1", "alid3bf/2"]
        result = content_directory.browse("alid3bf/1")
        assert node_ids(result) == ["alid3bf/fal:1;10", "alid3bf/fal:1;11"]
        assert {n.parent_id for n in result.nodes} == {"alid3bf/1"}

        songs = content_directory.browse("alid3bf/fal:1;11")
        assert node_ids(songs) == ["folder/108", "folder/107"]
        assert songs.nodes[0].parent_id == "alid3bf/fal:1;11"

    @pytest.mark.unit
    def test_single_folder_collapses(self, library: MemoryLibrary, content_directory: ContentDirectoryService) -> None:
        """With one folder the albums are the direct children."""
        library.configure_folders([1])
        result = content_directory.browse("alid3bf")
        assert node_ids(result) == ["alid3bf/al:10", "alid3bf/al:11"]
        assert {n.parent_id for n in result.nodes} == {"alid3bf"}
        assert content_directory.browse("alid3bf/al:10").total_matches == 2
