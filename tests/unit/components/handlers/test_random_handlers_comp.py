"""
Unit tests for mediabrowse.components.handlers.random_handlers_comp module.

Random listings differ between calls, so these tests check windows, totals
and membership rather than order.
"""

from __future__ import annotations

import pytest
from conftest import StaticSettings, node_ids

from mediabrowse.helpers.exceptions import NotFoundError
from mediabrowse.services.content_directory_svc import ContentDirectoryService

MUSIC_SONGS = {"folder/103", "folder/104", "folder/107", "folder/108", "folder/109"}


class TestRandomSong:
    """Tests for random songs."""

    @pytest.mark.unit
    def test_sample_of_music(self, content_directory: ContentDirectoryService) -> None:
        """Songs are drawn from music files only and are distinct within a page."""
        result = content_directory.browse("randomSong", offset=0, count=3)
        assert result.total_matches == 5
        ids = node_ids(result)
        assert len(ids) == len(set(ids)) == 3
        assert set(ids) <= MUSIC_SONGS
        assert {n.parent_id for n in result.nodes} == {"randomSong"}

    @pytest.mark.unit
    def test_random_max_caps_total_and_window(
        self, settings: StaticSettings, content_directory: ContentDirectoryService
    ) -> None:
        """random_max bounds both the reported total and the pages."""
        settings.update(random_max=2)
        assert content_directory.browse("randomSong").total_matches == 2
        assert content_directory.browse("randomSong", offset=1, count=10).count == 1
        assert content_directory.browse("randomSong", offset=2, count=10).count == 0

    @pytest.mark.unit
    def test_random_max_zero(self, settings: StaticSettings, content_directory: ContentDirectoryService) -> None:
        """random_max 0 disables the listing."""
        settings.update(random_max=0)
        result = content_directory.browse("randomSong")
        assert result.count == 0
        assert result.total_matches == 0

    @pytest.mark.unit
    def test_nothing_addressable(self, content_directory: ContentDirectoryService) -> None:
        """Random songs render under the folder view; randomSong/<id> does not exist."""
        with pytest.raises(NotFoundError):
            content_directory.browse("randomSong/103")


class TestRandomAlbum:
    """Tests for random albums."""

    @pytest.mark.unit
    def test_albums_then_songs(self, content_directory: ContentDirectoryService) -> None:
        """Random albums are ID3 albums whose songs are listed in track order."""
        result = content_directory.browse("randomAlbum")
        assert result.total_matches == 3
        assert sorted(node_ids(result)) == ["randomAlbum/10", "randomAlbum/11", "randomAlbum/12"]
        assert node_ids(content_directory.browse("randomAlbum/10")) == ["folder/104", "folder/103"]


class TestRandomSongByArtist:
    """Tests for random songs by artist."""

    @pytest.mark.unit
    def test_artists_then_songs(self, content_directory: ContentDirectoryService) -> None:
        """Artists are listed by name; their children are a sample of their music."""
        artists = content_directory.browse("rsbar")
        assert node_ids(artists) == ["rsbar/1", "rsbar/2", "rsbar/3"]
        assert [n.child_count for n in artists.nodes] == [2, 2, 0]

        songs = content_directory.browse("rsbar/1")
        assert set(node_ids(songs)) == {"folder/103", "folder/104"}
        assert songs.total_matches == 2
        assert {n.parent_id for n in songs.nodes} == {"rsbar/1"}


class TestRandomSongByFolderArtist:
    """Tests for random songs by folder and artist."""

    @pytest.mark.unit
    def test_folder_artist_ids(self, content_directory: ContentDirectoryService) -> None:
        """Artists inside a folder carry "far:" ids; their song count is the random total."""
        artists = content_directory.browse("rsbfar/1")
        assert node_ids(artists) == ["rsbfar/far:1;1", "rsbfar/far:1;2"]
        assert [n.child_count for n in artists.nodes] == [2, 2]
        songs = content_directory.browse("rsbfar/far:1;2")
        assert set(node_ids(songs)) == {"folder/107", "folder/108"}


class TestRandomSongByGenre:
    """Tests for random songs by genre, flat and by folder."""

    @pytest.mark.unit
    def test_genre_sample(self, content_directory: ContentDirectoryService) -> None:
        """A genre's children are a sample of its songs."""
        assert node_ids(content_directory.browse("rsbg")) == ["rsbg/Jazz", "rsbg/Pop"]
        songs = content_directory.browse("rsbg/Pop")
        assert set(node_ids(songs)) == {"folder/103", "folder/104"}
        assert songs.total_matches == 2

    @pytest.mark.unit
    def test_folder_genre_sample(self, content_directory: ContentDirectoryService) -> None:
        """Genres inside a folder are sampled within that folder."""
        assert node_ids(content_directory.browse("rsbfg/1")) == ["rsbfg/fg:1;Jazz", "rsbfg/fg:1;Pop"]
        songs = content_directory.browse("rsbfg/fg:1;Jazz", offset=0, count=1)
        assert songs.count == 1
        assert songs.total_matches == 2
