"""
Genre views over a library where song genres differ from album genres.

"When I Kissed the Teacher" is tagged Jazz inside the Pop album "Arrival",
so song facets, album tags and album listings no longer line up one to one.
Every genre container must still report the child count its own browse
returns.
"""

from __future__ import annotations

from typing import Any

import pytest
from conftest import StaticSettings, all_menu_toggles, node_ids

from mediabrowse.helpers.dto.browse_dto import BrowseNode, NodeType
from mediabrowse.persistence.library import MemoryLibrary
from mediabrowse.services.content_directory_svc import ContentDirectoryService

FOLDER_GENRE_VIEWS = [
    NodeType.ALBUM_ID3_BY_FOLDER_GENRE,
    NodeType.SONG_BY_FOLDER_GENRE,
    NodeType.RANDOM_SONG_BY_FOLDER_GENRE,
]


@pytest.fixture
def library_data(library_data: dict[str, Any]) -> dict[str, Any]:
    for media_file in library_data["media_files"]:
        if media_file["id"] == 104:
            media_file["genre"] = "Jazz"
    return library_data


@pytest.fixture(params=[None, [1]], ids=["all-folders", "one-folder"])
def configured(request, library: MemoryLibrary, settings: StaticSettings) -> None:
    settings.update(menu=all_menu_toggles(True))
    library.configure_folders(request.param)


def _containers(directory: ContentDirectoryService, object_id: str, depth: int) -> list[BrowseNode]:
    """Every container reachable from object_id within depth levels."""
    found: list[BrowseNode] = []
    for node in directory.browse(object_id).nodes:
        if node.container:
            found.append(node)
            if depth > 1:
                found.extend(_containers(directory, node.id, depth - 1))
    return found


class TestMixedGenreConsistency:
    @pytest.mark.unit
    def test_album_genre_count_matches_listing(self, content_directory: ContentDirectoryService) -> None:
        """Albums are listed under their own genre; the count follows the listing."""
        genres = {node.id: node for node in content_directory.browse("aibfg/1").nodes}
        jazz = genres["aibfg/fg:1;Jazz"]
        albums = content_directory.browse("aibfg/fg:1;Jazz")
        assert node_ids(albums) == ["aibfg/fga:1;11;Jazz"]
        assert jazz.child_count == albums.total_matches == 1

    @pytest.mark.unit
    def test_song_genre_follows_song_tag(self, content_directory: ContentDirectoryService) -> None:
        songs = content_directory.browse("sbfg/fg:1;Jazz")
        assert sorted(node_ids(songs)) == ["folder/104", "folder/107", "folder/108"]
        assert songs.total_matches == 3

    @pytest.mark.unit
    @pytest.mark.parametrize("node_type", FOLDER_GENRE_VIEWS, ids=lambda nt: nt.value)
    def test_child_count_matches_browse(
        self, configured: None, content_directory: ContentDirectoryService, node_type: NodeType
    ) -> None:
        """Folder, genre and album containers all agree with their own browse."""
        containers = _containers(content_directory, node_type.value, depth=3)
        assert containers
        for node in containers:
            children = content_directory.browse(node.id)
            assert children.total_matches == node.child_count, node.id
            assert children.count == children.total_matches, node.id
