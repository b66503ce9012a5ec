"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Real in-memory library built from plain dicts (no YAML on disk unless a test wants it)
- Settings and text resources are small static providers that tests can swap
- MagicMock only where a collaborator failure has to be simulated
"""

from __future__ import annotations

import copy
import random
from dataclasses import fields, replace
from typing import Any

import pytest

from mediabrowse.components.browse.node_factory_comp import NodeFactory
from mediabrowse.helpers.dto.browse_dto import BrowseResult
from mediabrowse.helpers.dto.config_dto import BrowseSettings, MenuToggles
from mediabrowse.persistence.library import MemoryLibrary
from mediabrowse.persistence.memory.store import snapshot_from_dict
from mediabrowse.services.content_directory_svc import ContentDirectoryService
from mediabrowse.services.text_resources_svc import DEFAULT_TITLES

BASE_URL = "http://media.test:4040"

# Two folders: "Music" holds two artist directories, a loose song and a
# video; "Books" holds one audiobook.
LIBRARY_DATA: dict[str, Any] = {
    "folders": [
        {"id": 1, "name": "Music", "path": "/music"},
        {"id": 2, "name": "Books", "path": "/books"},
    ],
    "artists": [
        {"id": 1, "name": "ABBA", "album_count": 1, "folder_ids": [1]},
        {"id": 2, "name": "John Coltrane", "album_count": 1, "folder_ids": [1], "cover_art_path": "/art/jc.jpg"},
        {"id": 3, "name": "Tolkien", "album_count": 1, "folder_ids": [2]},
    ],
    "albums": [
        {
            "id": 10,
            "name": "Arrival",
            "artist": "ABBA",
            "artist_id": 1,
            "song_count": 2,
            "year": 1976,
            "genre": "Pop",
            "folder_id": 1,
            "created": 100,
        },
        {
            "id": 11,
            "name": "Blue Train",
            "artist": "John Coltrane",
            "artist_id": 2,
            "song_count": 2,
            "year": 1957,
            "genre": "Jazz",
            "folder_id": 1,
            "created": 200,
        },
        {
            "id": 12,
            "name": "The Hobbit",
            "artist": "Tolkien",
            "artist_id": 3,
            "song_count": 1,
            "genre": "Fantasy",
            "folder_id": 2,
            "created": 50,
        },
    ],
    "media_files": [
        {"id": 100, "path": "/music", "media_type": "DIRECTORY", "title": "music", "folder_id": 1},
        {"id": 200, "path": "/books", "media_type": "DIRECTORY", "title": "books", "folder_id": 2},
        {
            "id": 101,
            "path": "/music/ABBA",
            "media_type": "DIRECTORY",
            "title": "ABBA",
            "folder_id": 1,
            "parent_id": 100,
        },
        {
            "id": 102,
            "path": "/music/ABBA/Arrival",
            "media_type": "ALBUM",
            "title": "Arrival",
            "folder_id": 1,
            "parent_id": 101,
            "genre": "Pop",
            "year": 1976,
        },
        {
            "id": 103,
            "path": "/music/ABBA/Arrival/02.mp3",
            "media_type": "MUSIC",
            "title": "Dancing Queen",
            "folder_id": 1,
            "parent_id": 102,
            "artist": "ABBA",
            "album_name": "Arrival",
            "album_id": 10,
            "artist_id": 1,
            "genre": "Pop",
            "year": 1976,
            "track_number": 2,
            "duration_seconds": 231,
            "format": "mp3",
            "file_size": 5_000_000,
        },
        {
            "id": 104,
            "path": "/music/ABBA/Arrival/01.mp3",
            "media_type": "MUSIC",
            "title": "When I Kissed the Teacher",
            "folder_id": 1,
            "parent_id": 102,
            "artist": "ABBA",
            "album_name": "Arrival",
            "album_id": 10,
            "artist_id": 1,
            "genre": "Pop",
            "track_number": 1,
            "format": "mp3",
        },
        {
            "id": 105,
            "path": "/music/Coltrane",
            "media_type": "DIRECTORY",
            "title": "Coltrane",
            "folder_id": 1,
            "parent_id": 100,
        },
        {
            "id": 106,
            "path": "/music/Coltrane/Blue Train",
            "media_type": "ALBUM",
            "title": "Blue Train",
            "folder_id": 1,
            "parent_id": 105,
            "genre": "Jazz",
        },
        {
            "id": 107,
            "path": "/music/Coltrane/Blue Train/02.flac",
            "media_type": "MUSIC",
            "title": "Moment's Notice",
            "folder_id": 1,
            "parent_id": 106,
            "artist": "John Coltrane",
            "album_name": "Blue Train",
            "album_id": 11,
            "artist_id": 2,
            "genre": "Jazz",
            "track_number": 2,
            "format": "flac",
        },
        {
            "id": 108,
            "path": "/music/Coltrane/Blue Train/01.flac",
            "media_type": "MUSIC",
            "title": "Blue Train",
            "folder_id": 1,
            "parent_id": 106,
            "artist": "John Coltrane",
            "album_name": "Blue Train",
            "album_id": 11,
            "artist_id": 2,
            "genre": "Jazz",
            "track_number": 1,
            "format": "flac",
        },
        {
            "id": 109,
            "path": "/music/loose.mp3",
            "media_type": "MUSIC",
            "title": "Loose Track",
            "folder_id": 1,
            "parent_id": 100,
            "format": "mp3",
        },
        {
            "id": 110,
            "path": "/music/clip.mp4",
            "media_type": "VIDEO",
            "title": "Clip",
            "folder_id": 1,
            "parent_id": 100,
            "format": "mp4",
        },
        {
            "id": 201,
            "path": "/books/Tolkien",
            "media_type": "DIRECTORY",
            "title": "Tolkien",
            "folder_id": 2,
            "parent_id": 200,
        },
        {
            "id": 202,
            "path": "/books/Tolkien/hobbit.m4a",
            "media_type": "AUDIOBOOK",
            "title": "The Hobbit",
            "folder_id": 2,
            "parent_id": 201,
            "artist": "Tolkien",
            "album_name": "The Hobbit",
            "album_id": 12,
            "artist_id": 3,
            "genre": "Fantasy",
            "format": "m4a",
        },
    ],
    "playlists": [
        {"id": 1, "name": "Favourites", "song_ids": [103, 108, 999]},
    ],
    "podcast_channels": [
        {"id": 4, "title": "Jazz Talk", "description": "Weekly"},
    ],
    "podcast_episodes": [
        {"id": 12, "channel_id": 4, "title": "Episode 12", "published": 20},
        {"id": 11, "channel_id": 4, "title": "Episode 11", "published": 10},
    ],
}


class StaticSettings:
    """SettingsProvider returning whatever BrowseSettings the test put in."""

    def __init__(self, settings: BrowseSettings | None = None) -> None:
        self.current = settings or BrowseSettings(base_url=BASE_URL)

    def get_browse_settings(self) -> BrowseSettings:
        return self.current

    def update(self, **changes: Any) -> None:
        self.current = replace(self.current, **changes)

    def toggle(self, **toggles: bool) -> None:
        self.current = replace(self.current, menu=replace(self.current.menu, **toggles))


class StaticTitles:
    """TextResources backed by the default English titles."""

    def get_text(self, key: str) -> str:
        return DEFAULT_TITLES.get(key, key)


def all_menu_toggles(enabled: bool) -> MenuToggles:
    return MenuToggles(**{f.name: enabled for f in fields(MenuToggles)})


def node_ids(result: BrowseResult) -> list[str]:
    return [node.id for node in result.nodes]


@pytest.fixture
def library_data() -> dict[str, Any]:
    """A private copy of the sample library; tests may edit it before building."""
    return copy.deepcopy(LIBRARY_DATA)


@pytest.fixture
def library(library_data: dict[str, Any]) -> MemoryLibrary:
    return MemoryLibrary(snapshot_from_dict(library_data), rng=random.Random(7))


@pytest.fixture
def settings() -> StaticSettings:
    return StaticSettings()


@pytest.fixture
def titles() -> StaticTitles:
    return StaticTitles()


@pytest.fixture
def factory(settings: StaticSettings) -> NodeFactory:
    return NodeFactory(settings)


@pytest.fixture
def handler_args(library: MemoryLibrary, factory: NodeFactory, settings: StaticSettings, titles: StaticTitles):
    """Constructor arguments shared by every NodeHandlerBase subclass."""
    return (library.collaborators(), factory, settings, titles)


@pytest.fixture
def content_directory(
    library: MemoryLibrary, factory: NodeFactory, settings: StaticSettings, titles: StaticTitles
) -> ContentDirectoryService:
    return ContentDirectoryService.build(library.collaborators(), factory, settings, titles)


@pytest.fixture
def make_content_directory(factory: NodeFactory, settings: StaticSettings, titles: StaticTitles):
    """Build a content directory over a library the test describes itself."""

    def make(data: dict[str, Any]) -> ContentDirectoryService:
        library = MemoryLibrary(snapshot_from_dict(data), rng=random.Random(7))
        return ContentDirectoryService.build(library.collaborators(), factory, settings, titles)

    return make


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast tests with no external services")
