"""
Random handlers.

Every listing here is a fresh sample drawn by the search index, so two pages
of the same view are not guaranteed to be disjoint. What stays stable is the
window: a view never exposes more than random_max records, and the count it
reports is the collaborator count cut at random_max.

    randomSong   random songs (leaf only, no containers)
    randomAlbum  random ID3 albums, then their songs
    rsbar        artists, then random songs of the artist
    rsbfar       folder x artist, then random songs of the artist in the folder
    rsbg         genres, then random songs of the genre
    rsbfg        folder x genre, then random songs of the genre in the folder
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from mediabrowse.components.browse.cross_axis_comp import ArtistAxis, CrossAxisLogic, FolderScoped, GenreAxis
from mediabrowse.components.browse.node_handler_comp import NodeHandlerBase
from mediabrowse.components.handlers.genre_handlers_comp import GenreHandlerBase
from mediabrowse.helpers.dto.browse_dto import BrowseNode, NodeType
from mediabrowse.helpers.dto.library_dto import (
    Album,
    Artist,
    Genre,
    LibraryScope,
    ListOrder,
    MediaFile,
    MediaType,
    MusicFolder,
)
from mediabrowse.helpers.exceptions import NotFoundError
from mediabrowse.helpers.id_codec import decode_plain_id, encode_plain_id

_SONG_TYPES = (MediaType.MUSIC,)


class _RandomSongs(NodeHandlerBase):
    """Windowed random song sampling shared by the random handlers."""

    def random_songs(self, scope: LibraryScope, offset: int, count: int) -> list[MediaFile]:
        window = self.random_window(offset, count)
        if window == 0:
            return []
        return self.library.search.random_songs(scope, window, self.settings().random_max)

    def random_song_total(self, scope: LibraryScope) -> int:
        return self.random_total(self.library.media_files.count_media_files(scope))


class RandomSongHandler(_RandomSongs):
    node_type = NodeType.RANDOM_SONG
    title_key = "dlna.title.randomSong"

    def _song_scope(self) -> LibraryScope:
        return self.scope(media_types=_SONG_TYPES)

    def get_direct_children(self, offset: int, count: int) -> list[MediaFile]:
        return self.random_songs(self._song_scope(), offset, count)

    def get_direct_children_count(self) -> int:
        return self.random_song_total(self._song_scope())

    def get_direct_child(self, item_id: str) -> Any:
        # songs render under "folder/<id>"; nothing is addressable here
        raise NotFoundError("random song", item_id)

    def get_children(self, parent: Any, offset: int, count: int) -> list[Any]:
        return []

    def get_child_size_of(self, parent: Any) -> int:
        return 0

    def item_id_of(self, record: MediaFile) -> str:
        return encode_plain_id(record.id)

    def create_container(self, record: MediaFile) -> BrowseNode:
        # leaf-only view: direct children are song items
        return self.song_node(record)


class RandomAlbumHandler(NodeHandlerBase):
    node_type = NodeType.RANDOM_ALBUM
    title_key = "dlna.title.randomAlbum"

    def get_direct_children(self, offset: int, count: int) -> list[Album]:
        window = self.random_window(offset, count)
        if window == 0:
            return []
        return self.library.search.random_albums(self.scope(), window, self.settings().random_max)

    def get_direct_children_count(self) -> int:
        return self.random_total(self.library.albums.count_albums(self.scope()))

    def get_direct_child(self, item_id: str) -> Album:
        album = self.library.albums.get_album(decode_plain_id(item_id))
        if album is None:
            raise NotFoundError("album", item_id)
        return album

    def get_children(self, parent: Album, offset: int, count: int) -> list[MediaFile]:
        scope = self.scope(album=parent, order=ListOrder.TRACK)
        return self.library.media_files.list_media_files(scope, offset, count)

    def get_child_size_of(self, parent: Album) -> int:
        return self.library.media_files.count_media_files(self.scope(album=parent))

    def item_id_of(self, record: Album) -> str:
        return encode_plain_id(record.id)

    def create_container(self, record: Album) -> BrowseNode:
        return self.factory.album_container(
            self.node_type, self.item_id_of(record), record, self.get_child_size_of(record)
        )

    def render_child(self, parent: Album, child: MediaFile) -> BrowseNode:
        return self.song_node(child, parent)


class RandomSongByArtistHandler(_RandomSongs):
    node_type = NodeType.RANDOM_SONG_BY_ARTIST
    title_key = "dlna.title.randomSongByArtist"

    def get_direct_children(self, offset: int, count: int) -> list[Artist]:
        return self.library.artists.list_artists(self.scope(), offset, count)

    def get_direct_children_count(self) -> int:
        return self.library.artists.count_artists(self.scope())

    def get_direct_child(self, item_id: str) -> Artist:
        artist = self.library.artists.get_artist(decode_plain_id(item_id))
        if artist is None:
            raise NotFoundError("artist", item_id)
        return artist

    def _song_scope(self, artist: Artist) -> LibraryScope:
        return self.scope(artist=artist, media_types=_SONG_TYPES)

    def get_children(self, parent: Artist, offset: int, count: int) -> list[MediaFile]:
        return self.random_songs(self._song_scope(parent), offset, count)

    def get_child_size_of(self, parent: Artist) -> int:
        return self.random_song_total(self._song_scope(parent))

    def item_id_of(self, record: Artist) -> str:
        return encode_plain_id(record.id)

    def create_container(self, record: Artist) -> BrowseNode:
        return self.factory.artist_container(
            self.node_type, self.item_id_of(record), record, self.get_child_size_of(record)
        )

    def render_child(self, parent: Artist, child: MediaFile) -> BrowseNode:
        return self.song_node(child, parent)


class RandomSongByGenreHandler(_RandomSongs, GenreHandlerBase):
    node_type = NodeType.RANDOM_SONG_BY_GENRE
    title_key = "dlna.title.randomSongByGenre"
    media_types = _SONG_TYPES

    def _song_scope(self, genre: Genre) -> LibraryScope:
        return self.scope(genre=genre.name, media_types=self.media_types)

    def get_children(self, parent: Genre, offset: int, count: int) -> list[MediaFile]:
        return self.random_songs(self._song_scope(parent), offset, count)

    def get_child_size_of(self, parent: Genre) -> int:
        return self.random_song_total(self._song_scope(parent))

    def render_child(self, parent: Genre, child: MediaFile) -> BrowseNode:
        return self.song_node(child, parent)


class _RandomFolderHandler(_RandomSongs):
    """Folder x secondary axis, then random songs of the secondary entity."""

    logic: CrossAxisLogic[Any]

    def get_direct_children(self, offset: int, count: int) -> list[Any]:
        return self.logic.get_direct_children(offset, count)

    def get_direct_children_count(self) -> int:
        return self.logic.get_direct_children_count()

    def get_direct_child(self, item_id: str) -> Any:
        return self.logic.resolve(item_id)

    @abstractmethod
    def song_scope(self, record: FolderScoped[Any]) -> LibraryScope:
        ...

    def get_children(self, parent: Any, offset: int, count: int) -> list[Any]:
        if isinstance(parent, MusicFolder):
            return self.logic.get_children_of_folder(parent, offset, count)
        return self.random_songs(self.song_scope(parent), offset, count)

    def get_child_size_of(self, parent: Any) -> int:
        if isinstance(parent, MusicFolder):
            return self.logic.get_child_size_of(parent)
        return self.random_song_total(self.song_scope(parent))

    def item_id_of(self, record: Any) -> str:
        return self.logic.encode(record)

    @abstractmethod
    def entity_container(
        self, record: FolderScoped[Any], item_id: str, child_count: int, parent_id: str | None
    ) -> BrowseNode:
        ...

    def create_container(self, record: Any) -> BrowseNode:
        item_id = self.item_id_of(record)
        child_count = self.get_child_size_of(record)
        if isinstance(record, MusicFolder):
            return self.factory.folder_container(self.node_type, item_id, record, child_count)
        parent_id = None if record.collapsed else self.address(self.logic.encode(record.folder))
        return self.entity_container(record, item_id, child_count, parent_id)

    def render_child(self, parent: Any, child: Any) -> BrowseNode:
        if isinstance(child, MediaFile):
            return self.song_node(child, parent)
        return self.create_container(child)


class RandomSongByFolderArtistHandler(_RandomFolderHandler):
    node_type = NodeType.RANDOM_SONG_BY_FOLDER_ARTIST
    title_key = "dlna.title.randomSongByFolderArtist"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.logic = CrossAxisLogic(self.library.folders, ArtistAxis(self.library.artists, self.library.albums))

    def song_scope(self, record: FolderScoped[Artist]) -> LibraryScope:
        return LibraryScope(folders=(record.folder,), artist=record.entity, media_types=_SONG_TYPES)

    def entity_container(
        self, record: FolderScoped[Artist], item_id: str, child_count: int, parent_id: str | None
    ) -> BrowseNode:
        return self.factory.artist_container(self.node_type, item_id, record.entity, child_count, parent_id=parent_id)


class RandomSongByFolderGenreHandler(_RandomFolderHandler):
    node_type = NodeType.RANDOM_SONG_BY_FOLDER_GENRE
    title_key = "dlna.title.randomSongByFolderGenre"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        axis = GenreAxis(self.library.search, self.settings, _SONG_TYPES, album_scope=False)
        self.logic = CrossAxisLogic(self.library.folders, axis)

    def song_scope(self, record: FolderScoped[Genre]) -> LibraryScope:
        return LibraryScope(folders=(record.folder,), genre=record.entity.name, media_types=_SONG_TYPES)

    def entity_container(
        self, record: FolderScoped[Genre], item_id: str, child_count: int, parent_id: str | None
    ) -> BrowseNode:
        return self.factory.genre_container(self.node_type, item_id, record.entity.name, child_count, parent_id)
