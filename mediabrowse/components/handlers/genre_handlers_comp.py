"""
Genre handlers.

Flat genre views list the genre facets of all configured folders and use
the genre name itself as the item id ("sbg/Jazz", "abg/Rock/Pop"):

    abg   album directories of the genre (rendered as "folder/<id>")
    aibg  ID3 albums of the genre ("ga:<album>;<genre>"), then their songs
    sbg   songs of the genre
    abbg  audiobooks of the genre

Folder x genre views go through the cross-axis logic:

    aibfg folder, genre, ID3 album ("fga:<f>;<a>;<g>", or "ga:<a>;<g>"
          while a single folder is configured), songs
    sbfg  folder, genre, songs

Composite ids are detected before the plain lookup, so a genre that happens
to look like "ga:..." is shadowed by the album id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from mediabrowse.components.browse.cross_axis_comp import CrossAxisLogic, FolderScoped, GenreAxis, genre_list_order
from mediabrowse.components.browse.node_handler_comp import NodeHandlerBase
from mediabrowse.helpers.dto.browse_dto import BrowseNode, NodeType
from mediabrowse.helpers.dto.library_dto import Album, Genre, LibraryScope, ListOrder, MediaFile, MediaType, MusicFolder
from mediabrowse.helpers.exceptions import NotFoundError
from mediabrowse.helpers.id_codec import (
    FOLDER_GENRE,
    FOLDER_GENRE_ALBUM,
    GENRE,
    GENRE_ALBUM,
    encode_plain_id,
)


@dataclass(frozen=True)
class GenreAlbum:
    """An ID3 album seen through one genre, optionally inside one folder."""

    genre: str
    album: Album
    folder: MusicFolder | None = None
    collapsed: bool = False


class GenreHandlerBase(NodeHandlerBase):
    """
    Genre facets over all configured folders; item ids are genre names.

    Subclasses pick the facet media types and whether the facets are counted
    by albums (album_genre_sort) or by songs (song_genre_sort).
    """

    media_types: ClassVar[tuple[MediaType, ...]] = (MediaType.MUSIC,)
    album_scope: ClassVar[bool] = False

    def genres(self) -> list[Genre]:
        settings = self.settings()
        sort = settings.album_genre_sort if self.album_scope else settings.song_genre_sort
        scope = self.scope(media_types=self.media_types, order=genre_list_order(sort))
        return self.library.search.genre_facets(scope)

    def get_direct_children(self, offset: int, count: int) -> list[Any]:
        return self.genres()[offset : offset + count]

    def get_direct_children_count(self) -> int:
        return len(self.genres())

    def find_genre(self, name: str) -> Genre:
        for genre in self.genres():
            if genre.name == name:
                return genre
        raise NotFoundError("genre", name)

    def get_direct_child(self, item_id: str) -> Any:
        return self.find_genre(item_id)

    def item_id_of(self, record: Any) -> str:
        return record.name

    def create_container(self, record: Any) -> BrowseNode:
        return self.factory.genre_container(
            self.node_type, self.item_id_of(record), record.name, self.get_child_size_of(record)
        )


class _GenreSongsHandler(GenreHandlerBase):
    def _song_scope(self, genre: Genre) -> LibraryScope:
        return self.scope(genre=genre.name, media_types=self.media_types, order=ListOrder.ALPHABETICAL)

    def get_children(self, parent: Genre, offset: int, count: int) -> list[MediaFile]:
        return self.library.media_files.list_media_files(self._song_scope(parent), offset, count)

    def get_child_size_of(self, parent: Genre) -> int:
        return self.library.media_files.count_media_files(self._song_scope(parent))

    def render_child(self, parent: Genre, child: MediaFile) -> BrowseNode:
        return self.song_node(child, parent)


class SongByGenreHandler(_GenreSongsHandler):
    node_type = NodeType.SONG_BY_GENRE
    title_key = "dlna.title.songsByGenre"


class AudiobookByGenreHandler(_GenreSongsHandler):
    node_type = NodeType.AUDIOBOOK_BY_GENRE
    title_key = "dlna.title.audiobooksByGenre"
    media_types = (MediaType.AUDIOBOOK,)


class AlbumByGenreHandler(GenreHandlerBase):
    """Album directories by genre; albums are browsed through the folder view."""

    node_type = NodeType.ALBUM_BY_GENRE
    title_key = "dlna.title.albumsByGenre"
    album_scope = True

    def _album_scope(self, genre: Genre) -> LibraryScope:
        return self.scope(genre=genre.name, media_types=(MediaType.ALBUM,), order=ListOrder.ALPHABETICAL)

    def get_children(self, parent: Genre, offset: int, count: int) -> list[MediaFile]:
        return self.library.media_files.list_media_files(self._album_scope(parent), offset, count)

    def get_child_size_of(self, parent: Genre) -> int:
        return self.library.media_files.count_media_files(self._album_scope(parent))

    def render_child(self, parent: Genre, child: MediaFile) -> BrowseNode:
        child_count = self.library.media_files.count_media_files(self.scope(parent=child))
        return self.factory.media_file_container(
            NodeType.MEDIA_FILE,
            encode_plain_id(child.id),
            child,
            child_count,
            parent_id=self.address(self.item_id_of(parent)),
        )


class AlbumId3ByGenreHandler(GenreHandlerBase):
    """ID3 albums by genre, then the songs of the album in that genre."""

    node_type = NodeType.ALBUM_ID3_BY_GENRE
    title_key = "dlna.title.albumsId3ByGenre"
    album_scope = True

    def get_direct_child(self, item_id: str) -> Genre | GenreAlbum:
        if GENRE_ALBUM.matches(item_id):
            album_id, genre = GENRE_ALBUM.decode(item_id)
            album = self.library.albums.get_album(int(album_id))
            if album is None:
                raise NotFoundError("album", item_id)
            return GenreAlbum(str(genre), album)
        return self.find_genre(item_id)

    def _song_scope(self, record: GenreAlbum) -> LibraryScope:
        return self.scope(genre=record.genre, album=record.album, order=ListOrder.TRACK)

    def get_children(self, parent: Genre | GenreAlbum, offset: int, count: int) -> list[Any]:
        if isinstance(parent, GenreAlbum):
            return self.library.media_files.list_media_files(self._song_scope(parent), offset, count)
        scope = self.scope(genre=parent.name, order=ListOrder.ALPHABETICAL)
        return [GenreAlbum(parent.name, a) for a in self.library.albums.list_albums(scope, offset, count)]

    def get_child_size_of(self, parent: Genre | GenreAlbum) -> int:
        if isinstance(parent, GenreAlbum):
            return self.library.media_files.count_media_files(self._song_scope(parent))
        return self.library.albums.count_albums(self.scope(genre=parent.name))

    def item_id_of(self, record: Genre | GenreAlbum) -> str:
        if isinstance(record, GenreAlbum):
            return GENRE_ALBUM.encode(record.album.id, record.genre)
        return record.name

    def create_container(self, record: Genre | GenreAlbum) -> BrowseNode:
        if isinstance(record, Genre):
            return super().create_container(record)
        return self.factory.album_container(
            self.node_type,
            self.item_id_of(record),
            record.album,
            self.get_child_size_of(record),
            parent_id=self.address(record.genre),
        )

    def render_child(self, parent: Genre | GenreAlbum, child: Any) -> BrowseNode:
        if isinstance(child, MediaFile):
            return self.song_node(child, parent)
        return self.create_container(child)


class _FolderGenreHandler(NodeHandlerBase):
    media_types: ClassVar[tuple[MediaType, ...]] = (MediaType.MUSIC,)
    album_scope: ClassVar[bool] = False

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        axis = GenreAxis(self.library.search, self.settings, self.media_types, self.album_scope)
        self.logic: CrossAxisLogic[Genre] = CrossAxisLogic(self.library.folders, axis)

    def get_direct_children(self, offset: int, count: int) -> list[Any]:
        return self.logic.get_direct_children(offset, count)

    def get_direct_children_count(self) -> int:
        return self.logic.get_direct_children_count()

    def get_direct_child(self, item_id: str) -> Any:
        return self.logic.resolve(item_id)

    def get_child_size_of(self, parent: Any) -> int:
        return self.logic.get_child_size_of(parent)

    def item_id_of(self, record: Any) -> str:
        return self.logic.encode(record)

    def create_container(self, record: Any) -> BrowseNode:
        item_id = self.item_id_of(record)
        child_count = self.get_child_size_of(record)
        if isinstance(record, MusicFolder):
            return self.factory.folder_container(self.node_type, item_id, record, child_count)
        parent_id = None if record.collapsed else self.address(self.logic.encode(record.folder))
        return self.factory.genre_container(self.node_type, item_id, record.entity.name, child_count, parent_id)


class SongByFolderGenreHandler(_FolderGenreHandler):
    """Folder x genre, then the songs of the genre inside the folder."""

    node_type = NodeType.SONG_BY_FOLDER_GENRE
    title_key = "dlna.title.songsByFolderGenre"

    def get_children(self, parent: Any, offset: int, count: int) -> list[Any]:
        if isinstance(parent, MusicFolder):
            return self.logic.get_children_of_folder(parent, offset, count)
        scope = LibraryScope(
            folders=(parent.folder,),
            genre=parent.entity.name,
            media_types=self.media_types,
            order=ListOrder.ALPHABETICAL,
        )
        return self.library.media_files.list_media_files(scope, offset, count)

    def render_child(self, parent: Any, child: Any) -> BrowseNode:
        if isinstance(child, MediaFile):
            return self.song_node(child, parent)
        return self.create_container(child)


class AlbumId3ByFolderGenreHandler(_FolderGenreHandler):
    """Folder x genre, then ID3 albums of the genre, then their songs."""

    node_type = NodeType.ALBUM_ID3_BY_FOLDER_GENRE
    title_key = "dlna.title.albumsId3ByFolderGenre"
    media_types = (MediaType.MUSIC, MediaType.AUDIOBOOK)
    album_scope = True

    def get_direct_child(self, item_id: str) -> Any:
        if FOLDER_GENRE_ALBUM.matches(item_id):
            folder_id, album_id, genre = FOLDER_GENRE_ALBUM.decode(item_id)
            folder = self.logic.find_folder(self.logic.configured_folders(), int(folder_id))
            return GenreAlbum(str(genre), self._album(int(album_id), item_id), folder)
        if GENRE_ALBUM.matches(item_id):
            album_id, genre = GENRE_ALBUM.decode(item_id)
            folders = self.logic.configured_folders()
            if len(folders) != 1:
                raise NotFoundError("album", item_id)
            return GenreAlbum(str(genre), self._album(int(album_id), item_id), folders[0], collapsed=True)
        return self.logic.resolve(item_id)

    def _album(self, album_id: int, item_id: str) -> Album:
        album = self.library.albums.get_album(album_id)
        if album is None:
            raise NotFoundError("album", item_id)
        return album

    def _album_scope(self, parent: FolderScoped[Genre]) -> LibraryScope:
        return LibraryScope(folders=(parent.folder,), genre=parent.entity.name, order=ListOrder.ALPHABETICAL)

    def _song_scope(self, record: GenreAlbum) -> LibraryScope:
        return LibraryScope(
            folders=(record.folder,),
            genre=record.genre,
            album=record.album,
            media_types=self.media_types,
            order=ListOrder.TRACK,
        )

    def get_children(self, parent: Any, offset: int, count: int) -> list[Any]:
        if isinstance(parent, MusicFolder):
            return self.logic.get_children_of_folder(parent, offset, count)
        if isinstance(parent, GenreAlbum):
            return self.library.media_files.list_media_files(self._song_scope(parent), offset, count)
        return [
            GenreAlbum(parent.entity.name, album, parent.folder, parent.collapsed)
            for album in self.library.albums.list_albums(self._album_scope(parent), offset, count)
        ]

    def get_child_size_of(self, parent: Any) -> int:
        if isinstance(parent, GenreAlbum):
            return self.library.media_files.count_media_files(self._song_scope(parent))
        if isinstance(parent, MusicFolder):
            return self.logic.get_child_size_of(parent)
        # album tags, not song tags, place an album under a genre
        return self.library.albums.count_albums(self._album_scope(parent))

    def item_id_of(self, record: Any) -> str:
        if isinstance(record, GenreAlbum):
            if record.collapsed or record.folder is None:
                return GENRE_ALBUM.encode(record.album.id, record.genre)
            return FOLDER_GENRE_ALBUM.encode(record.folder.id, record.album.id, record.genre)
        return self.logic.encode(record)

    def _genre_address(self, record: GenreAlbum) -> str:
        if record.collapsed or record.folder is None:
            return self.address(GENRE.encode(record.genre))
        return self.address(FOLDER_GENRE.encode(record.folder.id, record.genre))

    def create_container(self, record: Any) -> BrowseNode:
        if not isinstance(record, GenreAlbum):
            return super().create_container(record)
        return self.factory.album_container(
            self.node_type,
            self.item_id_of(record),
            record.album,
            self.get_child_size_of(record),
            parent_id=self._genre_address(record),
        )

    def render_child(self, parent: Any, child: Any) -> BrowseNode:
        if isinstance(child, MediaFile):
            return self.song_node(child, parent)
        return self.create_container(child)
