"""
Album handlers.

album ("album"):
    Album directories of the file structure, alphabetical. Item ids are
    plain media file ids of the album directories.

album ID3 ("alid3"):
    ID3 albums, alphabetical. Item ids are plain album ids.

album ID3 by folder ("alid3bf"):
    Folder x Album. Untagged ids are folder ids; albums are "fal:<f>;<a>",
    or "al:<a>" while a single folder is configured.

recent ("recent"), recent ID3 ("recentId3"), recent ID3 by folder
("recentId3bf"):
    The same views ordered newest first and cut at recent_max.
"""

from __future__ import annotations

from typing import Any

from mediabrowse.components.browse.cross_axis_comp import AlbumAxis, CrossAxisLogic, FolderScoped
from mediabrowse.components.browse.node_handler_comp import NodeHandlerBase
from mediabrowse.components.browse.window_comp import bounded_total, effective_count
from mediabrowse.helpers.dto.browse_dto import BrowseNode, NodeType
from mediabrowse.helpers.dto.library_dto import (
    AUDIO_TYPES,
    Album,
    LibraryScope,
    ListOrder,
    MediaFile,
    MediaType,
    MusicFolder,
)
from mediabrowse.helpers.exceptions import NotFoundError
from mediabrowse.helpers.id_codec import decode_plain_id, encode_plain_id


class AlbumHandler(NodeHandlerBase):
    """Album directories of the file structure."""

    node_type = NodeType.ALBUM
    title_key = "dlna.title.albums"
    order = ListOrder.ALPHABETICAL

    def _album_scope(self) -> LibraryScope:
        return self.scope(media_types=(MediaType.ALBUM,), order=self.order)

    def get_direct_children(self, offset: int, count: int) -> list[MediaFile]:
        return self.library.media_files.list_media_files(self._album_scope(), offset, count)

    def get_direct_children_count(self) -> int:
        return self.library.media_files.count_media_files(self._album_scope())

    def get_direct_child(self, item_id: str) -> MediaFile:
        album = self.library.media_files.get_media_file(decode_plain_id(item_id))
        if album is None or not album.is_directory:
            raise NotFoundError("album", item_id)
        return album

    def _song_scope(self, album: MediaFile) -> LibraryScope:
        return self.scope(parent=album, media_types=tuple(AUDIO_TYPES), order=ListOrder.TRACK)

    def get_children(self, parent: MediaFile, offset: int, count: int) -> list[MediaFile]:
        return self.library.media_files.list_media_files(self._song_scope(parent), offset, count)

    def get_child_size_of(self, parent: MediaFile) -> int:
        return self.library.media_files.count_media_files(self._song_scope(parent))

    def item_id_of(self, record: MediaFile) -> str:
        return encode_plain_id(record.id)

    def create_container(self, record: MediaFile) -> BrowseNode:
        return self.factory.media_file_container(
            self.node_type, self.item_id_of(record), record, self.get_child_size_of(record)
        )

    def render_child(self, parent: MediaFile, child: MediaFile) -> BrowseNode:
        return self.song_node(child, parent)


class RecentAlbumHandler(AlbumHandler):
    """Newest album directories, at most recent_max of them."""

    node_type = NodeType.RECENT
    title_key = "dlna.title.recentAlbums"
    order = ListOrder.NEWEST

    def get_direct_children(self, offset: int, count: int) -> list[MediaFile]:
        count = effective_count(offset, count, self.settings().recent_max)
        if count == 0:
            return []
        return super().get_direct_children(offset, count)

    def get_direct_children_count(self) -> int:
        return bounded_total(super().get_direct_children_count(), self.settings().recent_max)


class AlbumId3Handler(NodeHandlerBase):
    """ID3 albums."""

    node_type = NodeType.ALBUM_ID3
    title_key = "dlna.title.albumsId3"
    order = ListOrder.ALPHABETICAL

    def get_direct_children(self, offset: int, count: int) -> list[Album]:
        return self.library.albums.list_albums(self.scope(order=self.order), offset, count)

    def get_direct_children_count(self) -> int:
        return self.library.albums.count_albums(self.scope())

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


class RecentAlbumId3Handler(AlbumId3Handler):
    """Newest ID3 albums, at most recent_max of them."""

    node_type = NodeType.RECENT_ID3
    title_key = "dlna.title.recentAlbumsId3"
    order = ListOrder.NEWEST

    def get_direct_children(self, offset: int, count: int) -> list[Album]:
        count = effective_count(offset, count, self.settings().recent_max)
        if count == 0:
            return []
        return super().get_direct_children(offset, count)

    def get_direct_children_count(self) -> int:
        return bounded_total(super().get_direct_children_count(), self.settings().recent_max)


class AlbumId3ByFolderHandler(NodeHandlerBase):
    """Folder x ID3 album."""

    node_type = NodeType.ALBUM_ID3_BY_FOLDER
    title_key = "dlna.title.albumsId3ByFolder"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.logic: CrossAxisLogic[Album] = CrossAxisLogic(self.library.folders, self._axis())

    def _axis(self) -> AlbumAxis:
        return AlbumAxis(self.library.albums, self.library.media_files)

    def get_direct_children(self, offset: int, count: int) -> list[Any]:
        return self.logic.get_direct_children(offset, count)

    def get_direct_children_count(self) -> int:
        return self.logic.get_direct_children_count()

    def get_direct_child(self, item_id: str) -> MusicFolder | FolderScoped[Album]:
        return self.logic.resolve(item_id)

    def get_children(self, parent: MusicFolder | FolderScoped[Album], offset: int, count: int) -> list[Any]:
        if isinstance(parent, MusicFolder):
            return self.logic.get_children_of_folder(parent, offset, count)
        scope = LibraryScope(folders=(parent.folder,), album=parent.entity, order=ListOrder.TRACK)
        return self.library.media_files.list_media_files(scope, offset, count)

    def get_child_size_of(self, parent: MusicFolder | FolderScoped[Album]) -> int:
        return self.logic.get_child_size_of(parent)

    def item_id_of(self, record: MusicFolder | FolderScoped[Album]) -> str:
        return self.logic.encode(record)

    def create_container(self, record: MusicFolder | FolderScoped[Album]) -> BrowseNode:
        item_id = self.item_id_of(record)
        child_count = self.get_child_size_of(record)
        if isinstance(record, MusicFolder):
            return self.factory.folder_container(self.node_type, item_id, record, child_count)
        parent_id = None if record.collapsed else self.address(self.logic.encode(record.folder))
        return self.factory.album_container(self.node_type, item_id, record.entity, child_count, parent_id=parent_id)

    def render_child(self, parent: Any, child: Any) -> BrowseNode:
        if isinstance(child, MediaFile):
            return self.song_node(child, parent)
        return self.create_container(child)


class RecentAlbumId3ByFolderHandler(AlbumId3ByFolderHandler):
    """Folder x newest ID3 albums, each folder cut at recent_max."""

    node_type = NodeType.RECENT_ID3_BY_FOLDER
    title_key = "dlna.title.recentAlbumsId3ByFolder"

    def _axis(self) -> AlbumAxis:
        return AlbumAxis(
            self.library.albums,
            self.library.media_files,
            order=ListOrder.NEWEST,
            window=lambda: self.settings().recent_max,
        )
