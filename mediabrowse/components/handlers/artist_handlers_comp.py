"""
Artist handlers.

artist ("artist"):
    ID3 artists; an artist lists its albums. Albums render as "alid3/<id>"
    containers so their songs are browsed through the album handler.
    Item ids are plain artist ids.

artist by folder ("artistbf"):
    Folder x Artist, then albums, then songs. Item ids:
        "<n>"           folder id
        "far:<f>;<a>"   artist inside folder f
        "ar:<a>"        artist while a single folder is configured
        "al:<a>"        album
"""

from __future__ import annotations

from typing import Any

from mediabrowse.components.browse.cross_axis_comp import ArtistAxis, CrossAxisLogic, FolderScoped
from mediabrowse.components.browse.node_handler_comp import NodeHandlerBase
from mediabrowse.helpers.dto.browse_dto import BrowseNode, NodeType
from mediabrowse.helpers.dto.library_dto import Album, Artist, LibraryScope, ListOrder, MediaFile, MusicFolder
from mediabrowse.helpers.exceptions import NotFoundError
from mediabrowse.helpers.id_codec import ALBUM, decode_plain_id, encode_plain_id


def album_order(sort_by_year: bool) -> ListOrder:
    return ListOrder.BY_YEAR if sort_by_year else ListOrder.ALPHABETICAL


class ArtistHandler(NodeHandlerBase):
    node_type = NodeType.ARTIST
    title_key = "dlna.title.artists"

    def get_direct_children(self, offset: int, count: int) -> list[Artist]:
        return self.library.artists.list_artists(self.scope(), offset, count)

    def get_direct_children_count(self) -> int:
        return self.library.artists.count_artists(self.scope())

    def get_direct_child(self, item_id: str) -> Artist:
        artist = self.library.artists.get_artist(decode_plain_id(item_id))
        if artist is None:
            raise NotFoundError("artist", item_id)
        return artist

    def get_children(self, parent: Artist, offset: int, count: int) -> list[Album]:
        scope = self.scope(artist=parent, order=album_order(self.settings().sort_albums_by_year))
        return self.library.albums.list_albums(scope, offset, count)

    def get_child_size_of(self, parent: Artist) -> int:
        return self.library.albums.count_albums(self.scope(artist=parent))

    def item_id_of(self, record: Artist) -> str:
        return encode_plain_id(record.id)

    def create_container(self, record: Artist) -> BrowseNode:
        return self.factory.artist_container(
            self.node_type, self.item_id_of(record), record, self.get_child_size_of(record)
        )

    def render_child(self, parent: Artist, child: Album) -> BrowseNode:
        song_count = self.library.media_files.count_media_files(self.scope(album=child))
        return self.factory.album_container(
            NodeType.ALBUM_ID3,
            encode_plain_id(child.id),
            child,
            song_count,
            parent_id=self.address(self.item_id_of(parent)),
        )


class ArtistByFolderHandler(NodeHandlerBase):
    node_type = NodeType.ARTIST_BY_FOLDER
    title_key = "dlna.title.artistsByFolder"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.logic: CrossAxisLogic[Artist] = CrossAxisLogic(
            self.library.folders, ArtistAxis(self.library.artists, self.library.albums)
        )

    def get_direct_children(self, offset: int, count: int) -> list[Any]:
        return self.logic.get_direct_children(offset, count)

    def get_direct_children_count(self) -> int:
        return self.logic.get_direct_children_count()

    def get_direct_child(self, item_id: str) -> MusicFolder | FolderScoped[Artist] | Album:
        if ALBUM.matches(item_id):
            (album_id,) = ALBUM.decode(item_id)
            album = self.library.albums.get_album(int(album_id))
            if album is None:
                raise NotFoundError("album", item_id)
            return album
        return self.logic.resolve(item_id)

    def _album_scope(self, parent: FolderScoped[Artist]) -> LibraryScope:
        order = album_order(self.settings().sort_albums_by_year)
        return LibraryScope(folders=(parent.folder,), artist=parent.entity, order=order)

    def get_children(self, parent: Any, offset: int, count: int) -> list[Any]:
        if isinstance(parent, MusicFolder):
            return self.logic.get_children_of_folder(parent, offset, count)
        if isinstance(parent, FolderScoped):
            return self.library.albums.list_albums(self._album_scope(parent), offset, count)
        scope = self.scope(album=parent, order=ListOrder.TRACK)
        return self.library.media_files.list_media_files(scope, offset, count)

    def get_child_size_of(self, parent: Any) -> int:
        if isinstance(parent, Album):
            return self.library.media_files.count_media_files(self.scope(album=parent))
        return self.logic.get_child_size_of(parent)

    def item_id_of(self, record: Any) -> str:
        if isinstance(record, Album):
            return ALBUM.encode(record.id)
        return self.logic.encode(record)

    def create_container(self, record: Any) -> BrowseNode:
        item_id = self.item_id_of(record)
        child_count = self.get_child_size_of(record)
        if isinstance(record, MusicFolder):
            return self.factory.folder_container(self.node_type, item_id, record, child_count)
        if isinstance(record, Album):
            return self.factory.album_container(self.node_type, item_id, record, child_count)
        parent_id = None if record.collapsed else self.address(self.logic.encode(record.folder))
        return self.factory.artist_container(self.node_type, item_id, record.entity, child_count, parent_id=parent_id)

    def render_child(self, parent: Any, child: Any) -> BrowseNode:
        if isinstance(child, MediaFile):
            return self.song_node(child, parent)
        if isinstance(child, Album):
            return self.factory.album_container(
                self.node_type,
                self.item_id_of(child),
                child,
                self.get_child_size_of(child),
                parent_id=self.address(self.item_id_of(parent)),
            )
        return self.create_container(child)
