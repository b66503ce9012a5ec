"""
Index handlers.

index ("index"):
    Index buckets over the top-level directories of the configured folders,
    followed by the songs lying directly in a folder root. Item ids are the
    bucket keys ("A", "#"); "mf:<id>" names a top-level directory.

index ID3 ("indexId3"):
    Index buckets over ID3 artists; a bucket lists its artists, which are
    browsed through the artist handler.
"""

from __future__ import annotations

from typing import Any

from mediabrowse.components.browse.node_handler_comp import NodeHandlerBase
from mediabrowse.helpers.dto.browse_dto import BrowseNode, NodeType
from mediabrowse.helpers.dto.library_dto import (
    AUDIO_TYPES,
    Artist,
    LibraryScope,
    ListOrder,
    MediaFile,
    MediaType,
    MusicIndex,
)
from mediabrowse.helpers.exceptions import NotFoundError
from mediabrowse.helpers.id_codec import FOLDER, encode_plain_id

_DIRECTORY_TYPES = (MediaType.DIRECTORY, MediaType.ALBUM)


class IndexHandler(NodeHandlerBase):
    node_type = NodeType.INDEX
    title_key = "dlna.title.index"

    def _indexes(self) -> list[MusicIndex]:
        return self.library.indexes.file_indexes(self.scope())

    def _single_song_scope(self) -> LibraryScope:
        return self.scope(top_level=True, media_types=tuple(AUDIO_TYPES), order=ListOrder.ALPHABETICAL)

    def get_direct_children(self, offset: int, count: int) -> list[MusicIndex | MediaFile]:
        indexes = self._indexes()
        records: list[MusicIndex | MediaFile] = list(indexes[offset : offset + count])
        remaining = count - len(records)
        if remaining > 0:
            song_offset = max(0, offset - len(indexes))
            records.extend(self.library.media_files.list_media_files(self._single_song_scope(), song_offset, remaining))
        return records

    def get_direct_children_count(self) -> int:
        return len(self._indexes()) + self.library.media_files.count_media_files(self._single_song_scope())

    def get_direct_child(self, item_id: str) -> MusicIndex | MediaFile:
        if FOLDER.matches(item_id):
            (media_file_id,) = FOLDER.decode(item_id)
            media_file = self.library.media_files.get_media_file(int(media_file_id))
            if media_file is None or not media_file.is_directory:
                raise NotFoundError("directory", item_id)
            return media_file
        for index in self._indexes():
            if index.key == item_id:
                return index
        raise NotFoundError("index", item_id)

    def _directory_scope(self, index: MusicIndex) -> LibraryScope:
        return self.scope(
            top_level=True, index_key=index.key, media_types=_DIRECTORY_TYPES, order=ListOrder.ALPHABETICAL
        )

    def get_children(self, parent: MusicIndex | MediaFile, offset: int, count: int) -> list[MediaFile]:
        if isinstance(parent, MediaFile):
            scope = self.scope(parent=parent, order=ListOrder.TRACK)
        else:
            scope = self._directory_scope(parent)
        return self.library.media_files.list_media_files(scope, offset, count)

    def get_child_size_of(self, parent: MusicIndex | MediaFile) -> int:
        if isinstance(parent, MediaFile):
            return self.library.media_files.count_media_files(self.scope(parent=parent))
        return self.library.media_files.count_media_files(self._directory_scope(parent))

    def item_id_of(self, record: MusicIndex | MediaFile) -> str:
        if isinstance(record, MediaFile):
            return FOLDER.encode(record.id)
        return record.key

    def create_container(self, record: MusicIndex | MediaFile) -> BrowseNode:
        if isinstance(record, MusicIndex):
            return self.factory.index_container(
                self.node_type, self.item_id_of(record), record, self.get_child_size_of(record)
            )
        if not record.is_directory:
            return self.song_node(record)
        return self.factory.media_file_container(
            self.node_type, self.item_id_of(record), record, self.get_child_size_of(record)
        )

    def render_child(self, parent: MusicIndex | MediaFile, child: MediaFile) -> BrowseNode:
        if not child.is_directory:
            return self.song_node(child, parent)
        return self.factory.media_file_container(
            NodeType.MEDIA_FILE,
            encode_plain_id(child.id),
            child,
            self.get_child_size_of(child),
            parent_id=self.address(self.item_id_of(parent)),
        )


class IndexId3Handler(NodeHandlerBase):
    node_type = NodeType.INDEX_ID3
    title_key = "dlna.title.indexId3"

    def _indexes(self) -> list[MusicIndex]:
        return self.library.indexes.artist_indexes(self.scope())

    def get_direct_children(self, offset: int, count: int) -> list[MusicIndex]:
        return self._indexes()[offset : offset + count]

    def get_direct_children_count(self) -> int:
        return len(self._indexes())

    def get_direct_child(self, item_id: str) -> MusicIndex:
        for index in self._indexes():
            if index.key == item_id:
                return index
        raise NotFoundError("index", item_id)

    def get_children(self, parent: MusicIndex, offset: int, count: int) -> list[Artist]:
        return self.library.artists.list_artists(self.scope(index_key=parent.key), offset, count)

    def get_child_size_of(self, parent: MusicIndex) -> int:
        return self.library.artists.count_artists(self.scope(index_key=parent.key))

    def item_id_of(self, record: MusicIndex) -> str:
        return record.key

    def create_container(self, record: MusicIndex) -> BrowseNode:
        return self.factory.index_container(
            self.node_type, self.item_id_of(record), record, self.get_child_size_of(record)
        )

    def render_child(self, parent: MusicIndex, child: Any) -> BrowseNode:
        album_count = self.library.albums.count_albums(self.scope(artist=child))
        return self.factory.artist_container(
            NodeType.ARTIST,
            encode_plain_id(child.id),
            child,
            album_count,
            parent_id=self.address(self.item_id_of(parent)),
        )
