"""
File-structure handlers: browse the library as directories on disk.

folder ("folder"):
    Direct children are the folder root directories, or, with a single
    folder configured, the contents of that one root. Item ids are plain
    media file ids. Playable files render with "folder/<id>" ids, which is
    why every other node type's items resolve here for metadata.

folder by folder ("mfbf"):
    Direct children are always the configured folders ("mf:<id>"); below
    them the directory tree. Untagged ids are media file ids.
"""

from __future__ import annotations

from typing import Any

from mediabrowse.components.browse.node_handler_comp import NodeHandlerBase
from mediabrowse.helpers.dto.browse_dto import BrowseNode, NodeType
from mediabrowse.helpers.dto.library_dto import ListOrder, MediaFile, MusicFolder
from mediabrowse.helpers.exceptions import NotFoundError
from mediabrowse.helpers.id_codec import FOLDER, decode_plain_id, encode_plain_id


class MediaFileHandler(NodeHandlerBase):
    node_type = NodeType.MEDIA_FILE
    title_key = "dlna.title.folders"

    def _roots(self) -> list[MediaFile]:
        roots = []
        for folder in self.folders():
            root = self.library.media_files.get_folder_root(folder)
            if root is not None:
                roots.append(root)
        return roots

    def get_direct_children(self, offset: int, count: int) -> list[MediaFile]:
        roots = self._roots()
        if len(roots) == 1:
            return self.get_children(roots[0], offset, count)
        return roots[offset : offset + count]

    def get_direct_children_count(self) -> int:
        roots = self._roots()
        if len(roots) == 1:
            return self.get_child_size_of(roots[0])
        return len(roots)

    def get_direct_child(self, item_id: str) -> MediaFile:
        media_file = self.library.media_files.get_media_file(decode_plain_id(item_id))
        if media_file is None:
            raise NotFoundError("media file", item_id)
        return media_file

    def get_children(self, parent: MediaFile, offset: int, count: int) -> list[MediaFile]:
        if not parent.is_directory:
            return []
        scope = self.scope(parent=parent, order=ListOrder.TRACK)
        return self.library.media_files.list_media_files(scope, offset, count)

    def get_child_size_of(self, parent: MediaFile) -> int:
        if not parent.is_directory:
            return 0
        return self.library.media_files.count_media_files(self.scope(parent=parent))

    def item_id_of(self, record: MediaFile) -> str:
        return encode_plain_id(record.id)

    def create_container(self, record: MediaFile) -> BrowseNode:
        parent_id = self.address(encode_plain_id(record.parent_id)) if record.parent_id is not None else None
        if not record.is_directory:
            return self.factory.media_item(record, parent_id=parent_id or self.address())
        return self.factory.media_file_container(
            self.node_type,
            self.item_id_of(record),
            record,
            self.get_child_size_of(record),
            parent_id=parent_id,
        )

    def render_child(self, parent: MediaFile, child: MediaFile) -> BrowseNode:
        if child.is_directory:
            return self.create_container(child)
        return self.song_node(child, parent)


class MediaFileByFolderHandler(NodeHandlerBase):
    node_type = NodeType.MEDIA_FILE_BY_FOLDER
    title_key = "dlna.title.foldersByFolder"

    def get_direct_children(self, offset: int, count: int) -> list[MusicFolder]:
        return list(self.folders()[offset : offset + count])

    def get_direct_children_count(self) -> int:
        return len(self.folders())

    def get_direct_child(self, item_id: str) -> MusicFolder | MediaFile:
        if FOLDER.matches(item_id):
            (folder_id,) = FOLDER.decode(item_id)
            for folder in self.folders():
                if folder.id == folder_id:
                    return folder
            raise NotFoundError("folder", item_id)
        media_file = self.library.media_files.get_media_file(decode_plain_id(item_id))
        if media_file is None:
            raise NotFoundError("media file", item_id)
        return media_file

    def _directory_of(self, record: MusicFolder | MediaFile) -> MediaFile | None:
        if isinstance(record, MusicFolder):
            return self.library.media_files.get_folder_root(record)
        return record if record.is_directory else None

    def get_children(self, parent: MusicFolder | MediaFile, offset: int, count: int) -> list[MediaFile]:
        directory = self._directory_of(parent)
        if directory is None:
            return []
        scope = self.scope(parent=directory, order=ListOrder.TRACK)
        return self.library.media_files.list_media_files(scope, offset, count)

    def get_child_size_of(self, parent: MusicFolder | MediaFile) -> int:
        directory = self._directory_of(parent)
        if directory is None:
            return 0
        return self.library.media_files.count_media_files(self.scope(parent=directory))

    def item_id_of(self, record: MusicFolder | MediaFile) -> str:
        if isinstance(record, MusicFolder):
            return FOLDER.encode(record.id)
        return encode_plain_id(record.id)

    def create_container(self, record: Any) -> BrowseNode:
        if isinstance(record, MusicFolder):
            return self.factory.folder_container(
                self.node_type, self.item_id_of(record), record, self.get_child_size_of(record)
            )
        if not record.is_directory:
            return self.factory.media_item(record, parent_id=self.address())
        return self.factory.media_file_container(
            self.node_type, self.item_id_of(record), record, self.get_child_size_of(record)
        )

    def render_child(self, parent: MusicFolder | MediaFile, child: MediaFile) -> BrowseNode:
        if child.is_directory:
            return self.factory.media_file_container(
                self.node_type,
                self.item_id_of(child),
                child,
                self.get_child_size_of(child),
                parent_id=self.address(self.item_id_of(parent)),
            )
        return self.song_node(child, parent)
