"""Playlist handler: playlists ("playlist/<id>") and their songs."""

from __future__ import annotations

from mediabrowse.components.browse.node_handler_comp import NodeHandlerBase
from mediabrowse.helpers.dto.browse_dto import BrowseNode, NodeType
from mediabrowse.helpers.dto.library_dto import MediaFile, Playlist
from mediabrowse.helpers.exceptions import NotFoundError
from mediabrowse.helpers.id_codec import decode_plain_id, encode_plain_id


class PlaylistHandler(NodeHandlerBase):
    node_type = NodeType.PLAYLIST
    title_key = "dlna.title.playlists"

    def get_direct_children(self, offset: int, count: int) -> list[Playlist]:
        return self.library.playlists.list_playlists(offset, count)

    def get_direct_children_count(self) -> int:
        return self.library.playlists.count_playlists()

    def get_direct_child(self, item_id: str) -> Playlist:
        playlist = self.library.playlists.get_playlist(decode_plain_id(item_id))
        if playlist is None:
            raise NotFoundError("playlist", item_id)
        return playlist

    def get_children(self, parent: Playlist, offset: int, count: int) -> list[MediaFile]:
        return self.library.playlists.list_playlist_songs(parent, offset, count)

    def get_child_size_of(self, parent: Playlist) -> int:
        return self.library.playlists.count_playlist_songs(parent)

    def item_id_of(self, record: Playlist) -> str:
        return encode_plain_id(record.id)

    def create_container(self, record: Playlist) -> BrowseNode:
        return self.factory.playlist_container(
            self.node_type, self.item_id_of(record), record, self.get_child_size_of(record)
        )

    def render_child(self, parent: Playlist, child: MediaFile) -> BrowseNode:
        return self.song_node(child, parent)
