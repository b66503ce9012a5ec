"""
Podcast handler.

Channels are plain ids ("podcast/4"); their episodes render as items with
"ep:<id>" ids, so a metadata browse on "podcast/ep:12" answers the episode
itself. Episodes have no children.
"""

from __future__ import annotations

from mediabrowse.components.browse.node_handler_comp import NodeHandlerBase
from mediabrowse.helpers.dto.browse_dto import BrowseNode, NodeType
from mediabrowse.helpers.dto.library_dto import PodcastChannel, PodcastEpisode
from mediabrowse.helpers.exceptions import NotFoundError
from mediabrowse.helpers.id_codec import EPISODE, decode_plain_id, encode_plain_id


class PodcastHandler(NodeHandlerBase):
    node_type = NodeType.PODCAST
    title_key = "dlna.title.podcast"

    def get_direct_children(self, offset: int, count: int) -> list[PodcastChannel]:
        return self.library.podcasts.list_channels(offset, count)

    def get_direct_children_count(self) -> int:
        return self.library.podcasts.count_channels()

    def get_direct_child(self, item_id: str) -> PodcastChannel | PodcastEpisode:
        if EPISODE.matches(item_id):
            (episode_id,) = EPISODE.decode(item_id)
            episode = self.library.podcasts.get_episode(int(episode_id))
            if episode is None:
                raise NotFoundError("podcast episode", item_id)
            return episode
        channel = self.library.podcasts.get_channel(decode_plain_id(item_id))
        if channel is None:
            raise NotFoundError("podcast channel", item_id)
        return channel

    def get_children(self, parent: PodcastChannel | PodcastEpisode, offset: int, count: int) -> list[PodcastEpisode]:
        if isinstance(parent, PodcastEpisode):
            return []
        return self.library.podcasts.list_episodes(parent, offset, count)

    def get_child_size_of(self, parent: PodcastChannel | PodcastEpisode) -> int:
        if isinstance(parent, PodcastEpisode):
            return 0
        return self.library.podcasts.count_episodes(parent)

    def item_id_of(self, record: PodcastChannel | PodcastEpisode) -> str:
        if isinstance(record, PodcastEpisode):
            return EPISODE.encode(record.id)
        return encode_plain_id(record.id)

    def _episode_item(self, episode: PodcastEpisode) -> BrowseNode:
        media_file = None
        if episode.media_file_id is not None:
            media_file = self.library.media_files.get_media_file(episode.media_file_id)
        parent_id = self.address(encode_plain_id(episode.channel_id))
        return self.factory.podcast_episode_item(episode, media_file, parent_id)

    def create_container(self, record: PodcastChannel | PodcastEpisode) -> BrowseNode:
        if isinstance(record, PodcastEpisode):
            return self._episode_item(record)
        return self.factory.podcast_container(
            self.node_type, self.item_id_of(record), record, self.get_child_size_of(record)
        )

    def render_child(self, parent: PodcastChannel, child: PodcastEpisode) -> BrowseNode:
        return self._episode_item(child)
