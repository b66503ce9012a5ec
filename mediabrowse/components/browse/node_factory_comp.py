"""
Node factory component.

Turns library records into BrowseNode values: container ids, parent ids,
UPnP classes, cover art URIs and stream resources. Handlers call it once per
record; it never queries the library.
"""

from __future__ import annotations

from urllib.parse import urlencode

from mediabrowse.helpers.dto.browse_dto import ROOT_PARENT_ID, BrowseNode, NodeType, Resource
from mediabrowse.helpers.dto.library_dto import (
    Album,
    Artist,
    MediaFile,
    MediaType,
    MusicFolder,
    MusicIndex,
    Playlist,
    PodcastChannel,
    PodcastEpisode,
)
from mediabrowse.helpers.id_codec import EPISODE, encode_address, encode_plain_id
from mediabrowse.helpers.time_helper import NodeFormatter
from mediabrowse.persistence.contracts import SettingsProvider

CLASS_CONTAINER = "object.container"
CLASS_STORAGE_FOLDER = "object.container.storageFolder"
CLASS_MUSIC_ALBUM = "object.container.album.musicAlbum"
CLASS_MUSIC_ARTIST = "object.container.person.musicArtist"
CLASS_MUSIC_GENRE = "object.container.genre.musicGenre"
CLASS_PLAYLIST = "object.container.playlistContainer"
CLASS_MUSIC_TRACK = "object.item.audioItem.musicTrack"
CLASS_AUDIO_BOOK = "object.item.audioItem.audioBook"
CLASS_AUDIO_BROADCAST = "object.item.audioItem.audioBroadcast"
CLASS_VIDEO_ITEM = "object.item.videoItem"

_MIME_TYPES = {
    "mp3": "audio/mpeg",
    "flac": "audio/flac",
    "ogg": "audio/ogg",
    "oga": "audio/ogg",
    "opus": "audio/ogg",
    "m4a": "audio/mp4",
    "aac": "audio/aac",
    "wav": "audio/wav",
    "wma": "audio/x-ms-wma",
    "dsf": "audio/x-dsf",
    "mp4": "video/mp4",
    "m4v": "video/mp4",
    "mkv": "video/x-matroska",
    "avi": "video/x-msvideo",
}


def mime_type_of(media_file: MediaFile) -> str | None:
    if not media_file.format:
        return None
    return _MIME_TYPES.get(media_file.format.lower())


class NodeFactory:
    """Builds BrowseNode values for every node type."""

    def __init__(self, settings: SettingsProvider, formatter: NodeFormatter | None = None) -> None:
        self._settings = settings
        self._formatter = formatter or NodeFormatter()

    # ------------------------------------------------------------------
    # URIs
    # ------------------------------------------------------------------
    def _base_url(self) -> str:
        base_url = self._settings.get_browse_settings().base_url.strip()
        if not base_url:
            msg = "DLNA base URL is not set"
            raise ValueError(msg)
        return base_url.rstrip("/")

    def cover_art_uri(self, art_id: str) -> str:
        size = self._settings.get_browse_settings().cover_art_size
        return f"{self._base_url()}/ext/coverArt.view?{urlencode({'id': art_id, 'size': size})}"

    def stream_uri(self, media_file: MediaFile) -> str:
        return f"{self._base_url()}/ext/stream?{urlencode({'id': media_file.id})}"

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------
    def root_container(self, child_count: int) -> BrowseNode:
        return BrowseNode(
            id=NodeType.ROOT.value,
            parent_id=ROOT_PARENT_ID,
            title=self._settings.get_browse_settings().server_name,
            upnp_class=CLASS_CONTAINER,
            container=True,
            child_count=child_count,
            searchable=True,
        )

    def menu_container(self, node_type: NodeType, title: str, child_count: int) -> BrowseNode:
        return BrowseNode(
            id=encode_address(node_type),
            parent_id=NodeType.ROOT.value,
            title=title,
            upnp_class=CLASS_CONTAINER,
            container=True,
            child_count=child_count,
        )

    def folder_container(
        self, node_type: NodeType, item_id: str, folder: MusicFolder, child_count: int
    ) -> BrowseNode:
        return BrowseNode(
            id=encode_address(node_type, item_id),
            parent_id=encode_address(node_type),
            title=folder.name,
            upnp_class=CLASS_STORAGE_FOLDER,
            container=True,
            child_count=child_count,
        )

    def genre_container(
        self,
        node_type: NodeType,
        item_id: str,
        name: str,
        child_count: int,
        parent_id: str | None = None,
    ) -> BrowseNode:
        title = name
        if self._settings.get_browse_settings().genre_count_visible:
            title = f"{name} {child_count}"
        return BrowseNode(
            id=encode_address(node_type, item_id),
            parent_id=parent_id or encode_address(node_type),
            title=title,
            upnp_class=CLASS_MUSIC_GENRE,
            container=True,
            child_count=child_count,
        )

    def artist_container(
        self,
        node_type: NodeType,
        item_id: str,
        artist: Artist,
        child_count: int,
        parent_id: str | None = None,
    ) -> BrowseNode:
        return BrowseNode(
            id=encode_address(node_type, item_id),
            parent_id=parent_id or encode_address(node_type),
            title=artist.name,
            upnp_class=CLASS_MUSIC_ARTIST,
            container=True,
            child_count=child_count,
            album_art_uri=self.cover_art_uri(f"ar-{artist.id}") if artist.cover_art_path else None,
        )

    def album_container(
        self,
        node_type: NodeType,
        item_id: str,
        album: Album,
        child_count: int,
        parent_id: str | None = None,
    ) -> BrowseNode:
        return BrowseNode(
            id=encode_address(node_type, item_id),
            parent_id=parent_id or encode_address(node_type),
            title=album.name,
            upnp_class=CLASS_MUSIC_ALBUM,
            container=True,
            child_count=child_count,
            album_art_uri=self.cover_art_uri(f"al-{album.id}"),
            artist=album.artist,
            genre=album.genre,
            date=self._formatter.date(album.year),
            description=album.comment,
        )

    def media_file_container(
        self,
        node_type: NodeType,
        item_id: str,
        media_file: MediaFile,
        child_count: int,
        parent_id: str | None = None,
    ) -> BrowseNode:
        is_album = media_file.media_type == MediaType.ALBUM
        return BrowseNode(
            id=encode_address(node_type, item_id),
            parent_id=parent_id or encode_address(node_type),
            title=media_file.title,
            upnp_class=CLASS_MUSIC_ALBUM if is_album else CLASS_STORAGE_FOLDER,
            container=True,
            child_count=child_count,
            album_art_uri=self.cover_art_uri(encode_plain_id(media_file.id)) if media_file.cover_art_path else None,
            artist=media_file.album_artist or media_file.artist if is_album else None,
            genre=media_file.genre if is_album else None,
            date=self._formatter.date(media_file.year) if is_album else None,
        )

    def index_container(self, node_type: NodeType, item_id: str, index: MusicIndex, child_count: int) -> BrowseNode:
        return BrowseNode(
            id=encode_address(node_type, item_id),
            parent_id=encode_address(node_type),
            title=index.key,
            upnp_class=CLASS_STORAGE_FOLDER,
            container=True,
            child_count=child_count,
        )

    def playlist_container(
        self, node_type: NodeType, item_id: str, playlist: Playlist, child_count: int
    ) -> BrowseNode:
        return BrowseNode(
            id=encode_address(node_type, item_id),
            parent_id=encode_address(node_type),
            title=playlist.name,
            upnp_class=CLASS_PLAYLIST,
            container=True,
            child_count=child_count,
            description=playlist.comment,
        )

    def podcast_container(
        self, node_type: NodeType, item_id: str, channel: PodcastChannel, child_count: int
    ) -> BrowseNode:
        return BrowseNode(
            id=encode_address(node_type, item_id),
            parent_id=encode_address(node_type),
            title=channel.title,
            upnp_class=CLASS_MUSIC_ALBUM,
            container=True,
            child_count=child_count,
            album_art_uri=self.cover_art_uri(f"pod-{channel.id}") if channel.image_url else None,
            description=channel.description,
        )

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def _resource(self, media_file: MediaFile) -> Resource:
        return Resource(
            uri=self.stream_uri(media_file),
            mime_type=mime_type_of(media_file),
            duration=self._formatter.duration(media_file.duration_seconds),
            size=media_file.file_size,
        )

    def media_item(self, media_file: MediaFile, parent_id: str) -> BrowseNode:
        """Render a playable file. Its id always lives under the folder node type."""
        if media_file.media_type == MediaType.VIDEO:
            upnp_class = CLASS_VIDEO_ITEM
        elif media_file.media_type == MediaType.AUDIOBOOK:
            upnp_class = CLASS_AUDIO_BOOK
        elif media_file.media_type == MediaType.PODCAST:
            upnp_class = CLASS_AUDIO_BROADCAST
        else:
            upnp_class = CLASS_MUSIC_TRACK
        art_id = f"al-{media_file.album_id}" if media_file.album_id is not None else encode_plain_id(media_file.id)
        return BrowseNode(
            id=encode_address(NodeType.MEDIA_FILE, encode_plain_id(media_file.id)),
            parent_id=parent_id,
            title=media_file.title,
            upnp_class=upnp_class,
            container=False,
            album_art_uri=self.cover_art_uri(art_id),
            artist=media_file.artist,
            album=media_file.album_name,
            genre=media_file.genre,
            date=self._formatter.date(media_file.year),
            track_number=media_file.track_number,
            resource=self._resource(media_file),
        )

    def podcast_episode_item(
        self, episode: PodcastEpisode, media_file: MediaFile | None, parent_id: str
    ) -> BrowseNode:
        return BrowseNode(
            id=encode_address(NodeType.PODCAST, EPISODE.encode(episode.id)),
            parent_id=parent_id,
            title=episode.title,
            upnp_class=CLASS_AUDIO_BROADCAST,
            container=False,
            resource=self._resource(media_file) if media_file is not None else None,
        )
