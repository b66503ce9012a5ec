"""Playlists and podcasts over a LibraryStore."""

from __future__ import annotations

from mediabrowse.helpers.dto.library_dto import MediaFile, Playlist, PodcastChannel, PodcastEpisode
from mediabrowse.persistence.memory.store import LibraryStore, sort_text


class PlaylistOperations:
    def __init__(self, store: LibraryStore) -> None:
        self._store = store

    def _sorted(self) -> list[Playlist]:
        return sorted(self._store.snapshot.playlists, key=lambda p: (sort_text(p.name), p.id))

    def list_playlists(self, offset: int, count: int) -> list[Playlist]:
        return self._sorted()[offset : offset + count]

    def count_playlists(self) -> int:
        return len(self._store.snapshot.playlists)

    def get_playlist(self, playlist_id: int) -> Playlist | None:
        return next((p for p in self._store.snapshot.playlists if p.id == playlist_id), None)

    def list_playlist_songs(self, playlist: Playlist, offset: int, count: int) -> list[MediaFile]:
        by_id = self._store.snapshot.media_files_by_id
        songs = [by_id[i] for i in playlist.song_ids if i in by_id]
        return songs[offset : offset + count]

    def count_playlist_songs(self, playlist: Playlist) -> int:
        by_id = self._store.snapshot.media_files_by_id
        return sum(1 for i in playlist.song_ids if i in by_id)


class PodcastOperations:
    def __init__(self, store: LibraryStore) -> None:
        self._store = store

    def list_channels(self, offset: int, count: int) -> list[PodcastChannel]:
        channels = sorted(self._store.snapshot.podcast_channels, key=lambda c: (sort_text(c.title), c.id))
        return channels[offset : offset + count]

    def count_channels(self) -> int:
        return len(self._store.snapshot.podcast_channels)

    def get_channel(self, channel_id: int) -> PodcastChannel | None:
        return next((c for c in self._store.snapshot.podcast_channels if c.id == channel_id), None)

    def _episodes(self, channel: PodcastChannel) -> list[PodcastEpisode]:
        episodes = [e for e in self._store.snapshot.podcast_episodes if e.channel_id == channel.id]
        episodes.sort(key=lambda e: (-e.published, e.id))
        return episodes

    def list_episodes(self, channel: PodcastChannel, offset: int, count: int) -> list[PodcastEpisode]:
        return self._episodes(channel)[offset : offset + count]

    def count_episodes(self, channel: PodcastChannel) -> int:
        return len(self._episodes(channel))

    def get_episode(self, episode_id: int) -> PodcastEpisode | None:
        return next((e for e in self._store.snapshot.podcast_episodes if e.id == episode_id), None)
