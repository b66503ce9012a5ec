"""
Text resources service.

Menu titles shown to control points. English defaults, overridable per key
through the "titles" config section.
"""

from __future__ import annotations

from mediabrowse.services.config_svc import ConfigService

DEFAULT_TITLES: dict[str, str] = {
    "dlna.title.index": "Index",
    "dlna.title.indexId3": "Index (ID3)",
    "dlna.title.folders": "Folders",
    "dlna.title.foldersByFolder": "Folders by folder",
    "dlna.title.artists": "Artists",
    "dlna.title.artistsByFolder": "Artists by folder",
    "dlna.title.albums": "Albums",
    "dlna.title.albumsId3": "Albums (ID3)",
    "dlna.title.albumsId3ByFolder": "Albums by folder (ID3)",
    "dlna.title.playlists": "Playlists",
    "dlna.title.albumsByGenre": "Albums by genre",
    "dlna.title.albumsId3ByGenre": "Albums by genre (ID3)",
    "dlna.title.albumsId3ByFolderGenre": "Albums by folder and genre (ID3)",
    "dlna.title.songsByGenre": "Songs by genre",
    "dlna.title.songsByFolderGenre": "Songs by folder and genre",
    "dlna.title.audiobooksByGenre": "Audiobooks by genre",
    "dlna.title.recentAlbums": "Recently added albums",
    "dlna.title.recentAlbumsId3": "Recently added albums (ID3)",
    "dlna.title.recentAlbumsId3ByFolder": "Recently added albums by folder (ID3)",
    "dlna.title.randomSong": "Random songs",
    "dlna.title.randomAlbum": "Random albums",
    "dlna.title.randomSongByArtist": "Random songs by artist",
    "dlna.title.randomSongByFolderArtist": "Random songs by folder and artist",
    "dlna.title.randomSongByGenre": "Random songs by genre",
    "dlna.title.randomSongByFolderGenre": "Random songs by folder and genre",
    "dlna.title.podcast": "Podcasts",
}


class TextResourceService:
    def __init__(self, config: ConfigService) -> None:
        self._config = config

    def get_text(self, key: str) -> str:
        overrides = self._config.get("titles") or {}
        text = overrides.get(key) or DEFAULT_TITLES.get(key)
        return str(text) if text else key
