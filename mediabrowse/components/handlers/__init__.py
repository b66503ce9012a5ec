"""
Handlers package.

HANDLER_CLASSES lists the handler of every node type except the root, which
needs the other handlers and is wired by the content directory service.
"""

from .album_handlers_comp import (
    AlbumHandler,
    AlbumId3ByFolderHandler,
    AlbumId3Handler,
    RecentAlbumHandler,
    RecentAlbumId3ByFolderHandler,
    RecentAlbumId3Handler,
)
from .artist_handlers_comp import ArtistByFolderHandler, ArtistHandler
from .genre_handlers_comp import (
    AlbumByGenreHandler,
    AlbumId3ByFolderGenreHandler,
    AlbumId3ByGenreHandler,
    AudiobookByGenreHandler,
    SongByFolderGenreHandler,
    SongByGenreHandler,
)
from .index_handlers_comp import IndexHandler, IndexId3Handler
from .media_file_handlers_comp import MediaFileByFolderHandler, MediaFileHandler
from .playlist_handler_comp import PlaylistHandler
from .podcast_handler_comp import PodcastHandler
from .random_handlers_comp import (
    RandomAlbumHandler,
    RandomSongByArtistHandler,
    RandomSongByFolderArtistHandler,
    RandomSongByFolderGenreHandler,
    RandomSongByGenreHandler,
    RandomSongHandler,
)
from .root_handler_comp import RootHandler

HANDLER_CLASSES = (
    PlaylistHandler,
    MediaFileHandler,
    MediaFileByFolderHandler,
    AlbumHandler,
    AlbumId3Handler,
    AlbumId3ByFolderHandler,
    RecentAlbumHandler,
    RecentAlbumId3Handler,
    RecentAlbumId3ByFolderHandler,
    ArtistHandler,
    ArtistByFolderHandler,
    AlbumByGenreHandler,
    AlbumId3ByGenreHandler,
    AlbumId3ByFolderGenreHandler,
    SongByGenreHandler,
    SongByFolderGenreHandler,
    AudiobookByGenreHandler,
    IndexHandler,
    IndexId3Handler,
    PodcastHandler,
    RandomAlbumHandler,
    RandomSongHandler,
    RandomSongByArtistHandler,
    RandomSongByFolderArtistHandler,
    RandomSongByGenreHandler,
    RandomSongByFolderGenreHandler,
)

__all__ = [
    "HANDLER_CLASSES",
    "AlbumByGenreHandler",
    "AlbumHandler",
    "AlbumId3ByFolderGenreHandler",
    "AlbumId3ByFolderHandler",
    "AlbumId3ByGenreHandler",
    "AlbumId3Handler",
    "ArtistByFolderHandler",
    "ArtistHandler",
    "AudiobookByGenreHandler",
    "IndexHandler",
    "IndexId3Handler",
    "MediaFileByFolderHandler",
    "MediaFileHandler",
    "PlaylistHandler",
    "PodcastHandler",
    "RandomAlbumHandler",
    "RandomSongByArtistHandler",
    "RandomSongByFolderArtistHandler",
    "RandomSongByFolderGenreHandler",
    "RandomSongByGenreHandler",
    "RandomSongHandler",
    "RecentAlbumHandler",
    "RecentAlbumId3ByFolderHandler",
    "RecentAlbumId3Handler",
    "RootHandler",
    "SongByFolderGenreHandler",
    "SongByGenreHandler",
]
