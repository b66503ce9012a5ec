"""
Root menu composition workflow.

Maps the menu toggles of a BrowseSettings snapshot to the ordered list of
node types shown under the root container. The order is fixed; a disabled
toggle removes its entry and nothing else.

USAGE:
    from mediabrowse.workflows.browse.compose_root_menu_wf import compose_root_menu

    menu = compose_root_menu(settings)
"""

from __future__ import annotations

from mediabrowse.helpers.dto.browse_dto import NodeType
from mediabrowse.helpers.dto.config_dto import BrowseSettings

MENU_ORDER: tuple[tuple[str, NodeType], ...] = (
    ("index", NodeType.INDEX),
    ("index_id3", NodeType.INDEX_ID3),
    ("folder", NodeType.MEDIA_FILE),
    ("media_file_by_folder", NodeType.MEDIA_FILE_BY_FOLDER),
    ("artist", NodeType.ARTIST),
    ("artist_by_folder", NodeType.ARTIST_BY_FOLDER),
    ("album", NodeType.ALBUM),
    ("album_id3", NodeType.ALBUM_ID3),
    ("album_id3_by_folder", NodeType.ALBUM_ID3_BY_FOLDER),
    ("playlist", NodeType.PLAYLIST),
    ("album_by_genre", NodeType.ALBUM_BY_GENRE),
    ("album_id3_by_genre", NodeType.ALBUM_ID3_BY_GENRE),
    ("album_id3_by_folder_genre", NodeType.ALBUM_ID3_BY_FOLDER_GENRE),
    ("song_by_genre", NodeType.SONG_BY_GENRE),
    ("song_by_folder_genre", NodeType.SONG_BY_FOLDER_GENRE),
    ("audiobook_by_genre", NodeType.AUDIOBOOK_BY_GENRE),
    ("recent_album", NodeType.RECENT),
    ("recent_album_id3", NodeType.RECENT_ID3),
    ("recent_album_id3_by_folder", NodeType.RECENT_ID3_BY_FOLDER),
    ("random_song", NodeType.RANDOM_SONG),
    ("random_album", NodeType.RANDOM_ALBUM),
    ("random_song_by_artist", NodeType.RANDOM_SONG_BY_ARTIST),
    ("random_song_by_folder_artist", NodeType.RANDOM_SONG_BY_FOLDER_ARTIST),
    ("random_song_by_genre", NodeType.RANDOM_SONG_BY_GENRE),
    ("random_song_by_folder_genre", NodeType.RANDOM_SONG_BY_FOLDER_GENRE),
    ("podcast", NodeType.PODCAST),
)


def compose_root_menu(settings: BrowseSettings) -> list[NodeType]:
    """Enabled menu entries in display order."""
    return [node_type for toggle, node_type in MENU_ORDER if getattr(settings.menu, toggle)]
