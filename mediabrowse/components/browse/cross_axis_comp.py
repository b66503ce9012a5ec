"""
Cross-axis delegation component.

Combines the folder axis with one secondary axis (genre, artist or album)
into a single virtual level:

- several folders configured: direct children are the folders, and the
  children of a folder are the secondary entities scoped to it. Their ids
  carry the folder ("fg:3;Jazz", "far:3;17", "fal:3;17").
- exactly one folder configured: the folder level disappears. Direct
  children are the secondary entities of that folder and their ids omit
  the folder ("g:Jazz", "ar:17", "al:17").
- no folder configured: nothing.

The folder count is read from the folder directory on every call.
Folder ids are untagged integers ("3"); "mf:3" is accepted as well.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from mediabrowse.components.browse.window_comp import bounded_total, effective_count
from mediabrowse.helpers.dto.config_dto import BrowseSettings, GenreSort
from mediabrowse.helpers.dto.library_dto import (
    Album,
    Artist,
    Genre,
    LibraryScope,
    ListOrder,
    MediaType,
    MusicFolder,
)
from mediabrowse.helpers.exceptions import NotFoundError
from mediabrowse.helpers.id_codec import (
    ALBUM,
    ARTIST,
    FOLDER,
    FOLDER_ALBUM,
    FOLDER_ARTIST,
    FOLDER_GENRE,
    GENRE,
    CompoundShape,
    decode_item_id,
    encode_plain_id,
)
from mediabrowse.persistence.contracts import (
    AlbumRepository,
    ArtistRepository,
    FolderDirectory,
    MediaFileRepository,
    SearchIndex,
)

E = TypeVar("E")


def genre_list_order(sort: GenreSort) -> ListOrder:
    return ListOrder.FREQUENCY if sort == GenreSort.FREQUENCY else ListOrder.ALPHABETICAL


@dataclass(frozen=True)
class FolderScoped(Generic[E]):
    """A secondary-axis entity seen inside one folder."""

    folder: MusicFolder
    entity: E
    collapsed: bool = False


class SecondaryAxis(Protocol[E]):
    name: str
    collapsed_shape: CompoundShape
    scoped_shape: CompoundShape

    def list_in_folder(self, folder: MusicFolder, offset: int, count: int) -> list[E]: ...

    def count_in_folder(self, folder: MusicFolder) -> int: ...

    def resolve(self, folder: MusicFolder, key: int | str) -> E | None: ...

    def key_of(self, entity: E) -> int | str: ...

    def child_count(self, folder: MusicFolder, entity: E) -> int: ...


class CrossAxisLogic(Generic[E]):
    """Folder x secondary axis combinator with single-folder collapse."""

    def __init__(self, folders: FolderDirectory, axis: SecondaryAxis[E]) -> None:
        self._folders = folders
        self.axis = axis

    @property
    def shapes(self) -> tuple[CompoundShape, ...]:
        return (self.axis.scoped_shape, self.axis.collapsed_shape, FOLDER)

    def configured_folders(self) -> list[MusicFolder]:
        return self._folders.list_configured_folders()

    # ------------------------------------------------------------------
    # Direct children
    # ------------------------------------------------------------------
    def get_direct_children(self, offset: int, count: int) -> list[MusicFolder | FolderScoped[E]]:
        folders = self.configured_folders()
        if len(folders) == 1:
            folder = folders[0]
            return [FolderScoped(folder, e, collapsed=True) for e in self.axis.list_in_folder(folder, offset, count)]
        return list(folders[offset : offset + count])

    def get_direct_children_count(self) -> int:
        folders = self.configured_folders()
        if len(folders) == 1:
            return self.axis.count_in_folder(folders[0])
        return len(folders)

    # ------------------------------------------------------------------
    # Children of a folder
    # ------------------------------------------------------------------
    def get_children_of_folder(self, folder: MusicFolder, offset: int, count: int) -> list[FolderScoped[E]]:
        return [FolderScoped(folder, e) for e in self.axis.list_in_folder(folder, offset, count)]

    def count_children_of_folder(self, folder: MusicFolder) -> int:
        return self.axis.count_in_folder(folder)

    def get_child_size_of(self, record: MusicFolder | FolderScoped[E]) -> int:
        if isinstance(record, MusicFolder):
            return self.count_children_of_folder(record)
        return self.axis.child_count(record.folder, record.entity)

    # ------------------------------------------------------------------
    # Ids
    # ------------------------------------------------------------------
    def encode(self, record: MusicFolder | FolderScoped[E]) -> str:
        if isinstance(record, MusicFolder):
            return encode_plain_id(record.id)
        key = self.axis.key_of(record.entity)
        if record.collapsed:
            return self.axis.collapsed_shape.encode(key)
        return self.axis.scoped_shape.encode(record.folder.id, key)

    def resolve(self, item_id: str) -> MusicFolder | FolderScoped[E]:
        """
        Resolve an id produced by encode().

        An id without the folder component only resolves while exactly one
        folder is configured; after the folder set grows it is stale.
        """
        decoded = decode_item_id(item_id, self.shapes, untagged=FOLDER)
        folders = self.configured_folders()
        if decoded.shape == FOLDER:
            return self.find_folder(folders, decoded.int_key)
        if decoded.shape == self.axis.scoped_shape:
            folder_id, key = decoded.keys
            folder = self.find_folder(folders, int(folder_id))
            return FolderScoped(folder, self._entity(folder, key, item_id))
        if len(folders) != 1:
            raise NotFoundError(self.axis.name, item_id)
        folder = folders[0]
        return FolderScoped(folder, self._entity(folder, decoded.keys[0], item_id), collapsed=True)

    def find_folder(self, folders: list[MusicFolder], folder_id: int) -> MusicFolder:
        for folder in folders:
            if folder.id == folder_id:
                return folder
        raise NotFoundError("folder", folder_id)

    def _entity(self, folder: MusicFolder, key: int | str, item_id: str) -> E:
        entity = self.axis.resolve(folder, key)
        if entity is None:
            raise NotFoundError(self.axis.name, item_id)
        return entity


# ----------------------------------------------------------------------
# Secondary axes
# ----------------------------------------------------------------------
class GenreAxis:
    """Genres of one folder, counted by albums or by songs."""

    name = "genre"
    collapsed_shape = GENRE
    scoped_shape = FOLDER_GENRE

    def __init__(
        self,
        search: SearchIndex,
        settings: Callable[[], BrowseSettings],
        media_types: tuple[MediaType, ...],
        album_scope: bool,
    ) -> None:
        self._search = search
        self._settings = settings
        self._media_types = media_types
        self._album_scope = album_scope

    def _facets(self, folder: MusicFolder) -> list[Genre]:
        settings = self._settings()
        sort = settings.album_genre_sort if self._album_scope else settings.song_genre_sort
        scope = LibraryScope(folders=(folder,), media_types=self._media_types, order=genre_list_order(sort))
        return self._search.genre_facets(scope)

    def list_in_folder(self, folder: MusicFolder, offset: int, count: int) -> list[Genre]:
        return self._facets(folder)[offset : offset + count]

    def count_in_folder(self, folder: MusicFolder) -> int:
        return len(self._facets(folder))

    def resolve(self, folder: MusicFolder, key: int | str) -> Genre | None:
        return next((g for g in self._facets(folder) if g.name == key), None)

    def key_of(self, entity: Genre) -> str:
        return entity.name

    def child_count(self, folder: MusicFolder, entity: Genre) -> int:
        return entity.album_count if self._album_scope else entity.song_count


class ArtistAxis:
    """ID3 artists of one folder; an artist counts its albums in that folder."""

    name = "artist"
    collapsed_shape = ARTIST
    scoped_shape = FOLDER_ARTIST

    def __init__(self, artists: ArtistRepository, albums: AlbumRepository) -> None:
        self._artists = artists
        self._albums = albums

    def list_in_folder(self, folder: MusicFolder, offset: int, count: int) -> list[Artist]:
        return self._artists.list_artists(LibraryScope(folders=(folder,)), offset, count)

    def count_in_folder(self, folder: MusicFolder) -> int:
        return self._artists.count_artists(LibraryScope(folders=(folder,)))

    def resolve(self, folder: MusicFolder, key: int | str) -> Artist | None:
        artist = self._artists.get_artist(int(key))
        if artist is None or folder.id not in artist.folder_ids:
            return None
        return artist

    def key_of(self, entity: Artist) -> int:
        return entity.id

    def child_count(self, folder: MusicFolder, entity: Artist) -> int:
        return self._albums.count_albums(LibraryScope(folders=(folder,), artist=entity))


class AlbumAxis:
    """
    ID3 albums of one folder; an album counts its songs.

    With window set, only the first window() albums of the ordering are
    exposed (recent views).
    """

    name = "album"
    collapsed_shape = ALBUM
    scoped_shape = FOLDER_ALBUM

    def __init__(
        self,
        albums: AlbumRepository,
        media_files: MediaFileRepository,
        order: ListOrder = ListOrder.ALPHABETICAL,
        window: Callable[[], int] | None = None,
    ) -> None:
        self._albums = albums
        self._media_files = media_files
        self._order = order
        self._window = window

    def _scope(self, folder: MusicFolder) -> LibraryScope:
        return LibraryScope(folders=(folder,), order=self._order)

    def list_in_folder(self, folder: MusicFolder, offset: int, count: int) -> list[Album]:
        if self._window is not None:
            count = effective_count(offset, count, self._window())
            if count == 0:
                return []
        return self._albums.list_albums(self._scope(folder), offset, count)

    def count_in_folder(self, folder: MusicFolder) -> int:
        total = self._albums.count_albums(self._scope(folder))
        if self._window is not None:
            return bounded_total(total, self._window())
        return total

    def resolve(self, folder: MusicFolder, key: int | str) -> Album | None:
        return self._albums.get_album(int(key))

    def key_of(self, entity: Album) -> int:
        return entity.id

    def child_count(self, folder: MusicFolder, entity: Album) -> int:
        return self._media_files.count_media_files(LibraryScope(folders=(folder,), album=entity))
