"""
Library snapshot and the store that holds it.

A LibrarySnapshot is immutable. LibraryStore swaps whole snapshots (and the
configured folder list) by reference, so a reader that grabs `store.snapshot`
once per call sees one consistent library even if a reload happens meanwhile.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, fields
from functools import cached_property
from pathlib import Path
from typing import Any

import yaml

from mediabrowse.helpers.dto.library_dto import (
    Album,
    Artist,
    MediaFile,
    MediaType,
    MusicFolder,
    Playlist,
    PodcastChannel,
    PodcastEpisode,
)

logger = logging.getLogger(__name__)


def index_key_of(name: str | None) -> str:
    """Index bucket for a display name: its upper-cased initial, or "#"."""
    if not name:
        return "#"
    initial = name.strip()[:1].upper()
    return initial if initial.isalpha() else "#"


def sort_text(value: str | None) -> str:
    return (value or "").casefold()


@dataclass(frozen=True)
class LibrarySnapshot:
    """Everything the in-memory collaborators serve, frozen at load time."""

    folders: tuple[MusicFolder, ...] = ()
    artists: tuple[Artist, ...] = ()
    albums: tuple[Album, ...] = ()
    media_files: tuple[MediaFile, ...] = ()
    playlists: tuple[Playlist, ...] = ()
    podcast_channels: tuple[PodcastChannel, ...] = ()
    podcast_episodes: tuple[PodcastEpisode, ...] = ()

    @cached_property
    def media_files_by_id(self) -> dict[int, MediaFile]:
        return {mf.id: mf for mf in self.media_files}

    @cached_property
    def folder_root_ids(self) -> frozenset[int]:
        return frozenset(mf.id for mf in self.media_files if mf.parent_id is None and mf.is_directory)


def _build(cls: type, raw: dict[str, Any]) -> Any:
    known = {f.name for f in fields(cls)}
    unknown = set(raw) - known
    if unknown:
        msg = f"Unknown {cls.__name__} fields: {sorted(unknown)}"
        raise ValueError(msg)
    values = dict(raw)
    if cls is MediaFile:
        values["media_type"] = MediaType(str(values.get("media_type", "MUSIC")).upper())
    for name in ("folder_ids", "song_ids"):
        if name in values:
            values[name] = tuple(values[name])
    return cls(**values)


def snapshot_from_dict(data: dict[str, Any]) -> LibrarySnapshot:
    """Build a snapshot from plain mappings (the shape of a YAML library file)."""
    return LibrarySnapshot(
        folders=tuple(_build(MusicFolder, r) for r in data.get("folders") or []),
        artists=tuple(_build(Artist, r) for r in data.get("artists") or []),
        albums=tuple(_build(Album, r) for r in data.get("albums") or []),
        media_files=tuple(_build(MediaFile, r) for r in data.get("media_files") or []),
        playlists=tuple(_build(Playlist, r) for r in data.get("playlists") or []),
        podcast_channels=tuple(_build(PodcastChannel, r) for r in data.get("podcast_channels") or []),
        podcast_episodes=tuple(_build(PodcastEpisode, r) for r in data.get("podcast_episodes") or []),
    )


def load_snapshot(path: str | Path) -> LibrarySnapshot:
    """
    Load a library snapshot from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the document is not a mapping or has unknown fields
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        msg = f"Library file {path} must contain a mapping"
        raise ValueError(msg)
    snapshot = snapshot_from_dict(data)
    logger.info(
        "[Library] Loaded %d folders, %d artists, %d albums, %d media files from %s",
        len(snapshot.folders),
        len(snapshot.artists),
        len(snapshot.albums),
        len(snapshot.media_files),
        path,
    )
    return snapshot


class LibraryStore:
    """Holder for the current snapshot and the configured folders."""

    def __init__(self, snapshot: LibrarySnapshot | None = None) -> None:
        self._lock = threading.Lock()
        self._snapshot = snapshot or LibrarySnapshot()
        self._folders: tuple[MusicFolder, ...] = self._snapshot.folders

    @property
    def snapshot(self) -> LibrarySnapshot:
        return self._snapshot

    @property
    def folders(self) -> tuple[MusicFolder, ...]:
        return self._folders

    def replace(self, snapshot: LibrarySnapshot) -> None:
        """Swap in a new snapshot; configured folders follow the snapshot."""
        with self._lock:
            self._snapshot = snapshot
            self._folders = snapshot.folders

    def configure_folders(self, folder_ids: list[int] | None) -> None:
        """Restrict the configured folders to folder_ids (None = all folders)."""
        with self._lock:
            snap = self._snapshot
            if folder_ids is None:
                self._folders = snap.folders
            else:
                wanted = set(folder_ids)
                self._folders = tuple(f for f in snap.folders if f.id in wanted)
