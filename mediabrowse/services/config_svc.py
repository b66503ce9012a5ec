#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML files and env vars
#  - Caches composed config; reload() recomposes it
#  - Hands out immutable BrowseSettings snapshots per request
# ======================================================================

from __future__ import annotations

import logging
import os
from dataclasses import fields
from typing import Any

import yaml

from mediabrowse.__version__ import __version__
from mediabrowse.helpers.dto.config_dto import BrowseSettings, GenreSort, MenuToggles, SearchMethod

ENV_PREFIX = "MEDIABROWSE_"


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → env), caches the
    result, and provides reload capability. Handlers never read the raw dict;
    they ask for a BrowseSettings snapshot on every call.
    """

    def __init__(self, overrides: dict[str, Any] | None = None, config_path: str | None = None) -> None:
        self._overrides = overrides
        self._config_path = config_path
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose(self._overrides)
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("dlna.random_max")
            50
            >>> service.get("dlna.missing", 7)
            7
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """
        Force reload configuration from all sources.

        The cached configuration is replaced only once the new one validates.

        Raises:
            ValueError: If the new configuration holds an invalid browse setting
        """
        self._logger.info("[Config] Reloading configuration from all sources")
        cfg = self.load_validated()
        self.apply(cfg)
        return cfg

    def load_validated(self) -> dict[str, Any]:
        """
        Compose a fresh configuration and validate it without caching it.

        Raises:
            ValueError: If a configured value is out of range or not a known choice
        """
        cfg = self._compose(self._overrides)
        self._settings_from(cfg)
        return cfg

    def apply(self, cfg: dict[str, Any]) -> None:
        """Make cfg, as returned by load_validated(), the cached configuration."""
        self._config = cfg

    def get_browse_settings(self) -> BrowseSettings:
        """
        Build a BrowseSettings snapshot from the current configuration.

        Raises:
            ValueError: If a configured value is out of range or not a known choice
        """
        return self._settings_from(self.get_config())

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _settings_from(self, cfg: dict[str, Any]) -> BrowseSettings:
        dlna = cfg.get("dlna") or {}
        menu = cfg.get("menu") or {}
        toggles = MenuToggles(**{f.name: bool(menu[f.name]) for f in fields(MenuToggles) if f.name in menu})
        return BrowseSettings(
            base_url=str(dlna["base_url"] or ""),
            server_name=str(dlna["server_name"]),
            random_max=int(dlna["random_max"]),
            recent_max=int(dlna["recent_max"]),
            search_max=int(dlna["search_max"]),
            search_method=SearchMethod(dlna["search_method"]),
            genre_count_visible=bool(dlna["genre_count_visible"]),
            sort_albums_by_year=bool(dlna["sort_albums_by_year"]),
            album_genre_sort=GenreSort(dlna["album_genre_sort"]),
            song_genre_sort=GenreSort(dlna["song_genre_sort"]),
            cover_art_size=int(dlna["cover_art_size"]),
            menu=toggles,
        )

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/mediabrowse/config.yaml  (if present)
          3) ./config/config.yaml
          4) $CONFIG_PATH (if set)
          5) config_path passed in (if set)
          6) overrides dict passed in
          7) Environment variables (MEDIABROWSE_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        # 1) System-wide YAML
        self._deep_merge(cfg, self._load_yaml("/etc/mediabrowse/config.yaml"))

        # 2) Repo-local config
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        # 3) Optional path via env
        env_path = os.getenv("CONFIG_PATH")
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        # 4) Explicit file, e.g. from the CLI
        if self._config_path:
            self._deep_merge(cfg, self._load_yaml(self._config_path))

        # 5) Direct overrides
        if overrides:
            self._deep_merge(cfg, overrides)

        # 6) Environment variable overrides (flat -> nested mapping)
        self._apply_env_overrides(cfg)

        self._logger.debug(f"[Config] compose() loaded config; keys: {list(cfg.keys())}")
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        settings = BrowseSettings()
        return {
            "version": __version__,
            # HTTP interface
            "host": "0.0.0.0",
            "port": 4041,
            "log_level": "INFO",
            # YAML library snapshot for the in-memory collaborators
            "library_path": None,
            # Folder ids exposed to clients; None = every folder of the library
            "folders": None,
            "dlna": {
                "base_url": settings.base_url,
                "server_name": settings.server_name,
                "random_max": settings.random_max,
                "recent_max": settings.recent_max,
                "search_max": settings.search_max,
                "search_method": settings.search_method.value,
                "genre_count_visible": settings.genre_count_visible,
                "sort_albums_by_year": settings.sort_albums_by_year,
                "album_genre_sort": settings.album_genre_sort.value,
                "song_genre_sort": settings.song_genre_sort.value,
                "cover_art_size": settings.cover_art_size,
            },
            "menu": {f.name: getattr(settings.menu, f.name) for f in fields(MenuToggles)},
            # Title overrides, keyed like "dlna.title.artists"
            "titles": {},
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"[Config] Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"[Config] Ignoring config file {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          MEDIABROWSE_PORT=8080
          MEDIABROWSE_LIBRARY_PATH=/srv/library.yaml
          MEDIABROWSE_DLNA_RANDOM_MAX=20
          MEDIABROWSE_MENU_PODCAST=false
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX):
                continue
            key = k[len(ENV_PREFIX) :].lower()
            val = self._parse_env_value(v)
            if key in cfg and not isinstance(cfg[key], dict):
                cfg[key] = val
                continue
            parts = key.split("_", 1)
            if len(parts) == 1:
                continue
            section, field = parts
            if isinstance(cfg.get(section), dict):
                cfg[section][field] = val

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        if value.lower() in ("true", "false"):
            return value.lower() == "true"
        if value.isdigit():
            return int(value)
        return value
