"""
Application composition root and dependency injection container.

This module defines the Application class, which owns the configuration,
the library collaborators and the services built on top of them.

Architecture:
- Application owns: config service, library, node factory, text resources, content directory
- Config-derived values are instance attributes (no module-level config globals)
- Services are registered via register_service() during start()
- Access services via: application.get_service("name") or application.services["name"]
- Do NOT construct services directly outside of this class

The singleton instance is available as `application` at module level.
"""

from __future__ import annotations

import logging
from typing import Any

from mediabrowse.components.browse.node_factory_comp import NodeFactory
from mediabrowse.persistence.library import MemoryLibrary
from mediabrowse.services.config_svc import ConfigService
from mediabrowse.services.content_directory_svc import ContentDirectoryService
from mediabrowse.services.text_resources_svc import TextResourceService


# ----------------------------------------------------------------------
#  Application Class - Composition Root & DI Container
# ----------------------------------------------------------------------
class Application:
    """
    Application composition root and dependency injection container.

    Configuration Access:
    - Raw config is PRIVATE (_config) and used only internally in Application
    - To access config outside app.py, use: application.get_service("config").get_config()
    - Handlers read settings through ConfigService.get_browse_settings() on every request
    """

    def __init__(self, config_service: ConfigService | None = None) -> None:
        self._config_service = config_service or ConfigService()
        self._config = self._config_service.get_config()

        self.api_host: str = str(self._config["host"])
        self.api_port: int = int(self._config["port"])
        self.log_level: str = str(self._config["log_level"]).upper()
        self.library_path: str | None = self._config.get("library_path")

        self.library: MemoryLibrary | None = None
        self.services: dict[str, Any] = {}
        self._running = False

    def register_service(self, name: str, service: Any) -> None:
        """
        Register a service in the DI container.

        Args:
            name: Service name for lookup
            service: Service instance
        """
        self.services[name] = service

    def get_service(self, name: str) -> Any:
        """
        Get a service from the DI container.

        Raises:
            KeyError: If service not found
        """
        if name not in self.services:
            msg = f"Service '{name}' not found. Available services: {list(self.services.keys())}"
            raise KeyError(msg)
        return self.services[name]

    def is_running(self) -> bool:
        return self._running

    def _load_library(self) -> MemoryLibrary:
        if self.library_path:
            logging.info(f"[Application] Loading library snapshot from {self.library_path}")
            return MemoryLibrary.from_yaml(self.library_path)
        logging.warning("[Application] No library_path configured, serving an empty library")
        return MemoryLibrary()

    def start(self) -> None:
        """
        Build the library and register every service.

        Raises:
            OSError: If the configured library snapshot cannot be read
            ValueError: If the configuration holds an invalid browse setting
        """
        if self._running:
            logging.warning("[Application] Already running, ignoring start() call")
            return

        logging.info("[Application] Starting...")

        # Fail on bad settings before any request arrives
        self._config_service.get_browse_settings()

        self.library = self._load_library()
        self.library.configure_folders(self._config.get("folders"))

        factory = NodeFactory(self._config_service)
        resources = TextResourceService(self._config_service)
        content_directory = ContentDirectoryService.build(
            self.library.collaborators(), factory, self._config_service, resources
        )

        self.register_service("config", self._config_service)
        self.register_service("library", self.library)
        self.register_service("text_resources", resources)
        self.register_service("content_directory", content_directory)

        self._running = True
        logging.info(f"[Application] Started with services: {sorted(self.services)}")

    def reload(self) -> list[int]:
        """
        Reload configuration and the library snapshot in place.

        Handlers keep their collaborators; the new settings and records are
        visible from the next request on. Nothing changes when the new
        configuration or snapshot fails to load.

        Returns:
            Ids of the folders configured after the reload

        Raises:
            RuntimeError: If the application is not started
            OSError: If the configured library snapshot cannot be read
            ValueError: If the new configuration holds an invalid browse setting
        """
        if self.library is None:
            msg = "Application is not started"
            raise RuntimeError(msg)
        logging.info("[Application] Reloading configuration and library")
        config = self._config_service.load_validated()
        library_path = config.get("library_path")
        if library_path:
            self.library.reload(library_path)

        self._config_service.apply(config)
        self._config = config
        self.library_path = library_path
        folders = self.library.configure_folders(config.get("folders"))
        logging.info("[Application] Reloaded configuration and library")
        return [f.id for f in folders]

    def stop(self) -> None:
        if not self._running:
            return
        logging.info("[Application] Stopping...")
        self.services.clear()
        self.library = None
        self._running = False
        logging.info("[Application] Stopped")


# Module-level singleton
application = Application()
