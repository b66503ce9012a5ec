"""
Shared utility functions for CLI commands.
"""

from __future__ import annotations

import argparse
from typing import Any

from mediabrowse.app import Application
from mediabrowse.services.config_svc import ConfigService
from mediabrowse.services.content_directory_svc import ContentDirectoryService

__all__ = [
    "open_content_directory",
]


def open_content_directory(args: argparse.Namespace) -> ContentDirectoryService:
    """
    Start a private Application for one CLI invocation.

    The CLI does not talk to a running server; it loads the library itself
    from --library or the configured library_path.

    Raises:
        OSError: If the library snapshot cannot be read
        ValueError: If the library or a browse setting is invalid
    """
    overrides: dict[str, Any] = {}
    if getattr(args, "library", None):
        overrides["library_path"] = args.library
    app = Application(ConfigService(overrides or None, config_path=getattr(args, "config", None)))
    app.start()
    return app.get_service("content_directory")  # type: ignore[no-any-return]
