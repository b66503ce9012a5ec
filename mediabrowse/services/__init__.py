"""
Services package.
"""

from .config_svc import ConfigService
from .content_directory_svc import UNLIMITED, ContentDirectoryService
from .text_resources_svc import DEFAULT_TITLES, TextResourceService

__all__ = [
    "DEFAULT_TITLES",
    "UNLIMITED",
    "ConfigService",
    "ContentDirectoryService",
    "TextResourceService",
]
