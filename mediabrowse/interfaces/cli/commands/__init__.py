"""
Commands package.
"""

from .browse import cmd_browse
from .menu import cmd_menu
from .search import cmd_search

__all__ = [
    "cmd_browse",
    "cmd_menu",
    "cmd_search",
]
