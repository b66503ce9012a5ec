"""
Menu command: show the enabled root menu.
"""

from __future__ import annotations

import argparse

from mediabrowse.helpers.exceptions import BrowseError
from mediabrowse.interfaces.cli.cli_ui import print_browse_result, print_error
from mediabrowse.interfaces.cli.utils import open_content_directory


def cmd_menu(args: argparse.Namespace) -> int:
    try:
        result = open_content_directory(args).menu()
    except (BrowseError, OSError, ValueError) as e:
        print_error(f"Could not build the menu: {e}")
        return 1
    print_browse_result(result, "Root menu")
    return 0
