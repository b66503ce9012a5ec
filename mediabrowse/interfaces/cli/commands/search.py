"""
Search command: run a UPnP search query below a container.
"""

from __future__ import annotations

import argparse

from mediabrowse.helpers.exceptions import BrowseError
from mediabrowse.interfaces.cli.cli_ui import print_browse_result, print_error, print_info
from mediabrowse.interfaces.cli.utils import open_content_directory


def cmd_search(args: argparse.Namespace) -> int:
    try:
        content_directory = open_content_directory(args)
        result = content_directory.search(args.container, args.query, args.filter, args.offset, args.count)
    except (BrowseError, OSError, ValueError) as e:
        print_error(f"Search failed: {e}")
        return 1
    if not result.nodes:
        print_info(f"No matches for {args.query!r}")
        return 0
    print_browse_result(result, f"Search: {args.query}")
    return 0
