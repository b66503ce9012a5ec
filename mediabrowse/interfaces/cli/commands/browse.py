"""
Browse command: list the children or the metadata of one object id.
"""

from __future__ import annotations

import argparse

from mediabrowse.helpers.dto.browse_dto import BrowseFlag
from mediabrowse.helpers.exceptions import BrowseError
from mediabrowse.interfaces.cli.cli_ui import print_browse_result, print_error
from mediabrowse.interfaces.cli.utils import open_content_directory


def cmd_browse(args: argparse.Namespace) -> int:
    flag = BrowseFlag.METADATA if args.metadata else BrowseFlag.DIRECT_CHILDREN
    try:
        content_directory = open_content_directory(args)
        result = content_directory.browse(args.object_id, flag, args.offset, args.count)
    except (BrowseError, OSError, ValueError) as e:
        print_error(f"Browse failed: {e}")
        return 1
    print_browse_result(result, f"{args.object_id} ({flag.value})")
    return 0
