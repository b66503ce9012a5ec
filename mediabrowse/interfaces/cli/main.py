#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from mediabrowse.helpers.logging_helper import configure_logging
from mediabrowse.interfaces.cli.commands import cmd_browse, cmd_menu, cmd_search


def _add_source_args(s: argparse.ArgumentParser) -> None:
    s.add_argument("--config", help="YAML config file merged over the default sources")
    s.add_argument("--library", help="YAML library snapshot (overrides library_path)")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="mediabrowse",
        description="MediaBrowse - DLNA content directory browse tree over a music library",
        epilog="Examples:\n"
        "  mediabrowse menu --library library.yaml          # Root menu\n"
        "  mediabrowse browse artist --count 20             # First 20 artists\n"
        "  mediabrowse browse alid3/17 --metadata           # One album's own node\n"
        "  mediabrowse search 'upnp:class derivedfrom \"object.item.audioItem\" and dc:title contains \"blue\"'",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'mediabrowse <command> --help' for command-specific help)",
    )

    # browse: children or metadata of one object id
    s = sub.add_parser("browse", help="Browse one object id")
    s.add_argument("object_id", help="object id: <token> or <token>/<item id>; '0' is the root")
    s.add_argument("--metadata", action="store_true", help="show the object itself instead of its children")
    s.add_argument("--offset", type=int, default=0, help="index of the first child (default: 0)")
    s.add_argument("--count", type=int, default=0, help="number of children; 0 = all (default: 0)")
    _add_source_args(s)
    s.set_defaults(func=cmd_browse)

    # search: UPnP search criteria
    s = sub.add_parser("search", help="Run a UPnP search query")
    s.add_argument("query", help="UPnP search criteria")
    s.add_argument("--container", default="0", help="container id to search below (default: 0)")
    s.add_argument("--filter", default=None, help="UPnP filter argument (default: none)")
    s.add_argument("--offset", type=int, default=0, help="index of the first hit (default: 0)")
    s.add_argument("--count", type=int, default=0, help="number of hits; 0 = up to the server maximum")
    _add_source_args(s)
    s.set_defaults(func=cmd_search)

    # menu: enabled root menu entries
    s = sub.add_parser("menu", help="Show the enabled root menu")
    _add_source_args(s)
    s.set_defaults(func=cmd_menu)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    configure_logging("DEBUG" if args.verbose else "WARNING")
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
