#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from mediabrowse.helpers.dto.browse_dto import BrowseResult

console = Console()

# Color scheme constants
COLOR_ERROR = "red"
COLOR_INFO = "cyan"


def browse_table(result: BrowseResult, title: str) -> Table:
    """One row per node; containers show their child count, items their resource URI."""
    table = Table(title=title, box=box.SIMPLE_HEAVY, caption=f"{result.count} of {result.total_matches}")
    table.add_column("Id", style=COLOR_INFO, no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Class", style="dim")
    table.add_column("Children / Resource")
    for node in result.nodes:
        if node.container:
            detail = "" if node.child_count is None else str(node.child_count)
        else:
            detail = node.resource.uri if node.resource else ""
        table.add_row(node.id, node.title, node.upnp_class, detail)
    return table


def print_browse_result(result: BrowseResult, title: str):
    console.print(browse_table(result, title))


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {message}")
