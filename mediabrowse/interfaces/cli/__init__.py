"""
Cli package.
"""

from .cli_ui import (
    COLOR_ERROR,
    COLOR_INFO,
    browse_table,
    print_browse_result,
    print_error,
    print_info,
)

__all__ = [
    "COLOR_ERROR",
    "COLOR_INFO",
    "browse_table",
    "print_browse_result",
    "print_error",
    "print_info",
]
