"""
Search result bridge workflow.

Turns a ranked SearchResult into a BrowseResult. Rendering is delegated to a
callable supplied by the caller (normally the render method of the handler
that owns the result kind); the rank order of the hits is kept as is.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mediabrowse.helpers.dto.browse_dto import BrowseNode, BrowseResult
from mediabrowse.helpers.dto.search_dto import SearchResult


def to_browse_result(result: SearchResult[Any], render: Callable[[Any], BrowseNode]) -> BrowseResult:
    return BrowseResult(nodes=tuple(render(item) for item in result.items), total_matches=result.total_hits)
