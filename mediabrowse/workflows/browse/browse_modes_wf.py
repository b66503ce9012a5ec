"""
Browse mode workflows.

The three ways a resolved address is browsed:

- root browse: "artist" with BrowseDirectChildren, the direct children of
  the node type and their count
- metadata browse: "artist" or "artist/17" with BrowseMetadata, the node
  type root container or one rendered direct child
- leaf browse: "artist/17" with BrowseDirectChildren, the children of the
  decoded parent and their count

Handlers decide what a composite item id means (get_direct_child and
browse_leaf look for compound shapes before plain ids).
"""

from __future__ import annotations

from mediabrowse.components.browse.node_handler_comp import NodeHandler
from mediabrowse.helpers.dto.browse_dto import BrowseResult


def browse_root(handler: NodeHandler, offset: int, count: int) -> BrowseResult:
    records = handler.get_direct_children(offset, count)
    nodes = tuple(handler.render_direct_child(r) for r in records)
    return BrowseResult(nodes=nodes, total_matches=handler.get_direct_children_count())


def browse_metadata(handler: NodeHandler, item_id: str | None) -> BrowseResult:
    if item_id is None:
        node = handler.create_root_container()
    else:
        node = handler.render_direct_child(handler.get_direct_child(item_id))
    return BrowseResult(nodes=(node,), total_matches=1)


def browse_leaf(handler: NodeHandler, item_id: str, offset: int, count: int) -> BrowseResult:
    return handler.browse_leaf(item_id, offset, count)
