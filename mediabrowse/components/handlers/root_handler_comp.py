"""
Root handler ("0").

The root lists one container per enabled menu entry. Its item ids are node
type tokens ("0/artist"); the children of such an entry are the direct
children of that node type's handler.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from mediabrowse.components.browse.node_factory_comp import NodeFactory
from mediabrowse.components.browse.node_handler_comp import NodeHandler
from mediabrowse.helpers.dto.browse_dto import BrowseNode, BrowseResult, NodeType
from mediabrowse.helpers.dto.config_dto import BrowseSettings
from mediabrowse.helpers.exceptions import NotFoundError, UnknownNodeTypeError
from mediabrowse.helpers.id_codec import resolve_node_type
from mediabrowse.persistence.contracts import SettingsProvider


class RootHandler:
    node_type = NodeType.ROOT

    def __init__(
        self,
        handlers: Mapping[NodeType, NodeHandler],
        factory: NodeFactory,
        settings: SettingsProvider,
        compose_menu: Callable[[BrowseSettings], list[NodeType]],
    ) -> None:
        self._handlers = handlers
        self._factory = factory
        self._settings = settings
        self._compose_menu = compose_menu

    def menu(self) -> list[NodeType]:
        return self._compose_menu(self._settings.get_browse_settings())

    def create_root_container(self) -> BrowseNode:
        return self._factory.root_container(len(self.menu()))

    def get_direct_children(self, offset: int, count: int) -> list[NodeType]:
        return self.menu()[offset : offset + count]

    def get_direct_children_count(self) -> int:
        return len(self.menu())

    def get_direct_child(self, item_id: str) -> NodeType:
        try:
            node_type = resolve_node_type(item_id)
        except UnknownNodeTypeError:
            raise NotFoundError("menu entry", item_id) from None
        if node_type not in self.menu():
            raise NotFoundError("menu entry", item_id)
        return node_type

    def get_children(self, parent: NodeType, offset: int, count: int) -> list[Any]:
        return self._handlers[parent].get_direct_children(offset, count)

    def get_child_size_of(self, parent: NodeType) -> int:
        return self._handlers[parent].get_direct_children_count()

    def render_direct_child(self, record: NodeType) -> BrowseNode:
        return self._handlers[record].create_root_container()

    def render_child(self, parent: NodeType, child: Any) -> BrowseNode:
        return self._handlers[parent].render_direct_child(child)

    def browse_leaf(self, item_id: str, offset: int, count: int) -> BrowseResult:
        parent = self.get_direct_child(item_id)
        children = self.get_children(parent, offset, count)
        nodes = tuple(self.render_child(parent, c) for c in children)
        return BrowseResult(nodes=nodes, total_matches=self.get_child_size_of(parent))
