"""
Content directory service - the browse and search entry point.

Resolves an object id to the handler of its node type and runs one of the
browse modes; runs searches through the WMP pre-filter and then the search
index. Every node type has exactly one handler; the registry is checked for
completeness when the service is built.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping
from typing import Any

from mediabrowse.components.browse.node_factory_comp import NodeFactory
from mediabrowse.components.browse.node_handler_comp import NodeHandler
from mediabrowse.components.browse.window_comp import bounded_total, effective_count
from mediabrowse.components.handlers import HANDLER_CLASSES, RootHandler
from mediabrowse.helpers.dto.browse_dto import BrowseFlag, BrowseNode, BrowseResult, NodeType
from mediabrowse.helpers.dto.search_dto import SearchTarget
from mediabrowse.helpers.exceptions import InvalidRequestError
from mediabrowse.helpers.id_codec import decode_address
from mediabrowse.persistence.contracts import LibraryCollaborators, SettingsProvider, TextResources
from mediabrowse.workflows.browse import (
    browse_leaf,
    browse_metadata,
    browse_root,
    compose_root_menu,
    parse_search_criteria,
    to_browse_result,
    wmp_prefilter,
)

logger = logging.getLogger(__name__)

# RequestedCount 0 asks for every remaining record
UNLIMITED = sys.maxsize

# Search targets answered by a handler other than the song renderer
_TARGET_RENDERERS: dict[SearchTarget, NodeType] = {
    SearchTarget.ARTIST: NodeType.MEDIA_FILE,
    SearchTarget.ARTIST_ID3: NodeType.ARTIST,
    SearchTarget.ALBUM: NodeType.MEDIA_FILE,
    SearchTarget.ALBUM_ID3: NodeType.ALBUM_ID3,
}


def _requested_count(count: int) -> int:
    return UNLIMITED if count == 0 else count


def _check_window(offset: int, count: int) -> None:
    if offset < 0 or count < 0:
        msg = f"offset and count must be non-negative, got offset={offset}, count={count}"
        raise InvalidRequestError(msg)


def _browse_flag(value: BrowseFlag | str) -> BrowseFlag:
    try:
        return BrowseFlag(value)
    except ValueError as e:
        msg = f"Unknown browse flag: {value!r}"
        raise InvalidRequestError(msg) from e


class ContentDirectoryService:
    """
    Dispatches browse and search requests to node handlers.

    Handlers are process-wide and stateless, so one service instance serves
    concurrent requests.
    """

    def __init__(
        self,
        handlers: Mapping[NodeType, NodeHandler],
        library: LibraryCollaborators,
        settings: SettingsProvider,
    ) -> None:
        missing = [nt.value for nt in NodeType if nt not in handlers]
        if missing:
            msg = f"No handler registered for node types: {', '.join(missing)}"
            raise ValueError(msg)
        for node_type, handler in handlers.items():
            if handler.node_type != node_type:
                msg = (
                    f"Handler {type(handler).__name__} serves {handler.node_type.value}, "
                    f"registered as {node_type.value}"
                )
                raise ValueError(msg)
        self._handlers = dict(handlers)
        self._library = library
        self._settings = settings

    @classmethod
    def build(
        cls,
        library: LibraryCollaborators,
        factory: NodeFactory,
        settings: SettingsProvider,
        resources: TextResources,
        compose_menu: Callable[[Any], list[NodeType]] = compose_root_menu,
    ) -> ContentDirectoryService:
        """Create every handler and the service around them."""
        handlers: dict[NodeType, NodeHandler] = {}
        for handler_cls in HANDLER_CLASSES:
            handlers[handler_cls.node_type] = handler_cls(library, factory, settings, resources)
        handlers[NodeType.ROOT] = RootHandler(dict(handlers), factory, settings, compose_menu)
        return cls(handlers, library, settings)

    def find_handler(self, node_type: NodeType) -> NodeHandler:
        return self._handlers[node_type]

    # ------------------------------------------------------------------
    # Browse
    # ------------------------------------------------------------------
    def browse(
        self,
        object_id: str,
        browse_flag: BrowseFlag | str = BrowseFlag.DIRECT_CHILDREN,
        offset: int = 0,
        count: int = 0,
    ) -> BrowseResult:
        """
        Browse one object id.

        Args:
            object_id: "<token>" or "<token>/<item id>"
            browse_flag: BrowseMetadata or BrowseDirectChildren
            offset: Index of the first child to return
            count: Number of children to return; 0 means all

        Raises:
            UnknownNodeTypeError: If the token names no node type
            MalformedIdentifierError: If the object id cannot be decoded
            NotFoundError: If the addressed entity does not exist
            InvalidRequestError: If the browse flag or the window is invalid
        """
        flag = _browse_flag(browse_flag)
        _check_window(offset, count)
        node_type, item_id = decode_address(object_id)
        handler = self.find_handler(node_type)
        logger.debug(f"[ContentDirectory] browse {object_id!r} {flag.value} offset={offset} count={count}")
        if flag == BrowseFlag.METADATA:
            return browse_metadata(handler, item_id)
        if item_id is None:
            return browse_root(handler, offset, _requested_count(count))
        return browse_leaf(handler, item_id, offset, _requested_count(count))

    def menu(self) -> BrowseResult:
        """The enabled root menu entries, rendered."""
        return self.browse(NodeType.ROOT.value, BrowseFlag.DIRECT_CHILDREN)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def render_song(self, record: Any) -> BrowseNode:
        return self.find_handler(NodeType.MEDIA_FILE).render_direct_child(record)

    def _renderer(self, target: SearchTarget) -> Callable[[Any], BrowseNode]:
        node_type = _TARGET_RENDERERS.get(target)
        if node_type is None:
            return self.render_song
        return self.find_handler(node_type).render_direct_child

    def search(
        self,
        container_id: str,
        query: str,
        filter: str | None = None,
        offset: int = 0,
        count: int = 0,
    ) -> BrowseResult:
        """
        Search below container_id.

        WMP crawl requests are answered first; anything else is parsed as a
        UPnP search query and run against the search index, clipped to
        search_max hits.

        Raises:
            UnknownNodeTypeError: If container_id names no node type
            SearchCriteriaError: If the query is not supported
            InvalidRequestError: If the window is invalid
        """
        _check_window(offset, count)
        decode_address(container_id)
        count = _requested_count(count)
        settings = self._settings.get_browse_settings()
        folders = tuple(self._library.folders.list_configured_folders())

        wmp_result = wmp_prefilter(query, filter, offset, count, self._library.media_files, folders, self.render_song)
        if wmp_result is not None:
            logger.debug(f"[ContentDirectory] WMP request answered: {wmp_result.count}/{wmp_result.total_matches}")
            return wmp_result

        window = effective_count(offset, count, settings.search_max)
        criteria = parse_search_criteria(query, settings.search_method, offset, window, folders)
        result = self._library.search.search(criteria)
        browse_result = to_browse_result(result, self._renderer(criteria.target))
        total = bounded_total(result.total_hits, settings.search_max)
        logger.debug(f"[Search] {criteria.target.value}: {browse_result.count} of {result.total_hits} hits")
        return BrowseResult(nodes=browse_result.nodes, total_matches=total)
