"""
Node handler contract.

Every node type is served by one handler object. A handler exposes two
levels:

- direct children: what the node type root lists (get_direct_children /
  get_direct_children_count), plus lookup of any container it has emitted
  (get_direct_child);
- children: what one of those containers lists (get_children /
  get_child_size_of).

Listing and count at each level describe the same ordered collection, so
get_direct_children(0, get_direct_children_count()) returns exactly that many
records and consecutive pages concatenate to the same sequence.

Handlers hold no per-request state. Anything that can change between
requests (folders, settings) is read on every call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol, runtime_checkable

from mediabrowse.components.browse.node_factory_comp import NodeFactory
from mediabrowse.components.browse.window_comp import bounded_total, effective_count
from mediabrowse.helpers.dto.browse_dto import BrowseNode, BrowseResult, NodeType
from mediabrowse.helpers.dto.config_dto import BrowseSettings
from mediabrowse.helpers.dto.library_dto import LibraryScope, MediaFile, MusicFolder
from mediabrowse.helpers.id_codec import encode_address
from mediabrowse.persistence.contracts import LibraryCollaborators, SettingsProvider, TextResources


@runtime_checkable
class NodeHandler(Protocol):
    """Operations the content directory needs from every node type."""

    node_type: NodeType

    def create_root_container(self) -> BrowseNode:
        """Render the node type root as a container (menu entry / metadata)."""
        ...

    def get_direct_children(self, offset: int, count: int) -> list[Any]: ...

    def get_direct_children_count(self) -> int: ...

    def get_direct_child(self, item_id: str) -> Any:
        """
        Resolve a container id this handler emitted.

        Raises:
            MalformedIdentifierError: If item_id has no valid shape here
            NotFoundError: If the entity behind item_id no longer exists
        """
        ...

    def get_children(self, parent: Any, offset: int, count: int) -> list[Any]: ...

    def get_child_size_of(self, parent: Any) -> int: ...

    def render_direct_child(self, record: Any) -> BrowseNode: ...

    def render_child(self, parent: Any, child: Any) -> BrowseNode: ...

    def browse_leaf(self, item_id: str, offset: int, count: int) -> BrowseResult:
        """Children of the container item_id, rendered, with the child count."""
        ...


class NodeHandlerBase(ABC):
    """
    Shared plumbing for handlers: collaborator access, the root container,
    and the default leaf browse (resolve parent, list children, count).

    Subclasses set node_type and title_key and implement the listing methods
    plus item_id_of() and create_container().
    """

    node_type: ClassVar[NodeType]
    title_key: ClassVar[str]

    def __init__(
        self,
        library: LibraryCollaborators,
        factory: NodeFactory,
        settings: SettingsProvider,
        resources: TextResources,
    ) -> None:
        self.library = library
        self.factory = factory
        self._settings = settings
        self._resources = resources

    # ------------------------------------------------------------------
    # Per-call reads
    # ------------------------------------------------------------------
    def settings(self) -> BrowseSettings:
        return self._settings.get_browse_settings()

    def folders(self) -> tuple[MusicFolder, ...]:
        return tuple(self.library.folders.list_configured_folders())

    def title(self) -> str:
        return self._resources.get_text(self.title_key)

    # ------------------------------------------------------------------
    # Listing and rendering, per node type
    # ------------------------------------------------------------------
    @abstractmethod
    def get_direct_children(self, offset: int, count: int) -> list[Any]:
        ...

    @abstractmethod
    def get_direct_children_count(self) -> int:
        ...

    @abstractmethod
    def get_direct_child(self, item_id: str) -> Any:
        ...

    @abstractmethod
    def get_children(self, parent: Any, offset: int, count: int) -> list[Any]:
        ...

    @abstractmethod
    def get_child_size_of(self, parent: Any) -> int:
        ...

    @abstractmethod
    def item_id_of(self, record: Any) -> str:
        """Item id of a container this handler renders."""
        ...

    @abstractmethod
    def create_container(self, record: Any) -> BrowseNode:
        ...

    # ------------------------------------------------------------------
    # Contract defaults
    # ------------------------------------------------------------------
    def create_root_container(self) -> BrowseNode:
        return self.factory.menu_container(self.node_type, self.title(), self.get_direct_children_count())

    def render_direct_child(self, record: Any) -> BrowseNode:
        return self.create_container(record)

    def render_child(self, parent: Any, child: Any) -> BrowseNode:
        return self.create_container(child)

    def browse_leaf(self, item_id: str, offset: int, count: int) -> BrowseResult:
        parent = self.get_direct_child(item_id)
        children = self.get_children(parent, offset, count)
        total = self.get_child_size_of(parent)
        return BrowseResult(nodes=tuple(self.render_child(parent, c) for c in children), total_matches=total)

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------
    def address(self, item_id: str | None = None) -> str:
        return encode_address(self.node_type, item_id)

    def scope(self, **kwargs: Any) -> LibraryScope:
        """A LibraryScope over the currently configured folders."""
        return LibraryScope(folders=self.folders(), **kwargs)

    def song_node(self, song: MediaFile, parent: Any = None) -> BrowseNode:
        """Render a playable child; parent None means the node type root."""
        parent_id = self.address() if parent is None else self.address(self.item_id_of(parent))
        return self.factory.media_item(song, parent_id=parent_id)

    def random_window(self, offset: int, count: int) -> int:
        return effective_count(offset, count, self.settings().random_max)

    def random_total(self, available: int) -> int:
        return bounded_total(available, self.settings().random_max)
