"""
Shared state for storage backends.

Every backend keeps the same two append-only tables: a node interner and
a list of edge records indexed by EdgeId. Backends differ only in the
adjacency index they maintain on top, which they build through the
``_on_node_added`` / ``_on_edge_added`` / ``_on_edges_cleared`` hooks.
"""

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Iterator, List, Optional, Tuple, Type, TypeVar

from ..core.ids import EdgeId, NodeId
from ..core.interner import NodeInterner
from ..core.traits import GraphBase, Storage
from ..logging import get_logger

logger = get_logger(__name__)

B = TypeVar("B", bound="BaseStorage")


@dataclass
class EdgeRecord:
    """
    A directed edge record.

    Attributes:
        source: Tail node id.
        target: Head node id.
        meta: Arbitrary edge metadata.
        weight: Optional edge weight.
    """

    source: NodeId
    target: NodeId
    meta: Any = None
    weight: Optional[Any] = None


def unique(nodes: Iterable[NodeId]) -> Iterator[NodeId]:
    """Yield each node once, in first-seen order."""
    seen = set()
    for v in nodes:
        if v not in seen:
            seen.add(v)
            yield v


class BaseStorage(Storage):
    """
    Node interner plus edge-record table.

    Subclasses implement the adjacency queries; everything keyed by id
    lookups is answered here in O(1).
    """

    def __init__(self, capacity: int = 0):
        self._nodes = NodeInterner(capacity)
        self._edges: List[EdgeRecord] = []

    def order(self) -> int:
        return len(self._nodes)

    def size(self) -> int:
        return len(self._edges)

    def node_id(self, key: Hashable) -> Optional[NodeId]:
        return self._nodes.id_of(key)

    def node_key(self, node_id: NodeId) -> Hashable:
        return self._nodes.record(node_id).key

    def node_data(self, node_id: NodeId) -> Any:
        return self._nodes.record(node_id).data

    def edge_record(self, edge_id: EdgeId) -> EdgeRecord:
        if not 0 <= edge_id < len(self._edges):
            raise IndexError(f"EdgeId {edge_id} out of range for {len(self._edges)} edges")
        return self._edges[edge_id]

    def endpoints(self, edge_id: EdgeId) -> Tuple[NodeId, NodeId]:
        rec = self.edge_record(edge_id)
        return rec.source, rec.target

    def edge_meta(self, edge_id: EdgeId) -> Any:
        return self.edge_record(edge_id).meta

    def weight_of(self, edge_id: EdgeId) -> Optional[Any]:
        return self.edge_record(edge_id).weight

    def add_node(self, key: Hashable, data: Any = None) -> NodeId:
        before = len(self._nodes)
        node_id = self._nodes.intern(key, data)
        if len(self._nodes) > before:
            self._on_node_added(node_id)
        return node_id

    def add_edge(
        self,
        source: NodeId,
        target: NodeId,
        meta: Any = None,
        weight: Optional[Any] = None,
    ) -> EdgeId:
        n = len(self._nodes)
        if not (0 <= source < n and 0 <= target < n):
            raise IndexError(f"Edge ({source}, {target}) references a node outside 0..{n - 1}")
        edge_id = EdgeId(len(self._edges))
        self._edges.append(EdgeRecord(source, target, meta, weight))
        self._on_edge_added(edge_id, source, target)
        return edge_id

    def clear_edges(self) -> None:
        self._edges = []
        self._on_edges_cleared()

    def _on_node_added(self, node_id: NodeId) -> None:
        pass

    def _on_edge_added(self, edge_id: EdgeId, source: NodeId, target: NodeId) -> None:
        pass

    def _on_edges_cleared(self) -> None:
        pass

    def to_definition(self):
        """Return an independent GraphDefinition holding the same nodes and edges."""
        from .definition import GraphDefinition

        return GraphDefinition.from_definition(self)

    @classmethod
    def from_definition(cls: Type[B], definition: GraphBase) -> B:
        """
        Build a storage of this class holding a copy of ``definition``.

        Nodes are copied first (key and payload), then edge records in
        EdgeId order, so ids are identical in source and copy.

        Args:
            definition: Any graph exposing GraphBase and EdgeWeights.

        Returns:
            New storage instance.
        """
        storage = cls.with_node_capacity(definition.order())
        for v in definition.node_ids():
            storage.add_node(definition.node_key(v), definition.node_data(v))
        for e in definition.edge_ids():
            source, target = definition.endpoints(e)
            storage.add_edge(source, target, definition.edge_meta(e), definition.weight_of(e))
        logger.debug(
            "built %s with %d nodes and %d edges",
            cls.__name__,
            storage.order(),
            storage.size(),
        )
        return storage

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self.order()}, size={self.size()})"
