"""
Directed and undirected graph wrappers.

A wrapper owns one storage backend and a GraphKind. Reads are delegated
to the storage unchanged; insertions are validated against the kind
before anything is written:

- SIMPLE: no self-loops, no parallel edges
- MULTI: parallel edges allowed, no self-loops
- PSEUDO: anything goes

An undirected edge is stored as two directed records (u -> v and v -> u)
with the same meta and weight. Both records are written by one call, and
only after validation has passed, so a rejected insertion leaves the
graph untouched.
"""

from abc import abstractmethod
from enum import Enum
from typing import (
    Any,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
)

from ..core.ids import EdgeId, NodeId
from ..core.traits import EdgeWeights, GraphBase, Storage
from ..errors import ParallelEdgeError, SelfLoopError
from ..logging import get_logger
from ..storage.definition import GraphDefinition

logger = get_logger(__name__)

G = TypeVar("G", bound="Graph")

# (u, v) or (u, v, weight)
EdgeSpec = Sequence[Any]


class GraphKind(Enum):
    """Which edge shapes a wrapper accepts."""

    SIMPLE = "simple"
    PSEUDO = "pseudo"
    MULTI = "multi"

    @property
    def allows_self_loops(self) -> bool:
        return self is GraphKind.PSEUDO

    @property
    def allows_parallel_edges(self) -> bool:
        return self is not GraphKind.SIMPLE

    @property
    def label(self) -> str:
        return {
            GraphKind.SIMPLE: "Simple graph",
            GraphKind.PSEUDO: "Pseudograph",
            GraphKind.MULTI: "Multigraph",
        }[self]


def _split_edge(edge: EdgeSpec) -> Tuple[Hashable, Hashable, Optional[Any]]:
    if len(edge) == 2:
        return edge[0], edge[1], None
    if len(edge) == 3:
        return edge[0], edge[1], edge[2]
    raise ValueError(f"Edge must be (u, v) or (u, v, weight), got {edge!r}")


class Graph(GraphBase, EdgeWeights):
    """
    Common base of DirectedGraph and UndirectedGraph.

    Attributes:
        storage: Wrapped storage backend.
        kind: Edge shapes accepted on insertion.
    """

    def __init__(self, storage: Optional[Storage] = None, kind: GraphKind = GraphKind.SIMPLE):
        """
        Wrap a storage backend.

        Existing records in ``storage`` are taken as they are; only later
        insertions through the wrapper are validated.

        Args:
            storage: Backend to wrap (default: empty GraphDefinition).
            kind: Graph kind enforced on insertion.
        """
        self.storage: Storage = GraphDefinition() if storage is None else storage
        self.kind = kind

    # Read operations delegate to the storage.

    def order(self) -> int:
        return self.storage.order()

    def size(self) -> int:
        return self.storage.size()

    def node_id(self, key: Hashable) -> Optional[NodeId]:
        return self.storage.node_id(key)

    def node_key(self, node_id: NodeId) -> Hashable:
        return self.storage.node_key(node_id)

    def node_data(self, node_id: NodeId) -> Any:
        return self.storage.node_data(node_id)

    def node_ids(self) -> Iterator[NodeId]:
        return self.storage.node_ids()

    def edge_ids(self) -> Iterator[EdgeId]:
        return self.storage.edge_ids()

    def endpoints(self, edge_id: EdgeId) -> Tuple[NodeId, NodeId]:
        return self.storage.endpoints(edge_id)

    def edge_meta(self, edge_id: EdgeId) -> Any:
        return self.storage.edge_meta(edge_id)

    def weight_of(self, edge_id: EdgeId) -> Optional[Any]:
        return self.storage.weight_of(edge_id)

    def edges_between(self, u: NodeId, v: NodeId) -> Iterator[EdgeId]:
        return self.storage.edges_between(u, v)

    def neighborhood(self, v: NodeId) -> Iterator[NodeId]:
        return self.storage.neighborhood(v)

    def successors(self, v: NodeId) -> Iterator[NodeId]:
        return self.storage.successors(v)

    def predecessors(self, v: NodeId) -> Iterator[NodeId]:
        return self.storage.predecessors(v)

    def edge_list(self) -> List[Tuple[Hashable, Hashable, Optional[Any]]]:
        """
        Return every stored record as ``(source_key, target_key, weight)``.

        Returns:
            List in EdgeId order.
        """
        result = []
        for e in self.edge_ids():
            u, v = self.endpoints(e)
            result.append((self.node_key(u), self.node_key(v), self.weight_of(e)))
        return result

    # Insertion

    def add_node(self, key: Hashable, data: Any = None) -> NodeId:
        """
        Add a node; an existing key keeps its id and payload.

        Args:
            key: Hashable node key.
            data: Payload stored if the node is new.

        Returns:
            NodeId of the node.
        """
        return self.storage.add_node(key, data)

    def _has_parallel(self, u: NodeId, v: NodeId) -> bool:
        return next(iter(self.edges_between(u, v)), None) is not None

    def _validate(self, u: Optional[NodeId], v: Optional[NodeId], is_loop: bool) -> None:
        if is_loop and not self.kind.allows_self_loops:
            raise SelfLoopError(f"{self.kind.label}: self-loops are not allowed")
        if (
            not self.kind.allows_parallel_edges
            and u is not None
            and v is not None
            and self._has_parallel(u, v)
        ):
            raise ParallelEdgeError(f"{self.kind.label}: parallel edges are not allowed")

    def _check_ids(self, u: NodeId, v: NodeId) -> None:
        n = self.order()
        for node in (u, v):
            if not 0 <= node < n:
                raise IndexError(f"NodeId {node} out of range for {n} nodes")

    @abstractmethod
    def _insert(self, u: NodeId, v: NodeId, meta: Any, weight: Optional[Any]) -> Any:
        """Write the record(s) for one validated edge and return their id(s)."""

    def _insert_by_key(
        self,
        source_key: Hashable,
        target_key: Hashable,
        source_data: Any,
        target_data: Any,
        meta: Any,
        weight: Optional[Any],
    ) -> Any:
        self._validate(
            self.node_id(source_key),
            self.node_id(target_key),
            source_key == target_key,
        )
        u = self.add_node(source_key, source_data)
        v = self.add_node(target_key, target_data)
        return self._insert(u, v, meta, weight)

    # Construction and conversion

    @classmethod
    def from_edges(
        cls: Type[G],
        edges: Iterable[EdgeSpec],
        storage_cls: Type[Storage] = GraphDefinition,
        kind: GraphKind = GraphKind.SIMPLE,
    ) -> G:
        """
        Build a graph from ``(u, v)`` or ``(u, v, weight)`` tuples.

        Nodes are created in order of first appearance.

        Args:
            edges: Iterable of edge tuples keyed by node key.
            storage_cls: Storage backend to build.
            kind: Graph kind to enforce.

        Returns:
            New graph.

        Raises:
            GraphKindError: If an edge violates ``kind``.

        Example:
            >>> G = DirectedGraph.from_edges([('a', 'b', 2), ('b', 'c', 1)])
            >>> G.order(), G.size()
            (3, 2)
        """
        return cls.from_isolated_nodes_and_edges((), edges, storage_cls, kind)

    @classmethod
    def from_isolated_nodes_and_edges(
        cls: Type[G],
        nodes: Iterable[Hashable],
        edges: Iterable[EdgeSpec],
        storage_cls: Type[Storage] = GraphDefinition,
        kind: GraphKind = GraphKind.SIMPLE,
    ) -> G:
        """
        Build a graph from explicit nodes followed by edges.

        Listed nodes get the first ids, in the given order, whether or not
        any edge touches them.

        Args:
            nodes: Node keys to add first.
            edges: Edge tuples as for :meth:`from_edges`.
            storage_cls: Storage backend to build.
            kind: Graph kind to enforce.

        Returns:
            New graph.
        """
        graph = cls(storage_cls(), kind)
        for key in nodes:
            graph.add_node(key)
        for edge in edges:
            u, v, weight = _split_edge(edge)
            graph._insert_by_key(u, v, None, None, None, weight)
        logger.debug(
            "built %s(%s) on %s: %d nodes, %d records",
            cls.__name__,
            kind.value,
            storage_cls.__name__,
            graph.order(),
            graph.size(),
        )
        return graph

    def convert_storage(self, target_cls: Type[Storage]) -> Storage:
        """Return a copy of the wrapped storage as ``target_cls``."""
        return self.storage.convert(target_cls)

    def into_storage(self: G, target_cls: Type[Storage]) -> G:
        """
        Return an equivalent graph backed by ``target_cls``.

        Node and edge ids are unchanged by the conversion.
        """
        return type(self)(self.convert_storage(target_cls), self.kind)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value}, "
            f"storage={type(self.storage).__name__}, order={self.order()}, size={self.size()})"
        )


class DirectedGraph(Graph):
    """
    Directed graph over any storage backend.

    Each arc is one storage record. SIMPLE rejects a second arc with the
    same ordered pair; opposite arcs u -> v and v -> u are allowed.

    Example:
        >>> G = DirectedGraph()
        >>> G.add_arc_by_key('a', 'b', weight=3)
        0
        >>> list(G.successors(G.require_node('a')))
        [1]
    """

    def _insert(self, u: NodeId, v: NodeId, meta: Any, weight: Optional[Any]) -> EdgeId:
        return self.storage.add_edge(u, v, meta, weight)

    def add_arc(
        self,
        source: NodeId,
        target: NodeId,
        meta: Any = None,
        weight: Optional[Any] = None,
    ) -> EdgeId:
        """
        Add an arc between existing nodes.

        Args:
            source: Tail node id.
            target: Head node id.
            meta: Edge metadata.
            weight: Optional weight.

        Returns:
            EdgeId of the new record.

        Raises:
            SelfLoopError: If source == target and the kind forbids loops.
            ParallelEdgeError: If the kind is SIMPLE and the arc exists.
            IndexError: If an id is not a node of this graph.
        """
        self._check_ids(source, target)
        self._validate(source, target, source == target)
        return self._insert(source, target, meta, weight)

    def add_arc_by_key(
        self,
        source_key: Hashable,
        target_key: Hashable,
        source_data: Any = None,
        target_data: Any = None,
        meta: Any = None,
        weight: Optional[Any] = None,
    ) -> EdgeId:
        """
        Add an arc between two keys, creating missing nodes.

        Nothing is created when validation fails.

        Returns:
            EdgeId of the new record.
        """
        return self._insert_by_key(source_key, target_key, source_data, target_data, meta, weight)


class UndirectedGraph(Graph):
    """
    Undirected graph stored as pairs of opposite records.

    ``neighborhood``, ``successors`` and ``predecessors`` all return the
    same nodes: everything joined to ``v`` by a record in either direction.
    """

    def successors(self, v: NodeId) -> Iterator[NodeId]:
        return self.storage.neighborhood(v)

    def predecessors(self, v: NodeId) -> Iterator[NodeId]:
        return self.storage.neighborhood(v)

    def _has_parallel(self, u: NodeId, v: NodeId) -> bool:
        return super()._has_parallel(u, v) or super()._has_parallel(v, u)

    def _insert(
        self, u: NodeId, v: NodeId, meta: Any, weight: Optional[Any]
    ) -> Tuple[EdgeId, EdgeId]:
        forward = self.storage.add_edge(u, v, meta, weight)
        backward = self.storage.add_edge(v, u, meta, weight)
        return forward, backward

    def add_edge(
        self,
        u: NodeId,
        v: NodeId,
        meta: Any = None,
        weight: Optional[Any] = None,
    ) -> Tuple[EdgeId, EdgeId]:
        """
        Add an undirected edge between existing nodes.

        Args:
            u: First endpoint.
            v: Second endpoint.
            meta: Metadata shared by both records.
            weight: Weight shared by both records.

        Returns:
            ``(forward_id, backward_id)`` of the two records.

        Raises:
            SelfLoopError: If u == v and the kind forbids loops.
            ParallelEdgeError: If the kind is SIMPLE and u, v are adjacent.
            IndexError: If an id is not a node of this graph.
        """
        self._check_ids(u, v)
        self._validate(u, v, u == v)
        return self._insert(u, v, meta, weight)

    def add_edge_by_key(
        self,
        u_key: Hashable,
        v_key: Hashable,
        u_data: Any = None,
        v_data: Any = None,
        meta: Any = None,
        weight: Optional[Any] = None,
    ) -> Tuple[EdgeId, EdgeId]:
        """Add an undirected edge between two keys, creating missing nodes."""
        return self._insert_by_key(u_key, v_key, u_data, v_data, meta, weight)

    def logical_edges(self) -> List[Tuple[EdgeId, Optional[EdgeId]]]:
        """
        Pair each record with its opposite record.

        Records are matched greedily in EdgeId order: a record u -> v pairs
        with the oldest unmatched v -> u record. A record that finds no
        partner (storage built with one record per edge) stands alone.

        Returns:
            List of ``(first_id, partner_id_or_None)``, one per logical
            edge, ordered by ``first_id``.

        Complexity: O(E).
        """
        pending: Dict[Tuple[NodeId, NodeId], List[int]] = {}
        pairs: List[List[Optional[EdgeId]]] = []
        for e in self.edge_ids():
            u, v = self.endpoints(e)
            waiting = pending.get((v, u))
            if waiting:
                pairs[waiting.pop(0)][1] = e
            else:
                pending.setdefault((u, v), []).append(len(pairs))
                pairs.append([e, None])
        return [(first, partner) for first, partner in pairs]

    def degrees(self) -> List[int]:
        """
        Degree of every node, counting logical edges.

        A self-loop contributes 2 to its node.

        Returns:
            List indexed by NodeId.
        """
        deg = [0] * self.order()
        for first, _ in self.logical_edges():
            u, v = self.endpoints(first)
            deg[u] += 1
            deg[v] += 1
        return deg

    def into_directed(self, storage_cls: Optional[Type[Storage]] = None) -> DirectedGraph:
        """
        Reinterpret the stored records as arcs.

        Every undirected edge becomes two opposite arcs.

        Args:
            storage_cls: Backend for the result (default: same as self).

        Returns:
            New DirectedGraph of the same kind.
        """
        target = type(self.storage) if storage_cls is None else storage_cls
        return DirectedGraph(self.convert_storage(target), self.kind)
