"""
Capability contracts shared by every storage backend and graph wrapper.

Algorithms are written once against these abstract bases and run
unchanged on any backend:

- GraphBase: read-only topology queries
- EdgeWeights: optional per-edge weight lookup
- MutableStorage: node/edge insertion and bulk edge clearing
- StorageConvert: lossless conversion through the canonical edge list

Neighbor queries return generators. They are lazy and can be consumed
only once; wrap them in ``list(...)`` to iterate repeatedly.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterator, List, Optional, Tuple, Type, TypeVar

from ..errors import NodeNotFoundError
from .ids import EdgeId, NodeId

S = TypeVar("S", bound="Storage")


class GraphBase(ABC):
    """Read-only view of a graph's nodes, edges and adjacency."""

    @abstractmethod
    def order(self) -> int:
        """Number of nodes."""

    @abstractmethod
    def size(self) -> int:
        """Number of stored edge records."""

    @abstractmethod
    def node_id(self, key: Hashable) -> Optional[NodeId]:
        """Return the id carrying ``key``, or None."""

    @abstractmethod
    def node_key(self, node_id: NodeId) -> Hashable:
        """Return the key of ``node_id``."""

    @abstractmethod
    def node_data(self, node_id: NodeId) -> Any:
        """Return the payload of ``node_id``."""

    @abstractmethod
    def endpoints(self, edge_id: EdgeId) -> Tuple[NodeId, NodeId]:
        """Return ``(source, target)`` of an edge record."""

    @abstractmethod
    def edge_meta(self, edge_id: EdgeId) -> Any:
        """Return the metadata attached to an edge record."""

    @abstractmethod
    def edges_between(self, u: NodeId, v: NodeId) -> Iterator[EdgeId]:
        """Yield ids of every record from ``u`` to ``v``."""

    @abstractmethod
    def neighborhood(self, v: NodeId) -> Iterator[NodeId]:
        """Yield each node adjacent to ``v`` (either direction) once."""

    @abstractmethod
    def successors(self, v: NodeId) -> Iterator[NodeId]:
        """Yield the target of every record leaving ``v``."""

    @abstractmethod
    def predecessors(self, v: NodeId) -> Iterator[NodeId]:
        """Yield the source of every record entering ``v``."""

    def node_ids(self) -> Iterator[NodeId]:
        return (NodeId(i) for i in range(self.order()))

    def edge_ids(self) -> Iterator[EdgeId]:
        return (EdgeId(i) for i in range(self.size()))

    def has_node(self, key: Hashable) -> bool:
        return self.node_id(key) is not None

    def require_node(self, key: Hashable) -> NodeId:
        """
        Return the id carrying ``key``.

        Raises:
            NodeNotFoundError: If no node has this key.
        """
        node_id = self.node_id(key)
        if node_id is None:
            raise NodeNotFoundError(key)
        return node_id

    def node_keys(self) -> List[Hashable]:
        """Return all keys in id order."""
        return [self.node_key(v) for v in self.node_ids()]


class EdgeWeights(ABC):
    """Optional weight attached to each edge record."""

    @abstractmethod
    def weight_of(self, edge_id: EdgeId) -> Optional[Any]:
        """Return the weight of an edge record, or None if unweighted."""


class MutableStorage(ABC):
    """Append-only insertion plus bulk edge clearing."""

    @abstractmethod
    def add_node(self, key: Hashable, data: Any = None) -> NodeId:
        """Intern ``key``; existing keys keep their id and payload."""

    @abstractmethod
    def add_edge(
        self,
        source: NodeId,
        target: NodeId,
        meta: Any = None,
        weight: Optional[Any] = None,
    ) -> EdgeId:
        """Append a directed edge record between existing nodes."""

    @abstractmethod
    def clear_edges(self) -> None:
        """Remove every edge record, keeping all nodes."""

    def add_edge_by_key(
        self,
        source_key: Hashable,
        target_key: Hashable,
        source_data: Any = None,
        target_data: Any = None,
        meta: Any = None,
        weight: Optional[Any] = None,
    ) -> EdgeId:
        """
        Intern both endpoints, then append a directed edge record.

        Args:
            source_key: Key of the tail node.
            target_key: Key of the head node.
            source_data: Payload used if the tail node is new.
            target_data: Payload used if the head node is new.
            meta: Edge metadata.
            weight: Optional edge weight.

        Returns:
            EdgeId of the new record.
        """
        source = self.add_node(source_key, source_data)
        target = self.add_node(target_key, target_data)
        return self.add_edge(source, target, meta, weight)


class StorageConvert(ABC):
    """Conversion between backends through :class:`GraphDefinition`."""

    @abstractmethod
    def to_definition(self) -> Any:
        """Return a new canonical edge-list copy of this storage."""

    @classmethod
    @abstractmethod
    def from_definition(cls: Type[S], definition: Any) -> S:
        """Build this backend from a canonical edge list."""

    def convert(self, target_cls: Type[S]) -> S:
        """
        Convert to another backend.

        Node order, keys, payloads and edge insertion order are preserved,
        so every NodeId and EdgeId stays valid in the result.

        Args:
            target_cls: Storage class to convert into.

        Returns:
            A new, independent storage instance.

        Complexity: O(V + E).
        """
        return target_cls.from_definition(self.to_definition())

    def copy(self: S) -> S:
        return self.convert(type(self))


class Storage(GraphBase, EdgeWeights, MutableStorage, StorageConvert):
    """A backend providing every capability."""

    @classmethod
    def with_node_capacity(cls: Type[S], capacity: int) -> S:
        return cls(capacity=capacity)
