"""
Bidirectional key <-> NodeId mapping.

The interner owns every node record of a storage. Ids follow insertion
order and a key is interned at most once.
"""

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

from .ids import NodeId


@dataclass
class NodeRecord:
    """
    A node as stored: user key plus opaque payload.

    Attributes:
        key: Hashable user-facing identifier.
        data: Arbitrary payload, never inspected by the library.
    """

    key: Hashable
    data: Any = None


class NodeInterner:
    """
    Insertion-ordered registry of node records.

    Re-interning an existing key returns the existing id and leaves the
    stored payload untouched.

    Complexity:
        - intern: O(1) amortized
        - lookup by key or id: O(1)
    """

    def __init__(self, capacity: int = 0):
        """
        Initialize an empty interner.

        Args:
            capacity: Expected number of nodes. Python lists grow on demand,
                so this only documents intent; it must be non-negative.
        """
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._records: List[NodeRecord] = []
        self._index: Dict[Hashable, NodeId] = {}

    def intern(self, key: Hashable, data: Any = None) -> NodeId:
        """
        Return the id for ``key``, creating a record if the key is new.

        Args:
            key: Node key.
            data: Payload stored only when the key is new.

        Returns:
            NodeId of the (possibly pre-existing) record.
        """
        existing = self._index.get(key)
        if existing is not None:
            return existing
        node_id = NodeId(len(self._records))
        self._records.append(NodeRecord(key, data))
        self._index[key] = node_id
        return node_id

    def id_of(self, key: Hashable) -> Optional[NodeId]:
        return self._index.get(key)

    def record(self, node_id: NodeId) -> NodeRecord:
        """
        Return the record for ``node_id``.

        Raises:
            IndexError: If the id was not issued by this interner.
        """
        if not 0 <= node_id < len(self._records):
            raise IndexError(f"NodeId {node_id} out of range for {len(self._records)} nodes")
        return self._records[node_id]

    def __contains__(self, key: Hashable) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Tuple[NodeId, NodeRecord]]:
        for idx, rec in enumerate(self._records):
            yield NodeId(idx), rec

    def copy(self) -> "NodeInterner":
        """Return an independent interner with copies of all records."""
        clone = NodeInterner()
        for _, rec in self:
            clone.intern(rec.key, rec.data)
        return clone
