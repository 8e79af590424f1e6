"""
In/out adjacency list storage.

Both directions are indexed, so every neighbor query costs O(deg).
"""

from itertools import chain
from typing import Iterator, List

from ..core.ids import EdgeId, NodeId
from .base import BaseStorage, unique


class AdjacencyListIn(BaseStorage):
    """
    Edge records plus per-node outgoing and incoming edge lists.

    The neighborhood of a node lists its successors first, then any
    predecessor not already listed.

    Complexity:
        - successors, predecessors, neighborhood: O(deg)
        - edges_between: O(out-degree)
    """

    def __init__(self, capacity: int = 0):
        super().__init__(capacity)
        self._out: List[List[EdgeId]] = []
        self._in: List[List[EdgeId]] = []

    def _on_node_added(self, node_id: NodeId) -> None:
        self._out.append([])
        self._in.append([])

    def _on_edge_added(self, edge_id: EdgeId, source: NodeId, target: NodeId) -> None:
        self._out[source].append(edge_id)
        self._in[target].append(edge_id)

    def _on_edges_cleared(self) -> None:
        self._out = [[] for _ in range(self.order())]
        self._in = [[] for _ in range(self.order())]

    def edges_between(self, u: NodeId, v: NodeId) -> Iterator[EdgeId]:
        for e in self._out[u]:
            if self._edges[e].target == v:
                yield e

    def successors(self, v: NodeId) -> Iterator[NodeId]:
        for e in self._out[v]:
            yield self._edges[e].target

    def predecessors(self, v: NodeId) -> Iterator[NodeId]:
        for e in self._in[v]:
            yield self._edges[e].source

    def neighborhood(self, v: NodeId) -> Iterator[NodeId]:
        return unique(chain(self.successors(v), self.predecessors(v)))
