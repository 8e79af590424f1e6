"""
Out-adjacency list storage.

Each node keeps the ids of the records leaving it, which makes successor
enumeration O(deg). Incoming edges are not indexed, so predecessors and
neighborhood fall back to a scan of all records.
"""

from typing import Iterator, List

from ..core.ids import EdgeId, NodeId
from .base import BaseStorage, unique


class AdjacencyList(BaseStorage):
    """
    Edge records plus per-node outgoing edge lists.

    Complexity:
        - successors, edges_between: O(out-degree)
        - predecessors, neighborhood: O(E)
    """

    def __init__(self, capacity: int = 0):
        super().__init__(capacity)
        self._out: List[List[EdgeId]] = []

    def _on_node_added(self, node_id: NodeId) -> None:
        self._out.append([])

    def _on_edge_added(self, edge_id: EdgeId, source: NodeId, target: NodeId) -> None:
        self._out[source].append(edge_id)

    def _on_edges_cleared(self) -> None:
        self._out = [[] for _ in range(self.order())]

    def edges_between(self, u: NodeId, v: NodeId) -> Iterator[EdgeId]:
        for e in self._out[u]:
            if self._edges[e].target == v:
                yield e

    def successors(self, v: NodeId) -> Iterator[NodeId]:
        for e in self._out[v]:
            yield self._edges[e].target

    def predecessors(self, v: NodeId) -> Iterator[NodeId]:
        for rec in self._edges:
            if rec.target == v:
                yield rec.source

    def neighborhood(self, v: NodeId) -> Iterator[NodeId]:
        return unique(self._incident(v))

    def _incident(self, v: NodeId) -> Iterator[NodeId]:
        for rec in self._edges:
            if rec.source == v:
                yield rec.target
            elif rec.target == v:
                yield rec.source
