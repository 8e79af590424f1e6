"""
Canonical edge-list storage.

GraphDefinition keeps nothing but the node table and the edge-record
list, so every adjacency query scans all records. It is the intermediate
form every other backend converts through.
"""

from typing import Iterator

from ..core.ids import EdgeId, NodeId
from .base import BaseStorage, unique


class GraphDefinition(BaseStorage):
    """
    Backend-agnostic edge list.

    Complexity:
        - add_node / add_edge: O(1) amortized
        - edges_between, neighborhood, successors, predecessors: O(E)
    """

    def edges_between(self, u: NodeId, v: NodeId) -> Iterator[EdgeId]:
        for idx, rec in enumerate(self._edges):
            if rec.source == u and rec.target == v:
                yield EdgeId(idx)

    def neighborhood(self, v: NodeId) -> Iterator[NodeId]:
        return unique(self._incident(v))

    def _incident(self, v: NodeId) -> Iterator[NodeId]:
        for rec in self._edges:
            if rec.source == v:
                yield rec.target
            elif rec.target == v:
                yield rec.source

    def successors(self, v: NodeId) -> Iterator[NodeId]:
        for rec in self._edges:
            if rec.source == v:
                yield rec.target

    def predecessors(self, v: NodeId) -> Iterator[NodeId]:
        for rec in self._edges:
            if rec.target == v:
                yield rec.source
