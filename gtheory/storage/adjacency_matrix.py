"""
Dense adjacency-matrix storage.

The matrix is an ``n x n`` numpy array of edge ids with ``-1`` marking an
empty cell. Only one id per ordered pair fits: inserting a second record
between the same ordered pair keeps the record in the edge table but the
cell points at the newest one (last write wins).
"""

from itertools import chain
from typing import Iterator

import numpy as np

from ..core.ids import EdgeId, NodeId
from .base import BaseStorage, unique

_EMPTY = -1


class AdjacencyMatrix(BaseStorage):
    """
    Edge records plus an ``n x n`` edge-id matrix.

    The matrix grows by one row and one column per new node.

    Complexity:
        - edges_between: O(1)
        - successors, predecessors, neighborhood: O(n)
        - add_node: O(n^2) (matrix reallocation)
    """

    def __init__(self, capacity: int = 0):
        super().__init__(capacity)
        self._cells = np.full((0, 0), _EMPTY, dtype=np.int64)

    @property
    def matrix(self) -> np.ndarray:
        """Read-only copy of the edge-id matrix (``-1`` for no edge)."""
        return self._cells.copy()

    def _on_node_added(self, node_id: NodeId) -> None:
        self._cells = np.pad(self._cells, ((0, 1), (0, 1)), constant_values=_EMPTY)

    def _on_edge_added(self, edge_id: EdgeId, source: NodeId, target: NodeId) -> None:
        self._cells[source, target] = edge_id

    def _on_edges_cleared(self) -> None:
        self._cells.fill(_EMPTY)

    def edges_between(self, u: NodeId, v: NodeId) -> Iterator[EdgeId]:
        cell = int(self._cells[u, v])
        if cell != _EMPTY:
            yield EdgeId(cell)

    def successors(self, v: NodeId) -> Iterator[NodeId]:
        for j in np.flatnonzero(self._cells[v, :] != _EMPTY):
            yield NodeId(int(j))

    def predecessors(self, v: NodeId) -> Iterator[NodeId]:
        for i in np.flatnonzero(self._cells[:, v] != _EMPTY):
            yield NodeId(int(i))

    def neighborhood(self, v: NodeId) -> Iterator[NodeId]:
        return unique(chain(self.successors(v), self.predecessors(v)))
