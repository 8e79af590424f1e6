"""
Single-source shortest paths: Dijkstra.

This variant selects the next node by a linear scan over the unvisited
set instead of a priority queue, which keeps the selection order easy to
follow step by step at the cost of O(V^2) time.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional, Tuple

from ..core.ids import NodeId
from ..errors import NodeNotFoundError, NoPathError, WeightError
from ..logging import get_logger
from .core import Graph
from .utils import lightest_edge_between, reconstruct_path

logger = get_logger(__name__)


@dataclass
class DijkstraResult:
    """
    Tentative weights and predecessors after Dijkstra has finished.

    All lists are indexed by NodeId.

    Attributes:
        source: Key of the start node.
        nodes: Node keys.
        distances: Lightest path weight from the source, or None if the
            node is unreachable.
        predecessors: Previous node on a lightest path, or None for the
            source and for unreachable nodes.
    """

    source: Hashable
    nodes: List[Hashable]
    distances: List[Optional[Any]]
    predecessors: List[Optional[NodeId]]

    def _index(self, key: Hashable) -> int:
        try:
            return self.nodes.index(key)
        except ValueError:
            raise NodeNotFoundError(key) from None

    def distance_to(self, key: Hashable) -> Optional[Any]:
        """
        Return the lightest path weight to ``key``, or None if unreachable.

        Raises:
            NodeNotFoundError: If ``key`` is not a node.
        """
        return self.distances[self._index(key)]

    def as_dicts(
        self,
    ) -> Tuple[Dict[Hashable, Optional[Any]], Dict[Hashable, Optional[Hashable]]]:
        """
        Return ``(dist, parent)`` dictionaries keyed by node key.

        ``parent`` can be fed to :func:`reconstruct_path`.
        """
        dist = dict(zip(self.nodes, self.distances))
        parent = {
            key: None if pred is None else self.nodes[pred]
            for key, pred in zip(self.nodes, self.predecessors)
        }
        return dist, parent

    def lightest_path_to(self, key: Hashable) -> Tuple[Any, List[Hashable]]:
        """
        Return the weight and node keys of a lightest path to ``key``.

        Args:
            key: Target node key.

        Returns:
            ``(weight, [source, ..., key])``.

        Raises:
            NodeNotFoundError: If ``key`` is not a node.
            NoPathError: If ``key`` is unreachable from the source.
        """
        idx = self._index(key)
        weight = self.distances[idx]
        if weight is None:
            raise NoPathError(f"No path from {self.source!r} to {key!r}")
        _, parent = self.as_dicts()
        return weight, reconstruct_path(parent, key)


def _check_weights(graph: Graph) -> None:
    for e in graph.edge_ids():
        w = graph.weight_of(e)
        if w is not None and w < 0:
            u, v = graph.endpoints(e)
            raise WeightError(
                f"Dijkstra requires non-negative weights. "
                f"Found negative weight {w} on edge ({graph.node_key(u)}, {graph.node_key(v)})"
            )


def dijkstra(graph: Graph, start: Hashable) -> DijkstraResult:
    """
    Dijkstra's algorithm for single-source lightest paths.

    Each round picks the unvisited node with the smallest known tentative
    weight (unknown counts as larger than any known weight; ties go to the
    lower NodeId), marks it visited and relaxes its unvisited successors.
    For parallel records the lightest weight is used; unweighted records
    are ignored. A tentative weight is only replaced by a strictly smaller
    one, so among equally light paths the first one found is kept.

    Args:
        graph: DirectedGraph or UndirectedGraph with non-negative weights.
        start: Key of the source node.

    Returns:
        DijkstraResult with weights and predecessors for every node.

    Raises:
        NodeNotFoundError: If ``start`` is not a node.
        WeightError: If the graph has a negative edge weight.

    Complexity: O(V^2 + E) with the linear-scan selection.

    Example:
        >>> G = DirectedGraph.from_edges([('A', 'B', 1), ('B', 'C', 2)])
        >>> dijkstra(G, 'A').lightest_path_to('C')
        (3, ['A', 'B', 'C'])
    """
    source = graph.require_node(start)
    _check_weights(graph)

    n = graph.order()
    dist: List[Optional[Any]] = [None] * n
    pred: List[Optional[NodeId]] = [None] * n
    dist[source] = 0

    unvisited = dict.fromkeys(graph.node_ids())

    while unvisited:
        current = min(
            unvisited,
            key=lambda v: (dist[v] is None, 0 if dist[v] is None else dist[v]),
        )
        if dist[current] is None:
            # Everything left is unreachable.
            break
        del unvisited[current]
        logger.debug("visit %r at weight %r", graph.node_key(current), dist[current])

        for neighbor in graph.successors(current):
            if neighbor not in unvisited:
                continue
            lightest = lightest_edge_between(graph, current, neighbor)
            if lightest is None:
                continue
            candidate = dist[current] + graph.weight_of(lightest)
            if dist[neighbor] is None or candidate < dist[neighbor]:
                dist[neighbor] = candidate
                pred[neighbor] = current

    return DijkstraResult(
        source=start,
        nodes=graph.node_keys(),
        distances=dist,
        predecessors=pred,
    )
