"""
Minimum spanning forest: Kruskal.

Kruskal uses a union-find data structure to reject edges that would
close a cycle.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 21.3 (disjoint-set forests) and 23.2 (Kruskal).
"""

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, List, Tuple

from ..core.ids import zero_weight
from ..logging import get_logger
from .core import Graph
from .utils import weighted_edges

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by rank.

    Used by Kruskal's algorithm for efficient cycle detection.
    """

    def __init__(self, items: Iterable[Hashable]):
        """
        Initialize union-find with every item in its own set.

        Args:
            items: Iterable of hashable items.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}

        for item in items:
            self.parent[item] = item
            self.rank[item] = 0

    def find(self, x: Hashable) -> Hashable:
        """
        Return the representative of x, compressing the path on the way.

        Args:
            x: Item to look up.

        Returns:
            Representative item of x's set.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Merge the sets containing x and y using union by rank.

        Args:
            x: First item.
            y: Second item.

        Returns:
            True if the sets were merged, False if x and y already shared
            a set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        if self.rank[root_x] == self.rank[root_y]:
            self.rank[root_x] += 1

        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        return self.find(x) == self.find(y)


@dataclass
class KruskalResult:
    """
    Edges of a minimum spanning forest and their total weight.

    Attributes:
        edges: Accepted ``(u_key, v_key, weight)`` edges, in acceptance order.
        total_weight: Sum of the accepted weights (zero of the weight type
            if no edge was accepted).
    """

    edges: List[Tuple[Hashable, Hashable, Any]]
    total_weight: Any


def kruskal_mst(graph: Graph) -> KruskalResult:
    """
    Kruskal's algorithm for a minimum spanning forest.

    Weighted records are sorted by weight with a stable sort, so equal
    weights keep EdgeId order. A record is accepted iff its endpoints are
    in different components. On an undirected graph the second record of
    every edge pair always joins an already merged component and is
    rejected. Unweighted records are ignored.

    Args:
        graph: Graph whose records carry weights.

    Returns:
        KruskalResult with one tree per connected component.

    Complexity: O(E log E) for sorting plus near-linear union-find work.

    Example:
        >>> G = UndirectedGraph.from_edges([('A', 'B', 1), ('B', 'C', 2), ('A', 'C', 3)])
        >>> kruskal_mst(G).total_weight
        3
    """
    edges = sorted(weighted_edges(graph), key=lambda rec: rec[3])

    uf = UnionFind(graph.node_ids())
    accepted: List[Tuple[Hashable, Hashable, Any]] = []
    total = zero_weight(edges[0][3] if edges else None)

    for _, u, v, weight in edges:
        if uf.union(u, v):
            accepted.append((graph.node_key(u), graph.node_key(v), weight))
            total = total + weight

    logger.debug("accepted %d of %d weighted records", len(accepted), len(edges))
    return KruskalResult(edges=accepted, total_weight=total)
