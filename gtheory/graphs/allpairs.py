"""
All-pairs algorithms in the Floyd-Warshall family.

- warshall_closure: reflexive-transitive closure as a boolean matrix
- warshall_lightest_path_matrix: lightest paths between all pairs, with
  one snapshot of the matrix per intermediate node
- compute_graph_distances: eccentricity, radius, diameter, center and
  periphery from the final lightest-path matrix

Matrices are indexed by NodeId.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall, transitive closure).
"""

from dataclasses import dataclass
from typing import Any, Hashable, List, Optional, Tuple

import numpy as np

from ..diagnostics.core import assert_closure_transitive
from ..diagnostics.debug_mode import is_debug_enabled
from ..errors import NodeNotFoundError
from ..logging import get_logger
from .core import Graph
from .utils import lightest_edge_between

logger = get_logger(__name__)

# (node indices along the path, total weight)
PathCell = Optional[Tuple[List[int], Any]]


def _index_of(nodes: List[Hashable], key: Hashable) -> int:
    try:
        return nodes.index(key)
    except ValueError:
        raise NodeNotFoundError(key) from None


@dataclass
class ClosureResult:
    """
    Reflexive-transitive closure.

    Attributes:
        nodes: Node keys in id order.
        closure: Boolean array; ``closure[i, j]`` is True iff node j is
            reachable from node i (every node reaches itself).
    """

    nodes: List[Hashable]
    closure: np.ndarray

    def reachable(self, u: Hashable, v: Hashable) -> bool:
        return bool(self.closure[_index_of(self.nodes, u), _index_of(self.nodes, v)])


def warshall_closure(graph: Graph) -> ClosureResult:
    """
    Warshall's algorithm for the reflexive-transitive closure.

    Starts from the identity plus every direct edge, then for each
    intermediate node k sets ``closure[i, j]`` whenever ``closure[i, k]``
    and ``closure[k, j]`` hold. The inner i/j loops are done as one
    vectorized outer product per k.

    Args:
        graph: Any graph.

    Returns:
        ClosureResult.

    Complexity: O(n^3) boolean work, O(n^2) memory.

    Example:
        >>> G = DirectedGraph.from_edges([('a', 'b'), ('b', 'c')])
        >>> warshall_closure(G).reachable('a', 'c')
        True
    """
    n = graph.order()
    closure = np.eye(n, dtype=bool)
    for e in graph.edge_ids():
        u, v = graph.endpoints(e)
        closure[u, v] = True

    for k in range(n):
        closure |= np.outer(closure[:, k], closure[k, :])

    if is_debug_enabled():
        assert_closure_transitive(closure)

    return ClosureResult(nodes=graph.node_keys(), closure=closure)


@dataclass
class PathMatrix:
    """
    Lightest known path between every ordered pair.

    Attributes:
        nodes: Node keys in id order.
        cells: ``cells[i][j]`` is ``(path, weight)`` with ``path`` the list of
            node indices from i to j, or None if no path is known.
    """

    nodes: List[Hashable]
    cells: List[List[PathCell]]

    def weight(self, u: Hashable, v: Hashable) -> Optional[Any]:
        """Weight of the lightest u -> v path, or None."""
        cell = self.cells[_index_of(self.nodes, u)][_index_of(self.nodes, v)]
        return None if cell is None else cell[1]

    def path(self, u: Hashable, v: Hashable) -> Optional[List[Hashable]]:
        """Node keys of the lightest u -> v path, or None."""
        cell = self.cells[_index_of(self.nodes, u)][_index_of(self.nodes, v)]
        return None if cell is None else [self.nodes[i] for i in cell[0]]

    def copy(self) -> "PathMatrix":
        return PathMatrix(
            nodes=list(self.nodes),
            cells=[
                [None if c is None else (list(c[0]), c[1]) for c in row] for row in self.cells
            ],
        )


@dataclass
class LightestPathResult:
    """
    Snapshots of the lightest-path matrix.

    Attributes:
        nodes: Node keys in id order.
        matrices: ``n + 1`` snapshots: the initial matrix of direct edges,
            then the matrix after each intermediate node k.
    """

    nodes: List[Hashable]
    matrices: List[PathMatrix]

    @property
    def final(self) -> PathMatrix:
        return self.matrices[-1]


def warshall_lightest_path_matrix(graph: Graph) -> LightestPathResult:
    """
    Floyd-Warshall lightest paths with full path tracking.

    Cells start with one two-node path per direct weighted edge (the
    lightest record if there are several). For each intermediate k, the
    path i -> k -> j replaces cell (i, j) when the cell is empty or the
    new weight is strictly smaller; equal weights keep the older path.
    The diagonal starts empty, so ``cells[i][i]`` ends up holding the
    lightest cycle through i, if any.

    Args:
        graph: Graph with weighted records; negative cycles are not
            detected.

    Returns:
        LightestPathResult with ``n + 1`` snapshots.

    Complexity: O(n^3) relaxations, each copying a path of up to n nodes.

    Example:
        >>> G = DirectedGraph.from_edges([('A', 'B', 1), ('B', 'C', 2)])
        >>> final = warshall_lightest_path_matrix(G).final
        >>> final.weight('A', 'C'), final.path('A', 'C')
        (3, ['A', 'B', 'C'])
    """
    n = graph.order()
    nodes = graph.node_keys()
    cells: List[List[PathCell]] = [[None] * n for _ in range(n)]

    for e in graph.edge_ids():
        u, v = graph.endpoints(e)
        if cells[u][v] is not None:
            continue
        lightest = lightest_edge_between(graph, u, v)
        if lightest is not None:
            cells[u][v] = ([u, v], graph.weight_of(lightest))

    matrix = PathMatrix(nodes=nodes, cells=cells)
    snapshots = [matrix.copy()]

    for k in range(n):
        for i in range(n):
            via_k = cells[i][k]
            if via_k is None:
                continue
            for j in range(n):
                onward = cells[k][j]
                if onward is None:
                    continue
                candidate = via_k[1] + onward[1]
                existing = cells[i][j]
                if existing is None or candidate < existing[1]:
                    cells[i][j] = (via_k[0] + onward[0][1:], candidate)
        snapshots.append(matrix.copy())
        logger.debug("intermediate node %r done", nodes[k])

    return LightestPathResult(nodes=nodes, matrices=snapshots)


@dataclass
class GraphDistances:
    """
    Distance metrics derived from lightest paths.

    Attributes:
        nodes: Node keys in id order.
        eccentricities: Largest lightest-path weight from each node to
            any other node; None if some other node is unreachable.
        radius: Smallest defined eccentricity, or None.
        diameter: Largest defined eccentricity, or None.
    """

    nodes: List[Hashable]
    eccentricities: List[Optional[Any]]
    radius: Optional[Any]
    diameter: Optional[Any]

    def center_nodes(self) -> List[Hashable]:
        """Keys of nodes whose eccentricity equals the radius."""
        if self.radius is None:
            return []
        return [k for k, ecc in zip(self.nodes, self.eccentricities) if ecc == self.radius]

    def periphery_nodes(self) -> List[Hashable]:
        """Keys of nodes whose eccentricity equals the diameter."""
        if self.diameter is None:
            return []
        return [k for k, ecc in zip(self.nodes, self.eccentricities) if ecc == self.diameter]


def compute_graph_distances(result: LightestPathResult) -> GraphDistances:
    """
    Eccentricity, radius and diameter from a lightest-path matrix.

    Args:
        result: Output of :func:`warshall_lightest_path_matrix`.

    Returns:
        GraphDistances. A single node has eccentricity 0.

    Example:
        >>> G = UndirectedGraph.from_edges([('a', 'b', 1), ('b', 'c', 1)])
        >>> d = compute_graph_distances(warshall_lightest_path_matrix(G))
        >>> d.radius, d.diameter, d.center_nodes()
        (1, 2, ['b'])
    """
    cells = result.final.cells
    n = len(result.nodes)
    eccentricities: List[Optional[Any]] = []

    for i in range(n):
        ecc: Optional[Any] = 0
        for j in range(n):
            if i == j:
                continue
            cell = cells[i][j]
            if cell is None:
                ecc = None
                break
            if cell[1] > ecc:
                ecc = cell[1]
        eccentricities.append(ecc)

    defined = [e for e in eccentricities if e is not None]
    return GraphDistances(
        nodes=list(result.nodes),
        eccentricities=eccentricities,
        radius=min(defined) if defined else None,
        diameter=max(defined) if defined else None,
    )
