"""
Chromatic polynomial by deletion-contraction.

Two dual recursions compute P(G), the number of proper colorings of G
with x colors:

- remove edges: P(G) = P(G - e) - P(G / e), down to the edgeless graph,
  P = x^n
- add edges: P(G) = P(G + e) + P(G / e), up to the complete graph,
  P = x (x - 1) ... (x - n + 1)

Removing edges terminates faster on sparse graphs, adding edges on dense
ones; AUTO picks by edge density. Both recursions are exponential and
unmemoized, so only small graphs are practical.

Edge directions, parallel edges and self-loops are ignored: the working
graph is the simple undirected graph of distinct adjacencies.

References:
    - Whitney, H. "A logical expansion in mathematics",
      Bull. Amer. Math. Soc. 38 (1932).
"""

from enum import Enum
from typing import Optional, Tuple

import numpy as np

from ..core.traits import GraphBase
from ..logging import get_logger
from .polynomial import Polynomial

logger = get_logger(__name__)

DENSITY_THRESHOLD = 0.6


class ChromaticMethod(Enum):
    """Which deletion-contraction recursion to use."""

    REMOVE_EDGES = "remove_edges"
    ADD_EDGES = "add_edges"
    AUTO = "auto"


def adjacency_matrix(graph: GraphBase) -> np.ndarray:
    """
    Symmetric boolean adjacency of ``graph`` without self-loops.

    Args:
        graph: Any graph.

    Returns:
        ``(n, n)`` boolean array indexed by NodeId.
    """
    n = graph.order()
    adj = np.zeros((n, n), dtype=bool)
    for v in graph.node_ids():
        for u in graph.neighborhood(v):
            if u != v:
                adj[u, v] = adj[v, u] = True
    return adj


def _first_pair(mask: np.ndarray) -> Optional[Tuple[int, int]]:
    hits = np.argwhere(np.triu(mask, k=1))
    if len(hits) == 0:
        return None
    i, j = hits[0]
    return int(i), int(j)


def _contract(adj: np.ndarray, u: int, v: int) -> np.ndarray:
    # Merge v into u, then drop v; the merged node never keeps a loop.
    merged = adj.copy()
    merged[u, :] |= adj[v, :]
    merged[:, u] |= adj[:, v]
    merged[u, u] = False
    keep = np.arange(adj.shape[0]) != v
    return merged[np.ix_(keep, keep)]


def edge_density(adj: np.ndarray) -> float:
    """Edges over ``n (n - 1) / 2``; 1.0 for graphs with fewer than two nodes."""
    n = adj.shape[0]
    if n <= 1:
        return 1.0
    edges = int(np.count_nonzero(np.triu(adj, k=1)))
    return edges / (n * (n - 1) / 2)


def _by_removal(adj: np.ndarray) -> Polynomial:
    pair = _first_pair(adj)
    if pair is None:
        return Polynomial.monomial(adj.shape[0])
    u, v = pair
    without = adj.copy()
    without[u, v] = without[v, u] = False
    return _by_removal(without) - _by_removal(_contract(adj, u, v))


def _by_addition(adj: np.ndarray) -> Polynomial:
    n = adj.shape[0]
    missing = ~adj
    np.fill_diagonal(missing, False)
    pair = _first_pair(missing)
    if pair is None:
        return Polynomial.falling_factorial(n)
    u, v = pair
    with_edge = adj.copy()
    with_edge[u, v] = with_edge[v, u] = True
    return _by_addition(with_edge) + _by_addition(_contract(adj, u, v))


def chromatic_polynomial(
    graph: GraphBase,
    method: ChromaticMethod = ChromaticMethod.AUTO,
    density_threshold: float = DENSITY_THRESHOLD,
) -> Polynomial:
    """
    Compute the chromatic polynomial of ``graph``.

    Args:
        graph: Any graph; treated as simple and undirected.
        method: Recursion to use. AUTO selects ADD_EDGES when the edge
            density exceeds ``density_threshold``, else REMOVE_EDGES.
        density_threshold: Density above which AUTO adds edges.

    Returns:
        P(G). The graph without nodes has P = 1.

    Complexity: exponential in the number of edges (or non-edges).

    Example:
        >>> K3 = UndirectedGraph.from_edges([('a', 'b'), ('b', 'c'), ('a', 'c')])
        >>> chromatic_polynomial(K3).coeffs
        [0, 2, -3, 1]
    """
    adj = adjacency_matrix(graph)
    if method is ChromaticMethod.AUTO:
        density = edge_density(adj)
        method = (
            ChromaticMethod.ADD_EDGES if density > density_threshold else ChromaticMethod.REMOVE_EDGES
        )
        logger.debug("density %.3f selects %s", density, method.value)

    if method is ChromaticMethod.ADD_EDGES:
        return _by_addition(adj)
    return _by_removal(adj)


def num_k_colorings(graph: GraphBase, k: int) -> int:
    """Number of proper colorings of ``graph`` with at most ``k`` colors."""
    return chromatic_polynomial(graph).eval(k)


def chromatic_number(graph: GraphBase) -> int:
    """
    Smallest k for which a proper k-coloring exists.

    Evaluates the chromatic polynomial at k = 1, 2, ... until it is
    positive. Self-loops are ignored, so k never exceeds the number of
    nodes.

    Args:
        graph: Any graph.

    Returns:
        Chromatic number; 0 for a graph without nodes.

    Example:
        >>> C5 = UndirectedGraph.from_edges([(1, 2), (2, 3), (3, 4), (4, 5), (5, 1)])
        >>> chromatic_number(C5)
        3
    """
    n = graph.order()
    if n == 0:
        return 0
    poly = chromatic_polynomial(graph)
    for k in range(1, n + 1):
        if poly.eval(k) > 0:
            return k
    # P(n) > 0 for every loop-free graph on n nodes
    return n
