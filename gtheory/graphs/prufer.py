"""
Prüfer sequences: bijection between labeled trees on n nodes and
sequences of length n - 2 over the labels.

Both directions repeatedly remove the smallest leaf, kept in a binary
heap, so node keys must be mutually comparable.

References:
    - Prüfer, H. "Neuer Beweis eines Satzes über Permutationen",
      Arch. Math. Phys. 27 (1918).
"""

import heapq
import numbers
from typing import Hashable, List, Sequence

from ..core.traits import GraphBase
from ..diagnostics.core import assert_tree
from ..diagnostics.debug_mode import is_debug_enabled
from ..errors import InvalidPruferSequenceError, NotATreeError
from ..logging import get_logger
from ..storage.definition import GraphDefinition

logger = get_logger(__name__)


def tree_to_prufer(graph: GraphBase) -> List[Hashable]:
    """
    Encode a tree as its Prüfer sequence.

    Degrees count distinct neighbors, so the two records of an undirected
    edge (or any parallel records) count once. Repeats n - 2 times: remove
    the smallest leaf and append the key of its remaining neighbor.

    Args:
        graph: Tree with at least two nodes, directed or undirected.

    Returns:
        Keys of the Prüfer sequence; empty if the graph has fewer than two
        nodes.

    Raises:
        NotATreeError: If the removal runs out of leaves, which happens
            for graphs with cycles. In debug mode the tree shape is checked
            up front and an InvariantError is raised instead.

    Complexity: O(V log V + V * deg) using the storage's neighborhood query.

    Example:
        >>> T = UndirectedGraph.from_edges([(1, 2), (2, 3), (2, 4)])
        >>> tree_to_prufer(T)
        [2, 2]
    """
    n = graph.order()
    if n < 2:
        return []
    if is_debug_enabled():
        assert_tree(graph)

    neighbors = [[u for u in graph.neighborhood(v) if u != v] for v in graph.node_ids()]
    degree = [len(adj) for adj in neighbors]
    removed = [False] * n

    leaves = [(graph.node_key(v), v) for v in graph.node_ids() if degree[v] == 1]
    heapq.heapify(leaves)

    sequence: List[Hashable] = []
    for _ in range(n - 2):
        if not leaves:
            raise NotATreeError("Graph is not a tree: no leaf left to remove")
        _, leaf = heapq.heappop(leaves)
        removed[leaf] = True
        parent = next((u for u in neighbors[leaf] if not removed[u]), None)
        if parent is None:
            raise NotATreeError(
                f"Graph is not a tree: leaf {graph.node_key(leaf)!r} has no remaining neighbor"
            )
        sequence.append(graph.node_key(parent))
        degree[parent] -= 1
        if degree[parent] == 1:
            heapq.heappush(leaves, (graph.node_key(parent), parent))

    return sequence


def prufer_to_tree(sequence: Sequence[int]) -> GraphDefinition:
    """
    Decode a Prüfer sequence over labels ``1..n`` into a tree.

    The tree has ``n = len(sequence) + 2`` nodes keyed 1..n, inserted in
    label order, and one edge record per tree edge.

    Args:
        sequence: Labels in ``1..n``.

    Returns:
        GraphDefinition holding the tree. Wrap it in an UndirectedGraph to
        use it with undirected algorithms.

    Raises:
        InvalidPruferSequenceError: If a label lies outside ``1..n``.

    Complexity: O(n log n).

    Example:
        >>> tree = prufer_to_tree([4, 3, 1, 3, 1])
        >>> tree.order(), tree.size()
        (7, 6)
    """
    n = len(sequence) + 2
    for value in sequence:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral) or not 1 <= value <= n:
            raise InvalidPruferSequenceError(value, n)
    sequence = [int(value) for value in sequence]

    tree = GraphDefinition.with_node_capacity(n)
    for label in range(1, n + 1):
        tree.add_node(label)

    degree = [0] + [1] * n
    for value in sequence:
        degree[value] += 1

    leaves = [label for label in range(1, n + 1) if degree[label] == 1]
    heapq.heapify(leaves)

    for value in sequence:
        leaf = heapq.heappop(leaves)
        tree.add_edge_by_key(leaf, value)
        degree[value] -= 1
        if degree[value] == 1:
            heapq.heappush(leaves, value)

    u = heapq.heappop(leaves)
    v = heapq.heappop(leaves)
    tree.add_edge_by_key(u, v)

    logger.debug("decoded sequence of length %d into %d-node tree", len(sequence), n)
    return tree
