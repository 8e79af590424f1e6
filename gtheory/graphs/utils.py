"""
Utility functions for graph algorithms.

Provides helpers for path reconstruction and id/key translation.
"""

from typing import Dict, Hashable, List, Optional, Sequence

from ..core.ids import EdgeId, NodeId
from ..core.traits import GraphBase


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]], target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct path from source to target using parent map.

    ``parent[node]`` is the previous node on the path, or None for the
    source and for unreachable nodes. Works on keys and on NodeIds alike.

    Args:
        parent: Dictionary mapping node -> parent node (or None).
        target: Node to reconstruct the path to.

    Returns:
        List of nodes from source to target (inclusive), ``[target]`` if
        target has no parent, or None if target is missing from the map or
        the parent chain loops.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'D') is None
        True
    """
    if target not in parent:
        return None

    path = []
    visited = set()
    current: Optional[Hashable] = target
    while current is not None:
        if current in visited:
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path


def keys_of(graph: GraphBase, ids: Sequence[NodeId]) -> List[Hashable]:
    """Translate a sequence of NodeIds into node keys."""
    return [graph.node_key(v) for v in ids]


def lightest_edge_between(graph, u: NodeId, v: NodeId) -> Optional[EdgeId]:
    """
    Return the lightest weighted record from ``u`` to ``v``.

    Unweighted records are ignored. Among equal weights the lowest id wins.

    Args:
        graph: Graph exposing GraphBase and EdgeWeights.
        u: Tail node.
        v: Head node.

    Returns:
        EdgeId, or None if no weighted record joins the pair.
    """
    best: Optional[EdgeId] = None
    best_weight = None
    for e in graph.edges_between(u, v):
        w = graph.weight_of(e)
        if w is None:
            continue
        if best is None or w < best_weight:
            best, best_weight = e, w
    return best


def weighted_edges(graph):
    """
    Yield ``(edge_id, source, target, weight)`` for every weighted record.

    Records are produced in EdgeId order.
    """
    for e in graph.edge_ids():
        w = graph.weight_of(e)
        if w is not None:
            u, v = graph.endpoints(e)
            yield e, u, v, w

