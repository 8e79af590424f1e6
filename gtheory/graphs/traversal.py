"""
Graph traversal: breadth-first search.

Successors are visited in the order the storage yields them, so results
are deterministic for a given backend and insertion order.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.2 (BFS).
"""

from collections import deque
from typing import Dict, Hashable, List, Optional, Tuple

from ..core.ids import NodeId
from ..core.traits import GraphBase


def bfs_tree(
    graph: GraphBase, source: NodeId, target: Optional[NodeId] = None
) -> Dict[NodeId, Optional[NodeId]]:
    """
    Breadth-first search over NodeIds.

    Args:
        graph: Graph to traverse along successors.
        source: Start node id.
        target: If given, the search stops as soon as this node is
            dequeued.

    Returns:
        Parent map over every discovered node; the source maps to None.
        A node is reachable iff it is a key of the map.

    Complexity: O(V + E) where V is vertices and E is edges.
    """
    parent: Dict[NodeId, Optional[NodeId]] = {source: None}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        if u == target:
            break
        for v in graph.successors(u):
            if v not in parent:
                parent[v] = u
                queue.append(v)

    return parent


def bfs(
    graph: GraphBase, source: Hashable
) -> Tuple[List[Hashable], Dict[Hashable, float], Dict[Hashable, Optional[Hashable]]]:
    """
    Breadth-first search from a source node key.

    Returns nodes in BFS visitation order, hop distances from source, and
    parent map for path reconstruction.

    Args:
        graph: Graph to traverse.
        source: Key of the start node.

    Returns:
        Tuple of:
        - order: Node keys in BFS visitation order
        - distance: Dictionary mapping key -> hop count (inf if unreachable)
        - parent: Dictionary mapping key -> parent key (None for source/unreached)

    Raises:
        NodeNotFoundError: If ``source`` is not a node.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = UndirectedGraph.from_edges([('A', 'B'), ('A', 'C')])
        >>> order, dist, parent = bfs(G, 'A')
        >>> order
        ['A', 'B', 'C']
        >>> dist['B']
        1
    """
    start = graph.require_node(source)

    order: List[Hashable] = []
    distance: Dict[Hashable, float] = {key: float("inf") for key in graph.node_keys()}
    parent: Dict[Hashable, Optional[Hashable]] = {key: None for key in graph.node_keys()}

    distance[source] = 0
    seen = {start}
    queue = deque([start])

    while queue:
        u = queue.popleft()
        u_key = graph.node_key(u)
        order.append(u_key)

        for v in graph.successors(u):
            if v not in seen:
                seen.add(v)
                v_key = graph.node_key(v)
                distance[v_key] = distance[u_key] + 1
                parent[v_key] = u_key
                queue.append(v)

    return order, distance, parent
