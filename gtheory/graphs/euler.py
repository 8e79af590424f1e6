"""
Eulerian circuits in undirected graphs: Hierholzer's algorithm.

Works on logical edges (see :meth:`UndirectedGraph.logical_edges`), so
the two records storing one undirected edge are traversed once.

References:
    - Hierholzer, C. "Ueber die Moeglichkeit, einen Linienzug ohne
      Wiederholung und ohne Unterbrechung zu umfahren", Math. Ann. 6 (1873).
"""

from dataclasses import dataclass
from typing import Hashable, List

from ..diagnostics.core import assert_valid_circuit
from ..diagnostics.debug_mode import is_debug_enabled
from ..errors import DisconnectedGraphError, NotEulerianError
from ..logging import get_logger
from .core import UndirectedGraph

logger = get_logger(__name__)


@dataclass
class HierholzerResult:
    """
    An Eulerian circuit.

    Attributes:
        circuit: Node keys along the circuit; the first and last entries
            coincide whenever the graph has edges.
    """

    circuit: List[Hashable]


def hierholzer_undirected(graph: UndirectedGraph) -> HierholzerResult:
    """
    Find an Eulerian circuit with Hierholzer's stack-based walk.

    The walk starts at the first node of positive degree. From the node
    on top of the stack it follows an unused incident edge if one is left,
    otherwise it moves the node onto the finished circuit.

    Args:
        graph: Undirected graph; parallel edges and self-loops count
            fully towards degrees (a self-loop adds 2).

    Returns:
        HierholzerResult. An edgeless graph yields its first node alone;
        a graph without nodes yields an empty circuit.

    Raises:
        TypeError: If ``graph`` is not an UndirectedGraph.
        NotEulerianError: If some node has odd degree.
        DisconnectedGraphError: If the edges do not form one connected
            component.

    Complexity: O(V + E).

    Example:
        >>> G = UndirectedGraph.from_edges([('a', 'b'), ('b', 'c'), ('c', 'a')])
        >>> hierholzer_undirected(G).circuit
        ['a', 'c', 'b', 'a']
    """
    if not isinstance(graph, UndirectedGraph):
        raise TypeError(f"hierholzer_undirected needs an UndirectedGraph, got {type(graph).__name__}")

    n = graph.order()
    edges = graph.logical_edges()
    if not edges:
        return HierholzerResult(circuit=[graph.node_key(next(iter(graph.node_ids())))] if n else [])

    ends = [graph.endpoints(first) for first, _ in edges]
    incident: List[List[int]] = [[] for _ in range(n)]
    for idx, (u, v) in enumerate(ends):
        incident[u].append(idx)
        incident[v].append(idx)

    for v in graph.node_ids():
        if len(incident[v]) % 2:
            raise NotEulerianError(graph.node_key(v), len(incident[v]))

    start = next(v for v in graph.node_ids() if incident[v])
    used = [False] * len(edges)
    stack = [start]
    circuit = []

    while stack:
        top = stack[-1]
        pending = incident[top]
        while pending and used[pending[-1]]:
            pending.pop()
        if pending:
            idx = pending.pop()
            used[idx] = True
            u, v = ends[idx]
            stack.append(v if u == top else u)
        else:
            circuit.append(graph.node_key(stack.pop()))

    if len(circuit) != len(edges) + 1:
        raise DisconnectedGraphError("Graph has disconnected components with edges.")

    circuit.reverse()
    if is_debug_enabled():
        assert_valid_circuit(graph, circuit)
    logger.debug("circuit over %d edges from %r", len(edges), circuit[0])
    return HierholzerResult(circuit=circuit)
