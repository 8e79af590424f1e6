"""
Maximum flow: Ford-Fulkerson with breadth-first augmenting paths
(Edmonds-Karp).

Flow is kept as an antisymmetric map over ordered node pairs: pushing
``x`` units along u -> v adds ``x`` to f(u, v) and subtracts it from
f(v, u). The residual network is rebuilt from scratch before every
augmentation and kept, together with the augmented network, as a trace
of the run.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 26.2 (Ford-Fulkerson method, Edmonds-Karp).
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Sequence, Set, Tuple, Type

from ..core.ids import NodeId
from ..core.traits import Storage
from ..diagnostics.core import assert_capacity_constraints, assert_flow_conservation
from ..diagnostics.debug_mode import is_debug_enabled
from ..errors import FlowNetworkError
from ..logging import get_logger
from ..storage.adjacency_list import AdjacencyList
from .core import DirectedGraph
from .traversal import bfs_tree
from .utils import keys_of, reconstruct_path

logger = get_logger(__name__)

Pair = Tuple[NodeId, NodeId]


class Flow:
    """
    Antisymmetric flow assignment over ordered node pairs.

    Pairs never pushed along read as 0.
    """

    def __init__(self, values: Optional[Dict[Pair, int]] = None):
        self._values: Dict[Pair, int] = dict(values or {})

    def get(self, u: NodeId, v: NodeId) -> int:
        return self._values.get((u, v), 0)

    def push(self, u: NodeId, v: NodeId, amount: int) -> None:
        """Send ``amount`` from u to v, cancelling opposite flow first."""
        self._values[(u, v)] = self.get(u, v) + amount
        self._values[(v, u)] = self.get(v, u) - amount

    def net_outflow(self, v: NodeId) -> int:
        """Total flow leaving ``v`` minus total flow entering it."""
        return sum(value for (u, _), value in self._values.items() if u == v)

    def items(self) -> Iterator[Tuple[Pair, int]]:
        return iter(self._values.items())

    def copy(self) -> "Flow":
        return Flow(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flow):
            return NotImplemented
        keys = set(self._values) | set(other._values)
        return all(self.get(*k) == other.get(*k) for k in keys)

    def __repr__(self) -> str:
        nonzero = {k: v for k, v in self._values.items() if v > 0}
        return f"Flow({nonzero})"


@dataclass
class FlowNetwork:
    """
    Directed graph with integer capacities, terminals and a current flow.

    Flow is tracked per ordered node pair, so at most one arc may join
    any ordered pair; parallel arcs raise FlowNetworkError.

    Attributes:
        graph: Network topology. Arc weights are not used.
        capacities: Capacity of every arc, indexed by EdgeId.
        source: Source node id.
        sink: Sink node id.
        flow: Current flow assignment.
    """

    graph: DirectedGraph
    capacities: List[int]
    source: NodeId
    sink: NodeId
    flow: Flow = field(default_factory=Flow)

    def __post_init__(self):
        if len(self.capacities) != self.graph.size():
            raise FlowNetworkError(
                f"Expected {self.graph.size()} capacities, got {len(self.capacities)}"
            )
        for e, cap in enumerate(self.capacities):
            if cap < 0:
                raise FlowNetworkError(f"Capacity of edge {e} is negative: {cap}")
        n = self.graph.order()
        for name, node in (("source", self.source), ("sink", self.sink)):
            if not 0 <= node < n:
                raise FlowNetworkError(f"{name} id {node} out of range for {n} nodes")
        if self.source == self.sink:
            raise FlowNetworkError("Source and sink must be different nodes")
        seen: Set[Pair] = set()
        for e in self.graph.edge_ids():
            pair = self.graph.endpoints(e)
            if pair in seen:
                u, v = (self.graph.node_key(node) for node in pair)
                raise FlowNetworkError(
                    f"Parallel arcs ({u!r}, {v!r}) are not supported; merge their capacities"
                )
            seen.add(pair)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Sequence],
        source: Hashable,
        sink: Hashable,
        storage_cls: Type[Storage] = AdjacencyList,
    ) -> "FlowNetwork":
        """
        Build a network from ``(from_key, to_key, flow, capacity)`` tuples.

        Args:
            edges: Arcs with their initial flow and capacity.
            source: Key of the source node.
            sink: Key of the sink node.
            storage_cls: Storage backend for the topology.

        Returns:
            FlowNetwork carrying the given initial flow.

        Raises:
            NodeNotFoundError: If ``source`` or ``sink`` does not occur.
            ParallelEdgeError: If two arcs share the same ordered pair.
            FlowNetworkError: If a flow lies outside ``[0, capacity]``.

        Example:
            >>> net = FlowNetwork.from_edges([('s', 't', 0, 5)], 's', 't')
            >>> ford_fulkerson(net).max_flow
            5
        """
        graph = DirectedGraph(storage_cls())
        capacities: List[int] = []
        flow = Flow()
        for u_key, v_key, value, capacity in edges:
            if not 0 <= value <= capacity:
                raise FlowNetworkError(
                    f"Flow {value} on ({u_key!r}, {v_key!r}) is outside [0, {capacity}]"
                )
            e = graph.add_arc_by_key(u_key, v_key)
            capacities.append(capacity)
            u, v = graph.endpoints(e)
            if value:
                flow.push(u, v, value)
        return cls(graph, capacities, graph.require_node(source), graph.require_node(sink), flow)

    def value(self) -> int:
        """Net flow leaving the source."""
        return self.flow.net_outflow(self.source)

    def with_flow(self, flow: Flow) -> "FlowNetwork":
        return FlowNetwork(self.graph, self.capacities, self.source, self.sink, flow)


@dataclass
class FlowStep:
    """
    One iteration of Ford-Fulkerson.

    Attributes:
        residual: Residual network the path search ran on. Its capacities
            are the residual capacities.
        augmented: Network after pushing along ``path``; None for the
            final step, where no augmenting path exists.
        path: Node keys of the augmenting path (empty for the final step).
        bottleneck: Amount pushed along ``path`` (0 for the final step).
    """

    residual: FlowNetwork
    augmented: Optional[FlowNetwork]
    path: List[Hashable]
    bottleneck: int


@dataclass
class FordFulkersonResult:
    """
    Maximum flow and the trace that produced it.

    Attributes:
        network: Input network carrying the maximum flow.
        max_flow: Net flow leaving the source.
        steps: One FlowStep per augmentation plus the terminating step.
    """

    network: FlowNetwork
    max_flow: int
    steps: List[FlowStep]

    def min_cut(self) -> Tuple[Set[Hashable], List[Tuple[Hashable, Hashable, int]]]:
        """
        Return the minimum cut certified by the final residual network.

        Returns:
            Tuple of:
            - source_side: Keys reachable from the source in the final
              residual network
            - cut_edges: Original arcs ``(u, v, capacity)`` leaving
              ``source_side``; their capacities sum to ``max_flow``
        """
        final = self.steps[-1].residual
        reachable = set(bfs_tree(final.graph, final.source))
        graph = self.network.graph
        cut_edges = []
        for e in graph.edge_ids():
            u, v = graph.endpoints(e)
            if u in reachable and v not in reachable:
                cut_edges.append((graph.node_key(u), graph.node_key(v), self.network.capacities[e]))
        return set(keys_of(graph, sorted(reachable))), cut_edges


def residual_network(network: FlowNetwork) -> FlowNetwork:
    """
    Build the residual network of ``network`` under its current flow.

    The node table is copied and all edges are rebuilt:

    - every arc with ``capacity - f(u, v) > 0`` gets a forward residual
      arc with that capacity
    - every arc carrying ``f(u, v) > 0`` with no opposite arc v -> u in the
      network gets a backward residual arc v -> u with capacity f(u, v)

    Residual capacities are also stored as arc weights.

    Args:
        network: Flow network.

    Returns:
        New FlowNetwork over a fresh storage, with zero flow.

    Complexity: O(V + E) per call (full copy of the node table).
    """
    graph = network.graph
    storage = graph.storage.copy()
    storage.clear_edges()
    capacities: List[int] = []

    for e in graph.edge_ids():
        u, v = graph.endpoints(e)
        forward = network.flow.get(u, v)
        remaining = network.capacities[e] - forward
        if remaining > 0:
            storage.add_edge(u, v, weight=remaining)
            capacities.append(remaining)
        has_reverse = next(iter(graph.edges_between(v, u)), None) is not None
        if not has_reverse and forward > 0:
            storage.add_edge(v, u, weight=forward)
            capacities.append(forward)

    return FlowNetwork(
        DirectedGraph(storage, graph.kind),
        capacities,
        network.source,
        network.sink,
    )


def _check(network: FlowNetwork) -> None:
    if is_debug_enabled():
        assert_flow_conservation(network)
        assert_capacity_constraints(network)


def ford_fulkerson(network: FlowNetwork) -> FordFulkersonResult:
    """
    Compute a maximum flow starting from the network's current flow.

    Each iteration rebuilds the residual network, finds an augmenting path
    with BFS (fewest arcs), and pushes the path's bottleneck along it. The
    loop ends when the sink is unreachable in the residual network.

    Args:
        network: Flow network. Its initial flow must respect capacities
            and conservation; in debug mode both are asserted.

    Returns:
        FordFulkersonResult with the final network, its value and the
        per-iteration trace.

    Complexity: O(V E^2) augmentations bound (Edmonds-Karp), each O(V + E).

    Example:
        >>> net = FlowNetwork.from_edges(
        ...     [('s', 'a', 0, 3), ('a', 't', 0, 2), ('s', 't', 0, 1)], 's', 't')
        >>> ford_fulkerson(net).max_flow
        3
    """
    _check(network)
    current = network.with_flow(network.flow.copy())
    steps: List[FlowStep] = []

    while True:
        residual = residual_network(current)
        parent = bfs_tree(residual.graph, residual.source, residual.sink)
        if residual.sink not in parent:
            steps.append(FlowStep(residual, None, [], 0))
            break

        path = reconstruct_path(parent, residual.sink)
        arcs = list(zip(path, path[1:]))
        bottleneck = min(
            residual.capacities[next(iter(residual.graph.edges_between(u, v)))] for u, v in arcs
        )

        flow = current.flow.copy()
        for u, v in arcs:
            flow.push(u, v, bottleneck)
        current = current.with_flow(flow)
        _check(current)

        path_keys = keys_of(network.graph, path)
        logger.debug("augment along %s by %s", path_keys, bottleneck)
        steps.append(FlowStep(residual, current, path_keys, bottleneck))

    max_flow = current.value()
    logger.debug("max flow %s after %d augmentations", max_flow, len(steps) - 1)
    return FordFulkersonResult(network=current, max_flow=max_flow, steps=steps)
