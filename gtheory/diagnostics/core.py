"""Invariant checks run by the algorithms when debug mode is enabled."""

from __future__ import annotations

from collections import Counter, deque
from typing import Hashable, Sequence

import numpy as np

from ..core.traits import GraphBase
from ..errors import InvariantError


def assert_flow_conservation(network) -> None:
    """
    Assert that net flow is zero at every node except source and sink.

    Parameters
    ----------
    network:
        FlowNetwork whose ``flow`` is antisymmetric.

    Raises
    ------
    InvariantError
        If some inner node has non-zero net outflow.
    """
    graph = network.graph
    for v in graph.node_ids():
        if v in (network.source, network.sink):
            continue
        excess = network.flow.net_outflow(v)
        if excess != 0:
            raise InvariantError(
                f"Flow is not conserved at node {graph.node_key(v)!r}: "
                f"net outflow {excess}"
            )


def assert_capacity_constraints(network) -> None:
    """
    Assert that no ordered pair carries more flow than its capacity.

    The capacity of a pair (u, v) is the sum over all arcs u -> v; pairs
    without an arc have capacity 0, so they may only carry cancelling
    (negative) flow.

    Raises
    ------
    InvariantError
        If a pair is over capacity.
    """
    graph = network.graph
    pair_capacity: Counter = Counter()
    for e in graph.edge_ids():
        pair_capacity[graph.endpoints(e)] += network.capacities[e]
    for (u, v), value in network.flow.items():
        if value > pair_capacity[(u, v)]:
            raise InvariantError(
                f"Flow {value} on ({graph.node_key(u)!r}, {graph.node_key(v)!r}) "
                f"exceeds capacity {pair_capacity[(u, v)]}"
            )


def is_tree(graph: GraphBase) -> bool:
    """
    Check whether a graph is a tree when edge directions are ignored.

    Parallel records between the same two nodes count as one edge. The
    empty graph is not a tree; a single node is.

    Parameters
    ----------
    graph:
        Any graph.

    Returns
    -------
    bool
        True if the graph is connected, loop-free and has exactly
        ``order - 1`` distinct adjacencies.
    """
    n = graph.order()
    if n == 0:
        return False

    pairs = set()
    for e in graph.edge_ids():
        u, v = graph.endpoints(e)
        if u == v:
            return False
        pairs.add((min(u, v), max(u, v)))
    if len(pairs) != n - 1:
        return False

    seen = {next(iter(graph.node_ids()))}
    queue = deque(seen)
    while queue:
        u = queue.popleft()
        for v in graph.neighborhood(u):
            if v not in seen:
                seen.add(v)
                queue.append(v)
    return len(seen) == n


def assert_tree(graph: GraphBase) -> None:
    """
    Assert that ``graph`` is a tree.

    Raises
    ------
    InvariantError
        If it is not.
    """
    if not is_tree(graph):
        raise InvariantError(
            f"Expected a tree, got {graph.order()} nodes and {graph.size()} edge records"
        )


def assert_closure_transitive(closure: np.ndarray) -> None:
    """
    Assert that a boolean reachability matrix is reflexive and transitive.

    Parameters
    ----------
    closure:
        Square boolean array.

    Raises
    ------
    InvariantError
        If the diagonal has a False entry or some ``i -> j -> k`` lacks
        ``i -> k``.
    """
    if closure.ndim != 2 or closure.shape[0] != closure.shape[1]:
        raise InvariantError(f"Closure must be square, got shape {closure.shape}")
    if not np.all(np.diag(closure)):
        raise InvariantError("Closure is not reflexive")
    as_int = closure.astype(np.int64)
    two_step = (as_int @ as_int) > 0
    if np.any(two_step & ~closure):
        raise InvariantError("Closure is not transitive")


def assert_valid_circuit(graph, circuit: Sequence[Hashable]) -> None:
    """
    Assert that ``circuit`` traverses every logical edge exactly once.

    Parameters
    ----------
    graph:
        UndirectedGraph the circuit was built from.
    circuit:
        Node keys, first equal to last.

    Raises
    ------
    InvariantError
        If the walk is not closed, reuses an edge or misses one.
    """
    edges = graph.logical_edges()
    if not edges:
        return
    if len(circuit) != len(edges) + 1 or circuit[0] != circuit[-1]:
        raise InvariantError(
            f"Circuit of length {len(circuit)} cannot cover {len(edges)} edges"
        )

    remaining: Counter = Counter()
    for first, _ in edges:
        u, v = graph.endpoints(first)
        remaining[frozenset((graph.node_key(u), graph.node_key(v)))] += 1

    for a, b in zip(circuit, circuit[1:]):
        step = frozenset((a, b))
        if remaining[step] == 0:
            raise InvariantError(f"Circuit uses edge ({a!r}, {b!r}) more often than it exists")
        remaining[step] -= 1
