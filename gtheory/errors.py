"""
Exception hierarchy for gtheory.

Every error derives from :class:`GraphError` and also from the builtin
exception matching its category, so ``except ValueError`` or
``except KeyError`` keep working for callers that do not know the
library types.
"""

from typing import Hashable


class GraphError(Exception):
    """Base class for all graph errors."""


class NodeNotFoundError(GraphError, KeyError):
    """A key was looked up that no node carries."""

    def __init__(self, key: Hashable):
        self.key = key
        super().__init__(f"Node not found: {key!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the whole message
        return self.args[0]


class GraphKindError(GraphError, ValueError):
    """An insertion would violate the graph kind (simple/multi/pseudo)."""


class SelfLoopError(GraphKindError):
    """Self-loop inserted into a graph kind that forbids them."""


class ParallelEdgeError(GraphKindError):
    """Parallel edge inserted into a simple graph."""


class NotEulerianError(GraphError, ValueError):
    """A node has odd degree, so no Eulerian circuit exists."""

    def __init__(self, node: Hashable, degree: int):
        self.node = node
        self.degree = degree
        super().__init__(f"Graph is not Eulerian: Node {node} has odd degree {degree}")


class DisconnectedGraphError(GraphError, ValueError):
    """Edges are spread over more than one connected component."""


class NotATreeError(GraphError, ValueError):
    """The graph is not a tree."""


class InvalidPruferSequenceError(GraphError, ValueError):
    """A Prüfer sequence holds a label outside ``1..n``."""

    def __init__(self, value: int, n: int):
        self.value = value
        self.n = n
        super().__init__(f"Invalid Prüfer sequence: label {value} is outside 1..{n}")


class NoPathError(GraphError, LookupError):
    """The target is not reachable from the source."""


class WeightError(GraphError, ValueError):
    """An edge weight is not acceptable for the algorithm."""


class FlowNetworkError(GraphError, ValueError):
    """Capacities, flows or terminals of a flow network are inconsistent."""


class InvariantError(GraphError, AssertionError):
    """A debug-mode invariant check failed."""
