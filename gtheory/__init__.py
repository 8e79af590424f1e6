"""
gtheory: graph data model and classical graph algorithms.

Graphs are stored in one of four interchangeable backends and wrapped in
a DirectedGraph or UndirectedGraph that enforces the simple/multi/pseudo
edge rules. All algorithms are plain functions over the wrappers.
"""

__version__ = "0.1.0"

from .core import EdgeId, NodeId, NodeInterner, NodeRecord
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled
from .errors import (
    DisconnectedGraphError,
    FlowNetworkError,
    GraphError,
    GraphKindError,
    InvalidPruferSequenceError,
    InvariantError,
    NoPathError,
    NodeNotFoundError,
    NotATreeError,
    NotEulerianError,
    ParallelEdgeError,
    SelfLoopError,
    WeightError,
)
from .graphs import (
    ChromaticMethod,
    ClosureResult,
    DijkstraResult,
    DirectedGraph,
    Flow,
    FlowNetwork,
    FlowStep,
    FordFulkersonResult,
    GraphDistances,
    GraphKind,
    HierholzerResult,
    KruskalResult,
    LightestPathResult,
    Polynomial,
    UndirectedGraph,
    bfs,
    chromatic_number,
    chromatic_polynomial,
    compute_graph_distances,
    dijkstra,
    ford_fulkerson,
    hierholzer_undirected,
    kruskal_mst,
    num_k_colorings,
    prufer_to_tree,
    tree_to_prufer,
    warshall_closure,
    warshall_lightest_path_matrix,
)
from .logging import configure_logging, get_logger, set_log_level
from .storage import (
    AdjacencyList,
    AdjacencyListIn,
    AdjacencyMatrix,
    EdgeRecord,
    GraphDefinition,
)

__all__ = [
    "__version__",
    # Identifiers
    "NodeId",
    "EdgeId",
    "NodeRecord",
    "NodeInterner",
    # Storage
    "EdgeRecord",
    "GraphDefinition",
    "AdjacencyList",
    "AdjacencyListIn",
    "AdjacencyMatrix",
    # Wrappers
    "GraphKind",
    "DirectedGraph",
    "UndirectedGraph",
    # Algorithms
    "bfs",
    "dijkstra",
    "DijkstraResult",
    "Flow",
    "FlowNetwork",
    "FlowStep",
    "FordFulkersonResult",
    "ford_fulkerson",
    "kruskal_mst",
    "KruskalResult",
    "warshall_closure",
    "ClosureResult",
    "warshall_lightest_path_matrix",
    "LightestPathResult",
    "compute_graph_distances",
    "GraphDistances",
    "hierholzer_undirected",
    "HierholzerResult",
    "tree_to_prufer",
    "prufer_to_tree",
    "Polynomial",
    "ChromaticMethod",
    "chromatic_polynomial",
    "chromatic_number",
    "num_k_colorings",
    # Errors
    "GraphError",
    "NodeNotFoundError",
    "GraphKindError",
    "SelfLoopError",
    "ParallelEdgeError",
    "NotEulerianError",
    "DisconnectedGraphError",
    "NotATreeError",
    "InvalidPruferSequenceError",
    "NoPathError",
    "WeightError",
    "FlowNetworkError",
    "InvariantError",
    # Logging and debug mode
    "get_logger",
    "set_log_level",
    "configure_logging",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
