"""
Graph wrappers and algorithms for gtheory.

This package provides:
- Graph wrappers (DirectedGraph, UndirectedGraph) with edge-kind checks
- Traversal (BFS)
- Single-source lightest paths (Dijkstra)
- Maximum flow (Ford-Fulkerson / Edmonds-Karp)
- Minimum spanning forest (Kruskal)
- Warshall closure, all-pairs lightest paths and distance metrics
- Eulerian circuits (Hierholzer)
- Prüfer sequence encoding and decoding
- Chromatic polynomial and chromatic number

Every algorithm accepts a wrapper over any storage backend.
"""

from .allpairs import (
    ClosureResult,
    GraphDistances,
    LightestPathResult,
    PathMatrix,
    compute_graph_distances,
    warshall_closure,
    warshall_lightest_path_matrix,
)
from .coloring import (
    ChromaticMethod,
    chromatic_number,
    chromatic_polynomial,
    num_k_colorings,
)
from .core import DirectedGraph, Graph, GraphKind, UndirectedGraph
from .euler import HierholzerResult, hierholzer_undirected
from .flow import (
    Flow,
    FlowNetwork,
    FlowStep,
    FordFulkersonResult,
    ford_fulkerson,
    residual_network,
)
from .mst import KruskalResult, UnionFind, kruskal_mst
from .polynomial import Polynomial
from .prufer import prufer_to_tree, tree_to_prufer
from .shortest import DijkstraResult, dijkstra
from .traversal import bfs, bfs_tree
from .utils import reconstruct_path

__all__ = [
    "Graph",
    "GraphKind",
    "DirectedGraph",
    "UndirectedGraph",
    "bfs",
    "bfs_tree",
    "reconstruct_path",
    "dijkstra",
    "DijkstraResult",
    "Flow",
    "FlowNetwork",
    "FlowStep",
    "FordFulkersonResult",
    "ford_fulkerson",
    "residual_network",
    "UnionFind",
    "KruskalResult",
    "kruskal_mst",
    "ClosureResult",
    "PathMatrix",
    "LightestPathResult",
    "GraphDistances",
    "warshall_closure",
    "warshall_lightest_path_matrix",
    "compute_graph_distances",
    "HierholzerResult",
    "hierholzer_undirected",
    "tree_to_prufer",
    "prufer_to_tree",
    "Polynomial",
    "ChromaticMethod",
    "chromatic_polynomial",
    "chromatic_number",
    "num_k_colorings",
]

# Example usage:
# from gtheory.graphs import DirectedGraph, dijkstra
#
# G = DirectedGraph.from_edges([('A', 'B', 1), ('B', 'C', 2)])
# weight, path = dijkstra(G, 'A').lightest_path_to('C')  # 3, ['A', 'B', 'C']
