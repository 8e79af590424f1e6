"""Tests for Hierholzer's Eulerian circuit algorithm."""

import pytest

from gtheory.diagnostics import assert_valid_circuit
from gtheory.errors import DisconnectedGraphError, NotEulerianError
from gtheory.graphs import DirectedGraph, GraphKind, UndirectedGraph, hierholzer_undirected
from gtheory.storage import GraphDefinition

TRIANGLE = [("a", "b"), ("b", "c"), ("c", "a")]


class TestHierholzer:
    """Tests for hierholzer_undirected."""

    def test_triangle(self):
        G = UndirectedGraph.from_edges(TRIANGLE)
        assert hierholzer_undirected(G).circuit == ["a", "c", "b", "a"]

    def test_triangle_on_every_backend(self, storage_cls):
        G = UndirectedGraph.from_edges(TRIANGLE, storage_cls=storage_cls)
        circuit = hierholzer_undirected(G).circuit
        assert len(circuit) == 4
        assert_valid_circuit(G, circuit)

    def test_bowtie(self):
        """Two triangles sharing a node need the stack to splice sub-circuits."""
        G = UndirectedGraph.from_edges(TRIANGLE + [("c", "d"), ("d", "e"), ("e", "c")])
        circuit = hierholzer_undirected(G).circuit
        assert len(circuit) == 7
        assert circuit[0] == circuit[-1] == "a"
        assert_valid_circuit(G, circuit)

    def test_self_loop(self):
        G = UndirectedGraph.from_edges(TRIANGLE + [("a", "a")], kind=GraphKind.PSEUDO)
        circuit = hierholzer_undirected(G).circuit
        assert len(circuit) == 5
        assert ("a", "a") in zip(circuit, circuit[1:])
        assert_valid_circuit(G, circuit)

    def test_parallel_edges(self):
        G = UndirectedGraph.from_edges([("a", "b"), ("a", "b")], kind=GraphKind.MULTI)
        assert hierholzer_undirected(G).circuit == ["a", "b", "a"]

    def test_single_record_storage(self):
        """Storages holding one record per edge are walked edge by edge."""
        storage = GraphDefinition()
        for u, v in TRIANGLE:
            storage.add_edge_by_key(u, v)
        G = UndirectedGraph(storage)
        circuit = hierholzer_undirected(G).circuit
        assert len(circuit) == 4
        assert_valid_circuit(G, circuit)

    def test_starts_at_first_node_with_edges(self):
        G = UndirectedGraph.from_isolated_nodes_and_edges(["z"], TRIANGLE)
        circuit = hierholzer_undirected(G).circuit
        assert circuit[0] == "a"
        assert "z" not in circuit

    def test_odd_degree(self):
        G = UndirectedGraph.from_edges([("a", "b"), ("b", "c")])
        with pytest.raises(NotEulerianError, match="Node a has odd degree 1") as info:
            hierholzer_undirected(G)
        assert info.value.node == "a"
        assert info.value.degree == 1

    def test_disconnected(self):
        G = UndirectedGraph.from_edges(TRIANGLE + [("x", "y"), ("y", "z"), ("z", "x")])
        with pytest.raises(DisconnectedGraphError, match="disconnected components"):
            hierholzer_undirected(G)

    def test_isolated_nodes_are_allowed(self):
        G = UndirectedGraph.from_isolated_nodes_and_edges(["p", "q"], TRIANGLE)
        assert len(hierholzer_undirected(G).circuit) == 4

    def test_edgeless(self):
        G = UndirectedGraph.from_isolated_nodes_and_edges(["x", "y"], [])
        assert hierholzer_undirected(G).circuit == ["x"]

    def test_empty(self):
        assert hierholzer_undirected(UndirectedGraph()).circuit == []

    def test_rejects_directed(self):
        with pytest.raises(TypeError, match="UndirectedGraph"):
            hierholzer_undirected(DirectedGraph.from_edges(TRIANGLE))

    def test_runs_under_debug_mode(self, debug_mode):
        G = UndirectedGraph.from_edges(TRIANGLE + [("c", "d"), ("d", "e"), ("e", "c")])
        assert len(hierholzer_undirected(G).circuit) == 7
