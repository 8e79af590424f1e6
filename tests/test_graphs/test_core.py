"""Tests for the graph wrappers and edge-kind rules."""

import pytest

from gtheory.errors import GraphKindError, ParallelEdgeError, SelfLoopError
from gtheory.graphs import DirectedGraph, Graph, GraphKind, UndirectedGraph
from gtheory.storage import AdjacencyList, AdjacencyMatrix, GraphDefinition


class TestGraphKind:
    """Tests for GraphKind flags."""

    def test_flags(self):
        assert not GraphKind.SIMPLE.allows_self_loops
        assert not GraphKind.SIMPLE.allows_parallel_edges
        assert not GraphKind.MULTI.allows_self_loops
        assert GraphKind.MULTI.allows_parallel_edges
        assert GraphKind.PSEUDO.allows_self_loops
        assert GraphKind.PSEUDO.allows_parallel_edges


class TestGraph:
    """Tests for the shared Graph base."""

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            Graph()


class TestDirectedGraph:
    """Tests for DirectedGraph."""

    def test_from_edges(self, storage_cls):
        G = DirectedGraph.from_edges([("a", "b", 2), ("b", "c")], storage_cls=storage_cls)
        assert isinstance(G.storage, storage_cls)
        assert G.order() == 3
        assert G.size() == 2
        assert G.edge_list() == [("a", "b", 2), ("b", "c", None)]
        assert list(G.successors(G.require_node("a"))) == [G.require_node("b")]
        assert list(G.predecessors(G.require_node("a"))) == []

    def test_from_isolated_nodes_and_edges(self):
        G = DirectedGraph.from_isolated_nodes_and_edges(["z", "a"], [("a", "b")])
        assert G.node_keys() == ["z", "a", "b"]
        assert G.size() == 1

    def test_bad_edge_tuple(self):
        with pytest.raises(ValueError, match="Edge must be"):
            DirectedGraph.from_edges([("a",)])

    def test_simple_rejects_self_loop(self, storage_cls):
        G = DirectedGraph(storage_cls())
        with pytest.raises(SelfLoopError, match="Simple graph: self-loops are not allowed"):
            G.add_arc_by_key("a", "a")

    def test_simple_rejects_duplicate_arc(self, storage_cls):
        G = DirectedGraph.from_edges([("a", "b")], storage_cls=storage_cls)
        with pytest.raises(ParallelEdgeError, match="Simple graph: parallel edges are not allowed"):
            G.add_arc_by_key("a", "b")

    def test_simple_allows_opposite_arcs(self, storage_cls):
        G = DirectedGraph.from_edges([("a", "b"), ("b", "a")], storage_cls=storage_cls)
        assert G.size() == 2

    def test_multi_allows_parallel_rejects_loop(self):
        G = DirectedGraph(kind=GraphKind.MULTI)
        G.add_arc_by_key("a", "b")
        G.add_arc_by_key("a", "b")
        assert G.size() == 2
        with pytest.raises(SelfLoopError, match="Multigraph"):
            G.add_arc_by_key("b", "b")

    def test_pseudo_allows_everything(self):
        G = DirectedGraph.from_edges(
            [("a", "a"), ("a", "b"), ("a", "b")], kind=GraphKind.PSEUDO
        )
        assert G.size() == 3

    def test_rejected_insert_creates_no_nodes(self):
        G = DirectedGraph()
        with pytest.raises(GraphKindError):
            G.add_arc_by_key("ghost", "ghost")
        assert G.order() == 0

    def test_add_arc_by_id(self):
        G = DirectedGraph()
        a = G.add_node("a")
        b = G.add_node("b")
        e = G.add_arc(a, b, meta="m", weight=3)
        assert G.endpoints(e) == (a, b)
        assert G.edge_meta(e) == "m"
        assert G.weight_of(e) == 3
        with pytest.raises(ParallelEdgeError):
            G.add_arc(a, b)
        with pytest.raises(IndexError):
            G.add_arc(a, 7)

    def test_node_payload(self):
        G = DirectedGraph()
        G.add_arc_by_key("a", "b", source_data="A", target_data="B")
        assert G.node_data(G.require_node("a")) == "A"
        assert G.node_data(G.require_node("b")) == "B"

    def test_into_storage_keeps_kind_and_ids(self):
        G = DirectedGraph.from_edges([("a", "b", 1), ("b", "c", 2)], kind=GraphKind.MULTI)
        H = G.into_storage(AdjacencyMatrix)
        assert isinstance(H, DirectedGraph)
        assert isinstance(H.storage, AdjacencyMatrix)
        assert H.kind is GraphKind.MULTI
        assert H.edge_list() == G.edge_list()

    def test_convert_storage_returns_storage(self):
        G = DirectedGraph.from_edges([("a", "b")])
        s = G.convert_storage(AdjacencyList)
        assert isinstance(s, AdjacencyList)
        assert s.size() == 1


class TestUndirectedGraph:
    """Tests for UndirectedGraph."""

    def test_edge_stored_as_two_records(self, storage_cls):
        G = UndirectedGraph(storage_cls())
        fwd, bwd = G.add_edge_by_key("a", "b", meta="m", weight=4)
        assert G.size() == 2
        assert G.endpoints(fwd) == (0, 1)
        assert G.endpoints(bwd) == (1, 0)
        assert G.weight_of(fwd) == G.weight_of(bwd) == 4
        assert G.edge_meta(fwd) == G.edge_meta(bwd) == "m"

    def test_neighbor_queries_agree(self, storage_cls):
        G = UndirectedGraph.from_edges([("a", "b"), ("c", "a")], storage_cls=storage_cls)
        a = G.require_node("a")
        expected = sorted(G.neighborhood(a))
        assert expected == [G.require_node("b"), G.require_node("c")]
        assert sorted(G.successors(a)) == expected
        assert sorted(G.predecessors(a)) == expected

    def test_simple_rejects_reverse_duplicate(self, storage_cls):
        G = UndirectedGraph.from_edges([("a", "b")], storage_cls=storage_cls)
        with pytest.raises(ParallelEdgeError):
            G.add_edge_by_key("b", "a")
        assert G.size() == 2

    def test_simple_rejects_self_loop(self):
        G = UndirectedGraph()
        a = G.add_node("a")
        with pytest.raises(SelfLoopError):
            G.add_edge(a, a)
        assert G.size() == 0

    def test_insert_is_atomic_on_existing_storage(self):
        """A one-directional record still blocks a simple edge, and nothing is written."""
        storage = GraphDefinition()
        storage.add_edge_by_key("a", "b")
        G = UndirectedGraph(storage)
        with pytest.raises(ParallelEdgeError):
            G.add_edge_by_key("a", "b")
        assert G.size() == 1

    def test_multi_parallel_edges(self):
        G = UndirectedGraph.from_edges([("a", "b"), ("b", "a")], kind=GraphKind.MULTI)
        assert G.size() == 4
        assert len(G.logical_edges()) == 2

    def test_pseudo_self_loop_is_one_logical_edge(self):
        G = UndirectedGraph.from_edges([("a", "a"), ("a", "b")], kind=GraphKind.PSEUDO)
        assert G.size() == 4
        assert G.logical_edges() == [(0, 1), (2, 3)]
        assert G.degrees() == [3, 1]

    def test_logical_edges_without_partner(self):
        """Storages with one record per edge yield unpaired logical edges."""
        storage = GraphDefinition()
        storage.add_edge_by_key(1, 2)
        storage.add_edge_by_key(2, 3)
        G = UndirectedGraph(storage)
        assert G.logical_edges() == [(0, None), (1, None)]
        assert G.degrees() == [1, 2, 1]

    def test_into_directed(self):
        G = UndirectedGraph.from_edges([("a", "b", 1)])
        D = G.into_directed(AdjacencyList)
        assert isinstance(D, DirectedGraph)
        assert isinstance(D.storage, AdjacencyList)
        assert D.size() == 2
        assert list(D.successors(D.require_node("b"))) == [D.require_node("a")]

    def test_repr(self):
        G = UndirectedGraph.from_edges([("a", "b")])
        assert repr(G) == (
            "UndirectedGraph(kind=simple, storage=GraphDefinition, order=2, size=2)"
        )
