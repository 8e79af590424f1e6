"""Tests shared by every storage backend."""

import pytest

from gtheory.errors import NodeNotFoundError
from gtheory.storage import AdjacencyMatrix


def build(storage_cls):
    """a -> b (w=1), a -> c (w=4), b -> c (w=2), c -> a (unweighted)."""
    s = storage_cls()
    s.add_edge_by_key("a", "b", weight=1, meta="ab")
    s.add_edge_by_key("a", "c", weight=4)
    s.add_edge_by_key("b", "c", weight=2)
    s.add_edge_by_key("c", "a")
    return s


class TestNodes:
    """Node insertion and lookup."""

    def test_order_and_size(self, storage_cls):
        s = build(storage_cls)
        assert s.order() == 3
        assert s.size() == 4

    def test_add_node_is_idempotent(self, storage_cls):
        s = storage_cls()
        first = s.add_node("x", data={"color": "red"})
        again = s.add_node("x", data={"color": "blue"})
        assert first == again == 0
        assert s.order() == 1
        assert s.node_data(first) == {"color": "red"}

    def test_key_lookup(self, storage_cls):
        s = build(storage_cls)
        assert s.node_id("b") == 1
        assert s.node_key(2) == "c"
        assert s.node_id("zzz") is None
        assert s.has_node("a")
        assert s.node_keys() == ["a", "b", "c"]

    def test_require_node_raises(self, storage_cls):
        s = build(storage_cls)
        with pytest.raises(NodeNotFoundError, match="zzz"):
            s.require_node("zzz")

    def test_with_node_capacity(self, storage_cls):
        s = storage_cls.with_node_capacity(10)
        assert s.order() == 0


class TestEdges:
    """Edge records and per-edge lookups."""

    def test_endpoints_meta_weight(self, storage_cls):
        s = build(storage_cls)
        assert s.endpoints(0) == (0, 1)
        assert s.edge_meta(0) == "ab"
        assert s.weight_of(2) == 2
        assert s.weight_of(3) is None
        assert list(s.edge_ids()) == [0, 1, 2, 3]

    def test_edges_between(self, storage_cls):
        s = build(storage_cls)
        a, b, c = (s.node_id(k) for k in "abc")
        assert list(s.edges_between(a, b)) == [0]
        assert list(s.edges_between(b, a)) == []
        assert list(s.edges_between(c, a)) == [3]

    def test_add_edge_rejects_unknown_ids(self, storage_cls):
        s = build(storage_cls)
        with pytest.raises(IndexError):
            s.add_edge(0, 7)

    def test_edge_id_out_of_range(self, storage_cls):
        s = build(storage_cls)
        with pytest.raises(IndexError):
            s.endpoints(99)

    def test_clear_edges_keeps_nodes(self, storage_cls):
        s = build(storage_cls)
        s.clear_edges()
        assert s.order() == 3
        assert s.size() == 0
        for v in s.node_ids():
            assert list(s.successors(v)) == []
            assert list(s.predecessors(v)) == []
            assert list(s.neighborhood(v)) == []
        s.add_edge(0, 2, weight=7)
        assert list(s.edges_between(0, 2)) == [0]


class TestNeighbors:
    """Neighbor queries."""

    def test_successors(self, storage_cls):
        s = build(storage_cls)
        assert sorted(s.successors(0)) == [1, 2]
        assert sorted(s.successors(2)) == [0]

    def test_predecessors(self, storage_cls):
        s = build(storage_cls)
        assert sorted(s.predecessors(2)) == [0, 1]
        assert sorted(s.predecessors(0)) == [2]

    def test_neighborhood_unique(self, storage_cls):
        """a and c are joined in both directions but listed once."""
        s = build(storage_cls)
        assert sorted(s.neighborhood(0)) == [1, 2]
        assert sorted(s.neighborhood(2)) == [0, 1]

    def test_isolated_node(self, storage_cls):
        s = build(storage_cls)
        d = s.add_node("d")
        assert list(s.neighborhood(d)) == []
        assert list(s.successors(d)) == []

    def test_self_loop(self, storage_cls):
        s = storage_cls()
        s.add_edge_by_key("x", "x")
        assert list(s.successors(0)) == [0]
        assert list(s.predecessors(0)) == [0]
        assert list(s.neighborhood(0)) == [0]

    def test_queries_are_single_pass(self, storage_cls):
        s = build(storage_cls)
        it = s.successors(0)
        assert len(list(it)) == 2
        assert list(it) == []


class TestParallelRecords:
    """Parallel records between one ordered pair."""

    def test_list_backends_keep_all(self, storage_cls):
        s = storage_cls()
        s.add_edge_by_key("u", "v", weight=5)
        s.add_edge_by_key("u", "v", weight=3)
        assert s.size() == 2
        if storage_cls is AdjacencyMatrix:
            # last write wins
            assert list(s.edges_between(0, 1)) == [1]
            assert list(s.successors(0)) == [1]
        else:
            assert list(s.edges_between(0, 1)) == [0, 1]
            assert list(s.successors(0)) == [1, 1]
        assert list(s.neighborhood(0)) == [1]
