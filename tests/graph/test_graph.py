import pytest

from wgraph.graph import (
    GraphIterator,
    ImmutableGraph,
    InvalidVertexError,
    MutableGraph,
    WGraphError,
    new_graph,
    sort,
)
from wgraph.graph.base import check_vertex, format_graph, iter_edges


class TestMutableGraph:
    def test_new_graph_is_empty(self):
        g = new_graph(3)
        assert isinstance(g, MutableGraph)
        assert g.order() == 3
        assert len(g) == 0
        assert str(g) == "3 []"

    def test_negative_order_rejected(self):
        with pytest.raises(ValueError):
            MutableGraph(-1)

    def test_add_cost_creates_and_accumulates(self):
        g = MutableGraph(2)
        assert g.cost(0, 1) == 0
        assert not g.edge(0, 1)

        g.add_cost(0, 1, 4)
        assert g.edge(0, 1)
        assert g.cost(0, 1) == 4

        g.add_cost(0, 1, -3)
        assert g.cost(0, 1) == 1
        assert g.cost(1, 0) == 0

    def test_set_cost_and_delete(self):
        g = MutableGraph(2)
        g.set_cost(1, 0, 9)
        g.set_cost(1, 0, 2)
        assert g.cost(1, 0) == 2
        assert g.degree(1) == 1

        g.delete(1, 0)
        assert not g.edge(1, 0)
        assert g.degree(1) == 0
        # Deleting a missing edge is a no-op
        g.delete(1, 0)

    def test_visit_follows_insertion_order(self):
        g = MutableGraph(4)
        g.add_cost(0, 3, 1)
        g.add_cost(0, 1, 2)
        g.add_cost(0, 2, 3)
        assert list(g.visit(0)) == [(3, 1), (1, 2), (2, 3)]

    def test_visit_early_exit_is_per_call(self):
        g = MutableGraph(3)
        g.add_cost(0, 1, 5)
        g.add_cost(0, 2, 6)
        assert next(g.visit(0)) == (1, 5)
        assert any(w == 2 for w, _ in g.visit(0))
        # Each call starts a fresh iteration
        assert list(g.visit(0)) == [(1, 5), (2, 6)]

    def test_edges_and_str(self):
        g = MutableGraph(3)
        g.add_cost(0, 1, 2)
        g.add_cost(1, 2, 0)
        g.add_cost(2, 2, 1)
        assert g.edges() == [(0, 1, 2), (1, 2, 0), (2, 2, 1)]
        assert str(g) == "3 [(0 1):2 (1 2) (2 2):1]"
        assert len(g) == 3

    def test_copy_is_independent(self):
        g = MutableGraph(2)
        g.add_cost(0, 1, 1)
        clone = g.copy()
        clone.add_cost(0, 1, 5)
        clone.add_cost(1, 0, 5)
        assert g.edges() == [(0, 1, 1)]
        assert clone.edges() == [(0, 1, 6), (1, 0, 5)]

    @pytest.mark.parametrize("u,v", [(0, 2), (2, 0), (-1, 0)])
    def test_out_of_range_edges(self, u, v):
        g = MutableGraph(2)
        with pytest.raises(InvalidVertexError):
            g.add_cost(u, v, 1)
        with pytest.raises(InvalidVertexError):
            g.cost(u, v)

    def test_visit_out_of_range(self):
        g = MutableGraph(2)
        with pytest.raises(InvalidVertexError):
            g.visit(2)

    def test_error_hierarchy(self):
        assert issubclass(InvalidVertexError, WGraphError)
        assert issubclass(InvalidVertexError, ValueError)


class TestImmutableGraph:
    def test_sort_orders_edges_by_neighbor(self):
        g = MutableGraph(3)
        g.add_cost(0, 2, 1)
        g.add_cost(0, 1, 7)
        g.add_cost(2, 0, 3)
        frozen = sort(g)
        assert isinstance(frozen, ImmutableGraph)
        assert list(frozen.visit(0)) == [(1, 7), (2, 1)]
        assert frozen.edges() == [(0, 1, 7), (0, 2, 1), (2, 0, 3)]
        assert str(frozen) == "3 [(0 1):7 (0 2):1 (2 0):3]"

    def test_equality_ignores_build_order(self):
        a = MutableGraph(3)
        a.add_cost(0, 1, 1)
        a.add_cost(0, 2, 2)
        b = MutableGraph(3)
        b.add_cost(0, 2, 2)
        b.add_cost(0, 1, 1)
        assert sort(a) == sort(b)
        assert hash(sort(a)) == hash(sort(b))
        b.add_cost(1, 2, 1)
        assert sort(a) != sort(b)

    def test_lookups(self):
        g = MutableGraph(3)
        g.add_cost(1, 2, 5)
        frozen = sort(g)
        assert frozen.order() == 3
        assert frozen.cost(1, 2) == 5
        assert frozen.cost(2, 1) == 0
        assert frozen.edge(1, 2)
        assert frozen.degree(1) == 1
        assert len(frozen) == 1

    def test_snapshot_does_not_track_source(self):
        g = MutableGraph(2)
        frozen = sort(g)
        g.add_cost(0, 1, 1)
        assert len(frozen) == 0
        assert not hasattr(frozen, "add_cost")

    def test_invalid_vertex(self):
        frozen = sort(MutableGraph(1))
        with pytest.raises(InvalidVertexError):
            frozen.visit(1)
        with pytest.raises(InvalidVertexError):
            frozen.cost(0, 1)

    def test_sort_merges_parallel_edges(self):
        class Parallel:
            def order(self):
                return 2

            def visit(self, v):
                return iter([(1, 2), (1, 3)] if v == 0 else [])

        frozen = sort(Parallel())
        assert frozen.edges() == [(0, 1, 5)]
        assert list(frozen.visit(0)) == [(1, 5)]
        assert frozen.cost(0, 1) == 5
        assert len(frozen) == 1


class TestProtocol:
    def test_graphs_satisfy_protocol(self):
        g = MutableGraph(1)
        assert isinstance(g, GraphIterator)
        assert isinstance(sort(g), GraphIterator)

    def test_check_vertex(self):
        g = MutableGraph(2)
        check_vertex(g, 0)
        check_vertex(g, 1)
        for bad in (2, -1, True, "0", None):
            with pytest.raises(InvalidVertexError):
                check_vertex(g, bad)

    def test_helpers_work_on_any_iterator(self):
        class Pairs:
            def order(self):
                return 2

            def visit(self, v):
                return iter([(1, 0)] if v == 0 else [])

        assert list(iter_edges(Pairs())) == [(0, 1, 0)]
        assert format_graph(Pairs()) == "2 [(0 1)]"
