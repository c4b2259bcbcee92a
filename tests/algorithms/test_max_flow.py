import logging
import random

import networkx as nx
import pytest

from wgraph.algorithms.max_flow import max_flow
from wgraph.algorithms.types import FlowSummary
from wgraph.config import AlgorithmConfig
from wgraph.graph.base import InvalidVertexError
from wgraph.graph.convert import to_networkx
from wgraph.graph.immutable import ImmutableGraph
from wgraph.graph.mutable import MutableGraph


def random_network(seed, n=8, p=0.35, max_cap=20):
    rng = random.Random(seed)
    g = MutableGraph(n)
    for v in range(n):
        for w in range(n):
            if v != w and rng.random() < p:
                g.add_cost(v, w, rng.randint(0, max_cap))
    return g


def net_outflow(flow_graph, v):
    out = sum(c for _, c in flow_graph.visit(v))
    inflow = sum(c for u, w, c in flow_graph.edges() if w == v)
    return out - inflow


class ListGraph:
    """Minimal graph that reports edges exactly as given, duplicates included."""

    def __init__(self, n, edges):
        self.n = n
        self.adj = [[] for _ in range(n)]
        for v, w, c in edges:
            self.adj[v].append((w, c))

    def order(self):
        return self.n

    def visit(self, v):
        return iter(self.adj[v])


class TestMaxFlowBasic:
    """
    Tests that directly verify specific flow values on known small graphs.
    """

    def test_max_flow_diamond(self, diamond):
        flow, flow_graph = max_flow(diamond, 0, 3)
        assert flow == 5
        assert isinstance(flow_graph, ImmutableGraph)
        assert str(flow_graph) == "4 [(0 1):3 (0 2):2 (1 2):1 (1 3):2 (2 3):3]"

    def test_max_flow_clrs(self, clrs):
        flow, _ = max_flow(clrs, 0, 5)
        assert flow == 23

    def test_disconnected_components(self, two_islands):
        flow, flow_graph = max_flow(two_islands, 0, 3)
        assert flow == 0
        assert flow_graph.order() == 4
        assert flow_graph.edges() == []

    def test_single_vertex_source_is_sink(self):
        flow, flow_graph = max_flow(MutableGraph(1), 0, 0)
        assert flow == 0
        assert len(flow_graph) == 0

    def test_source_equals_sink_with_edges(self, diamond):
        flow, flow_graph = max_flow(diamond, 1, 1)
        assert flow == 0
        assert len(flow_graph) == 0

    def test_reverse_direction_has_no_flow(self, diamond):
        flow, _ = max_flow(diamond, 3, 0)
        assert flow == 0

    def test_antiparallel_edges_report_net_flow(self, antiparallel):
        flow, flow_graph = max_flow(antiparallel, 0, 3)
        assert flow == 4
        assert flow_graph.edges() == [(0, 1, 4), (1, 2, 4), (2, 3, 4)]

    def test_self_loop_carries_no_flow(self):
        g = MutableGraph(2)
        g.add_cost(0, 0, 9)
        g.add_cost(0, 1, 3)
        flow, flow_graph = max_flow(g, 0, 1)
        assert flow == 3
        assert flow_graph.edges() == [(0, 1, 3)]

    def test_parallel_edges_from_iterator_are_merged(self):
        g = ListGraph(3, [(0, 1, 2), (0, 1, 3), (1, 2, 10)])
        flow, flow_graph = max_flow(g, 0, 2)
        assert flow == 5
        assert flow_graph.edges() == [(0, 1, 5), (1, 2, 5)]

    def test_zero_capacity_edges_are_ignored(self):
        g = MutableGraph(3)
        g.add_cost(0, 1, 0)
        g.add_cost(1, 2, 4)
        flow, flow_graph = max_flow(g, 0, 2)
        assert flow == 0
        assert len(flow_graph) == 0


class TestMaxFlowSummary:
    def test_summary_diamond(self, diamond):
        flow, flow_graph, summary = max_flow(diamond, 0, 3, return_summary=True)
        assert isinstance(summary, FlowSummary)
        assert summary.total_flow == flow == 5
        assert summary.augmentations == 3
        assert summary.reachable == frozenset({0})
        assert summary.saturated is False
        assert summary.min_cut == [(0, 1), (0, 2)]
        assert summary.edge_flow == {
            (0, 1): 3,
            (0, 2): 2,
            (1, 2): 1,
            (1, 3): 2,
            (2, 3): 3,
        }
        assert all(r == 0 for r in summary.residual_cap.values())

    def test_summary_min_cut_matches_flow(self, clrs):
        flow, _, summary = max_flow(clrs, 0, 5, return_summary=True)
        assert sum(clrs.cost(v, w) for v, w in summary.min_cut) == flow
        assert 0 in summary.reachable
        assert 5 not in summary.reachable

    def test_summary_disconnected(self, two_islands):
        flow, _, summary = max_flow(two_islands, 0, 3, return_summary=True)
        assert flow == 0
        assert summary.augmentations == 0
        assert summary.reachable == frozenset({0, 1})
        assert summary.min_cut == []
        assert summary.edge_flow == {}


class TestMaxFlowProperties:
    @pytest.mark.parametrize("seed", range(12))
    def test_matches_networkx(self, seed):
        g = random_network(seed)
        flow, _ = max_flow(g, 0, g.order() - 1)
        expected = nx.maximum_flow_value(to_networkx(g), 0, g.order() - 1)
        assert flow == expected

    @pytest.mark.parametrize("seed", range(12))
    def test_feasibility_and_conservation(self, seed):
        g = random_network(seed)
        s, t = 0, g.order() - 1
        flow, flow_graph = max_flow(g, s, t)

        for v, w, f in flow_graph.edges():
            assert 0 < f <= g.cost(v, w)

        for v in range(g.order()):
            if v not in (s, t):
                assert net_outflow(flow_graph, v) == 0
        assert net_outflow(flow_graph, s) == flow
        assert net_outflow(flow_graph, t) == -flow

    @pytest.mark.parametrize("seed", range(6))
    def test_min_cut_capacity_equals_flow(self, seed):
        g = random_network(seed)
        flow, _, summary = max_flow(g, 0, g.order() - 1, return_summary=True)
        assert sum(g.cost(v, w) for v, w in summary.min_cut) == flow

    def test_deterministic(self, clrs):
        first = max_flow(clrs, 0, 5)
        second = max_flow(clrs, 0, 5)
        assert first == second
        assert first[1].edges() == second[1].edges()


class TestMaxFlowInputHandling:
    def test_input_graph_is_not_modified(self, diamond):
        before = diamond.edges()
        max_flow(diamond, 0, 3)
        assert diamond.edges() == before

    @pytest.mark.parametrize("src,dst", [(0, 4), (-1, 3), (4, 0)])
    def test_invalid_vertex(self, diamond, src, dst):
        with pytest.raises(InvalidVertexError):
            max_flow(diamond, src, dst)

    def test_flow_bound_stops_augmentation(self, diamond, caplog):
        cfg = AlgorithmConfig(max_value=4)
        with caplog.at_level(logging.WARNING, logger="wgraph"):
            flow, _ = max_flow(diamond, 0, 3, config=cfg)
        assert flow == 4
        assert "reached the bound 4" in caplog.text

    def test_bounded_summary_reports_no_cut(self, diamond):
        cfg = AlgorithmConfig(max_value=4)
        flow, _, summary = max_flow(diamond, 0, 3, return_summary=True, config=cfg)
        assert flow == summary.total_flow == 4
        assert summary.saturated is True
        assert 3 in summary.reachable
        assert summary.min_cut == []
