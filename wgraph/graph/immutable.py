"""Canonical, read-only graph snapshots."""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from wgraph.graph.base import (
    Edge,
    GraphIterator,
    VertexID,
    Weight,
    check_vertex,
    format_graph,
    iter_edges,
)


class ImmutableGraph:
    """Snapshot of a graph with each vertex's edges ordered by neighbor id.

    Holds at most one edge per ordered vertex pair; pairs reported more than
    once by the source graph are merged by summing their weights.

    Two snapshots compare equal when they have the same order and the same
    canonical edge list, regardless of how the source graph was built.
    """

    __slots__ = ("_edges", "_cost")

    def __init__(self, graph: GraphIterator) -> None:
        self._cost: List[Dict[VertexID, Weight]] = []
        for v in range(graph.order()):
            merged: Dict[VertexID, Weight] = {}
            for w, c in graph.visit(v):
                merged[w] = merged.get(w, 0) + c
            self._cost.append(merged)
        self._edges: Tuple[Tuple[Tuple[VertexID, Weight], ...], ...] = tuple(
            tuple(sorted(merged.items())) for merged in self._cost
        )

    def order(self) -> int:
        return len(self._edges)

    def visit(self, v: VertexID) -> Iterator[Tuple[VertexID, Weight]]:
        check_vertex(self, v)
        return iter(self._edges[v])

    def edge(self, u: VertexID, v: VertexID) -> bool:
        check_vertex(self, u)
        check_vertex(self, v)
        return v in self._cost[u]

    def cost(self, u: VertexID, v: VertexID) -> Weight:
        check_vertex(self, u)
        check_vertex(self, v)
        return self._cost[u].get(v, 0)

    def degree(self, v: VertexID) -> int:
        check_vertex(self, v)
        return len(self._edges[v])

    def edges(self) -> List[Edge]:
        return list(iter_edges(self))

    def __len__(self) -> int:
        return sum(len(e) for e in self._edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImmutableGraph):
            return NotImplemented
        return self._edges == other._edges

    def __hash__(self) -> int:
        return hash(self._edges)

    def __str__(self) -> str:
        return format_graph(self)

    def __repr__(self) -> str:
        return f"ImmutableGraph({format_graph(self)})"


def sort(graph: GraphIterator) -> ImmutableGraph:
    """Return an immutable copy of ``graph`` with edges in canonical order."""
    return ImmutableGraph(graph)
