"""Mutable index-addressed graph used for construction and residual copies."""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from wgraph.graph.base import (
    Edge,
    InvalidVertexError,
    VertexID,
    Weight,
    check_vertex,
    format_graph,
    iter_edges,
)


class MutableGraph:
    """Directed graph with integer weights on vertices ``0..n-1``.

    Each vertex owns a dict of ``neighbor -> weight``. Edges are visited in
    insertion order, so iteration is deterministic for a given build
    sequence. At most one edge exists per ordered vertex pair; self-loops are
    stored like any other edge.
    """

    __slots__ = ("_adj",)

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Graph order must be non-negative, got {n}.")
        self._adj: List[Dict[VertexID, Weight]] = [{} for _ in range(n)]

    def order(self) -> int:
        return len(self._adj)

    def visit(self, v: VertexID) -> Iterator[Tuple[VertexID, Weight]]:
        check_vertex(self, v)
        return iter(self._adj[v].items())

    def edge(self, u: VertexID, v: VertexID) -> bool:
        """Return True if the edge ``(u, v)`` exists."""
        self._check(u, v)
        return v in self._adj[u]

    def cost(self, u: VertexID, v: VertexID) -> Weight:
        """Return the weight of ``(u, v)``, or 0 if there is no such edge."""
        self._check(u, v)
        return self._adj[u].get(v, 0)

    def add_cost(self, u: VertexID, v: VertexID, delta: Weight) -> None:
        """Add ``delta`` to the weight of ``(u, v)``, creating the edge if absent."""
        self._check(u, v)
        adj = self._adj[u]
        adj[v] = adj.get(v, 0) + delta

    def set_cost(self, u: VertexID, v: VertexID, c: Weight) -> None:
        """Insert ``(u, v)`` with weight ``c``, overwriting any previous weight."""
        self._check(u, v)
        self._adj[u][v] = c

    def delete(self, u: VertexID, v: VertexID) -> None:
        """Remove the edge ``(u, v)`` if present."""
        self._check(u, v)
        self._adj[u].pop(v, None)

    def degree(self, v: VertexID) -> int:
        """Return the out-degree of ``v``."""
        check_vertex(self, v)
        return len(self._adj[v])

    def edges(self) -> List[Edge]:
        return list(iter_edges(self))

    def copy(self) -> MutableGraph:
        clone = MutableGraph(0)
        clone._adj = [dict(adj) for adj in self._adj]
        return clone

    def _check(self, u: VertexID, v: VertexID) -> None:
        n = len(self._adj)
        if not (0 <= u < n and 0 <= v < n):
            raise InvalidVertexError(f"Edge ({u}, {v}) is out of range [0, {n}).")

    def __len__(self) -> int:
        return sum(len(adj) for adj in self._adj)

    def __str__(self) -> str:
        return format_graph(self)

    def __repr__(self) -> str:
        return f"MutableGraph({format_graph(self)})"


def new_graph(n: int) -> MutableGraph:
    """Return an empty graph with ``n`` vertices and no edges."""
    return MutableGraph(n)
