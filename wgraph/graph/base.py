"""Graph access protocol shared by all wgraph algorithms.

Algorithms never touch a concrete graph type. They consume any object that
exposes ``order()`` and ``visit(v)``, where ``visit`` returns a fresh, finite
iterator over ``(neighbor, weight)`` pairs for the outgoing edges of ``v``.

Stopping iteration early (``break``, ``any()``, ``next()``) only ends the
current vertex's edge sequence; nothing else is affected.
"""

from __future__ import annotations

from typing import Iterator, Protocol, Tuple, runtime_checkable

VertexID = int
Weight = int

#: Directed edge triple: (source, target, weight).
Edge = Tuple[VertexID, VertexID, Weight]


class WGraphError(Exception):
    """Base class for errors raised by wgraph."""


class InvalidVertexError(WGraphError, ValueError):
    """Raised when a vertex id falls outside ``0..order()-1``."""


@runtime_checkable
class GraphIterator(Protocol):
    """Read-only view of a directed, weighted graph on vertices ``0..n-1``."""

    def order(self) -> int:
        """Return the number of vertices."""
        ...

    def visit(self, v: VertexID) -> Iterator[Tuple[VertexID, Weight]]:
        """Yield ``(neighbor, weight)`` for each outgoing edge of ``v``."""
        ...


def check_vertex(graph: GraphIterator, v: VertexID, role: str = "Vertex") -> None:
    """Raise InvalidVertexError unless ``v`` is a valid vertex of ``graph``."""
    n = graph.order()
    if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v < n:
        raise InvalidVertexError(f"{role} {v!r} is not in range [0, {n}).")


def iter_edges(graph: GraphIterator) -> Iterator[Edge]:
    """Yield every edge of ``graph`` as ``(v, w, weight)`` in visit order."""
    for v in range(graph.order()):
        for w, c in graph.visit(v):
            yield v, w, c


def format_graph(graph: GraphIterator) -> str:
    """Return the compact text form ``"n [(v w):c ...]"``.

    Zero-weight edges are written without the ``:c`` suffix.
    """
    parts = []
    for v, w, c in iter_edges(graph):
        parts.append(f"({v} {w})" if c == 0 else f"({v} {w}):{c}")
    return f"{graph.order()} [{' '.join(parts)}]"
