"""Shortest-path-first (SPF) algorithms.

Implements label-setting Dijkstra with an indexed priority queue that supports
decrease-key, so every vertex is queued at most once.

Notes:
    Only edges with non-negative weight take part in the search. Edges with
    negative weight are skipped during relaxation; they are neither reported
    nor removed from the graph.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from wgraph.algorithms.base import Distance, Parents
from wgraph.algorithms.pqueue import IndexedPriorityQueue
from wgraph.graph.base import GraphIterator, VertexID, check_vertex
from wgraph.logging import get_logger

logger = get_logger(__name__)


def shortest_paths(
    graph: GraphIterator,
    src: VertexID,
) -> Tuple[Parents, List[Distance]]:
    """Compute shortest paths from ``src`` to every vertex.

    Args:
        graph: Any graph exposing ``order()`` and ``visit()``.
        src: Source vertex.

    Returns:
        A tuple of (parent, dist), both of length ``graph.order()``:
          - parent[w]: Predecessor of ``w`` on a shortest path from ``src``,
            or None for ``src`` itself and for unreached vertices.
          - dist[w]: Length of a shortest path from ``src`` to ``w``, or None
            if ``w`` cannot be reached.

    Raises:
        InvalidVertexError: If ``src`` is out of range.

    Time complexity is O((V + E) * log V).
    """
    check_vertex(graph, src, "Source vertex")

    n = graph.order()
    dist: List[Distance] = [None] * n
    parent: Parents = [None] * n
    dist[src] = 0

    queue = IndexedPriorityQueue(dist)
    queue.push(src)
    settled = 0
    while queue:
        v = queue.pop()
        settled += 1
        dist_v: int = dist[v]  # type: ignore[assignment]
        for w, d in graph.visit(v):
            if d < 0:
                continue
            alt = dist_v + d
            dist_w = dist[w]
            if dist_w is None:
                dist[w], parent[w] = alt, v
                queue.push(w)
            elif alt < dist_w:
                dist[w], parent[w] = alt, v
                queue.decrease_key(w)

    logger.debug(f"SPF from {src}: settled {settled} of {n} vertices")
    return parent, dist


def shortest_path(
    graph: GraphIterator,
    src: VertexID,
    dst: VertexID,
) -> Tuple[List[VertexID], Distance]:
    """Compute a shortest path from ``src`` to ``dst``.

    Returns:
        A tuple of (path, dist). ``path`` lists the vertices from ``src`` to
        ``dst`` inclusive and ``dist`` is its length. If ``dst`` cannot be
        reached, returns ``([], None)``.

    Raises:
        InvalidVertexError: If ``src`` or ``dst`` is out of range.
    """
    check_vertex(graph, dst, "Target vertex")

    parent, dist = shortest_paths(graph, src)
    if dist[dst] is None:
        return [], None

    path: List[VertexID] = []
    v: Optional[VertexID] = dst
    while v is not None:
        path.append(v)
        v = parent[v]
    path.reverse()
    return path, dist[dst]
