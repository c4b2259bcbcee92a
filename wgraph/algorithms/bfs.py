from collections import deque
from typing import List, Optional

from wgraph.graph.base import GraphIterator, VertexID


def residual_bfs(
    graph: GraphIterator,
    src: VertexID,
    dst: VertexID,
    prev: List[Optional[VertexID]],
) -> bool:
    """
    Breadth-first search over edges with strictly positive weight.

    Fills ``prev`` with the BFS predecessor of every reached vertex
    (``prev[src]`` is None) and returns True if ``dst`` was reached. The
    search stops as soon as ``dst`` is discovered.
    """
    visited = [False] * graph.order()
    visited[src] = True
    prev[src] = None
    if src == dst:
        return True

    queue = deque([src])
    while queue:
        v = queue.popleft()
        for w, c in graph.visit(v):
            if c > 0 and not visited[w]:
                visited[w] = True
                prev[w] = v
                if w == dst:
                    return True
                queue.append(w)
    return False


def reachable_from(graph: GraphIterator, src: VertexID) -> List[bool]:
    """
    Return a mask of vertices reachable from ``src`` over positive edges.
    """
    visited = [False] * graph.order()
    visited[src] = True
    queue = deque([src])
    while queue:
        v = queue.popleft()
        for w, c in graph.visit(v):
            if c > 0 and not visited[w]:
                visited[w] = True
                queue.append(w)
    return visited
