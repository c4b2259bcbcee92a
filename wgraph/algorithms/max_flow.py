"""Maximum-flow computation via the Edmonds-Karp method.

Works on a private residual copy of the input graph: each round finds a
shortest augmenting path by BFS over edges with positive residual capacity and
pushes the path's bottleneck capacity along it. The caller's graph is never
modified.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple, Union, overload

from wgraph.algorithms.bfs import reachable_from, residual_bfs
from wgraph.algorithms.types import EdgeKey, FlowSummary
from wgraph.config import ALGORITHM_CONFIG, AlgorithmConfig
from wgraph.graph.base import GraphIterator, VertexID, check_vertex
from wgraph.graph.immutable import ImmutableGraph, sort
from wgraph.graph.mutable import MutableGraph
from wgraph.logging import get_logger

logger = get_logger(__name__)


@overload
def max_flow(
    graph: GraphIterator,
    src: VertexID,
    dst: VertexID,
    *,
    return_summary: Literal[False] = False,
    config: Optional[AlgorithmConfig] = None,
) -> Tuple[int, ImmutableGraph]: ...


@overload
def max_flow(
    graph: GraphIterator,
    src: VertexID,
    dst: VertexID,
    *,
    return_summary: Literal[True],
    config: Optional[AlgorithmConfig] = None,
) -> Tuple[int, ImmutableGraph, FlowSummary]: ...


def max_flow(
    graph: GraphIterator,
    src: VertexID,
    dst: VertexID,
    *,
    return_summary: bool = False,
    config: Optional[AlgorithmConfig] = None,
) -> Union[Tuple[int, ImmutableGraph], Tuple[int, ImmutableGraph, FlowSummary]]:
    """Compute a maximum flow from ``src`` to ``dst``.

    Edge weights of ``graph`` are read as capacities and must be non-negative;
    negative capacities are not rejected but give unspecified results.

    Args:
        graph: Any graph exposing ``order()`` and ``visit()``.
        src: Source vertex.
        dst: Sink vertex. ``src == dst`` yields a flow of 0.
        return_summary: If True, also return a ``FlowSummary`` with per-edge
            flow, residual capacities and the minimum cut.
        config: Algorithm settings; defaults to ``ALGORITHM_CONFIG``.

    Returns:
        ``(flow, flow_graph)`` or ``(flow, flow_graph, summary)``. ``flow_graph``
        has the same order as ``graph`` and holds one edge per original edge
        carrying positive flow, weighted by that flow, in canonical order.

    Raises:
        InvalidVertexError: If ``src`` or ``dst`` is out of range.

    Time complexity is O(V * E^2).

    Examples:
        >>> g = new_graph(3)
        >>> g.add_cost(0, 1, 10)
        >>> g.add_cost(1, 2, 5)
        >>> flow, flow_graph = max_flow(g, 0, 2)
        >>> flow
        5
        >>> str(flow_graph)
        '3 [(0 1):5 (1 2):5]'
    """
    cfg = config or ALGORITHM_CONFIG
    check_vertex(graph, src, "Source vertex")
    check_vertex(graph, dst, "Sink vertex")

    n = graph.order()
    # Parallel edges reported by the input are merged into one capacity.
    capacity = MutableGraph(n)
    for v in range(n):
        for w, c in graph.visit(v):
            capacity.add_cost(v, w, c)
    residual = capacity.copy()

    flow = 0
    augmentations = 0
    saturated = False
    prev: List[Optional[VertexID]] = [None] * n

    # Degenerate case (src == dst): conservation forces a zero flow value.
    while src != dst and residual_bfs(residual, src, dst, prev):
        # Walk back from the sink to find the bottleneck.
        path_flow = cfg.max_value
        v = dst
        while v != src:
            u = prev[v]
            path_flow = min(path_flow, residual.cost(u, v))  # type: ignore[arg-type]
            v = u  # type: ignore[assignment]

        flow += path_flow
        augmentations += 1
        logger.debug(
            f"Augmentation {augmentations}: pushed {path_flow} from {src} to {dst}"
        )

        v = dst
        while v != src:
            u = prev[v]
            residual.add_cost(u, v, -path_flow)  # type: ignore[arg-type]
            residual.add_cost(v, u, path_flow)  # type: ignore[arg-type]
            v = u  # type: ignore[assignment]

        if cfg.saturated(flow):
            saturated = True
            logger.warning(
                f"Flow from {src} to {dst} reached the bound {cfg.max_value}; "
                "treating the network as saturated"
            )
            break

    flow_graph = MutableGraph(n)
    edge_flow: Dict[EdgeKey, int] = {}
    residual_cap: Dict[EdgeKey, int] = {}
    for v, w, c in capacity.edges():
        edge_residual = residual.cost(v, w)
        residual_cap[(v, w)] = edge_residual
        f = c - edge_residual
        if f > 0:
            flow_graph.add_cost(v, w, f)
            edge_flow[(v, w)] = f

    logger.debug(
        f"Max flow from {src} to {dst}: {flow} after {augmentations} augmentations"
    )
    result = sort(flow_graph)

    if not return_summary:
        return flow, result

    reachable = reachable_from(residual, src)
    # A bounded run leaves the sink reachable, so there is no cut to report.
    min_cut: List[EdgeKey] = []
    if not saturated:
        min_cut = sorted(
            {
                (v, w)
                for v in range(n)
                if reachable[v]
                for w, c in capacity.visit(v)
                if c > 0 and not reachable[w]
            }
        )
    summary = FlowSummary(
        total_flow=flow,
        augmentations=augmentations,
        saturated=saturated,
        edge_flow=edge_flow,
        residual_cap=residual_cap,
        reachable=frozenset(v for v in range(n) if reachable[v]),
        min_cut=min_cut,
    )
    return flow, result, summary
