"""wgraph: max-flow and shortest-path algorithms on integer-indexed graphs.

Primary API:
    new_graph() - Create an empty MutableGraph
    sort() - Freeze a graph into a canonical ImmutableGraph
    max_flow() - Edmonds-Karp maximum flow
    shortest_paths() / shortest_path() - Dijkstra with decrease-key
    from_networkx() / to_networkx() - NetworkX conversion

Example:
    from wgraph import new_graph, max_flow, shortest_path

    g = new_graph(4)
    g.add_cost(0, 1, 3)
    g.add_cost(1, 3, 2)

    flow, flow_graph = max_flow(g, 0, 3)
    path, dist = shortest_path(g, 0, 3)
"""

from __future__ import annotations

from wgraph import cli, logging
from wgraph._version import __version__
from wgraph.algorithms import (
    MAX,
    FlowSummary,
    IndexedPriorityQueue,
    max_flow,
    shortest_path,
    shortest_paths,
)
from wgraph.config import ALGORITHM_CONFIG, AlgorithmConfig
from wgraph.graph import (
    GraphIterator,
    ImmutableGraph,
    InvalidVertexError,
    MutableGraph,
    WGraphError,
    new_graph,
    sort,
)
from wgraph.graph.convert import NodeMap, from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Graph
    "GraphIterator",
    "MutableGraph",
    "ImmutableGraph",
    "new_graph",
    "sort",
    # Algorithms
    "max_flow",
    "shortest_paths",
    "shortest_path",
    "IndexedPriorityQueue",
    "FlowSummary",
    # Configuration
    "MAX",
    "AlgorithmConfig",
    "ALGORITHM_CONFIG",
    # Errors
    "WGraphError",
    "InvalidVertexError",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
