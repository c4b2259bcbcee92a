"""Graph algorithms: Edmonds-Karp max flow and Dijkstra shortest paths."""

from wgraph.algorithms.base import MAX
from wgraph.algorithms.max_flow import max_flow
from wgraph.algorithms.pqueue import IndexedPriorityQueue
from wgraph.algorithms.spf import shortest_path, shortest_paths
from wgraph.algorithms.types import FlowSummary

__all__ = [
    "MAX",
    "FlowSummary",
    "IndexedPriorityQueue",
    "max_flow",
    "shortest_path",
    "shortest_paths",
]
