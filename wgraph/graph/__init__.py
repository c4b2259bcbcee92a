"""Graph primitives and helpers.

This package provides the ``GraphIterator`` protocol consumed by all
algorithms, the ``MutableGraph`` and ``ImmutableGraph`` implementations, and
helper modules for NetworkX conversion (``convert``) and serialization
(``io``).
"""

from wgraph.graph.base import (
    Edge,
    GraphIterator,
    InvalidVertexError,
    WGraphError,
    check_vertex,
    iter_edges,
)
from wgraph.graph.immutable import ImmutableGraph, sort
from wgraph.graph.mutable import MutableGraph, new_graph

__all__ = [
    "Edge",
    "GraphIterator",
    "ImmutableGraph",
    "InvalidVertexError",
    "MutableGraph",
    "WGraphError",
    "check_vertex",
    "iter_edges",
    "new_graph",
    "sort",
]
