"""Shared constants and type aliases for wgraph algorithms."""

from __future__ import annotations

from typing import List, Optional

from wgraph.config import MAX
from wgraph.graph.base import InvalidVertexError, WGraphError

#: Distance of a vertex from the source; ``None`` means unreached.
Distance = Optional[int]

#: Predecessor array: ``parent[v]`` is the previous vertex on the path to
#: ``v``, or ``None`` for the source and unreached vertices.
Parents = List[Optional[int]]

__all__ = ["MAX", "Distance", "InvalidVertexError", "Parents", "WGraphError"]
