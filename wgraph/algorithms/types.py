"""Types and data structures for algorithm results.

Defines immutable summary containers returned alongside the primary results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Tuple

from wgraph.graph.base import VertexID

#: Edge identifier: (source, target). Graphs hold at most one edge per pair.
EdgeKey = Tuple[VertexID, VertexID]


@dataclass(frozen=True)
class FlowSummary:
    """Summary of max-flow computation results.

    Attributes:
        total_flow: Maximum flow value achieved.
        augmentations: Number of augmenting paths used.
        saturated: True when augmentation stopped because the flow reached
            the configured bound rather than because no augmenting path was
            left. The flow is then a lower bound and ``min_cut`` is empty.
        edge_flow: Flow per original edge, positive entries only.
        residual_cap: Residual capacity per original edge after the last
            augmentation.
        reachable: Vertices reachable from the source in the residual graph.
        min_cut: Original edges with positive capacity leaving ``reachable``,
            in ascending order. Unless ``saturated``, their capacities sum to
            ``total_flow``.
    """

    total_flow: int
    augmentations: int
    saturated: bool
    edge_flow: Dict[EdgeKey, int]
    residual_cap: Dict[EdgeKey, int]
    reachable: FrozenSet[VertexID]
    min_cut: List[EdgeKey]
