"""NetworkX graph conversion utilities.

Converts between NetworkX graphs (arbitrary hashable node names) and the
integer-indexed graphs consumed by wgraph algorithms.

Example:
    >>> import networkx as nx
    >>> from wgraph.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", capacity=100)
    >>> G.add_edge("B", "C", capacity=50)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> G_out = to_networkx(graph, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from wgraph.graph.base import GraphIterator
from wgraph.graph.mutable import MutableGraph

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices.

    Attributes:
        to_index: Maps original node names to vertex ids.
        to_name: Maps vertex ids back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight: str = "capacity",
    default_weight: int = 1,
    bidirectional: bool = False,
) -> Tuple[MutableGraph, NodeMap]:
    """Convert a NetworkX graph to a ``MutableGraph``.

    Node names are sorted by ``str`` so the vertex numbering is stable. Parallel
    edges of multigraphs are merged by summing their weights. Undirected graphs
    produce an edge in each direction.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight: Edge attribute holding the weight (default: "capacity").
        default_weight: Weight used when the attribute is missing.
        bidirectional: If True, also add the reverse of every edge.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If a weight is not integral.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    graph = MutableGraph(len(node_map))
    reverse = bidirectional or not G.is_directed()

    for u, v, data in G.edges(data=True):
        raw = data.get(weight, default_weight)
        value = int(raw)
        if value != raw:
            raise ValueError(
                f"Edge ({u!r}, {v!r}) has non-integral {weight}={raw!r}."
            )
        src, dst = node_map.to_index[u], node_map.to_index[v]
        graph.add_cost(src, dst, value)
        if reverse and src != dst:
            graph.add_cost(dst, src, value)

    return graph, node_map


def to_networkx(
    graph: GraphIterator,
    node_map: Optional[NodeMap] = None,
    *,
    weight: str = "capacity",
) -> "nx.DiGraph":
    """Convert a wgraph graph to a NetworkX DiGraph.

    Args:
        graph: Any graph exposing ``order()`` and ``visit()``.
        node_map: Optional NodeMap to restore original node names. If None,
            nodes are labeled 0, 1, 2, ...
        weight: Edge attribute name for the weight (default: "capacity").

    Returns:
        nx.DiGraph with one edge per wgraph edge.
    """
    import networkx as nx

    def name(idx: int) -> Hashable:
        return idx if node_map is None else node_map.to_name.get(idx, idx)

    G = nx.DiGraph()
    G.add_nodes_from(name(v) for v in range(graph.order()))
    for v in range(graph.order()):
        for w, c in graph.visit(v):
            G.add_edge(name(v), name(w), **{weight: c})
    return G
