"""Dictionary and YAML serialization for wgraph graphs.

The serialized form is::

    {"order": 4, "edges": [[0, 1, 3], [0, 2, 2], ...]}

Each edge is a ``[source, target, weight]`` triple; the weight may be omitted
and defaults to 0. Repeated pairs accumulate.
"""

from __future__ import annotations

from typing import Any, Dict

import yaml

from wgraph.graph.base import GraphIterator, iter_edges
from wgraph.graph.mutable import MutableGraph


def graph_to_dict(graph: GraphIterator) -> Dict[str, Any]:
    """Return a JSON/YAML-friendly dict describing ``graph``."""
    return {
        "order": graph.order(),
        "edges": [[v, w, c] for v, w, c in iter_edges(graph)],
    }


def graph_from_dict(data: Dict[str, Any]) -> MutableGraph:
    """Build a ``MutableGraph`` from the dict produced by ``graph_to_dict``.

    Raises:
        ValueError: If the mapping is malformed or an edge is out of range.
    """
    if not isinstance(data, dict):
        raise ValueError("Graph data must be a mapping.")
    if "order" not in data:
        raise ValueError("Graph data is missing required key 'order'.")

    order = data["order"]
    if isinstance(order, bool) or not isinstance(order, int) or order < 0:
        raise ValueError(f"'order' must be a non-negative integer, got {order!r}.")

    graph = MutableGraph(order)
    for i, entry in enumerate(data.get("edges") or []):
        if not isinstance(entry, (list, tuple)) or len(entry) not in (2, 3):
            raise ValueError(
                f"Edge #{i} must be [source, target] or [source, target, weight], "
                f"got {entry!r}."
            )
        if not all(isinstance(x, int) and not isinstance(x, bool) for x in entry):
            raise ValueError(f"Edge #{i} must contain integers only, got {entry!r}.")
        v, w = entry[0], entry[1]
        c = entry[2] if len(entry) == 3 else 0
        # InvalidVertexError is a ValueError
        graph.add_cost(v, w, c)
    return graph


def load_graph_yaml(yaml_str: str) -> MutableGraph:
    """Parse a YAML (or JSON) document into a ``MutableGraph``."""
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid graph YAML: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    return graph_from_dict(data)


def dump_graph_yaml(graph: GraphIterator) -> str:
    """Serialize ``graph`` to a YAML document."""
    return yaml.safe_dump(graph_to_dict(graph), default_flow_style=None, sort_keys=False)
