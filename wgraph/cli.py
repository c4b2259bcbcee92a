"""Command-line interface for wgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from wgraph.algorithms.max_flow import max_flow
from wgraph.algorithms.spf import shortest_path, shortest_paths
from wgraph.graph.base import iter_edges
from wgraph.graph.io import load_graph_yaml
from wgraph.graph.mutable import MutableGraph
from wgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _load_graph(path: Path) -> MutableGraph:
    graph = load_graph_yaml(path.read_text(encoding="utf-8"))
    logger.info(f"Loaded graph from {path}: {graph.order()} vertices, {len(graph)} edges")
    return graph


def _emit(payload: Dict[str, Any], as_json: bool, lines: List[str]) -> None:
    if as_json:
        print(json.dumps(payload, indent=2))
    else:
        print("\n".join(lines))


def _run_max_flow(graph: MutableGraph, args: argparse.Namespace) -> None:
    flow, flow_graph, summary = max_flow(
        graph, args.source, args.sink, return_summary=True
    )
    edges = [[v, w, f] for v, w, f in iter_edges(flow_graph)]
    payload = {
        "source": args.source,
        "sink": args.sink,
        "max_flow": flow,
        "augmentations": summary.augmentations,
        "saturated": summary.saturated,
        "flow_edges": edges,
        "min_cut": [list(e) for e in summary.min_cut],
    }
    lines = [f"Max flow {args.source} -> {args.sink}: {flow}"]
    lines.extend(f"   {v} -> {w}: {f}" for v, w, f in edges)
    if summary.saturated:
        lines.append("Flow bound reached; value is a lower bound")
    if summary.min_cut:
        cut = ", ".join(f"({v} {w})" for v, w in summary.min_cut)
        lines.append(f"Min cut: {cut}")
    _emit(payload, args.json, lines)


def _run_path(graph: MutableGraph, args: argparse.Namespace) -> None:
    path, dist = shortest_path(graph, args.source, args.target)
    payload = {
        "source": args.source,
        "target": args.target,
        "path": path,
        "distance": dist,
    }
    if dist is None:
        lines = [f"No path from {args.source} to {args.target}"]
    else:
        lines = [
            f"Shortest path {args.source} -> {args.target} (distance {dist}): "
            + " -> ".join(str(v) for v in path)
        ]
    _emit(payload, args.json, lines)


def _run_paths(graph: MutableGraph, args: argparse.Namespace) -> None:
    parent, dist = shortest_paths(graph, args.source)
    payload = {"source": args.source, "parent": parent, "distance": dist}
    lines = [f"Shortest paths from {args.source}:"]
    for v in range(graph.order()):
        if dist[v] is None:
            lines.append(f"   {v}: unreachable")
        else:
            lines.append(f"   {v}: distance {dist[v]}, parent {parent[v]}")
    _emit(payload, args.json, lines)


_COMMANDS = {
    "maxflow": _run_max_flow,
    "path": _run_path,
    "paths": _run_paths,
}


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="wgraph",
        description="Run max-flow and shortest-path queries on a graph file.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{maxflow,path,paths}",
        help="Available commands",
    )

    flow_parser = subparsers.add_parser(
        "maxflow", help="Compute a maximum flow between two vertices"
    )
    flow_parser.add_argument("--source", "-s", type=int, required=True)
    flow_parser.add_argument("--sink", "-t", type=int, required=True)

    path_parser = subparsers.add_parser(
        "path", help="Compute a shortest path between two vertices"
    )
    path_parser.add_argument("--source", "-s", type=int, required=True)
    path_parser.add_argument("--target", "-t", type=int, required=True)

    paths_parser = subparsers.add_parser(
        "paths", help="Compute shortest paths from a vertex to all others"
    )
    paths_parser.add_argument("--source", "-s", type=int, required=True)

    for p in (flow_parser, path_parser, paths_parser):
        p.add_argument("graph", type=Path, help="Path to graph YAML or JSON")
        p.add_argument(
            "--json", action="store_true", help="Print results as JSON to stdout"
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    start = perf_counter()
    try:
        graph = _load_graph(args.graph)
        _COMMANDS[args.command](graph, args)
    except FileNotFoundError:
        print(f"ERROR: Graph file not found: {args.graph}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to run {args.command}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)

    logger.info(f"{args.command} completed in {_format_duration(perf_counter() - start)}")


if __name__ == "__main__":
    main()
