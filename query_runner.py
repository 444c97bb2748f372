"""
CLI to build a graph from a YAML description and run queries against it.

Reads a config such as queries/sample.yml, builds an AdjacencyListGraph from
its vertices and edges, runs each query in order, and prints the results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple
import argparse
import logging

import yaml

from adjacency_list_graph import AdjacencyListGraph
from cycle_detector import find_cycle, has_cycle
from dijkstra_engine import SimpleDijkstraEngine
from path_search_engine import ExhaustivePathSearchEngine
from traversal import breadth_first, depth_first

LOG_FORMAT = "%(asctime)-20s %(name)-24s %(levelname)-8s: %(message)s"


@dataclass(frozen=True)
class QueryConfig:
    kind: str
    params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RunnerConfig:
    log_level: str = "WARNING"
    max_candidates: Optional[int] = None
    vertices: Sequence[Any] = ()
    edges: Sequence[Tuple[Any, Any, int]] = ()
    queries: Sequence[QueryConfig] = ()


def _is_int_weight(weight: Any) -> bool:
    # bool is an int subclass; YAML true/false must not pass as 1/0
    return isinstance(weight, int) and not isinstance(weight, bool)


def _remove_edge(graph: AdjacencyListGraph, source: Any, dest: Any, weight: Any) -> bool:
    if not _is_int_weight(weight):
        raise ValueError(f"remove_edge weight {weight!r} must be an integer")
    return graph.remove_edge(source, dest, weight)


def load_config(path: Path) -> RunnerConfig:
    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    edges = []
    for raw in data.get("edges") or []:
        if len(raw) != 3:
            raise ValueError(f"{path}: edge {raw!r} must be [source, dest, weight]")
        source, dest, weight = raw
        if not _is_int_weight(weight):
            raise ValueError(f"{path}: edge {raw!r} weight must be an integer")
        edges.append((source, dest, weight))

    queries = []
    for raw in data.get("queries") or []:
        params = dict(raw)
        kind = params.pop("kind", None)
        if kind is None:
            raise ValueError(f"{path}: query {raw!r} has no 'kind'")
        queries.append(QueryConfig(kind=str(kind), params=params))

    max_candidates = data.get("max_candidates")
    return RunnerConfig(
        log_level=str(data.get("log_level", "WARNING")).upper(),
        max_candidates=int(max_candidates) if max_candidates is not None else None,
        vertices=list(data.get("vertices") or []),
        edges=edges,
        queries=queries,
    )


def build_graph(cfg: RunnerConfig) -> AdjacencyListGraph:
    graph: AdjacencyListGraph = AdjacencyListGraph()
    for vertex in cfg.vertices:
        graph.add_vertex(vertex)
    for source, dest, weight in cfg.edges:
        graph.add_edge(source, dest, weight)
    return graph


def _query_handlers(max_candidates: Optional[int]) -> Dict[str, Callable[..., Any]]:
    exhaustive = ExhaustivePathSearchEngine(max_candidates)
    dijkstra = SimpleDijkstraEngine()
    return {
        "search": lambda g, start, end: exhaustive.search(g, start, end),
        "dijkstra": lambda g, start, end: dijkstra.search(g, start, end),
        "bfs": lambda g, start: breadth_first(g, start),
        "dfs": lambda g, start: depth_first(g, start),
        "has_cycle": lambda g: has_cycle(g),
        "find_cycle": lambda g: find_cycle(g),
        "remove_vertex": lambda g, vertex: g.remove_vertex(vertex),
        "remove_vertex_cascade": lambda g, vertex: g.remove_vertex_cascade(vertex),
        "remove_edge": _remove_edge,
    }


def run_queries(
    graph: AdjacencyListGraph,
    queries: Sequence[QueryConfig],
    max_candidates: Optional[int] = None,
) -> List[Dict[str, object]]:
    """
    Run queries in order against graph; mutating queries affect later ones.

    Each result row holds the query kind, its parameters and the raw result.
    """
    handlers = _query_handlers(max_candidates)
    results: List[Dict[str, object]] = []
    for query in queries:
        handler = handlers.get(query.kind)
        if handler is None:
            raise ValueError(f"Unknown query kind: {query.kind!r}")
        try:
            result = handler(graph, **query.params)
        except TypeError as exc:
            raise ValueError(f"Bad parameters for {query.kind!r} query: {exc}") from exc
        results.append({"kind": query.kind, "params": dict(query.params), "result": result})
    return results


def format_result(row: Mapping[str, Any]) -> str:
    params = " ".join(f"{k}={v}" for k, v in row["params"].items())
    result = row["result"]
    if result is None:
        shown = "no path" if row["kind"] in ("search", "dijkstra") else "none"
    else:
        shown = str(result)
    return f"[query] {row['kind']} {params}".rstrip() + f": {shown}"


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "config",
        nargs="?",
        type=Path,
        default=Path(__file__).parent / "queries" / "sample.yml",
        help="YAML graph and query description",
    )
    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    logging.basicConfig(level=cfg.log_level, format=LOG_FORMAT)

    graph = build_graph(cfg)
    print(f"[graph] {len(graph)} vertices, {graph.edge_count()} edges")
    print(graph.adjacency_representation())

    for row in run_queries(graph, cfg.queries, cfg.max_candidates):
        print(format_result(row))


if __name__ == "__main__":
    main()
