"""
Exhaustive minimum-weight path search.

Enumerates every simple path (no repeated vertex) between two vertices and
keeps the lightest one. Worst-case exponential in the number of simple paths,
but correct for any integer weights, negative ones included. Use
SimpleDijkstraEngine when weights are non-negative and the graph is large.
"""

from typing import Iterator, List, Optional, Set
import logging

from algorithms import Path, PathSearchEngine
from errors import SearchLimitExceeded, UnknownVertexError
from graph import Edge, Graph, V

logger = logging.getLogger(__name__)


def all_simple_paths(
    graph: Graph[V], start: V, end: V, max_candidates: Optional[int] = None
) -> Iterator[Path[V]]:
    """
    Yield every simple path from start to end in discovery order.

    Depth-first backtracking over an explicit stack of edge iterators: one
    iterator per vertex on the current route, edges tried in insertion order.
    A vertex already on the route is never entered again, so cycles cannot
    stall the search.

    Raises:
        UnknownVertexError if start or end is not in the graph.
        SearchLimitExceeded once more than max_candidates paths are found.
    """
    for vertex in (start, end):
        if not graph.contains_vertex(vertex):
            raise UnknownVertexError(vertex)

    if start == end:
        yield Path.trivial(start)
        return

    on_route: Set[V] = {start}
    route: List[Edge[V]] = []
    stack = [iter(graph.outgoing(start))]
    found = 0

    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            # Backtrack out of the vertex whose edges are exhausted.
            stack.pop()
            if route:
                on_route.discard(route.pop().target)
            continue

        if edge.target in on_route:
            continue

        if edge.target == end:
            found += 1
            if max_candidates is not None and found > max_candidates:
                raise SearchLimitExceeded(max_candidates)
            yield Path.from_edges(start, [*route, edge])
            continue

        route.append(edge)
        on_route.add(edge.target)
        stack.append(iter(graph.outgoing(edge.target)))


def exhaustive_min_weight_path(
    graph: Graph[V], start: V, end: V, max_candidates: Optional[int] = None
) -> Optional[Path[V]]:
    """
    Lightest simple path from start to end, or None if there is none.

    Ties go to the path found first.
    """
    best: Optional[Path[V]] = None
    for candidate in all_simple_paths(graph, start, end, max_candidates):
        logger.debug("candidate %s", candidate)
        if best is None or candidate.total_weight < best.total_weight:
            best = candidate
    return best


class ExhaustivePathSearchEngine(PathSearchEngine):
    """
    PathSearchEngine over exhaustive simple-path enumeration.
    """

    def __init__(self, max_candidates: Optional[int] = None) -> None:
        self.max_candidates = max_candidates

    def search(self, graph: Graph[V], start: V, end: V) -> Optional[Path[V]]:
        return exhaustive_min_weight_path(graph, start, end, self.max_candidates)
