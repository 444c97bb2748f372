"""
Directed cycle detection.

Every vertex is used as a probe root, so cycles in components unreachable
from the first vertex are still found.
"""

from typing import List, Optional, Set

from graph import Graph, V


def _probe(graph: Graph[V], root: V, done: Set[V]) -> Optional[List[V]]:
    """
    Depth-first walk from root tracking the active path.

    An edge back into the active path closes a cycle. Vertices whose edges are
    exhausted go into done and are never re-entered: nothing reachable from
    them leads back into any later active path without having been seen.
    """
    active: List[V] = [root]
    on_path: Set[V] = {root}
    stack = [iter(graph.outgoing(root))]

    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            finished = active.pop()
            on_path.discard(finished)
            done.add(finished)
            continue

        target = edge.target
        if target in on_path:
            return active[active.index(target):] + [target]
        if target in done:
            continue

        active.append(target)
        on_path.add(target)
        stack.append(iter(graph.outgoing(target)))

    return None


def find_cycle(graph: Graph[V]) -> Optional[List[V]]:
    """
    First cycle found, as a closed vertex list (first == last), or None.

    A self-loop on v is reported as [v, v].
    """
    done: Set[V] = set()
    for root in graph.vertices():
        if root in done:
            continue
        cycle = _probe(graph, root, done)
        if cycle is not None:
            return cycle
    return None


def has_cycle(graph: Graph[V]) -> bool:
    return find_cycle(graph) is not None
