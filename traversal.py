"""
Breadth-first and depth-first walks from a start vertex.

Both return every vertex reachable from start exactly once, in order of first
discovery, with edges tried in insertion order.
"""

from collections import deque
from typing import Deque, List, Set

from errors import UnknownVertexError
from graph import Graph, V


def breadth_first(graph: Graph[V], start: V) -> List[V]:
    """
    Visit order of a FIFO walk from start.
    """
    if not graph.contains_vertex(start):
        raise UnknownVertexError(start)

    visited: Set[V] = {start}
    order: List[V] = [start]
    frontier: Deque[V] = deque([start])

    while frontier:
        u = frontier.popleft()
        for edge in graph.outgoing(u):
            if edge.target in visited:
                continue
            visited.add(edge.target)
            order.append(edge.target)
            frontier.append(edge.target)

    return order


def depth_first(graph: Graph[V], start: V) -> List[V]:
    """
    Visit order of a depth-first walk from start.

    Same order as the recursive descent (each unvisited neighbour fully
    explored before the next edge is tried) but driven by an explicit stack of
    edge iterators, so deep graphs don't hit the recursion limit.
    """
    if not graph.contains_vertex(start):
        raise UnknownVertexError(start)

    visited: Set[V] = {start}
    order: List[V] = [start]
    stack = [iter(graph.outgoing(start))]

    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            continue
        if edge.target in visited:
            continue
        visited.add(edge.target)
        order.append(edge.target)
        stack.append(iter(graph.outgoing(edge.target)))

    return order
