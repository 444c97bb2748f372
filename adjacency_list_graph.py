"""
Concrete directed, weighted graph implementation.

Implements the Graph interface using a vertex -> [Edge, ...] adjacency list.
"""

from typing import Dict, Iterable, Iterator, List, Tuple
import logging

from errors import UnknownVertexError
from graph import Edge, Graph, V

logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph[V]):
    """
    Directed, weighted multigraph backed by a vertex -> ordered edge list mapping.

    Every edge target is always a vertex of the graph: add_edge creates missing
    endpoints and removals never leave an edge pointing at a removed vertex.
    """

    def __init__(self) -> None:
        self._adj: Dict[V, List[Edge[V]]] = {}

    # --- Mutation API -------------------------------------------------------

    def add_vertex(self, vertex: V) -> None:
        """
        Insert vertex with an empty edge list.

        An existing vertex keeps its place but loses its outgoing edges.
        """
        self._adj[vertex] = []

    def add_edge(self, source: V, dest: V, weight: int) -> None:
        """
        Append a directed edge source -> dest with weight.
        Auto-adds endpoints that don't exist yet.
        """
        self._adj.setdefault(source, [])
        self._adj.setdefault(dest, [])
        self._adj[source].append(Edge(dest, weight))

    def remove_vertex(self, vertex: V) -> bool:
        """
        Remove vertex only if no edge in the graph targets it.

        Returns False (graph unchanged) if vertex is absent or still referenced,
        including by a self-loop.
        """
        if vertex not in self._adj:
            return False
        for source, edges in self._adj.items():
            if any(edge.target == vertex for edge in edges):
                logger.debug("remove_vertex(%r) blocked by edge from %r", vertex, source)
                return False
        del self._adj[vertex]
        return True

    def remove_vertex_cascade(self, vertex: V) -> bool:
        """
        Remove vertex together with every edge that targets it.

        Returns False only if vertex is absent.
        """
        if vertex not in self._adj:
            return False
        del self._adj[vertex]
        for edges in self._adj.values():
            edges[:] = [edge for edge in edges if edge.target != vertex]
        return True

    def remove_edge(self, source: V, dest: V, weight: int) -> bool:
        """
        Remove the first edge source -> dest carrying exactly this weight.
        """
        edges = self._adj.get(source)
        if edges is None:
            return False
        for i, edge in enumerate(edges):
            if edge.target == dest and edge.weight == weight:
                del edges[i]
                return True
        return False

    def copy(self) -> "AdjacencyListGraph[V]":
        clone: AdjacencyListGraph[V] = AdjacencyListGraph()
        clone._adj = {vertex: list(edges) for vertex, edges in self._adj.items()}
        return clone

    # --- Graph interface ----------------------------------------------------

    def vertices(self) -> Iterable[V]:
        return list(self._adj)

    def contains_vertex(self, vertex: V) -> bool:
        return vertex in self._adj

    def outgoing(self, vertex: V) -> Tuple[Edge[V], ...]:
        try:
            return tuple(self._adj[vertex])  # snapshot
        except KeyError:
            raise UnknownVertexError(vertex) from None

    # --- Inspection ---------------------------------------------------------

    def edges(self) -> Iterator[Tuple[V, Edge[V]]]:
        """Yield (source, edge) pairs in vertex then edge insertion order."""
        for source, edges in list(self._adj.items()):
            for edge in tuple(edges):
                yield source, edge

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adj.values())

    def adjacency_representation(self) -> str:
        """
        Debug dump, one "key -> [(target, weight), ...]" line per vertex.
        Not a stable machine format.
        """
        return "\n".join(
            f"{vertex} -> [{', '.join(str(edge) for edge in edges)}]"
            for vertex, edges in self._adj.items()
        )

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"AdjacencyListGraph(vertices={len(self)}, edges={self.edge_count()})"
