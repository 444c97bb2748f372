"""
Heap-based DijkstraEngine implementation.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation. Only valid for non-negative edge weights.
"""

from itertools import count
from typing import Dict, Optional, Tuple
import heapq

from algorithms import Path, PathSearchEngine
from errors import UnknownVertexError
from graph import Edge, Graph, V


class SimpleDijkstraEngine(PathSearchEngine):
    """
    Single-source Dijkstra using a binary heap.

    Complexity:
        O(E log V) over the vertices reachable from the source.
    """

    def shortest_path_costs(self, graph: Graph[V], source: V) -> Dict[V, int]:
        """
        Compute only the cost map for all reachable vertices from source.
        """
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: Graph[V], source: V
    ) -> Tuple[Dict[V, int], Dict[V, Tuple[V, Edge[V]]]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        It returns the distance map (dest -> cost from source) plus a
        predecessor map from each reached vertex to (parent, edge used). The
        predecessor map omits the source itself because it has no parent.
        Heap entries carry an insertion counter, so vertex keys never need to
        be orderable and equal-cost ties resolve in discovery order.

        Raises:
            UnknownVertexError if source is not in the graph.
            ValueError on the first negative edge weight met.
        """
        if not graph.contains_vertex(source):
            raise UnknownVertexError(source)

        dist: Dict[V, int] = {source: 0}
        prev: Dict[V, Tuple[V, Edge[V]]] = {}
        tiebreak = count()
        pq = [(0, next(tiebreak), source)]  # priority queue of (distance, seq, vertex)

        while pq:
            d_u, _, u = heapq.heappop(pq)

            # Skip outdated entries
            if d_u != dist[u]:
                continue

            for edge in graph.outgoing(u):
                if edge.weight < 0:
                    raise ValueError(
                        f"Dijkstra requires non-negative weights, got {u!r} -> "
                        f"{edge.target!r} with weight {edge.weight}"
                    )
                alt = d_u + edge.weight
                if edge.target not in dist or alt < dist[edge.target]:
                    dist[edge.target] = alt
                    prev[edge.target] = (u, edge)
                    heapq.heappush(pq, (alt, next(tiebreak), edge.target))

        return dist, prev

    def search(self, graph: Graph[V], start: V, end: V) -> Optional[Path[V]]:
        """
        Walk the predecessor chain back from end to build the path.
        """
        if not graph.contains_vertex(end):
            raise UnknownVertexError(end)
        if start == end:
            if not graph.contains_vertex(start):
                raise UnknownVertexError(start)
            return Path.trivial(start)

        _, prev = self.shortest_paths(graph, start)
        if end not in prev:
            return None

        edges = []
        vertex = end
        while vertex != start:
            parent, edge = prev[vertex]
            edges.append(edge)
            vertex = parent
        edges.reverse()
        return Path.from_edges(start, edges)
