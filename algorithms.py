"""
Algorithm interfaces for path queries.

Keeps path-finding algorithms separate from graph storage.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Iterable, Optional, Tuple

from graph import Edge, Graph, V


@dataclass(frozen=True)
class Path(Generic[V]):
    """
    A walk from start along edges, with the summed weight of those edges.

    The trivial path from a vertex to itself has no edges and weight 0.
    """

    start: V
    edges: Tuple[Edge[V], ...]
    total_weight: int

    @classmethod
    def trivial(cls, start: V) -> "Path[V]":
        return cls(start, (), 0)

    @classmethod
    def from_edges(cls, start: V, edges: Iterable[Edge[V]]) -> "Path[V]":
        edges = tuple(edges)
        return cls(start, edges, sum(edge.weight for edge in edges))

    @property
    def end(self) -> V:
        return self.edges[-1].target if self.edges else self.start

    @property
    def vertices(self) -> Tuple[V, ...]:
        return (self.start, *(edge.target for edge in self.edges))

    def __len__(self) -> int:
        return len(self.edges)

    def __str__(self) -> str:
        route = " -> ".join(str(v) for v in self.vertices)
        return f"{route} (weight {self.total_weight})"


class PathSearchEngine(ABC):
    """
    Interface for single-pair minimum-weight path queries.
    """

    @abstractmethod
    def search(self, graph: Graph[V], start: V, end: V) -> Optional[Path[V]]:
        """
        Find a minimum-weight path from start to end.

        Returns:
            The path, or None if end is unreachable from start.
        Raises:
            UnknownVertexError if start or end is not in the graph.
        """
        raise NotImplementedError
