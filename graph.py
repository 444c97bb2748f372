"""
Directed, weighted graph abstraction.

Vertices are arbitrary hashable keys.
Edges are directed: source -> target with integer weight, kept in insertion order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Hashable, Iterable, Sequence, TypeVar

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class Edge(Generic[V]):
    """
    Outgoing edge; the source is implied by the list that holds it.
    """

    target: V
    weight: int

    def __str__(self) -> str:
        return f"({self.target}, {self.weight})"


class Graph(ABC, Generic[V]):
    """Read-only view of a directed, weighted graph."""

    @abstractmethod
    def vertices(self) -> Iterable[V]:
        """Return all vertices in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def contains_vertex(self, vertex: V) -> bool:
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: V) -> Sequence[Edge[V]]:
        """
        Outgoing edges of a vertex in insertion order.

        Returns a snapshot that stays valid if the graph is mutated later.
        Raises UnknownVertexError if vertex is not in the graph.
        """
        raise NotImplementedError

    def __contains__(self, vertex: object) -> bool:
        return self.contains_vertex(vertex)  # type: ignore[arg-type]
