"""
Exceptions raised by the graph engine.

Blocked vertex removals and missing paths are ordinary return values
(False / None), not exceptions.
"""

from typing import Hashable


class UnknownVertexError(LookupError):
    """An operation needed a vertex that is not in the graph."""

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(f"Unknown vertex: {vertex!r}")
        self.vertex = vertex


class SearchLimitExceeded(RuntimeError):
    """Exhaustive path search found more candidate paths than allowed."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Path search exceeded {limit} candidate paths")
        self.limit = limit
