"""Exceptions raised by ring perception."""

from __future__ import annotations


class RingSearchError(Exception):
    """Base exception for ring perception errors."""


class InvalidGraph(RingSearchError, ValueError):
    """Malformed input graph (bad endpoint, parallel bond, self-loop)."""

    def __init__(self, message: str, edge: tuple | None = None):
        self.edge = edge
        if edge is not None:
            super().__init__(f"{message}: {edge!r}")
        else:
            super().__init__(message)


class IndexOutOfRange(RingSearchError, IndexError):
    """Vertex index outside ``[0, vertex_count)``."""

    def __init__(self, index, vertex_count: int):
        self.index = index
        self.vertex_count = vertex_count
        super().__init__(f"vertex index {index!r} out of range for graph with {vertex_count} vertices")


class InternalInvariantViolation(RingSearchError, AssertionError):
    """A ring system has fewer edges than vertices.

    Raised by the classifier; it means the cyclic-vertex detector let an
    acyclic vertex through and is never a user error.
    """
