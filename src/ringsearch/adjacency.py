"""Adjacency builder: external graph -> index-based neighbour lists.

Every later stage works on vertex indices ``0..n-1`` only. For a
networkx graph the index of a node is its position in ``G.nodes()``;
the node labels are kept on the adjacency so fragments can be rebuilt
with the original labels.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, field
from typing import Hashable, Iterable, Iterator, Optional, Sequence, Tuple

import networkx as nx

from .exceptions import InvalidGraph

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]


@dataclass(frozen=True)
class AdjacencyList:
    """Immutable, symmetric, duplicate-free neighbour lists.

    ``neighbours[i]`` holds the neighbours of vertex ``i`` in the order
    the edges were supplied. ``labels[i]`` is the external node label.
    """

    neighbours: Tuple[Tuple[int, ...], ...]
    labels: Tuple[Hashable, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "neighbours", _check_neighbours(self.neighbours))
        if not self.labels:
            object.__setattr__(self, "labels", tuple(range(len(self.neighbours))))
        if len(self.labels) != len(self.neighbours):
            raise InvalidGraph(f"{len(self.labels)} labels given for {len(self.neighbours)} vertices")

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[Sequence[int]],
        labels: Optional[Sequence[Hashable]] = None,
        allow_self_loops: bool = False,
    ) -> "AdjacencyList":
        """Build from a vertex count and ``(i, j)`` index pairs.

        Parameters
        ----------
        vertex_count : int
            Number of vertices, ``>= 0``.
        edges : iterable of (int, int)
            Unordered index pairs. Each pair may appear only once.
        labels : sequence, optional
            External node labels, one per vertex. Defaults to the indices.
        allow_self_loops : bool
            Skip ``(i, i)`` pairs with a warning rather than raising.

        Raises
        ------
        InvalidGraph
            Negative vertex count, non-integer or out-of-range endpoint,
            repeated pair, or self-loop.
        """
        try:
            n = operator.index(vertex_count)
        except TypeError as e:
            raise InvalidGraph(f"vertex count must be an integer, got {vertex_count!r}") from e
        if n < 0:
            raise InvalidGraph(f"vertex count must be >= 0, got {n}")

        nbrs: list[list[int]] = [[] for _ in range(n)]
        seen: set[Edge] = set()
        skipped = 0

        for edge in edges:
            try:
                a, b = edge
                if isinstance(a, bool) or isinstance(b, bool):
                    raise TypeError("bool is not a vertex index")
                i, j = operator.index(a), operator.index(b)
            except (TypeError, ValueError) as e:
                raise InvalidGraph("edge must be a pair of integer indices", edge) from e

            if not (0 <= i < n and 0 <= j < n):
                raise InvalidGraph(f"edge endpoint out of range [0, {n})", (i, j))
            if i == j:
                if allow_self_loops:
                    skipped += 1
                    continue
                raise InvalidGraph("self-loop", (i, j))

            key = (i, j) if i < j else (j, i)
            if key in seen:
                raise InvalidGraph("duplicate edge", key)
            seen.add(key)
            nbrs[i].append(j)
            nbrs[j].append(i)

        if skipped:
            logger.warning("Ignored %d self-loop(s)", skipped)
        logger.debug("Adjacency: %d vertices, %d edges", n, len(seen))

        return cls(
            neighbours=tuple(tuple(row) for row in nbrs),
            labels=tuple(labels) if labels is not None else tuple(range(n)),
        )

    @property
    def vertex_count(self) -> int:
        return len(self.neighbours)

    @property
    def edge_count(self) -> int:
        return sum(len(row) for row in self.neighbours) // 2

    def degree(self, v: int) -> int:
        return len(self.neighbours[v])

    def edges(self) -> Iterator[Edge]:
        """Yield each edge once as ``(i, j)`` with ``i < j``, ascending."""
        for i, row in enumerate(self.neighbours):
            for j in sorted(row):
                if i < j:
                    yield (i, j)

    def __len__(self) -> int:
        return self.vertex_count


def _check_neighbours(neighbours) -> Tuple[Tuple[int, ...], ...]:
    """Validate hand-built neighbour lists; return them as nested tuples.

    Raises
    ------
    InvalidGraph
        Non-integer or out-of-range neighbour, self-loop, repeated
        neighbour (parallel bond), or an entry without its mirror.
    """
    try:
        rows = tuple(tuple(row) for row in neighbours)
    except TypeError as e:
        raise InvalidGraph("neighbours must be a sequence of index sequences") from e
    n = len(rows)
    arcs: set[Edge] = set()

    for i, row in enumerate(rows):
        for w in row:
            if isinstance(w, bool):
                raise InvalidGraph("neighbour must be an integer index", (i, w))
            try:
                j = operator.index(w)
            except TypeError as e:
                raise InvalidGraph("neighbour must be an integer index", (i, w)) from e
            if not 0 <= j < n:
                raise InvalidGraph(f"neighbour out of range [0, {n})", (i, j))
            if i == j:
                raise InvalidGraph("self-loop", (i, j))
            if (i, j) in arcs:
                raise InvalidGraph("duplicate edge", (i, j) if i < j else (j, i))
            arcs.add((i, j))

    for i, j in arcs:
        if (j, i) not in arcs:
            raise InvalidGraph(f"asymmetric adjacency: {i} missing from neighbours of {j}", (i, j))

    return tuple(tuple(operator.index(w) for w in row) for row in rows)


def build_adjacency(G: nx.Graph, allow_self_loops: bool = False) -> AdjacencyList:
    """Build an AdjacencyList from a networkx graph.

    Node ``k`` in ``G.nodes()`` order becomes vertex index ``k``. A
    MultiGraph is accepted, but parallel bonds between one atom pair
    raise InvalidGraph; collapse them before ring perception.

    Raises
    ------
    InvalidGraph
        Directed graph, parallel bonds, or self-loops.
    """
    if G.is_directed():
        raise InvalidGraph("ring perception requires an undirected graph")

    labels = tuple(G.nodes())
    index = {label: i for i, label in enumerate(labels)}
    pairs = ((index[u], index[v]) for u, v in G.edges())

    return AdjacencyList.from_edges(len(labels), pairs, labels=labels, allow_self_loops=allow_self_loops)
