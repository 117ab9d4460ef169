"""Ring-system partitioning and isolated/fused classification."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .adjacency import AdjacencyList
from .cyclic import CyclicResult
from .exceptions import InternalInvariantViolation

logger = logging.getLogger(__name__)


class RingSystemClass(Enum):
    ISOLATED = "isolated"
    FUSED = "fused"


@dataclass(frozen=True)
class RingSystem:
    """One maximal connected group of cyclic vertices.

    ``edge_count`` counts the input bonds with both ends in ``vertices``.
    """

    label: int
    vertices: Tuple[int, ...]
    edge_count: int
    kind: RingSystemClass

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def cycle_rank(self) -> int:
        """Number of independent cycles (E - V + 1)."""
        return self.edge_count - self.vertex_count + 1

    @property
    def is_isolated(self) -> bool:
        return self.kind is RingSystemClass.ISOLATED

    @property
    def is_fused(self) -> bool:
        return self.kind is RingSystemClass.FUSED

    def __contains__(self, v: int) -> bool:
        return v in self.vertices

    def __len__(self) -> int:
        return len(self.vertices)


def classify(vertex_count: int, edge_count: int) -> RingSystemClass:
    """Classify a ring system by its edge and vertex counts.

    One independent cycle has exactly as many edges as vertices; each
    additional shared atom or bond adds at least one edge more.

    Raises
    ------
    InternalInvariantViolation
        ``edge_count < vertex_count`` for a non-empty system.
    """
    if vertex_count > 0 and edge_count < vertex_count:
        raise InternalInvariantViolation(
            f"ring system with {vertex_count} vertices has only {edge_count} edges"
        )
    if edge_count == vertex_count:
        return RingSystemClass.ISOLATED
    return RingSystemClass.FUSED


def label_components(adjacency: AdjacencyList, cyclic: CyclicResult) -> List[Optional[int]]:
    """BFS connected-component labels over cyclic vertices and cyclic edges.

    Acyclic vertices get ``None``. Labels follow the smallest member index.
    """
    n = adjacency.vertex_count
    labels: List[Optional[int]] = [None] * n
    marks = cyclic.marks.tolist()
    next_label = 0

    for root in range(n):
        if not marks[root] or labels[root] is not None:
            continue
        labels[root] = next_label
        queue = deque([root])
        while queue:
            v = queue.popleft()
            for w in adjacency.neighbours[v]:
                if labels[w] is not None:
                    continue
                if ((v, w) if v < w else (w, v)) not in cyclic.edges:
                    continue
                labels[w] = next_label
                queue.append(w)
        next_label += 1

    return labels


def partition_ring_systems(
    adjacency: AdjacencyList, cyclic: CyclicResult
) -> Tuple[Tuple[Optional[int], ...], Tuple[RingSystem, ...]]:
    """Group cyclic vertices into ring systems and classify each.

    Returns
    -------
    labels : tuple
        Ring-system label per vertex, ``None`` for acyclic vertices.
    systems : tuple of RingSystem
        Indexed by label.
    """
    labels = label_components(adjacency, cyclic)
    n_systems = max((lab for lab in labels if lab is not None), default=-1) + 1

    members: List[List[int]] = [[] for _ in range(n_systems)]
    edge_counts = [0] * n_systems
    for v, lab in enumerate(labels):
        if lab is not None:
            members[lab].append(v)
    for i, j in adjacency.edges():
        if labels[i] is not None and labels[i] == labels[j]:
            edge_counts[labels[i]] += 1

    systems = tuple(
        RingSystem(
            label=lab,
            vertices=tuple(members[lab]),
            edge_count=edge_counts[lab],
            kind=classify(len(members[lab]), edge_counts[lab]),
        )
        for lab in range(n_systems)
    )

    logger.debug(
        "Ring systems: %d total, %d isolated, %d fused",
        len(systems),
        sum(1 for s in systems if s.is_isolated),
        sum(1 for s in systems if s.is_fused),
    )
    return tuple(labels), systems
