"""Cyclic-vertex detection without enumerating rings.

Two linear passes over the adjacency:

1. Leaf pruning. Vertices of degree 1 are stripped repeatedly until
   none remain. What survives is the 2-core: every tree-like branch
   (substituents, hydrogens, chains) is gone.
2. Bridge removal. The 2-core can still hold linker chains between two
   rings (``C1CC1CCC1CC1``) and single bonds joining rings (biphenyl).
   Those edges are bridges; they are found with a low-link DFS run on
   an explicit stack.

A vertex is cyclic iff it touches at least one non-bridge 2-core edge.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, List, Set

import numpy as np

from .adjacency import AdjacencyList, Edge

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CyclicResult:
    """Cyclic marks (read-only bool array) and cyclic edges (``i < j``)."""

    marks: np.ndarray
    edges: FrozenSet[Edge]

    @property
    def vertices(self) -> List[int]:
        return np.flatnonzero(self.marks).tolist()


def prune_leaves(adjacency: AdjacencyList) -> np.ndarray:
    """Strip degree-1 vertices until none remain.

    Returns
    -------
    np.ndarray
        Boolean mask of the 2-core. Isolated vertices are never enqueued
        and are not part of the core.
    """
    n = adjacency.vertex_count
    remaining = np.fromiter((len(row) for row in adjacency.neighbours), dtype=np.int64, count=n)
    pruned = remaining == 0

    queue = deque(np.flatnonzero(remaining == 1).tolist())
    stripped = 0
    while queue:
        v = queue.popleft()
        pruned[v] = True
        stripped += 1
        for u in adjacency.neighbours[v]:
            if pruned[u]:
                continue
            remaining[u] -= 1
            if remaining[u] == 1:
                queue.append(u)

    logger.debug("Leaf pruning: %d stripped, %d in 2-core", stripped, int(n - pruned.sum()))
    return ~pruned


def find_bridges(adjacency: AdjacencyList, alive: np.ndarray) -> Set[Edge]:
    """Bridges of the subgraph induced by ``alive`` vertices.

    Iterative Tarjan low-link search. Parallel edges are rejected by the
    adjacency builder, so the tree parent can be skipped by vertex.
    """
    n = adjacency.vertex_count
    live = alive.tolist()
    disc = [-1] * n
    low = [0] * n
    bridges: Set[Edge] = set()
    timer = 0

    for root in range(n):
        if not live[root] or disc[root] != -1:
            continue
        disc[root] = low[root] = timer
        timer += 1
        stack = [(root, -1, iter(adjacency.neighbours[root]))]

        while stack:
            v, parent, nbrs = stack[-1]
            descended = False
            for w in nbrs:
                if not live[w] or w == parent:
                    continue
                if disc[w] == -1:
                    disc[w] = low[w] = timer
                    timer += 1
                    stack.append((w, v, iter(adjacency.neighbours[w])))
                    descended = True
                    break
                low[v] = min(low[v], disc[w])
            if descended:
                continue

            stack.pop()
            if stack:
                p = stack[-1][0]
                low[p] = min(low[p], low[v])
                if low[v] > disc[p]:
                    bridges.add((p, v) if p < v else (v, p))

    return bridges


def find_cyclic(adjacency: AdjacencyList) -> CyclicResult:
    """Mark every vertex and edge lying on at least one cycle.

    The result depends only on the graph, not on edge order.
    """
    core = prune_leaves(adjacency)
    bridges = find_bridges(adjacency, core)

    marks = np.zeros(adjacency.vertex_count, dtype=bool)
    edges = set()
    for i, j in adjacency.edges():
        if not (core[i] and core[j]) or (i, j) in bridges:
            continue
        edges.add((i, j))
        marks[i] = marks[j] = True
    marks.setflags(write=False)

    logger.debug(
        "Cyclic detection: %d bridge(s) in 2-core, %d cyclic vertices, %d cyclic edges",
        len(bridges),
        int(marks.sum()),
        len(edges),
    )
    return CyclicResult(marks=marks, edges=frozenset(edges))
