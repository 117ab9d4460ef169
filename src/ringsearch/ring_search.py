"""Ring perception for molecular graphs.

``RingSearch`` runs the whole pipeline once, at construction:

    adjacency builder -> cyclic-vertex detector -> ring-system partitioner

and then answers membership, grouping and fragment queries from the
stored results. Nothing is recomputed; a changed molecule needs a new
instance.
"""

from __future__ import annotations

import logging
import operator
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple, Union

import networkx as nx

from .adjacency import AdjacencyList, Edge, build_adjacency
from .config import RingSearchConfig
from .cyclic import find_cyclic
from .exceptions import IndexOutOfRange
from .partition import RingSystem, partition_ring_systems

logger = logging.getLogger(__name__)


class RingSearch:
    """Cyclic atoms, ring systems and ring fragments of one molecular graph.

    Parameters
    ----------
    graph : nx.Graph or AdjacencyList
        Undirected molecular graph. Vertex index ``k`` is the ``k``-th
        node of ``graph.nodes()``. Bond orders are ignored.
    config : RingSearchConfig, optional
        Input tolerance and fragment attribute copying. Read-only after
        construction. ``allow_self_loops`` applies to networkx input
        only; an AdjacencyList is validated when it is built.
    debug : bool
        Enable debug logging for the ``ringsearch`` package.

    Raises
    ------
    InvalidGraph
        Directed graph, parallel bonds, self-loops or bad endpoints.

    Examples
    --------
    >>> rs = RingSearch(nx.cycle_graph(6))
    >>> rs.cyclic()
    [0, 1, 2, 3, 4, 5]
    >>> rs.isolated()
    [(0, 1, 2, 3, 4, 5)]
    """

    def __init__(
        self,
        graph: Union[nx.Graph, AdjacencyList],
        config: Optional[RingSearchConfig] = None,
        debug: bool = False,
    ):
        if debug:
            from .utils import configure_debug_logging

            configure_debug_logging()

        self._config = config if config is not None else RingSearchConfig()

        if isinstance(graph, AdjacencyList):
            self._graph: Optional[nx.Graph] = None
            self._adjacency = graph
        else:
            self._graph = graph
            self._adjacency = build_adjacency(graph, allow_self_loops=self._config.allow_self_loops)

        self._cyclic = find_cyclic(self._adjacency)
        self._labels, self._systems = partition_ring_systems(self._adjacency, self._cyclic)

        logger.debug(
            "RingSearch: %d vertices, %d cyclic, %d ring system(s)",
            self.vertex_count,
            len(self._cyclic.vertices),
            len(self._systems),
        )

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[Sequence[int]],
        config: Optional[RingSearchConfig] = None,
        debug: bool = False,
    ) -> "RingSearch":
        """Ring search over ``vertex_count`` vertices and ``(i, j)`` index pairs."""
        config = config if config is not None else RingSearchConfig()
        adjacency = AdjacencyList.from_edges(vertex_count, edges, allow_self_loops=config.allow_self_loops)
        return cls(adjacency, config=config, debug=debug)

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    @property
    def config(self) -> RingSearchConfig:
        return self._config

    @property
    def graph(self) -> Optional[nx.Graph]:
        """Source graph, or None when built from raw edges."""
        return self._graph

    @property
    def adjacency(self) -> AdjacencyList:
        return self._adjacency

    @property
    def vertex_count(self) -> int:
        return self._adjacency.vertex_count

    @property
    def labels(self) -> Tuple[Optional[int], ...]:
        """Ring-system label per vertex (``None`` for acyclic vertices)."""
        return self._labels

    def _check_index(self, v: int) -> int:
        if isinstance(v, bool):
            raise TypeError("vertex index must be an int, not bool")
        i = operator.index(v)
        if not 0 <= i < self.vertex_count:
            raise IndexOutOfRange(v, self.vertex_count)
        return i

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def is_cyclic(self, v: int) -> bool:
        """True if vertex ``v`` lies on at least one ring."""
        return bool(self._cyclic.marks[self._check_index(v)])

    def cyclic(self) -> List[int]:
        """All cyclic vertices, ascending."""
        return self._cyclic.vertices

    def cyclic_edges(self) -> List[Edge]:
        """All ring bonds as ``(i, j)`` with ``i < j``, ascending."""
        return sorted(self._cyclic.edges)

    def ring_system_of(self, v: int) -> Optional[int]:
        """Label of the ring system containing ``v``, or None."""
        return self._labels[self._check_index(v)]

    # ------------------------------------------------------------------
    # Ring systems
    # ------------------------------------------------------------------

    def ring_systems(self) -> List[RingSystem]:
        return list(self._systems)

    def isolated(self) -> List[Tuple[int, ...]]:
        """Vertex sets of the isolated rings (one independent cycle each)."""
        return [s.vertices for s in self._systems if s.is_isolated]

    def fused(self) -> List[Tuple[int, ...]]:
        """Vertex sets of the fused, bridged and spiro ring systems."""
        return [s.vertices for s in self._systems if s.is_fused]

    # ------------------------------------------------------------------
    # Fragments
    # ------------------------------------------------------------------

    def extract_fragment(self, vertices: Union[RingSystem, Iterable[int]]) -> nx.Graph:
        """Induced subgraph over ``vertices``.

        Node labels and, per ``config``, attributes are taken from the
        source graph at call time; the edge set comes from the snapshot.

        Raises
        ------
        IndexOutOfRange
            Any index outside ``[0, vertex_count)``.
        """
        if isinstance(vertices, RingSystem):
            vertices = vertices.vertices
        members = sorted({self._check_index(v) for v in vertices})
        member_set = set(members)
        edges = [
            (i, j)
            for i in members
            for j in self._adjacency.neighbours[i]
            if i < j and j in member_set
        ]
        return self._build_fragment(members, edges)

    def isolated_fragments(self) -> List[nx.Graph]:
        return [self.extract_fragment(s) for s in self._systems if s.is_isolated]

    def fused_fragments(self) -> List[nx.Graph]:
        return [self.extract_fragment(s) for s in self._systems if s.is_fused]

    def ring_fragments(self) -> nx.Graph:
        """Every cyclic atom and ring bond in one graph.

        Bonds joining two separate ring systems (the biphenyl linker)
        are not ring bonds and are left out.
        """
        return self._build_fragment(self.cyclic(), self.cyclic_edges())

    def _build_fragment(self, members: Sequence[int], edges: Sequence[Edge]) -> nx.Graph:
        G = self._graph
        labels = self._adjacency.labels
        F = G.__class__() if G is not None else nx.Graph()

        if G is not None and self._config.copy_graph_data:
            F.graph.update(G.graph)

        for i in members:
            F.add_node(labels[i])
            if G is not None and self._config.copy_node_data:
                F.nodes[labels[i]].update(G.nodes.get(labels[i], {}))

        for i, j in edges:
            u, v = labels[i], labels[j]
            F.add_edge(u, v)
            if G is not None and self._config.copy_edge_data:
                F.edges[_edge_key(F, u, v)].update(_edge_data(G, u, v))

        return F

    def __repr__(self) -> str:
        return (
            f"RingSearch(vertices={self.vertex_count}, cyclic={len(self._cyclic.vertices)}, "
            f"isolated={len(self.isolated())}, fused={len(self.fused())})"
        )


def _edge_key(G: nx.Graph, u: Hashable, v: Hashable) -> tuple:
    return (u, v, 0) if G.is_multigraph() else (u, v)


def _edge_data(G: nx.Graph, u: Hashable, v: Hashable) -> dict:
    data = G.get_edge_data(u, v)
    if data is None:
        return {}
    if G.is_multigraph():
        return next(iter(data.values()), {})
    return data
