"""Tests for the adjacency builder.

Covers raw edge input, networkx input (plain, multi, directed, non-integer
labels) and every InvalidGraph condition.
"""

import networkx as nx
import pytest

from ringsearch.adjacency import AdjacencyList, build_adjacency
from ringsearch.exceptions import InvalidGraph, RingSearchError


def test_empty_graph():
    """Zero vertices is valid input."""
    adj = AdjacencyList.from_edges(0, [])
    assert adj.vertex_count == 0
    assert adj.edge_count == 0
    assert list(adj.edges()) == []


def test_triangle_symmetric():
    """Every neighbour relation appears in both directions."""
    adj = AdjacencyList.from_edges(3, [(0, 1), (1, 2), (2, 0)])
    for i, row in enumerate(adj.neighbours):
        for j in row:
            assert i in adj.neighbours[j]
    assert adj.degree(0) == 2
    assert adj.edge_count == 3


def test_neighbour_order_follows_input():
    adj = AdjacencyList.from_edges(4, [(0, 3), (0, 1), (0, 2)])
    assert adj.neighbours[0] == (3, 1, 2)


def test_edges_ascending_pairs():
    adj = AdjacencyList.from_edges(4, [(3, 2), (1, 0), (2, 0)])
    assert list(adj.edges()) == [(0, 1), (0, 2), (2, 3)]


def test_isolated_vertices_kept():
    """Atoms with no bonds still get an (empty) neighbour list."""
    adj = AdjacencyList.from_edges(5, [(0, 1)])
    assert adj.vertex_count == 5
    assert adj.neighbours[4] == ()


def test_default_labels_are_indices():
    adj = AdjacencyList.from_edges(3, [])
    assert adj.labels == (0, 1, 2)


def test_adjacency_is_frozen():
    adj = AdjacencyList.from_edges(2, [(0, 1)])
    with pytest.raises(AttributeError):
        adj.neighbours = ()


class TestInvalidGraph:
    def test_out_of_range_endpoint(self):
        with pytest.raises(InvalidGraph, match="out of range"):
            AdjacencyList.from_edges(3, [(0, 1), (1, 3)])

    def test_negative_endpoint(self):
        with pytest.raises(InvalidGraph):
            AdjacencyList.from_edges(3, [(-1, 0)])

    def test_duplicate_edge(self):
        with pytest.raises(InvalidGraph, match="duplicate"):
            AdjacencyList.from_edges(3, [(0, 1), (1, 2), (1, 0)])

    def test_self_loop(self):
        with pytest.raises(InvalidGraph, match="self-loop"):
            AdjacencyList.from_edges(2, [(0, 1), (1, 1)])

    def test_self_loop_allowed(self):
        adj = AdjacencyList.from_edges(2, [(0, 1), (1, 1)], allow_self_loops=True)
        assert adj.edge_count == 1

    def test_negative_vertex_count(self):
        with pytest.raises(InvalidGraph):
            AdjacencyList.from_edges(-1, [])

    def test_non_integer_endpoint(self):
        with pytest.raises(InvalidGraph):
            AdjacencyList.from_edges(3, [(0, 1.5)])

    def test_malformed_edge(self):
        with pytest.raises(InvalidGraph):
            AdjacencyList.from_edges(3, [(0, 1, 2)])

    def test_label_count_mismatch(self):
        with pytest.raises(InvalidGraph):
            AdjacencyList(neighbours=((1,), (0,)), labels=("a",))

    def test_is_value_error(self):
        """InvalidGraph is catchable as ValueError and as the package base error."""
        with pytest.raises(ValueError):
            AdjacencyList.from_edges(1, [(0, 5)])
        with pytest.raises(RingSearchError):
            AdjacencyList.from_edges(1, [(0, 5)])


class TestNetworkxInput:
    def test_node_order_defines_index(self):
        G = nx.Graph()
        G.add_nodes_from(["c", "a", "b"])
        G.add_edges_from([("a", "b"), ("b", "c"), ("c", "a")])
        adj = build_adjacency(G)
        assert adj.labels == ("c", "a", "b")
        assert adj.edge_count == 3
        # "a" is index 1, its neighbours are "b" (2) and "c" (0)
        assert set(adj.neighbours[1]) == {0, 2}

    def test_multigraph_parallel_bonds_rejected(self):
        G = nx.MultiGraph()
        G.add_edges_from([(0, 1), (1, 2), (0, 1)])
        with pytest.raises(InvalidGraph, match="duplicate"):
            build_adjacency(G)

    def test_multigraph_single_bonds_accepted(self):
        G = nx.MultiGraph()
        G.add_edges_from([(0, 1), (1, 2), (2, 0)])
        assert build_adjacency(G).edge_count == 3

    def test_directed_rejected(self):
        with pytest.raises(InvalidGraph, match="undirected"):
            build_adjacency(nx.DiGraph([(0, 1), (1, 0)]))

    def test_self_loop_in_graph(self):
        G = nx.cycle_graph(3)
        G.add_edge(0, 0)
        with pytest.raises(InvalidGraph):
            build_adjacency(G)
        assert build_adjacency(G, allow_self_loops=True).edge_count == 3


class TestHandBuiltAdjacency:
    """AdjacencyList built directly from neighbour lists is validated too."""

    def test_valid_lists_accepted(self):
        adj = AdjacencyList(neighbours=[[1, 2], [0, 2], [0, 1]])
        assert adj.neighbours == ((1, 2), (0, 2), (0, 1))
        assert adj.edge_count == 3

    def test_out_of_range_neighbour(self):
        with pytest.raises(InvalidGraph, match="out of range"):
            AdjacencyList(neighbours=((5,),))

    def test_asymmetric_neighbours(self):
        with pytest.raises(InvalidGraph, match="asymmetric"):
            AdjacencyList(neighbours=((1, 2), (2,), (0, 1)))

    def test_repeated_neighbour(self):
        with pytest.raises(InvalidGraph, match="duplicate"):
            AdjacencyList(neighbours=((1, 1), (0, 0)))

    def test_self_loop(self):
        with pytest.raises(InvalidGraph, match="self-loop"):
            AdjacencyList(neighbours=((0, 1), (0,)))

    def test_non_integer_neighbour(self):
        with pytest.raises(InvalidGraph):
            AdjacencyList(neighbours=(("b",), (0,)))
        with pytest.raises(InvalidGraph):
            AdjacencyList(neighbours=((True,), (0,)))

    def test_bool_endpoint_in_edges(self):
        with pytest.raises(InvalidGraph):
            AdjacencyList.from_edges(2, [(False, True)])
