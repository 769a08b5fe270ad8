"""Tests for gpetersen.factory."""
import networkx as nx
import pytest

from gpetersen.errors import GraphConstructionError
from gpetersen.factory.adjlist import adj_from_edges
from gpetersen.factory.build import build_undirected


# --- build_undirected ---

def test_build_keeps_isolated_vertices():
    G = build_undirected(4, [(0, 1)])
    assert sorted(G.nodes()) == [0, 1, 2, 3]
    assert G.number_of_edges() == 1


def test_build_empty():
    G = build_undirected(0, [])
    assert G.number_of_nodes() == 0


def test_build_out_of_range():
    with pytest.raises(GraphConstructionError):
        build_undirected(3, [(0, 1), (2, 3)])


def test_build_negative_endpoint():
    with pytest.raises(GraphConstructionError):
        build_undirected(3, [(-1, 0)])


def test_build_negative_count():
    with pytest.raises(GraphConstructionError):
        build_undirected(-1, [])


def test_build_bad_edge_leaves_target_untouched():
    H = nx.Graph()
    H.add_edge(10, 11)
    with pytest.raises(GraphConstructionError):
        build_undirected(2, [(0, 5)], create_using=H)
    assert list(H.edges()) == [(10, 11)]


def test_build_directed_instance_left_untouched():
    H = nx.DiGraph()
    H.add_edge("a", "b")
    with pytest.raises(nx.NetworkXError):
        build_undirected(2, [(0, 1)], create_using=H)
    assert list(H.edges()) == [("a", "b")]


def test_build_multidigraph_class_rejected():
    with pytest.raises(nx.NetworkXError):
        build_undirected(2, [(0, 1)], create_using=nx.MultiDiGraph)


def test_build_into_instance_clears_it():
    H = nx.Graph()
    H.add_edge("x", "y")
    G = build_undirected(3, [(0, 1), (1, 2)], create_using=H)
    assert G is H
    assert sorted(G.nodes()) == [0, 1, 2]


def test_build_directed_rejected():
    with pytest.raises(nx.NetworkXError):
        build_undirected(2, [(0, 1)], create_using=nx.DiGraph)


# --- adjacency list ---

def test_adj_from_edges_triangle():
    adj = adj_from_edges([(0, 1), (1, 2), (2, 0)], 3)
    assert adj == [[1, 2], [0, 2], [0, 1]]


def test_adj_from_edges_out_of_range():
    with pytest.raises(GraphConstructionError):
        adj_from_edges([(0, 3)], 3)


def test_adj_from_edges_negative_count():
    with pytest.raises(GraphConstructionError):
        adj_from_edges([], -1)
