"""Pytest configuration and fixtures for sixdegrees tests."""

import pytest

from sixdegrees import InMemoryCollabGraph, KuzuCollabGraph


@pytest.fixture(params=["memory", "kuzu"])
def graph(request, tmp_path):
    """An empty graph, once per backend.

    Kuzu stores get their own database directory under tmp_path so
    tests never share state.
    """
    if request.param == "memory":
        g = InMemoryCollabGraph(store_id="test-memory")
    else:
        g = KuzuCollabGraph(db_path=tmp_path / "collab_db", store_id="test-kuzu")
    yield g
    g.close()


@pytest.fixture
def memory_graph():
    """A fresh in-memory graph for tests that do not care about the backend."""
    return InMemoryCollabGraph(store_id="test-memory")


def _add_edges(graph, edges):
    """Insert every endpoint of *edges* as a vertex, then the edges themselves."""
    for a, b, _ in edges:
        graph.insert_vertex(a)
        graph.insert_vertex(b)
    for a, b, label in edges:
        graph.insert_edge(a, b, label)
    return graph


@pytest.fixture
def chain_graph(graph):
    """X --S1-- Y --S2-- Z, no direct X -- Z edge."""
    return _add_edges(graph, [("X", "Y", "S1"), ("Y", "Z", "S2")])


@pytest.fixture
def diamond_graph(graph):
    """Two routes from A to E of different lengths, plus an island.

        A --w1-- B --w2-- C --w3-- E
        A --w4-- D --w5-- E
        F (no edges)
    """
    _add_edges(
        graph,
        [
            ("A", "B", "w1"),
            ("B", "C", "w2"),
            ("C", "E", "w3"),
            ("A", "D", "w4"),
            ("D", "E", "w5"),
        ],
    )
    graph.insert_vertex("F")
    return graph


@pytest.fixture
def add_edges():
    """Helper that inserts ``(a, b, label)`` triples into a graph."""
    return _add_edges
