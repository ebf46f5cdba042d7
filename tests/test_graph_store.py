"""Tests for the collaboration graph stores (in-memory and Kuzu).

Test categories:
- TestVertexOperations: insert, idempotency, empty name, membership
- TestEdgeOperations: symmetry, first insertion wins, self loops, bad labels
- TestNeighbors: insertion order, unknown vertex, adjacency entries
- TestMetadata: mark/unmark, first-write-wins predecessors, clear
- TestProtocolCompliance: isinstance check, factory
- TestKuzuSpecifics: reopening a database, in-memory mode

Every test in the first five classes runs against both backends.
"""

from __future__ import annotations

import pytest

from sixdegrees import (
    CollabGraphStore,
    Edge,
    InMemoryCollabGraph,
    InvalidEdgeError,
    InvalidEntityError,
    KuzuCollabGraph,
    UnknownVertexError,
    create_graph,
)


# ── TestVertexOperations ──────────────────────────────────────


class TestVertexOperations:
    """Vertex insertion and lookup."""

    def test_insert_vertex(self, graph):
        graph.insert_vertex("Alice")
        assert graph.is_vertex("Alice")
        assert len(graph) == 1

    def test_unknown_vertex_is_not_vertex(self, graph):
        assert not graph.is_vertex("Nobody")

    def test_empty_name_rejected(self, graph):
        with pytest.raises(InvalidEntityError):
            graph.insert_vertex("")
        assert len(graph) == 0

    def test_reinsertion_is_noop(self, chain_graph):
        before = (chain_graph.neighbors("Y"), chain_graph.label("X", "Y"))
        chain_graph.insert_vertex("Y")
        assert len(chain_graph) == 3
        assert (chain_graph.neighbors("Y"), chain_graph.label("X", "Y")) == before

    def test_vertex_names_in_insertion_order(self, graph):
        for name in ["Carol", "Alice", "Bob"]:
            graph.insert_vertex(name)
        assert graph.vertex_names() == ["Carol", "Alice", "Bob"]


# ── TestEdgeOperations ────────────────────────────────────────


class TestEdgeOperations:
    """Edge insertion invariants."""

    def test_label_is_symmetric(self, diamond_graph):
        for a, b, label in list(diamond_graph.edges()):
            assert diamond_graph.label(a, b) == label
            assert diamond_graph.label(b, a) == label

    def test_first_insertion_wins(self, chain_graph):
        chain_graph.insert_edge("Y", "X", "Other Song")
        assert chain_graph.label("X", "Y") == "S1"
        assert chain_graph.neighbors("X") == ["Y"]
        assert chain_graph.neighbors("Y") == ["X", "Z"]

    def test_self_loop_rejected(self, chain_graph):
        with pytest.raises(InvalidEdgeError):
            chain_graph.insert_edge("X", "X", "Solo")
        assert chain_graph.label("X", "X") is None
        assert chain_graph.neighbors("X") == ["Y"]

    def test_empty_label_rejected(self, chain_graph):
        with pytest.raises(InvalidEdgeError):
            chain_graph.insert_edge("X", "Z", "")
        assert chain_graph.label("X", "Z") is None

    def test_unknown_endpoint_rejected(self, chain_graph):
        with pytest.raises(UnknownVertexError) as exc_info:
            chain_graph.insert_edge("X", "Nobody", "Song")
        assert exc_info.value.name == "Nobody"

    def test_unknown_vertex_error_is_key_error(self, chain_graph):
        with pytest.raises(KeyError):
            chain_graph.insert_edge("Nobody", "X", "Song")

    def test_label_missing_edge(self, chain_graph):
        assert chain_graph.label("X", "Z") is None

    def test_label_unknown_vertex_is_none(self, chain_graph):
        assert chain_graph.label("X", "Nobody") is None
        assert chain_graph.label("Nobody", "X") is None

    def test_edges_listed_once(self, diamond_graph):
        edges = list(diamond_graph.edges())
        assert len(edges) == 5
        assert {frozenset((a, b)) for a, b, _ in edges} == {
            frozenset(pair)
            for pair in [("A", "B"), ("B", "C"), ("C", "E"), ("A", "D"), ("D", "E")]
        }

    def test_edge_count(self, diamond_graph):
        diamond_graph.insert_edge("B", "A", "again")
        assert diamond_graph.edge_count == 5


# ── TestNeighbors ─────────────────────────────────────────────


class TestNeighbors:
    """Neighbor enumeration."""

    def test_neighbors_follow_edge_insertion_order(self, diamond_graph):
        assert diamond_graph.neighbors("A") == ["B", "D"]
        assert diamond_graph.neighbors("E") == ["C", "D"]

    def test_isolated_vertex_has_no_neighbors(self, diamond_graph):
        assert diamond_graph.neighbors("F") == []

    def test_neighbors_of_unknown_vertex(self, diamond_graph):
        with pytest.raises(UnknownVertexError):
            diamond_graph.neighbors("Nobody")

    def test_adjacency_entries(self, chain_graph):
        assert chain_graph.adjacency("Y") == [Edge("X", "S1"), Edge("Z", "S2")]


# ── TestMetadata ──────────────────────────────────────────────


class TestMetadata:
    """Visited marks and predecessor links."""

    def test_mark_and_unmark(self, chain_graph):
        assert not chain_graph.is_marked("X")
        chain_graph.mark("X")
        assert chain_graph.is_marked("X")
        chain_graph.unmark("X")
        assert not chain_graph.is_marked("X")

    def test_metadata_on_unknown_vertex(self, chain_graph):
        with pytest.raises(UnknownVertexError):
            chain_graph.mark("Nobody")
        with pytest.raises(UnknownVertexError):
            chain_graph.unmark("Nobody")
        with pytest.raises(UnknownVertexError):
            chain_graph.is_marked("Nobody")
        with pytest.raises(UnknownVertexError):
            chain_graph.set_predecessor("Nobody", "X")
        with pytest.raises(UnknownVertexError):
            chain_graph.set_predecessor("X", "Nobody")

    def test_predecessor_first_write_wins(self, chain_graph):
        chain_graph.set_predecessor("Y", "X")
        chain_graph.set_predecessor("Y", "Z")
        assert chain_graph.predecessor("Y") == "X"

    def test_no_predecessor_by_default(self, chain_graph):
        assert chain_graph.predecessor("Z") is None

    def test_clear_metadata(self, chain_graph):
        chain_graph.mark("X")
        chain_graph.mark("Y")
        chain_graph.set_predecessor("Y", "X")
        chain_graph.clear_metadata()
        assert not chain_graph.is_marked("X")
        assert not chain_graph.is_marked("Y")
        assert chain_graph.predecessor("Y") is None

    def test_clear_metadata_keeps_structure(self, chain_graph):
        chain_graph.mark("X")
        chain_graph.clear_metadata()
        assert chain_graph.label("X", "Y") == "S1"
        assert len(chain_graph) == 3


# ── TestProtocolCompliance ────────────────────────────────────


class TestProtocolCompliance:
    """Both backends satisfy CollabGraphStore."""

    def test_isinstance_check(self, graph):
        assert isinstance(graph, CollabGraphStore)

    def test_store_id(self, graph):
        assert graph.store_id in ("test-memory", "test-kuzu")

    def test_generated_store_id(self):
        assert InMemoryCollabGraph().store_id.startswith("memory-")

    def test_create_graph_memory(self):
        assert isinstance(create_graph("memory"), InMemoryCollabGraph)

    def test_create_graph_kuzu(self, tmp_path):
        g = create_graph("kuzu", db_path=tmp_path / "factory_db", store_id="f")
        try:
            assert isinstance(g, KuzuCollabGraph)
            assert g.store_id == "f"
        finally:
            g.close()

    def test_create_graph_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown graph backend"):
            create_graph("neo4j")


# ── TestKuzuSpecifics ─────────────────────────────────────────


class TestKuzuSpecifics:
    """Behaviour only the Kuzu backend has."""

    def test_reopen_keeps_structure_and_order(self, tmp_path):
        db_path = tmp_path / "reopen_db"
        with KuzuCollabGraph(db_path=db_path) as g:
            for name in ["B", "A", "C"]:
                g.insert_vertex(name)
            g.insert_edge("A", "B", "first")
            g.insert_edge("A", "C", "second")

        with KuzuCollabGraph(db_path=db_path) as g:
            assert g.vertex_names() == ["B", "A", "C"]
            assert g.neighbors("A") == ["B", "C"]
            assert g.edge_count == 2
            g.insert_vertex("D")
            g.insert_edge("A", "D", "third")
            assert g.neighbors("A") == ["B", "C", "D"]

    def test_metadata_not_persisted(self, tmp_path):
        db_path = tmp_path / "meta_db"
        with KuzuCollabGraph(db_path=db_path) as g:
            g.insert_vertex("A")
            g.mark("A")
        with KuzuCollabGraph(db_path=db_path) as g:
            assert not g.is_marked("A")

    def test_in_memory_database(self):
        g = KuzuCollabGraph()
        try:
            assert g.db_path == ":memory:"
            g.insert_vertex("A")
            g.insert_vertex("B")
            g.insert_edge("A", "B", "song")
            assert g.label("B", "A") == "song"
        finally:
            g.close()
