"""KuzuCollabGraph -- Kuzu-backed implementation of CollabGraphStore.

The graph structure (artists and collaborations) lives in a Kuzu
database; traversal metadata stays in Python, one table per store.

Public API:
    KuzuCollabGraph: Concrete CollabGraphStore backed by Kuzu.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from pathlib import Path

import kuzu

from ..exceptions import InvalidEdgeError, InvalidEntityError, UnknownVertexError
from .metadata import TraversalMetadata
from .types import Edge

logger = logging.getLogger(__name__)

NODE_TABLE = "Artist"
REL_TABLE = "COLLABORATED"
IN_MEMORY = ":memory:"


class KuzuCollabGraph:
    """Kuzu graph database implementation of the CollabGraphStore protocol.

    Each undirected edge is stored once as a directed ``COLLABORATED``
    relationship and matched without direction on read.  Vertices and
    edges carry a ``seq`` column so that ``vertex_names`` and
    ``neighbors`` come back in insertion order.  All Cypher queries use
    parameterised bindings.

    Args:
        db_path: Filesystem path for the Kuzu database directory; the
            database is opened in memory when None.
        store_id: Optional human-readable identifier; auto-generated if None.
    """

    # ── construction / lifecycle ──────────────────────────────

    def __init__(
        self,
        db_path: Path | str | None = None,
        store_id: str | None = None,
    ) -> None:
        self._db_path = IN_MEMORY if db_path is None else str(Path(db_path))
        self._store_id = store_id or f"kuzu-{uuid.uuid4().hex[:8]}"
        self._db = kuzu.Database(self._db_path)
        self._conn = kuzu.Connection(self._db)
        self._metadata = TraversalMetadata()
        self._ensure_schema()

        # Vertex names are cached so existence checks, which every
        # metadata call performs, do not round-trip through Cypher.
        self._names: set[str] = set(self.vertex_names())
        self._vertex_seq = len(self._names)
        self._edge_seq = self._scalar(
            f"MATCH ()-[r:{REL_TABLE}]->() RETURN count(r)"
        ) or 0
        logger.debug(
            "Opened Kuzu collaboration graph at %s (%d vertices, %d edges)",
            self._db_path, self._vertex_seq, self._edge_seq,
        )

    @property
    def store_id(self) -> str:
        return self._store_id

    @property
    def db_path(self) -> str:
        return self._db_path

    @property
    def edge_count(self) -> int:
        return self._edge_seq

    def close(self) -> None:
        """Release Kuzu resources.  Safe to call more than once."""
        if self._conn is not None:
            self._conn.close()
        if self._db is not None:
            self._db.close()
        self._conn = None  # type: ignore[assignment]
        self._db = None  # type: ignore[assignment]

    def __enter__(self) -> KuzuCollabGraph:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ── schema management ─────────────────────────────────────

    def _ensure_schema(self) -> None:
        """Create the artist and collaboration tables if missing."""
        self._conn.execute(
            f"CREATE NODE TABLE IF NOT EXISTS {NODE_TABLE}"
            f"(name STRING, seq INT64, PRIMARY KEY(name))"
        )
        self._conn.execute(
            f"CREATE REL TABLE IF NOT EXISTS {REL_TABLE}"
            f"(FROM {NODE_TABLE} TO {NODE_TABLE}, work STRING, seq INT64)"
        )

    # ── structure ─────────────────────────────────────────────

    def insert_vertex(self, name: str) -> None:
        if not name:
            raise InvalidEntityError(
                "cannot insert an artist with an empty name"
            )
        if name in self._names:
            return
        self._conn.execute(
            f"CREATE (:{NODE_TABLE} {{name: $name, seq: $seq}})",
            {"name": name, "seq": self._vertex_seq},
        )
        self._vertex_seq += 1
        self._names.add(name)

    def insert_edge(self, a: str, b: str, label: str) -> None:
        self._require(a)
        self._require(b)
        if not label:
            raise InvalidEdgeError("the empty string is not a valid edge label")
        if a == b:
            raise InvalidEdgeError(
                f'cannot insert an edge between "{a}" and itself'
            )
        existing = self.label(a, b)
        if existing is not None:
            logger.debug(
                "Edge %s -- %s already labelled %r; ignoring %r",
                a, b, existing, label,
            )
            return
        self._conn.execute(
            f"MATCH (a:{NODE_TABLE}), (b:{NODE_TABLE}) "
            f"WHERE a.name = $a AND b.name = $b "
            f"CREATE (a)-[:{REL_TABLE} {{work: $work, seq: $seq}}]->(b)",
            {"a": a, "b": b, "work": label, "seq": self._edge_seq},
        )
        self._edge_seq += 1

    def is_vertex(self, name: str) -> bool:
        return name in self._names

    def neighbors(self, name: str) -> list[str]:
        return [edge.neighbor for edge in self.adjacency(name)]

    def adjacency(self, name: str) -> list[Edge]:
        self._require(name)
        result = self._conn.execute(
            f"MATCH (a:{NODE_TABLE})-[r:{REL_TABLE}]-(b:{NODE_TABLE}) "
            f"WHERE a.name = $name "
            f"RETURN b.name, r.work, r.seq ORDER BY r.seq",
            {"name": name},
        )
        edges: list[Edge] = []
        while result.has_next():
            neighbor, work, _ = result.get_next()
            edges.append(Edge(neighbor, work))
        return edges

    def label(self, a: str, b: str) -> str | None:
        if a not in self._names or b not in self._names:
            return None
        result = self._conn.execute(
            f"MATCH (a:{NODE_TABLE})-[r:{REL_TABLE}]-(b:{NODE_TABLE}) "
            f"WHERE a.name = $a AND b.name = $b "
            f"RETURN r.work LIMIT 1",
            {"a": a, "b": b},
        )
        if not result.has_next():
            return None
        return result.get_next()[0]

    def vertex_names(self) -> list[str]:
        result = self._conn.execute(
            f"MATCH (a:{NODE_TABLE}) RETURN a.name, a.seq ORDER BY a.seq"
        )
        names: list[str] = []
        while result.has_next():
            names.append(result.get_next()[0])
        return names

    def edges(self) -> Iterator[tuple[str, str, str]]:
        result = self._conn.execute(
            f"MATCH (a:{NODE_TABLE})-[r:{REL_TABLE}]->(b:{NODE_TABLE}) "
            f"RETURN a.name, b.name, r.work, r.seq ORDER BY r.seq"
        )
        while result.has_next():
            a, b, work, _ = result.get_next()
            yield a, b, work

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    # ── traversal metadata ────────────────────────────────────

    def mark(self, name: str) -> None:
        self._require(name)
        self._metadata.mark(name)

    def unmark(self, name: str) -> None:
        self._require(name)
        self._metadata.unmark(name)

    def is_marked(self, name: str) -> bool:
        self._require(name)
        return self._metadata.is_marked(name)

    def set_predecessor(self, to: str, from_: str) -> None:
        self._require(to)
        self._require(from_)
        self._metadata.set_predecessor(to, from_)

    def predecessor(self, name: str) -> str | None:
        self._require(name)
        return self._metadata.predecessor(name)

    def clear_metadata(self) -> None:
        self._metadata.clear()

    # ── private helpers ───────────────────────────────────────

    def _require(self, name: str) -> None:
        if name not in self._names:
            raise UnknownVertexError(name)

    def _scalar(self, cypher: str) -> int | None:
        result = self._conn.execute(cypher)
        if not result.has_next():
            return None
        return result.get_next()[0]


__all__ = ["KuzuCollabGraph"]
