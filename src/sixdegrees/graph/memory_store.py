"""InMemoryCollabGraph -- dict-based implementation of CollabGraphStore.

Public API:
    InMemoryCollabGraph: Adjacency-list collaboration graph held in plain dicts.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator

from ..exceptions import InvalidEdgeError, InvalidEntityError, UnknownVertexError
from .metadata import TraversalMetadata
from .types import Edge

logger = logging.getLogger(__name__)


class InMemoryCollabGraph:
    """Undirected collaboration graph stored as adjacency dicts.

    Each vertex maps to an insertion-ordered ``{neighbor: label}`` dict,
    so neighbor enumeration follows edge insertion order and label
    lookup is a single dict access.  Edges are written to both
    endpoints at once, which keeps ``label(a, b) == label(b, a)``.

    Not thread-safe: one traversal at a time per instance.

    Args:
        store_id: Human-readable identifier; auto-generated if None.
    """

    def __init__(self, store_id: str | None = None) -> None:
        self._store_id = store_id or f"memory-{uuid.uuid4().hex[:8]}"
        self._adjacency: dict[str, dict[str, str]] = {}
        self._metadata = TraversalMetadata()
        self._edge_count = 0

    @property
    def store_id(self) -> str:
        return self._store_id

    @property
    def edge_count(self) -> int:
        return self._edge_count

    # ── structure ─────────────────────────────────────────────

    def insert_vertex(self, name: str) -> None:
        if not name:
            raise InvalidEntityError(
                "cannot insert an artist with an empty name"
            )
        if name not in self._adjacency:
            self._adjacency[name] = {}

    def insert_edge(self, a: str, b: str, label: str) -> None:
        self._require(a)
        self._require(b)
        if not label:
            raise InvalidEdgeError("the empty string is not a valid edge label")
        if a == b:
            raise InvalidEdgeError(
                f'cannot insert an edge between "{a}" and itself'
            )
        if b in self._adjacency[a]:
            logger.debug(
                "Edge %s -- %s already labelled %r; ignoring %r",
                a, b, self._adjacency[a][b], label,
            )
            return
        self._adjacency[a][b] = label
        self._adjacency[b][a] = label
        self._edge_count += 1

    def is_vertex(self, name: str) -> bool:
        return name in self._adjacency

    def neighbors(self, name: str) -> list[str]:
        self._require(name)
        return list(self._adjacency[name])

    def adjacency(self, name: str) -> list[Edge]:
        self._require(name)
        return [Edge(neighbor, label) for neighbor, label in self._adjacency[name].items()]

    def label(self, a: str, b: str) -> str | None:
        return self._adjacency.get(a, {}).get(b)

    def vertex_names(self) -> list[str]:
        return list(self._adjacency)

    def edges(self) -> Iterator[tuple[str, str, str]]:
        seen: set[str] = set()
        for name, adj in self._adjacency.items():
            for neighbor, label in adj.items():
                if neighbor not in seen:
                    yield name, neighbor, label
            seen.add(name)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, name: object) -> bool:
        return name in self._adjacency

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

    # ── lifecycle ─────────────────────────────────────────────

    def close(self) -> None:
        """Nothing to release; present for protocol compliance."""

    def __enter__(self) -> InMemoryCollabGraph:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ── private helpers ───────────────────────────────────────

    def _require(self, name: str) -> None:
        if name not in self._adjacency:
            raise UnknownVertexError(name)


__all__ = ["InMemoryCollabGraph"]
