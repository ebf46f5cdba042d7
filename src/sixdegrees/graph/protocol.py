"""CollabGraphStore protocol -- the interface every graph backend implements.

Public API:
    CollabGraphStore: Runtime-checkable protocol for collaboration graphs.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from .types import Edge


@runtime_checkable
class CollabGraphStore(Protocol):
    """Undirected, edge-labelled graph plus per-vertex traversal metadata.

    Vertices are addressed by name.  Structural calls raise the
    exceptions in :mod:`sixdegrees.exceptions`; ``label`` and
    ``is_vertex`` are queries and never raise for unknown names.
    """

    # ── identity ──────────────────────────────────────────────

    @property
    def store_id(self) -> str:
        """Unique identifier for this store instance."""
        ...

    # ── structure ─────────────────────────────────────────────

    def insert_vertex(self, name: str) -> None:
        """Add a vertex; re-inserting an existing name is a no-op.

        Raises:
            InvalidEntityError: If *name* is empty.
        """
        ...

    def insert_edge(self, a: str, b: str, label: str) -> None:
        """Join *a* and *b* with *label* unless they are already joined.

        Raises:
            UnknownVertexError: If either endpoint is absent.
            InvalidEdgeError: If *label* is empty or ``a == b``.
        """
        ...

    def is_vertex(self, name: str) -> bool:
        """True iff *name* is a vertex."""
        ...

    def neighbors(self, name: str) -> list[str]:
        """Neighbor names in the insertion order of their edges."""
        ...

    def adjacency(self, name: str) -> list[Edge]:
        """Adjacency entries of *name*, in the same order as ``neighbors``."""
        ...

    def label(self, a: str, b: str) -> str | None:
        """Label of the edge joining *a* and *b*, or None."""
        ...

    def vertex_names(self) -> list[str]:
        """All vertex names in insertion order."""
        ...

    def edges(self) -> Iterator[tuple[str, str, str]]:
        """Each undirected edge once, as ``(a, b, label)``."""
        ...

    def __len__(self) -> int:
        ...

    # ── traversal metadata ────────────────────────────────────

    def mark(self, name: str) -> None:
        ...

    def unmark(self, name: str) -> None:
        ...

    def is_marked(self, name: str) -> bool:
        ...

    def set_predecessor(self, to: str, from_: str) -> None:
        """Record *from_* as predecessor of *to*; ignored if one is set."""
        ...

    def predecessor(self, name: str) -> str | None:
        ...

    def clear_metadata(self) -> None:
        """Reset every vertex to unvisited with no predecessor.

        Must be called before each traversal; traversals never call it.
        """
        ...

    # ── lifecycle ─────────────────────────────────────────────

    def close(self) -> None:
        """Release resources held by the store."""
        ...


__all__ = ["CollabGraphStore"]
