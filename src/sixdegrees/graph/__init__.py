"""Collaboration graph storage.

Public API:
    CollabGraphStore: Protocol all backends implement.
    InMemoryCollabGraph: Dict-based backend.
    KuzuCollabGraph: Kuzu-backed backend.
    TraversalMetadata: Per-query visited/predecessor table.
    Edge: One adjacency-list entry.
    PathStep: One rendered hop of a path.
    create_graph: Factory selecting a backend by name.
"""

from __future__ import annotations

from pathlib import Path

from .kuzu_store import KuzuCollabGraph
from .memory_store import InMemoryCollabGraph
from .metadata import TraversalMetadata
from .protocol import CollabGraphStore
from .types import Edge, PathStep

BACKENDS = ("memory", "kuzu")


def create_graph(
    backend: str = "memory",
    db_path: Path | str | None = None,
    store_id: str | None = None,
) -> CollabGraphStore:
    """Create an empty collaboration graph.

    Args:
        backend: ``"memory"`` or ``"kuzu"``.
        db_path: Kuzu database directory; ignored by the memory backend.
        store_id: Optional identifier passed through to the store.

    Raises:
        ValueError: If *backend* is not a known backend name.
    """
    if backend == "memory":
        return InMemoryCollabGraph(store_id=store_id)
    if backend == "kuzu":
        return KuzuCollabGraph(db_path=db_path, store_id=store_id)
    raise ValueError(f"Unknown graph backend: {backend!r} (expected one of {BACKENDS})")


__all__ = [
    "BACKENDS",
    "CollabGraphStore",
    "InMemoryCollabGraph",
    "KuzuCollabGraph",
    "TraversalMetadata",
    "Edge",
    "PathStep",
    "create_graph",
]
