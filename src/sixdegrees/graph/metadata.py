"""Per-query traversal state kept apart from the graph structure.

Public API:
    TraversalMetadata: Visited set plus predecessor table keyed by vertex name.
"""

from __future__ import annotations


class TraversalMetadata:
    """Mutable visited/predecessor table for a single traversal.

    Stores hold one of these next to their (otherwise static) adjacency
    data.  Vertex existence is the store's concern; this class only
    records state for names it is told about.
    """

    def __init__(self) -> None:
        self._visited: set[str] = set()
        self._predecessors: dict[str, str] = {}

    def mark(self, name: str) -> None:
        self._visited.add(name)

    def unmark(self, name: str) -> None:
        self._visited.discard(name)

    def is_marked(self, name: str) -> bool:
        return name in self._visited

    def set_predecessor(self, to: str, from_: str) -> bool:
        """Record *from_* as the predecessor of *to* unless one is already set.

        Returns:
            True if the predecessor was recorded, False if *to* already had one.
        """
        if to in self._predecessors:
            return False
        self._predecessors[to] = from_
        return True

    def predecessor(self, name: str) -> str | None:
        return self._predecessors.get(name)

    def clear(self) -> None:
        self._visited.clear()
        self._predecessors.clear()

    @property
    def marked_count(self) -> int:
        return len(self._visited)


__all__ = ["TraversalMetadata"]
