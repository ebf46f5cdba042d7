"""Value types shared by the collaboration graph backends.

Public API:
    Edge: One adjacency-list entry (neighbor name plus work label).
    PathStep: One rendered hop of a reported path.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An adjacency-list entry as seen from one endpoint.

    Attributes:
        neighbor: Name of the vertex at the other end.
        label: The shared work that justifies the edge.
    """

    neighbor: str
    label: str


@dataclass(frozen=True)
class PathStep:
    """One hop of a path, ordered from source toward destination.

    Attributes:
        source: Vertex the hop leaves.
        target: Vertex the hop reaches.
        label: Work both artists appear on.
    """

    source: str
    target: str
    label: str


__all__ = ["Edge", "PathStep"]
