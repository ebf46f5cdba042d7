"""Reconstructing and rendering paths left behind by a traversal.

Public API:
    report_path: Walk predecessor links back from the destination.
    describe_path: Attach the collaboration label to each hop.
    format_path: Render hops as output lines, ending with ``***``.
    format_no_path: The diagnostic line for an unreachable pair.
    dump_graph: Render every vertex's adjacency list.
"""

from __future__ import annotations

from collections.abc import Sequence

from .exceptions import PathReconstructionError
from .graph.protocol import CollabGraphStore
from .graph.types import PathStep

PATH_TERMINATOR = "***"


def report_path(
    graph: CollabGraphStore,
    source: str,
    dest: str,
) -> list[str] | None:
    """Return the vertices from *source* to *dest* recorded by the last traversal.

    Must be called after a traversal and before the next
    ``clear_metadata``.

    Returns:
        Vertex names ordered source first, or None when
        ``source == dest`` or *dest* was never reached.

    Raises:
        UnknownVertexError: If *dest* is not a vertex.
        PathReconstructionError: If the predecessor chain ends, or runs
            longer than the graph has vertices, before reaching *source*.
    """
    if source == dest:
        return None
    if graph.predecessor(dest) is None:
        return None

    reversed_path = [dest]
    current = dest
    for _ in range(len(graph) - 1):
        current = graph.predecessor(current)
        if current is None:
            break
        reversed_path.append(current)
        if current == source:
            reversed_path.reverse()
            return reversed_path

    raise PathReconstructionError(
        f'predecessor chain from "{dest}" does not lead back to "{source}"'
    )


def describe_path(graph: CollabGraphStore, path: Sequence[str]) -> list[PathStep]:
    """Pair up consecutive vertices of *path* with the work that joins them."""
    steps: list[PathStep] = []
    for source, target in zip(path, path[1:]):
        label = graph.label(source, target)
        if label is None:
            raise PathReconstructionError(
                f'"{source}" and "{target}" are adjacent in the path but share no edge'
            )
        steps.append(PathStep(source, target, label))
    return steps


def format_step(step: PathStep) -> str:
    return f'"{step.source}" collaborated with "{step.target}" in "{step.label}".'


def format_path(steps: Sequence[PathStep]) -> list[str]:
    """One line per hop followed by the ``***`` terminator."""
    return [format_step(step) for step in steps] + [PATH_TERMINATOR]


def format_no_path(source: str, dest: str) -> str:
    return f'A path does not exist between "{source}" and "{dest}".'


def dump_graph(graph: CollabGraphStore) -> list[str]:
    """Every vertex's collaborations, one ``***``-terminated block per vertex."""
    lines: list[str] = []
    for name in graph.vertex_names():
        for edge in graph.adjacency(name):
            lines.append(format_step(PathStep(name, edge.neighbor, edge.label)))
        lines.append(PATH_TERMINATOR)
    return lines


__all__ = [
    "PATH_TERMINATOR",
    "report_path",
    "describe_path",
    "format_step",
    "format_path",
    "format_no_path",
    "dump_graph",
]
