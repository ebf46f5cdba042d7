"""Breadth-first and depth-first search over a CollabGraphStore.

Both searches record their work only in the store's traversal
metadata (visited marks and predecessor links); callers read the
result back with :func:`sixdegrees.path.report_path`.  Neither search
clears metadata first -- call ``graph.clear_metadata()`` before each
query.

Public API:
    bfs: Shortest path search (fewest collaborations).
    dfs: Exhaustive depth-first search (any path).
    bfs_excluding: BFS with a set of artists removed from consideration.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator

from .exceptions import UnknownVertexError
from .graph.protocol import CollabGraphStore

logger = logging.getLogger(__name__)


def bfs(graph: CollabGraphStore, source: str, dest: str) -> bool:
    """Breadth-first search from *source* to *dest*.

    Vertices are marked when dequeued and a neighbor's predecessor is
    fixed the first time it is discovered, so the predecessor chain
    left behind for *dest* is a shortest path.

    Returns:
        True if *dest* was discovered.  False when ``source == dest``,
        when *source* is already marked (e.g. excluded), or when *dest*
        is unreachable.
    """
    if source == dest:
        return False
    if graph.is_marked(source):
        return False

    queue: deque[str] = deque([source])
    while queue:
        current = queue.popleft()
        graph.mark(current)
        for neighbor in graph.neighbors(current):
            if graph.is_marked(neighbor):
                continue
            graph.set_predecessor(neighbor, current)
            queue.append(neighbor)
            if neighbor == dest:
                logger.debug("bfs %r -> %r: reached", source, dest)
                return True

    logger.debug("bfs %r -> %r: unreachable", source, dest)
    return False


def dfs(graph: CollabGraphStore, source: str, dest: str) -> bool:
    """Depth-first search from *source* to *dest*.

    Visits vertices in the same order as the recursive formulation
    (mark the vertex, stop if it is *dest*, otherwise descend into each
    neighbor that is still unmarked when the loop reaches it) but keeps
    an explicit stack of neighbor iterators, so deep graphs do not hit
    the recursion limit.

    The search does not stop once *dest* has been found: every vertex
    reachable from *source* without passing through *dest* is explored.
    Predecessor links are first-write-wins, so the path reported
    afterwards is always valid.

    Returns:
        True if *dest* was reached (including ``source == dest``).
    """
    graph.mark(source)
    if source == dest:
        return True

    stack: list[tuple[str, Iterator[str]]] = [
        (source, iter(graph.neighbors(source)))
    ]
    while stack:
        current, pending = stack[-1]
        neighbor = next(pending, None)
        if neighbor is None:
            stack.pop()
            continue
        if graph.is_marked(neighbor):
            continue
        graph.set_predecessor(neighbor, current)
        graph.mark(neighbor)
        if neighbor != dest:
            stack.append((neighbor, iter(graph.neighbors(neighbor))))

    found = graph.is_marked(dest)
    logger.debug("dfs %r -> %r: %s", source, dest, "reached" if found else "unreachable")
    return found


def bfs_excluding(
    graph: CollabGraphStore,
    source: str,
    dest: str,
    excluded: Iterable[str],
) -> bool:
    """Shortest path search that may not pass through *excluded* artists.

    Clears the graph metadata, marks every excluded vertex as visited,
    then runs :func:`bfs`.  An endpoint that is itself excluded yields
    no path.

    Raises:
        UnknownVertexError: If any endpoint or excluded name is not a
            vertex.  Raised before the metadata is touched.
    """
    excluded = list(excluded)
    for name in (source, dest, *excluded):
        if not graph.is_vertex(name):
            raise UnknownVertexError(name)

    graph.clear_metadata()
    for name in excluded:
        if graph.is_marked(name):
            logger.debug("Exclusion list names %r more than once", name)
        graph.mark(name)
    return bfs(graph, source, dest)


__all__ = ["bfs", "dfs", "bfs_excluding"]
