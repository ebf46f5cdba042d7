"""Building a collaboration graph from an artist data file.

The file is a sequence of blocks: an artist name on its own line,
zero or more work lines, then a line holding only ``*``.

Public API:
    parse_artists: Read Artist records from lines of a data file.
    build_graph: Insert artists and their shared-work edges into a graph.
    load_graph: Open a data file and return the populated graph.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from pathlib import Path

from .artist import Artist
from .graph.memory_store import InMemoryCollabGraph
from .graph.protocol import CollabGraphStore

logger = logging.getLogger(__name__)

BLOCK_TERMINATOR = "*"


def parse_artists(lines: Iterable[str]) -> list[Artist]:
    """Parse artist blocks in file order.

    A block that is never terminated still yields its artist.  Artist
    names are not validated here; an empty name is rejected when the
    graph is built.
    """
    artists: list[Artist] = []
    expect_name = True
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == BLOCK_TERMINATOR:
            expect_name = True
        elif expect_name:
            artists.append(Artist(line))
            expect_name = False
        else:
            artists[-1].add_work(line)
    return artists


def build_graph(artists: list[Artist], graph: CollabGraphStore) -> CollabGraphStore:
    """Insert *artists* as vertices and join every pair that shares a work.

    Pairs are visited in file order (each artist against every other
    artist), and the label is the first work in the earlier-visited
    artist's discography that the other also has.  This order fixes the
    neighbor order of every vertex.

    Raises:
        InvalidEntityError: If an artist has an empty name.
    """
    seen: set[str] = set()
    for artist in artists:
        if artist.name in seen:
            logger.warning("Artist %r appears more than once in the data", artist.name)
        seen.add(artist.name)
        graph.insert_vertex(artist.name)

    # Index works so each artist is only compared with real collaborators,
    # then visit those candidates in file order.
    by_work: dict[str, set[int]] = defaultdict(set)
    for idx, artist in enumerate(artists):
        for work in artist.discography:
            by_work[work].add(idx)

    for idx, artist in enumerate(artists):
        candidates: set[int] = set()
        for work in artist.discography:
            candidates.update(by_work[work])
        for other_idx in sorted(candidates):
            other = artists[other_idx]
            if other == artist:
                continue
            collab = artist.get_collaboration(other)
            if collab:
                graph.insert_edge(artist.name, other.name, collab)

    logger.debug(
        "Built collaboration graph %s: %d artists", graph.store_id, len(graph)
    )
    return graph


def load_graph(
    path: Path | str,
    graph: CollabGraphStore | None = None,
) -> CollabGraphStore:
    """Read the data file at *path* into *graph* (a new in-memory graph if None).

    Raises:
        OSError: If the file cannot be read.
        CollabGraphError: If the data violates a graph invariant.
    """
    with open(path, encoding="utf-8") as fh:
        artists = parse_artists(fh)
    logger.debug("Parsed %d artists from %s", len(artists), path)
    if graph is None:
        graph = InMemoryCollabGraph()
    return build_graph(artists, graph)


__all__ = ["BLOCK_TERMINATOR", "parse_artists", "build_graph", "load_graph"]
