#!/usr/bin/env python3
"""Verification script for the dual-backend architecture.

Builds the same random collaboration graph in the in-memory and Kuzu
backends and checks that every bfs, dfs and not query gives the same
answer on both.
"""

import random
import shutil
import tempfile
from pathlib import Path

from sixdegrees import (
    Artist,
    InMemoryCollabGraph,
    KuzuCollabGraph,
    bfs,
    bfs_excluding,
    build_graph,
    dfs,
    report_path,
)


def random_artists(rng: random.Random, n_artists: int, n_works: int) -> list[Artist]:
    works = [f"work-{i}" for i in range(n_works)]
    return [
        Artist(f"artist-{i}", rng.sample(works, rng.randint(1, 3)))
        for i in range(n_artists)
    ]


def answers(graph, queries):
    """Run every query against *graph* and collect the reported paths."""
    results = []
    for kind, source, dest, excluded in queries:
        if kind == "not":
            bfs_excluding(graph, source, dest, excluded)
        else:
            graph.clear_metadata()
            (bfs if kind == "bfs" else dfs)(graph, source, dest)
        results.append(report_path(graph, source, dest))
    return results


def main():
    rng = random.Random(7)
    artists = random_artists(rng, n_artists=60, n_works=80)
    names = [a.name for a in artists]
    queries = []
    for _ in range(50):
        source, dest, *excluded = rng.sample(names, 4)
        queries.append((rng.choice(["bfs", "dfs", "not"]), source, dest, excluded))

    workdir = Path(tempfile.mkdtemp(prefix="sixdegrees-verify-"))
    try:
        memory = build_graph(artists, InMemoryCollabGraph())
        print(f"✓ In-memory graph: {len(memory)} artists, {memory.edge_count} edges")

        with KuzuCollabGraph(db_path=workdir / "kuzu_db") as kuzu_graph:
            build_graph(artists, kuzu_graph)
            print(f"✓ Kuzu graph: {len(kuzu_graph)} artists, {kuzu_graph.edge_count} edges")

            expected = answers(memory, queries)
            actual = answers(kuzu_graph, queries)

        mismatches = [q for q, a, b in zip(queries, expected, actual) if a != b]
        found = sum(1 for path in expected if path is not None)
        print(f"✓ Ran {len(queries)} queries ({found} with a path)")
        if mismatches:
            for query in mismatches:
                print(f"✗ Backends disagree on {query}")
            raise SystemExit(1)
        print("✓ Both backends agree on every query")
    finally:
        shutil.rmtree(workdir, ignore_errors=True)


if __name__ == "__main__":
    main()
