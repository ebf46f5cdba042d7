"""Basic usage example for sixdegrees."""

from sixdegrees import (
    Artist,
    InMemoryCollabGraph,
    bfs,
    bfs_excluding,
    build_graph,
    describe_path,
    dfs,
    format_no_path,
    format_path,
    report_path,
)


def show(graph, source, dest):
    path = report_path(graph, source, dest)
    if path is None:
        print(f"   {format_no_path(source, dest)}")
        return
    for line in format_path(describe_path(graph, path)):
        print(f"   {line}")


def main():
    print("=" * 60)
    print("sixdegrees - Basic Usage Example")
    print("=" * 60)

    # 1. Build a graph from artist records
    print("\n1. Building collaboration graph...")
    artists = [
        Artist("Aretha Franklin", ["Think", "Respect"]),
        Artist("Ray Charles", ["Think", "Night Time"]),
        Artist("Quincy Jones", ["Night Time", "Thriller"]),
        Artist("Michael Jackson", ["Thriller", "Bad"]),
        Artist("Stevie Wonder", ["Respect", "Bad"]),
    ]
    graph = build_graph(artists, InMemoryCollabGraph(store_id="demo"))
    print(f"   {len(graph)} artists, {graph.edge_count} collaborations")

    # 2. Shortest path
    print("\n2. bfs Aretha Franklin -> Michael Jackson")
    graph.clear_metadata()
    bfs(graph, "Aretha Franklin", "Michael Jackson")
    show(graph, "Aretha Franklin", "Michael Jackson")

    # 3. Any path
    print("\n3. dfs Aretha Franklin -> Michael Jackson")
    graph.clear_metadata()
    dfs(graph, "Aretha Franklin", "Michael Jackson")
    show(graph, "Aretha Franklin", "Michael Jackson")

    # 4. Excluding artists
    print("\n4. not Aretha Franklin -> Michael Jackson, excluding Stevie Wonder")
    bfs_excluding(graph, "Aretha Franklin", "Michael Jackson", ["Stevie Wonder"])
    show(graph, "Aretha Franklin", "Michael Jackson")

    print("\n5. not Aretha Franklin -> Michael Jackson, excluding Stevie Wonder and Ray Charles")
    bfs_excluding(
        graph, "Aretha Franklin", "Michael Jackson", ["Stevie Wonder", "Ray Charles"]
    )
    show(graph, "Aretha Franklin", "Michael Jackson")


if __name__ == "__main__":
    main()
