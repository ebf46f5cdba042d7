"""sixdegrees: find chains of collaborations between artists."""

__version__ = "0.1.0"

from .artist import Artist
from .exceptions import (
    CollabGraphError,
    InvalidEdgeError,
    InvalidEntityError,
    PathReconstructionError,
    UnknownVertexError,
)
from .graph import (
    CollabGraphStore,
    Edge,
    InMemoryCollabGraph,
    KuzuCollabGraph,
    PathStep,
    TraversalMetadata,
    create_graph,
)
from .loader import build_graph, load_graph, parse_artists
from .path import (
    describe_path,
    dump_graph,
    format_no_path,
    format_path,
    report_path,
)
from .session import SixDegrees
from .traversal import bfs, bfs_excluding, dfs

__all__ = [
    # Graph storage
    "CollabGraphStore",
    "InMemoryCollabGraph",
    "KuzuCollabGraph",
    "TraversalMetadata",
    "Edge",
    "PathStep",
    "create_graph",
    # Traversal
    "bfs",
    "dfs",
    "bfs_excluding",
    # Path reporting
    "report_path",
    "describe_path",
    "format_path",
    "format_no_path",
    "dump_graph",
    # Data loading
    "Artist",
    "parse_artists",
    "build_graph",
    "load_graph",
    # Session
    "SixDegrees",
    # Exceptions
    "CollabGraphError",
    "InvalidEntityError",
    "InvalidEdgeError",
    "UnknownVertexError",
    "PathReconstructionError",
]
