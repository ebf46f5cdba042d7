"""Custom exceptions for sixdegrees."""


class CollabGraphError(Exception):
    """Base exception for collaboration graph operations."""


class InvalidEntityError(CollabGraphError):
    """Raised when a vertex would be inserted with an empty name."""


class InvalidEdgeError(CollabGraphError):
    """Raised when an edge has an empty label or joins a vertex to itself."""


class UnknownVertexError(CollabGraphError, KeyError):
    """Raised when an operation names a vertex that is not in the graph."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f'artist "{self.name}" does not exist in the collaboration graph'


class PathReconstructionError(CollabGraphError):
    """Raised when a predecessor chain does not lead back to the source."""
