"""Artist record: a name plus the works the artist appears on."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Artist:
    """A musician and their discography.

    Two artists are equal when their names are equal; the discography
    only matters for deciding which work, if any, they share.

    Attributes:
        name: Artist name, the vertex key in the collaboration graph.
        discography: Works in the order they were listed.
    """

    name: str = ""
    discography: list[str] = field(default_factory=list)

    def add_work(self, work: str) -> None:
        self.discography.append(work)

    def in_work(self, work: str) -> bool:
        return work in self.discography

    def get_collaboration(self, other: Artist) -> str | None:
        """Return the first non-empty work in this discography that *other* also has."""
        theirs = set(other.discography)
        for work in self.discography:
            if work and work in theirs:
                return work
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Artist):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


__all__ = ["Artist"]
