"""Interactive command session over a loaded collaboration graph.

Commands are read one per line; each query command is followed by its
argument lines:

    bfs / dfs   source, destination
    not         source, destination, excluded artists..., ``*``
    quit        ends the session

Public API:
    SixDegrees: Reads commands from a text stream and writes answers.
"""

from __future__ import annotations

import logging
from typing import TextIO

from .graph.protocol import CollabGraphStore
from .loader import BLOCK_TERMINATOR
from .path import describe_path, format_no_path, format_path, report_path
from .traversal import bfs, bfs_excluding, dfs

logger = logging.getLogger(__name__)


class SixDegrees:
    """Command loop answering path queries against one graph.

    Query-level problems (unknown artists, no path) are written to the
    output stream as diagnostics; the session keeps going.  Structural
    graph errors are not caught.

    Attributes:
        graph: The collaboration graph queried by every command.
    """

    def __init__(self, graph: CollabGraphStore):
        self.graph = graph
        self._input: TextIO | None = None
        self._output: TextIO | None = None

    def play(self, input: TextIO, output: TextIO) -> None:
        """Run commands from *input* until ``quit`` or end of input."""
        self._input = input
        self._output = output
        try:
            while True:
                command = self._read_line()
                if command is None or command == "quit":
                    break
                self._dispatch(command)
        finally:
            self._input = None
            self._output = None

    # ── commands ──────────────────────────────────────────────

    def _dispatch(self, command: str) -> None:
        if command == "bfs":
            self._run_pair_query(bfs)
        elif command == "dfs":
            self._run_pair_query(dfs)
        elif command == "not":
            self._run_exclusion_query()
        else:
            logger.debug("Unrecognised command %r", command)
            self._write(f"{command} is not a command. Please try again.")

    def _run_pair_query(self, search) -> None:
        self.graph.clear_metadata()
        source = self._read_line() or ""
        dest = self._read_line() or ""
        if not self._check_artists([source, dest]):
            return
        search(self.graph, source, dest)
        self._print_path(source, dest)

    def _run_exclusion_query(self) -> None:
        self.graph.clear_metadata()
        names: list[str] = []
        while True:
            line = self._read_line()
            if line is None or line == BLOCK_TERMINATOR:
                break
            names.append(line)

        if not self._check_artists(names):
            return
        if len(names) < 2:
            self._write("not requires a source and a destination.")
            return
        source, dest, *excluded = names
        bfs_excluding(self.graph, source, dest, excluded)
        self._print_path(source, dest)

    # ── output ────────────────────────────────────────────────

    def _check_artists(self, names: list[str]) -> bool:
        """Report every name that is not an artist; True if all are."""
        valid = True
        for name in names:
            if not self.graph.is_vertex(name):
                self._write(f'"{name}" was not found in the dataset :(')
                valid = False
        return valid

    def _print_path(self, source: str, dest: str) -> None:
        path = report_path(self.graph, source, dest)
        if path is None:
            self._write(format_no_path(source, dest))
            return
        for line in format_path(describe_path(self.graph, path)):
            self._write(line)

    # ── stream helpers ────────────────────────────────────────

    def _read_line(self) -> str | None:
        line = self._input.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _write(self, line: str) -> None:
        self._output.write(line + "\n")


__all__ = ["SixDegrees"]
