"""Command-line entry point: load a data file, then answer path queries.

Usage:
    sixdegrees DATA_FILE                       # commands from stdin
    sixdegrees DATA_FILE COMMAND_FILE          # commands from a file
    sixdegrees DATA_FILE COMMAND_FILE OUT_FILE # answers written to a file
    sixdegrees DATA_FILE --backend kuzu --db-path /tmp/collab-db
"""

from __future__ import annotations

import argparse
import logging
import sys

from .exceptions import CollabGraphError
from .graph import BACKENDS, create_graph
from .loader import load_graph
from .session import SixDegrees

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sixdegrees",
        description="Find chains of collaborations between artists.",
    )
    parser.add_argument("data_file", help="Artist data file (blocks ending in '*')")
    parser.add_argument(
        "command_file",
        nargs="?",
        help="File of commands to run (default: standard input)",
    )
    parser.add_argument(
        "output_file",
        nargs="?",
        help="File to write answers to (default: standard output)",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default="memory",
        help="Graph storage backend (default: memory)",
    )
    parser.add_argument(
        "--db-path",
        default=None,
        help="Kuzu database directory; in-memory when omitted",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    graph = create_graph(args.backend, db_path=args.db_path)
    try:
        try:
            load_graph(args.data_file, graph)
        except OSError:
            print(f"{args.data_file} cannot be opened.", file=sys.stderr)
            return 1
        except CollabGraphError as e:
            print(f"{args.data_file}: {e}", file=sys.stderr)
            return 1
        logger.info("Loaded %d artists from %s", len(graph), args.data_file)

        session = SixDegrees(graph)
        if args.command_file is None:
            session.play(sys.stdin, sys.stdout)
            return 0

        try:
            commands = open(args.command_file, encoding="utf-8")
        except OSError:
            print(f"{args.command_file} cannot be opened.", file=sys.stderr)
            return 1
        with commands:
            if args.output_file is None:
                session.play(commands, sys.stdout)
            else:
                with open(args.output_file, "w", encoding="utf-8") as out:
                    session.play(commands, out)
        return 0
    finally:
        graph.close()


if __name__ == "__main__":
    sys.exit(main())
