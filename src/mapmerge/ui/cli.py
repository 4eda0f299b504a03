from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import find_dotenv, load_dotenv

from mapmerge.adapters.event_log import LoggingEventLog
from mapmerge.app import diff_remote_map, export_map_file, merge_remote_map, open_remote_source
from mapmerge.common.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _add_remote_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--file",
        type=Path,
        help="Saved map file (JSON with nodes and edges) to read the remote map from",
    )
    source.add_argument(
        "--room",
        type=str,
        help="Shared room code to read the remote map from",
    )
    parser.add_argument(
        "--url",
        type=str,
        help="Base URL of the room server (defaults to MAPMERGE_REMOTE_URL)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds to wait for the room to synchronise (defaults to config)",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Merge and compare causal maps")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    merge = subparsers.add_parser("merge", help="Merge a remote map into the local map")
    _add_remote_arguments(merge)

    diff = subparsers.add_parser("diff", help="Report differences against a remote map")
    _add_remote_arguments(diff)

    export = subparsers.add_parser("export", help="Write the local map to a file")
    export.add_argument("path", type=Path, help="Destination JSON file")

    return parser.parse_args(list(argv))


def _validate(args: argparse.Namespace) -> None:
    if args.command not in {"merge", "diff"}:
        return
    if args.url is not None and args.room is None:
        raise ValueError("--url only applies together with --room")
    if args.timeout is not None and args.timeout <= 0:
        raise ValueError("Timeout must be positive")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        _validate(parsed_args)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else None)
    event_log = LoggingEventLog()

    try:
        if parsed_args.command == "merge":
            source = open_remote_source(
                file=parsed_args.file, room=parsed_args.room, url=parsed_args.url
            )
            result = merge_remote_map(source, event_log=event_log, timeout=parsed_args.timeout)
            log.info(
                "Merged %s: %s factor(s) added, %s cloned, %s link(s) added, %s bridged",
                source.describe(),
                len(result.added_nodes),
                len(result.cloned_nodes),
                len(result.added_edges),
                len(result.bridge_edges),
            )
        elif parsed_args.command == "diff":
            source = open_remote_source(
                file=parsed_args.file, room=parsed_args.room, url=parsed_args.url
            )
            report = diff_remote_map(source, event_log=event_log, timeout=parsed_args.timeout)
            if not report:
                log.info("No differences against %s", source.describe())
        elif parsed_args.command == "export":
            factors, links = export_map_file(parsed_args.path)
            log.info("Exported %s factor(s) and %s link(s)", factors, links)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point: load ``.env`` and trap Ctrl+C before ``main``."""
    load_dotenv(find_dotenv(usecwd=True))
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
