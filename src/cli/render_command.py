"""Ad-hoc render command for commitlog CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import CommitLogConfig
from history.commit_log import CommitLog
from history.rendering import format_commit_line, format_truncate_line


def add_render_command(subparsers: Any) -> None:
    """Register render subcommand."""
    parser = subparsers.add_parser(
        "render",
        help="Commit the given messages to a fresh log and print it",
    )
    parser.add_argument("messages", nargs="*", help="Commit messages, oldest first")
    parser.add_argument(
        "--truncate",
        type=int,
        default=0,
        help="Number of truncate-last calls before rendering",
    )


def run_render_command(config: CommitLogConfig, args: argparse.Namespace) -> int:
    """Build a log from positional messages and print its rendering.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    if args.truncate < 0:
        print(f"error=--truncate must be non-negative, got {args.truncate}")
        return 1
    log = CommitLog(id_source=config.build_id_source())
    for message in args.messages:
        log.append(message)
        print(format_commit_line(log.records()[-1]))
    for _ in range(args.truncate):
        print(format_truncate_line(log.truncate_last()))
    print(log.render())
    return 0
