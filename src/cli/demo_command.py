"""Demonstration scenario command for commitlog CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import CommitLogConfig
from history.commit_log import CommitLog
from history.rendering import (
    format_commit_line,
    format_find_line,
    format_merge_line,
    format_truncate_line,
)

_MASTER_MESSAGES = ("Initial commit", "Add README", "Implement login system")
_FEATURE_MESSAGES = ("Start feature X", "Fix bug in feature X")


def add_demo_command(subparsers: Any) -> None:
    """Register demo subcommand."""
    parser = subparsers.add_parser(
        "demo",
        help="Replay the master/feature branch walkthrough",
    )
    parser.add_argument(
        "--show-id",
        type=int,
        help="Additional commit id to look up on master",
    )


def run_demo_command(config: CommitLogConfig, args: argparse.Namespace) -> int:
    """Run the walkthrough and print every status line."""
    id_source = config.build_id_source()
    master = CommitLog(id_source=id_source)
    feature = CommitLog(id_source=id_source)
    _commit_all(master, _MASTER_MESSAGES)
    _commit_all(feature, _FEATURE_MESSAGES)

    _print_section("Master Branch")
    print(master.render())
    _print_section("Feature Branch")
    print(feature.render())

    _print_section("Reset last commit on master")
    print(format_truncate_line(master.truncate_last()))
    print(master.render())

    _print_section("Merged History")
    merged = CommitLog.merge(master, feature)
    print(format_merge_line())
    print(format_truncate_line(merged.truncate_last()))
    print(merged.render())

    _print_section("Master Branch Unchanged after merge")
    print(master.render())
    _print_section("Feature Branch Unchanged after merge")
    print(feature.render())

    _print_section("Demonstrate gitShow")
    master_copy = master.duplicate()
    first_id = master_copy.records()[0].commit_id
    print(format_find_line(first_id, master_copy.find_by_id(first_id)))
    if args.show_id is not None:
        print(format_find_line(args.show_id, master_copy.find_by_id(args.show_id)))
    return 0


def _commit_all(log: CommitLog, messages: tuple[str, ...]) -> None:
    for message in messages:
        log.append(message)
        print(format_commit_line(log.records()[-1]))


def _print_section(title: str) -> None:
    print(f"\n== {title} ==")
