"""Commitlog CLI entry points.
This module exposes demonstration commands for the commit log.
It maps argparse commands onto history operations.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from cli.demo_command import add_demo_command, run_demo_command
from cli.render_command import add_render_command, run_render_command
from core.config import CommitLogConfig
from core.errors import CommitLogError
from core.logging_config import enable_event_output


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="commitlog", description="In-memory commit log demo")
    parser.add_argument(
        "--seed",
        type=int,
        help="Override COMMITLOG_RANDOM_SEED for this command",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print structured log events on stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_demo_command(subparsers)
    add_render_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the commitlog CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        enable_event_output()
    try:
        config = _build_config(args.seed)
        if args.command == "demo":
            return run_demo_command(config, args)
        if args.command == "render":
            return run_render_command(config, args)
    except CommitLogError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(seed: int | None) -> CommitLogConfig:
    """Build runtime config with optional seed override.

    Args:
        seed: Optional seed override.

    Returns:
        Validated config.
    """
    config = CommitLogConfig.from_env()
    if seed is not None:
        config = replace(config, random_seed=seed)
    return config
