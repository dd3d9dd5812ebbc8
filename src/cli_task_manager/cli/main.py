# src/cli_task_manager/cli/main.py

"""
CLI entrypoint.

Resolves settings, initializes logging, then runs exactly one subcommand
against the task file. Returns the process exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from ..config import Settings, get_settings
from ..logging_setup import resolve_level, setup_logging
from ..tasks.task_errors import TaskError
from ..tasks.task_store import TaskStore
from .commands import registry

logger = logging.getLogger(__name__)

PROG = "cli-task-manager"


def _version() -> str:
    try:
        return version(PROG)
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Keep a simple list of tasks.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    parser.add_argument(
        "--file",
        type=Path,
        metavar="PATH",
        help="Use this task file instead of the one in the data directory.",
    )
    registry.add_subparsers(parser)
    return parser


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    parser = build_parser()
    # Usage errors exit here with status 2.
    args = parser.parse_args(argv)

    if settings is None:
        settings = get_settings()
    if args.file is not None:
        settings = replace(settings, tasks_path=args.file.expanduser())

    console_level = resolve_level(settings.log_level)
    try:
        setup_logging(console_level=console_level, log_file=settings.log_file)
    except OSError as exc:
        # An unusable log file must not block the task command itself.
        setup_logging(console_level=console_level)
        logger.warning("Cannot open log file %s (%s); logging to console only", settings.log_file, exc)
    logger.debug("Running %s with tasks file %s", args.command, settings.tasks_path)

    store = TaskStore(settings.tasks_path)
    try:
        registry.run(store, args)
    except TaskError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
