"""
Command-line entry point for running a command file against a fresh tree.
"""

import argparse
import logging
import sys

from dirtree.config import CollisionPolicy, TreeSettings
from dirtree.exceptions.core import CommandParseError
from dirtree.execution.executor import Executor

logger = logging.getLogger(__name__)

EXIT_PARSE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirtree CLI.

    Returns:
        Configured parser instance
    """
    p = argparse.ArgumentParser(
        prog="dirtree",
        description="Run CREATE/DELETE/MOVE/LIST commands against an in-memory directory tree.",
    )
    p.add_argument("commands_file", help="File with one command per line.")
    p.add_argument(
        "--on-collision",
        choices=[policy.value for policy in CollisionPolicy],
        default=CollisionPolicy.overwrite.value,
        help="Replace an existing node of the same name, or fail the command.",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr.",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    """
    Run a command file and print the results.

    Params:
        argv: Optional argument list; defaults to sys.argv

    Returns:
        Process exit code (0 on success, 2 on a fatal parse error)
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    settings = TreeSettings(collision_policy=CollisionPolicy(args.on_collision))
    executor = Executor(settings=settings)
    logger.debug("Running %s", args.commands_file)

    try:
        executor.run_file(args.commands_file)
    except CommandParseError as e:
        print(e, file=sys.stderr)
        return EXIT_PARSE_ERROR
    return 0
