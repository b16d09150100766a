#!/usr/bin/env python3
"""Run a command with variables from env files.

Usage:
    gofr-dotenv [-f FILES] [-o] [-i] [--require KEY]... [-v] command [args...]

Examples:
    # Load ./.env (must exist) and start the app
    gofr-dotenv python app.py

    # Several files, first one wins for keys set twice; skip missing files
    gofr-dotenv -i -f .env.local,.env pytest

    # Let the files replace variables already set in the shell
    gofr-dotenv -o -f .env.test make test

Exit codes:
    The command's own exit code; 1 if an env file cannot be loaded or a
    required key is missing; 127 if the command cannot be found.
"""

import argparse
import logging
import subprocess
import sys
from typing import List, Optional, Sequence

from gofr_dotenv.config import get_settings
from gofr_dotenv.exceptions import DotenvError
from gofr_dotenv.instrumentation import LoggingInstrumenter
from gofr_dotenv.loader import Loader
from gofr_dotenv.logger import create_logger


def split_files(value: str) -> List[str]:
    """Split a comma-separated -f value, dropping empty entries."""
    return [name.strip() for name in value.split(",") if name.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gofr-dotenv",
        description="Load env files into the environment and run a command",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXAMPLES:
  %(prog)s python app.py
  %(prog)s -i -f .env.local,.env pytest
  %(prog)s -o -f .env.test make test
        """,
    )
    parser.add_argument(
        "-f", "--files",
        type=split_files,
        default=[],
        help="Comma-separated list of env files. Default: the configured default file (.env)",
    )
    parser.add_argument(
        "-o", "--overload",
        action="store_true",
        help="Replace variables that are already set (implies skipping missing files)",
    )
    parser.add_argument(
        "-i", "--ignore",
        action="store_true",
        help="Skip env files that do not exist instead of failing",
    )
    parser.add_argument(
        "--require",
        action="append",
        default=[],
        metavar="KEY",
        help="Fail unless KEY is set after loading (repeatable)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log each loaded file to stderr",
    )
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Command to run")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    command = list(args.command)
    if command and command[0] == "--":
        command = command[1:]
    if not command:
        parser.error("a command to run is required")

    try:
        if args.verbose:
            log = get_settings().log
            logger = create_logger(level=logging.DEBUG, json_format=log.json_format)
            loader = Loader(logger=logger, instrumenter=LoggingInstrumenter(logger))
        else:
            loader = Loader()

        if args.overload:
            loader.overload(*args.files)
        elif args.ignore:
            loader.load(*args.files)
        else:
            loader.load_strict(*args.files)
        loader.require_keys(*args.require)
    except DotenvError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    try:
        return subprocess.call(command)
    except FileNotFoundError:
        print(f"ERROR: command not found: {command[0]}", file=sys.stderr)
        return 127


if __name__ == "__main__":
    sys.exit(main())
