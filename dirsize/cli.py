"""Command-line front door for dirsize.

Parses the optional directory and log-file arguments, opens the log sink,
and dispatches into the reporter. Setup failures exit with status 1.
"""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import NoReturn

from . import __version__
from .config import load_log_file
from .logsink import open_log_sink
from .report import EXIT_SETUP_ERROR, run


class _ArgumentParser(argparse.ArgumentParser):
    """argparse parser that reports usage errors with the setup-error status."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_SETUP_ERROR, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="dirsize",
        description="Print the total size of each top-level subdirectory of a directory.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory whose subdirectories are sized. Defaults to current directory.",
    )
    parser.add_argument(
        "log_file",
        nargs="?",
        default=None,
        help="Log file to append to. Defaults to the configured log file or dirsize_error.log.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None, default_root: Path | None = None) -> int:
    """Parse CLI arguments, run the report, and return the exit status.

    ``default_root`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)

    if default_root is None:
        default_root = Path.cwd()
    root = Path(args.directory) if args.directory is not None else default_root
    log_path = Path(args.log_file) if args.log_file is not None else load_log_file()

    with ExitStack() as stack:
        try:
            logger = stack.enter_context(open_log_sink(log_path))
        except OSError:
            print(f"Unable to open log file: {log_path}", file=sys.stderr)
            return EXIT_SETUP_ERROR
        if args.directory == "":
            logger.error("Invalid directory path: %r", args.directory)
            return EXIT_SETUP_ERROR
        return run(root, logger)


if __name__ == "__main__":
    raise SystemExit(main())
