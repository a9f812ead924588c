"""
Module: cli

Purpose:
    ``practice`` launcher: runs one of the console programs by name.

Example:
    $ practice grade
    Enter percentage marks (0-100): 85
    Grade: B
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from practice_toolkit import __version__
from practice_toolkit.programs import PROGRAMS
from practice_toolkit.programs.console import run_console


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="practice",
        description="Run one of the practice console programs.",
    )
    parser.add_argument("program", choices=sorted(PROGRAMS), help="Program to run")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return run_console(PROGRAMS[args.program], verbose=args.verbose)


if __name__ == "__main__":
    raise SystemExit(main())
