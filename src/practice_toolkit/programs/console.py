"""
Module: programs.console

Purpose:
    Prompt-and-read helpers shared by the console programs. Numbers are
    read as whitespace-separated tokens, so several answers may share one
    line and blank lines are skipped; text is read a whole line at a time.

Key Classes:
    - ConsoleReader: Prompts on stdout and reads tokens or lines from stdin

Key Functions:
    - prompt(): Write a prompt and flush
    - report_invalid_input(): Print the parse-failure message
    - run_console(): Run a program on sys.stdin/sys.stdout

Dependencies:
    - practice_toolkit.errors

Used By:
    - practice_toolkit.programs.fibonacci
    - practice_toolkit.programs.grade
    - practice_toolkit.programs.palindrome
    - practice_toolkit.programs.interest
"""

from __future__ import annotations

import logging
import re
import sys
from collections import deque
from typing import Callable, Deque, Optional, TextIO

from practice_toolkit.errors import InputParseError
from practice_toolkit.logging_setup import configure_logging

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input."

_INT_RE = re.compile(r"[+-]?\d+")


def prompt(stdout: TextIO, text: str) -> None:
    """Write ``text`` with no trailing newline so the answer follows it."""
    stdout.write(text)
    stdout.flush()


class ConsoleReader:
    """
    Reads answers from an input stream after writing prompts.

    Tokens left over on a line are kept for the next numeric read, so
    "1000 10 2" answers three prompts at once.

    Example:
        >>> reader = ConsoleReader(io.StringIO("1000 10\\n2\\n"), io.StringIO())
        >>> reader.read_float("P: "), reader.read_float("R: "), reader.read_float("T: ")
        (1000.0, 10.0, 2.0)
    """

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self._pending: Deque[str] = deque()

    def read_token(self, text: str) -> Optional[str]:
        """Prompt and return the next whitespace-separated token, or None at end of input."""
        prompt(self.stdout, text)
        while not self._pending:
            line = self.stdin.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_line(self, text: str) -> str:
        """
        Prompt and return one raw line, terminator included.

        Returns an empty string at end of input.
        """
        prompt(self.stdout, text)
        return self.stdin.readline()

    def read_int(self, text: str) -> int:
        """
        Prompt and parse one integer token (optional sign, decimal digits).

        Raises:
            InputParseError: On end of input or a non-integer token.
        """
        raw = self.read_token(text)
        if raw is None or not _INT_RE.fullmatch(raw):
            raise InputParseError(raw, "an integer")
        return int(raw)

    def read_float(self, text: str) -> float:
        """
        Prompt and parse one real number token.

        Anything float() accepts is valid, including "inf" and "nan".

        Raises:
            InputParseError: On end of input or an unparseable token.
        """
        raw = self.read_token(text)
        if raw is None:
            raise InputParseError(raw, "a number")
        try:
            return float(raw)
        except ValueError as e:
            raise InputParseError(raw, "a number") from e


def report_invalid_input(stdout: TextIO, error: InputParseError) -> None:
    """Log the parse failure and print the user-facing message."""
    logger.warning("Rejected input: %s", error)
    stdout.write(f"{INVALID_INPUT_MESSAGE}\n")


def run_console(run: Callable[[TextIO, TextIO], int], verbose: bool = False) -> int:
    """
    Run a program against the process streams.

    Returns the program's exit status, or 130 if interrupted.
    """
    configure_logging(verbose)
    try:
        return run(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return 130
