"""Console program: print the first N Fibonacci terms."""

from __future__ import annotations

import logging
from typing import TextIO

from practice_toolkit.errors import InputParseError, InvalidTermCountError
from practice_toolkit.programs.console import ConsoleReader, report_invalid_input, run_console
from practice_toolkit.sequence.fibonacci import fibonacci_terms, format_sequence

logger = logging.getLogger(__name__)

PROMPT = "Enter number of terms: "


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Prompt for a term count and print the sequence. Always returns 0."""
    try:
        count = ConsoleReader(stdin, stdout).read_int(PROMPT)
    except InputParseError as e:
        report_invalid_input(stdout, e)
        return 0

    try:
        terms = fibonacci_terms(count)
    except InvalidTermCountError as e:
        logger.warning("%s", e)
        stdout.write(f"{e.user_message}\n")
        return 0

    stdout.write(f"Fibonacci sequence ({count} terms):\n")
    stdout.write(format_sequence(terms) + "\n")
    return 0


def main() -> int:
    return run_console(run)


if __name__ == "__main__":
    raise SystemExit(main())
