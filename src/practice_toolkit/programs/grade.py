"""Console program: classify percentage marks as a letter grade."""

from __future__ import annotations

import logging
from typing import TextIO

from practice_toolkit.errors import InputParseError, MarksOutOfRangeError
from practice_toolkit.grading.classifier import classify_marks
from practice_toolkit.programs.console import ConsoleReader, report_invalid_input, run_console

logger = logging.getLogger(__name__)

PROMPT = "Enter percentage marks (0-100): "


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Prompt for marks and print ``Grade: X``. Always returns 0."""
    try:
        marks = ConsoleReader(stdin, stdout).read_int(PROMPT)
    except InputParseError as e:
        report_invalid_input(stdout, e)
        return 0

    try:
        grade = classify_marks(marks)
    except MarksOutOfRangeError as e:
        logger.warning("%s", e)
        stdout.write(f"{e.user_message}\n")
        return 0

    stdout.write(f"Grade: {grade.letter}\n")
    return 0


def main() -> int:
    return run_console(run)


if __name__ == "__main__":
    raise SystemExit(main())
