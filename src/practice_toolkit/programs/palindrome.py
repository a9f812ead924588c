"""Console program: report whether a line of text is a palindrome."""

from __future__ import annotations

from typing import Dict, Optional, TextIO

from practice_toolkit.config import DEFAULT_CONFIG, ProgramConfig
from practice_toolkit.core.models.palindrome import PalindromeVerdict
from practice_toolkit.palindrome.checker import check_palindrome
from practice_toolkit.programs.console import ConsoleReader, run_console

VERDICT_MESSAGES: Dict[PalindromeVerdict, str] = {
    PalindromeVerdict.PALINDROME: "The input is a palindrome.",
    PalindromeVerdict.NOT_PALINDROME: "The input is not a palindrome.",
    PalindromeVerdict.NOTHING_TO_CHECK: "Empty or no alphanumeric characters to check.",
}


def run(stdin: TextIO, stdout: TextIO, config: Optional[ProgramConfig] = None) -> int:
    """Prompt for one line and print the verdict. Always returns 0."""
    config = config or DEFAULT_CONFIG
    line = ConsoleReader(stdin, stdout).read_line(
        f"Enter a string (max {config.max_line_length} chars): "
    )
    result = check_palindrome(line, max_length=config.max_line_length)
    stdout.write(VERDICT_MESSAGES[result.verdict] + "\n")
    return 0


def main() -> int:
    return run_console(run)


if __name__ == "__main__":
    raise SystemExit(main())
