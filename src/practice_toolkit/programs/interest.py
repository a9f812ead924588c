"""Console program: simple and compound interest."""

from __future__ import annotations

from typing import List, Optional, TextIO

from practice_toolkit.config import DEFAULT_CONFIG, ProgramConfig
from practice_toolkit.core.models.interest import InterestResult
from practice_toolkit.errors import InputParseError
from practice_toolkit.interest.calculator import calculate_interest
from practice_toolkit.programs.console import ConsoleReader, report_invalid_input, run_console

PRINCIPAL_PROMPT = "Enter principal amount: "
RATE_PROMPT = "Enter annual interest rate (percent): "
TIME_PROMPT = "Enter time (years): "


def format_result(result: InterestResult, decimal_places: int = 2) -> List[str]:
    """Render the three result lines with fixed decimals (nan/inf print as such)."""
    d = decimal_places
    return [
        f"Simple Interest: {result.simple_interest:.{d}f}",
        f"Compound Interest: {result.compound_interest:.{d}f}",
        f"Amount after {result.time:.{d}f} years (compound): {result.compound_amount:.{d}f}",
    ]


def run(stdin: TextIO, stdout: TextIO, config: Optional[ProgramConfig] = None) -> int:
    """Prompt for principal, rate and time, then print the results. Always returns 0."""
    config = config or DEFAULT_CONFIG
    reader = ConsoleReader(stdin, stdout)
    try:
        principal = reader.read_float(PRINCIPAL_PROMPT)
        rate = reader.read_float(RATE_PROMPT)
        time = reader.read_float(TIME_PROMPT)
    except InputParseError as e:
        report_invalid_input(stdout, e)
        return 0

    result = calculate_interest(principal, rate, time)
    stdout.write("\n")
    for line in format_result(result, config.decimal_places):
        stdout.write(line + "\n")
    return 0


def main() -> int:
    return run_console(run)


if __name__ == "__main__":
    raise SystemExit(main())
