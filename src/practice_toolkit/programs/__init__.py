"""
Console programs.

Each module exposes ``run(stdin, stdout) -> int`` and ``main() -> int``.
PROGRAMS maps the launcher's program names to their ``run`` functions.
"""

from __future__ import annotations

from typing import Callable, Dict, TextIO

from . import fibonacci, grade, interest, palindrome

PROGRAMS: Dict[str, Callable[[TextIO, TextIO], int]] = {
    "fibonacci": fibonacci.run,
    "grade": grade.run,
    "palindrome": palindrome.run,
    "interest": interest.run,
}

__all__ = ["PROGRAMS"]
