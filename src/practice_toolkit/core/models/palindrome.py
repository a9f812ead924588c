"""
Module: palindrome

Purpose:
    Result types for the palindrome checker. "Nothing to check" is a
    verdict of its own rather than a vacuous True.

Key Classes:
    - PalindromeVerdict: Three-state outcome
    - PalindromeResult: Raw text, normalised sequence and verdict

Used By:
    - practice_toolkit.palindrome.checker
    - practice_toolkit.programs.palindrome
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PalindromeVerdict(str, Enum):
    """Outcome of a palindrome check."""
    PALINDROME = "palindrome"
    NOT_PALINDROME = "not_palindrome"
    NOTHING_TO_CHECK = "nothing_to_check"  # No alphanumerics after normalisation

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PalindromeResult:
    """
    Outcome of checking one line of text.

    Attributes:
        text: Input line with its terminator stripped (and truncated)
        normalized: ASCII alphanumerics of text, lowercased
        verdict: PALINDROME, NOT_PALINDROME or NOTHING_TO_CHECK
    """

    text: str
    normalized: str
    verdict: PalindromeVerdict

    def __post_init__(self) -> None:
        if (self.verdict is PalindromeVerdict.NOTHING_TO_CHECK) != (not self.normalized):
            raise ValueError(
                f"Verdict {self.verdict} inconsistent with normalized {self.normalized!r}"
            )

    @property
    def is_palindrome(self) -> Optional[bool]:
        """True/False for a checked sequence, None when there was nothing to check."""
        if self.verdict is PalindromeVerdict.NOTHING_TO_CHECK:
            return None
        return self.verdict is PalindromeVerdict.PALINDROME
