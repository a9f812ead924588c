"""
Module: palindrome.checker

Purpose:
    Normalises a line of text and tests it for palindrome structure.

    Character policy: a character is kept only if it is an ASCII letter
    or digit ([A-Za-z0-9]) and is then mapped to ASCII lowercase. The
    policy does not depend on the process locale; accented letters and
    non-Latin digits are dropped.

Key Functions:
    - strip_line_terminator(): Remove one trailing newline
    - normalise_text(): Filter to ASCII alphanumerics and lowercase
    - is_palindrome_sequence(): Two-pointer equality scan
    - check_palindrome(): Full pipeline returning a PalindromeResult

Dependencies:
    - practice_toolkit.core.models.palindrome

Used By:
    - practice_toolkit.programs.palindrome
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from practice_toolkit.core.models.palindrome import PalindromeResult, PalindromeVerdict

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 1023


def strip_line_terminator(line: str) -> str:
    """
    Remove a single trailing line terminator, if present.

    Both LF and CRLF endings are removed; only one terminator is
    stripped, so "abc\\n\\n" becomes "abc\\n".
    """
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _keep(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def normalise_text(text: str) -> str:
    """
    Build the normalised sequence of ``text``.

    Retains ASCII alphanumerics left to right, lowercased. Applying it to
    its own output returns the output unchanged.

    Example:
        >>> normalise_text("A man, a plan, a canal: Panama")
        'amanaplanacanalpanama'
    """
    return "".join(ch.lower() for ch in text if _keep(ch))


def is_palindrome_sequence(seq: Sequence[str]) -> bool:
    """
    Compare opposing elements of ``seq`` from both ends inward.

    Stops at the first mismatch. An empty or single-element sequence is
    trivially a palindrome; callers that need a distinct outcome for
    empty input check for it first.
    """
    left, right = 0, len(seq) - 1
    while left < right:
        if seq[left] != seq[right]:
            return False
        left += 1
        right -= 1
    return True


def check_palindrome(line: str, max_length: Optional[int] = DEFAULT_MAX_LENGTH) -> PalindromeResult:
    """
    Check one line of text.

    Args:
        line: Raw line, optionally ending in a line terminator
        max_length: Characters examined after stripping the terminator;
            None disables the limit

    Returns:
        PalindromeResult whose verdict is NOTHING_TO_CHECK when no
        alphanumeric characters survive normalisation.

    Example:
        >>> check_palindrome("hello\\n").verdict
        <PalindromeVerdict.NOT_PALINDROME: 'not_palindrome'>
    """
    text = strip_line_terminator(line)
    if max_length is not None and len(text) > max_length:
        logger.debug("Truncating %d-character line to %d", len(text), max_length)
        text = text[:max_length]

    normalized = normalise_text(text)
    if not normalized:
        verdict = PalindromeVerdict.NOTHING_TO_CHECK
    elif is_palindrome_sequence(normalized):
        verdict = PalindromeVerdict.PALINDROME
    else:
        verdict = PalindromeVerdict.NOT_PALINDROME

    logger.debug("Normalised %d chars to %d: %s", len(text), len(normalized), verdict)
    return PalindromeResult(text=text, normalized=normalized, verdict=verdict)
