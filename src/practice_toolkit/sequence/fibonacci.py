"""
Module: sequence.fibonacci

Purpose:
    Fibonacci sequence generation. Terms start 0, 1, 1, 2, ... and are
    produced lazily by a one-shot generator.

Key Functions:
    - fibonacci_terms(): Lazy generator of the first N terms
    - fibonacci_term(): Single 1-indexed term
    - format_sequence(): Space-separated rendering

Dependencies:
    - practice_toolkit.errors

Used By:
    - practice_toolkit.programs.fibonacci
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from practice_toolkit.errors import InvalidTermCountError

logger = logging.getLogger(__name__)


def fibonacci_terms(count: int) -> Iterator[int]:
    """
    Return a generator over the first ``count`` Fibonacci terms.

    The count is checked immediately, so an invalid count fails at call
    time instead of on the first ``next()``.

    Args:
        count: Number of terms to produce (must be positive)

    Returns:
        Iterator yielding ``count`` ints; exhausted after one pass.

    Raises:
        InvalidTermCountError: If count <= 0.

    Example:
        >>> list(fibonacci_terms(5))
        [0, 1, 1, 2, 3]
    """
    if count <= 0:
        raise InvalidTermCountError(count)
    logger.debug("Generating %d Fibonacci terms", count)
    return _generate(count)


def _generate(count: int) -> Iterator[int]:
    previous, current = 0, 1
    for _ in range(count):
        yield previous
        previous, current = current, previous + current


def fibonacci_term(position: int) -> int:
    """
    Get a single term by 1-indexed position (term 1 is 0, term 2 is 1).

    Raises:
        InvalidTermCountError: If position <= 0.
    """
    term = 0
    for term in fibonacci_terms(position):
        pass
    return term


def format_sequence(terms: Iterable[int]) -> str:
    """Join terms with a single space, no trailing separator."""
    return " ".join(str(term) for term in terms)
