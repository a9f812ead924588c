"""
Module: errors

Purpose:
    Exception hierarchy shared by the computation modules and the
    console programs.

Key Classes:
    - PracticeError: Base class for every toolkit error
    - InputParseError: Malformed or missing numeric input
    - DomainRangeError: Numeric input outside the accepted domain
    - InvalidTermCountError: Fibonacci term count is not positive
    - MarksOutOfRangeError: Percentage marks outside 0-100

Used By:
    - practice_toolkit.sequence.fibonacci
    - practice_toolkit.grading.classifier
    - practice_toolkit.programs: maps errors to user-facing messages
"""

from __future__ import annotations


class PracticeError(Exception):
    """Base class for all practice toolkit errors."""


class InputParseError(PracticeError, ValueError):
    """Raised when console input is missing or cannot be parsed."""

    def __init__(self, raw: str | None, expected: str) -> None:
        self.raw = raw
        self.expected = expected
        if raw is None:
            message = f"Expected {expected}, got end of input"
        else:
            message = f"Expected {expected}, got {raw!r}"
        super().__init__(message)


class DomainRangeError(PracticeError, ValueError):
    """Raised when parsed input lies outside the domain of a computation."""

    #: Message shown to the user by the console programs.
    user_message = "Invalid input."


class InvalidTermCountError(DomainRangeError):
    """Raised when a Fibonacci term count is zero or negative."""

    user_message = "Please enter a positive integer."

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Term count must be positive: {count}")


class MarksOutOfRangeError(DomainRangeError):
    """Raised when percentage marks are outside the inclusive 0-100 range."""

    user_message = "Please enter marks between 0 and 100."

    def __init__(self, marks: int, minimum: int = 0, maximum: int = 100) -> None:
        self.marks = marks
        super().__init__(f"Marks must be between {minimum} and {maximum}: {marks}")
