"""
Module: grade

Purpose:
    Provides the Grade dataclass - a classified percentage score with the
    bucket and letter it was classified by.

Key Classes:
    - GradeLetter: The five fixed letter labels
    - Grade: Marks, bucket and letter

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - practice_toolkit.grading.classifier
    - practice_toolkit.programs.grade
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GradeLetter(str, Enum):
    """Letter grade label."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Grade:
    """
    Classified percentage score (immutable).

    Range checking belongs to the classifier, which knows the thresholds
    in use; Grade only records the outcome.

    Attributes:
        marks: Integer score that was classified
        bucket: Classification key derived from marks (marks // bucket_size)
        letter: Letter the bucket mapped to

    Invariants:
        - letter is a GradeLetter

    Example:
        >>> g = Grade(89, 8, GradeLetter.B)
        >>> g.letter
        <GradeLetter.B: 'B'>
    """

    marks: int
    bucket: int
    letter: GradeLetter

    def __post_init__(self) -> None:
        """Validate grade on construction."""
        if not isinstance(self.letter, GradeLetter):
            raise ValueError(f"Invalid grade letter: {self.letter!r}")

    def __repr__(self) -> str:
        return f"Grade({self.marks}, {self.letter.value!r})"
