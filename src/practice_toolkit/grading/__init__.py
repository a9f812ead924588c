"""Percentage to letter grade classification."""

from .classifier import classify_bucket, classify_marks, marks_bucket

__all__ = [
    "classify_bucket",
    "classify_marks",
    "marks_bucket",
]
