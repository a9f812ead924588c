"""Common settings shared across the toolkit."""

from __future__ import annotations

from .thresholds import GRADE_THRESHOLDS, GradeThresholds

__all__ = [
    "GRADE_THRESHOLDS",
    "GradeThresholds",
]
