"""Centralized threshold configuration.

This module holds the fixed boundaries used by the grade classifier so the
mapping table lives in one place.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GradeThresholds:
    """Boundaries for percentage marks and their decile buckets."""

    min_marks: int = 0
    max_marks: int = 100
    bucket_size: int = 10  # Marks per bucket; bucket = marks // bucket_size

    # Lowest bucket that earns each letter; anything below d_bucket is F
    a_bucket: int = 9  # 90-100, bucket 10 only holds a perfect score
    b_bucket: int = 8
    c_bucket: int = 7
    d_bucket: int = 6


# Global instance for easy import
GRADE_THRESHOLDS = GradeThresholds()
