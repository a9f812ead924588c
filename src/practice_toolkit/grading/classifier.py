"""
Module: grading.classifier

Purpose:
    Maps a percentage score to a letter grade via its decile bucket.
    Boundaries come from common.thresholds; integer truncation decides
    ties, so 89 lands in bucket 8 and earns a B.

Key Functions:
    - marks_bucket(): Integer decile of a score
    - classify_bucket(): Bucket to letter (total over int)
    - classify_marks(): Validated score to Grade

Dependencies:
    - practice_toolkit.common.thresholds
    - practice_toolkit.core.models.grade

Used By:
    - practice_toolkit.programs.grade
"""

from __future__ import annotations

import logging

from practice_toolkit.common.thresholds import GRADE_THRESHOLDS, GradeThresholds
from practice_toolkit.core.models.grade import Grade, GradeLetter
from practice_toolkit.errors import MarksOutOfRangeError

logger = logging.getLogger(__name__)


def marks_bucket(marks: int, thresholds: GradeThresholds = GRADE_THRESHOLDS) -> int:
    """Return the classification bucket for ``marks`` (integer division)."""
    return marks // thresholds.bucket_size


def classify_bucket(bucket: int, thresholds: GradeThresholds = GRADE_THRESHOLDS) -> GradeLetter:
    """
    Classify a bucket into one of the five letters.

    Args:
        bucket: Decile bucket; any int is accepted, unknown buckets are F

    Returns:
        A for 9-10, B for 8, C for 7, D for 6, F otherwise.
    """
    if bucket in (thresholds.a_bucket, thresholds.a_bucket + 1):
        return GradeLetter.A
    if bucket == thresholds.b_bucket:
        return GradeLetter.B
    if bucket == thresholds.c_bucket:
        return GradeLetter.C
    if bucket == thresholds.d_bucket:
        return GradeLetter.D
    return GradeLetter.F


def classify_marks(marks: int, thresholds: GradeThresholds = GRADE_THRESHOLDS) -> Grade:
    """
    Validate a percentage score and classify it.

    Args:
        marks: Integer score

    Returns:
        Grade carrying the marks, the bucket they fell in and its letter.

    Raises:
        MarksOutOfRangeError: If marks is outside [min_marks, max_marks].

    Example:
        >>> classify_marks(95).letter
        <GradeLetter.A: 'A'>
    """
    if not thresholds.min_marks <= marks <= thresholds.max_marks:
        raise MarksOutOfRangeError(marks, thresholds.min_marks, thresholds.max_marks)

    bucket = marks_bucket(marks, thresholds)
    letter = classify_bucket(bucket, thresholds)
    logger.debug("Marks %d -> bucket %d -> grade %s", marks, bucket, letter)
    return Grade(marks=marks, bucket=bucket, letter=letter)
