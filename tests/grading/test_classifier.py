"""
Tests for grading.classifier

Test Coverage:
- marks_bucket: Integer truncation
- classify_bucket: Bucket to letter mapping
- classify_marks: Range validation and classification
"""

import pytest

from practice_toolkit.common.thresholds import GradeThresholds
from practice_toolkit.core.models.grade import GradeLetter
from practice_toolkit.errors import MarksOutOfRangeError
from practice_toolkit.grading.classifier import (
    classify_bucket,
    classify_marks,
    marks_bucket,
)


class TestMarksBucket:
    """Tests for marks_bucket()."""

    @pytest.mark.parametrize("marks, bucket", [(0, 0), (9, 0), (59, 5), (89, 8), (90, 9), (100, 10)])
    def test_bucket_when_marks_then_integer_quotient(self, marks, bucket):
        assert marks_bucket(marks) == bucket


class TestClassifyBucket:
    """Tests for classify_bucket()."""

    @pytest.mark.parametrize(
        "bucket, letter",
        [
            (10, GradeLetter.A),
            (9, GradeLetter.A),
            (8, GradeLetter.B),
            (7, GradeLetter.C),
            (6, GradeLetter.D),
            (5, GradeLetter.F),
            (0, GradeLetter.F),
        ],
    )
    def test_classify_when_bucket_then_letter(self, bucket, letter):
        assert classify_bucket(bucket) is letter

    def test_classify_when_unknown_bucket_then_f(self):
        """Mapping is total: any other int falls through to F."""
        assert classify_bucket(11) is GradeLetter.F
        assert classify_bucket(-4) is GradeLetter.F


class TestClassifyMarks:
    """Tests for classify_marks()."""

    @pytest.mark.parametrize(
        "marks, letter",
        [
            (95, GradeLetter.A),
            (100, GradeLetter.A),
            (90, GradeLetter.A),
            (89, GradeLetter.B),
            (85, GradeLetter.B),
            (70, GradeLetter.C),
            (60, GradeLetter.D),
            (59, GradeLetter.F),
            (0, GradeLetter.F),
        ],
    )
    def test_classify_when_in_range_then_letter(self, marks, letter):
        grade = classify_marks(marks)
        assert grade.marks == marks
        assert grade.letter is letter

    @pytest.mark.parametrize("marks", [-1, 101, 1000])
    def test_classify_when_out_of_range_then_raises_error(self, marks):
        with pytest.raises(MarksOutOfRangeError) as exc:
            classify_marks(marks)
        assert exc.value.marks == marks
        assert exc.value.user_message == "Please enter marks between 0 and 100."

    def test_classify_when_custom_thresholds_then_uses_them(self):
        strict = GradeThresholds(a_bucket=10, b_bucket=9, c_bucket=8, d_bucket=7)
        assert classify_marks(95, strict).letter is GradeLetter.B
        assert classify_marks(65, strict).letter is GradeLetter.F

    def test_classify_when_wider_range_then_not_rejected(self):
        """Marks valid under custom thresholds classify without error."""
        grade = classify_marks(120, GradeThresholds(max_marks=150))
        assert grade.marks == 120
        assert grade.bucket == 12
        assert grade.letter is GradeLetter.F

    def test_classify_when_custom_bucket_size_then_bucket_matches(self):
        """The stored bucket is the one the letter was chosen from."""
        thresholds = GradeThresholds(max_marks=20, bucket_size=2)
        grade = classify_marks(17, thresholds)
        assert grade.bucket == 8
        assert grade.bucket == marks_bucket(17, thresholds)
        assert grade.letter is GradeLetter.B

    @pytest.mark.parametrize("marks, bucket", [(89, 8), (100, 10), (0, 0)])
    def test_classify_when_default_thresholds_then_bucket_truncates(self, marks, bucket):
        assert classify_marks(marks).bucket == bucket
