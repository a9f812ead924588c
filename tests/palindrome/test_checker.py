"""
Tests for palindrome.checker

Test Coverage:
- strip_line_terminator: LF/CRLF handling, single terminator only
- normalise_text: ASCII character policy and idempotence
- is_palindrome_sequence: Two-pointer scan
- check_palindrome: Verdicts, truncation, nothing-to-check
"""

import pytest

from practice_toolkit.core.models.palindrome import PalindromeVerdict
from practice_toolkit.palindrome.checker import (
    check_palindrome,
    is_palindrome_sequence,
    normalise_text,
    strip_line_terminator,
)


class TestStripLineTerminator:
    """Tests for strip_line_terminator()."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("abc\n", "abc"),
            ("abc\r\n", "abc"),
            ("abc", "abc"),
            ("abc\n\n", "abc\n"),
            ("\n", ""),
            ("", ""),
        ],
    )
    def test_strip_when_line_then_one_terminator_removed(self, line, expected):
        assert strip_line_terminator(line) == expected


class TestNormaliseText:
    """Tests for normalise_text()."""

    def test_normalise_when_sentence_then_alphanumerics_lowercased(self):
        assert normalise_text("A man, a plan, a canal: Panama") == "amanaplanacanalpanama"

    def test_normalise_when_digits_then_kept(self):
        assert normalise_text("Route 66!") == "route66"

    def test_normalise_when_non_ascii_then_dropped(self):
        """Only [A-Za-z0-9] survive, whatever the locale."""
        assert normalise_text("Été ß ٣") == "t"

    def test_normalise_when_punctuation_only_then_empty(self):
        assert normalise_text("!!! ...") == ""

    @pytest.mark.parametrize("text", ["A man, a plan", "Été 12", "", "x_Y-z"])
    def test_normalise_when_applied_twice_then_same_as_once(self, text):
        once = normalise_text(text)
        assert normalise_text(once) == once


class TestIsPalindromeSequence:
    """Tests for is_palindrome_sequence()."""

    @pytest.mark.parametrize("seq", ["a", "aa", "aba", "abba", "racecar"])
    def test_scan_when_palindrome_then_true(self, seq):
        assert is_palindrome_sequence(seq) is True

    @pytest.mark.parametrize("seq", ["ab", "abca", "hello"])
    def test_scan_when_mismatch_then_false(self, seq):
        assert is_palindrome_sequence(seq) is False

    def test_scan_when_list_then_compares_elements(self):
        assert is_palindrome_sequence([1, 2, 1]) is True


class TestCheckPalindrome:
    """Tests for check_palindrome()."""

    def test_check_when_panama_then_palindrome(self):
        result = check_palindrome("A man, a plan, a canal: Panama\n")
        assert result.verdict is PalindromeVerdict.PALINDROME
        assert result.is_palindrome is True
        assert result.normalized == "amanaplanacanalpanama"
        assert result.text == "A man, a plan, a canal: Panama"

    def test_check_when_hello_then_not_palindrome(self):
        result = check_palindrome("hello")
        assert result.verdict is PalindromeVerdict.NOT_PALINDROME
        assert result.is_palindrome is False

    @pytest.mark.parametrize("line", ["!!!", "", "\n", "   \n"])
    def test_check_when_no_alphanumerics_then_nothing_to_check(self, line):
        result = check_palindrome(line)
        assert result.verdict is PalindromeVerdict.NOTHING_TO_CHECK
        assert result.is_palindrome is None

    def test_check_when_crlf_then_terminator_ignored(self):
        assert check_palindrome("Abba\r\n").is_palindrome is True

    def test_check_when_longer_than_limit_then_truncated(self):
        """Characters past max_length are not examined."""
        result = check_palindrome("abaXYZ", max_length=3)
        assert result.text == "aba"
        assert result.is_palindrome is True

    def test_check_when_no_limit_then_full_line_used(self):
        result = check_palindrome("abaXYZ", max_length=None)
        assert result.is_palindrome is False

    def test_check_when_default_limit_then_1023_chars(self):
        line = "a" * 1023 + "b"
        result = check_palindrome(line)
        assert len(result.text) == 1023
        assert result.is_palindrome is True
