"""Text normalisation and palindrome checking."""

from .checker import (
    check_palindrome,
    is_palindrome_sequence,
    normalise_text,
    strip_line_terminator,
)

__all__ = [
    "check_palindrome",
    "is_palindrome_sequence",
    "normalise_text",
    "strip_line_terminator",
]
