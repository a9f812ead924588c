"""Core package: shared data models."""

from .models import Grade, GradeLetter, InterestResult, PalindromeResult, PalindromeVerdict

__all__ = [
    "Grade",
    "GradeLetter",
    "InterestResult",
    "PalindromeResult",
    "PalindromeVerdict",
]
