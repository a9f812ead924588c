"""
Core Models Package

Immutable, validated result types for the four programs. All models are
frozen dataclasses; enums subclass str so they print as their label.
"""

from .grade import Grade, GradeLetter
from .interest import InterestResult
from .palindrome import PalindromeResult, PalindromeVerdict

__all__ = [
    "Grade",
    "GradeLetter",
    "InterestResult",
    "PalindromeResult",
    "PalindromeVerdict",
]
