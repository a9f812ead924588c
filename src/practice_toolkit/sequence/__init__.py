"""Fibonacci sequence generation."""

from .fibonacci import fibonacci_term, fibonacci_terms, format_sequence

__all__ = [
    "fibonacci_term",
    "fibonacci_terms",
    "format_sequence",
]
