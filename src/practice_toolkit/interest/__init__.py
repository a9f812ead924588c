"""Simple and compound interest."""

from .calculator import calculate_interest, compound_amount, growth_factor, simple_interest

__all__ = [
    "calculate_interest",
    "compound_amount",
    "growth_factor",
    "simple_interest",
]
