"""
Module: interest

Purpose:
    Provides the InterestResult dataclass holding the inputs and the
    derived simple/compound figures of one calculation.

Used By:
    - practice_toolkit.interest.calculator
    - practice_toolkit.programs.interest
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InterestResult:
    """
    Simple and compound interest for one principal/rate/time triple.

    Attributes:
        principal: Amount invested
        rate: Annual rate in percent
        time: Duration in years
        simple_interest: principal * rate * time / 100
        compound_amount: principal * (1 + rate / 100) ** time
        compound_interest: compound_amount - principal

    Example:
        >>> r = InterestResult(1000.0, 10.0, 2.0, 200.0, 1210.0, 210.0)
        >>> r.simple_amount
        1200.0
    """

    principal: float
    rate: float
    time: float
    simple_interest: float
    compound_amount: float
    compound_interest: float

    @property
    def simple_amount(self) -> float:
        """Principal plus simple interest."""
        return self.principal + self.simple_interest
