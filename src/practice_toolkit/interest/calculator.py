"""
Module: interest.calculator

Purpose:
    Simple and compound interest from principal, annual rate (percent)
    and time (years). Inputs are not range-checked; zero, negative and
    non-finite values are computed through the formulas as given, so a
    result may be nan or inf.

Key Functions:
    - simple_interest(): P * R * T / 100
    - growth_factor(): (1 + R / 100) ** T as a real float
    - compound_amount(): P * (1 + R / 100) ** T
    - calculate_interest(): Both figures as an InterestResult

Dependencies:
    - math (std)
    - practice_toolkit.core.models.interest

Used By:
    - practice_toolkit.programs.interest
"""

from __future__ import annotations

import logging
import math

from practice_toolkit.core.models.interest import InterestResult

logger = logging.getLogger(__name__)


def simple_interest(principal: float, rate: float, time: float) -> float:
    """Return ``principal * rate * time / 100``."""
    return (principal * rate * time) / 100.0


def growth_factor(rate: float, time: float) -> float:
    """
    Return ``(1 + rate/100) ** time`` as a real float.

    Cases Python does not return a real number for follow IEEE pow:
    zero base with negative time is inf, overflow is +/-inf and a
    negative base with fractional time is nan.
    """
    base = 1.0 + rate / 100.0
    try:
        factor = base ** time
    except ZeroDivisionError:
        return math.inf
    except OverflowError:
        odd_power = float(time).is_integer() and int(time) % 2 == 1
        return -math.inf if base < 0 and odd_power else math.inf
    if isinstance(factor, complex):
        return math.nan
    return factor


def compound_amount(principal: float, rate: float, time: float) -> float:
    """Return the amount after compounding yearly: ``P * (1 + R/100) ** T``."""
    return principal * growth_factor(rate, time)


def calculate_interest(principal: float, rate: float, time: float) -> InterestResult:
    """
    Compute simple interest, compound amount and compound interest.

    Example:
        >>> r = calculate_interest(1000, 10, 2)
        >>> round(r.compound_interest, 2)
        210.0
    """
    si = simple_interest(principal, rate, time)
    amount = compound_amount(principal, rate, time)
    logger.debug(
        "P=%s R=%s T=%s -> simple=%s compound_amount=%s", principal, rate, time, si, amount
    )
    return InterestResult(
        principal=principal,
        rate=rate,
        time=time,
        simple_interest=si,
        compound_amount=amount,
        compound_interest=amount - principal,
    )
