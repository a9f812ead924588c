"""
Module: config

Purpose:
    Configuration dataclass for the console programs. Immutable
    configuration with validation on construction.

Key Classes:
    - ProgramConfig: Input limits and output formatting

Dependencies:
    - dataclasses (std)

Used By:
    - practice_toolkit.programs.palindrome: Line length limit
    - practice_toolkit.programs.interest: Decimal places
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProgramConfig:
    """
    Configuration for the console programs (immutable).

    Attributes:
        max_line_length: Characters of a text line that are examined;
            anything beyond is ignored
        decimal_places: Fixed decimals used when printing money values

    Example:
        >>> config = ProgramConfig(max_line_length=80)
        >>> config.decimal_places
        2
    """

    max_line_length: int = 1023
    decimal_places: int = 2

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_line_length <= 0:
            raise ValueError(f"max_line_length must be positive: {self.max_line_length}")
        if self.decimal_places < 0:
            raise ValueError(f"decimal_places must be non-negative: {self.decimal_places}")


DEFAULT_CONFIG = ProgramConfig()
