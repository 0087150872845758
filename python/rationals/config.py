# Rationals - Configuration
# Copyright (c) 2024 Rationals Contributors. All rights reserved.

"""Configuration settings for float conversion."""

from __future__ import annotations
from dataclasses import dataclass

from .exceptions import InvalidArgument


@dataclass(frozen=True)
class Config:
    """
    Configuration for converting inexact values to rationals.

    Attributes:
        max_denominator: Largest denominator allowed when a float has no
                         short decimal representation (scientific notation
                         or very long expansions) and must be approximated.
    """
    max_denominator: int = 10**12

    def __post_init__(self):
        if isinstance(self.max_denominator, bool) or not isinstance(self.max_denominator, int):
            raise TypeError(
                f"max_denominator must be an int, got {type(self.max_denominator).__name__}"
            )
        if self.max_denominator < 1:
            raise InvalidArgument(
                f"max_denominator must be at least 1, got {self.max_denominator}",
                value=self.max_denominator,
            )

    @classmethod
    def low_precision(cls) -> Config:
        """Coarse approximation of floats."""
        return cls(max_denominator=10**6)

    @classmethod
    def medium_precision(cls) -> Config:
        """Default configuration."""
        return cls()

    @classmethod
    def high_precision(cls) -> Config:
        """Fine approximation of floats."""
        return cls(max_denominator=10**18)


DEFAULT_CONFIG = Config()
