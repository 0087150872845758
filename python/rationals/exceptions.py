# Rationals - Exceptions
# Copyright (c) 2024 Rationals Contributors. All rights reserved.

"""Exception hierarchy for rationals."""

from __future__ import annotations
from typing import Optional, Any


class RationalError(Exception):
    """Base class for all rationals exceptions."""
    pass


class InvalidArgument(RationalError, ValueError):
    """
    Raised when a value cannot form a valid rational number.

    This covers a zero denominator (including division by a zero-valued
    rational), text that is not a rational number representation, and
    values that have no exact rational counterpart.
    """

    def __init__(self, message: str, value: Optional[Any] = None):
        super().__init__(message)
        self.value = value
