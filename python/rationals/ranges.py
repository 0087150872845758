# Rationals - Ranges
# Copyright (c) 2024 Rationals Contributors. All rights reserved.

"""
Closed ranges over rational numbers.

Example:
    >>> from rationals import Rational
    >>> r = Rational(1, 3).range_to(Rational(2, 3))
    >>> Rational(1, 2) in r
    True
"""

from __future__ import annotations
from collections.abc import Iterator
from dataclasses import dataclass
import logging

from .rational import Rational, Exact, _coerce


logger = logging.getLogger(__name__)


def _endpoint(value: Exact, name: str) -> Rational:
    rational = _coerce(value)
    if rational is None:
        raise TypeError(f"Range {name} must be a Rational, int or Fraction, "
                        f"got {type(value).__name__}")
    return rational


@dataclass(frozen=True)
class RationalRange:
    """
    The closed range [start, end_inclusive].

    Unlike an interval, a range may be built with start > end_inclusive;
    such a range contains nothing and iterates over nothing.
    """
    start: Rational
    end_inclusive: Rational

    def __init__(self, start: Exact, end_inclusive: Exact):
        # Bypass frozen dataclass __setattr__
        object.__setattr__(self, 'start', _endpoint(start, 'start'))
        object.__setattr__(self, 'end_inclusive', _endpoint(end_inclusive, 'end_inclusive'))

    def is_empty(self) -> bool:
        return self.start > self.end_inclusive

    def __contains__(self, value: Exact) -> bool:
        """Check if start <= value <= end_inclusive."""
        value = _coerce(value)
        if value is None:
            return False
        return self.start <= value <= self.end_inclusive

    def __iter__(self) -> RationalIterator:
        return RationalIterator(self.start, self.end_inclusive)

    def __repr__(self) -> str:
        return f"RationalRange[{self.start}, {self.end_inclusive}]"


class RationalIterator(Iterator):
    """
    Iterator over a RationalRange.

    Rationals have no successor, so this iterator does not enumerate the
    range. Its cursor stays at start and every call to next() yields
    end_inclusive: a non-empty range repeats its end bound forever and an
    empty one yields nothing. Bound the loop (itertools.islice) when
    iterating a non-empty range.
    """

    def __init__(self, start: Rational, end_inclusive: Rational):
        self._cursor = start
        self._end_inclusive = end_inclusive
        if self.has_next():
            logger.debug("Iterator over [%s, %s] never terminates", start, end_inclusive)

    def has_next(self) -> bool:
        """True while the cursor is at or below end_inclusive."""
        return self._cursor <= self._end_inclusive

    def next(self) -> Rational:
        # TODO: advance the cursor once a stepping rule for ranges is agreed on
        return self._end_inclusive

    def __iter__(self) -> RationalIterator:
        return self

    def __next__(self) -> Rational:
        if not self.has_next():
            raise StopIteration
        return self.next()
