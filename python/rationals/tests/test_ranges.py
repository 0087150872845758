# Tests for ranges.py - RationalRange and RationalIterator

import itertools
import pytest
from collections.abc import Iterator
from fractions import Fraction

from rationals import Rational, RationalRange, RationalIterator


class TestRationalRange:
    """Tests for RationalRange creation and membership."""

    def test_range_to(self):
        r = Rational(1, 3).range_to(Rational(2, 3))
        assert isinstance(r, RationalRange)
        assert r.start == Rational(1, 3)
        assert r.end_inclusive == Rational(2, 3)

    def test_contains(self):
        r = Rational(1, 3).range_to(Rational(2, 3))
        assert Rational(1, 2) in r
        assert Rational(1, 3) in r  # Bounds are inclusive
        assert Rational(2, 3) in r
        assert Rational(3, 4) not in r
        assert 0 not in r

    def test_contains_mixed_types(self):
        r = RationalRange(0, Fraction(3, 2))
        assert 1 in r
        assert Fraction(1, 2) in r
        assert 2 not in r
        assert "1" not in r

    def test_reversed_range_is_legal(self):
        r = Rational(2).range_to(Rational(1))
        assert r.is_empty()
        assert Rational(3, 2) not in r

    def test_point_range(self):
        r = RationalRange(Rational(1, 2), Rational(2, 4))
        assert not r.is_empty()
        assert Rational(1, 2) in r

    def test_invalid_endpoint(self):
        with pytest.raises(TypeError, match="Range start"):
            RationalRange(0.5, 1)

    def test_repr(self):
        r = Rational(-1, 2).range_to(3)
        assert repr(r) == "RationalRange[-1/2, 3]"


class TestRationalIterator:
    """The iterator repeats the end bound and never advances."""

    def test_empty_range_yields_nothing(self):
        r = Rational(2).range_to(Rational(1))
        assert list(r) == []
        assert not iter(r).has_next()

    def test_yields_end_bound(self):
        r = Rational(1, 3).range_to(Rational(2, 3))
        it = iter(r)
        assert isinstance(it, RationalIterator)
        assert it.has_next()
        assert it.next() == Rational(2, 3)
        assert next(it) == Rational(2, 3)

    def test_cursor_never_advances(self):
        r = Rational(0).range_to(Rational(1))
        it = iter(r)
        taken = list(itertools.islice(it, 5))
        assert taken == [Rational(1)] * 5
        assert it.has_next()

    def test_point_range_repeats(self):
        r = Rational(1, 2).range_to(Rational(1, 2))
        assert list(itertools.islice(r, 3)) == [Rational(1, 2)] * 3

    def test_iterator_is_its_own_iterator(self):
        it = iter(Rational(0).range_to(1))
        assert iter(it) is it
        assert isinstance(it, Iterator)
