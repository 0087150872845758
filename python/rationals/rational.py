# Rationals - Rational Numbers
# Copyright (c) 2024 Rationals Contributors. All rights reserved.

"""
Exact rational numbers backed by Python's arbitrary-precision integers.

A Rational is always stored in normalized form: numerator and denominator
share no common factor and the denominator is positive. Normalization
happens exactly once, in the constructor, and every operation builds its
result through that same constructor.

Example:
    >>> from rationals import Rational, parse
    >>> half = Rational(1, 2)
    >>> half + Rational(1, 3)
    Rational(5, 6)
    >>> str(Rational(-2, 4))
    '-1/2'
    >>> parse("117/1098")
    Rational(13, 122)
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from fractions import Fraction
from typing import Optional, Union, TYPE_CHECKING
import decimal
import logging
import math
import re

from .config import Config, DEFAULT_CONFIG
from .exceptions import InvalidArgument

if TYPE_CHECKING:
    from .ranges import RationalRange


logger = logging.getLogger(__name__)

# Signed decimal digit sequence, the only integer form parse() accepts
_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")

# Converts ints of any size without the int <-> str digit limit
_EXACT = decimal.Context(prec=decimal.MAX_PREC)

# Values that convert to a Rational without loss
Exact = Union['Rational', int, Fraction]

# Everything to_rational() accepts
RationalLike = Union['Rational', int, Fraction, float, str]


class Ordering(IntEnum):
    """Result of comparing two rationals."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _check_integer(value, name: str) -> int:
    # bool is an int subclass but never a meaningful numerator
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Rational:
    """
    An immutable fraction numerator/denominator in lowest terms.

    Rationals are hashable and compare equal to ints and Fractions of the
    same value.
    """
    numerator: int
    denominator: int

    def __init__(self, numerator: int, denominator: int = 1):
        """
        Create the normalized rational numerator/denominator.

        Args:
            numerator: Any int; carries the sign of the result.
            denominator: Any nonzero int.

        Raises:
            InvalidArgument: If denominator is zero.
            TypeError: If either component is not an int.
        """
        n = _check_integer(numerator, "numerator")
        d = _check_integer(denominator, "denominator")
        if d == 0:
            raise InvalidArgument("Denominator must not be zero", value=(n, d))

        # gcd(0, d) == |d|, so zero reduces to 0/1 here as well
        g = math.gcd(n, d)
        if g > 1:
            n //= g
            d //= g
        if d < 0:
            n = -n
            d = -d

        # Bypass frozen dataclass __setattr__
        object.__setattr__(self, 'numerator', n)
        object.__setattr__(self, 'denominator', d)

    # Alternative constructors

    @classmethod
    def from_fraction(cls, value: Fraction) -> Rational:
        """Create a Rational from a fractions.Fraction."""
        return cls(value.numerator, value.denominator)

    @classmethod
    def from_dict(cls, data: dict) -> Rational:
        """
        Create a Rational from its JSON form {'n': ..., 'd': ...}.

        Raises:
            InvalidArgument: If a key is missing or the denominator is zero.
        """
        try:
            n, d = data['n'], data['d']
        except (KeyError, TypeError) as e:
            raise InvalidArgument(f"Not a rational number object: {data!r}", value=data) from e
        return cls(n, d)

    # Arithmetic

    def add(self, other: Rational) -> Rational:
        """
        Sum of self and other.

        The common denominator is the plain product of both denominators;
        the constructor cancels whatever factor that introduces.
        """
        dt = self.denominator * other.denominator
        nt = (self.numerator * (dt // self.denominator)
              + other.numerator * (dt // other.denominator))
        return Rational(nt, dt)

    def subtract(self, other: Rational) -> Rational:
        """Difference self - other."""
        dt = self.denominator * other.denominator
        nt = (self.numerator * (dt // self.denominator)
              - other.numerator * (dt // other.denominator))
        return Rational(nt, dt)

    def multiply(self, other: Rational) -> Rational:
        """Product of self and other."""
        return Rational(self.numerator * other.numerator,
                        self.denominator * other.denominator)

    def divide(self, other: Rational) -> Rational:
        """
        Quotient self / other.

        Raises:
            InvalidArgument: If other is zero.
        """
        return Rational(self.numerator * other.denominator,
                        self.denominator * other.numerator)

    def negate(self) -> Rational:
        """Additive inverse."""
        return Rational(-self.numerator, self.denominator)

    def compare(self, other: Rational) -> Ordering:
        """Order self against other by cross-multiplication."""
        left = self.numerator * other.denominator
        right = self.denominator * other.numerator
        if left < right:
            return Ordering.LESS
        if left > right:
            return Ordering.GREATER
        return Ordering.EQUAL

    def range_to(self, end_inclusive: Exact) -> RationalRange:
        """Closed range from self to end_inclusive."""
        # Imported here, ranges depends on this module
        from .ranges import RationalRange
        return RationalRange(self, end_inclusive)

    # Operator overloading

    def __neg__(self) -> Rational:
        return self.negate()

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return self.negate() if self.numerator < 0 else self

    def __add__(self, other: Exact) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Exact) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other: Exact) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Exact) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other: Exact) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Exact) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other: Exact) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Exact) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __pow__(self, n: int) -> Rational:
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        if n >= 0:
            return Rational(self.numerator ** n, self.denominator ** n)
        # Zero base leaves a zero denominator and fails in the constructor
        return Rational(self.denominator ** -n, self.numerator ** -n)

    # Comparison

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return (self.numerator == other.numerator
                and self.denominator == other.denominator)

    def __hash__(self) -> int:
        # Agrees with hash() of the equal int or Fraction
        return hash(Fraction(self.numerator, self.denominator))

    def __lt__(self, other: Exact) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: Exact) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: Exact) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: Exact) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    # Conversion and formatting

    def is_integer(self) -> bool:
        return self.denominator == 1

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def to_dict(self) -> dict[str, int]:
        """Convert to JSON form {'n': numerator, 'd': denominator}."""
        return {'n': self.numerator, 'd': self.denominator}

    def format(self) -> str:
        """Render as "n" for whole values, "n/d" otherwise."""
        if self.numerator % self.denominator == 0:
            return _int_to_str(self.numerator)
        return f"{_int_to_str(self.numerator)}/{_int_to_str(self.denominator)}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Rational({_int_to_str(self.numerator)}, {_int_to_str(self.denominator)})"

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __bool__(self) -> bool:
        return self.numerator != 0


def _coerce(x) -> Optional[Rational]:
    """Convert an exact operand to Rational, or None if unsupported."""
    if isinstance(x, Rational):
        return x
    if isinstance(x, bool):
        return None
    if isinstance(x, int):
        return Rational(x)
    if isinstance(x, Fraction):
        return Rational.from_fraction(x)
    return None


# Named constructors

def from_int_pair(n: int, d: int) -> Rational:
    """Create n/d from two machine-sized integers."""
    return Rational(n, d)


def from_long_pair(n: int, d: int) -> Rational:
    """Create n/d from two 64-bit integers."""
    return Rational(n, d)


def from_big_int_pair(n: int, d: int) -> Rational:
    """Create n/d from two arbitrary-precision integers."""
    return Rational(n, d)


div_by = from_big_int_pair


# Parsing

def parse(text: str) -> Rational:
    """
    Parse "n" or "n/d" into a normalized Rational.

    Args:
        text: Decimal integer, optionally followed by "/" and a second one.

    Returns:
        The normalized Rational; "2/4" parses to 1/2.

    Raises:
        InvalidArgument: If text has more than one "/" or the denominator
                         is zero.
        ValueError: If a segment is not a signed decimal digit
                    sequence.
        TypeError: If text is not a str.

    Examples:
        >>> parse("13/122")
        Rational(13, 122)
        >>> parse("-7")
        Rational(-7, 1)
    """
    if not isinstance(text, str):
        raise TypeError(f"Cannot parse {type(text).__name__} as a rational number")

    members = text.split("/")
    if len(members) == 1:
        return Rational(_str_to_int(members[0]), 1)
    if len(members) == 2:
        return Rational(_str_to_int(members[0]), _str_to_int(members[1]))

    logger.debug("Rejected %r: %d '/'-separated segments", text, len(members))
    raise InvalidArgument(
        f"'{text}' is not a valid rational number representation", value=text
    )


def _int_to_str(n: int) -> str:
    return format(_EXACT.create_decimal(n), 'f')


def _str_to_int(segment: str) -> int:
    if not _INTEGER_LITERAL.fullmatch(segment):
        raise ValueError(f"invalid integer literal in rational number: '{segment}'")
    return int(decimal.Decimal(segment))


# Conversion from other numeric types

def to_rational(x: RationalLike, config: Optional[Config] = None) -> Rational:
    """
    Convert a value to Rational with human-friendly results.

    Ints and Fractions convert exactly and strings go through parse().
    Floats are read from their shortest decimal form, so 0.1 becomes 1/10
    rather than the binary value 3602879701896397/36028797018963968.

    Args:
        x: A Rational, int, Fraction, float or str.
        config: Controls the fallback approximation of floats.

    Raises:
        InvalidArgument: If x is an infinite or NaN float, or malformed text.
        TypeError: If x has an unsupported type.

    Examples:
        >>> to_rational(0.25)
        Rational(1, 4)
        >>> to_rational("3/6")
        Rational(1, 2)
    """
    exact = _coerce(x)
    if exact is not None:
        return exact
    if isinstance(x, str):
        return parse(x)
    if isinstance(x, float):
        return _float_to_nice_rational(x, config or DEFAULT_CONFIG)
    raise TypeError(f"Cannot convert {type(x).__name__} to Rational")


def _float_to_nice_rational(x: float, config: Config) -> Rational:
    """
    Strategy:
    1. Exact integers convert directly
    2. Build the fraction from str(x) (0.1 -> 1/10)
    3. Fall back to the closest fraction within config.max_denominator
    """
    if not math.isfinite(x):
        raise InvalidArgument(f"{x} has no rational value", value=x)
    if x == int(x):
        return Rational(int(x))

    s = str(x)
    if 'e' in s or 'E' in s:
        return _approximate(x, config)

    sign = -1 if s.startswith('-') else 1
    integer_part, decimal_part = s.lstrip('-').split('.')
    denom = 10 ** len(decimal_part)
    numer = int(integer_part or '0') * denom + int(decimal_part)

    result = Rational(sign * numer, denom)
    if result.denominator <= config.max_denominator:
        return result
    return _approximate(x, config)


def _approximate(x: float, config: Config) -> Rational:
    logger.debug("Approximating %r with max denominator %d", x, config.max_denominator)
    return Rational.from_fraction(Fraction(x).limit_denominator(config.max_denominator))
