# Rationals
# Copyright (c) 2024 Rationals Contributors. All rights reserved.

"""
Rationals - exact arbitrary-precision fractions.

Example:
    >>> import rationals as rt
    >>> half = rt.from_int_pair(1, 2)
    >>> half + rt.parse("1/3")
    Rational(5, 6)
    >>> print(rt.Rational(-2, 4))
    -1/2

Key Features:
    - Always normalized: lowest terms, sign in the numerator
    - Python ints underneath, so no overflow
    - Interoperates with int and fractions.Fraction
"""

__version__ = "0.1.0"

# Core type and constructors
from .rational import (
    Rational,
    Ordering,
    from_int_pair,
    from_long_pair,
    from_big_int_pair,
    div_by,
    parse,
    to_rational,
)

# Ranges
from .ranges import RationalRange, RationalIterator

# Configuration
from .config import Config

# Exceptions
from .exceptions import RationalError, InvalidArgument

__all__ = [
    # Version
    "__version__",
    # Core type
    "Rational",
    "Ordering",
    # Constructors
    "from_int_pair",
    "from_long_pair",
    "from_big_int_pair",
    "div_by",
    "parse",
    "to_rational",
    # Ranges
    "RationalRange",
    "RationalIterator",
    # Configuration
    "Config",
    # Exceptions
    "RationalError",
    "InvalidArgument",
]
