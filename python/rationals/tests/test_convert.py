# Tests for to_rational() - Human-friendly conversion

import math
import pytest
from fractions import Fraction

from rationals import Rational, Config, InvalidArgument, to_rational


class TestToRational:
    """Tests for to_rational() with exact inputs."""

    def test_integer_conversion(self):
        assert to_rational(0) == Rational(0)
        assert to_rational(-5) == Rational(-5)
        assert to_rational(42) == Rational(42)

    def test_rational_passthrough(self):
        r = Rational(1, 3)
        assert to_rational(r) is r  # no copy is made

    def test_fraction_conversion(self):
        assert to_rational(Fraction(2, 6)) == Rational(1, 3)

    def test_string_conversion(self):
        assert to_rational("3/6") == Rational(1, 2)
        assert to_rational("-4") == Rational(-4)

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="Cannot convert"):
            to_rational([1, 2])
        with pytest.raises(TypeError):
            to_rational(True)


class TestFloatConversion:
    """Floats convert through their shortest decimal form."""

    def test_float_exact_integer(self):
        assert to_rational(0.0) == Rational(0)
        assert to_rational(1.0) == Rational(1)
        assert to_rational(-5.0) == Rational(-5)

    def test_simple_decimals(self):
        # Fraction(0.1) would give the binary value, to_rational reads "0.1"
        assert to_rational(0.1) == Rational(1, 10)
        assert to_rational(0.2) == Rational(1, 5)
        assert to_rational(0.25) == Rational(1, 4)
        assert to_rational(0.125) == Rational(1, 8)

    def test_negative_decimals(self):
        assert to_rational(-0.1) == Rational(-1, 10)
        assert to_rational(-3.14) == Rational(-157, 50)

    def test_decimals_with_integer_part(self):
        assert to_rational(1.5) == Rational(3, 2)
        assert to_rational(10.1) == Rational(101, 10)
        assert to_rational(3.14159) == Rational(314159, 100000)

    def test_scientific_notation(self):
        """Scientific notation falls back to a bounded denominator."""
        result = to_rational(1e-10)
        assert result.denominator <= 10**12
        assert abs(float(result) - 1e-10) < 1e-20

        assert to_rational(1e10) == Rational(10000000000)

    def test_low_precision_config(self):
        result = to_rational(0.1234567, Config.low_precision())
        assert result.denominator <= 10**6
        assert abs(float(result) - 0.1234567) < 1e-6

    def test_default_config_keeps_exact_decimal(self):
        assert to_rational(0.1234567) == Rational(1234567, 10000000)

    @pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
    def test_non_finite_raises(self, x):
        with pytest.raises(InvalidArgument, match="has no rational value"):
            to_rational(x)
