"""Tests for FloatingValue."""

import math
from decimal import Decimal

import pytest
from pydantic import ValidationError

from numval import FLOATING_CONTEXT, UNDEFINED, FloatingValue, RoundingPolicy, floating_of
from numval.context import Context


class TestFloatingInstantiation:
    """Test construction and field access."""

    def test_instantiate_from_float(self):
        """Test creating a FloatingValue directly."""
        value = FloatingValue(2.5)
        assert value.value == 2.5
        assert value.unwrap() == 2.5

    def test_non_finite_rejected_by_model(self):
        """Test that the model itself never holds NaN or infinity."""
        with pytest.raises(ValidationError):
            FloatingValue(math.inf)

    def test_non_finite_literal_is_undefined(self):
        """Test that the factory degrades non-finite input."""
        assert floating_of(math.nan) is UNDEFINED
        assert floating_of(-math.inf) is UNDEFINED
        assert floating_of("1e400") is UNDEFINED

    def test_context_is_fixed(self):
        """Test that floats carry the fixed 16-digit context."""
        assert floating_of(1.0).context == FLOATING_CONTEXT

    def test_immutable(self):
        """Test that a FloatingValue cannot be mutated."""
        value = floating_of(1.0)
        with pytest.raises(ValidationError):
            value.value = 2.0


class TestFloatingArithmetic:
    """Test native arithmetic."""

    def test_add(self):
        assert floating_of(1.5).add(floating_of(2.25)) == FloatingValue(3.75)

    def test_subtract(self):
        assert floating_of(1.5).subtract(floating_of(2.0)) == FloatingValue(-0.5)

    def test_multiply(self):
        assert floating_of(1.5).multiply(floating_of(4)) == FloatingValue(6.0)

    def test_divide(self):
        assert floating_of(1).divide(floating_of(4)) == FloatingValue(0.25)

    def test_divide_by_zero_is_undefined(self):
        """Test that division by zero degrades instead of raising."""
        assert floating_of(1).divide(floating_of(0)) is UNDEFINED

    def test_remainder_follows_dividend_sign(self):
        """Test truncated-division remainder."""
        assert floating_of(-7).remainder(floating_of(3)) == FloatingValue(-1.0)
        assert floating_of(7).remainder(floating_of(-3)) == FloatingValue(1.0)

    def test_remainder_by_zero_is_undefined(self):
        assert floating_of(7).remainder(floating_of(0)) is UNDEFINED

    def test_power(self):
        assert floating_of(2).power(floating_of(10)) == FloatingValue(1024.0)

    def test_power_overflow_is_undefined(self):
        """Test that overflow to infinity degrades."""
        assert floating_of(10).power(floating_of(400)) is UNDEFINED

    def test_multiply_overflow_is_undefined(self):
        assert floating_of(1e308).multiply(floating_of(10)) is UNDEFINED

    def test_derived_operations(self):
        """Test square, cube, reciprocal, increment and decrement."""
        three = floating_of(3)
        assert three.square() == FloatingValue(9.0)
        assert three.cube() == FloatingValue(27.0)
        assert floating_of(4).reciprocal() == FloatingValue(0.25)
        assert three.increment() == FloatingValue(4.0)
        assert three.decrement() == FloatingValue(2.0)

    def test_reciprocal_of_zero_is_undefined(self):
        assert floating_of(0).reciprocal() is UNDEFINED


class TestFloatingRootsAndLogarithms:
    """Test roots, exponentials and logarithms."""

    def test_square_root(self):
        assert floating_of(16).square_root() == FloatingValue(4.0)

    def test_square_root_of_negative_is_undefined(self):
        assert floating_of(-1).square_root() is UNDEFINED

    def test_cube_root_of_negative(self):
        """Test that odd roots of negative numbers are defined."""
        assert floating_of(-8).cube_root().to_float() == pytest.approx(-2.0)

    def test_nth_root(self):
        assert floating_of(81).nth_root(floating_of(4)).to_float() == pytest.approx(3.0)

    def test_even_root_of_negative_is_undefined(self):
        assert floating_of(-16).nth_root(floating_of(4)) is UNDEFINED

    def test_zeroth_root_is_undefined(self):
        assert floating_of(2).nth_root(floating_of(0)) is UNDEFINED

    def test_exponential(self):
        assert floating_of(1).exponential().to_float() == pytest.approx(math.e)

    def test_logarithms(self):
        """Test natural, common, binary and arbitrary-base logarithms."""
        assert floating_of(math.e).natural_logarithm().to_float() == pytest.approx(1.0)
        assert floating_of(1000).common_logarithm().to_float() == pytest.approx(3.0)
        assert floating_of(8).binary_logarithm() == FloatingValue(3.0)
        assert floating_of(81).logarithm(floating_of(3)).to_float() == pytest.approx(4.0)

    @pytest.mark.parametrize("value", [0, -1])
    def test_logarithm_of_non_positive_is_undefined(self, value):
        assert floating_of(value).natural_logarithm() is UNDEFINED
        assert floating_of(value).common_logarithm() is UNDEFINED
        assert floating_of(value).binary_logarithm() is UNDEFINED


class TestFloatingAlgebraic:
    """Test sign, integral parts and rounding."""

    def test_absolute_value_and_negate(self):
        assert floating_of(-2.5).absolute_value() == FloatingValue(2.5)
        assert floating_of(2.5).negate() == FloatingValue(-2.5)

    def test_floor_and_ceil(self):
        assert floating_of(-2.5).floor() == FloatingValue(-3.0)
        assert floating_of(-2.5).ceil() == FloatingValue(-2.0)

    def test_integer_and_fractional_part(self):
        """Test that both parts keep the sign of the value."""
        assert floating_of(-2.75).integer_part() == FloatingValue(-2.0)
        assert floating_of(-2.75).fractional_part() == FloatingValue(-0.75)

    def test_round_uses_decimal_digits(self):
        """Test that 2.675 rounds on its decimal digits, not its binary value."""
        assert floating_of(2.675).round(2, RoundingPolicy.HALF_UP) == FloatingValue(2.68)

    def test_round_default_is_half_even(self):
        assert floating_of(2.5).round() == FloatingValue(2.0)
        assert floating_of(3.5).round() == FloatingValue(4.0)

    def test_round_policy_by_name(self):
        assert floating_of(2.5).round(0, "HALF_UP") == FloatingValue(3.0)

    def test_round_negative_scale(self):
        assert floating_of(1234.0).round(-2) == FloatingValue(1200.0)

    def test_round_unnecessary(self):
        """Test that UNNECESSARY degrades when digits would be lost."""
        assert floating_of(1.25).round(2, RoundingPolicy.UNNECESSARY) == FloatingValue(1.25)
        assert floating_of(1.25).round(1, RoundingPolicy.UNNECESSARY) is UNDEFINED

    def test_precision(self):
        """Test rounding to significant digits."""
        assert floating_of(123.456).precision(Context(4)) == FloatingValue(123.5)

    def test_scientific_notation(self):
        """Test significant figures, mantissa and exponent."""
        value = floating_of(1234.5)
        assert value.significant_figures() == 5
        assert value.exponent() == 3
        assert value.mantissa() == FloatingValue(1.2345)

    def test_scientific_notation_of_zero(self):
        zero = floating_of(0)
        assert zero.exponent() == 0
        assert zero.mantissa() == zero


class TestFloatingTrigonometry:
    """Test trigonometric and hyperbolic functions."""

    def test_constants(self):
        assert floating_of(0).pi() == FloatingValue(math.pi)
        assert floating_of(0).e() == FloatingValue(math.e)

    def test_degrees_and_radians(self):
        assert floating_of(math.pi).degrees().to_float() == pytest.approx(180.0)
        assert floating_of(180).radians().to_float() == pytest.approx(math.pi)

    def test_trigonometric(self):
        assert floating_of(0).sine() == FloatingValue(0.0)
        assert floating_of(0).cosine() == FloatingValue(1.0)
        assert floating_of(1).inverse_tangent().to_float() == pytest.approx(math.pi / 4)

    def test_inverse_trigonometric_outside_domain(self):
        assert floating_of(2).inverse_sine() is UNDEFINED
        assert floating_of(-2).inverse_cosine() is UNDEFINED

    def test_hyperbolic(self):
        assert floating_of(0).hyperbolic_cosine() == FloatingValue(1.0)
        assert floating_of(1).hyperbolic_tangent().to_float() == pytest.approx(math.tanh(1))

    def test_inverse_hyperbolic_outside_domain(self):
        assert floating_of(0.5).inverse_hyperbolic_cosine() is UNDEFINED
        assert floating_of(1).inverse_hyperbolic_tangent() is UNDEFINED

    def test_hyperbolic_overflow(self):
        assert floating_of(1000).hyperbolic_sine() is UNDEFINED

    def test_inverse_tangent2(self):
        """Test that the receiver is y."""
        assert floating_of(1).inverse_tangent2(floating_of(-1)).to_float() == pytest.approx(
            3 * math.pi / 4
        )

    def test_hypotenuse(self):
        assert floating_of(3).hypotenuse(floating_of(4)) == FloatingValue(5.0)


class TestFloatingConversions:
    """Test conversions and text output."""

    def test_to_int_truncates(self):
        assert floating_of(-2.9).to_int() == -2
        assert int(floating_of(2.9)) == 2

    def test_to_int_narrowing(self):
        """Test two's-complement narrowing to a fixed width."""
        assert floating_of(300).to_int(8) == 44
        assert floating_of(-129).to_int(8) == 127

    def test_to_float(self):
        assert float(floating_of(0.1)) == 0.1

    def test_to_decimal(self):
        """Test that the decimal form uses the shortest repr."""
        assert floating_of(0.1).to_decimal() == Decimal("0.1")

    def test_str_is_shortest_repr(self):
        assert str(floating_of(0.1)) == "0.1"
        assert str(floating_of(2)) == "2.0"

    def test_object_equality_and_hash(self):
        assert floating_of(2) == floating_of(2.0)
        assert hash(floating_of(2)) == hash(floating_of(2.0))
        assert floating_of(2) != floating_of(3)
