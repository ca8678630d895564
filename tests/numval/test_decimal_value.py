"""Tests for ArbitraryPrecisionValue."""

import math
from decimal import Decimal

import pytest

from numval import (
    UNDEFINED,
    ArbitraryPrecisionValue,
    Context,
    RoundingPolicy,
    decimal_factory,
    decimal_of,
)


DECIMAL_34 = Context(34)


def d16(literal):
    """Create a 16-digit arbitrary-precision value."""
    return decimal_of(literal, 16)


class TestDecimalInstantiation:
    """Test construction, context and object equality."""

    def test_rounded_to_context_on_creation(self):
        """Test that factory construction rounds to the context."""
        value = decimal_of("1.23456", 3)
        assert value.value == Decimal("1.23")
        assert value.context == Context(3)

    def test_rounding_policy_on_creation(self):
        value = decimal_of("1.23456", 3, RoundingPolicy.UP)
        assert value.value == Decimal("1.24")

    def test_unnecessary_rounding_on_creation(self):
        """Test that UNNECESSARY refuses literals that do not fit."""
        assert decimal_of("1.5", 2, RoundingPolicy.UNNECESSARY).value == Decimal("1.5")
        assert decimal_of("1.25", 2, RoundingPolicy.UNNECESSARY) is UNDEFINED

    def test_from_float_is_lossless(self):
        """Test that float conversion keeps the shortest repr digits."""
        value = ArbitraryPrecisionValue.from_float(0.1, Context(3))
        assert value.value == Decimal("0.1")
        assert value.context == Context(3)

    def test_object_equality_requires_same_context(self):
        """Test that object equality includes the context."""
        assert decimal_of("2", 16) == decimal_of("2", 16)
        assert decimal_of("2", 16) != decimal_of("2", 32)

    def test_object_equality_requires_same_representation(self):
        """Test that trailing zeros are significant for object equality."""
        assert d16("2.0") != d16("2.00")
        assert d16("2.0").is_equal(d16("2.00"))

    def test_hash_consistent_with_equality(self):
        assert hash(d16("1.5")) == hash(d16("1.5"))
        assert len({d16("1.5"), d16("1.5"), decimal_of("1.5", 32)}) == 2

    def test_str_is_exact_decimal(self):
        assert str(d16("1.50")) == "1.50"
        assert str(d16("-0.001")) == "-0.001"

    def test_repr(self):
        assert repr(d16("1.5")) == (
            "ArbitraryPrecisionValue('1.5', Context(precision=16, rounding=HALF_EVEN))"
        )


class TestDecimalArithmetic:
    """Test arithmetic rounded to the winning context."""

    def test_add(self):
        assert d16("0.1").add(d16("0.2")) == d16("0.3")

    def test_result_rounded_to_context(self):
        """Test that results keep at most the context's significant digits."""
        third = decimal_of(1, 5).divide(decimal_of(3, 5))
        assert third.value == Decimal("0.33333")

    def test_context_rounding_policy(self):
        third = decimal_of(2, 3, RoundingPolicy.DOWN).divide(decimal_of(3, 3, RoundingPolicy.DOWN))
        assert third.value == Decimal("0.666")

    def test_exact_result_under_unnecessary(self):
        factory = decimal_factory(4, RoundingPolicy.UNNECESSARY)
        assert factory.of(1).divide(factory.of(4)).value == Decimal("0.25")
        assert factory.of(1).divide(factory.of(3)) is UNDEFINED

    def test_divide_by_zero_is_undefined(self):
        assert decimal_of("1", 32).divide(decimal_of("0", 32)) is UNDEFINED
        assert decimal_of("0", 32).divide(decimal_of("0", 32)) is UNDEFINED

    def test_remainder_follows_dividend_sign(self):
        assert d16("-7").remainder(d16("3")).value == Decimal("-1")
        assert d16("7.5").remainder(d16("2")).value == Decimal("1.5")

    def test_remainder_with_large_quotient(self):
        """Test that the quotient may have more digits than the context."""
        assert decimal_of("1E+40", 4).remainder(decimal_of(3, 4)).value == Decimal("1")

    def test_remainder_by_zero_is_undefined(self):
        assert d16("7").remainder(d16("0")) is UNDEFINED

    def test_power(self):
        assert d16("2").power(d16("10")).value == Decimal("1024")
        assert d16("4").power(d16("0.5")).value == Decimal("2.000000000000000")

    def test_power_of_zero_exponent(self):
        assert d16("0").power(d16("0")).value == Decimal("1")

    def test_power_domain_errors(self):
        assert d16("-8").power(d16("0.5")) is UNDEFINED
        assert d16("0").power(d16("-1")) is UNDEFINED

    def test_average(self):
        assert d16("1").average(d16("2")).value == Decimal("1.5")


class TestDecimalRootsAndLogarithms:
    """Test roots, exponentials and logarithms."""

    def test_square_root(self):
        assert decimal_of("2", 10).square_root().value == Decimal("1.414213562")

    def test_square_root_of_negative_is_undefined(self):
        assert decimal_of("-1", 16).square_root() is UNDEFINED

    def test_cube_root(self):
        assert decimal_of("27", 10).cube_root().value == Decimal("3.000000000")
        assert decimal_of("-27", 10).cube_root().value == Decimal("-3.000000000")

    def test_nth_root(self):
        assert decimal_of("32", 10).nth_root(decimal_of(5, 10)).value == Decimal("2.000000000")

    def test_even_root_of_negative_is_undefined(self):
        assert d16("-16").nth_root(d16("4")) is UNDEFINED

    def test_zeroth_root_is_undefined(self):
        assert d16("2").nth_root(d16("0")) is UNDEFINED

    def test_exponential(self):
        assert decimal_of(1, 10).exponential().value == Decimal("2.718281828")

    def test_logarithms(self):
        assert decimal_of(10, 10).natural_logarithm().value == Decimal("2.302585093")
        assert decimal_of(1000, 10).common_logarithm().value == Decimal("3")
        assert decimal_of(8, 10).binary_logarithm().value == Decimal("3.000000000")
        assert decimal_of(81, 10).logarithm(decimal_of(3, 10)).value == Decimal("4.000000000")

    @pytest.mark.parametrize("literal", ["0", "-1"])
    def test_logarithm_of_non_positive_is_undefined(self, literal):
        value = d16(literal)
        assert value.natural_logarithm() is UNDEFINED
        assert value.common_logarithm() is UNDEFINED
        assert value.binary_logarithm() is UNDEFINED
        assert value.logarithm(d16("10")) is UNDEFINED

    def test_logarithm_base_one_is_undefined(self):
        assert d16("5").logarithm(d16("1")) is UNDEFINED

    def test_hypotenuse(self):
        assert d16("3").hypotenuse(d16("4")).value == Decimal("5")


class TestDecimalAlgebraic:
    """Test sign, integral parts, rounding and precision."""

    def test_absolute_value_and_negate(self):
        assert d16("-2.5").absolute_value() == d16("2.5")
        assert d16("2.5").negate() == d16("-2.5")

    def test_floor_and_ceil(self):
        assert d16("-2.5").floor().value == Decimal("-3")
        assert d16("-2.5").ceil().value == Decimal("-2")
        assert d16("2.5").floor().context == Context(16)

    def test_integer_and_fractional_part(self):
        assert d16("-2.75").integer_part().value == Decimal("-2")
        assert d16("-2.75").fractional_part().value == Decimal("-0.75")

    def test_round_changes_scale_only(self):
        """Test that round keeps the context."""
        rounded = d16("2.345").round(2)
        assert rounded.value == Decimal("2.34")
        assert rounded.context == Context(16)

    def test_round_with_policy(self):
        assert d16("2.345").round(2, RoundingPolicy.HALF_UP).value == Decimal("2.35")
        assert d16("-2.341").round(2, RoundingPolicy.FLOOR).value == Decimal("-2.35")

    def test_round_negative_scale(self):
        assert d16("1250").round(-2).value == Decimal("1.2E+3")

    def test_round_adds_trailing_zeros(self):
        assert str(d16("1.5").round(3)) == "1.500"

    def test_round_unnecessary(self):
        assert d16("1.25").round(1, RoundingPolicy.UNNECESSARY) is UNDEFINED

    def test_precision(self):
        """Test re-rounding to a new context."""
        value = d16("3.14159265").precision(Context(3))
        assert value.value == Decimal("3.14")
        assert value.context == Context(3)

    def test_precision_raises_context(self):
        value = decimal_of("1.5", 2).precision(DECIMAL_34)
        assert value.value == Decimal("1.5")
        assert value.context == DECIMAL_34

    def test_scientific_notation(self):
        value = d16("-1234.50")
        assert value.significant_figures() == 6
        assert value.exponent() == 3
        assert value.mantissa().value == Decimal("-1.23450")

    def test_scientific_notation_small(self):
        value = d16("0.00125")
        assert value.exponent() == -3
        assert value.mantissa().value == Decimal("1.25")

    def test_signum(self):
        assert d16("-0.5").signum() == -1
        assert d16("0").signum() == 0
        assert d16("-0").signum() == 0
        assert d16("0.5").signum() == 1


class TestDecimalTranscendental:
    """Test functions evaluated through decimal_math."""

    def test_pi_and_e(self):
        value = decimal_of(0, 20)
        assert value.pi().value == Decimal("3.1415926535897932385")
        assert value.e().value == Decimal("2.7182818284590452354")

    def test_sine_and_cosine(self):
        assert decimal_of("0.5", 10).sine().value == Decimal("0.4794255386")
        assert decimal_of("0", 10).cosine().value == Decimal("1")

    def test_tangent(self):
        value = decimal_of("1", 20).tangent()
        assert value.to_float() == pytest.approx(math.tan(1))
        assert value.context == Context(20)

    def test_inverse_functions(self):
        assert decimal_of("1", 10).inverse_tangent().to_float() == pytest.approx(math.pi / 4)
        assert decimal_of("0.5", 10).inverse_sine().to_float() == pytest.approx(math.pi / 6)
        assert decimal_of("0", 10).inverse_cosine().to_float() == pytest.approx(math.pi / 2)

    def test_inverse_trigonometric_outside_domain(self):
        assert d16("2").inverse_sine() is UNDEFINED
        assert d16("-2").inverse_cosine() is UNDEFINED

    def test_hyperbolic(self):
        assert decimal_of("1", 12).hyperbolic_sine().to_float() == pytest.approx(math.sinh(1))
        assert decimal_of("0", 12).hyperbolic_cosine().value == Decimal("1")
        assert decimal_of("1", 12).hyperbolic_tangent().to_float() == pytest.approx(math.tanh(1))
        assert decimal_of("1", 12).inverse_hyperbolic_sine().to_float() == pytest.approx(
            math.asinh(1)
        )

    def test_inverse_hyperbolic_outside_domain(self):
        assert d16("0.5").inverse_hyperbolic_cosine() is UNDEFINED
        assert d16("1").inverse_hyperbolic_tangent() is UNDEFINED
        assert d16("2").inverse_hyperbolic_tangent() is UNDEFINED

    def test_degrees_and_radians(self):
        assert d16("180").radians().to_float() == pytest.approx(math.pi)
        value = decimal_of(0, 16)
        assert value.pi().degrees().value == Decimal("180.0000000000000")

    def test_inverse_tangent2(self):
        """Test that the receiver is y and the quadrant is honored."""
        result = d16("1").inverse_tangent2(d16("-1"))
        assert result.to_float() == pytest.approx(3 * math.pi / 4)

    def test_inverse_tangent2_of_origin_is_undefined(self):
        assert d16("0").inverse_tangent2(d16("0")) is UNDEFINED


class TestDecimalConversions:
    """Test conversions to primitive types."""

    def test_to_int_truncates(self):
        assert d16("-2.9").to_int() == -2
        assert int(d16("2.9")) == 2

    def test_to_int_narrowing(self):
        assert d16("300").to_int(8) == 44
        assert decimal_of("4294967297", 16).to_int(32) == 1

    def test_to_float(self):
        assert float(d16("0.1")) == 0.1

    def test_to_decimal_is_exact(self):
        assert d16("1.50").to_decimal() == Decimal("1.50")
        assert str(d16("1.50").to_decimal()) == "1.50"
