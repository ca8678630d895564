"""
Arbitrary-precision NumericValue backed by :class:`decimal.Decimal`.

A value owns an exact decimal (coefficient and exponent) and the
:class:`~numval.context.Context` that rounds every result computed from it.
Binary operations round to the context chosen by
:func:`~numval.context.resolve_context`; unary operations round to the
operand's own context.
"""

from __future__ import annotations

import decimal
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from . import decimal_math
from .context import Context, RoundingPolicy, exact_decimal_context, resolve_context
from .undefined import undefined_result
from .value import NumericValue, TypePrecedence

if TYPE_CHECKING:
    from .factory import ValueFactory


class ArbitraryPrecisionValue(BaseModel, NumericValue):
    """
    Arbitrary-precision decimal value.

    Object equality (``==``) requires the same decimal representation and the
    same context, so ``2.0`` and ``2.00`` or two contexts of different
    precision are distinct objects. Use :meth:`is_equal` for numeric equality.

    Example:
        >>> ArbitraryPrecisionValue(Decimal("1.5"), Context(16))
        ArbitraryPrecisionValue('1.5', Context(precision=16, rounding=HALF_EVEN))
    """

    model_config = ConfigDict(frozen=True)

    type_precedence: ClassVar[TypePrecedence] = TypePrecedence.ARBITRARY_PRECISION

    value: Decimal = Field(description="The exact finite decimal magnitude")
    context: Context = Field(description="Precision and rounding of computed results")

    def __init__(self, value: Decimal, context: Context, **kwargs):
        super().__init__(value=value, context=context, **kwargs)

    @classmethod
    def from_float(cls, value: float, context: Context) -> ArbitraryPrecisionValue:
        """
        Convert a float through its shortest decimal repr.

        The conversion is lossless: the digits are not rounded to ``context``,
        which only applies to results computed from the new value.
        """
        return cls(Decimal(repr(value)), context)

    @property
    def factory(self) -> ValueFactory:
        from .factory import decimal_factory

        return decimal_factory(self.context)

    def promote(self, other: NumericValue) -> NumericValue:
        # Only the undefined value ranks above arbitrary precision
        return other

    def unwrap(self) -> Decimal:
        return self.value

    def is_undefined(self) -> bool:
        return False

    # Result construction

    def _compute(
        self,
        operation: str,
        compute: Callable[..., Decimal],
        *args: Any,
        context: Context | None = None,
    ) -> NumericValue:
        """
        Run a decimal computation and box its result in ``context``.

        Defaults to this value's own context. Trapped decimal signals, domain
        errors and non-finite results become the undefined value.
        """
        if context is None:
            context = self.context
        try:
            result = compute(*args)
        except (ArithmeticError, ValueError) as exc:
            return undefined_result(operation, exc)
        if not result.is_finite():
            return undefined_result(operation, result)
        return ArbitraryPrecisionValue(result, context)

    def _binary(
        self, operation: str, method: str, other: ArbitraryPrecisionValue
    ) -> NumericValue:
        # One rounding, directly to the winning context
        context = resolve_context(self.context, other.context)
        compute = getattr(context.decimal_context(), method)
        return self._compute(operation, compute, self.value, other.value, context=context)

    def _unary(self, operation: str, method: str) -> NumericValue:
        compute = getattr(self.context.decimal_context(), method)
        return self._compute(operation, compute, self.value)

    # Binary hooks; ``other`` is an ArbitraryPrecisionValue

    def _add(self, other: ArbitraryPrecisionValue) -> NumericValue:
        return self._binary("add", "add", other)

    def _subtract(self, other: ArbitraryPrecisionValue) -> NumericValue:
        return self._binary("subtract", "subtract", other)

    def _multiply(self, other: ArbitraryPrecisionValue) -> NumericValue:
        return self._binary("multiply", "multiply", other)

    def _divide(self, other: ArbitraryPrecisionValue) -> NumericValue:
        return self._binary("divide", "divide", other)

    def _remainder(self, other: ArbitraryPrecisionValue) -> NumericValue:
        # Truncated quotient, so the sign follows the dividend. The exact context
        # avoids DivisionImpossible when the quotient has more digits than the
        # result context.
        context = resolve_context(self.context, other.context)
        return self._compute(
            "remainder",
            lambda x, y: decimal_math.round_to(exact_decimal_context().remainder(x, y), context),
            self.value,
            other.value,
            context=context,
        )

    def _math(
        self, operation: str, function: Callable[..., Decimal], other: ArbitraryPrecisionValue
    ) -> NumericValue:
        context = resolve_context(self.context, other.context)
        return self._compute(
            operation, function, self.value, other.value, context, context=context
        )

    def _power(self, other: ArbitraryPrecisionValue) -> NumericValue:
        return self._math("power", decimal_math.power, other)

    def _nth_root(self, other: ArbitraryPrecisionValue) -> NumericValue:
        return self._math("nth_root", decimal_math.nth_root, other)

    def _logarithm(self, other: ArbitraryPrecisionValue) -> NumericValue:
        return self._math("logarithm", decimal_math.logarithm, other)

    def _hypotenuse(self, other: ArbitraryPrecisionValue) -> NumericValue:
        return self._math("hypotenuse", decimal_math.hypotenuse, other)

    def _inverse_tangent2(self, other: ArbitraryPrecisionValue) -> NumericValue:
        return self._math("inverse_tangent2", decimal_math.inverse_tangent2, other)

    def _compare(self, other: ArbitraryPrecisionValue) -> int:
        return (self.value > other.value) - (self.value < other.value)

    # Unary operations, rounded to this value's context

    def square_root(self) -> NumericValue:
        return self._unary("square_root", "sqrt")

    def exponential(self) -> NumericValue:
        return self._unary("exponential", "exp")

    def natural_logarithm(self) -> NumericValue:
        if self.value.is_zero():
            return undefined_result("natural_logarithm", self.value)
        return self._unary("natural_logarithm", "ln")

    def common_logarithm(self) -> NumericValue:
        if self.value.is_zero():
            return undefined_result("common_logarithm", self.value)
        return self._unary("common_logarithm", "log10")

    def binary_logarithm(self) -> NumericValue:
        return self._compute(
            "binary_logarithm", decimal_math.binary_logarithm, self.value, self.context
        )

    def cube_root(self) -> NumericValue:
        return self._compute(
            "cube_root", decimal_math.nth_root, self.value, Decimal(3), self.context
        )

    def absolute_value(self) -> ArbitraryPrecisionValue:
        return ArbitraryPrecisionValue(self.value.copy_abs(), self.context)

    def negate(self) -> ArbitraryPrecisionValue:
        return ArbitraryPrecisionValue(self.value.copy_negate(), self.context)

    def _to_integral(self, operation: str, rounding: str) -> NumericValue:
        return self._compute(
            operation,
            self.value.to_integral_value,
            rounding,
            exact_decimal_context(),
        )

    def floor(self) -> NumericValue:
        return self._to_integral("floor", decimal.ROUND_FLOOR)

    def ceil(self) -> NumericValue:
        return self._to_integral("ceil", decimal.ROUND_CEILING)

    def integer_part(self) -> NumericValue:
        return self._to_integral("integer_part", decimal.ROUND_DOWN)

    def fractional_part(self) -> NumericValue:
        """``self - integer_part()``, computed exactly; keeps the sign of this value."""
        exact = exact_decimal_context()
        integral = self.value.to_integral_value(decimal.ROUND_DOWN, exact)
        return self._compute("fractional_part", exact.subtract, self.value, integral)

    def round(
        self, scale: int = 0, policy: RoundingPolicy = RoundingPolicy.HALF_EVEN
    ) -> NumericValue:
        """
        Quantize to ``scale`` digits right of the decimal point.

        The context is kept, so the significant digits of the result may later
        be rounded again by operations in that context.

        Example:
            >>> ArbitraryPrecisionValue(Decimal("2.345"), Context(16)).round(2).value
            Decimal('2.34')
        """
        quantum = Decimal((0, (1,), -scale))
        return self._compute(
            "round",
            self.value.quantize,
            quantum,
            None,
            exact_decimal_context(RoundingPolicy(policy)),
        )

    def precision(self, context: Context) -> NumericValue:
        """Re-round to ``context``; the result carries ``context``."""
        return self._compute(
            "precision", context.decimal_context().create_decimal, self.value, context=context
        )

    def significant_figures(self) -> int:
        return len(self.value.as_tuple().digits)

    def exponent(self) -> int:
        if self.value.is_zero():
            return 0
        return self.value.adjusted()

    def mantissa(self) -> NumericValue:
        return self._compute(
            "mantissa", self.value.scaleb, -self.exponent(), exact_decimal_context()
        )

    # Functions evaluated by decimal_math

    def _transcendental(self, operation: str) -> NumericValue:
        return self._compute(operation, decimal_math.evaluate, operation, self.value, self.context)

    def degrees(self) -> NumericValue:
        return self._compute("degrees", decimal_math.degrees, self.value, self.context)

    def radians(self) -> NumericValue:
        return self._compute("radians", decimal_math.radians, self.value, self.context)

    def pi(self) -> NumericValue:
        return self._compute("pi", decimal_math.pi, self.context)

    def e(self) -> NumericValue:
        return self._compute("e", decimal_math.e, self.context)

    def sine(self) -> NumericValue:
        return self._transcendental("sine")

    def cosine(self) -> NumericValue:
        return self._transcendental("cosine")

    def tangent(self) -> NumericValue:
        return self._transcendental("tangent")

    def inverse_sine(self) -> NumericValue:
        return self._transcendental("inverse_sine")

    def inverse_cosine(self) -> NumericValue:
        return self._transcendental("inverse_cosine")

    def inverse_tangent(self) -> NumericValue:
        return self._transcendental("inverse_tangent")

    def hyperbolic_sine(self) -> NumericValue:
        return self._transcendental("hyperbolic_sine")

    def hyperbolic_cosine(self) -> NumericValue:
        return self._transcendental("hyperbolic_cosine")

    def hyperbolic_tangent(self) -> NumericValue:
        return self._transcendental("hyperbolic_tangent")

    def inverse_hyperbolic_sine(self) -> NumericValue:
        return self._transcendental("inverse_hyperbolic_sine")

    def inverse_hyperbolic_cosine(self) -> NumericValue:
        return self._transcendental("inverse_hyperbolic_cosine")

    def inverse_hyperbolic_tangent(self) -> NumericValue:
        return self._transcendental("inverse_hyperbolic_tangent")

    # Comparisons and conversions

    def signum(self) -> int:
        if self.value.is_zero():
            return 0
        return -1 if self.value.is_signed() else 1

    def _truncate(self) -> int:
        return int(self.value)

    def to_float(self) -> float:
        return float(self.value)

    def to_decimal(self) -> Decimal:
        return self.value

    def __eq__(self, other: Any) -> bool:
        """Object equality: same decimal representation and same context."""
        return (
            isinstance(other, ArbitraryPrecisionValue)
            and self.value.compare_total(other.value) == 0
            and self.context == other.context
        )

    def __hash__(self) -> int:
        return hash((self.value, self.context))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"ArbitraryPrecisionValue('{self.value}', {self.context!r})"
