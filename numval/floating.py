"""
Floating NumericValue: a finite 64-bit IEEE-754 binary double.

Arithmetic is native ``float`` arithmetic and transcendental functions come
from :mod:`math`. NaN and infinities never leak out: a non-finite native
result, or a native domain exception, becomes ``UNDEFINED``.
"""

from __future__ import annotations

import math
import operator
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable, ClassVar

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat

from .context import FLOATING_CONTEXT, Context, RoundingPolicy, exact_decimal_context
from .decimal_value import ArbitraryPrecisionValue
from .undefined import undefined_result
from .value import NumericValue, TypePrecedence

if TYPE_CHECKING:
    from .factory import ValueFactory


def _native(operation: str, compute: Callable[..., float], *args: float) -> NumericValue:
    """Run a native computation and box its result, degrading domain errors."""
    try:
        result = compute(*args)
    except (ArithmeticError, ValueError) as exc:
        return undefined_result(operation, exc)
    if not math.isfinite(result):
        return undefined_result(operation, result)
    return FloatingValue(result)


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and int(value) % 2 == 1


def _root(value: float, degree: float) -> float:
    if degree == 0:
        raise ZeroDivisionError("zeroth root")
    if value < 0:
        if _is_odd_integer(degree):
            return -math.pow(-value, 1.0 / degree)
        raise ValueError("even or fractional root of a negative number")
    return math.pow(value, 1.0 / degree)


def _as_decimal(value: float) -> Decimal:
    # Shortest round-tripping repr, so 0.1 converts to Decimal('0.1')
    return Decimal(repr(value))


class FloatingValue(BaseModel, NumericValue):
    """
    Floating-point numeric value.

    The implicit context is fixed to :data:`~numval.context.FLOATING_CONTEXT`
    (16 significant digits, half-even) and is never configurable.
    """

    model_config = ConfigDict(frozen=True)

    type_precedence: ClassVar[TypePrecedence] = TypePrecedence.FLOATING

    value: FiniteFloat = Field(description="The finite binary floating-point value")

    def __init__(self, value: float, **kwargs):
        super().__init__(value=value, **kwargs)

    @property
    def context(self) -> Context:
        return FLOATING_CONTEXT

    @property
    def factory(self) -> ValueFactory:
        from .factory import floating_factory

        return floating_factory()

    def promote(self, other: NumericValue) -> NumericValue:
        """Promote to ``other``'s representation, taking its context."""
        if isinstance(other, ArbitraryPrecisionValue):
            return ArbitraryPrecisionValue.from_float(self.value, other.context)
        return other

    def unwrap(self) -> float:
        return self.value

    def is_undefined(self) -> bool:
        return False

    # Binary hooks; ``other`` is a FloatingValue

    def _add(self, other: FloatingValue) -> NumericValue:
        return _native("add", operator.add, self.value, other.value)

    def _subtract(self, other: FloatingValue) -> NumericValue:
        return _native("subtract", operator.sub, self.value, other.value)

    def _multiply(self, other: FloatingValue) -> NumericValue:
        return _native("multiply", operator.mul, self.value, other.value)

    def _divide(self, other: FloatingValue) -> NumericValue:
        return _native("divide", operator.truediv, self.value, other.value)

    def _remainder(self, other: FloatingValue) -> NumericValue:
        return _native("remainder", math.fmod, self.value, other.value)

    def _power(self, other: FloatingValue) -> NumericValue:
        return _native("power", math.pow, self.value, other.value)

    def _nth_root(self, other: FloatingValue) -> NumericValue:
        return _native("nth_root", _root, self.value, other.value)

    def _logarithm(self, other: FloatingValue) -> NumericValue:
        return _native("logarithm", math.log, self.value, other.value)

    def _hypotenuse(self, other: FloatingValue) -> NumericValue:
        return _native("hypotenuse", math.hypot, self.value, other.value)

    def _inverse_tangent2(self, other: FloatingValue) -> NumericValue:
        return _native("inverse_tangent2", math.atan2, self.value, other.value)

    def _compare(self, other: FloatingValue) -> int:
        return (self.value > other.value) - (self.value < other.value)

    # Unary operations

    def exponential(self) -> NumericValue:
        return _native("exponential", math.exp, self.value)

    def square_root(self) -> NumericValue:
        return _native("square_root", math.sqrt, self.value)

    def cube_root(self) -> NumericValue:
        return _native("cube_root", _root, self.value, 3.0)

    def natural_logarithm(self) -> NumericValue:
        return _native("natural_logarithm", math.log, self.value)

    def common_logarithm(self) -> NumericValue:
        return _native("common_logarithm", math.log10, self.value)

    def binary_logarithm(self) -> NumericValue:
        return _native("binary_logarithm", math.log2, self.value)

    def absolute_value(self) -> FloatingValue:
        return FloatingValue(abs(self.value))

    def negate(self) -> FloatingValue:
        return FloatingValue(-self.value)

    def floor(self) -> FloatingValue:
        return FloatingValue(float(math.floor(self.value)))

    def ceil(self) -> FloatingValue:
        return FloatingValue(float(math.ceil(self.value)))

    def integer_part(self) -> FloatingValue:
        return FloatingValue(float(math.trunc(self.value)))

    def fractional_part(self) -> FloatingValue:
        return FloatingValue(math.modf(self.value)[0])

    def round(
        self, scale: int = 0, policy: RoundingPolicy = RoundingPolicy.HALF_EVEN
    ) -> NumericValue:
        """Round the decimal form of this value to ``scale`` fractional digits."""
        quantum = Decimal((0, (1,), -scale))
        try:
            rounded = _as_decimal(self.value).quantize(
                quantum, context=exact_decimal_context(RoundingPolicy(policy))
            )
        except ArithmeticError as exc:
            return undefined_result("round", exc)
        return _native("round", float, rounded)

    def precision(self, context: Context) -> NumericValue:
        """Round to the significant digits of ``context``; the result stays floating."""
        try:
            rounded = context.decimal_context().create_decimal(_as_decimal(self.value))
        except ArithmeticError as exc:
            return undefined_result("precision", exc)
        return _native("precision", float, rounded)

    def significant_figures(self) -> int:
        normalized = _as_decimal(self.value).normalize(exact_decimal_context())
        return len(normalized.as_tuple().digits)

    def exponent(self) -> int:
        if self.value == 0:
            return 0
        return _as_decimal(self.value).adjusted()

    def mantissa(self) -> FloatingValue:
        if self.value == 0:
            return self
        scaled = _as_decimal(self.value).scaleb(-self.exponent(), exact_decimal_context())
        return FloatingValue(float(scaled))

    def degrees(self) -> NumericValue:
        return _native("degrees", math.degrees, self.value)

    def radians(self) -> NumericValue:
        return _native("radians", math.radians, self.value)

    def pi(self) -> FloatingValue:
        return FloatingValue(math.pi)

    def e(self) -> FloatingValue:
        return FloatingValue(math.e)

    def sine(self) -> NumericValue:
        return _native("sine", math.sin, self.value)

    def cosine(self) -> NumericValue:
        return _native("cosine", math.cos, self.value)

    def tangent(self) -> NumericValue:
        return _native("tangent", math.tan, self.value)

    def inverse_sine(self) -> NumericValue:
        return _native("inverse_sine", math.asin, self.value)

    def inverse_cosine(self) -> NumericValue:
        return _native("inverse_cosine", math.acos, self.value)

    def inverse_tangent(self) -> NumericValue:
        return _native("inverse_tangent", math.atan, self.value)

    def hyperbolic_sine(self) -> NumericValue:
        return _native("hyperbolic_sine", math.sinh, self.value)

    def hyperbolic_cosine(self) -> NumericValue:
        return _native("hyperbolic_cosine", math.cosh, self.value)

    def hyperbolic_tangent(self) -> NumericValue:
        return _native("hyperbolic_tangent", math.tanh, self.value)

    def inverse_hyperbolic_sine(self) -> NumericValue:
        return _native("inverse_hyperbolic_sine", math.asinh, self.value)

    def inverse_hyperbolic_cosine(self) -> NumericValue:
        return _native("inverse_hyperbolic_cosine", math.acosh, self.value)

    def inverse_hyperbolic_tangent(self) -> NumericValue:
        return _native("inverse_hyperbolic_tangent", math.atanh, self.value)

    # Comparisons and conversions

    def signum(self) -> int:
        return (self.value > 0) - (self.value < 0)

    def _truncate(self) -> int:
        return math.trunc(self.value)

    def to_float(self) -> float:
        return self.value

    def to_decimal(self) -> Decimal:
        """The decimal repr of this value rounded to the floating context."""
        return FLOATING_CONTEXT.decimal_context().create_decimal(_as_decimal(self.value))

    def __eq__(self, other: Any) -> bool:
        """Object equality: another floating value with the same float."""
        return isinstance(other, FloatingValue) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return repr(self.value)

    def __repr__(self) -> str:
        return f"FloatingValue({self.value!r})"
