"""
Base NumericValue class for the numval value system.

This module provides the contract shared by every numeric value:
- A closed set of three representations (floating, arbitrary precision, undefined)
- Type promotion applied before every binary operation
- Exact and epsilon-tolerant comparisons
- Python operator overloading on top of the named operations

Binary operations are implemented here once as templates: both operands are
promoted to a common representation with :meth:`NumericValue.promote_types`
and the representation-specific hook (``_add``, ``_divide``, ...) of the
promoted left operand computes the result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import IntEnum
from typing import TYPE_CHECKING, Any, ClassVar

from .context import RoundingPolicy

if TYPE_CHECKING:
    from .context import Context
    from .factory import ValueFactory


class TypePrecedence(IntEnum):
    """
    Representation precedence used by promotion.

    Lower values promote to higher values: a floating value combined with an
    arbitrary-precision value becomes arbitrary precision, and anything
    combined with the undefined value is undefined.
    """

    FLOATING = 0
    ARBITRARY_PRECISION = 1
    UNDEFINED = 2


def narrow(integer: int, bits: int) -> int:
    """
    Narrow an integer to a signed two's-complement integer of ``bits`` bits.

    Example:
        >>> narrow(300, 8)
        44
        >>> narrow(-129, 8)
        127
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    modulus = 1 << bits
    integer &= modulus - 1
    if integer >= modulus >> 1:
        integer -= modulus
    return integer


class NumericValue(ABC):
    """
    Base class for all numeric values.

    Concrete representations:
    - ``FloatingValue``: a finite 64-bit binary float
    - ``ArbitraryPrecisionValue``: an exact decimal plus a precision ``Context``
    - ``UndefinedValue``: the ``UNDEFINED`` sentinel absorbing every operation

    Values are immutable: every operation returns a new value (or the same
    ``UNDEFINED`` instance). Domain errors never raise, they produce
    ``UNDEFINED``.

    Every value exposes ``context`` (its precision context) and ``factory``
    (the factory building values of the same representation and context).

    Note: concrete subclasses inherit from both BaseModel and NumericValue,
    e.g. ``class FloatingValue(BaseModel, NumericValue)``, so ``__eq__``,
    ``__hash__``, ``__str__`` and ``__repr__`` must be defined on the concrete
    class to take precedence over BaseModel's.
    """

    type_precedence: ClassVar[TypePrecedence]

    # Representation

    @abstractmethod
    def promote(self, other: NumericValue) -> NumericValue:
        """
        Convert this value to the representation of ``other``.

        Only called when ``other`` has a higher type precedence.
        """

    def promote_types(self, other: NumericValue) -> tuple[NumericValue, NumericValue]:
        """
        Promote both values to a common representation.

        The undefined check comes first and is unconditional; then the value
        with the lower precedence is converted to the other's representation.

        Example:
            floating(1.5).promote_types(decimal_of("2", 16))
            -> (ArbitraryPrecisionValue(1.5, 16), ArbitraryPrecisionValue(2, 16))
        """
        if other.is_undefined():
            return other, other
        if self.is_undefined():
            return self, self
        if self.type_precedence < other.type_precedence:
            return self.promote(other), other
        if other.type_precedence < self.type_precedence:
            return self, other.promote(self)
        return self, other

    @abstractmethod
    def unwrap(self) -> Any:
        """Return the backing primitive (``float``, ``Decimal`` or NaN)."""

    @abstractmethod
    def is_undefined(self) -> bool:
        """True only for the ``UNDEFINED`` sentinel."""

    def replace_if_undefined(self, replacement: NumericValue) -> NumericValue:
        """Return ``replacement`` if this value is undefined, otherwise this value."""
        return replacement if self.is_undefined() else self

    # Binary arithmetic

    def add(self, addend: NumericValue) -> NumericValue:
        """Addition: ``self + addend``"""
        left, right = self.promote_types(addend)
        return left._add(right)

    def subtract(self, subtrahend: NumericValue) -> NumericValue:
        """Subtraction: ``self - subtrahend``"""
        left, right = self.promote_types(subtrahend)
        return left._subtract(right)

    def multiply(self, multiplier: NumericValue) -> NumericValue:
        """Multiplication: ``self * multiplier``"""
        left, right = self.promote_types(multiplier)
        return left._multiply(right)

    def divide(self, divisor: NumericValue) -> NumericValue:
        """Division: ``self / divisor``; undefined when ``divisor`` is zero."""
        left, right = self.promote_types(divisor)
        return left._divide(right)

    def remainder(self, divisor: NumericValue) -> NumericValue:
        """
        Remainder of truncated division: ``self % divisor``.

        The result has the sign of ``self``; undefined when ``divisor`` is zero.
        """
        left, right = self.promote_types(divisor)
        return left._remainder(right)

    def power(self, exponent: NumericValue) -> NumericValue:
        """Exponentiation: ``self ** exponent``"""
        left, right = self.promote_types(exponent)
        return left._power(right)

    def nth_root(self, degree: NumericValue) -> NumericValue:
        """
        The ``degree``-th root of this value.

        Odd integral roots of negative numbers are defined; any other root of a
        negative number is undefined.
        """
        left, right = self.promote_types(degree)
        return left._nth_root(right)

    def logarithm(self, base: NumericValue) -> NumericValue:
        """Logarithm of this value in an arbitrary ``base``."""
        left, right = self.promote_types(base)
        return left._logarithm(right)

    def hypotenuse(self, y: NumericValue) -> NumericValue:
        """``sqrt(self**2 + y**2)``"""
        left, right = self.promote_types(y)
        return left._hypotenuse(right)

    def inverse_tangent2(self, x: NumericValue) -> NumericValue:
        """Two-argument arctangent ``atan2(self, x)``, this value being ``y``."""
        left, right = self.promote_types(x)
        return left._inverse_tangent2(right)

    @abstractmethod
    def _add(self, other: NumericValue) -> NumericValue: ...

    @abstractmethod
    def _subtract(self, other: NumericValue) -> NumericValue: ...

    @abstractmethod
    def _multiply(self, other: NumericValue) -> NumericValue: ...

    @abstractmethod
    def _divide(self, other: NumericValue) -> NumericValue: ...

    @abstractmethod
    def _remainder(self, other: NumericValue) -> NumericValue: ...

    @abstractmethod
    def _power(self, other: NumericValue) -> NumericValue: ...

    @abstractmethod
    def _nth_root(self, other: NumericValue) -> NumericValue: ...

    @abstractmethod
    def _logarithm(self, other: NumericValue) -> NumericValue: ...

    @abstractmethod
    def _hypotenuse(self, other: NumericValue) -> NumericValue: ...

    @abstractmethod
    def _inverse_tangent2(self, other: NumericValue) -> NumericValue: ...

    @abstractmethod
    def _compare(self, other: NumericValue) -> int:
        """-1, 0 or 1; ``other`` has the same (defined) representation."""

    # Derived arithmetic

    def square(self) -> NumericValue:
        return self.multiply(self)

    def cube(self) -> NumericValue:
        return self.multiply(self).multiply(self)

    def reciprocal(self) -> NumericValue:
        """``1 / self``; undefined for zero."""
        return self.factory.one.divide(self)

    def increment(self) -> NumericValue:
        return self.add(self.factory.one)

    def decrement(self) -> NumericValue:
        return self.subtract(self.factory.one)

    def average(self, other: NumericValue) -> NumericValue:
        """Mean of the two values: ``(self + other) / 2``"""
        total = self.add(other)
        return total.multiply(total.factory.half)

    def minimum(self, other: NumericValue) -> NumericValue:
        """The smaller of the two values, in their promoted representation."""
        left, right = self.promote_types(other)
        return left if left.is_less_than(right) else right

    def maximum(self, other: NumericValue) -> NumericValue:
        """The larger of the two values, in their promoted representation."""
        left, right = self.promote_types(other)
        return left if left.is_greater_than(right) else right

    def clamp(self, lower: NumericValue, upper: NumericValue) -> NumericValue:
        """Restrict this value to ``[lower, upper]``."""
        return self.maximum(lower).minimum(upper)

    # Unary operations, computed in the value's own context

    @abstractmethod
    def exponential(self) -> NumericValue: ...

    @abstractmethod
    def square_root(self) -> NumericValue: ...

    @abstractmethod
    def cube_root(self) -> NumericValue: ...

    @abstractmethod
    def natural_logarithm(self) -> NumericValue: ...

    @abstractmethod
    def common_logarithm(self) -> NumericValue: ...

    @abstractmethod
    def binary_logarithm(self) -> NumericValue: ...

    @abstractmethod
    def absolute_value(self) -> NumericValue: ...

    @abstractmethod
    def negate(self) -> NumericValue: ...

    @abstractmethod
    def floor(self) -> NumericValue: ...

    @abstractmethod
    def ceil(self) -> NumericValue: ...

    @abstractmethod
    def integer_part(self) -> NumericValue:
        """Truncate toward zero."""

    @abstractmethod
    def fractional_part(self) -> NumericValue:
        """``self - integer_part()``, with the sign of this value."""

    @abstractmethod
    def round(
        self, scale: int = 0, policy: RoundingPolicy = RoundingPolicy.HALF_EVEN
    ) -> NumericValue:
        """
        Round to ``scale`` digits right of the decimal point.

        A negative scale rounds left of the decimal point. The context (number
        of significant digits) is unchanged.
        """

    @abstractmethod
    def precision(self, context: Context) -> NumericValue:
        """Re-round to the significant digits of ``context`` without forcing a scale."""

    @abstractmethod
    def significant_figures(self) -> int: ...

    @abstractmethod
    def mantissa(self) -> NumericValue:
        """Mantissa of the scientific notation ``mantissa * 10**exponent``."""

    @abstractmethod
    def exponent(self) -> int:
        """Exponent of the scientific notation ``mantissa * 10**exponent``."""

    @abstractmethod
    def degrees(self) -> NumericValue: ...

    @abstractmethod
    def radians(self) -> NumericValue: ...

    @abstractmethod
    def pi(self) -> NumericValue:
        """The constant pi in this value's representation and context."""

    @abstractmethod
    def e(self) -> NumericValue:
        """Euler's number in this value's representation and context."""

    @abstractmethod
    def sine(self) -> NumericValue: ...

    @abstractmethod
    def cosine(self) -> NumericValue: ...

    @abstractmethod
    def tangent(self) -> NumericValue: ...

    @abstractmethod
    def inverse_sine(self) -> NumericValue: ...

    @abstractmethod
    def inverse_cosine(self) -> NumericValue: ...

    @abstractmethod
    def inverse_tangent(self) -> NumericValue: ...

    @abstractmethod
    def hyperbolic_sine(self) -> NumericValue: ...

    @abstractmethod
    def hyperbolic_cosine(self) -> NumericValue: ...

    @abstractmethod
    def hyperbolic_tangent(self) -> NumericValue: ...

    @abstractmethod
    def inverse_hyperbolic_sine(self) -> NumericValue: ...

    @abstractmethod
    def inverse_hyperbolic_cosine(self) -> NumericValue: ...

    @abstractmethod
    def inverse_hyperbolic_tangent(self) -> NumericValue: ...

    # Comparisons

    @abstractmethod
    def signum(self) -> int: ...

    def _ordering(self, other: NumericValue) -> int | None:
        """Exact ordering after promotion, ``None`` when undefined takes part."""
        left, right = self.promote_types(other)
        if left.is_undefined():
            return None
        return left._compare(right)

    def compare_to(self, other: NumericValue) -> int:
        """
        Three-way comparison for sorting.

        The undefined value compares as equal to anything here, which keeps
        sorts stable but is not a total order. Use with
        ``functools.cmp_to_key(NumericValue.compare_to)``.
        """
        ordering = self._ordering(other)
        return 0 if ordering is None else ordering

    def is_negative(self) -> bool:
        return self.signum() < 0

    def is_positive(self) -> bool:
        return self.signum() > 0

    def is_zero(self, epsilon: NumericValue | None = None) -> bool:
        """
        Exact: ``self == 0``. Tolerant: ``|self| <= epsilon``.
        """
        if _is_exact(epsilon):
            return self.signum() == 0
        if _any_undefined(self, epsilon):
            return False
        return self.absolute_value().is_less_than_or_equal(epsilon)

    def is_negative_or_zero(self, epsilon: NumericValue | None = None) -> bool:
        """Exact: ``self <= 0``. Tolerant: ``self <= epsilon``."""
        if _is_exact(epsilon):
            return self.signum() <= 0
        if _any_undefined(self, epsilon):
            return False
        return self.is_less_than_or_equal(epsilon)

    def is_positive_or_zero(self, epsilon: NumericValue | None = None) -> bool:
        """Exact: ``self >= 0``. Tolerant: ``self >= -epsilon``."""
        if _is_exact(epsilon):
            return self.signum() >= 0
        if _any_undefined(self, epsilon):
            return False
        return self.is_greater_than_or_equal(epsilon.negate())

    def is_equal(self, other: NumericValue, epsilon: NumericValue | None = None) -> bool:
        """
        Numeric equality, ignoring representation and context.

        Exact: ``self == other``. Tolerant: ``|self - other| <= epsilon``.
        The undefined value is equal to nothing, itself included.
        """
        if _is_exact(epsilon):
            return self._ordering(other) == 0
        if _any_undefined(self, other, epsilon):
            return False
        return self.subtract(other).absolute_value().is_less_than_or_equal(epsilon)

    def is_less_than(self, other: NumericValue) -> bool:
        ordering = self._ordering(other)
        return ordering is not None and ordering < 0

    def is_less_than_or_equal(
        self, other: NumericValue, epsilon: NumericValue | None = None
    ) -> bool:
        """Exact: ``self <= other``. Tolerant: ``other - self >= -epsilon``."""
        if _is_exact(epsilon):
            ordering = self._ordering(other)
            return ordering is not None and ordering <= 0
        if _any_undefined(self, other, epsilon):
            return False
        return other.subtract(self).is_greater_than_or_equal(epsilon.negate())

    def is_greater_than(self, other: NumericValue) -> bool:
        ordering = self._ordering(other)
        return ordering is not None and ordering > 0

    def is_greater_than_or_equal(
        self, other: NumericValue, epsilon: NumericValue | None = None
    ) -> bool:
        """Exact: ``self >= other``. Tolerant: ``self - other >= -epsilon``."""
        if _is_exact(epsilon):
            ordering = self._ordering(other)
            return ordering is not None and ordering >= 0
        if _any_undefined(self, other, epsilon):
            return False
        return self.subtract(other).is_greater_than_or_equal(epsilon.negate())

    # Conversions

    @abstractmethod
    def _truncate(self) -> int: ...

    def to_int(self, bits: int | None = None) -> int:
        """
        Convert to ``int`` by truncation toward zero.

        With ``bits`` the result is narrowed like a fixed-width signed integer
        cast (two's-complement wrap-around).
        """
        integer = self._truncate()
        return integer if bits is None else narrow(integer, bits)

    @abstractmethod
    def to_float(self) -> float: ...

    @abstractmethod
    def to_decimal(self) -> Decimal:
        """The exact decimal form of this value."""

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    # Operator overloading (Python magic methods)

    def _coerce(self, other: Any) -> Any:
        """Turn a Python number into a value of this value's representation."""
        if isinstance(other, NumericValue):
            return other
        if isinstance(other, (int, float, Decimal)):
            return self.factory.of(other)
        return NotImplemented

    def __add__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.add(other)

    def __radd__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else other.add(self)

    def __sub__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.subtract(other)

    def __rsub__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else other.subtract(self)

    def __mul__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.multiply(other)

    def __rmul__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else other.multiply(self)

    def __truediv__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.divide(other)

    def __rtruediv__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else other.divide(self)

    def __mod__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.remainder(other)

    def __rmod__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else other.remainder(self)

    def __pow__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.power(other)

    def __rpow__(self, other: Any) -> NumericValue:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else other.power(self)

    def __neg__(self) -> NumericValue:
        return self.negate()

    def __pos__(self) -> NumericValue:
        return self

    def __abs__(self) -> NumericValue:
        return self.absolute_value()

    # Ordering operators follow the strict predicates: False with UNDEFINED

    def __lt__(self, other: Any) -> bool:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.is_less_than(other)

    def __le__(self, other: Any) -> bool:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.is_less_than_or_equal(other)

    def __gt__(self, other: Any) -> bool:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.is_greater_than(other)

    def __ge__(self, other: Any) -> bool:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.is_greater_than_or_equal(other)


def _is_exact(epsilon: NumericValue | None) -> bool:
    # An exactly-zero epsilon reduces every tolerant comparison to the exact one
    return epsilon is None or epsilon.is_zero()


def _any_undefined(*values: NumericValue) -> bool:
    return any(value.is_undefined() for value in values)
