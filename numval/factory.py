"""
Value factories: construction entry points per representation.

A factory binds a representation kind (and, for arbitrary precision, a
Context) and caches frequently used constants, so arithmetic mixing a cached
constant with a fresh value from the same factory never promotes precision.

Example:
    >>> factory = decimal_factory(16)
    >>> factory.of("2.5").add(factory.half)
    ArbitraryPrecisionValue('3.0', Context(precision=16, rounding=HALF_EVEN))
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from decimal import Decimal
from functools import cached_property, lru_cache
from typing import Any, Union

from .context import Context, RoundingPolicy, default_context, exact_decimal_context
from .decimal_value import ArbitraryPrecisionValue
from .errors import InvalidLiteralError
from .floating import FloatingValue
from .undefined import UNDEFINED, UndefinedValue, undefined_result
from .value import NumericValue

# The closed set of representations every value belongs to
AnyValue = Union[FloatingValue, ArbitraryPrecisionValue, UndefinedValue]

ValueInput = Union[int, float, str, Decimal, NumericValue]


class ValueFactory(ABC):
    """
    Base class for value factories.

    Subclasses implement :meth:`of`; the constants are derived from it once
    per factory instance.
    """

    representation: str

    @abstractmethod
    def of(self, value: ValueInput) -> NumericValue:
        """
        Create a value of this factory's representation.

        Args:
            value: ``int``, ``float``, decimal string, ``Decimal`` or an
                existing NumericValue

        Returns:
            The new value, or ``UNDEFINED`` for non-finite or unrepresentable input

        Raises:
            InvalidLiteralError: If a string is not a decimal literal
            TypeError: If the input type is not supported
        """

    @cached_property
    def negative_one(self) -> NumericValue:
        return self.of(-1)

    @cached_property
    def zero(self) -> NumericValue:
        return self.of(0)

    @cached_property
    def one(self) -> NumericValue:
        return self.of(1)

    @cached_property
    def two(self) -> NumericValue:
        return self.of(2)

    @cached_property
    def three(self) -> NumericValue:
        return self.of(3)

    @cached_property
    def ten(self) -> NumericValue:
        return self.of(10)

    @cached_property
    def hundred(self) -> NumericValue:
        return self.of(100)

    @cached_property
    def thousand(self) -> NumericValue:
        return self.of(1000)

    @cached_property
    def half(self) -> NumericValue:
        return self.of("0.5")

    @cached_property
    def tenth(self) -> NumericValue:
        return self.of("0.1")

    @cached_property
    def hundredth(self) -> NumericValue:
        return self.of("0.01")

    @cached_property
    def thousandth(self) -> NumericValue:
        return self.of("0.001")


def _parse(literal: str, representation: str) -> Decimal:
    """Parse a decimal string exactly, without rounding."""
    try:
        return exact_decimal_context().create_decimal(literal.strip())
    except ArithmeticError as exc:
        raise InvalidLiteralError(literal, representation) from exc


def _unsupported(value: Any) -> TypeError:
    return TypeError(f"Cannot create a numeric value from {type(value).__name__}")


class FloatingFactory(ValueFactory):
    """Factory of :class:`FloatingValue`; floats have no configurable context."""

    representation = "floating"

    def of(self, value: ValueInput) -> NumericValue:
        if isinstance(value, NumericValue):
            return UNDEFINED if value.is_undefined() else self._from_float(value.to_float())
        if isinstance(value, bool):
            raise _unsupported(value)
        if isinstance(value, float):
            return self._from_float(value)
        if isinstance(value, int):
            try:
                return self._from_float(float(value))
            except OverflowError as exc:
                return undefined_result("of", exc)
        if isinstance(value, Decimal):
            return self._from_float(float(value))
        if isinstance(value, str):
            return self._from_float(float(_parse(value, self.representation)))
        raise _unsupported(value)

    @staticmethod
    def _from_float(value: float) -> NumericValue:
        if not math.isfinite(value):
            return undefined_result("of", value)
        return FloatingValue(value)

    def __repr__(self) -> str:
        return "FloatingFactory()"


class ArbitraryPrecisionFactory(ValueFactory):
    """
    Factory of :class:`ArbitraryPrecisionValue` bound to one Context.

    Every value it creates, constants included, is rounded to and carries
    that context.
    """

    representation = "decimal"

    def __init__(self, context: Context):
        self.context = context

    def of(self, value: ValueInput) -> NumericValue:
        if isinstance(value, FloatingValue):
            # All repr digits, not the 16-digit floating context
            value = value.unwrap()
        elif isinstance(value, NumericValue):
            if value.is_undefined():
                return UNDEFINED
            return self._from_decimal(value.to_decimal())
        if isinstance(value, bool):
            raise _unsupported(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                return undefined_result("of", value)
            return self._from_decimal(Decimal(repr(value)))
        if isinstance(value, int):
            return self._from_decimal(Decimal(value))
        if isinstance(value, Decimal):
            return self._from_decimal(value)
        if isinstance(value, str):
            return self._from_decimal(_parse(value, self.representation))
        raise _unsupported(value)

    def _from_decimal(self, value: Decimal) -> NumericValue:
        if not value.is_finite():
            return undefined_result("of", value)
        try:
            rounded = self.context.decimal_context().create_decimal(value)
        except ArithmeticError as exc:
            return undefined_result("of", exc)
        return ArbitraryPrecisionValue(rounded, self.context)

    def __repr__(self) -> str:
        return f"ArbitraryPrecisionFactory({self.context!r})"


class UndefinedFactory(ValueFactory):
    """Factory whose every value, constants included, is ``UNDEFINED``."""

    representation = "undefined"

    def of(self, value: ValueInput) -> NumericValue:
        return UNDEFINED

    def __repr__(self) -> str:
        return "UndefinedFactory()"


_FLOATING_FACTORY = FloatingFactory()
_UNDEFINED_FACTORY = UndefinedFactory()


def floating_factory() -> FloatingFactory:
    return _FLOATING_FACTORY


def undefined_factory() -> UndefinedFactory:
    return _UNDEFINED_FACTORY


@lru_cache(maxsize=None)
def _decimal_factory(context: Context) -> ArbitraryPrecisionFactory:
    return ArbitraryPrecisionFactory(context)


def decimal_factory(
    precision: int | Context | None = None,
    rounding: RoundingPolicy | str | None = None,
) -> ArbitraryPrecisionFactory:
    """
    Get the arbitrary-precision factory of a context.

    Factories are memoized per context, so their constant caches are shared.

    Args:
        precision: Significant digits, or a complete Context. Defaults to the
            configured default precision.
        rounding: Rounding policy. Defaults to the configured default rounding;
            must be omitted when ``precision`` is a Context.
    """
    if isinstance(precision, Context):
        if rounding is not None:
            raise ValueError("rounding cannot be combined with a Context")
        return _decimal_factory(precision)
    default = default_context()
    context = Context(
        default.precision if precision is None else precision,
        default.rounding if rounding is None else rounding,
    )
    return _decimal_factory(context)


def floating_of(value: ValueInput) -> NumericValue:
    """Create a floating value; see :meth:`FloatingFactory.of`."""
    return floating_factory().of(value)


def decimal_of(
    value: ValueInput,
    precision: int | Context | None = None,
    rounding: RoundingPolicy | str | None = None,
) -> NumericValue:
    """
    Create an arbitrary-precision value.

    Example:
        >>> decimal_of("1.25", 2)
        ArbitraryPrecisionValue('1.2', Context(precision=2, rounding=HALF_EVEN))
    """
    return decimal_factory(precision, rounding).of(value)
