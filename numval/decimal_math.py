"""
Correctly-rounded decimal math for arbitrary-precision values.

Every routine takes finite :class:`~decimal.Decimal` operands and a target
:class:`~numval.context.Context`, evaluates with guard digits and rounds once
to the target context. Domain errors surface as :class:`ArithmeticError` or
:class:`ValueError`; callers degrade them to the undefined value.

Functions without a :mod:`decimal` primitive (trigonometric, hyperbolic, pi)
are evaluated with sympy's arbitrary-precision ``evalf``.
"""

from __future__ import annotations

import decimal
from decimal import Decimal
from typing import Callable, Dict

import sympy as sp

from .config import get_settings
from .context import Context, RoundingPolicy


# Named single-argument functions evaluated through sympy
TRANSCENDENTALS: Dict[str, Callable[[sp.Expr], sp.Expr]] = {
    "sine": sp.sin,
    "cosine": sp.cos,
    "tangent": sp.tan,
    "inverse_sine": sp.asin,
    "inverse_cosine": sp.acos,
    "inverse_tangent": sp.atan,
    "hyperbolic_sine": sp.sinh,
    "hyperbolic_cosine": sp.cosh,
    "hyperbolic_tangent": sp.tanh,
    "inverse_hyperbolic_sine": sp.asinh,
    "inverse_hyperbolic_cosine": sp.acosh,
    "inverse_hyperbolic_tangent": sp.atanh,
}

_ONE = Decimal(1)
_TWO = Decimal(2)
_HALF_TURN_DEGREES = Decimal(180)


def working_digits(context: Context) -> int:
    """Digits carried by intermediate results: target precision plus guard digits."""
    return context.precision + get_settings().GUARD_DIGITS


def working_context(context: Context) -> decimal.Context:
    """Guard-digit :class:`decimal.Context` for intermediate results."""
    return Context(working_digits(context), RoundingPolicy.HALF_EVEN).decimal_context()


def round_to(value: Decimal, context: Context) -> Decimal:
    """
    Round ``value`` once to ``context``.

    Raises:
        ArithmeticError: If ``value`` is not finite, or if the context's
            rounding policy is ``UNNECESSARY`` and digits would be lost.
    """
    if not value.is_finite():
        raise decimal.InvalidOperation(f"non-finite result {value}")
    return context.decimal_context().create_decimal(value)


def _to_sympy(value: Decimal, digits: int) -> sp.Float:
    return sp.Float(str(value), digits)


def _from_sympy(result: sp.Expr, digits: int) -> Decimal:
    result = result.evalf(digits)
    if result.is_real is not True or result.is_finite is not True:
        raise ValueError(f"{result} is not a finite real number")
    return Decimal(str(result))


def evaluate(name: str, value: Decimal, context: Context) -> Decimal:
    """
    Evaluate the named transcendental function at ``value``.

    Example:
        >>> evaluate("sine", Decimal("0.5"), Context(10))
        Decimal('0.4794255386')
    """
    function = TRANSCENDENTALS[name]
    digits = working_digits(context)
    return round_to(_from_sympy(function(_to_sympy(value, digits)), digits), context)


def inverse_tangent2(y: Decimal, x: Decimal, context: Context) -> Decimal:
    """Two-argument arctangent; undefined for ``y == x == 0``."""
    digits = working_digits(context)
    result = sp.atan2(_to_sympy(y, digits), _to_sympy(x, digits))
    return round_to(_from_sympy(result, digits), context)


def _pi(digits: int) -> Decimal:
    return _from_sympy(sp.pi, digits)


def pi(context: Context) -> Decimal:
    return round_to(_pi(working_digits(context)), context)


def e(context: Context) -> Decimal:
    return round_to(working_context(context).exp(_ONE), context)


def degrees(value: Decimal, context: Context) -> Decimal:
    """Convert radians to degrees."""
    work = working_context(context)
    half_turn = _pi(working_digits(context))
    return round_to(work.divide(work.multiply(value, _HALF_TURN_DEGREES), half_turn), context)


def radians(value: Decimal, context: Context) -> Decimal:
    """Convert degrees to radians."""
    work = working_context(context)
    half_turn = _pi(working_digits(context))
    return round_to(work.divide(work.multiply(value, half_turn), _HALF_TURN_DEGREES), context)


def power(base: Decimal, exponent: Decimal, context: Context) -> Decimal:
    """
    ``base ** exponent``.

    ``x ** 0`` is 1 for every ``x``, zero included. A negative base with a
    non-integral exponent and ``0 ** negative`` are domain errors.
    """
    if exponent.is_zero():
        return round_to(_ONE, context)
    return round_to(working_context(context).power(base, exponent), context)


def _is_odd_integer(value: Decimal) -> bool:
    return value == value.to_integral_value() and int(value) % 2 == 1


def nth_root(value: Decimal, degree: Decimal, context: Context) -> Decimal:
    """
    The ``degree``-th root of ``value``.

    Negative values only have odd integral roots.

    Example:
        >>> nth_root(Decimal(-8), Decimal(3), Context(4))
        Decimal('-2.000')
    """
    if degree.is_zero():
        raise ZeroDivisionError("zeroth root")
    if value.is_signed() and not value.is_zero():
        if not _is_odd_integer(degree):
            raise ValueError(f"root of degree {degree} of negative {value}")
        return nth_root(value.copy_negate(), degree, context).copy_negate()
    work = working_context(context)
    return round_to(work.power(value, work.divide(_ONE, degree)), context)


def logarithm(value: Decimal, base: Decimal, context: Context) -> Decimal:
    """Logarithm of ``value`` in ``base``; ``base`` must be positive and not 1."""
    work = working_context(context)
    return round_to(work.divide(_ln(work, value), _ln(work, base)), context)


def binary_logarithm(value: Decimal, context: Context) -> Decimal:
    return logarithm(value, _TWO, context)


def _ln(work: decimal.Context, value: Decimal) -> Decimal:
    # ln(0) is -Infinity without a trapped signal
    if value.is_zero():
        raise decimal.InvalidOperation("logarithm of zero")
    return work.ln(value)


def hypotenuse(x: Decimal, y: Decimal, context: Context) -> Decimal:
    """``sqrt(x**2 + y**2)`` without intermediate rounding to the target context."""
    work = working_context(context)
    return round_to(work.sqrt(work.add(work.multiply(x, x), work.multiply(y, y))), context)
