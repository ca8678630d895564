"""
Precision contexts for arbitrary-precision values.

A :class:`Context` is an immutable ``(precision, rounding)`` pair. It decides
how many significant digits an arbitrary-precision value keeps after each
operation and how the discarded digits are rounded. Floating values carry the
fixed :data:`FLOATING_CONTEXT`.
"""

from __future__ import annotations

import decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from .config import get_settings


class RoundingPolicy(str, Enum):
    """
    Rounding policies applied to discarded digits.

    ``UNNECESSARY`` asserts that no rounding is needed: any operation that
    would have to drop a non-zero digit is a domain error.
    """

    UP = "UP"  # away from zero
    DOWN = "DOWN"  # toward zero
    CEILING = "CEILING"  # toward +inf
    FLOOR = "FLOOR"  # toward -inf
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    UNNECESSARY = "UNNECESSARY"

    @property
    def decimal_rounding(self) -> str:
        """The matching :mod:`decimal` rounding constant."""
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING = {
    RoundingPolicy.UP: decimal.ROUND_UP,
    RoundingPolicy.DOWN: decimal.ROUND_DOWN,
    RoundingPolicy.CEILING: decimal.ROUND_CEILING,
    RoundingPolicy.FLOOR: decimal.ROUND_FLOOR,
    RoundingPolicy.HALF_UP: decimal.ROUND_HALF_UP,
    RoundingPolicy.HALF_DOWN: decimal.ROUND_HALF_DOWN,
    RoundingPolicy.HALF_EVEN: decimal.ROUND_HALF_EVEN,
    # Inexact is trapped for UNNECESSARY, the mode itself never applies
    RoundingPolicy.UNNECESSARY: decimal.ROUND_HALF_EVEN,
}

_TRAPS = [decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow]


def _traps_for(rounding: RoundingPolicy) -> list:
    if rounding is RoundingPolicy.UNNECESSARY:
        return _TRAPS + [decimal.Inexact]
    return list(_TRAPS)


class Context(BaseModel):
    """
    Immutable precision context.

    Two contexts are equal when both precision and rounding match; promotion
    only looks at the precision (see :func:`resolve_context`).

    Example:
        >>> Context(16)
        Context(precision=16, rounding=HALF_EVEN)
    """

    model_config = ConfigDict(frozen=True)

    precision: PositiveInt = Field(description="Number of significant digits retained")
    rounding: RoundingPolicy = Field(
        default=RoundingPolicy.HALF_EVEN, description="Rounding applied to discarded digits"
    )

    def __init__(
        self,
        precision: int,
        rounding: RoundingPolicy | str = RoundingPolicy.HALF_EVEN,
        **kwargs
    ):
        super().__init__(precision=precision, rounding=rounding, **kwargs)

    def decimal_context(self) -> decimal.Context:
        """
        Build a fresh :class:`decimal.Context` for this precision context.

        The exponent range is left effectively unbounded; only the number of
        significant digits is limited. Invalid operations, division by zero and
        overflow are trapped so callers can degrade them to the undefined value.
        """
        return decimal.Context(
            prec=self.precision,
            rounding=self.rounding.decimal_rounding,
            Emax=decimal.MAX_EMAX,
            Emin=decimal.MIN_EMIN,
            traps=_traps_for(self.rounding),
        )

    def __repr__(self) -> str:
        return f"Context(precision={self.precision}, rounding={self.rounding.value})"

    def __str__(self) -> str:
        return f"precision={self.precision} rounding={self.rounding.value}"


DECIMAL32 = Context(7, RoundingPolicy.HALF_EVEN)
DECIMAL64 = Context(16, RoundingPolicy.HALF_EVEN)
DECIMAL128 = Context(34, RoundingPolicy.HALF_EVEN)

# Implicit, fixed context of 64-bit binary floating values
FLOATING_CONTEXT = DECIMAL64


def resolve_context(first: Context, second: Context) -> Context:
    """
    Pick the context of a binary operation's result.

    The context with the larger precision wins; on a tie the first one is kept
    (both have the same precision, so either is correct).
    """
    return second if second.precision > first.precision else first


def default_context() -> Context:
    """Default context for arbitrary-precision creation, taken from settings."""
    settings = get_settings()
    return Context(settings.DEFAULT_PRECISION, RoundingPolicy(settings.DEFAULT_ROUNDING))


def exact_decimal_context(rounding: RoundingPolicy = RoundingPolicy.HALF_EVEN) -> decimal.Context:
    """
    A :class:`decimal.Context` that never limits significant digits.

    Used for operations that must not round to a precision: quantizing to a
    scale, exact subtraction of the integer part and scaling by powers of ten.
    """
    return decimal.Context(
        prec=decimal.MAX_PREC,
        rounding=rounding.decimal_rounding,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=_traps_for(rounding),
    )
