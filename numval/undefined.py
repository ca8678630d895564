"""
The undefined value.

``UNDEFINED`` stands for any undefined or unrepresentable result (division by
zero, logarithm of a non-positive number, overflow, non-finite literal, ...).
It absorbs every operation, is equal to nothing, itself included, and only
refuses conversions to types that have no NaN of their own.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from .context import FLOATING_CONTEXT, Context
from .errors import UndefinedConversionError
from .logging import get_context_logger
from .value import NumericValue, TypePrecedence

if TYPE_CHECKING:
    from .factory import ValueFactory

logger = get_context_logger(__name__)


class UndefinedValue(NumericValue):
    """
    Stateless singleton sentinel.

    Constructing ``UndefinedValue()`` always returns the same instance, and
    copying or unpickling preserves that identity.
    """

    type_precedence = TypePrecedence.UNDEFINED
    _instance: UndefinedValue | None = None

    def __new__(cls) -> UndefinedValue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> UndefinedValue:
        return self

    def __deepcopy__(self, memo: dict) -> UndefinedValue:
        return self

    def _absorb(self, *args: Any, **kwargs: Any) -> UndefinedValue:
        return self

    def _never(self, *args: Any, **kwargs: Any) -> bool:
        return False

    @property
    def context(self) -> Context:
        return FLOATING_CONTEXT

    @property
    def factory(self) -> ValueFactory:
        from .factory import undefined_factory

        return undefined_factory()

    def promote(self, other: NumericValue) -> NumericValue:
        return self

    def unwrap(self) -> float:
        return math.nan

    def is_undefined(self) -> bool:
        return True

    _add = _subtract = _multiply = _divide = _remainder = _power = _absorb
    _nth_root = _logarithm = _hypotenuse = _inverse_tangent2 = _absorb

    exponential = square_root = cube_root = _absorb
    natural_logarithm = common_logarithm = binary_logarithm = _absorb
    absolute_value = negate = floor = ceil = integer_part = fractional_part = _absorb
    round = precision = mantissa = degrees = radians = pi = e = _absorb
    sine = cosine = tangent = inverse_sine = inverse_cosine = inverse_tangent = _absorb
    hyperbolic_sine = hyperbolic_cosine = hyperbolic_tangent = _absorb
    inverse_hyperbolic_sine = inverse_hyperbolic_cosine = inverse_hyperbolic_tangent = _absorb

    # Unordered and non-reflexive: every predicate is False
    is_negative = is_positive = is_zero = _never
    is_negative_or_zero = is_positive_or_zero = _never
    is_equal = is_less_than = is_less_than_or_equal = _never
    is_greater_than = is_greater_than_or_equal = _never

    def _compare(self, other: NumericValue) -> int:
        return 0

    def compare_to(self, other: NumericValue) -> int:
        return 0

    def signum(self) -> int:
        return 0

    def significant_figures(self) -> int:
        return 0

    def exponent(self) -> int:
        return 0

    def _truncate(self) -> int:
        raise UndefinedConversionError("int")

    def to_float(self) -> float:
        return math.nan

    def to_decimal(self) -> Decimal:
        raise UndefinedConversionError("Decimal")

    def __eq__(self, other: Any) -> bool:
        return False

    def __ne__(self, other: Any) -> bool:
        return True

    def __hash__(self) -> int:
        return 0

    def __str__(self) -> str:
        return "NaN"

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = UndefinedValue()


def undefined_result(operation: str, reason: Any) -> UndefinedValue:
    """Degrade a domain error of ``operation`` to ``UNDEFINED``."""
    logger.debug(
        "%s degraded to undefined: %s",
        operation,
        reason,
        extra_data={"operation": operation, "reason": repr(reason)},
    )
    return UNDEFINED
