"""
numval - interchangeable floating and arbitrary-precision numeric values

One numeric value type with three representations:
- FloatingValue: finite 64-bit binary floats
- ArbitraryPrecisionValue: decimals rounded to a per-value Context
- UNDEFINED: the sentinel every domain error degrades to

Mixing representations promotes toward the more precise one, and every
comparison has an exact and an epsilon-tolerant form.
"""

from .context import (
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    FLOATING_CONTEXT,
    Context,
    RoundingPolicy,
    default_context,
    resolve_context,
)
from .decimal_value import ArbitraryPrecisionValue
from .errors import InvalidLiteralError, NumValueError, UndefinedConversionError
from .factory import (
    AnyValue,
    ArbitraryPrecisionFactory,
    FloatingFactory,
    UndefinedFactory,
    ValueFactory,
    decimal_factory,
    decimal_of,
    floating_factory,
    floating_of,
    undefined_factory,
)
from .floating import FloatingValue
from .logging import setup_logging
from .undefined import UNDEFINED, UndefinedValue
from .value import NumericValue, TypePrecedence

__version__ = "0.1.0"

__all__ = [
    "NumericValue",
    "TypePrecedence",
    "AnyValue",
    "FloatingValue",
    "ArbitraryPrecisionValue",
    "UndefinedValue",
    "UNDEFINED",
    "Context",
    "RoundingPolicy",
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    "FLOATING_CONTEXT",
    "default_context",
    "resolve_context",
    "ValueFactory",
    "FloatingFactory",
    "ArbitraryPrecisionFactory",
    "UndefinedFactory",
    "floating_factory",
    "decimal_factory",
    "undefined_factory",
    "floating_of",
    "decimal_of",
    "NumValueError",
    "UndefinedConversionError",
    "InvalidLiteralError",
    "setup_logging",
]
