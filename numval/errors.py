"""
Library exceptions.

Domain errors (division by zero, logarithm of a non-positive number, overflow,
...) never surface as exceptions: they degrade to the ``UNDEFINED`` sentinel.
The exceptions below cover the cases where no sentinel can be substituted.
"""

from typing import Any, Dict, Optional


class NumValueError(Exception):
    """Base exception for numval errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UndefinedConversionError(NumValueError, ArithmeticError):
    """Raised when the undefined value is asked for a type that has no NaN"""

    def __init__(self, target: str):
        super().__init__(
            message=f"No undefined representation for '{target}'",
            details={"target": target},
        )


class InvalidLiteralError(NumValueError, ValueError):
    """Raised when a string cannot be parsed as a number"""

    def __init__(self, literal: str, representation: str):
        super().__init__(
            message=f"Cannot parse {literal!r} as a {representation} number",
            details={"literal": literal, "representation": representation},
        )
