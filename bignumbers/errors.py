"""Error classes for bignumbers.

Every error also derives from the closest builtin so callers can catch
``ValueError`` or ``TypeError`` without importing this module.
"""


class BigNumberError(Exception):
    """Base error for bignumbers operations."""

    pass


class InvalidInput(BigNumberError, ValueError):
    """A required value or operand was None."""

    pass


class InvalidScale(BigNumberError, ValueError):
    """A scale was given that is not a non-negative integer."""

    pass


class UnparsableString(BigNumberError, ValueError):
    """String matches neither the fixed-point nor the scientific grammar."""

    pass


class UnsupportedType(BigNumberError, TypeError):
    """Value of a type the factory (or operator) does not recognize."""

    pass


class NotImplementedOperation(BigNumberError, NotImplementedError):
    """Operand combination with no defined result."""

    pass


__all__ = [
    "BigNumberError",
    "InvalidInput",
    "InvalidScale",
    "UnparsableString",
    "UnsupportedType",
    "NotImplementedOperation",
]
