"""Shared type definitions and argument validation."""

from typing import Annotated, Any

from pydantic import Field, TypeAdapter, ValidationError

from bignumbers.contracts import BigNumber
from bignumbers.errors import InvalidInput, InvalidScale, UnsupportedType

# Count of fractional digits. Strict: bools and integral floats are rejected.
Scale = Annotated[
    int,
    Field(strict=True, ge=0, description="Number of digits after the decimal point"),
]

_SCALE_ADAPTER: TypeAdapter[int] = TypeAdapter(Scale)


def validate_scale(scale: Any) -> int | None:
    """Validate an optional scale argument.

    Args:
        scale: None, or the requested number of fractional digits

    Returns:
        The scale unchanged (None stays None)

    Raises:
        InvalidScale: If scale is not None and not a non-negative int
    """
    if scale is None:
        return None
    try:
        return _SCALE_ADAPTER.validate_python(scale)
    except ValidationError as err:
        raise InvalidScale(f"scale must be a non-negative integer, got {scale!r}") from err


def validate_value(value: Any, name: str = "value") -> Any:
    """Reject None for a required argument.

    Raises:
        InvalidInput: If value is None
    """
    if value is None:
        raise InvalidInput(f"{name} must not be None")
    return value


def validate_operand(other: Any, scale: Any, kind: type = BigNumber) -> None:
    """Validate the arguments of a binary operation.

    Args:
        other: Right-hand operand
        scale: Optional result scale
        kind: Contract the operand must satisfy

    Raises:
        InvalidInput: If other is None
        UnsupportedType: If other does not satisfy kind
        InvalidScale: If scale is invalid
    """
    validate_value(other, "operand")
    if not isinstance(other, kind):
        raise UnsupportedType(
            f"operand must be a {kind.__name__}, got {type(other).__name__}"
        )
    validate_scale(scale)


__all__ = ["Scale", "validate_scale", "validate_value", "validate_operand"]
