"""Not-a-Number.

NaN absorbs every arithmetic operation it takes part in, never equals
anything (itself included) and has no order.
"""

from __future__ import annotations

from typing import Any

from bignumbers.contracts import BigNumber
from bignumbers.types import validate_operand, validate_scale


class NaN(BigNumber):
    """Stateless Not-a-Number. Use ``NaN.get()`` or the module constant NAN."""

    __slots__ = ()

    _instance: NaN | None = None

    def __new__(cls) -> NaN:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get(cls) -> NaN:
        """Return the shared NaN instance."""
        return cls()

    def add(self, other: BigNumber, scale: int | None = None) -> NaN:
        validate_operand(other, scale)
        return self

    def sub(self, other: BigNumber, scale: int | None = None) -> NaN:
        validate_operand(other, scale)
        return self

    def mul(self, other: BigNumber, scale: int | None = None) -> NaN:
        validate_operand(other, scale)
        return self

    def div(self, other: BigNumber, scale: int | None = None) -> NaN:
        validate_operand(other, scale)
        return self

    def equals(self, other: BigNumber, scale: int | None = None) -> bool:
        validate_operand(other, scale)
        return False

    def is_zero(self, scale: int | None = None) -> bool:
        validate_scale(scale)
        return False

    def is_positive(self) -> bool:
        return False

    def is_negative(self) -> bool:
        return False

    def is_nan(self) -> bool:
        return True

    def is_infinite(self) -> bool:
        return False

    def additive_inverse(self) -> NaN:
        return self

    def abs(self) -> NaN:
        return self

    def round(self, scale: int = 0) -> NaN:
        validate_scale(scale)
        return self

    def __neg__(self) -> NaN:
        return self

    def __abs__(self) -> NaN:
        return self

    def __float__(self) -> float:
        return float("nan")

    def __hash__(self) -> int:
        return object.__hash__(self)

    def __reduce__(self) -> tuple[type[NaN], tuple[()]]:
        return (NaN, ())

    def __copy__(self) -> NaN:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> NaN:
        return self

    def __repr__(self) -> str:
        return "NaN()"

    def __str__(self) -> str:
        return "NaN"


NAN = NaN()

__all__ = ["NaN", "NAN"]
