"""Signed infinity.

Infinite behaves as the limit value of a sequence of growing decimals:
adding or subtracting a finite number leaves it unchanged and multiplying
or dividing by a non-zero finite number only affects its sign. Indefinite
forms (inf - inf, inf / inf, inf * 0, inf / 0) produce NaN.
"""

from __future__ import annotations

from typing import Any

import structlog

from bignumbers.contracts import AbelianAdditiveGroup, BigNumber, ComparableNumber
from bignumbers.nan import NAN
from bignumbers.types import validate_operand, validate_scale

logger = structlog.get_logger()


class Infinite(BigNumber, ComparableNumber, AbelianAdditiveGroup):
    """Positive or negative infinity.

    Only two instances ever exist; get them with ``Infinite.positive()`` and
    ``Infinite.negative()`` or the module constants.
    """

    __slots__ = ("_positive",)

    _instances: dict[bool, Infinite] = {}

    def __new__(cls, positive: bool = True) -> Infinite:
        positive = bool(positive)
        instance = cls._instances.get(positive)
        if instance is None:
            instance = super().__new__(cls)
            instance._positive = positive
            cls._instances[positive] = instance
        return instance

    @classmethod
    def positive(cls) -> Infinite:
        """Return the shared positive infinity."""
        return cls(True)

    @classmethod
    def negative(cls) -> Infinite:
        """Return the shared negative infinity."""
        return cls(False)

    def _signed(self, negate: bool) -> Infinite:
        return Infinite(self._positive != negate)

    # --- Arithmetic ---

    def add(self, other: BigNumber, scale: int | None = None) -> BigNumber:
        validate_operand(other, scale)
        if other.is_nan():
            return NAN
        if other.is_infinite() and other.is_positive() != self._positive:
            return NAN
        return self

    def sub(self, other: BigNumber, scale: int | None = None) -> BigNumber:
        validate_operand(other, scale)
        if other.is_nan():
            return NAN
        if other.is_infinite() and other.is_positive() == self._positive:
            return NAN
        return self

    def mul(self, other: BigNumber, scale: int | None = None) -> BigNumber:
        validate_operand(other, scale)
        if other.is_nan():
            return NAN
        if other.is_zero():
            logger.debug("infinite_times_zero", infinite=str(self))
            return NAN
        return self._signed(other.is_negative())

    def div(self, other: BigNumber, scale: int | None = None) -> BigNumber:
        validate_operand(other, scale)
        if other.is_nan() or other.is_infinite() or other.is_zero():
            return NAN
        return self._signed(other.is_negative())

    # --- Comparison ---

    def equals(self, other: BigNumber, scale: int | None = None) -> bool:
        validate_operand(other, scale)
        return other.is_infinite() and other.is_positive() == self._positive

    def comp(self, other: ComparableNumber, scale: int | None = None) -> int:
        validate_operand(other, scale, ComparableNumber)
        if self is other:
            return 0
        if isinstance(other, BigNumber) and other.is_infinite():
            if other.is_positive() == self._positive:
                return 0
        return 1 if self._positive else -1

    # --- Predicates ---

    def is_zero(self, scale: int | None = None) -> bool:
        validate_scale(scale)
        return False

    def is_positive(self) -> bool:
        return self._positive

    def is_negative(self) -> bool:
        return not self._positive

    def is_nan(self) -> bool:
        return False

    def is_infinite(self) -> bool:
        return True

    # --- Unary ---

    def additive_inverse(self) -> Infinite:
        return self._signed(True)

    def abs(self) -> Infinite:
        return Infinite.positive()

    def round(self, scale: int = 0) -> Infinite:
        validate_scale(scale)
        return self

    def __abs__(self) -> Infinite:
        return self.abs()

    def __float__(self) -> float:
        return float("inf") if self._positive else float("-inf")

    def __hash__(self) -> int:
        return hash(float(self))

    def __reduce__(self) -> tuple[type[Infinite], tuple[bool]]:
        # Unpickling goes through __new__ so the shared instances stay untouched
        return (Infinite, (self._positive,))

    def __copy__(self) -> Infinite:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Infinite:
        return self

    def __repr__(self) -> str:
        return "Infinite.positive()" if self._positive else "Infinite.negative()"

    def __str__(self) -> str:
        return "INF" if self._positive else "-INF"


POSITIVE_INFINITE = Infinite.positive()
NEGATIVE_INFINITE = Infinite.negative()

__all__ = ["Infinite", "POSITIVE_INFINITE", "NEGATIVE_INFINITE"]
