"""Contracts shared by every numeric variant.

Decimal, NaN and Infinite all implement BigNumber. Foreign number types can
join by subclassing (or registering with) these ABCs: Decimal re-dispatches
operations it does not understand to the other operand, so a foreign type
only has to know how to combine itself with a Decimal.

The operator overloads live here so that every variant gets the same
Python protocol. Plain ``int`` operands are converted with
``Decimal.create``; any other type returns NotImplemented.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


def _coerce(other: Any) -> BigNumber | None:
    """Convert an operator operand to a BigNumber, or None if unsupported."""
    if isinstance(other, BigNumber):
        return other
    if isinstance(other, int) and not isinstance(other, bool):
        from bignumbers.decimals import Decimal

        return Decimal.create(other)
    return None


class BigNumber(ABC):
    """Operation set every numeric variant supports."""

    __slots__ = ()

    @abstractmethod
    def add(self, other: BigNumber, scale: int | None = None) -> BigNumber:
        """Return self + other, rounded to scale when given."""
        ...

    @abstractmethod
    def sub(self, other: BigNumber, scale: int | None = None) -> BigNumber:
        """Return self - other, rounded to scale when given."""
        ...

    @abstractmethod
    def mul(self, other: BigNumber, scale: int | None = None) -> BigNumber:
        """Return self * other, rounded to scale when given."""
        ...

    @abstractmethod
    def div(self, other: BigNumber, scale: int | None = None) -> BigNumber:
        """Return self / other, rounded to scale when given."""
        ...

    @abstractmethod
    def equals(self, other: BigNumber, scale: int | None = None) -> bool:
        """Equality at the given precision."""
        ...

    @abstractmethod
    def is_zero(self, scale: int | None = None) -> bool: ...

    @abstractmethod
    def is_positive(self) -> bool: ...

    @abstractmethod
    def is_negative(self) -> bool: ...

    @abstractmethod
    def is_nan(self) -> bool: ...

    @abstractmethod
    def is_infinite(self) -> bool: ...

    # --- Python operators ---

    def __add__(self, other: Any) -> BigNumber:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: Any) -> BigNumber:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return operand.add(self)

    def __sub__(self, other: Any) -> BigNumber:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.sub(operand)

    def __rsub__(self, other: Any) -> BigNumber:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return operand.sub(self)

    def __mul__(self, other: Any) -> BigNumber:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.mul(operand)

    def __rmul__(self, other: Any) -> BigNumber:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return operand.mul(self)

    def __truediv__(self, other: Any) -> BigNumber:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.div(operand)

    def __rtruediv__(self, other: Any) -> BigNumber:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return operand.div(self)

    def __pos__(self) -> BigNumber:
        return self

    def __eq__(self, other: object) -> bool:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.equals(operand)

    __hash__ = None  # type: ignore[assignment]  # concrete variants define their own


class ComparableNumber(ABC):
    """Numbers with a total order."""

    __slots__ = ()

    @abstractmethod
    def comp(self, other: ComparableNumber, scale: int | None = None) -> int:
        """Return 1 if self > other, -1 if self < other, 0 if equal."""
        ...

    def _compare_operand(self, other: Any) -> int | None:
        operand = _coerce(other)
        if operand is None or not isinstance(operand, ComparableNumber):
            return None
        return self.comp(operand)

    def __lt__(self, other: Any) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: Any) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result >= 0


class AbelianAdditiveGroup(ABC):
    """Numbers with an additive inverse."""

    __slots__ = ()

    @abstractmethod
    def additive_inverse(self) -> Any:
        """Return the element that adds with self to zero."""
        ...

    def __neg__(self) -> Any:
        return self.additive_inverse()


__all__ = ["BigNumber", "ComparableNumber", "AbelianAdditiveGroup"]
