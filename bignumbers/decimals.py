"""Immutable arbitrary-precision decimal numbers.

A Decimal is a normalized decimal string plus its scale, the exact number
of digits after the point. ``Decimal.from_string("1.50")`` keeps both
digits: its scale is 2 and it prints as ``1.50``.

Results of arithmetic are computed by the truncating primitives in
``bignumbers.arith`` at a scale that keeps them exact (or, for division,
at a working scale with guard digits) and then parsed back, so every
instance goes through the same normalization.

Rounding is half-up on the magnitude: a discarded digit of 5 or more moves
the kept digits one unit away from zero (1.005 -> 1.01, -1.005 -> -1.01).

Example:
    >>> a = Decimal.from_string("0.1")
    >>> b = Decimal.from_string("0.2")
    >>> str(a.add(b))
    '0.3'
    >>> str(Decimal.from_integer(1).div(Decimal.from_integer(3)))
    '0.333'
"""

from __future__ import annotations

import decimal
import math
import re
from typing import Any

import structlog

from bignumbers import arith
from bignumbers.config import DEFAULT_DECIMAL_CONFIG, DecimalConfig
from bignumbers.contracts import AbelianAdditiveGroup, BigNumber, ComparableNumber
from bignumbers.errors import NotImplementedOperation, UnparsableString, UnsupportedType
from bignumbers.infinite import NEGATIVE_INFINITE, POSITIVE_INFINITE
from bignumbers.nan import NAN
from bignumbers.types import validate_operand, validate_scale, validate_value

logger = structlog.get_logger()

# Optional sign, integer part without leading zeros, optional fraction
_PLAIN_RE = re.compile(r"([+\-]?)0*(([1-9][0-9]*|[0-9])(\.([0-9]+))?)")

# One leading digit, optional fraction, mandatory non-zero exponent
_SCIENTIFIC_RE = re.compile(r"([+\-]?)([0-9](\.([0-9]+))?)[eE]([+\-]?)([1-9][0-9]*)")


def _is_zero_string(value: str) -> bool:
    return value.lstrip("-").strip("0.") == ""


def _canonical_sign(value: str) -> str:
    """Drop the sign of a negative zero."""
    if value.startswith("-") and _is_zero_string(value):
        return value[1:]
    return value


def _inner_round(value: str, scale: int) -> str:
    """Round a decimal string half-up to scale digits.

    The value is truncated to scale digits; the first discarded digit is the
    last digit of the difference truncated at scale + 1. When it is 5 or
    more one unit in the last place is added to the magnitude.
    """
    rounded = arith.add(value, "0", scale)
    diff = arith.sub(value, rounded, scale + 1)

    if int(diff[-1]) >= 5:
        unit = arith.power("10", -scale, scale)
        if value.startswith("-"):
            rounded = arith.sub(rounded, unit, scale)
        else:
            rounded = arith.add(rounded, unit, scale)

    return _canonical_sign(rounded)


def _log10_abs(value: str) -> decimal.Decimal:
    with decimal.localcontext() as ctx:
        ctx.prec = 28
        return decimal.Decimal(value).copy_abs().log10()


class Decimal(BigNumber, ComparableNumber, AbelianAdditiveGroup):
    """Immutable decimal number with an explicit scale.

    Create instances with the factory classmethods (``create``,
    ``from_integer``, ``from_float``, ``from_string``, ``from_decimal``)
    or as the result of an operation; never with the constructor.

    Attributes:
        digits: Normalized string form, ``-`` prefixed only when negative
        scale: Number of digits after the decimal point
    """

    __slots__ = ("_value", "_scale")

    def __init__(self, value: str, scale: int) -> None:
        """Wrap an already normalized value. Internal: use the factories."""
        self._value = value
        self._scale = scale

    @property
    def digits(self) -> str:
        """The normalized decimal string."""
        return self._value

    @property
    def scale(self) -> int:
        """Number of digits after the decimal point."""
        return self._scale

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def create(
        cls, value: Any, scale: int | None = None, config: DecimalConfig | None = None
    ) -> BigNumber:
        """Build a number from an int, float, str or Decimal.

        Raises:
            InvalidInput: If value is None
            UnsupportedType: If value is of any other type
            InvalidScale: If scale is not a non-negative int
        """
        validate_value(value)
        if isinstance(value, bool):
            raise UnsupportedType(f"Cannot create a Decimal from {type(value).__name__}")
        if isinstance(value, int):
            return cls.from_integer(value, scale)
        if isinstance(value, float):
            return cls.from_float(value, scale, config)
        if isinstance(value, str):
            return cls.from_string(value, scale)
        if isinstance(value, Decimal):
            return cls.from_decimal(value, scale)
        raise UnsupportedType(f"Cannot create a Decimal from {type(value).__name__}")

    @classmethod
    def from_integer(cls, value: int, scale: int | None = None) -> Decimal:
        """Build a Decimal from an int, zero-padded to scale digits (default 0)."""
        validate_value(value)
        validate_scale(scale)
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnsupportedType(f"from_integer requires int, got {type(value).__name__}")

        if scale is None:
            return cls(str(value), 0)
        return cls(arith.add(str(value), "0", scale), scale)

    @classmethod
    def from_float(
        cls, value: float, scale: int | None = None, config: DecimalConfig | None = None
    ) -> BigNumber:
        """Build a number from a float.

        inf and -inf map to the Infinite singletons and nan to NaN. Other
        values are formatted with exactly scale digits using Python's
        correctly rounded float formatting.

        Args:
            value: Float to convert
            scale: Fractional digits to keep. Uses config.float_scale if not provided.
            config: Decimal configuration. Uses DEFAULT_DECIMAL_CONFIG if not provided.
        """
        validate_value(value)
        validate_scale(scale)
        if not isinstance(value, float):
            raise UnsupportedType(f"from_float requires float, got {type(value).__name__}")

        if math.isnan(value):
            logger.debug("float_mapped_to_special", value=repr(value), special="NaN")
            return NAN
        if math.isinf(value):
            special = POSITIVE_INFINITE if value > 0 else NEGATIVE_INFINITE
            logger.debug("float_mapped_to_special", value=repr(value), special=str(special))
            return special

        config = config or DEFAULT_DECIMAL_CONFIG
        dec_scale = config.float_scale if scale is None else scale
        return cls(_canonical_sign(format(value, f".{dec_scale}f")), dec_scale)

    @classmethod
    def from_string(cls, value: str, scale: int | None = None) -> Decimal:
        """Parse fixed-point ("-12.50") or scientific ("1.5e-3") notation.

        Without a scale the result keeps the digits the string has (the
        fraction length, or what the exponent implies). With a scale the
        value is rounded half-up to it.

        Raises:
            UnparsableString: If value matches neither notation
        """
        validate_value(value)
        validate_scale(scale)
        if not isinstance(value, str):
            raise UnsupportedType(f"from_string requires str, got {type(value).__name__}")

        plain = _PLAIN_RE.fullmatch(value)
        scientific = None if plain else _SCIENTIFIC_RE.fullmatch(value)

        if plain is not None:
            sign = plain.group(1)
            digits = plain.group(2)
            fraction = plain.group(5) or ""
            dec_scale = len(fraction) if scale is None else scale
        elif scientific is not None:
            sign = scientific.group(1)
            mantissa = scientific.group(2)
            mantissa_scale = len(scientific.group(4) or "")
            exponent = int(scientific.group(6))

            if scientific.group(5) == "-":
                min_scale = mantissa_scale + exponent
                multiplier = arith.power("10", -exponent, exponent)
            else:
                min_scale = max(mantissa_scale - exponent, 0)
                multiplier = arith.power("10", exponent)

            digits = arith.mul(mantissa, multiplier, max(min_scale, scale or 0))
            dec_scale = min_scale if scale is None else scale
        else:
            raise UnparsableString(f"Not a decimal number: {value!r}")

        if sign == "-":
            digits = "-" + digits
        digits = _canonical_sign(digits)

        if scale is not None:
            digits = _inner_round(digits, scale)

        return cls(digits, dec_scale)

    @classmethod
    def from_decimal(cls, value: Decimal, scale: int | None = None) -> Decimal:
        """Return value with a new scale, rounding half-up when it shrinks.

        The same instance is returned when scale is None or unchanged.
        """
        validate_value(value)
        validate_scale(scale)
        if not isinstance(value, Decimal):
            raise UnsupportedType(f"from_decimal requires Decimal, got {type(value).__name__}")

        if scale is None or scale == value.scale:
            return value
        return cls(_inner_round(value.digits, scale), scale)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, other: BigNumber, scale: int | None = None) -> BigNumber:
        """Return self + other."""
        validate_operand(other, scale)

        if isinstance(other, Decimal):
            total = arith.add(self._value, other._value, max(self._scale, other._scale))
            return Decimal.from_string(total, scale)

        logger.debug("decimal_redispatch", operation="add", operand=type(other).__name__)
        return other.add(self)

    def sub(self, other: BigNumber, scale: int | None = None) -> BigNumber:
        """Return self - other.

        Raises:
            NotImplementedOperation: If other is a foreign number without an
                additive inverse
        """
        validate_operand(other, scale)

        if other.is_nan():
            return other
        if other.is_infinite():
            return NEGATIVE_INFINITE if other.is_positive() else POSITIVE_INFINITE

        if isinstance(other, Decimal):
            # Canonical "0" rather than zero at max(scale_a, scale_b); pass scale to keep digits
            if self.equals(other, scale):
                return Decimal.from_integer(0, scale)
            diff = arith.sub(self._value, other._value, max(self._scale, other._scale))
            return Decimal.from_string(diff, scale)

        if isinstance(other, AbelianAdditiveGroup):
            logger.debug("decimal_redispatch", operation="sub", operand=type(other).__name__)
            if self.is_zero():
                return other.additive_inverse()
            return other.additive_inverse().add(self)

        raise NotImplementedOperation(
            f"Cannot subtract {type(other).__name__} without an additive inverse"
        )

    def mul(self, other: BigNumber, scale: int | None = None) -> BigNumber:
        """Return self * other."""
        validate_operand(other, scale)

        if isinstance(other, Decimal):
            product = arith.mul(self._value, other._value, self._scale + other._scale)
            return Decimal.from_string(product, scale)

        logger.debug("decimal_redispatch", operation="mul", operand=type(other).__name__)
        return other.mul(self)

    def div(
        self, other: BigNumber, scale: int | None = None, config: DecimalConfig | None = None
    ) -> BigNumber:
        """Return self / other.

        Division by zero gives NaN rather than raising. The quotient is
        computed with config.division_guard_digits extra digits
        (DEFAULT_DECIMAL_CONFIG if config is not provided).

        Raises:
            NotImplementedOperation: If other is a foreign finite number
        """
        validate_operand(other, scale)

        if other.is_nan():
            return other
        if other.is_zero():
            return NAN
        if self.is_zero():
            return Decimal.from_decimal(self, scale)
        if other.is_infinite():
            return Decimal.from_integer(0, self._scale if scale is None else scale)

        if not isinstance(other, Decimal):
            raise NotImplementedOperation(f"Cannot divide a Decimal by {type(other).__name__}")

        config = config or DEFAULT_DECIMAL_CONFIG
        div_scale = self._division_scale(other, config.division_guard_digits)
        if scale is not None:
            div_scale = max(scale, div_scale)

        logger.debug(
            "decimal_division",
            dividend=self._value,
            divisor=other._value,
            working_scale=div_scale,
        )
        quotient = arith.div(self._value, other._value, div_scale)
        return Decimal.from_string(quotient, scale)

    def _division_scale(self, other: Decimal, guard: int) -> int:
        """Working scale for self / other: guard digits plus the magnitude gap."""
        gap = _log10_abs(other._value) - _log10_abs(self._value)
        magnitude_scale = int(math.ceil(gap)) + guard

        if max(self._scale, other._scale) == 0:
            if gap > 0:
                return magnitude_scale
            return guard

        return max(guard, magnitude_scale, self._scale + other._scale)

    # =========================================================================
    # Comparison and predicates
    # =========================================================================

    def equals(self, other: BigNumber, scale: int | None = None) -> bool:
        """Equality after rounding both sides to scale.

        scale defaults to the larger of the two scales, which makes the
        comparison exact.
        """
        validate_operand(other, scale)

        if self is other:
            return True
        if isinstance(other, Decimal):
            cmp_scale = max(self._scale, other._scale) if scale is None else scale
            return (
                arith.compare(
                    _inner_round(self._value, cmp_scale),
                    _inner_round(other._value, cmp_scale),
                    cmp_scale,
                )
                == 0
            )
        return other.equals(self)

    def comp(self, other: ComparableNumber, scale: int | None = None) -> int:
        """Three-way comparison: 1 if self > other, -1 if less, 0 if equal.

        Raises:
            UnsupportedType: If other has no order (NaN)
        """
        validate_operand(other, scale, ComparableNumber)

        if self is other:
            return 0
        if isinstance(other, Decimal):
            cmp_scale = max(self._scale, other._scale) if scale is None else scale
            return arith.compare(
                _inner_round(self._value, cmp_scale),
                _inner_round(other._value, cmp_scale),
                cmp_scale,
            )
        return -other.comp(self)

    def is_zero(self, scale: int | None = None) -> bool:
        """True if the value rounded to scale (default: own scale) is zero."""
        validate_scale(scale)
        cmp_scale = self._scale if scale is None else scale
        return arith.compare(_inner_round(self._value, cmp_scale), "0", cmp_scale) == 0

    def is_positive(self) -> bool:
        return not self._value.startswith("-")

    def is_negative(self) -> bool:
        return self._value.startswith("-")

    def is_nan(self) -> bool:
        return False

    def is_infinite(self) -> bool:
        return False

    # =========================================================================
    # Unary operations
    # =========================================================================

    def additive_inverse(self) -> Decimal:
        """Return -self with the same scale."""
        if self.is_zero():
            return self
        if self.is_negative():
            return Decimal(self._value[1:], self._scale)
        return Decimal("-" + self._value, self._scale)

    def round(self, scale: int = 0) -> Decimal:
        """Round half-up to at most scale digits after the point."""
        validate_scale(scale)
        if scale >= self._scale:
            return self
        return Decimal.from_string(_inner_round(self._value, scale))

    def abs(self) -> Decimal:
        """Return the absolute value."""
        if self.is_zero() or self.is_positive():
            return self
        return self.additive_inverse()

    # =========================================================================
    # Python protocol
    # =========================================================================

    def __abs__(self) -> Decimal:
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __float__(self) -> float:
        return float(self._value)

    def __hash__(self) -> int:
        # Equal values hash equally across scales and with int
        return hash(decimal.Decimal(self._value))

    def __copy__(self) -> Decimal:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Decimal:
        return self

    def __repr__(self) -> str:
        return f"Decimal('{self._value}')"

    def __str__(self) -> str:
        return self._value


__all__ = ["Decimal"]
