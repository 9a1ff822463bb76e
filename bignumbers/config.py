"""Decimal configuration."""

from dataclasses import dataclass

from bignumbers.constants import DEFAULT_FLOAT_SCALE, DIVISION_GUARD_DIGITS


@dataclass(frozen=True)
class DecimalConfig:
    """Tunables read by Decimal.

    Attributes:
        float_scale: Fractional digits kept by from_float when no scale is
            given (default: 8)
        division_guard_digits: Extra digits added to the working scale of a
            division before it is truncated (default: 2)
    """

    float_scale: int = DEFAULT_FLOAT_SCALE
    division_guard_digits: int = DIVISION_GUARD_DIGITS


# Default configuration instance
DEFAULT_DECIMAL_CONFIG = DecimalConfig()
