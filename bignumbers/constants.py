"""Numeric constants for bignumbers."""

# Fractional digits kept by Decimal.from_float when no scale is given
DEFAULT_FLOAT_SCALE = 8

# Extra working digits added to every Decimal division
DIVISION_GUARD_DIGITS = 2
