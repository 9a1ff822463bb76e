"""Immutable arbitrary-precision decimal numbers.

This package provides:
- Decimal: finite decimal value with an explicit scale
- NaN: absorbing Not-a-Number singleton
- Infinite: signed infinity singletons
- arith: truncating arithmetic on decimal strings

Usage:
    from bignumbers import Decimal

    price = Decimal.from_string("19.99")
    total = price.mul(Decimal.from_integer(3))   # 59.97
    each = total.div(Decimal.from_integer(3))    # 19.99
"""

from bignumbers import arith
from bignumbers.config import DEFAULT_DECIMAL_CONFIG, DecimalConfig
from bignumbers.constants import DEFAULT_FLOAT_SCALE, DIVISION_GUARD_DIGITS
from bignumbers.contracts import AbelianAdditiveGroup, BigNumber, ComparableNumber
from bignumbers.decimals import Decimal
from bignumbers.errors import (
    BigNumberError,
    InvalidInput,
    InvalidScale,
    NotImplementedOperation,
    UnparsableString,
    UnsupportedType,
)
from bignumbers.infinite import NEGATIVE_INFINITE, POSITIVE_INFINITE, Infinite
from bignumbers.nan import NAN, NaN

__version__ = "0.1.0"
__all__ = [
    # Numbers
    "Decimal",
    "NaN",
    "Infinite",
    "NAN",
    "POSITIVE_INFINITE",
    "NEGATIVE_INFINITE",
    # Contracts
    "BigNumber",
    "ComparableNumber",
    "AbelianAdditiveGroup",
    # Errors
    "BigNumberError",
    "InvalidInput",
    "InvalidScale",
    "UnparsableString",
    "UnsupportedType",
    "NotImplementedOperation",
    # Config
    "DecimalConfig",
    "DEFAULT_DECIMAL_CONFIG",
    "DEFAULT_FLOAT_SCALE",
    "DIVISION_GUARD_DIGITS",
    # Primitive
    "arith",
    "__version__",
]
