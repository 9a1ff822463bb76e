"""Arbitrary-precision arithmetic on decimal strings.

Operands are plain decimal strings (optional sign, digits, optional
fractional part). Every operation takes the scale of its result and
truncates toward zero to it, never rounds. Results are normalized: no
leading zeros in the integer part, exactly ``scale`` fractional digits and
no sign on zero.

Internally a value is an ``int`` scaled by ``10**scale``, so precision is
only bounded by memory.

Example:
    >>> add("1.25", "2", 1)
    '3.2'
    >>> div("1", "3", 5)
    '0.33333'
    >>> div("-7", "2", 0)
    '-3'
"""

from __future__ import annotations

import re

__all__ = [
    "add",
    "sub",
    "mul",
    "div",
    "power",
    "compare",
]

_OPERAND_RE = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]+))?")


# =============================================================================
# Scaled integer helpers
# =============================================================================


def _div_trunc(a: int, b: int) -> int:
    """Integer division truncating toward zero.

    Python's // floors toward -inf, which differs for operands of
    different signs: -7 // 2 == -4 but the truncated quotient is -3.
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero")
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def _parse(value: str) -> tuple[int, int]:
    """Split a decimal string into (unscaled integer, scale).

    Raises:
        ValueError: If value is not a plain decimal string
    """
    match = _OPERAND_RE.fullmatch(value)
    if match is None or not (match.group(2) or match.group(3)):
        raise ValueError(f"Not a decimal operand: {value!r}")

    sign, int_part, frac_part = match.groups()
    frac_part = frac_part or ""
    unscaled = int((int_part or "0") + frac_part)
    if sign == "-":
        unscaled = -unscaled
    return unscaled, len(frac_part)


def _rescale(unscaled: int, from_scale: int, to_scale: int) -> int:
    """Move an unscaled integer to another scale, truncating toward zero."""
    if to_scale >= from_scale:
        return unscaled * 10 ** (to_scale - from_scale)
    return _div_trunc(unscaled, 10 ** (from_scale - to_scale))


def _format(unscaled: int, scale: int) -> str:
    """Render an unscaled integer at the given scale."""
    digits = str(abs(unscaled)).rjust(scale + 1, "0")
    sign = "-" if unscaled < 0 else ""
    if scale == 0:
        return sign + digits
    return f"{sign}{digits[:-scale]}.{digits[-scale:]}"


def _check_scale(scale: int) -> None:
    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")


# =============================================================================
# Operations
# =============================================================================


def add(a: str, b: str, scale: int = 0) -> str:
    """Return a + b truncated to scale digits."""
    _check_scale(scale)
    a_val, a_scale = _parse(a)
    b_val, b_scale = _parse(b)
    common = max(a_scale, b_scale)
    total = _rescale(a_val, a_scale, common) + _rescale(b_val, b_scale, common)
    return _format(_rescale(total, common, scale), scale)


def sub(a: str, b: str, scale: int = 0) -> str:
    """Return a - b truncated to scale digits."""
    _check_scale(scale)
    a_val, a_scale = _parse(a)
    b_val, b_scale = _parse(b)
    common = max(a_scale, b_scale)
    diff = _rescale(a_val, a_scale, common) - _rescale(b_val, b_scale, common)
    return _format(_rescale(diff, common, scale), scale)


def mul(a: str, b: str, scale: int = 0) -> str:
    """Return a * b truncated to scale digits."""
    _check_scale(scale)
    a_val, a_scale = _parse(a)
    b_val, b_scale = _parse(b)
    return _format(_rescale(a_val * b_val, a_scale + b_scale, scale), scale)


def div(a: str, b: str, scale: int = 0) -> str:
    """Return a / b truncated to scale digits.

    Raises:
        ZeroDivisionError: If b is zero
    """
    _check_scale(scale)
    a_val, a_scale = _parse(a)
    b_val, b_scale = _parse(b)
    if b_val == 0:
        raise ZeroDivisionError(f"Division by zero: {a} / {b}")
    # (a_val / 10^a_scale) / (b_val / 10^b_scale) * 10^scale
    numerator = a_val * 10 ** (b_scale + scale)
    denominator = b_val * 10**a_scale
    return _format(_div_trunc(numerator, denominator), scale)


def power(base: str, exponent: int, scale: int = 0) -> str:
    """Return base ** exponent truncated to scale digits.

    Negative exponents compute the reciprocal of the exact positive power.

    Raises:
        ZeroDivisionError: If base is zero and exponent is negative
    """
    _check_scale(scale)
    base_val, base_scale = _parse(base)
    if exponent >= 0:
        exact = base_val**exponent
        return _format(_rescale(exact, base_scale * exponent, scale), scale)

    magnitude = -exponent
    exact = _format(base_val**magnitude, base_scale * magnitude)
    return div("1", exact, scale)


def compare(a: str, b: str, scale: int = 0) -> int:
    """Compare a and b after truncating both to scale digits.

    Returns:
        1 if a > b, -1 if a < b, 0 if equal at that scale
    """
    _check_scale(scale)
    a_val, a_scale = _parse(a)
    b_val, b_scale = _parse(b)
    a_cut = _rescale(a_val, a_scale, scale)
    b_cut = _rescale(b_val, b_scale, scale)
    return (a_cut > b_cut) - (a_cut < b_cut)
