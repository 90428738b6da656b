"""Encoding of token amount ratios as Q64.96 sqrt prices."""

from __future__ import annotations

from math import isqrt


def encode_sqrt_ratio_x96(amount1: int, amount0: int) -> int:
    """Return sqrt(amount1 / amount0) as a Q64.96 number.

    The ratio is truncated towards zero before the integer square root is
    taken. Raises ``ZeroDivisionError`` if ``amount0`` is zero and
    ``ValueError`` if the ratio is negative.
    """
    numerator = amount1 << 192
    if amount0 == 0:
        raise ZeroDivisionError("amount0 must be non-zero")
    quotient = abs(numerator) // abs(amount0)
    if (numerator < 0) != (amount0 < 0) and quotient != 0:
        raise ValueError("cannot take the square root of a negative ratio")
    return isqrt(quotient)