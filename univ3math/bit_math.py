"""Bit index helpers for unsigned integers."""

from __future__ import annotations


def _require_positive(x: int) -> None:
    if x < 0:
        raise ValueError("value must be non-negative")
    if x == 0:
        raise ValueError("overflow: value must be non-zero")


def most_significant_bit(x: int) -> int:
    """Return the index of the most significant set bit of ``x``.

    Raises ``ValueError`` for zero or negative input.
    """
    _require_positive(x)
    return x.bit_length() - 1


def least_significant_bit(x: int) -> int:
    """Return the index of the least significant set bit of ``x``.

    Raises ``ValueError`` for zero or negative input.
    """
    _require_positive(x)
    return (x & -x).bit_length() - 1