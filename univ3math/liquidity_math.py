"""Signed adjustments of pool liquidity."""

from __future__ import annotations

from .errors import AddDeltaOverflowError

_U128_MAX = (1 << 128) - 1
_I128_MIN = -(1 << 127)
_I128_MAX = (1 << 127) - 1


def add_delta(x: int, y: int) -> int:
    """Add the signed delta ``y`` to the unsigned 128-bit liquidity ``x``.

    Raises ``AddDeltaOverflowError`` if the result would leave the
    unsigned 128-bit range.
    """
    if not 0 <= x <= _U128_MAX:
        raise ValueError("liquidity must fit in an unsigned 128-bit integer")
    if not _I128_MIN <= y <= _I128_MAX:
        raise ValueError("liquidity delta must fit in a signed 128-bit integer")
    result = x + y
    if not 0 <= result <= _U128_MAX:
        raise AddDeltaOverflowError()
    return result