"""Full-precision multiply-divide on 256-bit unsigned integers."""

from __future__ import annotations

from .constants import U256_MAX
from .errors import MulDivOverflowError


def _require_u256(name: str, value: int) -> None:
    if not 0 <= value <= U256_MAX:
        raise ValueError(f"{name} must fit in an unsigned 256-bit integer")


def mul_div(a: int, b: int, denominator: int) -> int:
    """Return floor(a*b/denominator).

    Raises ``MulDivOverflowError`` if the denominator is zero or the
    result does not fit in 256 bits.
    """
    _require_u256("a", a)
    _require_u256("b", b)
    _require_u256("denominator", denominator)
    if denominator == 0:
        raise MulDivOverflowError()
    result = (a * b) // denominator
    if result > U256_MAX:
        raise MulDivOverflowError()
    return result


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """Return ceil(a*b/denominator).

    Raises ``MulDivOverflowError`` if the denominator is zero or the
    rounded result does not fit in 256 bits.
    """
    result = mul_div(a, b, denominator)
    if (a * b) % denominator == 0:
        return result
    if result == U256_MAX:
        raise MulDivOverflowError()
    return result + 1


def mul_div_q96(a: int, b: int) -> int:
    """Return floor(a*b / 2**96), raising if it does not fit in 256 bits."""
    _require_u256("a", a)
    _require_u256("b", b)
    result = (a * b) >> 96
    if result > U256_MAX:
        raise MulDivOverflowError()
    return result