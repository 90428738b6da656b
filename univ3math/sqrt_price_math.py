"""Price movements and token amounts between Q64.96 sqrt prices."""

from __future__ import annotations

from .constants import Q96, U160_MAX, U256_MAX
from .errors import (
    InsufficientLiquidityError,
    InvalidPriceError,
    InvalidPriceOrLiquidityError,
    PriceOverflowError,
    SafeCastToU160OverflowError,
)
from .full_math import mul_div, mul_div_q96, mul_div_rounding_up

_U128_MAX = (1 << 128) - 1
_I128_MIN = -(1 << 127)
_I128_MAX = (1 << 127) - 1


def _check_liquidity(liquidity: int) -> None:
    if not 0 <= liquidity <= _U128_MAX:
        raise ValueError("liquidity must fit in an unsigned 128-bit integer")


def _check_u256(name: str, value: int) -> None:
    if not 0 <= value <= U256_MAX:
        raise ValueError(f"{name} must fit in an unsigned 256-bit integer")


def _to_u160(value: int) -> int:
    if value > U160_MAX:
        raise SafeCastToU160OverflowError()
    return value


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _sorted(a: int, b: int) -> tuple[int, int]:
    return (b, a) if a > b else (a, b)


def get_next_sqrt_price_from_amount_0_rounding_up(
    sqrt_price_x96: int, liquidity: int, amount: int, add: bool
) -> int:
    """Return the sqrt price after adding or removing ``amount`` of token0.

    Always rounds up so that the price moves at least far enough.
    """
    _check_liquidity(liquidity)
    _check_u256("amount", amount)
    if amount == 0:
        return sqrt_price_x96

    numerator_1 = liquidity << 96
    product = amount * sqrt_price_x96
    product_fits = product <= U256_MAX

    if add:
        if product_fits:
            denominator = numerator_1 + product
            if denominator <= U256_MAX:
                return _to_u160(
                    mul_div_rounding_up(numerator_1, sqrt_price_x96, denominator)
                )
        divisor = numerator_1 // sqrt_price_x96 + amount
        if divisor > U256_MAX:
            raise PriceOverflowError()
        return _to_u160(_ceil_div(numerator_1, divisor))

    if not (product_fits and numerator_1 > product):
        raise PriceOverflowError()
    denominator = numerator_1 - product
    return _to_u160(mul_div_rounding_up(numerator_1, sqrt_price_x96, denominator))


def get_next_sqrt_price_from_amount_1_rounding_down(
    sqrt_price_x96: int, liquidity: int, amount: int, add: bool
) -> int:
    """Return the sqrt price after adding or removing ``amount`` of token1.

    Always rounds down so that the price moves at least far enough.
    """
    _check_liquidity(liquidity)
    _check_u256("amount", amount)
    if add:
        if amount <= U160_MAX:
            quotient = (amount << 96) // liquidity
        else:
            quotient = mul_div(amount, Q96, liquidity)
        return _to_u160(sqrt_price_x96 + quotient)

    if amount <= U160_MAX:
        quotient = _ceil_div(amount << 96, liquidity)
    else:
        quotient = mul_div_rounding_up(amount, Q96, liquidity)
    if sqrt_price_x96 > quotient:
        return sqrt_price_x96 - quotient
    raise InsufficientLiquidityError()


def get_next_sqrt_price_from_input(
    sqrt_price_x96: int, liquidity: int, amount_in: int, zero_for_one: bool
) -> int:
    """Return the sqrt price after swapping ``amount_in`` of token0 or token1 in."""
    if sqrt_price_x96 == 0 or liquidity == 0:
        raise InvalidPriceOrLiquidityError()
    if zero_for_one:
        return get_next_sqrt_price_from_amount_0_rounding_up(
            sqrt_price_x96, liquidity, amount_in, True
        )
    return get_next_sqrt_price_from_amount_1_rounding_down(
        sqrt_price_x96, liquidity, amount_in, True
    )


def get_next_sqrt_price_from_output(
    sqrt_price_x96: int, liquidity: int, amount_out: int, zero_for_one: bool
) -> int:
    """Return the sqrt price after swapping ``amount_out`` of token0 or token1 out."""
    if sqrt_price_x96 == 0 or liquidity == 0:
        raise InvalidPriceOrLiquidityError()
    if zero_for_one:
        return get_next_sqrt_price_from_amount_1_rounding_down(
            sqrt_price_x96, liquidity, amount_out, False
        )
    return get_next_sqrt_price_from_amount_0_rounding_up(
        sqrt_price_x96, liquidity, amount_out, False
    )


def get_amount_0_delta(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool
) -> int:
    """Return the token0 amount covering ``liquidity`` between two sqrt prices."""
    _check_liquidity(liquidity)
    lower, upper = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    if lower == 0:
        raise InvalidPriceError()

    numerator_1 = liquidity << 96
    numerator_2 = upper - lower
    if round_up:
        return _ceil_div(mul_div_rounding_up(numerator_1, numerator_2, upper), lower)
    return mul_div(numerator_1, numerator_2, upper) // lower


def get_amount_1_delta(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool
) -> int:
    """Return the token1 amount covering ``liquidity`` between two sqrt prices."""
    _check_liquidity(liquidity)
    lower, upper = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    numerator = upper - lower
    amount_1 = mul_div_q96(liquidity, numerator)
    carry = round_up and (liquidity * numerator) % Q96 > 0
    return amount_1 + int(carry)


def _split_signed(liquidity: int) -> tuple[int, bool]:
    if not _I128_MIN <= liquidity <= _I128_MAX:
        raise ValueError("liquidity delta must fit in a signed 128-bit integer")
    return abs(liquidity), liquidity >= 0


def get_amount_0_delta_signed(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int
) -> int:
    """Return the signed token0 amount for a liquidity change between two prices.

    Positive deltas round up; negative deltas round down and yield a
    negative amount.
    """
    magnitude, positive = _split_signed(liquidity)
    amount = get_amount_0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, magnitude, positive)
    return amount if positive else -amount


def get_amount_1_delta_signed(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int
) -> int:
    """Return the signed token1 amount for a liquidity change between two prices.

    Positive deltas round up; negative deltas round down and yield a
    negative amount.
    """
    magnitude, positive = _split_signed(liquidity)
    amount = get_amount_1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, magnitude, positive)
    return amount if positive else -amount