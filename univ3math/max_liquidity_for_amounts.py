"""Maximum liquidity obtainable for given token amounts and price range."""

from __future__ import annotations


def _sorted(a: int, b: int) -> tuple[int, int]:
    return (b, a) if a > b else (a, b)


def max_liquidity_for_amount0_imprecise(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount0: int
) -> int:
    """Return an imprecise maximum liquidity for an amount of token0.

    Matches the router's calculation, which divides by Q96 in the
    intermediate step.
    """
    lower, upper = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    intermediate = (lower * upper) >> 96
    return amount0 * intermediate // (upper - lower)


def max_liquidity_for_amount0_precise(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount0: int
) -> int:
    """Return the precise maximum liquidity for an amount of token0."""
    lower, upper = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    numerator = amount0 * lower * upper
    denominator = (upper - lower) << 96
    return numerator // denominator


def max_liquidity_for_amount1(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount1: int
) -> int:
    """Return the maximum liquidity for an amount of token1."""
    lower, upper = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    return (amount1 << 96) // (upper - lower)


def max_liquidity_for_amounts(
    sqrt_ratio_current_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int,
    amount1: int,
    use_full_precision: bool,
) -> int:
    """Return the maximum liquidity for both token amounts at the current price.

    With ``use_full_precision`` false, liquidity is maximised according to
    what the router can calculate rather than what the pool supports.
    """
    lower, upper = _sorted(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    for_amount0 = (
        max_liquidity_for_amount0_precise
        if use_full_precision
        else max_liquidity_for_amount0_imprecise
    )

    if sqrt_ratio_current_x96 <= lower:
        return for_amount0(lower, upper, amount0)
    if sqrt_ratio_current_x96 < upper:
        liquidity0 = for_amount0(sqrt_ratio_current_x96, upper, amount0)
        liquidity1 = max_liquidity_for_amount1(lower, sqrt_ratio_current_x96, amount1)
        return min(liquidity0, liquidity1)
    return max_liquidity_for_amount1(lower, upper, amount1)