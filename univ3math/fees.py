"""Fee growth inside a tick range and fees owed to a position."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import Q128, U256_MAX


@dataclass(frozen=True)
class FeeGrowthOutside:
    """Fee growth recorded on the far side of a tick, per token, as Q128.128."""

    fee_growth_outside0_x128: int = 0
    fee_growth_outside1_x128: int = 0


def _wrap(value: int) -> int:
    return value & U256_MAX


def get_fee_growth_inside(
    lower: FeeGrowthOutside,
    upper: FeeGrowthOutside,
    tick_lower: int,
    tick_upper: int,
    tick_current: int,
    fee_growth_global0_x128: int,
    fee_growth_global1_x128: int,
) -> tuple[int, int]:
    """Return the fee growth inside a tick range for token0 and token1.

    Arithmetic wraps modulo 2**256, as the fee growth accumulators do.
    """
    if tick_current < tick_lower:
        inside0 = lower.fee_growth_outside0_x128 - upper.fee_growth_outside0_x128
        inside1 = lower.fee_growth_outside1_x128 - upper.fee_growth_outside1_x128
    elif tick_current >= tick_upper:
        inside0 = upper.fee_growth_outside0_x128 - lower.fee_growth_outside0_x128
        inside1 = upper.fee_growth_outside1_x128 - lower.fee_growth_outside1_x128
    else:
        inside0 = (
            fee_growth_global0_x128
            - lower.fee_growth_outside0_x128
            - upper.fee_growth_outside0_x128
        )
        inside1 = (
            fee_growth_global1_x128
            - lower.fee_growth_outside1_x128
            - upper.fee_growth_outside1_x128
        )
    return _wrap(inside0), _wrap(inside1)


def get_tokens_owed(
    fee_growth_inside_0_last_x128: int,
    fee_growth_inside_1_last_x128: int,
    liquidity: int,
    fee_growth_inside_0_x128: int,
    fee_growth_inside_1_x128: int,
) -> tuple[int, int]:
    """Return the fees owed to a position in token0 and token1."""
    owed0 = _wrap(
        _wrap(fee_growth_inside_0_x128 - fee_growth_inside_0_last_x128) * liquidity
    ) // Q128
    owed1 = _wrap(
        _wrap(fee_growth_inside_1_x128 - fee_growth_inside_1_last_x128) * liquidity
    ) // Q128
    return owed0, owed1