"""Single swap steps and whole-swap simulation across ticks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .full_math import mul_div, mul_div_rounding_up
from .liquidity_math import add_delta
from .sqrt_price_math import (
    get_amount_0_delta,
    get_amount_1_delta,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)
from .tick_list import Tick
from .tick_math import (
    MAX_SQRT_RATIO,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MIN_TICK,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)

_MAX_FEE = 1_000_000


class _TickDataProvider(Protocol):
    def get_tick(self, index: int) -> Tick: ...

    def next_initialized_tick_within_one_word(
        self, tick: int, lte: bool, tick_spacing: int
    ) -> tuple[int, bool]: ...


@dataclass
class SwapState:
    """The running state of a simulated swap."""

    amount_specified_remaining: int = 0
    amount_calculated: int = 0
    sqrt_price_x96: int = 0
    tick_current: int = 0
    liquidity: int = 0


def compute_swap_step(
    sqrt_ratio_current_x96: int,
    sqrt_ratio_target_x96: int,
    liquidity: int,
    amount_remaining: int,
    fee_pips: int,
) -> tuple[int, int, int, int]:
    """Compute one swap step towards a target price.

    A non-negative ``amount_remaining`` means exact input, a negative one
    exact output. Returns ``(sqrt_ratio_next_x96, amount_in, amount_out,
    fee_amount)``.
    """
    if not 0 <= fee_pips <= _MAX_FEE:
        raise ValueError("fee must be between 0 and 1000000 pips")
    fee_complement = _MAX_FEE - fee_pips
    zero_for_one = sqrt_ratio_current_x96 >= sqrt_ratio_target_x96

    if amount_remaining >= 0:
        amount_remaining_less_fee = mul_div(amount_remaining, fee_complement, _MAX_FEE)
        if zero_for_one:
            amount_in = get_amount_0_delta(
                sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, True
            )
        else:
            amount_in = get_amount_1_delta(
                sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, True
            )

        if amount_remaining_less_fee >= amount_in:
            sqrt_ratio_next_x96 = sqrt_ratio_target_x96
            fee_amount = mul_div_rounding_up(amount_in, fee_pips, fee_complement)
        else:
            amount_in = amount_remaining_less_fee
            sqrt_ratio_next_x96 = get_next_sqrt_price_from_input(
                sqrt_ratio_current_x96, liquidity, amount_in, zero_for_one
            )
            fee_amount = amount_remaining - amount_in

        if zero_for_one:
            amount_out = get_amount_1_delta(
                sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, False
            )
        else:
            amount_out = get_amount_0_delta(
                sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, False
            )
        return sqrt_ratio_next_x96, amount_in, amount_out, fee_amount

    amount_remaining_abs = -amount_remaining
    if zero_for_one:
        amount_out = get_amount_1_delta(
            sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, False
        )
    else:
        amount_out = get_amount_0_delta(
            sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, False
        )

    if amount_remaining_abs >= amount_out:
        sqrt_ratio_next_x96 = sqrt_ratio_target_x96
    else:
        amount_out = amount_remaining_abs
        sqrt_ratio_next_x96 = get_next_sqrt_price_from_output(
            sqrt_ratio_current_x96, liquidity, amount_out, zero_for_one
        )

    if zero_for_one:
        amount_in = get_amount_0_delta(
            sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, True
        )
    else:
        amount_in = get_amount_1_delta(
            sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, True
        )
    fee_amount = mul_div_rounding_up(amount_in, fee_pips, fee_complement)
    return sqrt_ratio_next_x96, amount_in, amount_out, fee_amount


def v3_swap(
    fee: int,
    sqrt_price_x96: int,
    tick_current: int,
    liquidity: int,
    tick_spacing: int,
    tick_data_provider: _TickDataProvider,
    zero_for_one: bool,
    amount_specified: int,
    sqrt_price_limit_x96: Optional[int] = None,
) -> SwapState:
    """Simulate a whole swap across initialized ticks and return the final state.

    Raises ``ValueError`` if the price limit is out of range or on the
    wrong side of the current price.
    """
    if sqrt_price_limit_x96 is None:
        sqrt_price_limit_x96 = MIN_SQRT_RATIO + 1 if zero_for_one else MAX_SQRT_RATIO - 1

    if zero_for_one:
        if not sqrt_price_limit_x96 > MIN_SQRT_RATIO:
            raise ValueError("RATIO_MIN")
        if not sqrt_price_limit_x96 < sqrt_price_x96:
            raise ValueError("RATIO_CURRENT")
    else:
        if not sqrt_price_limit_x96 < MAX_SQRT_RATIO:
            raise ValueError("RATIO_MAX")
        if not sqrt_price_limit_x96 > sqrt_price_x96:
            raise ValueError("RATIO_CURRENT")

    exact_input = amount_specified >= 0
    state = SwapState(
        amount_specified_remaining=amount_specified,
        amount_calculated=0,
        sqrt_price_x96=sqrt_price_x96,
        tick_current=tick_current,
        liquidity=liquidity,
    )

    while state.amount_specified_remaining != 0 and state.sqrt_price_x96 != sqrt_price_limit_x96:
        sqrt_price_start_x96 = state.sqrt_price_x96

        # Each step rounds, so stepping word by word is required to match
        # the on-chain result exactly.
        tick_next, initialized = tick_data_provider.next_initialized_tick_within_one_word(
            state.tick_current, zero_for_one, tick_spacing
        )
        tick_next = min(max(tick_next, MIN_TICK), MAX_TICK)
        sqrt_price_next_x96 = get_sqrt_ratio_at_tick(tick_next)

        if zero_for_one:
            target = max(sqrt_price_next_x96, sqrt_price_limit_x96)
        else:
            target = min(sqrt_price_next_x96, sqrt_price_limit_x96)

        state.sqrt_price_x96, amount_in, amount_out, fee_amount = compute_swap_step(
            state.sqrt_price_x96,
            target,
            state.liquidity,
            state.amount_specified_remaining,
            fee,
        )

        if exact_input:
            state.amount_specified_remaining -= amount_in + fee_amount
            state.amount_calculated -= amount_out
        else:
            state.amount_specified_remaining += amount_out
            state.amount_calculated += amount_in + fee_amount

        if state.sqrt_price_x96 == sqrt_price_next_x96:
            if initialized:
                liquidity_net = tick_data_provider.get_tick(tick_next).liquidity_net
                # Moving leftward, liquidity_net applies with the opposite sign.
                if zero_for_one:
                    liquidity_net = -liquidity_net
                state.liquidity = add_delta(state.liquidity, liquidity_net)
            state.tick_current = tick_next - 1 if zero_for_one else tick_next
        elif state.sqrt_price_x96 != sqrt_price_start_x96:
            state.tick_current = get_tick_at_sqrt_ratio(state.sqrt_price_x96)

    return state