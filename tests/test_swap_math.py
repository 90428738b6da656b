import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from univ3math.constants import Q96
from univ3math.swap_math import SwapState, compute_swap_step, v3_swap
from univ3math.tick_list import Tick, TickList
from univ3math.tick_math import (
    MIN_SQRT_RATIO,
    MIN_TICK,
    get_sqrt_ratio_at_tick,
)

MEDIUM_FEE = 3000


def test_compute_swap_step():
    current = 7164297123421688246 | (4074563739 << 64)
    target = 7829751401545787782 | (4282102344 << 64)
    result = compute_swap_step(current, target, 94868, -11185, MEDIUM_FEE)
    assert result == (target, 4585, 4846, 14)


def test_compute_swap_step_rejects_fee_above_maximum():
    with pytest.raises(ValueError):
        compute_swap_step(Q96, Q96 // 2, 10**18, 1000, 1_000_001)


@settings(max_examples=200, deadline=None)
@given(
    tick_a=st.integers(min_value=-100_000, max_value=100_000),
    tick_b=st.integers(min_value=-100_000, max_value=100_000),
    liquidity=st.integers(min_value=1, max_value=1 << 100),
    amount=st.integers(min_value=0, max_value=1 << 100),
    fee=st.integers(min_value=0, max_value=999_999),
)
def test_exact_input_never_spends_more_than_remaining(tick_a, tick_b, liquidity, amount, fee):
    current = get_sqrt_ratio_at_tick(tick_a)
    target = get_sqrt_ratio_at_tick(tick_b)
    next_price, amount_in, amount_out, fee_amount = compute_swap_step(
        current, target, liquidity, amount, fee
    )
    assert amount_in + fee_amount <= amount
    assert min(current, target) <= next_price <= max(current, target)


def _pool(liquidity):
    return TickList(
        [
            Tick(index=-60, liquidity_gross=liquidity, liquidity_net=liquidity),
            Tick(index=60, liquidity_gross=liquidity, liquidity_net=-liquidity),
        ]
    )


def test_v3_swap_exact_input_small_amount():
    liquidity = 10**18
    state = v3_swap(MEDIUM_FEE, Q96, 0, liquidity, 60, _pool(liquidity), True, 1000)
    assert state.amount_specified_remaining == 0
    assert -1000 < state.amount_calculated < 0
    assert MIN_SQRT_RATIO < state.sqrt_price_x96 < Q96
    assert state.liquidity == liquidity
    assert state.tick_current == -1


def test_v3_swap_exact_output_small_amount():
    liquidity = 10**18
    state = v3_swap(MEDIUM_FEE, Q96, 0, liquidity, 60, _pool(liquidity), False, -1000)
    assert state.amount_specified_remaining == 0
    assert state.amount_calculated > 1000
    assert state.sqrt_price_x96 > Q96
    assert state.tick_current == 0


def test_v3_swap_crosses_ticks_until_limit():
    liquidity = 10**6
    state = v3_swap(MEDIUM_FEE, Q96, 0, liquidity, 60, _pool(liquidity), True, 10**18)
    assert state.sqrt_price_x96 == MIN_SQRT_RATIO + 1
    assert state.liquidity == 0
    assert state.tick_current == MIN_TICK
    assert 0 < state.amount_specified_remaining < 10**18


def test_v3_swap_stops_at_explicit_limit():
    liquidity = 10**18
    limit = get_sqrt_ratio_at_tick(-30)
    state = v3_swap(
        MEDIUM_FEE, Q96, 0, liquidity, 60, _pool(liquidity), True, 10**30, limit
    )
    assert state.sqrt_price_x96 == limit
    assert state.tick_current == -30
    assert state.liquidity == liquidity


def test_v3_swap_rejects_limit_above_current_for_zero_for_one():
    with pytest.raises(ValueError, match="RATIO_CURRENT"):
        v3_swap(MEDIUM_FEE, Q96, 0, 1, 60, _pool(1), True, 1000, Q96 + 1)


def test_v3_swap_rejects_limit_at_min_ratio():
    with pytest.raises(ValueError, match="RATIO_MIN"):
        v3_swap(MEDIUM_FEE, Q96, 0, 1, 60, _pool(1), True, 1000, MIN_SQRT_RATIO)


def test_v3_swap_zero_amount_leaves_state_unchanged():
    state = v3_swap(MEDIUM_FEE, Q96, 0, 5, 60, _pool(5), False, 0)
    assert state == SwapState(
        amount_specified_remaining=0,
        amount_calculated=0,
        sqrt_price_x96=Q96,
        tick_current=0,
        liquidity=5,
    )