import pytest

from univ3math.constants import U256_MAX
from univ3math.encode_sqrt_ratio_x96 import encode_sqrt_ratio_x96
from univ3math.max_liquidity_for_amounts import (
    max_liquidity_for_amount0_imprecise,
    max_liquidity_for_amount0_precise,
    max_liquidity_for_amount1,
    max_liquidity_for_amounts,
)

LOWER = encode_sqrt_ratio_x96(100, 110)
UPPER = encode_sqrt_ratio_x96(110, 100)
INSIDE = encode_sqrt_ratio_x96(1, 1)
BELOW = encode_sqrt_ratio_x96(99, 110)
ABOVE = encode_sqrt_ratio_x96(111, 100)


@pytest.mark.parametrize(
    "current, amount0, amount1, precise, expected",
    [
        (INSIDE, 100, 200, False, 2148),
        (INSIDE, 100, U256_MAX, False, 2148),
        (INSIDE, U256_MAX, 200, False, 4297),
        (BELOW, 100, 200, False, 1048),
        (BELOW, 100, U256_MAX, False, 1048),
        (
            BELOW,
            U256_MAX,
            200,
            False,
            1214437677402050006470401421068302637228917309992228326090730924516431320489727,
        ),
        (ABOVE, 100, 200, False, 2097),
        (
            ABOVE,
            100,
            U256_MAX,
            False,
            1214437677402050006470401421098959354205873606971497132040612572422243086574654,
        ),
        (ABOVE, U256_MAX, 200, False, 2097),
        (INSIDE, 100, 200, True, 2148),
        (INSIDE, 100, U256_MAX, True, 2148),
        (INSIDE, U256_MAX, 200, True, 4297),
        (BELOW, 100, 200, True, 1048),
        (BELOW, 100, U256_MAX, True, 1048),
        (
            BELOW,
            U256_MAX,
            200,
            True,
            1214437677402050006470401421082903520362793114274352355276488318240158678126184,
        ),
        (ABOVE, 100, 200, True, 2097),
        (
            ABOVE,
            100,
            U256_MAX,
            True,
            1214437677402050006470401421098959354205873606971497132040612572422243086574654,
        ),
        (ABOVE, U256_MAX, 200, True, 2097),
    ],
)
def test_max_liquidity_for_amounts(current, amount0, amount1, precise, expected):
    assert (
        max_liquidity_for_amounts(current, LOWER, UPPER, amount0, amount1, precise)
        == expected
    )


def test_bounds_order_does_not_matter():
    assert max_liquidity_for_amounts(
        INSIDE, UPPER, LOWER, 100, 200, False
    ) == max_liquidity_for_amounts(INSIDE, LOWER, UPPER, 100, 200, False)


@pytest.mark.parametrize(
    "func",
    [
        max_liquidity_for_amount0_imprecise,
        max_liquidity_for_amount0_precise,
        max_liquidity_for_amount1,
    ],
)
def test_single_amount_helpers_are_symmetric(func):
    assert func(LOWER, UPPER, 12345) == func(UPPER, LOWER, 12345)


def test_precise_at_least_imprecise():
    assert max_liquidity_for_amount0_precise(
        LOWER, UPPER, 10**18
    ) >= max_liquidity_for_amount0_imprecise(LOWER, UPPER, 10**18)


def test_equal_bounds_raise():
    with pytest.raises(ZeroDivisionError):
        max_liquidity_for_amount1(LOWER, LOWER, 100)