# univ3math

Exact integer math for concentrated-liquidity pools. It follows the on-chain
fixed-point rules: prices are Q64.96 square roots held as plain Python `int`s,
and rounding matches the contract arithmetic. Where the contracts revert, these
functions raise an exception.

The package has no dependencies outside the standard library.

## Install

```
pip install univ3math
```

For the test suite:

```
pip install "univ3math[test]"
pytest
```

## What is in it

| Module | Contents |
| --- | --- |
| `univ3math.constants` | `Q96`, `Q128`, `Q192`, `U160_MAX`, `U256_MAX`, and the `MethodParameters` dataclass (`calldata`, `value`) |
| `univ3math.errors` | `UniswapV3Error` and its subclasses |
| `univ3math.bit_math` | `most_significant_bit`, `least_significant_bit` |
| `univ3math.full_math` | `mul_div`, `mul_div_rounding_up`, `mul_div_q96` |
| `univ3math.tick_math` | `MIN_TICK`, `MAX_TICK`, `MIN_SQRT_RATIO`, `MAX_SQRT_RATIO`, `get_sqrt_ratio_at_tick`, `get_tick_at_sqrt_ratio` |
| `univ3math.liquidity_math` | `add_delta` |
| `univ3math.sqrt_price_math` | `get_next_sqrt_price_from_input`, `get_next_sqrt_price_from_output`, `get_next_sqrt_price_from_amount_0_rounding_up`, `get_next_sqrt_price_from_amount_1_rounding_down`, `get_amount_0_delta`, `get_amount_1_delta`, `get_amount_0_delta_signed`, `get_amount_1_delta_signed` |
| `univ3math.tick_list` | `Tick`, `TickList` |
| `univ3math.swap_math` | `compute_swap_step`, `v3_swap`, `SwapState` |
| `univ3math.encode_sqrt_ratio_x96` | `encode_sqrt_ratio_x96` |
| `univ3math.max_liquidity_for_amounts` | `max_liquidity_for_amounts`, `max_liquidity_for_amount0_precise`, `max_liquidity_for_amount0_imprecise`, `max_liquidity_for_amount1` |
| `univ3math.nearest_usable_tick` | `nearest_usable_tick` |
| `univ3math.fees` | `FeeGrowthOutside`, `get_fee_growth_inside`, `get_tokens_owed` |

## Examples

Ticks and prices:

```python
from univ3math.encode_sqrt_ratio_x96 import encode_sqrt_ratio_x96
from univ3math.tick_math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio

price = encode_sqrt_ratio_x96(1, 1)          # 2**96
assert get_tick_at_sqrt_ratio(price) == 0
assert get_sqrt_ratio_at_tick(0) == 2**96
```

Rounding a tick to a pool's spacing:

```python
from univ3math.nearest_usable_tick import nearest_usable_tick

assert nearest_usable_tick(5, 10) == 10
assert nearest_usable_tick(-5, 10) == 0
```

Sizing liquidity for a range:

```python
from univ3math.encode_sqrt_ratio_x96 import encode_sqrt_ratio_x96
from univ3math.max_liquidity_for_amounts import max_liquidity_for_amounts

liquidity = max_liquidity_for_amounts(
    encode_sqrt_ratio_x96(1, 1),
    encode_sqrt_ratio_x96(100, 110),
    encode_sqrt_ratio_x96(110, 100),
    100,
    200,
    False,
)
assert liquidity == 2148
```

Simulating a swap against a list of initialized ticks:

```python
from univ3math.swap_math import v3_swap
from univ3math.tick_list import Tick, TickList

ticks = TickList([
    Tick(index=-887220, liquidity_gross=10**18, liquidity_net=10**18),
    Tick(index=887220, liquidity_gross=10**18, liquidity_net=-10**18),
])
ticks.validate_list(60)
state = v3_swap(3000, 2**96, 0, 10**18, 60, ticks, True, 10**6, None)
print(state.amount_calculated, state.tick_current)
```

A non-negative `amount_specified` is an exact-input swap; a negative one is
exact output. `v3_swap` accepts any object with `get_tick(index)` and
`next_initialized_tick_within_one_word(tick, lte, tick_spacing)`, of which
`TickList` is one.

## Errors

Failures of the pool math are raised as subclasses of
`univ3math.errors.UniswapV3Error`:

- `MulDivOverflowError`: a multiply-divide result does not fit in 256 bits, or
  the denominator is zero.
- `AddDeltaOverflowError`: `add_delta` leaves the unsigned 128-bit range.
- `PriceOverflowError`, `SafeCastToU160OverflowError`,
  `InsufficientLiquidityError`, `InvalidPriceOrLiquidityError`,
  `InvalidPriceError`: next-price and amount-delta failures.
- `InvalidTickError` (with `.tick`) and `InvalidSqrtPriceError` (with
  `.sqrt_price`): out-of-range inputs to the tick math.
- `TickListError` (with `.reason`, one of `BELOW_SMALLEST`,
  `AT_OR_ABOVE_LARGEST`, `NOT_CONTAINED`): failed tick list lookups.

Precondition failures raise `ValueError`. Examples include a non-positive tick
spacing, an out-of-range tick passed to `nearest_usable_tick`, a failed
`TickList.validate_list` check, or a price limit on the wrong side in `v3_swap`.
Integers passed outside their fixed width also raise `ValueError`.

## What it does not do

This is a math library only. It does not:

- talk to a node or chain;
- build or encode transaction calldata (`MethodParameters` is a plain value
  holder and nothing in the package fills it);
- compute pool addresses;
- model tokens, pools, positions or price objects.