"""Sorted lists of initialized ticks and lookups over them."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .errors import TickListError

_U128_MAX = (1 << 128) - 1


@dataclass(frozen=True)
class Tick:
    """An initialized tick and the liquidity that references it."""

    index: int
    liquidity_gross: int = 0
    liquidity_net: int = 0


class TickList(Sequence):
    """An immutable list of ticks sorted by index.

    It also serves as a tick data provider for swap simulation.
    """

    def __init__(self, ticks: Iterable[Tick]) -> None:
        self._ticks: tuple[Tick, ...] = tuple(ticks)
        self._indices: list[int] = [tick.index for tick in self._ticks]

    def __len__(self) -> int:
        return len(self._ticks)

    def __getitem__(self, item):  # type: ignore[override]
        return self._ticks[item]

    def __iter__(self) -> Iterator[Tick]:
        return iter(self._ticks)

    def __repr__(self) -> str:
        return f"TickList({list(self._ticks)!r})"

    def validate_list(self, tick_spacing: int) -> None:
        """Check that the list is usable with ``tick_spacing``.

        Raises ``ValueError`` naming the first violated rule: a positive
        spacing, a non-empty list, ticks on spacing multiples, sorted order,
        and net liquidity that never goes negative and sums to zero.
        """
        if tick_spacing <= 0:
            raise ValueError("TICK_SPACING_NONZERO")
        if not self._ticks:
            raise ValueError("LENGTH")
        if any(tick.index % tick_spacing != 0 for tick in self._ticks):
            raise ValueError("TICK_SPACING")
        if any(b < a for a, b in zip(self._indices, self._indices[1:])):
            raise ValueError("SORTED")
        total = 0
        for tick in self._ticks:
            total += tick.liquidity_net
            if not 0 <= total <= _U128_MAX:
                raise ValueError("ZERO_NET")
        if total != 0:
            raise ValueError("ZERO_NET")

    def is_below_smallest(self, tick: int) -> bool:
        """Return whether ``tick`` lies below the first tick of the list."""
        return tick < self._ticks[0].index

    def is_at_or_above_largest(self, tick: int) -> bool:
        """Return whether ``tick`` lies at or above the last tick of the list."""
        return tick >= self._ticks[-1].index

    def binary_search_by_tick(self, tick: int) -> int:
        """Return the position of the largest tick whose index is at most ``tick``.

        Raises ``TickListError`` if ``tick`` is below the smallest tick.
        """
        if self.is_below_smallest(tick):
            raise TickListError(TickListError.BELOW_SMALLEST)
        return bisect_right(self._indices, tick) - 1

    def next_initialized_tick(self, tick: int, lte: bool) -> Tick:
        """Return the nearest initialized tick at or below (``lte``) or above ``tick``."""
        if lte:
            if self.is_below_smallest(tick):
                raise TickListError(TickListError.BELOW_SMALLEST)
            if self.is_at_or_above_largest(tick):
                return self._ticks[-1]
            return self._ticks[self.binary_search_by_tick(tick)]
        if self.is_at_or_above_largest(tick):
            raise TickListError(TickListError.AT_OR_ABOVE_LARGEST)
        if self.is_below_smallest(tick):
            return self._ticks[0]
        return self._ticks[self.binary_search_by_tick(tick) + 1]

    def get_tick(self, index: int) -> Tick:
        """Return the tick with exactly this index.

        Raises ``TickListError`` if no such tick is in the list.
        """
        tick = self._ticks[self.binary_search_by_tick(index)]
        if tick.index != index:
            raise TickListError(TickListError.NOT_CONTAINED)
        return tick

    def next_initialized_tick_within_one_word(
        self, tick: int, lte: bool, tick_spacing: int
    ) -> tuple[int, bool]:
        """Return the next tick within the same bitmap word and whether it is initialized."""
        compressed = tick // tick_spacing
        if lte:
            word_pos = compressed >> 8
            minimum = (word_pos << 8) * tick_spacing
            if self.is_below_smallest(tick):
                return minimum, False
            index = self.next_initialized_tick(tick, lte).index
            next_tick = max(minimum, index)
            return next_tick, next_tick == index
        word_pos = (compressed + 1) >> 8
        maximum = (((word_pos + 1) << 8) - 1) * tick_spacing
        if self.is_at_or_above_largest(tick):
            return maximum, False
        index = self.next_initialized_tick(tick, lte).index
        next_tick = min(maximum, index)
        return next_tick, next_tick == index