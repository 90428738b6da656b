"""Exceptions raised by the pool math routines."""

from __future__ import annotations


class UniswapV3Error(Exception):
    """Base class for all errors raised by this package."""


class MulDivOverflowError(UniswapV3Error, ArithmeticError):
    """The result of a full-precision multiply-divide does not fit in 256 bits."""

    def __init__(self, message: str = "MulDivOverflow") -> None:
        super().__init__(message)


class AddDeltaOverflowError(UniswapV3Error, ArithmeticError):
    """Adding a signed liquidity delta overflowed or underflowed."""

    def __init__(self, message: str = "AddDeltaOverflow") -> None:
        super().__init__(message)


class PriceOverflowError(UniswapV3Error, ArithmeticError):
    """The next price could not be computed without overflow."""

    def __init__(self, message: str = "PriceOverflow") -> None:
        super().__init__(message)


class SafeCastToU160OverflowError(UniswapV3Error, ArithmeticError):
    """A value does not fit into 160 bits."""

    def __init__(self, message: str = "SafeCastToU160Overflow") -> None:
        super().__init__(message)


class InsufficientLiquidityError(UniswapV3Error):
    """There is not enough liquidity to remove the requested amount."""

    def __init__(self, message: str = "InsufficientLiquidity") -> None:
        super().__init__(message)


class InvalidPriceOrLiquidityError(UniswapV3Error, ValueError):
    """The price or the liquidity is zero."""

    def __init__(self, message: str = "InvalidPriceOrLiquidity") -> None:
        super().__init__(message)


class InvalidPriceError(UniswapV3Error, ValueError):
    """The price is zero."""

    def __init__(self, message: str = "InvalidPrice") -> None:
        super().__init__(message)


class InvalidTickError(UniswapV3Error, ValueError):
    """The tick lies outside the supported range."""

    def __init__(self, tick: int) -> None:
        self.tick = tick
        super().__init__(f"InvalidTick({tick})")


class InvalidSqrtPriceError(UniswapV3Error, ValueError):
    """The sqrt price lies outside the supported range."""

    def __init__(self, sqrt_price: int) -> None:
        self.sqrt_price = sqrt_price
        super().__init__(f"InvalidSqrtPrice({sqrt_price})")


class TickListError(UniswapV3Error):
    """A lookup in a sorted tick list failed."""

    BELOW_SMALLEST = "BelowSmallest"
    AT_OR_ABOVE_LARGEST = "AtOrAboveLargest"
    NOT_CONTAINED = "NotContained"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TickListError):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self) -> int:
        return hash(self.reason)