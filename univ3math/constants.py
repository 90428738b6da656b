"""Fixed-point constants and shared value types."""

from __future__ import annotations

from dataclasses import dataclass

Q96 = 1 << 96
Q128 = 1 << 128
Q192 = 1 << 192

U160_MAX = (1 << 160) - 1
U256_MAX = (1 << 256) - 1


@dataclass(frozen=True)
class MethodParameters:
    """Generated method parameters for executing a call."""

    calldata: bytes
    """The encoded calldata to perform the given operation."""
    value: int
    """The amount of ether (wei) to send."""