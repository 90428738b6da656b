"""Exact fixed-point math for concentrated-liquidity AMM pools.

Covers tick and sqrt price conversions, swap steps and swap simulation, tick
lists, liquidity sizing and fee accounting.
"""

__version__ = "4.0.0"