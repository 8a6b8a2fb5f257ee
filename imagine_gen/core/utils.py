from __future__ import annotations
import math


def clamp(value: float, lo: float, hi: float) -> float:
    if lo > hi:
        lo, hi = hi, lo
    return min(max(value, lo), hi)


def round_half_up(x: float) -> int:
    # halves go toward +inf, unlike round()'s banker's rounding
    return math.floor(x + 0.5)


def fmt_num(x) -> str:
    """Render a number the short way: 48.0 -> '48', 2.5 -> '2.5'."""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)
