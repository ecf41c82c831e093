"""Rounding helpers shared by the health metrics calculations.

Python's built-in ``round`` uses round-half-to-even, so ``round(2.5) == 2``.
All reported figures in this codebase round half up (``2.5 -> 3``,
``-2.5 -> -2``) instead, which is what the figures stored by the diet
platform were always computed with.
"""

import math
from typing import Union

Number = Union[int, float]


def _floor_half_up(value: float) -> int:
    # Compares the exact fraction, so 0.49999999999999994 rounds to 0.
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, halves going up.

    Non-finite values (NaN, +/-inf) are returned unchanged.

    Example:
        >>> round_half_up(24.25, 1)
        24.3
        >>> round_half_up(1617.5)
        1618.0
    """
    if not math.isfinite(value):
        return value
    factor = 10**ndigits
    return _floor_half_up(value * factor) / factor


def round_to_int(value: float) -> Number:
    """Round half up to an ``int``.

    NaN and infinities cannot be represented as ``int`` and are passed
    through as floats.

    Example:
        >>> round_to_int(78.125)
        78
        >>> round_to_int(140.625)
        141
    """
    if not math.isfinite(value):
        return value
    return _floor_half_up(value)
