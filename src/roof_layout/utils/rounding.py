# File: src/roof_layout/utils/rounding.py

"""Rounding helpers shared by the horizontal and vertical solvers.

Installers mark whole millimetres, so every spacing, gauge, overhang and
mark leaves the solvers as an integer. Halves always round up (towards
positive infinity), never to the nearest even number.
"""

import math
from typing import Union

Number = Union[int, float]


def round_half_up(value: Number) -> int:
    """Round to the nearest whole millimetre, halves towards +infinity.

    Args:
        value: Length in millimetres

    Returns:
        Rounded length

    Example:
        >>> round_half_up(2.5), round_half_up(-2.5)
        (3, -2)
    """
    return int(math.floor(value + 0.5))


def clamp(value: Number, lower: Number, upper: Number) -> Number:
    """Limit value to [lower, upper]; the upper bound wins if they cross."""
    return min(max(value, lower), upper)


def round_clamp(value: Number, lower: Number, upper: Number) -> int:
    """Clamp value to [lower, upper] and round it to whole millimetres.

    This is the one place the solvers bring a raw spacing, gauge or overhang
    back inside its tolerance band.

    Args:
        value: Raw length in millimetres
        lower: Smallest allowed length
        upper: Largest allowed length

    Returns:
        Rounded, clamped length
    """
    return round_half_up(clamp(value, lower, upper))


def within(value: Number, lower: Number, upper: Number) -> bool:
    """Check whether value lies in the closed interval [lower, upper]."""
    return lower <= value <= upper
