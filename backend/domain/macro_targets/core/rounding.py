"""Rounding helpers shared by the calculators."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going toward +infinity.

    Stored targets were produced with this rule, so Python's built-in
    ``round`` (half to even) must not be used for them.

    Example:
        >>> round_half_up(276.5)
        277
        >>> round(276.5)
        276
        >>> round_half_up(-2.5)
        -2
    """
    floor = math.floor(value)
    if value - floor >= 0.5:
        return int(floor) + 1
    return int(floor)
