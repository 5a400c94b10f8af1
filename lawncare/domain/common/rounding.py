"""Rounding used by every derived amount in the domain."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, unlike round())."""
    return math.floor(value + 0.5)
