"""Numeric helpers shared by the ladder computations."""

import math


def change(old_value: float, new_value: float) -> float:
    """Change between two values as a proportion of the first.

    0 if the values are equal, 0.5 if the second is 50% larger. ``old_value`` must not be 0.
    """
    return (new_value - old_value) / old_value


def multiplier(change_value: float) -> float:
    """Convert a proportional change to a multiplier (0.25 -> 1.25, -0.25 -> 0.75)."""
    return 1.0 + change_value


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_to_multiple(multiple: int, value: float) -> int:
    return round_half_up(value / multiple) * multiple


def round_even(value: float) -> int:
    """Round to the nearest even integer; used to keep video dimensions even."""
    return round_to_multiple(2, value)


def round_to_precision(sig_figs: int, value: float) -> float:
    """Round to a number of significant figures, symmetric around zero."""
    if value > 0:
        return _round_positive_to_precision(sig_figs, value)
    if value < 0:
        return -_round_positive_to_precision(sig_figs, -value)
    return 0


def _round_positive_to_precision(sig_figs: int, value: float) -> float:
    exponent = 1 + math.floor(math.log10(value)) - sig_figs
    # integer factor when possible so large values stay exact ints
    factor = 10**exponent
    return round_half_up(value / factor) * factor

