"""Numeric helpers shared by extraction and scoring."""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves going up, e.g. 2.5 -> 3 (Python's round() gives 2).

    Examples:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(0.125, 2)
        0.13
    """
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half up to an int."""
    return int(round_half_up(value))


def percent(part: int, total: int) -> int:
    """Whole-number percentage of part over total; 0 when total is 0."""
    if total <= 0:
        return 0
    return round_int(part / total * 100)
