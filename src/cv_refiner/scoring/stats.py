"""Cohort statistics helpers."""

from collections.abc import Sequence

from cv_refiner.utils.numbers import percent


def mode(values: Sequence[int], default: int = 1) -> int:
    """Most common value; ties go to the value that reached the top count first."""
    counts: dict[int, int] = {}
    best_count = 0
    best = values[0] if values else default
    for value in values:
        counts[value] = counts.get(value, 0) + 1
        if counts[value] > best_count:
            best_count = counts[value]
            best = value
    return best


def percentage_at(values: Sequence[int], target: int) -> int:
    """Whole-number percentage of values equal to target."""
    return percent(sum(1 for v in values if v == target), len(values))


def average(values: Sequence[float]) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)
