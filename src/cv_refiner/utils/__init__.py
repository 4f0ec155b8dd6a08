"""Utility functions for CV Refiner."""

from cv_refiner.utils.numbers import percent, round_half_up, round_int

__all__ = ["percent", "round_half_up", "round_int"]
