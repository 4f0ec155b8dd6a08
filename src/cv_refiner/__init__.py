"""CV Refiner - resume formatting analysis and suggestion anchoring."""

__version__ = "0.1.0"
