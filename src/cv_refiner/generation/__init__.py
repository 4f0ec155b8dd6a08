"""Suggestion generator interface."""

from cv_refiner.generation.base import StaticSuggestionGenerator, SuggestionGenerator

__all__ = ["StaticSuggestionGenerator", "SuggestionGenerator"]
