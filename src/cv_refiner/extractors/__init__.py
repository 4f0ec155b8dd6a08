"""Resume text extractors."""

from cv_refiner.extractors.pattern_extractor import extract_formatting_patterns

__all__ = ["extract_formatting_patterns"]
