"""Anchoring of free-text suggestions to resume text."""

from cv_refiner.anchoring.merger import merge_suggestions
from cv_refiner.anchoring.resolver import TextRangeResolver, find_text_range
from cv_refiner.anchoring.synonyms import find_synonym_suggestions
from cv_refiner.anchoring.validation import validate_generated_suggestions

__all__ = [
    "TextRangeResolver",
    "find_synonym_suggestions",
    "find_text_range",
    "merge_suggestions",
    "validate_generated_suggestions",
]
