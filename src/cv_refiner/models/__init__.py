"""Data models for CV Refiner."""

from cv_refiner.models.patterns import (
    BulletStyle,
    DateFormat,
    FormattingPatterns,
    HeadingStyle,
    QuantifiedMetrics,
    ReferenceFingerprint,
)
from cv_refiner.models.suggestion import (
    AnchoredSuggestion,
    FormattingSuggestion,
    HRFeedback,
    TextRange,
)

__all__ = [
    "AnchoredSuggestion",
    "BulletStyle",
    "DateFormat",
    "FormattingPatterns",
    "FormattingSuggestion",
    "HRFeedback",
    "HeadingStyle",
    "QuantifiedMetrics",
    "ReferenceFingerprint",
    "TextRange",
]
