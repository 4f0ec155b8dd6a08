"""Pydantic models for formatting analysis results."""

from pydantic import BaseModel, Field

from cv_refiner.models.patterns import FormattingPatterns
from cv_refiner.models.suggestion import FormattingSuggestion, HRFeedback


class FormattingAnalysisResult(BaseModel):
    """Score and findings for one resume."""

    score: int = Field(ge=0, le=100)
    suggestions: list[FormattingSuggestion] = Field(default_factory=list)
    feedback: list[HRFeedback] = Field(default_factory=list)
    user_patterns: FormattingPatterns
    reference_count: int = Field(default=0, ge=0)
    strategy: str = "standalone"  # "standalone" or "cohort"
