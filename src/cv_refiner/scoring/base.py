"""Scorer interface shared by the standalone and cohort strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from cv_refiner.feedback.normalizer import suggestions_to_feedback
from cv_refiner.models.patterns import FormattingPatterns
from cv_refiner.models.suggestion import FormattingSuggestion
from cv_refiner.scoring.models import FormattingAnalysisResult

logger = logging.getLogger(__name__)

BASE_SCORE = 100


class Deduction(BaseModel):
    """A triggered rule: points taken off plus the finding to report."""

    model_config = ConfigDict(frozen=True)

    points: int = Field(ge=0)
    suggestion: FormattingSuggestion


class Scorer(ABC):
    """Score a resume fingerprint from 0 to 100.

    Subclasses only decide which rules fire. Deductions are independent and
    additive against a baseline of 100, and the total is clamped to [0, 100].
    """

    name: str = "base"

    def score(
        self,
        user_patterns: FormattingPatterns,
        references: Sequence[FormattingPatterns] = (),
    ) -> FormattingAnalysisResult:
        """Run all rules and build the analysis result.

        Args:
            user_patterns: Fingerprint of the resume being scored.
            references: Cohort fingerprints (already filtered for null payloads).

        Returns:
            FormattingAnalysisResult with score, suggestions and feedback.
        """
        deductions = self.evaluate(user_patterns, list(references))
        total = sum(d.points for d in deductions)
        score = max(0, min(100, BASE_SCORE - total))
        suggestions = [d.suggestion for d in deductions]

        logger.info(
            f"{self.name} scoring: {len(suggestions)} suggestion(s), "
            f"-{total} points, score={score}"
        )
        return FormattingAnalysisResult(
            score=score,
            suggestions=suggestions,
            feedback=suggestions_to_feedback(suggestions),
            user_patterns=user_patterns,
            reference_count=len(references),
            strategy=self.name,
        )

    @abstractmethod
    def evaluate(
        self,
        user_patterns: FormattingPatterns,
        references: list[FormattingPatterns],
    ) -> list[Deduction]:
        """Return the deductions triggered for this resume."""
