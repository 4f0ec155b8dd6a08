"""Formatting analysis entry point and scorer selection."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cv_refiner.extractors.pattern_extractor import extract_formatting_patterns
from cv_refiner.models.patterns import FormattingPatterns, ReferenceFingerprint
from cv_refiner.scoring.base import Scorer
from cv_refiner.scoring.cohort import CohortScorer
from cv_refiner.scoring.models import FormattingAnalysisResult
from cv_refiner.scoring.standalone import StandaloneScorer

logger = logging.getLogger(__name__)


def usable_patterns(references: Iterable[ReferenceFingerprint] | None) -> list[FormattingPatterns]:
    """Fingerprints of references that carry a pattern payload."""
    return [r.formatting_patterns for r in references or () if r.formatting_patterns is not None]


def get_scorer(references: list[FormattingPatterns]) -> Scorer:
    """Pick the cohort strategy when any reference fingerprint is available."""
    if references:
        return CohortScorer()
    return StandaloneScorer()


def analyze_formatting(
    resume_text: str,
    page_count: int | None = None,
    references: Iterable[ReferenceFingerprint] | None = None,
) -> FormattingAnalysisResult:
    """Analyze a resume's formatting, against references when there are any.

    Args:
        resume_text: Plain resume text.
        page_count: Known page count, if the caller has one.
        references: Pre-fetched reference resumes; entries without patterns are ignored.

    Returns:
        FormattingAnalysisResult for the resume.
    """
    user_patterns = extract_formatting_patterns(resume_text, page_count)
    cohort = usable_patterns(references)
    scorer = get_scorer(cohort)
    logger.info(f"Scoring with {scorer.name} strategy ({len(cohort)} reference(s))")
    return scorer.score(user_patterns, cohort)
