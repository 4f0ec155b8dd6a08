"""End-to-end resume optimization run.

Wires formatting analysis, synonym detection, the optional text generator
and the merger together, applying the degraded-mode policy: a failing
cohort store means standalone scoring, a failing generator means
deterministic suggestions only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from cv_refiner.anchoring.merger import merge_suggestions
from cv_refiner.anchoring.resolver import TextRangeResolver
from cv_refiner.anchoring.synonyms import find_synonym_suggestions
from cv_refiner.anchoring.validation import validate_generated_suggestions
from cv_refiner.config import Settings, get_settings
from cv_refiner.generation.base import SuggestionGenerator
from cv_refiner.models.suggestion import AnchoredSuggestion
from cv_refiner.references.store import ReferenceStore
from cv_refiner.scoring.analyzer import analyze_formatting
from cv_refiner.scoring.models import FormattingAnalysisResult

logger = logging.getLogger(__name__)


class OptimizationResult(BaseModel):
    """Formatting analysis plus the final anchored suggestions."""

    analysis: FormattingAnalysisResult
    suggestions: list[AnchoredSuggestion] = Field(default_factory=list)
    generator_failed: bool = False


def _generate(
    generator: SuggestionGenerator,
    resume_text: str,
    context: dict[str, Any],
    settings: Settings,
) -> list[AnchoredSuggestion] | None:
    """Run the generator; None if it failed."""
    try:
        raw = generator.generate(resume_text, context)
    except Exception:
        logger.exception("Suggestion generation failed, continuing with deterministic results")
        return None
    return validate_generated_suggestions(raw, max_suggestions=settings.max_generated_suggestions)


def optimize_resume(
    resume_text: str,
    *,
    page_count: int | None = None,
    reference_store: ReferenceStore | None = None,
    industry: str | None = None,
    role_level: str | None = None,
    target_keywords: Iterable[str] = (),
    deterministic_suggestions: Iterable[AnchoredSuggestion] = (),
    generator: SuggestionGenerator | None = None,
    settings: Settings | None = None,
) -> OptimizationResult:
    """Analyze formatting and produce the final suggestion set for a resume.

    Args:
        resume_text: Plain resume text.
        page_count: Known page count, if any.
        reference_store: Cohort source; standalone scoring when omitted.
        industry: Cohort filter.
        role_level: Cohort filter.
        target_keywords: Job keywords used for alias detection.
        deterministic_suggestions: Pre-identified issues to merge in.
        generator: Optional free-text suggestion generator.
        settings: Overrides the cached settings.

    Returns:
        OptimizationResult with the analysis and merged suggestions.
    """
    settings = settings or get_settings()

    references = []
    if reference_store is not None:
        references = reference_store.fetch_references(industry=industry, role_level=role_level)
    analysis = analyze_formatting(resume_text, page_count=page_count, references=references)

    keywords = list(target_keywords)
    synonym_suggestions = find_synonym_suggestions(resume_text, keywords)

    generated: list[AnchoredSuggestion] = []
    generator_failed = False
    if generator is not None:
        context = {
            "formatting_feedback": [f.model_dump() for f in analysis.feedback],
            "target_keywords": keywords,
        }
        result = _generate(generator, resume_text, context, settings)
        if result is None:
            generator_failed = True
        else:
            generated = result

    suggestions = merge_suggestions(
        resume_text,
        synonym_suggestions=synonym_suggestions,
        deterministic_suggestions=deterministic_suggestions,
        generated_suggestions=generated,
        resolver=TextRangeResolver.from_settings(settings),
    )
    return OptimizationResult(
        analysis=analysis,
        suggestions=suggestions,
        generator_failed=generator_failed,
    )
