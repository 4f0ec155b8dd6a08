"""Merging and deduplication of suggestions from several producers."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cv_refiner.anchoring.resolver import TextRangeResolver
from cv_refiner.models.suggestion import AnchoredSuggestion

logger = logging.getLogger(__name__)


def anchor_suggestion(
    resume_text: str,
    suggestion: AnchoredSuggestion,
    resolver: TextRangeResolver,
) -> AnchoredSuggestion:
    """Return the suggestion with a resolved text range (sentinel if not found)."""
    if suggestion.text_range is not None:
        return suggestion
    text_range = resolver.resolve(resume_text, suggestion.original_text)
    return suggestion.model_copy(update={"text_range": text_range})


def merge_suggestions(
    resume_text: str,
    synonym_suggestions: Iterable[AnchoredSuggestion] = (),
    deterministic_suggestions: Iterable[AnchoredSuggestion] = (),
    generated_suggestions: Iterable[AnchoredSuggestion] = (),
    resolver: TextRangeResolver | None = None,
) -> list[AnchoredSuggestion]:
    """Combine producers into one ordered, deduplicated list.

    Earlier producers win: synonym suggestions first, then deterministic,
    then generated. Duplicates are detected on ``original_text`` ignoring
    case. Generated suggestions that quote text but cannot be anchored are
    dropped. Suggestions with empty original text are general hints and are
    never treated as duplicates of each other.

    Args:
        resume_text: The resume the suggestions refer to.
        synonym_suggestions: Output of the synonym detector.
        deterministic_suggestions: Pre-identified issues.
        generated_suggestions: Validated generator output.
        resolver: Resolver for unanchored items; the default cascade if omitted.

    Returns:
        Final suggestions, each with a text range and a stable id.
    """
    resolver = resolver or TextRangeResolver()
    merged: list[AnchoredSuggestion] = []
    seen: set[str] = set()
    dropped = 0

    producers = (
        ("synonym", synonym_suggestions, False),
        ("deterministic", deterministic_suggestions, False),
        ("generated", generated_suggestions, True),
    )
    for source, suggestions, drop_unanchored in producers:
        for suggestion in suggestions:
            anchored = anchor_suggestion(resume_text, suggestion, resolver)
            if drop_unanchored and anchored.original_text and anchored.text_range.is_sentinel:
                dropped += 1
                continue

            key = anchored.original_text.lower()
            if key:
                if key in seen:
                    continue
                seen.add(key)

            if not anchored.id:
                anchored = anchored.model_copy(update={"id": f"{source}-{len(merged)}"})
            merged.append(anchored)

    if dropped:
        logger.warning(f"Dropped {dropped} generated suggestion(s) that could not be anchored")
    return merged
