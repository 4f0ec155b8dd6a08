"""Validation of raw suggestion payloads from a text generator."""

from __future__ import annotations

import logging
from typing import Any

from cv_refiner.models.suggestion import AnchoredSuggestion

logger = logging.getLogger(__name__)

VALID_CATEGORIES = frozenset(
    {
        "missing_keyword",
        "weak_keyword",
        "formatting",
        "section",
        "semantic",
        "llm_review",
    }
)
VALID_TYPES = frozenset({"ats", "hr"})
VALID_SEVERITIES = frozenset({"critical", "warning", "info"})

DEFAULT_MAX_SUGGESTIONS = 25


def _text(item: dict[str, Any], *keys: str, default: str = "") -> str:
    """First string value found under any of ``keys``, trimmed."""
    for key in keys:
        value = item.get(key)
        if isinstance(value, str):
            return value.strip()
    return default


def validate_generated_suggestions(
    raw: Any,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    extra_categories: frozenset[str] = frozenset(),
) -> list[AnchoredSuggestion]:
    """Normalize a generator payload into unanchored suggestions.

    Accepts ``{"suggestions": [...]}`` or a bare list. Items without original
    text, or with neither suggested text nor reasoning, are skipped. Unknown
    categories become "formatting", unknown types "ats" and unknown
    severities "info". Whether the original text exists in the resume is
    left to anchoring.

    Args:
        raw: Parsed JSON returned by the generator.
        max_suggestions: Maximum number of suggestions kept.
        extra_categories: Categories accepted in addition to the defaults.

    Returns:
        Suggestions with no text range yet.
    """
    if isinstance(raw, dict):
        raw = raw.get("suggestions")
    if not isinstance(raw, list):
        return []

    categories = VALID_CATEGORIES | extra_categories
    validated: list[AnchoredSuggestion] = []

    for item in raw:
        if not isinstance(item, dict):
            continue

        original_text = _text(item, "originalText", "original_text")
        suggested_text = _text(item, "suggestedText", "suggested_text")
        reasoning = _text(item, "reasoning")
        if not original_text:
            continue
        if not suggested_text and not reasoning:
            continue

        category = _text(item, "category", default="formatting")
        suggestion_type = _text(item, "type", default="ats")
        severity = _text(item, "severity", default="info")

        validated.append(
            AnchoredSuggestion(
                original_text=original_text,
                suggested_text=suggested_text,
                reasoning=reasoning,
                category=category if category in categories else "formatting",
                type=suggestion_type if suggestion_type in VALID_TYPES else "ats",
                severity=severity if severity in VALID_SEVERITIES else "info",
            )
        )

    if len(validated) > max_suggestions:
        logger.warning(f"Generator returned {len(validated)} suggestions, keeping {max_suggestions}")
    return validated[:max_suggestions]
