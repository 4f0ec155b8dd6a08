"""Conversion of formatting suggestions into unified feedback items."""

from cv_refiner.models.suggestion import FormattingSuggestion, HRFeedback

# Aspect -> remediation text. Templates may use {user_value}, {reference_value}
# and {missing} (the user value without its "Missing: " prefix).
REMEDIATIONS: dict[str, str] = {
    "quantified_metrics": (
        "Add specific numbers, percentages, and dollar amounts to your bullet points."
    ),
    "bullet_points": "Use dash (-) or dot (•) bullet points for each achievement.",
    "missing_sections": "Add the missing section(s): {missing}.",
    "summary_section": "Add a 2-3 sentence professional summary at the top of your resume.",
    "page_count": "Trim your resume to {reference_value}.",
    "heading_consistency": "Choose one heading style (e.g., ALL CAPS) and use it consistently.",
    "date_consistency": "Pick one date format (e.g., Month YYYY) and use it throughout.",
    "section_order": "Reorder your sections: {reference_value}.",
    "bullet_density": "Aim for {reference_value} for readability.",
}


def remediation_for(suggestion: FormattingSuggestion) -> str | None:
    """Recommended action for a suggestion, or None for unknown aspects."""
    template = REMEDIATIONS.get(suggestion.aspect)
    if template is None:
        return None
    return template.format(
        user_value=suggestion.user_value,
        reference_value=suggestion.reference_value,
        missing=suggestion.user_value.replace("Missing: ", "", 1),
    )


def suggestions_to_feedback(suggestions: list[FormattingSuggestion]) -> list[HRFeedback]:
    """Convert formatting suggestions to layer-1 HRFeedback items."""
    return [
        HRFeedback(
            severity=s.severity,
            message=s.message,
            suggestion=remediation_for(s),
        )
        for s in suggestions
    ]
