"""Markdown output formatting."""

from pathlib import Path

from cv_refiner.models.suggestion import AnchoredSuggestion
from cv_refiner.scoring.models import FormattingAnalysisResult

SEVERITY_ORDER = {"critical": 0, "warning": 1, "info": 2}


def save_markdown(content: str, output_path: str | Path) -> Path:
    """Save content to a markdown file.

    Args:
        content: Markdown content to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def format_analysis(result: FormattingAnalysisResult) -> str:
    """Format a formatting analysis as markdown.

    Args:
        result: Analysis to render.

    Returns:
        Markdown report, most severe findings first.
    """
    output = ["## Formatting Analysis", ""]
    output.append(f"**Score: {result.score}/100**")
    if result.reference_count:
        output.append(f"*Compared against {result.reference_count} reference resume(s)*")
    else:
        output.append("*No reference resumes available, scored against best practices*")
    output.append("")

    if not result.suggestions:
        output.append("No formatting issues found.")
        return "\n".join(output)

    pairs = sorted(
        zip(result.suggestions, result.feedback),
        key=lambda pair: SEVERITY_ORDER[pair[0].severity],
    )
    for suggestion, feedback in pairs:
        output.append(f"### [{suggestion.severity.upper()}] {suggestion.aspect.replace('_', ' ')}")
        output.append(suggestion.message)
        output.append(
            f"- Yours: {suggestion.user_value} | Typical: {suggestion.reference_value} "
            f"({suggestion.percentage_support}% support)"
        )
        if feedback.suggestion:
            output.append(f"- Fix: {feedback.suggestion}")
        output.append("")

    return "\n".join(output).rstrip() + "\n"


def format_suggestions(resume_text: str, suggestions: list[AnchoredSuggestion]) -> str:
    """Format anchored suggestions as a markdown list with their quoted spans."""
    if not suggestions:
        return "No suggestions.\n"

    output = ["## Suggestions", ""]
    for s in suggestions:
        span = s.text_range
        if span is None or span.is_sentinel:
            location = "unanchored"
        else:
            location = f"chars {span.start}-{span.end}: \"{resume_text[span.start:span.end]}\""
        output.append(f"- **{s.category}** ({s.severity}, {location})")
        if s.original_text:
            output.append(f"  - Replace: {s.original_text}")
        if s.suggested_text:
            output.append(f"  - With: {s.suggested_text}")
        if s.reasoning:
            output.append(f"  - Why: {s.reasoning}")
    return "\n".join(output) + "\n"
