"""Standalone formatting scoring against fixed best-practice thresholds.

Used when no reference resumes are available. The percentage-support values
are fixed estimates of how many successful resumes follow each practice.
"""

from __future__ import annotations

from cv_refiner.extractors.catalogue import KEY_SECTIONS
from cv_refiner.models.patterns import FormattingPatterns
from cv_refiner.models.suggestion import FormattingSuggestion
from cv_refiner.scoring.base import Deduction, Scorer


class StandaloneScorer(Scorer):
    """Score formatting with fixed thresholds."""

    name = "standalone"

    MAX_PAGES = 2
    MIN_METRICS = 3
    MAX_BULLETS_PER_ENTRY = 7

    DEDUCTIONS = {
        "page_count": 15,
        "summary_section": 10,
        "heading_consistency": 10,
        "date_consistency": 8,
        "quantified_metrics": 10,
        "bullet_points": 12,
        "bullet_density": 5,
        "missing_sections": 5,  # per missing section
    }

    SUPPORT = {
        "page_count": 90,
        "summary_section": 75,
        "heading_consistency": 88,
        "date_consistency": 85,
        "quantified_metrics": 80,
        "bullet_points": 92,
        "bullet_density": 78,
        "missing_sections": 95,
    }

    def evaluate(
        self,
        user_patterns: FormattingPatterns,
        references: list[FormattingPatterns],
    ) -> list[Deduction]:
        checks = (
            self._check_page_count,
            self._check_summary,
            self._check_headings,
            self._check_dates,
            self._check_metrics,
            self._check_bullets,
            self._check_key_sections,
        )
        deductions = []
        for check in checks:
            deduction = check(user_patterns)
            if deduction is not None:
                deductions.append(deduction)
        return deductions

    def _deduction(self, aspect: str, points: int | None = None, **fields: object) -> Deduction:
        return Deduction(
            points=self.DEDUCTIONS[aspect] if points is None else points,
            suggestion=FormattingSuggestion(
                aspect=aspect,
                percentage_support=self.SUPPORT[aspect],
                **fields,
            ),
        )

    def _check_page_count(self, patterns: FormattingPatterns) -> Deduction | None:
        pages = patterns.page_count
        if pages <= self.MAX_PAGES:
            return None
        return self._deduction(
            "page_count",
            user_value=f"{pages} pages",
            reference_value="1-2 pages",
            message=f"Your resume is {pages} pages. Most successful resumes are 1-2 pages.",
            severity="warning",
        )

    def _check_summary(self, patterns: FormattingPatterns) -> Deduction | None:
        if patterns.has_summary:
            return None
        return self._deduction(
            "summary_section",
            user_value="No summary section",
            reference_value="Has summary section",
            message=(
                "Your resume doesn't have a summary or objective section. "
                "Most successful resumes include one."
            ),
            severity="warning",
        )

    def _check_headings(self, patterns: FormattingPatterns) -> Deduction | None:
        if patterns.heading_style.consistent:
            return None
        styles = ", ".join(patterns.heading_style.styles)
        return self._deduction(
            "heading_consistency",
            user_value=f"Mixed styles: {styles}",
            reference_value="Consistent heading style",
            message=(
                f"Your headings use mixed styles ({styles}). "
                "Use a consistent heading style throughout."
            ),
            severity="warning",
        )

    def _check_dates(self, patterns: FormattingPatterns) -> Deduction | None:
        if patterns.date_format.consistent:
            return None
        formats = ", ".join(patterns.date_format.formats)
        return self._deduction(
            "date_consistency",
            user_value=f"Mixed formats: {formats}",
            reference_value="Consistent date format",
            message=(
                f"Your resume uses mixed date formats ({formats}). "
                "Use a single consistent format."
            ),
            severity="warning",
        )

    def _check_metrics(self, patterns: FormattingPatterns) -> Deduction | None:
        count = patterns.quantified_metrics.count
        if count >= self.MIN_METRICS:
            return None
        return self._deduction(
            "quantified_metrics",
            user_value=f"{count} metrics found",
            reference_value="3+ quantified metrics",
            message=(
                f"Your resume has only {count} quantified metric(s). Strong resumes include "
                "numbers, percentages, and dollar amounts to demonstrate impact."
            ),
            severity="critical" if count == 0 else "warning",
        )

    def _check_bullets(self, patterns: FormattingPatterns) -> Deduction | None:
        bullets = patterns.bullet_style
        if bullets.total_bullets == 0:
            return self._deduction(
                "bullet_points",
                user_value="No bullet points detected",
                reference_value="Uses bullet points",
                message=(
                    "No bullet points were detected. Use bullet points to list your "
                    "achievements and responsibilities."
                ),
                severity="critical",
            )
        if bullets.avg_bullets_per_entry > self.MAX_BULLETS_PER_ENTRY:
            avg = f"{bullets.avg_bullets_per_entry:g}"
            return self._deduction(
                "bullet_density",
                user_value=f"{avg} bullets per entry",
                reference_value="3-5 bullets per entry",
                message=(
                    f"You have an average of {avg} bullets per role. Most successful resumes "
                    "use 3-5 bullets per role for readability."
                ),
                severity="info",
            )
        return None

    def _check_key_sections(self, patterns: FormattingPatterns) -> Deduction | None:
        missing = [s for s in KEY_SECTIONS if s not in patterns.section_order]
        if not missing:
            return None
        missing_list = ", ".join(missing)
        return self._deduction(
            "missing_sections",
            points=self.DEDUCTIONS["missing_sections"] * len(missing),
            user_value=f"Missing: {missing_list}",
            reference_value="Has Experience, Education, Skills sections",
            message=(
                f"Your resume is missing key section(s): {missing_list}. "
                "Include these sections for a complete resume."
            ),
            severity="critical",
        )
