"""Cohort-relative formatting scoring.

Every threshold comes from the reference cohort, and each rule only fires
when the cohort itself clears a support bar (50-60%). A thin or split cohort
therefore produces no feedback for that aspect rather than noisy feedback.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cv_refiner.extractors.catalogue import KEY_SECTIONS
from cv_refiner.models.patterns import FormattingPatterns
from cv_refiner.models.suggestion import FormattingSuggestion
from cv_refiner.scoring.base import Deduction, Scorer
from cv_refiner.scoring.stats import average, mode, percentage_at
from cv_refiner.utils.numbers import percent, round_int

logger = logging.getLogger(__name__)


def compute_common_section_order(
    references: list[FormattingPatterns],
    min_presence: float = 0.3,
) -> list[str]:
    """Order sections by their average position across the cohort.

    Only sections present in at least ``min_presence`` of the cohort count.
    """
    positions: dict[str, list[int]] = {}
    for patterns in references:
        for index, section in enumerate(patterns.section_order):
            positions.setdefault(section, []).append(index)

    averaged = [
        (section, sum(idx) / len(idx))
        for section, idx in positions.items()
        if len(idx) >= len(references) * min_presence
    ]
    averaged.sort(key=lambda item: item[1])
    return [section for section, _ in averaged]


def find_order_violation(
    user_order: Sequence[str], common_order: Sequence[str]
) -> tuple[str, str] | None:
    """Return the first adjacent pair (A, B) of the common order the user has reversed."""
    for first, second in zip(common_order, common_order[1:]):
        if first not in user_order or second not in user_order:
            continue
        if user_order.index(first) > user_order.index(second):
            return first, second
    return None


class CohortScorer(Scorer):
    """Score formatting relative to a cohort of reference resumes."""

    name = "cohort"

    MODE_SUPPORT = 60  # % of cohort at the page-count mode
    SUMMARY_SUPPORT = 60
    BULLET_SUPPORT = 50
    CONSISTENCY_SUPPORT = 50
    SECTION_PRESENCE = 0.3
    SECTION_ORDER_SUPPORT = 70
    BULLET_DENSITY_GAP = 3
    BULLET_DENSITY_BAND = 2
    METRICS_RATIO = 0.5

    def evaluate(
        self,
        user_patterns: FormattingPatterns,
        references: list[FormattingPatterns],
    ) -> list[Deduction]:
        if not references:
            return []

        checks = (
            self._check_page_count,
            self._check_summary,
            self._check_section_order,
            self._check_bullets,
            self._check_metrics,
            self._check_headings,
            self._check_dates,
            self._check_key_sections,
        )
        deductions = []
        for check in checks:
            deduction = check(user_patterns, references)
            if deduction is not None:
                deductions.append(deduction)
        return deductions

    def _check_page_count(
        self, patterns: FormattingPatterns, refs: list[FormattingPatterns]
    ) -> Deduction | None:
        page_counts = [p.page_count for p in refs]
        mode_pages = mode(page_counts)
        pct_at_mode = percentage_at(page_counts, mode_pages)
        pages = patterns.page_count

        if pages == mode_pages or pct_at_mode < self.MODE_SUPPORT:
            return None

        points = 15 if pages > mode_pages + 1 else 8
        return Deduction(
            points=points,
            suggestion=FormattingSuggestion(
                aspect="page_count",
                user_value=f"{pages} page(s)",
                reference_value=f"{mode_pages} page(s)",
                percentage_support=pct_at_mode,
                message=(
                    f"{pct_at_mode}% of successful resumes at your level use {mode_pages} "
                    f"page(s). Yours is {pages} page(s)."
                ),
                severity="critical" if points >= 15 else "warning",
            ),
        )

    def _check_summary(
        self, patterns: FormattingPatterns, refs: list[FormattingPatterns]
    ) -> Deduction | None:
        pct_summary = percent(sum(1 for p in refs if p.has_summary), len(refs))
        if patterns.has_summary or pct_summary < self.SUMMARY_SUPPORT:
            return None
        return Deduction(
            points=10,
            suggestion=FormattingSuggestion(
                aspect="summary_section",
                user_value="No summary section",
                reference_value="Has summary section",
                percentage_support=pct_summary,
                message=(
                    f"{pct_summary}% of successful resumes include a summary section. "
                    "Consider adding one."
                ),
                severity="warning",
            ),
        )

    def _check_section_order(
        self, patterns: FormattingPatterns, refs: list[FormattingPatterns]
    ) -> Deduction | None:
        common_order = compute_common_section_order(refs, self.SECTION_PRESENCE)
        if len(common_order) < 2:
            return None

        # Only the first conflict is reported
        violation = find_order_violation(patterns.section_order, common_order)
        if violation is None:
            return None

        first, second = violation
        logger.debug(f"Section order conflict: {second} before {first} (common: {common_order})")
        return Deduction(
            points=5,
            suggestion=FormattingSuggestion(
                aspect="section_order",
                user_value=f"{second} before {first}",
                reference_value=f"{first} before {second}",
                percentage_support=self.SECTION_ORDER_SUPPORT,
                message=(
                    f'Most successful resumes place "{first}" before "{second}". '
                    "Consider reordering your sections."
                ),
                severity="info",
            ),
        )

    def _check_bullets(
        self, patterns: FormattingPatterns, refs: list[FormattingPatterns]
    ) -> Deduction | None:
        avg_ref_bullets = round_int(average([p.bullet_style.avg_bullets_per_entry for p in refs]))
        bullets = patterns.bullet_style

        if bullets.total_bullets == 0:
            pct_with_bullets = percent(
                sum(1 for p in refs if p.bullet_style.total_bullets > 0), len(refs)
            )
            if pct_with_bullets < self.BULLET_SUPPORT:
                return None
            return Deduction(
                points=12,
                suggestion=FormattingSuggestion(
                    aspect="bullet_points",
                    user_value="No bullet points detected",
                    reference_value=f"Uses bullet points (avg {avg_ref_bullets} per role)",
                    percentage_support=pct_with_bullets,
                    message=(
                        f"{pct_with_bullets}% of successful resumes use bullet points. "
                        "Add bullet points to describe your experience."
                    ),
                    severity="critical",
                ),
            )

        if abs(bullets.avg_bullets_per_entry - avg_ref_bullets) <= self.BULLET_DENSITY_GAP:
            return None

        band = self.BULLET_DENSITY_BAND
        pct_in_range = percent(
            sum(
                1
                for p in refs
                if abs(p.bullet_style.avg_bullets_per_entry - avg_ref_bullets) <= band
            ),
            len(refs),
        )
        user_avg = f"{bullets.avg_bullets_per_entry:g}"
        return Deduction(
            points=5,
            suggestion=FormattingSuggestion(
                aspect="bullet_density",
                user_value=f"{user_avg} bullets per entry",
                reference_value=f"{avg_ref_bullets} bullets per entry",
                percentage_support=pct_in_range,
                message=(
                    f"{pct_in_range}% of successful resumes have {avg_ref_bullets - band}-"
                    f"{avg_ref_bullets + band} bullet points per role. You have {user_avg}."
                ),
                severity="info",
            ),
        )

    def _check_metrics(
        self, patterns: FormattingPatterns, refs: list[FormattingPatterns]
    ) -> Deduction | None:
        count = patterns.quantified_metrics.count
        avg_ref_metrics = round_int(average([p.quantified_metrics.count for p in refs]))
        if count >= avg_ref_metrics * self.METRICS_RATIO:
            return None

        pct_with_more = percent(
            sum(1 for p in refs if p.quantified_metrics.count > count), len(refs)
        )
        return Deduction(
            points=12 if count == 0 else 8,
            suggestion=FormattingSuggestion(
                aspect="quantified_metrics",
                user_value=f"{count} metrics found",
                reference_value=f"Average {avg_ref_metrics} metrics",
                percentage_support=pct_with_more,
                message=(
                    f"{pct_with_more}% of successful resumes have more quantified metrics than "
                    "yours. Add numbers, percentages, and dollar amounts to demonstrate impact."
                ),
                severity="critical" if count == 0 else "warning",
            ),
        )

    def _check_headings(
        self, patterns: FormattingPatterns, refs: list[FormattingPatterns]
    ) -> Deduction | None:
        if patterns.heading_style.consistent:
            return None
        pct_consistent = percent(sum(1 for p in refs if p.heading_style.consistent), len(refs))
        if pct_consistent < self.CONSISTENCY_SUPPORT:
            return None
        styles = patterns.heading_style.styles
        return Deduction(
            points=8,
            suggestion=FormattingSuggestion(
                aspect="heading_consistency",
                user_value=f"Mixed styles: {', '.join(styles)}",
                reference_value="Consistent heading style",
                percentage_support=pct_consistent,
                message=(
                    f"{pct_consistent}% of successful resumes use a consistent heading style. "
                    f"Yours mixes {' and '.join(styles)}."
                ),
                severity="warning",
            ),
        )

    def _check_dates(
        self, patterns: FormattingPatterns, refs: list[FormattingPatterns]
    ) -> Deduction | None:
        if patterns.date_format.consistent:
            return None
        pct_consistent = percent(sum(1 for p in refs if p.date_format.consistent), len(refs))
        if pct_consistent < self.CONSISTENCY_SUPPORT:
            return None
        return Deduction(
            points=6,
            suggestion=FormattingSuggestion(
                aspect="date_consistency",
                user_value=f"Mixed formats: {', '.join(patterns.date_format.formats)}",
                reference_value="Consistent date format",
                percentage_support=pct_consistent,
                message=(
                    f"{pct_consistent}% of successful resumes use a consistent date format. "
                    "Use one format throughout."
                ),
                severity="warning",
            ),
        )

    def _check_key_sections(
        self, patterns: FormattingPatterns, refs: list[FormattingPatterns]
    ) -> Deduction | None:
        missing = [s for s in KEY_SECTIONS if s not in patterns.section_order]
        if not missing:
            return None
        pct_with_all = percent(
            sum(1 for p in refs if all(s in p.section_order for s in KEY_SECTIONS)),
            len(refs),
        )
        missing_list = ", ".join(missing)
        return Deduction(
            points=5 * len(missing),
            suggestion=FormattingSuggestion(
                aspect="missing_sections",
                user_value=f"Missing: {missing_list}",
                reference_value="Has Experience, Education, Skills sections",
                percentage_support=pct_with_all,
                message=(
                    f"{pct_with_all}% of successful resumes include Experience, Education, "
                    f"and Skills. You're missing: {missing_list}."
                ),
                severity="critical",
            ),
        )
