"""Tests for the StandaloneScorer and scorer selection."""

import pytest

from conftest import make_patterns
from cv_refiner.models.patterns import (
    BulletStyle,
    DateFormat,
    FormattingPatterns,
    HeadingStyle,
    QuantifiedMetrics,
    ReferenceFingerprint,
)
from cv_refiner.models.suggestion import FormattingSuggestion
from cv_refiner.scoring import (
    CohortScorer,
    Deduction,
    Scorer,
    StandaloneScorer,
    analyze_formatting,
    get_scorer,
)


@pytest.fixture
def scorer() -> StandaloneScorer:
    """Create a StandaloneScorer instance."""
    return StandaloneScorer()


class TestStandaloneScorer:
    """Tests for fixed-threshold scoring."""

    def test_clean_resume_scores_100(
        self, scorer: StandaloneScorer, good_patterns: FormattingPatterns
    ) -> None:
        result = scorer.score(good_patterns)

        assert result.score == 100
        assert result.suggestions == []
        assert result.feedback == []
        assert result.strategy == "standalone"
        assert result.reference_count == 0

    def test_weak_resume(self, weak_resume: str) -> None:
        """Test summary, metrics, bullets and missing Education all fire."""
        result = analyze_formatting(weak_resume)

        assert result.strategy == "standalone"
        assert [s.aspect for s in result.suggestions] == [
            "summary_section",
            "quantified_metrics",
            "bullet_points",
            "missing_sections",
        ]
        # 100 - 10 - 10 - 12 - 5
        assert result.score == 63

    def test_long_resume(self, scorer: StandaloneScorer) -> None:
        result = scorer.score(make_patterns(page_count=3))

        assert result.score == 85
        suggestion = result.suggestions[0]
        assert suggestion.aspect == "page_count"
        assert suggestion.percentage_support == 90
        assert suggestion.message == (
            "Your resume is 3 pages. Most successful resumes are 1-2 pages."
        )

    def test_two_pages_allowed(self, scorer: StandaloneScorer) -> None:
        assert scorer.score(make_patterns(page_count=2)).score == 100

    def test_no_summary_no_bullets_few_metrics(self, scorer: StandaloneScorer) -> None:
        """Test a resume with one metric and no summary or bullets."""
        patterns = make_patterns(
            has_summary=False,
            section_order=["Contact", "Experience", "Education", "Skills"],
            bullet_style=BulletStyle(),
            quantified_metrics=QuantifiedMetrics(count=1, examples=["20%"]),
        )
        result = scorer.score(patterns)

        assert result.score <= 73
        by_aspect = {s.aspect: s for s in result.suggestions}
        assert by_aspect["quantified_metrics"].severity == "warning"
        assert by_aspect["bullet_points"].severity == "critical"
        assert by_aspect["summary_section"].severity == "warning"

    def test_zero_metrics_is_critical(self, scorer: StandaloneScorer) -> None:
        result = scorer.score(make_patterns(quantified_metrics=QuantifiedMetrics()))
        assert result.suggestions[0].severity == "critical"

    def test_bullet_density(self, scorer: StandaloneScorer) -> None:
        patterns = make_patterns(
            bullet_style=BulletStyle(types=["dash"], avg_bullets_per_entry=9, total_bullets=27)
        )
        result = scorer.score(patterns)

        assert result.score == 95
        assert result.suggestions[0].aspect == "bullet_density"
        assert result.suggestions[0].severity == "info"
        assert result.suggestions[0].user_value == "9 bullets per entry"

    def test_mixed_headings_and_dates(self, scorer: StandaloneScorer) -> None:
        patterns = make_patterns(
            heading_style=HeadingStyle(consistent=False, styles=["ALL_CAPS", "Title Case"]),
            date_format=DateFormat(consistent=False, formats=["MM/YYYY", "Month YYYY"]),
        )
        result = scorer.score(patterns)

        assert result.score == 82
        assert result.suggestions[0].user_value == "Mixed styles: ALL_CAPS, Title Case"
        assert result.suggestions[1].user_value == "Mixed formats: MM/YYYY, Month YYYY"

    def test_missing_sections_deduct_per_section(self, scorer: StandaloneScorer) -> None:
        result = scorer.score(make_patterns(section_order=["Contact", "Summary", "Experience"]))

        assert result.score == 90
        assert result.suggestions[0].user_value == "Missing: Education, Skills"
        assert result.feedback[0].suggestion == "Add the missing section(s): Education, Skills."

    def test_bare_resume_without_skills(self) -> None:
        """Test a resume with no bullets, no metrics and no Skills section."""
        text = "Jane\nExperience\nEngineer at Acme\nEducation\nBS CS\n"
        result = analyze_formatting(text, references=[])
        severities = {s.aspect: s.severity for s in result.suggestions}

        assert result.strategy == "standalone"
        assert severities["bullet_points"] == "critical"
        assert severities["quantified_metrics"] == "critical"
        assert severities["missing_sections"] == "critical"
        missing = next(s for s in result.suggestions if s.aspect == "missing_sections")
        assert missing.user_value == "Missing: Skills"
        assert result.score <= 73
        # No summary (10), no metrics (10), no bullets (12), Skills missing (5)
        assert result.score == 63

    def test_feedback_mirrors_suggestions(self, weak_resume: str) -> None:
        result = analyze_formatting(weak_resume)

        assert len(result.feedback) == len(result.suggestions)
        for feedback, suggestion in zip(result.feedback, result.suggestions):
            assert feedback.type == "formatting"
            assert feedback.layer == 1
            assert feedback.severity == suggestion.severity
            assert feedback.message == suggestion.message


class _HeavyScorer(Scorer):
    name = "heavy"

    def evaluate(self, user_patterns, references):
        suggestion = FormattingSuggestion(
            aspect="page_count",
            user_value="9 pages",
            reference_value="1 page",
            percentage_support=100,
            message="Far too long.",
            severity="critical",
        )
        return [Deduction(points=80, suggestion=suggestion)] * 2


class TestScorerBase:
    """Tests for the shared scoring pipeline."""

    def test_score_clamped_at_zero(self, good_patterns: FormattingPatterns) -> None:
        result = _HeavyScorer().score(good_patterns)

        assert result.score == 0
        assert len(result.suggestions) == 2
        assert result.strategy == "heavy"

    def test_negative_deduction_rejected(self) -> None:
        suggestion = FormattingSuggestion(
            aspect="page_count",
            user_value="",
            reference_value="",
            percentage_support=0,
            message="",
            severity="info",
        )
        with pytest.raises(ValueError):
            Deduction(points=-5, suggestion=suggestion)


class TestScorerSelection:
    """Tests for choosing between standalone and cohort scoring."""

    def test_no_references_uses_standalone(self) -> None:
        assert isinstance(get_scorer([]), StandaloneScorer)

    def test_references_use_cohort(self, good_patterns: FormattingPatterns) -> None:
        assert isinstance(get_scorer([good_patterns]), CohortScorer)

    def test_null_payloads_fall_back_to_standalone(self, strong_resume: str) -> None:
        """Test that references without patterns are ignored entirely."""
        references = [ReferenceFingerprint(id="a"), ReferenceFingerprint(id="b")]
        result = analyze_formatting(strong_resume, references=references)

        assert result.strategy == "standalone"
        assert result.reference_count == 0
        assert result.score == 100

    def test_analyze_with_cohort(
        self, strong_resume: str, cohort: list[FormattingPatterns]
    ) -> None:
        references = [
            ReferenceFingerprint(id=f"ref-{i}", formatting_patterns=p) for i, p in enumerate(cohort)
        ]
        references.append(ReferenceFingerprint(id="empty"))
        result = analyze_formatting(strong_resume, references=references)

        assert result.strategy == "cohort"
        assert result.reference_count == 5
