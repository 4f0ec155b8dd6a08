"""Tests for formatting pattern extraction."""

import pytest
from pydantic import ValidationError

from cv_refiner.extractors.pattern_extractor import (
    classify_heading,
    detect_bullet_style,
    detect_date_formats,
    detect_heading_style,
    detect_quantified_metrics,
    detect_section_order,
    extract_formatting_patterns,
    match_section_heading,
)


class TestExtractFormattingPatterns:
    """Tests for the full fingerprint."""

    def test_strong_resume(self, strong_resume: str) -> None:
        """Test the fingerprint of a well-formatted resume."""
        patterns = extract_formatting_patterns(strong_resume)

        assert patterns.page_count == 1
        assert patterns.section_order == ("Contact", "Summary", "Experience", "Education", "Skills")
        assert patterns.has_summary is True
        assert patterns.bullet_style.types == ("dash",)
        assert patterns.bullet_style.total_bullets == 6
        assert patterns.bullet_style.avg_bullets_per_entry == 2
        assert patterns.quantified_metrics.count == 4
        assert patterns.heading_style.styles == ("ALL_CAPS",)
        assert patterns.heading_style.consistent is True
        assert patterns.date_format.formats == ("Mon YYYY",)
        assert patterns.date_format.consistent is True

    def test_deterministic(self, strong_resume: str) -> None:
        """Test that the same text always yields the same fingerprint."""
        assert extract_formatting_patterns(strong_resume) == extract_formatting_patterns(
            strong_resume
        )

    def test_empty_text(self) -> None:
        """Test empty text yields zero counts instead of failing."""
        patterns = extract_formatting_patterns("")

        assert patterns.page_count == 1
        assert patterns.word_count == 0
        assert patterns.section_order == ()
        assert patterns.white_space_ratio == 0
        assert patterns.avg_words_per_line == 0
        assert patterns.bullet_style.total_bullets == 0
        assert patterns.bullet_style.avg_bullets_per_entry == 0
        assert patterns.quantified_metrics.count == 0

    def test_page_count_override(self, strong_resume: str) -> None:
        """Test that a known page count is used as given."""
        assert extract_formatting_patterns(strong_resume, page_count=3).page_count == 3

    def test_invalid_page_count_falls_back_to_estimate(self, strong_resume: str) -> None:
        """Test that a page count below 1 is replaced by the estimate."""
        assert extract_formatting_patterns(strong_resume, page_count=0).page_count == 1

    def test_page_estimate_from_word_count(self) -> None:
        """Test 500 words per page estimate."""
        text = "word " * 1001
        patterns = extract_formatting_patterns(text)

        assert patterns.word_count == 1001
        assert patterns.page_count == 3

    def test_white_space_ratio_and_words_per_line(self) -> None:
        """Test blank-line ratio and average words per non-empty line."""
        patterns = extract_formatting_patterns("one two\n\nthree four five six\n")

        assert patterns.white_space_ratio == 0.5
        assert patterns.avg_words_per_line == 3

    def test_fingerprint_lists_are_immutable(self, strong_resume: str) -> None:
        """Test that an extracted fingerprint cannot be changed in place."""
        patterns = extract_formatting_patterns(strong_resume)

        with pytest.raises(AttributeError):
            patterns.section_order.append("Skills")
        with pytest.raises(ValidationError):
            patterns.has_summary = False

    def test_serializes_with_camel_case(self, strong_resume: str) -> None:
        """Test that stored fingerprints use camelCase keys."""
        data = extract_formatting_patterns(strong_resume).model_dump(by_alias=True)

        assert data["pageCount"] == 1
        assert data["bulletStyle"]["avgBulletsPerEntry"] == 2
        assert "whiteSpaceRatio" in data


class TestSectionOrder:
    """Tests for section heading detection."""

    def test_match_section_heading(self) -> None:
        assert match_section_heading("  PROFESSIONAL EXPERIENCE  ") == "Experience"
        assert match_section_heading("Technical Skills") == "Skills"
        assert match_section_heading("About Me") == "Summary"
        assert match_section_heading("Experience with Python") is None
        assert match_section_heading("") is None

    def test_contact_synthesized_from_email(self) -> None:
        """Test that an email near the top implies a Contact section."""
        text = "Jane\njane@example.com\nExperience\nEngineer\nSkills\nPython"
        assert detect_section_order(text) == ["Contact", "Experience", "Skills"]

    def test_contact_synthesized_from_phone(self) -> None:
        text = "Jane\n555-123-4567\nEducation\nBSc"
        assert detect_section_order(text) == ["Contact", "Education"]

    def test_contact_outside_scan_window_ignored(self) -> None:
        """Test that contact details below the first five lines are not a Contact section."""
        text = "Jane\nSummary\nx\ny\nz\nExperience\njane@example.com"
        assert detect_section_order(text) == ["Summary", "Experience"]

    def test_explicit_contact_heading_not_duplicated(self) -> None:
        text = "Skills\nPython\nContact\njane@example.com"
        assert detect_section_order(text) == ["Skills", "Contact"]

    def test_duplicate_headings_keep_first(self) -> None:
        text = "Experience\nA\nEducation\nB\nExperience\nC"
        assert detect_section_order(text) == ["Experience", "Education"]

    def test_first_matching_catalogue_entry_wins(self) -> None:
        """Test that a heading shared by two entries maps to the earlier one."""
        assert match_section_heading("Certifications") == "Education"
        assert match_section_heading("Licenses") == "Certifications"


class TestBulletStyle:
    """Tests for bullet detection."""

    def test_mixed_glyphs_in_order_of_appearance(self) -> None:
        style = detect_bullet_style("• one\n• two\n- three\n1. four")

        assert style.types == ("dot", "dash", "number")
        assert style.total_bullets == 4
        # No dates: a single entry
        assert style.avg_bullets_per_entry == 4

    def test_entries_estimated_from_dates(self) -> None:
        text = (
            "Jan 2020 - Dec 2022\n- a\n- b\n- c\n"
            "03/2017 - 12/2019\n- d\n- e\n- f\n- g\n"
        )
        style = detect_bullet_style(text)

        assert style.total_bullets == 7
        # 7 bullets over 2 entries rounds half up
        assert style.avg_bullets_per_entry == 4

    def test_no_bullets(self) -> None:
        style = detect_bullet_style("Plain paragraph text.")

        assert style.types == ()
        assert style.total_bullets == 0
        assert style.avg_bullets_per_entry == 0


class TestHeadingStyle:
    """Tests for heading capitalization."""

    def test_classify_heading(self) -> None:
        assert classify_heading("EXPERIENCE") == "ALL_CAPS"
        assert classify_heading("Work Experience") == "Title Case"
        assert classify_heading("Professional summary") == "Sentence case"
        assert classify_heading("skills") is None

    def test_mixed_styles_inconsistent(self) -> None:
        style = detect_heading_style("SUMMARY\ntext\nWork Experience\ntext\nSKILLS\ntext")

        assert style.styles == ("ALL_CAPS", "Title Case")
        assert style.consistent is False

    def test_non_heading_lines_ignored(self) -> None:
        style = detect_heading_style("EXPERIENCE\nACME CORP\nBuilt Things Here")

        assert style.styles == ("ALL_CAPS",)
        assert style.consistent is True

    def test_no_headings_is_consistent(self) -> None:
        style = detect_heading_style("just text")

        assert style.styles == ()
        assert style.consistent is True


class TestQuantifiedMetrics:
    """Tests for metric detection."""

    def test_metric_families(self) -> None:
        metrics = detect_quantified_metrics(
            "Increased sales by 25% and saved $1.2M with 3x growth for 40 clients"
        )

        assert metrics.examples == ("25%", "$1.2M", "3x", "40 clients")
        assert metrics.count == 4

    def test_large_numbers(self) -> None:
        metrics = detect_quantified_metrics("Processed 1,250,000 records")
        assert metrics.examples == ("1,250,000",)

    def test_duplicates_counted_once(self) -> None:
        metrics = detect_quantified_metrics("Cut costs 25% and latency 25%")
        assert metrics.count == 1

    def test_capped_at_ten(self) -> None:
        text = " ".join(f"{n}%" for n in range(10, 25))
        metrics = detect_quantified_metrics(text)

        assert metrics.count == 10
        assert metrics.examples[0] == "10%"


class TestDateFormats:
    """Tests for date format detection."""

    def test_single_format(self) -> None:
        dates = detect_date_formats("01/2020 - 06/2022")

        assert dates.formats == ("MM/YYYY",)
        assert dates.consistent is True

    def test_mixed_formats(self) -> None:
        dates = detect_date_formats("01/2020 - March 2021")

        assert dates.formats == ("MM/YYYY", "Month YYYY")
        assert dates.consistent is False

    def test_may_counts_as_full_month(self) -> None:
        assert detect_date_formats("May 2020 - Present").formats == ("Month YYYY",)

    def test_may_with_abbreviations_is_mixed(self) -> None:
        dates = detect_date_formats("Jan 2020 - May 2021")

        assert dates.formats == ("Mon YYYY", "Month YYYY")
        assert dates.consistent is False

    def test_bare_years(self) -> None:
        assert detect_date_formats("Graduated 2019").formats == ("YYYY",)

    def test_no_dates(self) -> None:
        dates = detect_date_formats("No dates here")

        assert dates.formats == ()
        assert dates.consistent is True
