"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from cv_refiner.models.patterns import (
    BulletStyle,
    DateFormat,
    FormattingPatterns,
    HeadingStyle,
    QuantifiedMetrics,
    ReferenceFingerprint,
)

STRONG_RESUME = """Jane Smith
jane.smith@example.com | (555) 123-4567

SUMMARY
Senior software engineer with 8 years of experience building data platforms.

EXPERIENCE
Senior Engineer, Acme Corp
Jan 2020 - Dec 2023
- Led a team of 6 engineers delivering a billing platform
- Reduced infrastructure costs by 30%
- Grew revenue by $2M through pricing experiments

Software Engineer, Beta Inc
Feb 2016 - Dec 2019
- Built APIs serving 500 users
- Improved test coverage to 90%
- Migrated services to k8s

EDUCATION
B.S. Computer Science, State University
Sep 2012 - Jun 2016

SKILLS
Python, Go, PostgreSQL, AWS
"""

WEAK_RESUME = """John Doe
Work History
Acme Corp 2019 - 2023
Did backend work and helped the team.
Skills
Python, SQL
"""


def make_patterns(**overrides: Any) -> FormattingPatterns:
    """Build a well-formed fingerprint, overriding selected fields."""
    fields: dict[str, Any] = {
        "page_count": 1,
        "section_order": ["Contact", "Summary", "Experience", "Education", "Skills"],
        "bullet_style": BulletStyle(types=["dash"], avg_bullets_per_entry=4, total_bullets=12),
        "has_summary": True,
        "quantified_metrics": QuantifiedMetrics(
            count=5, examples=["30%", "$2M", "500 users", "90%", "3x"]
        ),
        "heading_style": HeadingStyle(consistent=True, styles=["ALL_CAPS"]),
        "white_space_ratio": 0.2,
        "date_format": DateFormat(formats=["Mon YYYY"], consistent=True),
        "word_count": 420,
        "avg_words_per_line": 7,
    }
    fields.update(overrides)
    return FormattingPatterns(**fields)


def make_reference(index: int = 0, **overrides: Any) -> ReferenceFingerprint:
    """Build a reference record wrapping ``make_patterns``."""
    return ReferenceFingerprint(
        id=f"ref-{index}",
        title="Software Engineer",
        industry="tech",
        role_level="mid",
        formatting_patterns=make_patterns(**overrides),
    )


@pytest.fixture
def strong_resume() -> str:
    """Resume that follows every formatting practice."""
    return STRONG_RESUME


@pytest.fixture
def weak_resume() -> str:
    """Resume with no summary, bullets, metrics or education."""
    return WEAK_RESUME


@pytest.fixture
def good_patterns() -> FormattingPatterns:
    """A fingerprint that triggers no rule."""
    return make_patterns()


@pytest.fixture
def cohort() -> list[FormattingPatterns]:
    """Five identical well-formed reference fingerprints."""
    return [make_patterns() for _ in range(5)]
