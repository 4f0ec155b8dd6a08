"""Formatting pattern extraction.

Turns raw resume text into a deterministic FormattingPatterns fingerprint.
The same text (and page-count override) always yields the same fingerprint,
which keeps scores stable between runs and lets reference resumes be
fingerprinted once and stored.
"""

from __future__ import annotations

import logging
import math

from cv_refiner.extractors.catalogue import (
    BARE_YEAR_PATTERN,
    BULLET_STYLES,
    CONTACT_SCAN_LINES,
    DATE_FORMATS,
    EMAIL_PATTERN,
    ENTRY_DATE_PATTERN,
    HEADING_STYLES,
    MAX_HEADING_LENGTH,
    MAX_METRIC_EXAMPLES,
    MAY_DATE_PATTERN,
    PHONE_PATTERN,
    QUANTIFIED_METRICS,
    SECTION_HEADINGS,
    WORDS_PER_PAGE,
)
from cv_refiner.models.patterns import (
    BulletStyle,
    DateFormat,
    FormattingPatterns,
    HeadingStyle,
    QuantifiedMetrics,
)
from cv_refiner.utils.numbers import round_half_up, round_int

logger = logging.getLogger(__name__)


def match_section_heading(line: str) -> str | None:
    """Return the canonical section name for a heading line, if any."""
    trimmed = line.strip()
    if not trimmed:
        return None
    for name, pattern in SECTION_HEADINGS:
        if pattern.search(trimmed):
            return name
    return None


def detect_section_order(text: str) -> list[str]:
    """Detect the order in which canonical sections appear."""
    lines = text.split("\n")
    sections: list[tuple[str, int]] = []
    seen: set[str] = set()

    for index, line in enumerate(lines):
        name = match_section_heading(line)
        if name is None or name in seen:
            continue
        seen.add(name)
        sections.append((name, index))

    # Contact details near the top count as a Contact section
    if "Contact" not in seen:
        head = " ".join(lines[:CONTACT_SCAN_LINES])
        if EMAIL_PATTERN.search(head) or PHONE_PATTERN.search(head):
            sections.insert(0, ("Contact", 0))

    sections.sort(key=lambda item: item[1])
    return [name for name, _ in sections]


def detect_bullet_style(text: str) -> BulletStyle:
    """Detect bullet glyphs and estimate bullets per work entry."""
    types: list[str] = []
    total_bullets = 0

    for line in text.split("\n"):
        for style, pattern in BULLET_STYLES:
            if pattern.search(line):
                if style not in types:
                    types.append(style)
                total_bullets += 1
                break

    # Each entry is assumed to carry a start and an end date
    date_tokens = ENTRY_DATE_PATTERN.findall(text)
    entry_count = math.ceil(len(date_tokens) / 2) if date_tokens else 1

    return BulletStyle(
        types=types,
        total_bullets=total_bullets,
        avg_bullets_per_entry=round_int(total_bullets / entry_count),
    )


def classify_heading(heading: str) -> str | None:
    """Classify a heading as ALL_CAPS, Title Case or Sentence case."""
    if heading == heading.upper() and any("A" <= ch <= "Z" for ch in heading):
        return "ALL_CAPS"
    for style, pattern in HEADING_STYLES:
        if pattern.search(heading):
            return style
    return None


def detect_heading_style(text: str) -> HeadingStyle:
    """Collect the styles used by section headings."""
    styles: list[str] = []

    for line in text.split("\n"):
        trimmed = line.strip()
        if not trimmed or len(trimmed) > MAX_HEADING_LENGTH:
            continue
        if match_section_heading(trimmed) is None:
            continue
        style = classify_heading(trimmed)
        if style and style not in styles:
            styles.append(style)

    return HeadingStyle(styles=styles, consistent=len(styles) <= 1)


def detect_quantified_metrics(text: str) -> QuantifiedMetrics:
    """Find unique quantified achievements (percentages, money, counts)."""
    examples: list[str] = []
    for _, pattern in QUANTIFIED_METRICS:
        for match in pattern.finditer(text):
            value = match.group(0)
            if len(examples) < MAX_METRIC_EXAMPLES and value not in examples:
                examples.append(value)

    return QuantifiedMetrics(count=len(examples), examples=examples)


def detect_date_formats(text: str) -> DateFormat:
    """Detect which date formats are used and whether they agree."""
    formats = [tag for tag, pattern in DATE_FORMATS if pattern.search(text)]

    # "May" is both the full and the abbreviated name
    if "Month YYYY" not in formats and MAY_DATE_PATTERN.search(text):
        formats.append("Month YYYY")

    if not formats and BARE_YEAR_PATTERN.search(text):
        formats.append("YYYY")

    return DateFormat(formats=formats, consistent=len(formats) <= 1)


def extract_formatting_patterns(text: str, page_count: int | None = None) -> FormattingPatterns:
    """Extract all formatting patterns from resume text.

    Args:
        text: Plain resume text.
        page_count: Known page count; estimated from the word count when omitted.

    Returns:
        The resume's FormattingPatterns. Empty text yields zero counts.
    """
    lines = text.split("\n")
    # "".split("\n") gives [""], which must not count as a blank line
    has_content = bool(text.strip())
    non_empty_lines = [line for line in lines if line.strip()]
    empty_line_count = len(lines) - len(non_empty_lines) if has_content else 0

    word_count = len(text.split())
    if page_count is None or page_count < 1:
        page_count = max(1, math.ceil(word_count / WORDS_PER_PAGE))

    total_words = sum(len(line.split()) for line in non_empty_lines)
    avg_words_per_line = round_int(total_words / len(non_empty_lines)) if non_empty_lines else 0

    section_order = detect_section_order(text)
    white_space_ratio = round_half_up(empty_line_count / len(lines), 2) if has_content else 0.0

    patterns = FormattingPatterns(
        page_count=page_count,
        section_order=section_order,
        bullet_style=detect_bullet_style(text),
        has_summary="Summary" in section_order,
        quantified_metrics=detect_quantified_metrics(text),
        heading_style=detect_heading_style(text),
        white_space_ratio=white_space_ratio,
        date_format=detect_date_formats(text),
        word_count=word_count,
        avg_words_per_line=avg_words_per_line,
    )
    logger.debug(
        f"Extracted patterns: {word_count} words, sections={section_order}, "
        f"bullets={patterns.bullet_style.total_bullets}"
    )
    return patterns
