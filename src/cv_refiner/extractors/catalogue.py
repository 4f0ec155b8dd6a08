"""Ordered regex catalogues used by the pattern extractor.

Each catalogue is a tuple of (tag, pattern) pairs evaluated top to bottom, so
a line or token is attributed to the first entry that matches. Extend a
catalogue by adding rows; the extractor and scorers never inspect patterns
directly.
"""

import re
from re import Pattern

# Canonical section names, in typical resume placement order
SECTION_HEADINGS: tuple[tuple[str, Pattern[str]], ...] = (
    (
        "Contact",
        re.compile(
            r"^(?:contact(?:\s+info(?:rmation)?)?|personal\s+info(?:rmation)?)\s*$",
            re.IGNORECASE,
        ),
    ),
    (
        "Summary",
        re.compile(
            r"^(?:summary|objective|profile|about\s*me|professional\s+summary|career\s+summary"
            r"|personal\s+statement|executive\s+summary)\s*$",
            re.IGNORECASE,
        ),
    ),
    (
        "Experience",
        re.compile(
            r"^(?:experience|employment|work\s+history|professional\s+experience|career\s+history"
            r"|positions?\s+held|work\s+experience)\s*$",
            re.IGNORECASE,
        ),
    ),
    (
        "Education",
        re.compile(
            r"^(?:education|academic(?:\s+background)?|degrees?"
            r"|certifications?(?:\s+and\s+education)?)\s*$",
            re.IGNORECASE,
        ),
    ),
    (
        "Skills",
        re.compile(
            r"^(?:skills|technical\s+skills|core\s+(?:competencies|skills)|proficiencies"
            r"|technologies|tools?\s+(?:and|&)\s+technologies|expertise|key\s+skills)\s*$",
            re.IGNORECASE,
        ),
    ),
    (
        "Projects",
        re.compile(
            r"^(?:projects|personal\s+projects|key\s+projects|selected\s+projects)\s*$",
            re.IGNORECASE,
        ),
    ),
    (
        "Certifications",
        re.compile(
            r"^(?:certifications?|licenses?(?:\s+and\s+certifications?)?"
            r"|professional\s+certifications?)\s*$",
            re.IGNORECASE,
        ),
    ),
    (
        "Awards",
        re.compile(r"^(?:awards?|honors?|achievements?|recognition)\s*$", re.IGNORECASE),
    ),
    (
        "Publications",
        re.compile(r"^(?:publications?|papers?|research)\s*$", re.IGNORECASE),
    ),
    (
        "Volunteer",
        re.compile(
            r"^(?:volunteer(?:ing)?|community\s+(?:service|involvement))\s*$",
            re.IGNORECASE,
        ),
    ),
)

SECTION_NAMES: tuple[str, ...] = tuple(name for name, _ in SECTION_HEADINGS)

# Sections every resume is expected to have
KEY_SECTIONS: tuple[str, ...] = ("Experience", "Education", "Skills")

# Contact details that imply a Contact block without a heading
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"(\+?1?[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
CONTACT_SCAN_LINES = 5

BULLET_STYLES: tuple[tuple[str, Pattern[str]], ...] = (
    ("dash", re.compile(r"^\s*[-–—]\s+")),
    ("dot", re.compile(r"^\s*[•·∙●○◦⦾]\s*")),
    ("asterisk", re.compile(r"^\s*\*\s+")),
    ("number", re.compile(r"^\s*\d+[.)]\s+")),
    ("arrow", re.compile(r"^\s*[►▸→➤»]\s*")),
)

# Month-year or MM/YYYY tokens; two per work entry (start and end)
ENTRY_DATE_PATTERN = re.compile(
    r"(?:\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec|January|February|March|April"
    r"|June|July|August|September|October|November|December)\b\s*\d{4}|\b\d{1,2}/\d{4}\b)",
    re.IGNORECASE,
)

MAX_HEADING_LENGTH = 50

HEADING_STYLES: tuple[tuple[str, Pattern[str]], ...] = (
    ("Title Case", re.compile(r"^[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*$")),
    ("Sentence case", re.compile(r"^[A-Z][a-z]")),
)

QUANTIFIED_METRICS: tuple[tuple[str, Pattern[str]], ...] = (
    ("percentage", re.compile(r"\b\d{1,3}(?:,\d{3})*(?:\.\d+)?%")),  # 15%, 3.5%
    ("currency", re.compile(r"\$\d{1,3}(?:,\d{3})*(?:\.\d+)?(?:\s*[MBKmk])?")),  # $50K, $1.2M
    ("large_number", re.compile(r"\b\d{1,3}(?:,\d{3})+\b")),  # 1,000 10,000
    ("multiplier", re.compile(r"\b\d+x\b", re.IGNORECASE)),  # 3x, 10x
    (
        "count",
        re.compile(
            r"\b\d+\+?\s*(?:users?|clients?|customers?|employees?|team\s*members?|people"
            r"|projects?|applications?|servers?|repositories|repos)\b",
            re.IGNORECASE,
        ),
    ),
)
MAX_METRIC_EXAMPLES = 10

# Full month names except May, which is handled separately
_FULL_MONTHS = r"January|February|March|April|June|July|August|September|October|November|December"
_ABBR_MONTHS = r"Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sep|Oct|Nov|Dec"

DATE_FORMATS: tuple[tuple[str, Pattern[str]], ...] = (
    ("MM/YYYY", re.compile(r"\b\d{1,2}/\d{4}\b")),
    ("MM-YYYY", re.compile(r"\b\d{1,2}-\d{4}\b")),
    ("Month YYYY", re.compile(rf"\b(?:{_FULL_MONTHS})\s+\d{{4}}\b", re.IGNORECASE)),
    ("Mon YYYY", re.compile(rf"\b(?:{_ABBR_MONTHS})\.?\s+\d{{4}}\b", re.IGNORECASE)),
)
MAY_DATE_PATTERN = re.compile(r"\bMay\s+\d{4}\b", re.IGNORECASE)
BARE_YEAR_PATTERN = re.compile(r"\b\d{4}\b")

WORDS_PER_PAGE = 500
