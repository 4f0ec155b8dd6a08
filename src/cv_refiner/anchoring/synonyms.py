"""Detection of keywords that appear in the resume only as an alias.

ATS keyword matching is literal: a job asking for "Kubernetes" does not
match a resume that only says "k8s". For each target keyword missing from
the resume, this module looks for a known alias and proposes spelling the
keyword out at that spot.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from cv_refiner.models.suggestion import AnchoredSuggestion, TextRange

# Canonical keyword -> aliases commonly found on resumes
DEFAULT_SYNONYMS: dict[str, tuple[str, ...]] = {
    "JavaScript": ("JS", "ECMAScript", "ES6"),
    "TypeScript": ("TS",),
    "Kubernetes": ("k8s", "K8S"),
    "Amazon Web Services": ("AWS",),
    "Google Cloud Platform": ("GCP",),
    "Machine Learning": ("ML",),
    "Artificial Intelligence": ("AI",),
    "Natural Language Processing": ("NLP",),
    "Continuous Integration": ("CI",),
    "Continuous Delivery": ("CD",),
    "CI/CD": ("continuous integration and delivery", "continuous integration/continuous delivery"),
    "PostgreSQL": ("Postgres", "psql"),
    "Node.js": ("Node", "NodeJS"),
    "React": ("ReactJS", "React.js"),
    "User Experience": ("UX",),
    "User Interface": ("UI",),
    "Search Engine Optimization": ("SEO",),
    "Key Performance Indicators": ("KPIs", "KPI"),
    "Project Management": ("PM",),
    "Quality Assurance": ("QA",),
    "Customer Relationship Management": ("CRM",),
    "Object-Oriented Programming": ("OOP",),
    "Software Development Life Cycle": ("SDLC",),
    "Structured Query Language": ("SQL",),
}


def _term_pattern(term: str) -> re.Pattern[str]:
    """Case-insensitive pattern matching ``term`` as a whole word or phrase."""
    return re.compile(rf"(?<![\w]){re.escape(term)}(?![\w])", re.IGNORECASE)


def contains_term(text: str, term: str) -> bool:
    return _term_pattern(term).search(text) is not None


def find_synonym_suggestions(
    resume_text: str,
    target_keywords: Iterable[str],
    synonyms: Mapping[str, Iterable[str]] | None = None,
) -> list[AnchoredSuggestion]:
    """Suggest expanding aliases of target keywords the resume lacks.

    Args:
        resume_text: Plain resume text.
        target_keywords: Keywords the job description asks for.
        synonyms: Canonical keyword -> aliases; defaults to DEFAULT_SYNONYMS.

    Returns:
        One anchored suggestion per missing keyword whose alias was found,
        pointing at the alias's first occurrence.
    """
    table = {k.lower(): (k, tuple(v)) for k, v in (synonyms or DEFAULT_SYNONYMS).items()}
    suggestions: list[AnchoredSuggestion] = []
    seen: set[str] = set()

    for keyword in target_keywords:
        keyword = keyword.strip()
        key = keyword.lower()
        if not keyword or key in seen or key not in table:
            continue
        seen.add(key)
        if contains_term(resume_text, keyword):
            continue

        _, aliases = table[key]
        for alias in aliases:
            match = _term_pattern(alias).search(resume_text)
            if match is None:
                continue
            found = match.group(0)
            suggestions.append(
                AnchoredSuggestion(
                    id=f"synonym-{len(suggestions)}",
                    type="ats",
                    category="missing_keyword",
                    original_text=found,
                    suggested_text=f"{keyword} ({found})",
                    reasoning=(
                        f'The job asks for "{keyword}" but your resume only says "{found}". '
                        "Spell out the full term so keyword filters pick it up."
                    ),
                    severity="warning",
                    text_range=TextRange(start=match.start(), end=match.end()),
                    semantic_match=True,
                    target_keyword=keyword,
                    matched_synonym=found,
                )
            )
            break

    return suggestions
