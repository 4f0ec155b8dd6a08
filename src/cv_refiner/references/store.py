"""Reference resume (cohort) stores.

A store hands the scorer the fingerprints of known-successful resumes,
optionally filtered by industry and role level. Stores never raise: any
failure is logged and an empty cohort returned, which makes the scorer fall
back to the standalone strategy.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from cv_refiner.models.patterns import ReferenceFingerprint

logger = logging.getLogger(__name__)

MAX_REFERENCES = 50


def filter_references(
    references: Iterable[ReferenceFingerprint],
    industry: str | None = None,
    role_level: str | None = None,
    limit: int = MAX_REFERENCES,
) -> list[ReferenceFingerprint]:
    """Apply industry / role-level filters and cap the cohort size."""
    selected = [
        r
        for r in references
        if (not industry or r.industry == industry) and (not role_level or r.role_level == role_level)
    ]
    return selected[:limit]


class ReferenceStore(ABC):
    """Source of reference fingerprints."""

    def __init__(self, limit: int = MAX_REFERENCES) -> None:
        self.limit = max(1, min(limit, MAX_REFERENCES))

    def fetch_references(
        self,
        industry: str | None = None,
        role_level: str | None = None,
    ) -> list[ReferenceFingerprint]:
        """Fetch the cohort, or an empty list if the store is unavailable."""
        try:
            records = self._load()
        except Exception as e:
            logger.warning(f"Reference store unavailable, using empty cohort: {e!s}")
            return []
        cohort = filter_references(records, industry, role_level, self.limit)
        logger.info(
            f"Fetched {len(cohort)} reference(s) "
            f"(industry={industry or 'any'}, role_level={role_level or 'any'})"
        )
        return cohort

    @abstractmethod
    def _load(self) -> list[ReferenceFingerprint]:
        """Load all records. May raise; fetch_references handles it."""


class InMemoryReferenceStore(ReferenceStore):
    """Store over records the caller already holds."""

    def __init__(
        self,
        references: Iterable[ReferenceFingerprint],
        limit: int = MAX_REFERENCES,
    ) -> None:
        super().__init__(limit)
        self._references = list(references)

    def _load(self) -> list[ReferenceFingerprint]:
        return self._references


class JsonReferenceStore(ReferenceStore):
    """Store backed by a JSON array of reference records.

    Each record looks like::

        {"id": "ref-1", "title": "...", "industry": "tech", "role_level": "mid",
         "formatting_patterns": {"pageCount": 1, "sectionOrder": [...], ...}}
    """

    def __init__(self, path: str | Path, limit: int = MAX_REFERENCES) -> None:
        super().__init__(limit)
        self.path = Path(path)

    def _load(self) -> list[ReferenceFingerprint]:
        payload = json.loads(self.path.read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            payload = payload.get("references", [])
        if not isinstance(payload, list):
            raise ValueError(f"Expected a list of references in {self.path}")
        return [ReferenceFingerprint.model_validate(record) for record in payload]
