"""Text-range resolution for free-text suggestions.

A suggestion generator quotes spans of the resume, but the quote may differ
in case, whitespace or a few characters. The resolver tries increasingly
lossy strategies in order and returns the first hit:

1. Exact substring
2. Case-insensitive substring
3. Whitespace-normalized substring (offsets reconstructed approximately)
4. Fuzzy match over sentence segments and, for short needles, single words

If nothing matches, the (0, 0) sentinel range is returned and the caller must
treat the suggestion as unanchored.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

from cv_refiner.models.suggestion import TextRange

if TYPE_CHECKING:
    from cv_refiner.config import Settings

logger = logging.getLogger(__name__)

WHITESPACE_RUN = re.compile(r"\s+")
SEGMENT_SPLIT = re.compile(r"[.!?\n]")
WORD_TOKEN = re.compile(r"[\w+#]+")


def fold_case(text: str) -> str:
    """Lowercase ``text`` without changing its length.

    Characters whose lowercase form is longer (e.g. "\u0130") are kept as is, so
    indexes into the folded text are valid in the original.
    """
    folded = []
    for ch in text:
        lowered = ch.lower()
        folded.append(lowered if len(lowered) == 1 else ch)
    return "".join(folded)


class MatchStrategy(ABC):
    """One stage of the resolver cascade."""

    name: str = "strategy"

    @abstractmethod
    def find(self, text: str, needle: str) -> TextRange | None:
        """Return the matched range, or None to defer to the next stage."""


class ExactMatch(MatchStrategy):
    name = "exact"

    def find(self, text: str, needle: str) -> TextRange | None:
        index = text.find(needle)
        if index == -1:
            return None
        return TextRange(start=index, end=index + len(needle))


class CaseInsensitiveMatch(MatchStrategy):
    name = "case_insensitive"

    def find(self, text: str, needle: str) -> TextRange | None:
        index = fold_case(text).find(fold_case(needle))
        if index == -1:
            return None
        return TextRange(start=index, end=index + len(needle))


def original_offset(text: str, normalized_index: int) -> int:
    """Map an index in whitespace-collapsed text back to ``text``.

    Every character counts except whitespace that directly follows other
    whitespace, which is what collapsing removed.
    """
    logical = 0
    for i, ch in enumerate(text):
        if ch.isspace() and i > 0 and text[i - 1].isspace():
            continue
        if logical == normalized_index:
            return i
        logical += 1
    return len(text)


class WhitespaceNormalizedMatch(MatchStrategy):
    """Match with all whitespace runs collapsed to one space.

    The start offset is mapped back exactly; the end is start + len(needle)
    and is not re-measured, so it can be off by the whitespace collapsed
    inside the match.
    """

    name = "whitespace_normalized"

    def find(self, text: str, needle: str) -> TextRange | None:
        normalized_text = fold_case(WHITESPACE_RUN.sub(" ", text))
        normalized_needle = fold_case(WHITESPACE_RUN.sub(" ", needle))
        if not normalized_needle.strip():
            return None

        index = normalized_text.find(normalized_needle)
        if index == -1:
            return None

        start = original_offset(text, index)
        return TextRange(start=start, end=min(len(text), start + len(needle)))


@dataclass(frozen=True)
class Segment:
    """A searchable piece of the text with its offset."""

    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


def split_segments(text: str) -> list[Segment]:
    """Split text on sentence ends and newlines, keeping offsets of the trimmed pieces."""
    segments: list[Segment] = []
    cursor = 0
    for piece in SEGMENT_SPLIT.split(text):
        stripped = piece.strip()
        if stripped:
            segments.append(Segment(stripped, cursor + piece.index(stripped)))
        cursor += len(piece) + 1
    return segments


def word_segments(text: str) -> list[Segment]:
    """Every word token in the text with its offset."""
    return [Segment(m.group(0), m.start()) for m in WORD_TOKEN.finditer(text)]


class FuzzyMatch(MatchStrategy):
    """Approximate match over sentence-like segments.

    Segments that are shorter than the needle are compared whole; longer
    ones are compared by their best-aligned window. Ties go to the shorter,
    then earlier, segment.
    """

    name = "fuzzy"

    def __init__(
        self,
        max_needle_length: int = 50,
        min_similarity: float = 60.0,
        word_index_max_length: int = 10,
        span_ratio: float = 1.5,
    ) -> None:
        self.max_needle_length = max_needle_length
        self.min_similarity = min_similarity  # 60 tolerates ~40% divergence
        self.word_index_max_length = word_index_max_length
        self.span_ratio = span_ratio

    def find(self, text: str, needle: str) -> TextRange | None:
        if not needle.strip() or len(needle) > self.max_needle_length:
            return None

        candidates = split_segments(text)
        if len(needle) <= self.word_index_max_length:
            candidates.extend(word_segments(text))

        best = self._best_segment(needle, candidates)
        if best is None:
            return None

        if len(best.text) <= len(needle) * self.span_ratio:
            return TextRange(start=best.start, end=best.end)

        inner = fold_case(best.text).find(fold_case(needle))
        if inner != -1:
            start = best.start + inner
            return TextRange(start=start, end=start + len(needle))

        # Loose fallback: highlight the whole segment
        return TextRange(start=best.start, end=best.end)

    def _best_segment(self, needle: str, candidates: Sequence[Segment]) -> Segment | None:
        min_length = min(3, len(needle))
        best: Segment | None = None
        best_key: tuple[float, int, int] | None = None

        for segment in candidates:
            if len(segment.text) < min_length:
                continue
            if len(segment.text) <= len(needle):
                similarity = fuzz.ratio(
                    needle, segment.text, processor=default_process, score_cutoff=self.min_similarity
                )
            else:
                similarity = fuzz.partial_ratio(
                    needle, segment.text, processor=default_process, score_cutoff=self.min_similarity
                )
            if not similarity:
                continue
            key = (similarity, -len(segment.text), -segment.start)
            if best_key is None or key > best_key:
                best, best_key = segment, key

        if best is not None:
            logger.debug(f"Fuzzy hit {best.text[:40]!r} scored {best_key[0]:.1f}")
        return best


def default_strategies(
    max_needle_length: int = 50,
    min_similarity: float = 60.0,
    word_index_max_length: int = 10,
) -> list[MatchStrategy]:
    """The standard cascade, most precise first."""
    return [
        ExactMatch(),
        CaseInsensitiveMatch(),
        WhitespaceNormalizedMatch(),
        FuzzyMatch(
            max_needle_length=max_needle_length,
            min_similarity=min_similarity,
            word_index_max_length=word_index_max_length,
        ),
    ]


class TextRangeResolver:
    """Anchor suggestion text to a character range of the resume."""

    def __init__(self, strategies: Sequence[MatchStrategy] | None = None) -> None:
        self.strategies = list(strategies) if strategies is not None else default_strategies()

    @classmethod
    def from_settings(cls, settings: Settings) -> TextRangeResolver:
        """Build a resolver from Settings fuzzy-matching options."""
        return cls(
            default_strategies(
                max_needle_length=settings.fuzzy_max_needle_length,
                min_similarity=settings.fuzzy_min_similarity,
                word_index_max_length=settings.fuzzy_word_index_max_length,
            )
        )

    def resolve(self, text: str, needle: str) -> TextRange:
        """Find ``needle`` in ``text``; (0, 0) when no strategy matches."""
        for strategy in self.strategies:
            found = strategy.find(text, needle)
            if found is not None:
                logger.debug(f"Anchored {needle[:40]!r} via {strategy.name}: {found.start}-{found.end}")
                return found
        logger.debug(f"Could not anchor {needle[:40]!r}")
        return TextRange.sentinel()


_default_resolver = TextRangeResolver()


def find_text_range(text: str, needle: str) -> TextRange:
    """Resolve ``needle`` in ``text`` with the default cascade."""
    return _default_resolver.resolve(text, needle)
