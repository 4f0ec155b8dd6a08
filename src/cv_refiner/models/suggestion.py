"""Suggestion, feedback and text-range models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Severity = Literal["critical", "warning", "info"]
SuggestionType = Literal["ats", "hr"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FormattingSuggestion(_CamelModel):
    """One formatting finding produced by a scorer."""

    aspect: str
    user_value: str
    reference_value: str
    percentage_support: int = Field(ge=0, le=100)  # 85 means "85% of successful resumes"
    message: str
    severity: Severity


class HRFeedback(_CamelModel):
    """Unified feedback item, mergeable with other diagnostic layers."""

    type: Literal["formatting"] = "formatting"
    layer: Literal[1] = 1
    severity: Severity
    message: str
    suggestion: str | None = None


class TextRange(_CamelModel):
    """Character span in the resume text; (0, 0) means unanchored."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(default=0, ge=0)
    end: int = Field(default=0, ge=0)

    @classmethod
    def sentinel(cls) -> "TextRange":
        return cls(start=0, end=0)

    @property
    def is_sentinel(self) -> bool:
        return self.start == 0 and self.end == 0


class AnchoredSuggestion(_CamelModel):
    """A free-text edit proposal tied to a span of the resume."""

    id: str = ""
    type: SuggestionType = "ats"
    category: str = "formatting"
    original_text: str = ""
    suggested_text: str = ""
    reasoning: str = ""
    severity: Severity = "info"
    text_range: TextRange | None = None

    # Set by the synonym detector
    semantic_match: bool = False
    target_keyword: str | None = None
    matched_synonym: str | None = None
