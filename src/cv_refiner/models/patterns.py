"""Formatting fingerprint models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _FrozenModel(BaseModel):
    """Immutable model that accepts both snake_case and camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class BulletStyle(_FrozenModel):
    """Bullet usage detected in a resume."""

    types: tuple[str, ...] = ()  # dash, dot, asterisk, number, arrow
    avg_bullets_per_entry: float = Field(default=0, ge=0)
    total_bullets: int = Field(default=0, ge=0)


class QuantifiedMetrics(_FrozenModel):
    """Numbers, percentages and amounts found in the text."""

    count: int = Field(default=0, ge=0)
    examples: tuple[str, ...] = Field(default=(), max_length=10)


class HeadingStyle(_FrozenModel):
    """Capitalization styles of detected section headings."""

    consistent: bool = True
    styles: tuple[str, ...] = ()  # ALL_CAPS, Title Case, Sentence case


class DateFormat(_FrozenModel):
    """Date formats used across the resume."""

    formats: tuple[str, ...] = ()
    consistent: bool = True


class FormattingPatterns(_FrozenModel):
    """Deterministic formatting fingerprint of a resume."""

    page_count: int = Field(default=1, ge=1)
    section_order: tuple[str, ...] = ()
    bullet_style: BulletStyle = Field(default_factory=BulletStyle)
    has_summary: bool = False
    quantified_metrics: QuantifiedMetrics = Field(default_factory=QuantifiedMetrics)
    heading_style: HeadingStyle = Field(default_factory=HeadingStyle)
    white_space_ratio: float = Field(default=0, ge=0, le=1)
    date_format: DateFormat = Field(default_factory=DateFormat)
    word_count: int = Field(default=0, ge=0)
    avg_words_per_line: int = Field(default=0, ge=0)


class ReferenceFingerprint(_FrozenModel):
    """A known-successful resume's fingerprint from the cohort store."""

    id: str
    title: str = ""
    industry: str | None = None
    role_level: str | None = None
    formatting_patterns: FormattingPatterns | None = None
