"""Suggestion generator abstraction.

Text generation (deterministic rules or an LLM) lives outside this package.
A generator only has to return the loose payload that
validate_generated_suggestions understands.
"""

from abc import ABC, abstractmethod
from typing import Any


class SuggestionGenerator(ABC):
    """Produces free-text "original span / replacement" suggestions."""

    @abstractmethod
    def generate(self, resume_text: str, context: dict[str, Any]) -> Any:
        """Return ``{"suggestions": [...]}`` or a bare list of suggestion dicts.

        Each item carries originalText, suggestedText, reasoning, category,
        severity and type. Implementations may raise; callers decide how to
        degrade.
        """


class StaticSuggestionGenerator(SuggestionGenerator):
    """Generator that replays a fixed payload, e.g. one loaded from a file."""

    def __init__(self, payload: Any) -> None:
        self.payload = payload

    def generate(self, resume_text: str, context: dict[str, Any]) -> Any:
        return self.payload
