"""Report output."""

from cv_refiner.output.report import format_analysis, format_suggestions, save_markdown

__all__ = ["format_analysis", "format_suggestions", "save_markdown"]
