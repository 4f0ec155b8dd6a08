"""Feedback normalization."""

from cv_refiner.feedback.normalizer import REMEDIATIONS, suggestions_to_feedback

__all__ = ["REMEDIATIONS", "suggestions_to_feedback"]
