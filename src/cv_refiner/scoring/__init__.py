"""Formatting scoring module.

Scores a resume fingerprint from 0 to 100 with one of two strategies:
- Standalone: fixed best-practice thresholds, used when no cohort exists
- Cohort: thresholds derived from reference resumes
"""

from cv_refiner.scoring.analyzer import analyze_formatting, get_scorer
from cv_refiner.scoring.base import Deduction, Scorer
from cv_refiner.scoring.cohort import CohortScorer
from cv_refiner.scoring.models import FormattingAnalysisResult
from cv_refiner.scoring.standalone import StandaloneScorer

__all__ = [
    "CohortScorer",
    "Deduction",
    "FormattingAnalysisResult",
    "Scorer",
    "StandaloneScorer",
    "analyze_formatting",
    "get_scorer",
]
