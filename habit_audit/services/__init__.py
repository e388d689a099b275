"""
Scoring services for the habit audit.

This package contains the band classifier, baseline resolver, scoring engine,
recommendation ranker and the report builder that ties them together.
"""

from .baselines import group_baselines, overall_baseline, overall_baselines, resolve_baseline
from .classifier import band_icon, band_note, classify, classify_marker, classify_table
from .recommendations import recommend
from .report import build_report
from .scoring import group_score, overall_score, score, score_color

__all__ = [
    "band_icon",
    "band_note",
    "build_report",
    "classify",
    "classify_marker",
    "classify_table",
    "group_baselines",
    "group_score",
    "overall_baseline",
    "overall_baselines",
    "overall_score",
    "recommend",
    "resolve_baseline",
    "score",
    "score_color",
]
