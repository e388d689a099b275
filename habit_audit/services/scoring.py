"""
Scoring engine: answers in, bounded score and deductions out.

The same ``score`` function serves real answers and the synthetic baseline
answer sets built by the baseline resolver.
"""

from collections.abc import Mapping
from typing import Literal

import structlog

from habit_audit.domain.models import (
    DemographicSelection,
    Deduction,
    MarkerCatalog,
    Region,
    ScoreResult,
)
from habit_audit.services.baselines import group_baselines, overall_baselines
from habit_audit.services.classifier import classify_marker

# Configure structured logging (production-ready observability)
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)

MAX_SCORE = 100.0


def score(answers: Mapping[str, float], catalog: MarkerCatalog) -> ScoreResult:
    """
    Deduct penalties from 100 for every marker in catalog order.

    Missing answers count as 0. Answer keys the catalog does not define raise
    UnknownMarkerError, since they mean the answers and catalog are out of sync.
    """
    catalog.require(list(answers))

    total = MAX_SCORE
    deductions: list[Deduction] = []
    for marker in catalog.markers:
        value = float(answers.get(marker.id, 0.0))
        result = classify_marker(marker, value)
        total -= result.penalty
        if result.penalty > 0:
            deductions.append(
                Deduction(
                    marker_id=marker.id,
                    label=marker.label,
                    value=value,
                    penalty=result.penalty,
                    band=result.band,
                    citation=marker.citation,
                    description=marker.description,
                )
            )

    final = max(0.0, total)
    logger.debug("score_computed", score=final, deductions=len(deductions))
    return ScoreResult(score=final, deductions=tuple(deductions))


def group_score(
    catalog: MarkerCatalog, selection: DemographicSelection, region: Region | None
) -> float:
    """Score an average person of the selected age bracket and gender would get."""
    return score(group_baselines(catalog, selection, region), catalog).score


def overall_score(catalog: MarkerCatalog, region: Region | None) -> float:
    """Score of the regional average, ignoring age and gender."""
    return score(overall_baselines(catalog, region), catalog).score


def score_color(
    value: float, green_threshold: float = 90.0, amber_threshold: float = 70.0
) -> Literal["green", "amber", "red"]:
    if value >= green_threshold:
        return "green"
    if value >= amber_threshold:
        return "amber"
    return "red"
