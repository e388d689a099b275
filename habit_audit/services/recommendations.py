"""
Recommendation ranking: the biggest deductions become next week's actions.
"""

from collections.abc import Sequence
from typing import Literal

import structlog

from habit_audit.domain.models import Deduction, Marker, MarkerCatalog, Recommendation

logger = structlog.get_logger(__name__)

DEFAULT_LIMIT = 3


def _phrase(marker: Marker) -> tuple[Literal["increase", "reduce"], str]:
    target = f"{marker.bands.mild:g} {marker.unit}"
    if marker.invert:
        return "increase", f"Increase {marker.label.lower()} to at least {target}"
    return "reduce", f"Reduce {marker.label.lower()} to below {target}"


def recommend(
    deductions: Sequence[Deduction], catalog: MarkerCatalog, limit: int = DEFAULT_LIMIT
) -> list[Recommendation]:
    """
    Top ``limit`` deductions by penalty, phrased as directional actions.

    The sort is stable, so deductions with equal penalties keep the order
    they arrived in (catalog order when fed from ``score``).
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    ranked = sorted(deductions, key=lambda d: d.penalty, reverse=True)[:limit]

    recommendations = []
    for deduction in ranked:
        marker = catalog.get(deduction.marker_id)
        direction, action = _phrase(marker)
        recommendations.append(
            Recommendation(
                marker_id=marker.id,
                label=marker.label,
                direction=direction,
                target=marker.bands.mild,
                unit=marker.unit,
                action=action,
                potential_gain=deduction.penalty,
                citation=marker.citation,
            )
        )

    logger.debug("recommendations_ranked", count=len(recommendations), limit=limit)
    return recommendations
