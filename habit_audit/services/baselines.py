"""
Baseline resolution for group and regional comparisons.

The group baseline is what an average person of the selected age bracket and
gender reports for a marker; the overall baseline is the regional average
with no demographic adjustment. Both feed the synthetic answer sets the
scoring engine uses for "what would an average person score".
"""

import structlog

from habit_audit.domain.models import (
    AGE_RANGES,
    DemographicSelection,
    Marker,
    MarkerCatalog,
    Region,
)

logger = structlog.get_logger(__name__)

# Weekly averages per age bracket, indexed like AGE_RANGES
AGE_BASELINES: dict[str, tuple[float, ...]] = {
    "alcohol": (14, 12, 10, 9, 8),
    "nicotine": (8, 5, 3, 2, 1),
    "caffeine": (180, 210, 200, 180, 160),
    "sleep": (7, 7, 7, 7, 7),
    "strength_training": (12, 10, 8, 6, 5),
    "cardio": (20, 15, 10, 8, 6),
    "social_media": (180, 150, 120, 90, 60),
    "porn": (2, 1, 0.5, 0.3, 0.1),
    "fast_food": (3, 2, 1, 1, 0.5),
    "tooth_brushing": (2, 2, 2, 2, 2),
    "sugary_drinks": (4, 3, 2, 2, 1),
    "social_connections": (3, 3, 2, 2, 2),
    "fruit_veg": (3, 4, 4, 4, 4),
}

# Deltas added to the age baseline
GENDER_ADJUSTMENTS: dict[str, dict[str, float]] = {
    "male": {
        "alcohol": 2,
        "nicotine": 2,
        "caffeine": 10,
        "sleep": -0.5,
        "strength_training": 2,
        "cardio": 0,
        "social_media": -20,
        "porn": 1,
        "fast_food": 0.5,
        "sugary_drinks": 1,
        "social_connections": -0.5,
        "fruit_veg": -0.5,
    },
    "female": {
        "alcohol": -2,
        "nicotine": -2,
        "caffeine": -10,
        "sleep": 0.5,
        "strength_training": -2,
        "cardio": 0,
        "social_media": 20,
        "porn": -1,
        "fast_food": -0.5,
        "sugary_drinks": -1,
        "social_connections": 0.5,
        "fruit_veg": 0.5,
    },
    "other": {},
}


def overall_baseline(marker: Marker, region: Region | None) -> float:
    """Regional average for a marker, falling back to the marker default."""
    if region is not None and marker.id in region.baselines:
        return region.baselines[marker.id]
    return marker.baseline


def resolve_baseline(
    marker_id: str,
    age_range: str,
    gender: str,
    region: Region | None,
    catalog: MarkerCatalog,
) -> float:
    """
    Age and gender adjusted baseline for one marker.

    Args:
        marker_id: Catalog id; unknown ids raise UnknownMarkerError
        age_range: One of AGE_RANGES; anything else skips the age table
        gender: Key of GENDER_ADJUSTMENTS; anything else adds nothing
        region: Selected region, or None when no region applies
        catalog: Marker catalog supplying the default baseline

    Returns:
        float: The adjusted baseline, never below zero.
    """
    marker = catalog.get(marker_id)

    age_table = AGE_BASELINES.get(marker_id)
    if age_table is not None and age_range in AGE_RANGES:
        base = age_table[AGE_RANGES.index(age_range)]
    else:
        base = overall_baseline(marker, region)

    base += GENDER_ADJUSTMENTS.get(gender, {}).get(marker_id, 0.0)
    resolved = max(0.0, float(base))

    logger.debug(
        "baseline_resolved",
        marker_id=marker_id,
        age_range=age_range,
        gender=gender,
        value=resolved,
    )
    return resolved


def group_baselines(
    catalog: MarkerCatalog, selection: DemographicSelection, region: Region | None
) -> dict[str, float]:
    """Synthetic answer set for the selected demographic group, in catalog order."""
    return {
        marker.id: resolve_baseline(
            marker.id, selection.age_range, selection.gender, region, catalog
        )
        for marker in catalog.markers
    }


def overall_baselines(catalog: MarkerCatalog, region: Region | None) -> dict[str, float]:
    """Synthetic answer set for the regional average, in catalog order."""
    return {marker.id: overall_baseline(marker, region) for marker in catalog.markers}
