"""
Marker catalog and region table loading.

The catalog is plain data: the built-in default below, or a JSON file with the
same shape (``{"markers": [...], "regions": {...}}``). It is validated once
into immutable models; every later lookup goes through MarkerCatalog.get.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import structlog

from habit_audit.domain.models import MarkerCatalog, RegionTable, UnknownMarkerError

logger = structlog.get_logger(__name__)

_STANDARD_PENALTIES = {"mild": 2, "moderate": 5, "high": 8}

DEFAULT_CATALOG_DATA: dict[str, Any] = {
    "markers": [
        {
            "id": "alcohol",
            "label": "Alcohol units",
            "unit": "units/week",
            "bands": {"mild": 5, "moderate": 10, "high": 14},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 11,
            "citation": "1",
            "description": "Alcohol units drunk over the past seven days.",
            "notes": {
                "mild": "Regularly exceeding 14 units can raise your risk of health problems",
                "high": "Consistently high alcohol intake has been linked to liver damage and other diseases",
            },
        },
        {
            "id": "nicotine",
            "label": "Nicotine products",
            "unit": "uses/week",
            "bands": {"mild": 0, "moderate": 10, "high": 20},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 4,
            "citation": "2",
            "description": "Cigarettes, vapes or pouches used over the past seven days.",
            "notes": {
                "mild": "Any use of tobacco or nicotine is harmful and highly addictive",
                "high": "Heavy nicotine intake can cause significant cardiovascular and respiratory harm",
            },
        },
        {
            "id": "caffeine",
            "label": "Caffeine intake",
            "unit": "mg/day",
            "bands": {"mild": 400, "moderate": 500, "high": 600},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 200,
            "citation": "3",
            "description": "Average daily caffeine from coffee, tea and energy drinks.",
            "notes": {
                "mild": "More than 400 mg per day may lead to restlessness and anxiety",
                "high": "Extremely high caffeine intake can cause heart palpitations and sleep disturbance",
            },
        },
        {
            "id": "sleep",
            "label": "Sleep duration",
            "unit": "hours/night",
            "invert": True,
            "bands": {"mild": 7, "moderate": 6, "high": 5},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 7,
            "citation": "4",
            "description": "Average hours of sleep per night.",
            "notes": {
                "mild": "Sleeping less than 7 hours can impair cognitive function",
                "high": "Chronic sleep deprivation increases risk of obesity and heart disease",
            },
        },
        {
            "id": "strength_training",
            "label": "Strength training",
            "unit": "min/day",
            "invert": True,
            "bands": {"mild": 20, "moderate": 10, "high": 5},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 9,
            "citation": "5",
            "description": "Average daily minutes of muscle strengthening exercise.",
            "notes": {
                "mild": "Less than 20 min of strength training daily provides limited benefit",
                "high": "Neglecting muscle strengthening may raise risk of musculoskeletal issues",
            },
        },
        {
            "id": "cardio",
            "label": "Cardio exercise",
            "unit": "min/day",
            "invert": True,
            "bands": {"mild": 22, "moderate": 15, "high": 8},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 12,
            "citation": "6",
            "description": "Average daily minutes of moderate or vigorous cardio.",
            "notes": {
                "mild": "Below 22 minutes of cardio daily falls short of activity guidelines",
                "high": "Very little cardio can increase risk of cardiovascular disease",
            },
        },
        {
            "id": "social_media",
            "label": "Social media",
            "unit": "min/day",
            "bands": {"mild": 120, "moderate": 180, "high": 240},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 110,
            "citation": "7",
            "description": "Average daily minutes on social media apps.",
            "notes": {
                "mild": "More than about two hours daily is associated with poorer mental health",
                "high": "Excessive social media use doubles the risk of mental health problems",
            },
        },
        {
            "id": "porn",
            "label": "Pornography sessions",
            "unit": "sessions/week",
            "bands": {"mild": 1, "moderate": 3, "high": 5},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 1,
            "citation": "8",
            "description": "Sessions over the past seven days.",
            "notes": {
                "mild": "Higher pornography consumption is linked to increased anxiety and depression",
                "high": "Frequent porn sessions can correlate with stress and relationship issues",
            },
        },
        {
            "id": "fast_food",
            "label": "Fast food meals",
            "unit": "meals/week",
            "bands": {"mild": 1, "moderate": 2, "high": 4},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 1.5,
            "citation": "9",
            "description": "Takeaway or fast food meals over the past seven days.",
            "notes": {
                "mild": "Fast-food meals are high in fat, sugar and salt",
                "high": "Frequent fast food may contribute to obesity and heart disease",
            },
        },
        {
            "id": "tooth_brushing",
            "label": "Tooth brushing",
            "unit": "times/day",
            "invert": True,
            "bands": {"mild": 2, "moderate": 1, "high": 0.5},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 2,
            "citation": "10",
            "description": "How many times a day you usually brush.",
            "notes": {
                "mild": "Brushing less than twice daily leads to plaque build-up",
                "high": "Poor oral hygiene can cause gum disease and tooth decay",
            },
        },
        {
            "id": "sugary_drinks",
            "label": "Sugary drinks",
            "unit": "drinks/week",
            "bands": {"mild": 2, "moderate": 5, "high": 8},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 3,
            "citation": "11",
            "description": "Sugar-sweetened soft drinks over the past seven days.",
            "notes": {
                "mild": "Too many sugary drinks can lead to weight gain and diabetes",
                "high": "High intake of sugary drinks increases risk of heart and liver problems",
            },
        },
        {
            "id": "social_connections",
            "label": "Social connections",
            "unit": "meetups/week",
            "invert": True,
            "bands": {"mild": 3, "moderate": 2, "high": 1},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 2.5,
            "citation": "12",
            "description": "Meaningful in-person catch-ups over the past seven days.",
            "notes": {
                "mild": "Low social contact may increase risks of illness and early death",
                "high": "Chronic loneliness significantly raises risk of mortality",
            },
        },
        {
            "id": "fruit_veg",
            "label": "Fruit and veg",
            "unit": "portions/day",
            "invert": True,
            "bands": {"mild": 5, "moderate": 3, "high": 1},
            "penalties": _STANDARD_PENALTIES,
            "baseline": 3.7,
            "citation": "13",
            "description": "Average daily portions of fruit and vegetables.",
            "notes": {
                "mild": "Eating less than five portions reduces nutrient intake",
                "high": "Very low fruit and veg intake can increase risk of disease",
            },
        },
    ],
    "regions": {
        "uk": {
            "label": "United Kingdom",
            "baselines": {
                "alcohol": 11,
                "nicotine": 4,
                "caffeine": 200,
                "sleep": 7,
                "strength_training": 9,
                "cardio": 12,
                "social_media": 110,
                "porn": 1,
                "fast_food": 1.5,
                "tooth_brushing": 2,
                "sugary_drinks": 3,
                "social_connections": 2.5,
                "fruit_veg": 3.7,
            },
        },
        "us": {
            "label": "United States",
            "baselines": {
                "alcohol": 9,
                "nicotine": 3,
                "caffeine": 240,
                "sleep": 6.8,
                "strength_training": 8,
                "cardio": 14,
                "social_media": 140,
                "fast_food": 2.5,
                "tooth_brushing": 1.8,
                "sugary_drinks": 5,
                "social_connections": 2,
                "fruit_veg": 2.5,
            },
        },
        "eu": {
            "label": "European Union",
            "baselines": {
                "alcohol": 10,
                "nicotine": 5,
                "caffeine": 220,
                "sleep": 7.1,
                "cardio": 13,
                "social_media": 100,
                "fast_food": 1,
                "sugary_drinks": 2.5,
                "fruit_veg": 3.5,
            },
        },
    },
}


def load_catalog(data: dict[str, Any]) -> tuple[MarkerCatalog, RegionTable]:
    """
    Validate a catalog blob into immutable models.

    Raises:
        pydantic.ValidationError: malformed markers (band or penalty ordering,
            duplicate ids) or regions
        UnknownMarkerError: a region baseline names a marker the catalog lacks
    """
    catalog = MarkerCatalog.model_validate({"markers": data.get("markers", [])})
    regions = RegionTable.model_validate({"regions": data.get("regions", {})})

    for region_id, region in regions.regions.items():
        try:
            catalog.require(list(region.baselines))
        except UnknownMarkerError as e:
            logger.error("region_references_unknown_marker", region=region_id, marker_id=e.marker_id)
            raise

    logger.info("catalog_loaded", markers=len(catalog), regions=len(regions.regions))
    return catalog, regions


def load_catalog_file(path: str | Path) -> tuple[MarkerCatalog, RegionTable]:
    """Load and validate a JSON catalog file."""
    with Path(path).open(encoding="utf-8") as fh:
        data = json.load(fh)
    return load_catalog(data)


@lru_cache
def default_catalog() -> tuple[MarkerCatalog, RegionTable]:
    """Get the cached built-in catalog."""
    return load_catalog(DEFAULT_CATALOG_DATA)


def get_catalog(catalog_path: str | None = None) -> tuple[MarkerCatalog, RegionTable]:
    """Catalog from ``catalog_path`` when given, otherwise the built-in one."""
    if catalog_path:
        return load_catalog_file(catalog_path)
    return default_catalog()
