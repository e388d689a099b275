"""Shared fixtures for the habit audit unit tests."""

from __future__ import annotations

from typing import Any

import pytest

from habit_audit.catalog import default_catalog
from habit_audit.domain.models import Marker, MarkerCatalog, RegionTable


def make_marker(
    marker_id: str,
    bands: tuple[float, float, float],
    *,
    invert: bool = False,
    penalties: tuple[float, float, float] = (2, 5, 8),
    **extra: Any,
) -> Marker:
    """Build a marker from compact band/penalty tuples."""
    data: dict[str, Any] = {
        "id": marker_id,
        "label": marker_id.replace("_", " ").title(),
        "unit": "units",
        "invert": invert,
        "bands": dict(zip(("mild", "moderate", "high"), bands, strict=True)),
        "penalties": dict(zip(("mild", "moderate", "high"), penalties, strict=True)),
        "baseline": extra.pop("baseline", 0),
        "citation": extra.pop("citation", marker_id),
    }
    data.update(extra)
    return Marker.model_validate(data)


@pytest.fixture
def alcohol() -> Marker:
    return make_marker("alcohol", (5, 10, 14), label="Alcohol units", unit="units/week")


@pytest.fixture
def sleep() -> Marker:
    return make_marker("sleep", (7, 6, 5), invert=True, label="Sleep duration", unit="hours/night")


@pytest.fixture
def catalog() -> MarkerCatalog:
    return default_catalog()[0]


@pytest.fixture
def regions() -> RegionTable:
    return default_catalog()[1]


@pytest.fixture(name="make_marker")
def make_marker_fixture() -> Any:
    return make_marker
