"""
Tests for report assembly in `habit_audit/services/report.py`.

Covers:
- Headline score, colour and celebration flag
- Breakdown rows on the four-tier scale with icons and notes
- Group and overall comparison scores
- Chart series alignment
- Unknown region fallback
"""

import pytest

from habit_audit.config import ScoringConfig
from habit_audit.domain.models import (
    AuditSession,
    Band,
    DemographicSelection,
    MarkerCatalog,
    RegionTable,
)
from habit_audit.services.report import build_report, short_label
from habit_audit.services.scoring import group_score, overall_score

HEALTHY = {
    "alcohol": 2,
    "nicotine": 0,
    "caffeine": 100,
    "sleep": 8,
    "strength_training": 25,
    "cardio": 35,
    "social_media": 45,
    "porn": 0,
    "fast_food": 0,
    "tooth_brushing": 2,
    "sugary_drinks": 0,
    "social_connections": 4.5,
    "fruit_veg": 5.5,
}


@pytest.fixture
def session() -> AuditSession:
    session = AuditSession(region_id="uk")
    for marker_id, value in HEALTHY.items():
        session.record_answer(marker_id, value)
    return session


class TestBuildReport:
    def test_clean_week(
        self, session: AuditSession, catalog: MarkerCatalog, regions: RegionTable
    ) -> None:
        report = build_report(session, catalog, regions)

        assert report.score == 100
        assert report.color == "green"
        assert report.celebrate is True
        assert report.deductions == ()
        assert report.recommendations == ()
        assert report.region_label == "United Kingdom"

    def test_heavy_drinking_week(
        self, session: AuditSession, catalog: MarkerCatalog, regions: RegionTable
    ) -> None:
        session.record_answer("alcohol", 25)
        session.record_answer("sleep", 6.5)
        session.record_answer("cardio", 0)

        report = build_report(session, catalog, regions)

        # alcohol very bad (-10), sleep mild (-2), cardio very bad (-10)
        assert report.score == 78
        assert report.color == "amber"
        assert report.celebrate is False
        assert [d.marker_id for d in report.deductions] == ["alcohol", "sleep", "cardio"]
        assert [r.marker_id for r in report.recommendations] == ["alcohol", "cardio", "sleep"]

    def test_table_uses_four_tier_scale(
        self, session: AuditSession, catalog: MarkerCatalog, regions: RegionTable
    ) -> None:
        session.record_answer("alcohol", 25)
        report = build_report(session, catalog, regions)
        row = next(r for r in report.rows if r.marker_id == "alcohol")

        assert report.deductions[0].band is Band.VERY_BAD
        assert row.band is Band.HIGH
        assert row.penalty == 8
        assert row.icon == "❌"
        assert row.note == catalog.get("alcohol").notes.high

    def test_rows_cover_catalog_with_overall_average(
        self, session: AuditSession, catalog: MarkerCatalog, regions: RegionTable
    ) -> None:
        session.record_answer("sleep", 6.5)
        report = build_report(session, catalog, regions)

        assert [r.marker_id for r in report.rows] == catalog.ids()
        sleep_row = next(r for r in report.rows if r.marker_id == "sleep")
        assert sleep_row.band is Band.MILD
        assert sleep_row.icon == "⚠️"
        assert sleep_row.note == catalog.get("sleep").notes.mild
        assert sleep_row.overall_average == regions.get("uk").baselines["sleep"]

        good_row = next(r for r in report.rows if r.marker_id == "tooth_brushing")
        assert good_row.band is Band.GOOD
        assert good_row.note is None

    def test_comparison_scores(
        self, session: AuditSession, catalog: MarkerCatalog, regions: RegionTable
    ) -> None:
        session.select_demographics("18-24", "male")
        report = build_report(session, catalog, regions)
        uk = regions.get("uk")

        assert report.group_score == group_score(
            catalog, DemographicSelection(age_range="18-24", gender="male"), uk
        )
        assert report.overall_score == overall_score(catalog, uk)
        assert report.demographics.gender == "male"

    def test_chart_series_align_with_catalog(
        self, session: AuditSession, catalog: MarkerCatalog, regions: RegionTable
    ) -> None:
        chart = build_report(session, catalog, regions).chart

        assert len(chart.labels) == len(catalog)
        assert len(chart.user_values) == len(chart.group_avg_values) == len(catalog)
        assert chart.labels[0] == "Alcohol"
        assert chart.user_values[0] == HEALTHY["alcohol"]
        assert chart.overall_avg_values[0] == regions.get("uk").baselines["alcohol"]

    def test_unknown_region_falls_back_to_defaults(
        self, session: AuditSession, catalog: MarkerCatalog, regions: RegionTable
    ) -> None:
        session.region_id = "atlantis"
        report = build_report(session, catalog, regions)

        assert report.region_label is None
        assert report.overall_score == overall_score(catalog, None)
        assert report.chart.overall_avg_values == [m.baseline for m in catalog.markers]

    def test_config_controls_limit_and_thresholds(
        self, session: AuditSession, catalog: MarkerCatalog, regions: RegionTable
    ) -> None:
        session.record_answer("alcohol", 25)
        session.record_answer("sleep", 6.5)
        config = ScoringConfig(recommendation_limit=1, celebrate_threshold=85)

        report = build_report(session, catalog, regions, config)

        assert report.score == 88
        assert report.celebrate is True
        assert report.color == "amber"
        assert len(report.recommendations) == 1

    def test_missing_answers_count_as_zero(
        self, catalog: MarkerCatalog, regions: RegionTable
    ) -> None:
        report = build_report(AuditSession(), catalog, regions)
        assert all(v == 0 for v in report.chart.user_values)
        assert report.score == 40


@pytest.mark.parametrize(
    ("label", "short"),
    [("Alcohol units", "Alcohol"), ("Fast-food meals", "Fast"), ("Sleep", "Sleep")],
)
def test_short_label(label: str, short: str) -> None:
    assert short_label(label) == short
