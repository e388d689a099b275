"""
Report assembly: the one payload handed to the presentation layer.

Builds the headline score (six-band scale), the breakdown table (four-tier
scale), group and overall comparison scores, top actions and chart series
from an explicit AuditSession rather than ambient state.
"""

import re

import structlog

from habit_audit.config import ScoringConfig
from habit_audit.domain.models import (
    AuditReport,
    AuditSession,
    BreakdownRow,
    ChartSeries,
    MarkerCatalog,
    Region,
    RegionTable,
)
from habit_audit.services.baselines import group_baselines, overall_baseline
from habit_audit.services.classifier import band_icon, band_note, classify_table
from habit_audit.services.recommendations import recommend
from habit_audit.services.scoring import group_score, overall_score, score, score_color

logger = structlog.get_logger(__name__)

_LABEL_SPLIT = re.compile(r"[\s‑-]")


def short_label(label: str) -> str:
    """First word of a label, for compact chart axes."""
    return _LABEL_SPLIT.split(label, maxsplit=1)[0]


def _breakdown(
    session: AuditSession, catalog: MarkerCatalog, region: Region | None
) -> tuple[BreakdownRow, ...]:
    rows = []
    for marker in catalog.markers:
        value = session.answers.get(marker.id, 0.0)
        tier = classify_table(value, marker.bands, marker.penalties, marker.invert)
        rows.append(
            BreakdownRow(
                marker_id=marker.id,
                label=marker.label,
                unit=marker.unit,
                value=value,
                overall_average=overall_baseline(marker, region),
                band=tier.band,
                penalty=tier.penalty,
                icon=band_icon(tier.band),
                note=band_note(marker, tier.band),
            )
        )
    return tuple(rows)


def build_report(
    session: AuditSession,
    catalog: MarkerCatalog,
    regions: RegionTable,
    config: ScoringConfig | None = None,
) -> AuditReport:
    """
    Score a session and assemble every field the results screen renders.

    An unknown region id is not fatal: comparisons fall back to each marker's
    default baseline.
    """
    config = config or ScoringConfig()
    log = logger.bind(region=session.region_id, age_range=session.demographics.age_range)

    region = regions.get(session.region_id)
    if region is None:
        log.warning("region_not_found", available=sorted(regions.keys()))

    result = score(session.answers, catalog)
    group = group_score(catalog, session.demographics, region)
    overall = overall_score(catalog, region)

    group_values = group_baselines(catalog, session.demographics, region)
    chart = ChartSeries(
        labels=[short_label(m.label) for m in catalog.markers],
        user_values=[session.answers.get(m.id, 0.0) for m in catalog.markers],
        group_avg_values=[group_values[m.id] for m in catalog.markers],
        overall_avg_values=[overall_baseline(m, region) for m in catalog.markers],
    )

    report = AuditReport(
        score=result.score,
        color=score_color(result.score, config.green_threshold, config.amber_threshold),
        celebrate=result.score >= config.celebrate_threshold,
        group_score=group,
        overall_score=overall,
        region_label=region.label if region else None,
        demographics=session.demographics.model_copy(),
        deductions=result.deductions,
        rows=_breakdown(session, catalog, region),
        recommendations=tuple(recommend(result.deductions, catalog, config.recommendation_limit)),
        chart=chart,
    )

    log.info(
        "report_built",
        score=report.score,
        group_score=report.group_score,
        overall_score=report.overall_score,
        deductions=len(report.deductions),
    )
    return report
