"""
End-to-end audit run over scripted answer scenarios.

This script exercises:
1. Configuration loading and validation
2. Catalog loading
3. Scoring, group/overall comparison and recommendations
4. Error handling for catalog mismatches

Run with: uv run python run_audit.py [scenario]
"""

import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from habit_audit.catalog import get_catalog
from habit_audit.config import get_config, print_config_summary, validate_config
from habit_audit.domain.models import AuditReport, AuditSession, UnknownMarkerError
from habit_audit.services import build_report, score

console = Console()

SCENARIOS: dict[str, dict[str, float]] = {
    "healthy": {
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
    },
    "typical": {
        "alcohol": 11,
        "nicotine": 0,
        "caffeine": 300,
        "sleep": 6.5,
        "strength_training": 7,
        "cardio": 15,
        "social_media": 150,
        "porn": 1,
        "fast_food": 2,
        "tooth_brushing": 2,
        "sugary_drinks": 4,
        "social_connections": 2.5,
        "fruit_veg": 3.5,
    },
    "struggling": {
        "alcohol": 25,
        "nicotine": 45,
        "caffeine": 700,
        "sleep": 4,
        "strength_training": 0,
        "cardio": 0,
        "social_media": 210,
        "porn": 7,
        "fast_food": 5,
        "tooth_brushing": 1,
        "sugary_drinks": 9,
        "social_connections": 0,
        "fruit_veg": 0,
    },
}

COLOR_STYLES = {"green": "bold green", "amber": "bold yellow", "red": "bold red"}


def render_report(report: AuditReport) -> None:
    """Print headline, breakdown and top actions."""
    console.print(
        f"Overall habit score: {report.score:.0f}/100",
        style=COLOR_STYLES[report.color],
    )
    demo = report.demographics
    console.print(
        f"Average {demo.gender} aged {demo.age_range} would score about {report.group_score:g}/100"
    )
    console.print(f"{report.region_label or 'Overall'} average: {report.overall_score:g}/100")
    if report.celebrate:
        console.print("Great week!", style="green")

    table = Table(title="Detailed breakdown")
    table.add_column("Marker", style="cyan")
    table.add_column("You", style="white")
    table.add_column("Avg", style="yellow")
    table.add_column("Band", style="magenta")
    table.add_column("Penalty", style="red")
    table.add_column("Status")
    for row in report.rows:
        table.add_row(
            row.label,
            f"{row.value:g}",
            f"{row.overall_average:g}",
            row.band.value.capitalize(),
            f"-{row.penalty:g}" if row.penalty > 0 else "0",
            row.icon,
        )
    console.print(table)

    if report.recommendations:
        console.print("\nTop actions for next week:", style="bold")
        for i, rec in enumerate(report.recommendations, 1):
            console.print(f"  {i}. {rec.summary}")
    else:
        console.print("Great work! You incurred no penalties this week.", style="green")


def check_configuration() -> bool:
    console.print(Panel("Configuration", style="blue"))
    try:
        validate_config()
        print_config_summary()
        return True
    except Exception as e:
        console.print(f"Configuration failed: {e}", style="red")
        return False


def run_scenario(name: str) -> bool:
    console.print(Panel(f"Scenario: {name}", style="blue"))
    config = get_config()
    catalog, regions = get_catalog(config.scoring.catalog_path)

    session = AuditSession(region_id=config.session.region)
    session.select_demographics(config.session.age_range, config.session.gender)
    for marker_id, value in SCENARIOS[name].items():
        session.record_answer(marker_id, value)

    render_report(build_report(session, catalog, regions, config.scoring))
    return True


def check_error_handling() -> bool:
    """Answers for a marker the catalog lacks must be rejected, not scored."""
    console.print(Panel("Error handling", style="blue"))
    catalog, _ = get_catalog(get_config().scoring.catalog_path)
    try:
        score({"not_a_marker": 1}, catalog)
    except UnknownMarkerError as e:
        console.print(f"Rejected as expected: {e}", style="green")
        return True
    console.print("Unknown marker was scored silently", style="red")
    return False


def main(argv: list[str]) -> int:
    config = get_config()
    logging.basicConfig(level=config.logging.level, format="%(message)s")

    scenarios = argv or list(SCENARIOS)
    unknown = [s for s in scenarios if s not in SCENARIOS]
    if unknown:
        console.print(f"Unknown scenario(s): {', '.join(unknown)}", style="red")
        return 2

    results = [check_configuration()]
    results.extend(run_scenario(name) for name in scenarios)
    results.append(check_error_handling())

    passed = sum(results)
    style = "green" if passed == len(results) else "red"
    console.print(f"\n{passed}/{len(results)} checks passed", style=style)
    return 0 if passed == len(results) else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
