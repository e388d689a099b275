"""
Domain models for the habit audit.

These models represent the core business concepts and are framework-agnostic.
Catalog data (markers, regions) is frozen once loaded; only the session state
a user edits is mutable.
"""

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

AGE_RANGES: tuple[str, ...] = ("18-24", "25-34", "35-44", "45-54", "55+")
GENDERS: tuple[str, ...] = ("female", "male", "other")


class UnknownMarkerError(KeyError):
    """A marker id was referenced that the catalog does not define."""

    def __init__(self, marker_id: str) -> None:
        super().__init__(marker_id)
        self.marker_id = marker_id

    def __str__(self) -> str:
        return f"Unknown marker id: {self.marker_id!r}"


class Band(str, Enum):
    """Qualitative severity tiers, best to worst."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MILD = "mild"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_BAD = "very bad"


class Bands(BaseModel):
    """Threshold values for each penalised band."""

    model_config = ConfigDict(frozen=True)

    mild: float
    moderate: float
    high: float


class Penalties(BaseModel):
    """Point costs for each penalised band."""

    model_config = ConfigDict(frozen=True)

    mild: float = Field(ge=0.0)
    moderate: float = Field(ge=0.0)
    high: float = Field(ge=0.0)

    @model_validator(mode="after")
    def non_decreasing_with_severity(self) -> "Penalties":
        if not self.mild <= self.moderate <= self.high:
            raise ValueError("penalties must satisfy mild <= moderate <= high")
        return self


class MarkerNotes(BaseModel):
    """Guidance shown next to a marker that falls into a warning band."""

    model_config = ConfigDict(frozen=True)

    mild: str | None = None
    high: str | None = None


class Marker(BaseModel):
    """A single tracked lifestyle habit."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    label: str
    unit: str
    invert: bool = Field(default=False, description="True when higher values are better")
    bands: Bands
    penalties: Penalties
    baseline: float = Field(description="Fallback average when no region value exists")
    citation: str = ""
    description: str = ""
    notes: MarkerNotes = Field(default_factory=MarkerNotes)

    @model_validator(mode="after")
    def bands_ordered_by_severity(self) -> "Marker":
        b = self.bands
        if self.invert:
            # Beneficial markers get worse as values fall
            if not b.mild > b.moderate > b.high:
                raise ValueError(
                    f"{self.id}: inverted bands must satisfy mild > moderate > high"
                )
        elif not b.mild < b.moderate < b.high:
            raise ValueError(f"{self.id}: bands must satisfy mild < moderate < high")
        return self


class Region(BaseModel):
    """Regional overall averages per marker."""

    model_config = ConfigDict(frozen=True)

    label: str
    baselines: dict[str, float] = Field(default_factory=dict)


class MarkerCatalog(BaseModel):
    """Ordered, validated collection of markers."""

    model_config = ConfigDict(frozen=True)

    markers: tuple[Marker, ...]

    @model_validator(mode="after")
    def unique_ids(self) -> "MarkerCatalog":
        seen: set[str] = set()
        for marker in self.markers:
            if marker.id in seen:
                raise ValueError(f"duplicate marker id: {marker.id}")
            seen.add(marker.id)
        return self

    def get(self, marker_id: str) -> Marker:
        for marker in self.markers:
            if marker.id == marker_id:
                return marker
        raise UnknownMarkerError(marker_id)

    def ids(self) -> list[str]:
        return [m.id for m in self.markers]

    def require(self, marker_ids: Mapping[str, object] | list[str]) -> None:
        """Raise UnknownMarkerError for the first id not in the catalog."""
        known = set(self.ids())
        for marker_id in marker_ids:
            if marker_id not in known:
                raise UnknownMarkerError(marker_id)

    def __contains__(self, marker_id: object) -> bool:
        return any(m.id == marker_id for m in self.markers)

    def __len__(self) -> int:
        return len(self.markers)


class RegionTable(BaseModel):
    """Region id to Region mapping, loaded once."""

    model_config = ConfigDict(frozen=True)

    regions: dict[str, Region] = Field(default_factory=dict)

    def get(self, region_id: str | None) -> Region | None:
        if region_id is None:
            return None
        return self.regions.get(region_id)

    def keys(self) -> Iterator[str]:
        return iter(self.regions)


class DemographicSelection(BaseModel):
    """Age bracket and gender chosen by the user before scoring."""

    model_config = ConfigDict(validate_assignment=True)

    age_range: str = "25-34"
    gender: str = "other"


class Classification(BaseModel):
    """Band and penalty for a single value."""

    model_config = ConfigDict(frozen=True)

    band: Band
    penalty: float = Field(ge=0.0)


class Deduction(BaseModel):
    """Points removed from the score for one marker."""

    model_config = ConfigDict(frozen=True)

    marker_id: str
    label: str
    value: float
    penalty: float = Field(gt=0.0)
    band: Band
    citation: str
    description: str


class ScoreResult(BaseModel):
    """Bounded score plus deductions in catalog order."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0.0, le=100.0)
    deductions: tuple[Deduction, ...] = ()

    @property
    def total_penalty(self) -> float:
        return sum(d.penalty for d in self.deductions)


class Recommendation(BaseModel):
    """A directional suggestion derived from a deduction."""

    model_config = ConfigDict(frozen=True)

    marker_id: str
    label: str
    direction: Literal["increase", "reduce"]
    target: float
    unit: str
    action: str
    potential_gain: float
    citation: str

    @property
    def summary(self) -> str:
        return f"{self.action} for a potential gain of {self.potential_gain:g} points [{self.citation}]"


class AuditSession(BaseModel):
    """Explicit session state: region, demographics and answers so far."""

    model_config = ConfigDict(validate_assignment=True)

    region_id: str = "uk"
    demographics: DemographicSelection = Field(default_factory=DemographicSelection)
    answers: dict[str, float] = Field(default_factory=dict)

    def record_answer(self, marker_id: str, value: float) -> None:
        self.answers[marker_id] = float(value)

    def select_demographics(self, age_range: str, gender: str) -> None:
        self.demographics = DemographicSelection(age_range=age_range, gender=gender)

    def reset_answers(self) -> None:
        self.answers = {}


class BreakdownRow(BaseModel):
    """One line of the detailed breakdown table (4-tier classification)."""

    model_config = ConfigDict(frozen=True)

    marker_id: str
    label: str
    unit: str
    value: float
    overall_average: float
    band: Band
    penalty: float
    icon: str
    note: str | None = None


class ChartSeries(BaseModel):
    """Parallel per-marker series for the comparison charts."""

    model_config = ConfigDict(frozen=True)

    labels: list[str]
    user_values: list[float]
    group_avg_values: list[float]
    overall_avg_values: list[float]


class AuditReport(BaseModel):
    """Everything the presentation layer needs to render a result."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0.0, le=100.0)
    color: Literal["green", "amber", "red"]
    celebrate: bool
    group_score: float = Field(ge=0.0, le=100.0)
    overall_score: float = Field(ge=0.0, le=100.0)
    region_label: str | None
    demographics: DemographicSelection
    deductions: tuple[Deduction, ...]
    rows: tuple[BreakdownRow, ...]
    recommendations: tuple[Recommendation, ...]
    chart: ChartSeries
