"""Data models for the impact effects pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from impact_effects.constants import DEFAULT_PHYSICAL

if TYPE_CHECKING:
    from impact_effects.blast import BlastProfile
    from impact_effects.geo import GeographicImpactData
    from impact_effects.mitigation import MitigationPlan
    from impact_effects.seismic import SeismicProfile


class InvalidParameter(ValueError):
    """An impactor parameter is missing or outside its physical range."""


class StageComputationError(Exception):
    """A pipeline stage cannot run because an upstream value is missing or non-finite."""


def _require_positive(name: str, value: float | None) -> None:
    if value is None or not math.isfinite(value) or value <= 0:
        raise InvalidParameter(f"{name} must be a finite number > 0, got {value!r}")


def _require_range(name: str, value: float, low: float, high: float) -> None:
    if not math.isfinite(value) or not low <= value <= high:
        raise InvalidParameter(f"{name} must be within [{low}, {high}], got {value!r}")


@dataclass(frozen=True)
class ImpactorSpec:
    """Input parameters for one impact scenario.

    A supplied ``mass_kg`` takes precedence over the diameter/density-derived
    mass. ``latitude``/``longitude`` are given together (user-provided impact
    point) or not at all; the same holds for the approach geometry pair
    ``right_ascension_deg``/``declination_deg``.
    """

    diameter_m: float
    velocity_km_s: float
    density_kg_m3: float = DEFAULT_PHYSICAL.default_density_kg_m3
    mass_kg: float | None = None
    miss_distance_km: float = 0.0
    approach_lunar_distances: float | None = None
    is_hazardous: bool = False
    impact_date: datetime | None = None
    latitude: float | None = None
    longitude: float | None = None
    right_ascension_deg: float | None = None
    declination_deg: float | None = None
    days_until_impact: int | None = None
    name: str = "Custom impact scenario"
    neo_id: str = ""

    def __post_init__(self) -> None:
        _require_positive("diameter_m", self.diameter_m)
        _require_positive("velocity_km_s", self.velocity_km_s)
        _require_positive("density_kg_m3", self.density_kg_m3)
        if self.mass_kg is not None:
            _require_positive("mass_kg", self.mass_kg)
        if not math.isfinite(self.miss_distance_km) or self.miss_distance_km < 0:
            raise InvalidParameter(
                f"miss_distance_km must be >= 0, got {self.miss_distance_km!r}"
            )
        if self.approach_lunar_distances is not None and (
            not math.isfinite(self.approach_lunar_distances)
            or self.approach_lunar_distances < 0
        ):
            raise InvalidParameter(
                "approach_lunar_distances must be >= 0, "
                f"got {self.approach_lunar_distances!r}"
            )

        if (self.latitude is None) != (self.longitude is None):
            raise InvalidParameter("latitude and longitude must be supplied together")
        if self.latitude is not None and self.longitude is not None:
            _require_range("latitude", self.latitude, -90.0, 90.0)
            _require_range("longitude", self.longitude, -180.0, 180.0)

        if (self.right_ascension_deg is None) != (self.declination_deg is None):
            raise InvalidParameter(
                "right_ascension_deg and declination_deg must be supplied together"
            )
        if self.right_ascension_deg is not None and self.declination_deg is not None:
            _require_range("right_ascension_deg", self.right_ascension_deg, 0.0, 360.0)
            _require_range("declination_deg", self.declination_deg, -90.0, 90.0)

        if self.days_until_impact is not None and self.days_until_impact < 0:
            raise InvalidParameter(
                f"days_until_impact must be >= 0, got {self.days_until_impact!r}"
            )

    @property
    def has_user_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def velocity_m_s(self) -> float:
        return self.velocity_km_s * 1000


@dataclass(frozen=True)
class EnergyProfile:
    """Mass and kinetic energy of the impactor."""

    mass_kg: float
    kinetic_energy_j: float
    megatons: float
    kilotons: float
    mass_source: str  # "supplied" | "derived"


@dataclass(frozen=True)
class CraterEstimate:
    """Final crater size from energy scaling."""

    diameter_m: float
    radius_m: float

    @property
    def radius_km(self) -> float:
        return self.radius_m / 1000


@dataclass(frozen=True)
class ImpactProbability:
    """Distance-based impact probability and its risk label."""

    value: float
    percentage: str
    risk_level: str


@dataclass(frozen=True)
class NextPassEstimate:
    """Rough next-approach estimate from a circular 1 AU vis-viva orbit."""

    period_seconds: float
    period_days: float
    period_years: float
    next_pass_date: str | None
    confidence: str = "low"
    note: str = (
        "Simplified estimate. Actual orbital mechanics require precise tracking "
        "and perturbation analysis."
    )


@dataclass(frozen=True)
class EffectWarning:
    """A warning emitted by a stage. Lower priority numbers sort first."""

    severity: str
    message: str
    category: str = ""
    priority: int = 3


@dataclass(frozen=True)
class StageError:
    """Marker left in a report slot when that stage could not be computed."""

    stage: str
    error: str
    details: str = ""


@dataclass(frozen=True)
class RolledUpWarning:
    """A CRITICAL or EXTREME warning lifted into the report summary."""

    stage: str
    severity: str
    message: str
    category: str = ""


@dataclass(frozen=True)
class Summary:
    """Top-level severity summary of a report."""

    threat_level: str
    impact_scale: str
    urgency_level: str
    primary_effects: list[str] = field(default_factory=list)
    secondary_effects: list[str] = field(default_factory=list)
    recommended_actions: list[str] = field(default_factory=list)
    critical_warnings: list[RolledUpWarning] = field(default_factory=list)


@dataclass(frozen=True)
class EffectsReport:
    """Complete effects report for a single impactor.

    Stage slots hold either the stage payload or a :class:`StageError`.
    """

    spec: ImpactorSpec
    energy: EnergyProfile
    crater: CraterEstimate
    probability: ImpactProbability
    next_pass: NextPassEstimate | None = None
    geographic: GeographicImpactData | StageError | None = None
    seismic: SeismicProfile | StageError | None = None
    blast: BlastProfile | StageError | None = None
    mitigation: MitigationPlan | StageError | None = None
    summary: Summary | None = None

    @property
    def errors(self) -> list[StageError]:
        slots = (self.geographic, self.seismic, self.blast, self.mitigation)
        return [s for s in slots if isinstance(s, StageError)]


@dataclass(frozen=True)
class MostDangerousObject:
    """The feed object with the highest impact probability."""

    name: str
    date: str
    probability_percentage: str
    risk_level: str


@dataclass(frozen=True)
class FeedSummary:
    """Aggregate statistics over a batch of reports."""

    total_objects: int
    hazardous_count: int
    non_hazardous_count: int
    max_crater_diameter_m: float
    highest_impact_probability: float
    highest_impact_percentage: str
    most_dangerous: MostDangerousObject | None = None


@dataclass(frozen=True)
class FeedResult:
    """Reports for a feed scan plus their summary."""

    reports: list[EffectsReport]
    summary: FeedSummary
