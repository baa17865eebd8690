"""Report summary and feed-level aggregation."""

from __future__ import annotations

from impact_effects.blast import BlastProfile, impact_category
from impact_effects.mitigation import MitigationPlan
from impact_effects.models import (
    EffectsReport,
    EffectWarning,
    FeedSummary,
    MostDangerousObject,
    RolledUpWarning,
    Summary,
)
from impact_effects.seismic import SeismicProfile

CRITICAL_SEVERITIES = frozenset({"CRITICAL", "EXTREME"})

# (threat, minimum megatons, minimum magnitude, minimum blast radius km)
THREAT_LADDER: tuple[tuple[str, float, float | None, float | None], ...] = (
    ("EXTINCTION-LEVEL", 1e6, 9.5, None),
    ("CATASTROPHIC", 1e4, 8.5, 500.0),
    ("SEVERE", 100.0, 7.5, 100.0),
    ("HIGH", 1.0, 6.5, 20.0),
    ("MODERATE", 0.01, None, 1.0),
)

# (exclusive upper bound in days, urgency)
URGENCY_LADDER: tuple[tuple[int, str], ...] = (
    (7, "IMMEDIATE"),
    (30, "CRITICAL"),
    (365, "HIGH"),
    (3650, "ELEVATED"),
)


def threat_level(
    megatons: float,
    magnitude: float | None = None,
    max_radius_km: float | None = None,
) -> str:
    """Overall threat label; any one of the three measures can raise the tier."""
    for label, min_mt, min_mag, min_radius in THREAT_LADDER:
        if megatons >= min_mt:
            return label
        if min_mag is not None and magnitude is not None and magnitude >= min_mag:
            return label
        if min_radius is not None and max_radius_km is not None and max_radius_km >= min_radius:
            return label
    return "MINIMAL"


def urgency_level(days: int | None, threat: str) -> str:
    if threat == "MINIMAL":
        return "LOW"
    if days is None:
        return "UNDETERMINED"
    for upper, label in URGENCY_LADDER:
        if days < upper:
            return label
    return "MONITOR"


def _roll_up(stage: str, warnings: list[EffectWarning]) -> list[RolledUpWarning]:
    return [
        RolledUpWarning(stage=stage, severity=w.severity, message=w.message, category=w.category)
        for w in warnings
        if w.severity in CRITICAL_SEVERITIES
    ]


def _primary_effects(
    report: EffectsReport, seismic: SeismicProfile | None, blast: BlastProfile | None
) -> list[str]:
    effects = [f"Crater approximately {report.crater.diameter_m / 1000:.2f} km in diameter"]
    if blast is not None:
        effects.append(
            f"Total destruction within {blast.blast_zones['total_destruction'].radius_km:.1f} km"
        )
        effects.append(
            "Third-degree burns out to "
            f"{blast.thermal_zones['third_degree_burns'].radius_km:.1f} km"
        )
    if seismic is not None:
        effects.append(
            f"Magnitude {seismic.magnitude.primary_magnitude:.1f} earthquake "
            f"({seismic.magnitude.magnitude_class})"
        )
        if seismic.tsunami_warning is not None:
            effects.append(f"Tsunami with {seismic.tsunami_warning.estimated_wave_height} waves")
    return effects


def _secondary_effects(seismic: SeismicProfile | None, blast: BlastProfile | None) -> list[str]:
    effects: list[str] = []
    if blast is not None:
        env = blast.environment
        effects.append(
            f"Dust and debris out to {env.dust_radius_km:.0f} km ({env.dust_duration})"
        )
        if env.climate_impact is not None:
            effects.append(env.climate_impact.description)
        if env.ozone_depletion is not None:
            effects.append(f"{env.ozone_depletion.severity} ozone depletion")
        if env.acid_rain is not None:
            effects.append(f"Acid rain within {env.acid_rain.radius_km:.0f} km")
    if seismic is not None:
        effects.append(
            f"{seismic.aftershocks.expected_next_24h} aftershocks expected in the first 24 hours"
        )
        effects.append(seismic.global_impact.description)
    return effects


def _recommended_actions(mitigation: MitigationPlan | None, blast: BlastProfile | None) -> list[str]:
    actions: list[str] = []
    if mitigation is not None:
        actions.extend(rec.action for rec in mitigation.key_recommendations)
    if blast is not None:
        red = blast.evacuation_zones["red"]
        actions.append(f"Evacuate everyone within {red.radius_km:.1f} km of ground zero")
    return actions


def build_summary(report: EffectsReport) -> Summary:
    """Derive the top-level summary from whatever stages completed.

    Stages holding a :class:`~impact_effects.models.StageError` are skipped.
    """
    seismic = report.seismic if isinstance(report.seismic, SeismicProfile) else None
    blast = report.blast if isinstance(report.blast, BlastProfile) else None
    mitigation = report.mitigation if isinstance(report.mitigation, MitigationPlan) else None

    magnitude = seismic.magnitude.primary_magnitude if seismic is not None else None
    radius = blast.zone_summary.max_affected_radius_km if blast is not None else None
    threat = threat_level(report.energy.megatons, magnitude, radius)
    days = mitigation.days_until_impact if mitigation is not None else None

    critical: list[RolledUpWarning] = []
    if seismic is not None:
        critical.extend(_roll_up("seismic", seismic.warnings))
    if blast is not None:
        critical.extend(_roll_up("blast", blast.warnings))

    return Summary(
        threat_level=threat,
        impact_scale=impact_category(report.energy.megatons),
        urgency_level=urgency_level(days, threat),
        primary_effects=_primary_effects(report, seismic, blast),
        secondary_effects=_secondary_effects(seismic, blast),
        recommended_actions=_recommended_actions(mitigation, blast),
        critical_warnings=critical,
    )


def summarize_feed(reports: list[EffectsReport]) -> FeedSummary:
    """Totals, hazard counts and the most probable impactor across a batch."""
    hazardous = sum(1 for r in reports if r.spec.is_hazardous)
    max_crater = 0.0
    highest = 0.0
    most_dangerous: MostDangerousObject | None = None

    for r in reports:
        if r.crater.diameter_m > max_crater:
            max_crater = r.crater.diameter_m
        if r.probability.value > highest:
            highest = r.probability.value
            most_dangerous = MostDangerousObject(
                name=r.spec.name,
                date=r.spec.impact_date.date().isoformat() if r.spec.impact_date else "",
                probability_percentage=r.probability.percentage,
                risk_level=r.probability.risk_level,
            )

    return FeedSummary(
        total_objects=len(reports),
        hazardous_count=hazardous,
        non_hazardous_count=len(reports) - hazardous,
        max_crater_diameter_m=max_crater,
        highest_impact_probability=highest,
        highest_impact_percentage=f"{highest * 100:.8f}",
        most_dangerous=most_dangerous,
    )
