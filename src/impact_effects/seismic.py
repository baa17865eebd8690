"""Seismic model: impact energy to earthquake magnitude, shaking and aftershocks."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from impact_effects.constants import (
    DEFAULT_PHYSICAL,
    DEFAULT_SEISMIC,
    PhysicalConstants,
    SeismicConstants,
)
from impact_effects.geo import GeographicRisk
from impact_effects.models import EffectWarning, StageComputationError

logger = logging.getLogger(__name__)

SEVERITY_ORDER: dict[str, int] = {
    "EXTREME": 0,
    "CRITICAL": 1,
    "HIGH": 2,
    "MODERATE": 3,
    "INFO": 4,
}

# (magnitude, name, year, description)
HISTORICAL_EARTHQUAKES: tuple[tuple[float, str, int | None, str], ...] = (
    (9.5, "1960 Valdivia, Chile", 1960, "Largest recorded earthquake"),
    (9.2, "1964 Alaska", 1964, "Second largest recorded"),
    (9.1, "2011 Tōhoku, Japan", 2011, "Triggered devastating tsunami"),
    (9.0, "2004 Indian Ocean", 2004, "Generated catastrophic tsunami"),
    (8.8, "2010 Chile", 2010, "Major structural damage"),
    (7.9, "2008 Sichuan, China", 2008, "Thousands of casualties"),
    (7.0, "2010 Haiti", 2010, "Massive devastation in populated area"),
    (6.9, "1989 Loma Prieta, California", 1989, "Significant damage to infrastructure"),
    (6.0, "2014 Napa, California", 2014, "Strong shaking, moderate damage"),
    (5.0, "Typical moderate earthquake", None, "Felt widely, minor damage"),
)

MMI_DESCRIPTIONS: dict[int, str] = {
    1: "Not felt",
    2: "Weak - Felt by few",
    3: "Weak - Felt by many indoors",
    4: "Light - Felt by most indoors",
    5: "Moderate - Felt by all, some damage",
    6: "Strong - Felt by all, significant damage",
    7: "Very Strong - Difficult to stand",
    8: "Severe - Heavy damage to buildings",
    9: "Violent - Buildings collapse",
    10: "Extreme - Most buildings destroyed",
    11: "Extreme - Total destruction",
    12: "Total - Complete devastation",
}


@dataclass(frozen=True)
class HistoricalAnalogue:
    magnitude: float
    name: str
    year: int | None
    description: str
    comparison: str  # "stronger than" | "weaker than" | "similar to"


@dataclass(frozen=True)
class SeismicMagnitude:
    richter_magnitude: float
    moment_magnitude: float
    primary_magnitude: float
    seismic_energy_j: float
    seismic_energy_megatons: float
    conversion_efficiency: float
    impact_type: str  # "Land" | "Ocean"
    magnitude_class: str
    equivalent_earthquake: HistoricalAnalogue


@dataclass(frozen=True)
class PeakGroundAcceleration:
    value_g: float
    meters_per_second_squared: float
    description: str


@dataclass(frozen=True)
class RegionalEffect:
    distance_km: float
    magnitude_at_distance: float
    modified_mercalli_intensity: int
    intensity_description: str
    expected_damage: str
    peak_ground_acceleration: PeakGroundAcceleration


@dataclass(frozen=True)
class AftershockForecast:
    expected_next_24h: int
    expected_largest_magnitude: float
    duration: str
    rate_decay: str = "Exponential decay following Omori's Law"


@dataclass(frozen=True)
class TsunamiWarning:
    risk: str
    message: str
    wave_height_min_m: int
    wave_height_max_m: int
    estimated_wave_height: str
    affected_coastlines: str = "All coastlines within 1000+ km"
    arrival_time: str = "15-60 minutes for nearby coasts, hours for distant coasts"


@dataclass(frozen=True)
class GlobalImpact:
    level: str
    description: str
    societal_impact: str
    economic_impact: str
    casualties: str


@dataclass(frozen=True)
class SeismicComparison:
    energy_released: str
    natural_earthquake_equivalent: HistoricalAnalogue
    note: str = "For reference, the largest nuclear weapon ever tested was 50 megatons"


@dataclass(frozen=True)
class SeismicProfile:
    magnitude: SeismicMagnitude
    regional_effects: dict[str, RegionalEffect]
    aftershocks: AftershockForecast
    global_impact: GlobalImpact
    comparison: SeismicComparison
    tsunami_warning: TsunamiWarning | None = None
    warnings: list[EffectWarning] = field(default_factory=list)


def round_half_up(value: float) -> int:
    """Nearest integer with halves rounded up; round() rounds half to even."""
    return math.floor(value + 0.5)


def select_primary_magnitude(
    richter: float, moment: float, threshold: float = DEFAULT_SEISMIC.magnitude_switch
) -> float:
    """Moment magnitude for large events, Richter otherwise.

    The switch is strict: a Richter value exactly at the threshold stays Richter.
    """
    return moment if richter > threshold else richter


def magnitude_class(magnitude: float) -> str:
    if magnitude < 3.0:
        return "Minor - Often not felt"
    if magnitude < 4.0:
        return "Light - Felt by many, rarely causes damage"
    if magnitude < 5.0:
        return "Moderate - Damage to poorly constructed buildings"
    if magnitude < 6.0:
        return "Strong - Damage to buildings in populated areas"
    if magnitude < 7.0:
        return "Major - Serious damage over large areas"
    if magnitude < 8.0:
        return "Great - Devastating damage over very large areas"
    return "Epic - Catastrophic destruction across continents"


def equivalent_earthquake(magnitude: float) -> HistoricalAnalogue:
    """Closest historical earthquake by magnitude; ties keep the weaker event."""
    closest = HISTORICAL_EARTHQUAKES[-1]
    best = abs(magnitude - closest[0])
    for event in HISTORICAL_EARTHQUAKES:
        diff = abs(magnitude - event[0])
        if diff < best:
            best = diff
            closest = event

    mag, name, year, description = closest
    if magnitude > mag:
        comparison = "stronger than"
    elif magnitude < mag:
        comparison = "weaker than"
    else:
        comparison = "similar to"
    return HistoricalAnalogue(
        magnitude=mag, name=name, year=year, description=description, comparison=comparison
    )


def seismic_magnitude(
    kinetic_energy_j: float | None,
    is_ocean: bool = False,
    constants: SeismicConstants = DEFAULT_SEISMIC,
    physical: PhysicalConstants = DEFAULT_PHYSICAL,
) -> SeismicMagnitude:
    """Convert impact kinetic energy to Richter and moment magnitudes.

    Only a fraction of the energy couples into seismic waves (0.5 % on land,
    0.2 % in the ocean). With ``Es`` the seismic energy in joules:

        Richter = 2/3 * log10(Es) - 2.9
        Moment  = 2/3 * log10(Es) - 10.7 + 8.0
    """
    if kinetic_energy_j is None or not math.isfinite(kinetic_energy_j) or kinetic_energy_j <= 0:
        raise StageComputationError(
            f"Kinetic energy not available for calculation: {kinetic_energy_j!r}"
        )

    efficiency = constants.efficiency_ocean if is_ocean else constants.efficiency_land
    seismic_energy = kinetic_energy_j * efficiency
    log_energy = constants.richter_conversion * math.log10(seismic_energy)

    richter = log_energy - constants.richter_offset
    moment = log_energy - constants.moment_offset + constants.moment_adjustment
    primary = select_primary_magnitude(richter, moment, constants.magnitude_switch)

    return SeismicMagnitude(
        richter_magnitude=round(richter, 2),
        moment_magnitude=round(moment, 2),
        primary_magnitude=round(primary, 2),
        seismic_energy_j=seismic_energy,
        seismic_energy_megatons=round(seismic_energy / physical.joules_per_megaton, 4),
        conversion_efficiency=efficiency,
        impact_type="Ocean" if is_ocean else "Land",
        magnitude_class=magnitude_class(primary),
        equivalent_earthquake=equivalent_earthquake(primary),
    )


def mmi_description(mmi: int) -> str:
    return MMI_DESCRIPTIONS[min(12, max(1, mmi))]


def expected_damage(mmi: int) -> str:
    if mmi <= 4:
        return "No structural damage expected"
    if mmi <= 6:
        return "Minor to moderate damage to buildings"
    if mmi <= 8:
        return "Severe damage to buildings, infrastructure at risk"
    if mmi <= 10:
        return "Catastrophic damage, widespread collapse"
    return "Total devastation, complete destruction of infrastructure"


def pga_description(pga_g: float) -> str:
    if pga_g < 0.005:
        return "Imperceptible"
    if pga_g < 0.05:
        return "Weak shaking"
    if pga_g < 0.1:
        return "Moderate shaking"
    if pga_g < 0.3:
        return "Strong shaking"
    if pga_g < 0.6:
        return "Very strong shaking"
    return "Extreme shaking"


def peak_ground_acceleration(
    magnitude: float,
    distance_km: float,
    constants: SeismicConstants = DEFAULT_SEISMIC,
    physical: PhysicalConstants = DEFAULT_PHYSICAL,
) -> PeakGroundAcceleration:
    """log10(PGA[g]) = a*M - b*log10(max(1, d)) - c."""
    log_pga = (
        constants.pga_a * magnitude
        - constants.pga_b * math.log10(max(1.0, distance_km))
        - constants.pga_c
    )
    pga_g = math.pow(10, log_pga)
    return PeakGroundAcceleration(
        value_g=round(pga_g, 4),
        meters_per_second_squared=round(pga_g * physical.gravity_m_s2, 2),
        description=pga_description(pga_g),
    )


def regional_effect(
    magnitude: float,
    distance_km: float,
    is_ocean: bool = False,
    constants: SeismicConstants = DEFAULT_SEISMIC,
) -> RegionalEffect:
    """Attenuated magnitude, Mercalli intensity and PGA at a given distance."""
    beta = constants.beta_ocean if is_ocean else constants.beta_land
    m_at_d = magnitude - beta * math.log10(distance_km / constants.reference_distance_km)
    mmi = 1.5 * m_at_d - 1.5 * math.log10(max(1.0, distance_km)) + 1.78
    mmi_rounded = round_half_up(max(1.0, min(12.0, mmi)))
    return RegionalEffect(
        distance_km=distance_km,
        magnitude_at_distance=round(m_at_d, 2),
        modified_mercalli_intensity=mmi_rounded,
        intensity_description=mmi_description(mmi_rounded),
        expected_damage=expected_damage(mmi_rounded),
        peak_ground_acceleration=peak_ground_acceleration(m_at_d, distance_km, constants),
    )


def aftershock_forecast(
    magnitude: float, constants: SeismicConstants = DEFAULT_SEISMIC
) -> AftershockForecast:
    """Omori's law: n(t) = K / (c + t)^p with K = 10^(M - 4)."""
    productivity = math.pow(10, magnitude - 4)
    hours = constants.forecast_hours
    rate_per_hour = productivity / math.pow(constants.omori_c_hours + hours, constants.omori_p)
    return AftershockForecast(
        expected_next_24h=round_half_up(rate_per_hour * 24),
        expected_largest_magnitude=round(magnitude - constants.largest_aftershock_drop, 1),
        duration="Months to years" if magnitude > 7 else "Days to weeks",
    )


def tsunami_warning(
    magnitude: float, is_ocean: bool, constants: SeismicConstants = DEFAULT_SEISMIC
) -> TsunamiWarning | None:
    if not is_ocean or magnitude < constants.tsunami_threshold:
        return None
    low = round_half_up(math.pow(10, magnitude - 6))
    high = round_half_up(math.pow(10, magnitude - 5))
    return TsunamiWarning(
        risk="HIGH",
        message="Ocean impact with high seismic magnitude. Tsunami generation likely.",
        wave_height_min_m=low,
        wave_height_max_m=high,
        estimated_wave_height=f"{low} - {high} meters",
    )


def global_impact(magnitude: float) -> GlobalImpact:
    if magnitude >= 9.5:
        return GlobalImpact(
            level="EXTINCTION-LEVEL",
            description="Global catastrophe, potential mass extinction event",
            societal_impact="Complete collapse of global civilization",
            economic_impact="Incalculable",
            casualties="Billions",
        )
    if magnitude >= 8.5:
        return GlobalImpact(
            level="CONTINENTAL",
            description="Continental-scale devastation",
            societal_impact="Multiple nations severely affected",
            economic_impact="Trillions of dollars",
            casualties="Millions to tens of millions",
        )
    if magnitude >= 7.5:
        return GlobalImpact(
            level="REGIONAL",
            description="Major regional disaster",
            societal_impact="Regional infrastructure collapse",
            economic_impact="Hundreds of billions",
            casualties="Hundreds of thousands to millions",
        )
    if magnitude >= 6.5:
        return GlobalImpact(
            level="SIGNIFICANT",
            description="Significant local disaster",
            societal_impact="Local disruption, potential displacement",
            economic_impact="Tens of billions",
            casualties="Thousands to hundreds of thousands",
        )
    return GlobalImpact(
        level="MODERATE",
        description="Localized effects",
        societal_impact="Limited disruption",
        economic_impact="Millions to billions",
        casualties="Hundreds to thousands",
    )


def seismic_warnings(
    magnitude: float, is_ocean: bool, regional_risk_level: str | None = None
) -> list[EffectWarning]:
    """Warnings for a quake of the given magnitude, most severe first."""
    warnings: list[EffectWarning] = []
    if magnitude >= 7.0:
        warnings.append(
            EffectWarning(
                severity="CRITICAL",
                message=(
                    "Major earthquake expected. Immediate evacuation recommended "
                    "for all areas within 500 km."
                ),
                category="earthquake",
            )
        )
    if is_ocean and magnitude >= 7.0:
        warnings.append(
            EffectWarning(
                severity="CRITICAL",
                message=(
                    "TSUNAMI WARNING: Evacuate all coastal areas immediately. "
                    "Move to high ground."
                ),
                category="tsunami",
            )
        )
    if magnitude >= 8.0:
        warnings.append(
            EffectWarning(
                severity="EXTREME",
                message=(
                    "Catastrophic earthquake. Effects will be felt across multiple "
                    "regions. Prepare for extended disruption."
                ),
                category="earthquake",
            )
        )
    if regional_risk_level == "CATASTROPHIC":
        warnings.append(
            EffectWarning(
                severity="CRITICAL",
                message="Impact in populated area. Mass casualty event anticipated.",
                category="population",
            )
        )
    warnings.append(
        EffectWarning(
            severity="INFO",
            message="Aftershocks expected for days to weeks following the main event.",
            category="aftershocks",
        )
    )
    return sorted(warnings, key=lambda w: SEVERITY_ORDER.get(w.severity, len(SEVERITY_ORDER)))


def compute_seismic(
    kinetic_energy_j: float | None,
    geographic_risk: GeographicRisk | None = None,
    constants: SeismicConstants = DEFAULT_SEISMIC,
    physical: PhysicalConstants = DEFAULT_PHYSICAL,
) -> SeismicProfile:
    """Full seismic profile for an impact.

    The impact counts as oceanic only when the geographic classifier placed it
    in the ocean; without a classified point it is treated as a land impact.
    """
    is_ocean = geographic_risk is not None and geographic_risk.primary_region == "Ocean"
    magnitude = seismic_magnitude(kinetic_energy_j, is_ocean, constants, physical)
    primary = magnitude.primary_magnitude
    logger.debug(
        "Seismic magnitude %.2f (%s impact, richter %.2f)",
        primary,
        magnitude.impact_type,
        magnitude.richter_magnitude,
    )

    regional = {
        name: regional_effect(primary, distance, is_ocean, constants)
        for name, distance in constants.regional_distances_km
    }
    megatons = kinetic_energy_j / physical.joules_per_megaton
    return SeismicProfile(
        magnitude=magnitude,
        regional_effects=regional,
        aftershocks=aftershock_forecast(primary, constants),
        global_impact=global_impact(primary),
        comparison=SeismicComparison(
            energy_released=f"{megatons:.2f} megatons TNT",
            natural_earthquake_equivalent=magnitude.equivalent_earthquake,
        ),
        tsunami_warning=tsunami_warning(primary, is_ocean, constants),
        warnings=seismic_warnings(
            primary,
            is_ocean,
            geographic_risk.risk_level if geographic_risk is not None else None,
        ),
    )
