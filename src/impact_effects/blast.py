"""Blast, thermal and ejecta model using scaled nuclear-weapon equations.

Radii are in kilometres and yields in megatons of TNT throughout. Overpressure
radii follow the cube-root law ``R = k(P) * (Y * eff) ** (1/3)`` and thermal
radii ``R = 1.8 * (Y * 0.5) ** 0.41 / sqrt(Q / 100)``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from impact_effects.constants import (
    DEFAULT_BLAST,
    DEFAULT_PHYSICAL,
    BlastConstants,
    PhysicalConstants,
)
from impact_effects.geo import GeographicRisk
from impact_effects.models import EffectWarning, StageComputationError

logger = logging.getLogger(__name__)

# (key, overpressure psi, description, effects, survivability)
BLAST_ZONE_TABLE: tuple[tuple[str, float, str, tuple[str, ...], str], ...] = (
    (
        "total_destruction",
        20.0,
        "20 PSI - Total Destruction Zone",
        (
            "Complete destruction of all structures",
            "Reinforced concrete buildings severely damaged or collapsed",
            "Multi-story buildings completely destroyed",
            "Near 100% fatality rate",
            "Cratering and ground deformation",
        ),
        "0-1%",
    ),
    (
        "severe_damage",
        10.0,
        "10 PSI - Severe Damage Zone",
        (
            "Heavily damaged reinforced buildings",
            "Residential buildings collapsed",
            "Severe injuries from debris and collapse",
            "~95% fatality rate without shelter",
            "Major infrastructure destruction",
        ),
        "5-10%",
    ),
    (
        "moderate_damage",
        5.0,
        "5 PSI - Moderate Damage Zone",
        (
            "Moderate damage to buildings",
            "Wood frame buildings severely damaged",
            "Serious injuries common",
            "Widespread structural failures",
            "Flying debris hazard",
        ),
        "30-50%",
    ),
    (
        "light_damage",
        2.0,
        "2 PSI - Light Damage Zone",
        (
            "Light structural damage to buildings",
            "Doors and windows blown out",
            "Injuries from flying glass and debris",
            "Interior walls damaged",
            "Minor building collapse",
        ),
        "70-85%",
    ),
    (
        "minor_damage",
        1.0,
        "1 PSI - Minor Damage Zone",
        (
            "Shattered windows",
            "Minor structural damage",
            "Injuries from flying glass",
            "Doors displaced",
            "Light fixtures damaged",
        ),
        ">95%",
    ),
    (
        "glass_breakage",
        0.5,
        "0.5 PSI - Glass Breakage Zone",
        (
            "Window breakage",
            "Cosmetic damage",
            "Minor injuries from glass",
            "No structural damage",
            "Loud noise and shaking",
        ),
        ">99%",
    ),
)

# (minimum km/h, category)
WIND_CATEGORIES: tuple[tuple[float, str], ...] = (
    (500, "Hypersonic - Complete destruction"),
    (300, "Hurricane Category 5+ - Catastrophic"),
    (200, "Hurricane Category 3-4 - Devastating"),
    (150, "Hurricane Category 2 - Extensive damage"),
    (100, "Hurricane Category 1 - Significant damage"),
    (75, "Tropical Storm - Moderate damage"),
    (50, "Strong winds - Minor damage"),
)

# (minimum megatons, category)
IMPACT_CATEGORIES: tuple[tuple[float, str], ...] = (
    (1_000_000, "PLANETARY EXTINCTION"),
    (100_000, "MASS EXTINCTION"),
    (10_000, "CONTINENTAL DEVASTATION"),
    (1_000, "REGIONAL EXTINCTION"),
    (100, "REGIONAL CATASTROPHE"),
    (10, "MAJOR REGIONAL DISASTER"),
    (1, "SIGNIFICANT LOCAL DISASTER"),
    (0.1, "LOCAL DISASTER"),
)

# (threshold MT, name, event MT, year, description)
HISTORICAL_EVENTS: tuple[tuple[float, str, float, str, str], ...] = (
    (100_000_000, "Chicxulub Impact", 100_000_000, "66 million years ago", "Dinosaur extinction event"),
    (1_000_000, "Large asteroid impact", 10_000_000, "Prehistoric", "Mass extinction level"),
    (100_000, "Tunguska-class × 10000", 150_000, "Hypothetical", "Continental devastation"),
    (1_000, "Large comet impact", 5_000, "Hypothetical", "Regional extinction"),
    (100, "Meteor Crater × 100", 300, "Hypothetical", "Multi-state destruction"),
    (50, "Tsar Bomba", 50, "1961", "Largest nuclear weapon ever tested"),
    (10, "Large strategic warhead", 25, "Cold War era", "City-destroyer weapon"),
    (1, "Typical thermonuclear weapon", 5, "Modern", "Strategic nuclear weapon"),
    (0.1, "Tactical nuclear weapon", 0.3, "Modern", "Battlefield weapon"),
    (0.01, "Hiroshima bomb", 0.015, "1945", "First combat atomic weapon"),
)

POPULATION_RISK_LEVELS = frozenset({"CATASTROPHIC", "CRITICAL"})

ASSUMPTIONS = [
    "Standard atmosphere (sea level)",
    "Flat terrain",
    "Clear weather conditions",
    "Instantaneous energy release",
]
UNCERTAINTY_FACTORS = [
    "Actual terrain affects blast propagation",
    "Weather conditions affect thermal radiation",
    "Building construction quality varies",
    "Population density varies significantly",
]
REFERENCES = [
    "Glasstone & Dolan (1977) - The Effects of Nuclear Weapons",
    "Collins et al. (2005) - Earth Impact Effects Program",
    "Toon et al. (1997) - Environmental perturbations caused by impacts",
]


@dataclass(frozen=True)
class EnergyYield:
    joules: float
    megatons: float
    kilotons: float
    comparison: str


@dataclass(frozen=True)
class Fireball:
    radius_km: float
    diameter_km: float
    duration_s: float
    temperature_k: float
    temperature_c: float
    description: str = "Initial fireball - Everything vaporized instantly"


@dataclass(frozen=True)
class MushroomCloud:
    height_km: float
    cap_width_km: float
    reaches_stratosphere: bool
    global_distribution: bool


@dataclass(frozen=True)
class WindEffect:
    speed_m_s: float
    speed_km_h: float
    speed_mph: float
    overpressure_psi: float
    category: str


@dataclass(frozen=True)
class BlastZone:
    radius_km: float
    overpressure_psi: float
    overpressure_kpa: float
    description: str
    effects: list[str]
    survivability: str
    wind: WindEffect


@dataclass(frozen=True)
class ThermalZone:
    radius_km: float
    thermal_fluence: float
    description: str
    effect: str
    detail: str = ""


@dataclass(frozen=True)
class EjectaZone:
    radius_km: float
    description: str
    effect: str
    thickness_km: float | None = None


@dataclass(frozen=True)
class EjectaDistribution:
    continuous_blanket: EjectaZone
    discontinuous: EjectaZone
    dust_and_vapor: EjectaZone
    atmospheric: bool


@dataclass(frozen=True)
class ImpactZoneSummary:
    max_affected_radius_km: float
    total_affected_area_km2: float
    impact_type: str
    note: str = "Actual effects vary with terrain, weather, and target characteristics"


@dataclass(frozen=True)
class CasualtyZone:
    area_km2: float
    radius_km: float
    description: str


@dataclass(frozen=True)
class CasualtyEstimates:
    near_certain_fatality: CasualtyZone
    high_casualty: CasualtyZone
    moderate_casualty: CasualtyZone
    population_density_factors: dict[str, str]
    note: str = (
        "Casualty estimates are highly dependent on population density, time of "
        "day, building quality, and warning time"
    )


@dataclass(frozen=True)
class ClimateImpact:
    severity: str
    impact_type: str
    temperature_drop: str
    duration: str
    sunlight_reduction: str
    description: str


@dataclass(frozen=True)
class OzoneDepletion:
    severity: str
    duration: str
    recovery: str
    mechanism: str = "Nitrogen oxides from impact shock heating"


@dataclass(frozen=True)
class AcidRain:
    radius_km: float
    ph_range: str
    duration: str = "Months"


@dataclass(frozen=True)
class EnvironmentalEffects:
    shockwave_radius_km: float
    dust_radius_km: float
    dust_duration: str
    particulate_load: str
    climate_impact: ClimateImpact | None = None
    ozone_depletion: OzoneDepletion | None = None
    acid_rain: AcidRain | None = None


@dataclass(frozen=True)
class EvacuationZone:
    radius_km: float
    priority: str
    timeframe: str
    description: str
    actions: list[str]
    color: str


@dataclass(frozen=True)
class ComparableEvent:
    name: str
    megatons: float
    year: str
    description: str
    comparison: str


@dataclass(frozen=True)
class ImpactClassification:
    impact_type: str
    category: str
    total_destruction_area_km2: float
    severe_destruction_area_km2: float
    comparable_event: ComparableEvent


@dataclass(frozen=True)
class CalculationMetadata:
    method: str = "Scaled nuclear weapon equations adapted for kinetic impactors"
    assumptions: list[str] = field(default_factory=lambda: list(ASSUMPTIONS))
    uncertainty_factors: list[str] = field(default_factory=lambda: list(UNCERTAINTY_FACTORS))
    references: list[str] = field(default_factory=lambda: list(REFERENCES))


@dataclass(frozen=True)
class BlastProfile:
    energy_yield: EnergyYield
    fireball: Fireball
    blast_zones: dict[str, BlastZone]
    thermal_zones: dict[str, ThermalZone]
    ejecta: EjectaDistribution
    zone_summary: ImpactZoneSummary
    casualties: CasualtyEstimates
    environment: EnvironmentalEffects
    evacuation_zones: dict[str, EvacuationZone]
    classification: ImpactClassification
    mushroom_cloud: MushroomCloud | None = None
    metadata: CalculationMetadata = field(default_factory=CalculationMetadata)
    warnings: list[EffectWarning] = field(default_factory=list)


def blast_radius(
    yield_mt: float,
    overpressure_psi: float,
    impact_type: str = "surface",
    constants: BlastConstants = DEFAULT_BLAST,
) -> float:
    """Radius (km) at which the given overpressure is reached."""
    k = constants.scaling_constant(overpressure_psi)
    effective = yield_mt * constants.efficiency(impact_type)
    return max(0.0, k * math.pow(effective, 1 / 3))


def thermal_radius(
    yield_mt: float, fluence: float, constants: BlastConstants = DEFAULT_BLAST
) -> float:
    """Radius (km) receiving the given thermal fluence (cal/cm²)."""
    radius = (
        constants.thermal_k
        * math.pow(yield_mt * constants.atmospheric_transmission, constants.thermal_exponent)
        / math.sqrt(fluence / 100)
    )
    return max(0.0, radius)


def fireball_radius(yield_mt: float, constants: BlastConstants = DEFAULT_BLAST) -> float:
    return constants.fireball_k * math.pow(yield_mt, constants.fireball_exponent)


def mushroom_cloud(
    yield_mt: float, constants: BlastConstants = DEFAULT_BLAST
) -> MushroomCloud | None:
    """Cloud dimensions, or None below 0.1 MT."""
    if yield_mt < constants.mushroom_threshold_mt:
        return None
    height = constants.mushroom_height_k * math.pow(yield_mt, 0.25)
    return MushroomCloud(
        height_km=height,
        cap_width_km=constants.mushroom_cap_k * math.pow(yield_mt, 0.4),
        reaches_stratosphere=height > constants.stratosphere_km,
        global_distribution=yield_mt > 100,
    )


def wind_category(speed_km_h: float) -> str:
    for threshold, category in WIND_CATEGORIES:
        if speed_km_h >= threshold:
            return category
    return "Light winds - Minimal damage"


def wind_at_distance(
    yield_mt: float, distance_km: float, constants: BlastConstants = DEFAULT_BLAST
) -> WindEffect:
    """Peak overpressure and wind speed at a distance.

    P = 10 * (0.40 * Y^(1/3) / max(d, 0.1)) ** 1.5 and v = 5 * sqrt(P) m/s.
    """
    reference_distance = constants.wind_reference_k * math.pow(yield_mt, 1 / 3)
    overpressure = constants.wind_reference_psi * math.pow(
        reference_distance / max(distance_km, 0.1), constants.wind_attenuation_exponent
    )
    speed = 5 * math.sqrt(max(0.0, overpressure))
    speed_km_h = speed * 3.6
    return WindEffect(
        speed_m_s=speed,
        speed_km_h=speed_km_h,
        speed_mph=speed_km_h / 1.609,
        overpressure_psi=overpressure,
        category=wind_category(speed_km_h),
    )


def compute_blast_zones(
    yield_mt: float, impact_type: str, constants: BlastConstants = DEFAULT_BLAST
) -> dict[str, BlastZone]:
    zones: dict[str, BlastZone] = {}
    for key, psi, description, effects, survivability in BLAST_ZONE_TABLE:
        radius = blast_radius(yield_mt, psi, impact_type, constants)
        zones[key] = BlastZone(
            radius_km=radius,
            overpressure_psi=psi,
            overpressure_kpa=psi * constants.psi_to_kpa,
            description=description,
            effects=list(effects),
            survivability=survivability,
            wind=wind_at_distance(yield_mt, radius, constants),
        )
    return zones


def compute_thermal_zones(
    yield_mt: float, fireball: Fireball, constants: BlastConstants = DEFAULT_BLAST
) -> dict[str, ThermalZone]:
    def radius(fluence: float) -> float:
        return thermal_radius(yield_mt, fluence, constants)

    temp = fireball.temperature_k
    return {
        "vaporization": ThermalZone(
            # Never wider than the fireball itself
            radius_km=min(radius(constants.vaporization_fluence), fireball.radius_km * 1.2),
            thermal_fluence=constants.vaporization_fluence,
            description="Vaporization Zone",
            effect="Complete vaporization of all organic and most inorganic materials",
            detail=f">{temp:.0f}K (>{temp - 273:.0f}°C)",
        ),
        "third_degree_burns": ThermalZone(
            radius_km=radius(constants.third_degree_fluence),
            thermal_fluence=constants.third_degree_fluence,
            description="Third-Degree Burns",
            effect="Severe burns through all skin layers, often fatal without treatment",
            detail="1-2 seconds",
        ),
        "second_degree_burns": ThermalZone(
            radius_km=radius(constants.second_degree_fluence),
            thermal_fluence=constants.second_degree_fluence,
            description="Second-Degree Burns",
            effect="Painful burns, blistering, requires medical treatment",
            detail="2-3 seconds",
        ),
        "ignition": ThermalZone(
            radius_km=radius(constants.ignition_fluence),
            thermal_fluence=constants.ignition_fluence,
            description="Fire Ignition Zone",
            effect="Ignition of paper, wood, fabric, and other flammable materials",
            detail="Mass fires and firestorms possible in urban areas",
        ),
        "first_degree_burns": ThermalZone(
            radius_km=radius(constants.first_degree_fluence),
            thermal_fluence=constants.first_degree_fluence,
            description="First-Degree Burns",
            effect="Sunburn-like effects, temporary pain and redness",
            detail="3-5 seconds",
        ),
    }


def ejecta_distribution(
    crater_radius_km: float, yield_mt: float, constants: BlastConstants = DEFAULT_BLAST
) -> EjectaDistribution:
    """Continuous blanket at 3 crater radii, projectiles to 7, dust to 20 (capped)."""
    return EjectaDistribution(
        continuous_blanket=EjectaZone(
            radius_km=crater_radius_km * 3,
            thickness_km=crater_radius_km * 0.1,
            description="Continuous blanket of melted and pulverized rock",
            effect="Complete burial of everything",
        ),
        discontinuous=EjectaZone(
            radius_km=crater_radius_km * 7,
            description="Boulder-sized to car-sized projectiles",
            effect="Ballistic impacts causing secondary craters",
        ),
        dust_and_vapor=EjectaZone(
            radius_km=min(crater_radius_km * 20, constants.dust_cloud_cap_km),
            description="Fine dust and vaporized material",
            effect="Reduced visibility, respiratory hazard, climate impact",
        ),
        atmospheric=yield_mt > 10,
    )


def casualty_estimates(blast_zones: dict[str, BlastZone]) -> CasualtyEstimates:
    """Nested-circle areas for the three innermost overpressure rings."""
    total = blast_zones["total_destruction"].radius_km
    severe = blast_zones["severe_damage"].radius_km
    moderate = blast_zones["moderate_damage"].radius_km

    total_area = math.pi * total**2
    severe_area = math.pi * severe**2 - total_area
    moderate_area = math.pi * moderate**2 - severe_area - total_area
    return CasualtyEstimates(
        near_certain_fatality=CasualtyZone(
            area_km2=total_area,
            radius_km=total,
            description="Near-certain fatality zone (95-100% without deep shelter)",
        ),
        high_casualty=CasualtyZone(
            area_km2=severe_area,
            radius_km=severe,
            description="High casualty zone (80-95% without shelter)",
        ),
        moderate_casualty=CasualtyZone(
            area_km2=moderate_area,
            radius_km=moderate,
            description="Moderate casualty zone (30-80% injuries/fatalities)",
        ),
        population_density_factors={
            "major_city": "5,000-15,000 per km²",
            "urban_area": "1,000-5,000 per km²",
            "suburban": "200-1,000 per km²",
            "rural": "10-200 per km²",
        },
    )


def climate_impact(yield_mt: float) -> ClimateImpact | None:
    if yield_mt >= 10_000:
        return ClimateImpact(
            severity="EXTINCTION-LEVEL",
            impact_type="Impact Winter",
            temperature_drop="15-30°C globally",
            duration="Years to decades",
            sunlight_reduction="90-99%",
            description="Prolonged darkness, mass extinction, collapse of food chains",
        )
    if yield_mt >= 1_000:
        return ClimateImpact(
            severity="CATASTROPHIC",
            impact_type="Nuclear Winter Effect",
            temperature_drop="8-15°C globally",
            duration="Months to years",
            sunlight_reduction="50-90%",
            description="Global crop failures, mass starvation, ecosystem collapse",
        )
    if yield_mt >= 100:
        return ClimateImpact(
            severity="SEVERE",
            impact_type="Regional Climate Disruption",
            temperature_drop="3-8°C regionally",
            duration="Weeks to months",
            sunlight_reduction="20-50% regionally",
            description="Regional agricultural failures, significant climate disruption",
        )
    return None


def environmental_effects(yield_mt: float, max_radius_km: float) -> EnvironmentalEffects:
    if yield_mt > 1000:
        dust_duration = "Years"
    elif yield_mt > 100:
        dust_duration = "Months"
    else:
        dust_duration = "Weeks"

    ozone = None
    if yield_mt >= 100:
        severe = yield_mt >= 1000
        ozone = OzoneDepletion(
            severity="Severe (50-70%)" if severe else "Moderate (20-50%)",
            duration="Years to decades",
            recovery="50+ years" if severe else "10-20 years",
        )

    acid_rain = None
    if yield_mt >= 10:
        acid_rain = AcidRain(
            radius_km=max_radius_km * 50,
            ph_range="2.5-3.5" if yield_mt >= 1000 else "3.5-4.5",
        )

    return EnvironmentalEffects(
        shockwave_radius_km=max_radius_km * 3,
        dust_radius_km=max_radius_km * 10,
        dust_duration=dust_duration,
        particulate_load=f"{round(yield_mt * 10)} million tons",
        climate_impact=climate_impact(yield_mt),
        ozone_depletion=ozone,
        acid_rain=acid_rain,
    )


def energy_comparison(megatons: float) -> str:
    if megatons >= 100_000_000:
        return f"{megatons / 1_000_000:.0f} million megatons - Planetary-scale devastation"
    if megatons >= 1_000_000:
        return (
            f"{megatons / 1_000_000:.1f} million megatons - Mass extinction event "
            "(K-T boundary: ~100M MT)"
        )
    if megatons >= 100_000:
        return f"{megatons / 1000:.0f} thousand megatons - Continental destruction"
    if megatons >= 10_000:
        return f"{megatons / 1000:.1f} thousand megatons - Multi-continental catastrophe"
    if megatons >= 1000:
        return f"{megatons:.0f} megatons - Regional extinction-level"
    if megatons >= 100:
        return f"{megatons:.0f} megatons - Devastating regional impact"
    if megatons >= 50:
        return f"{megatons:.1f} megatons - Larger than Tsar Bomba (50 MT, largest nuclear test)"
    if megatons >= 15:
        return f"{megatons:.1f} megatons - Modern strategic nuclear weapon range"
    if megatons >= 1:
        return f"{megatons:.2f} megatons - Large thermonuclear weapon"
    if megatons >= 0.1:
        return f"{megatons * 1000:.0f} kilotons - Tactical nuclear weapon"
    if megatons >= 0.015:
        return f"{megatons * 1000:.1f} kilotons - Hiroshima bomb: 15 KT"
    return f"{megatons * 1000:.2f} kilotons - Small tactical weapon"


def impact_category(megatons: float) -> str:
    for threshold, category in IMPACT_CATEGORIES:
        if megatons >= threshold:
            return category
    return "LOCALIZED EVENT"


def comparable_event(megatons: float) -> ComparableEvent:
    for threshold, name, event_mt, year, description in HISTORICAL_EVENTS:
        if megatons >= threshold:
            if megatons > event_mt:
                comparison = f"{megatons / event_mt:.1f}× more powerful"
            else:
                comparison = f"{event_mt / megatons:.1f}× less powerful"
            return ComparableEvent(
                name=name,
                megatons=event_mt,
                year=year,
                description=description,
                comparison=comparison,
            )
    return ComparableEvent(
        name="Small conventional explosion",
        megatons=0.001,
        year="Common",
        description="Small explosive device",
        comparison=f"{megatons / 0.001:.0f}× more powerful",
    )


def evacuation_zones(
    blast_zones: dict[str, BlastZone], max_radius_km: float
) -> dict[str, EvacuationZone]:
    return {
        "red": EvacuationZone(
            radius_km=blast_zones["moderate_damage"].radius_km,
            priority="IMMEDIATE - CRITICAL",
            timeframe="Evacuate immediately if possible",
            description="Unsurvivable without deep underground shelter",
            actions=[
                "Complete evacuation mandatory",
                "No survival expected above ground",
                "Emergency services cannot operate",
                "All infrastructure will be destroyed",
            ],
            color="#FF0000",
        ),
        "orange": EvacuationZone(
            radius_km=blast_zones["light_damage"].radius_km,
            priority="URGENT - HIGH",
            timeframe="Evacuate within hours",
            description="Severe damage expected, high casualty risk",
            actions=[
                "Immediate evacuation strongly recommended",
                "Seek underground shelter if evacuation impossible",
                "Expect major injuries and fatalities",
                "Infrastructure severely compromised",
            ],
            color="#FF8800",
        ),
        "yellow": EvacuationZone(
            radius_km=blast_zones["minor_damage"].radius_km,
            priority="MODERATE",
            timeframe="Evacuate within 24 hours",
            description="Significant damage, injuries likely",
            actions=[
                "Evacuation advised",
                "Shelter in place if evacuation not feasible",
                "Stay away from windows",
                "Prepare for extended power/water outages",
            ],
            color="#FFFF00",
        ),
        "green": EvacuationZone(
            radius_km=blast_zones["glass_breakage"].radius_km,
            priority="LOW - ADVISORY",
            timeframe="Prepare and monitor",
            description="Minor damage possible",
            actions=[
                "Stay indoors during impact",
                "Stay away from windows",
                "Prepare emergency supplies",
                "Monitor emergency broadcasts",
            ],
            color="#00FF00",
        ),
        "blue": EvacuationZone(
            radius_km=max_radius_km,
            priority="AWARENESS",
            timeframe="Stay informed",
            description="Possible indirect effects",
            actions=[
                "Monitor news and emergency channels",
                "Be prepared for dust/smoke",
                "Possible atmospheric effects",
                "Minor disruptions possible",
            ],
            color="#0088FF",
        ),
    }


def blast_warnings(
    max_radius_km: float,
    thermal_zones: dict[str, ThermalZone],
    ejecta: EjectaDistribution,
    environment: EnvironmentalEffects,
    cloud: MushroomCloud | None,
    regional_risk_level: str | None = None,
) -> list[EffectWarning]:
    """Hazard warnings sorted by priority (1 most urgent); ties keep insertion order."""
    warnings: list[EffectWarning] = []

    if max_radius_km >= 100:
        warnings.append(
            EffectWarning(
                severity="EXTREME",
                category="BLAST",
                message=(
                    f"EXTREME BLAST HAZARD: Destructive effects extending {max_radius_km:.0f} km. "
                    "Continental-scale devastation expected."
                ),
                priority=1,
            )
        )
    elif max_radius_km >= 50:
        warnings.append(
            EffectWarning(
                severity="CRITICAL",
                category="BLAST",
                message=(
                    f"CRITICAL BLAST HAZARD: Severe blast effects extending {max_radius_km:.0f} km. "
                    "Regional devastation expected."
                ),
                priority=1,
            )
        )
    elif max_radius_km >= 10:
        warnings.append(
            EffectWarning(
                severity="HIGH",
                category="BLAST",
                message=(
                    f"HIGH BLAST HAZARD: Major blast effects extending {max_radius_km:.0f} km. "
                    "Widespread destruction in impact zone."
                ),
                priority=2,
            )
        )

    third_degree = thermal_zones["third_degree_burns"].radius_km
    ignition = thermal_zones["ignition"].radius_km
    if third_degree >= 10:
        warnings.append(
            EffectWarning(
                severity="CRITICAL",
                category="THERMAL",
                message=(
                    f"SEVERE THERMAL RADIATION: Third-degree burns possible up to "
                    f"{third_degree:.1f} km. Widespread fires expected."
                ),
                priority=1,
            )
        )
    elif ignition >= 5:
        warnings.append(
            EffectWarning(
                severity="HIGH",
                category="THERMAL",
                message=(
                    f"FIRE HAZARD: Mass ignition of flammable materials up to "
                    f"{ignition:.1f} km. Firestorms possible."
                ),
                priority=2,
            )
        )

    blanket = ejecta.continuous_blanket
    if blanket.radius_km >= 5:
        depth_m = (blanket.thickness_km or 0.0) * 1000
        warnings.append(
            EffectWarning(
                severity="CRITICAL",
                category="EJECTA",
                message=(
                    f"MASSIVE EJECTA BLANKET: Complete burial expected within "
                    f"{blanket.radius_km:.1f} km. Average depth: {depth_m:.0f} meters."
                ),
                priority=1,
            )
        )
    if ejecta.discontinuous.radius_km >= 20:
        warnings.append(
            EffectWarning(
                severity="HIGH",
                category="EJECTA",
                message=(
                    "BALLISTIC PROJECTILES: Boulder-sized debris impacts expected up to "
                    f"{ejecta.discontinuous.radius_km:.0f} km from impact."
                ),
                priority=2,
            )
        )

    if environment.climate_impact is not None:
        climate = environment.climate_impact
        warnings.append(
            EffectWarning(
                severity="EXTREME",
                category="CLIMATE",
                message=f"{climate.severity} CLIMATE IMPACT: {climate.description}",
                priority=1,
            )
        )
    if environment.ozone_depletion is not None:
        ozone = environment.ozone_depletion
        warnings.append(
            EffectWarning(
                severity="HIGH",
                category="ENVIRONMENTAL",
                message=(
                    f"OZONE DEPLETION: {ozone.severity} ozone layer destruction. "
                    f"Increased UV radiation for {ozone.duration}."
                ),
                priority=2,
            )
        )

    if cloud is not None and cloud.reaches_stratosphere:
        warnings.append(
            EffectWarning(
                severity="HIGH",
                category="ATMOSPHERIC",
                message=(
                    f"STRATOSPHERIC INJECTION: Mushroom cloud reaching {cloud.height_km:.1f} km "
                    "altitude. Global atmospheric effects expected."
                ),
                priority=2,
            )
        )

    if regional_risk_level in POPULATION_RISK_LEVELS:
        warnings.append(
            EffectWarning(
                severity="CRITICAL",
                category="POPULATION",
                message=(
                    "MASS CASUALTY EVENT: Impact in populated area. Millions of casualties "
                    "anticipated. Immediate large-scale evacuation required."
                ),
                priority=1,
            )
        )

    warnings.append(
        EffectWarning(
            severity="INFO",
            category="ADVISORY",
            message=(
                "Seek underground shelter. Stay away from windows. Follow emergency "
                "broadcast instructions. Prepare for extended disruption of all services."
            ),
            priority=3,
        )
    )
    return sorted(warnings, key=lambda w: w.priority)


def compute_blast(
    kinetic_energy_j: float | None,
    crater_radius_km: float | None,
    geographic_risk: GeographicRisk | None = None,
    constants: BlastConstants = DEFAULT_BLAST,
    physical: PhysicalConstants = DEFAULT_PHYSICAL,
) -> BlastProfile:
    """Full blast/thermal/ejecta profile for an impact.

    Ocean impacts are modelled as shallow-water bursts; everything else,
    including impacts without a classified point, as surface bursts.
    """
    if kinetic_energy_j is None or not math.isfinite(kinetic_energy_j) or kinetic_energy_j <= 0:
        raise StageComputationError(
            f"Kinetic energy not available for blast calculations: {kinetic_energy_j!r}"
        )
    if crater_radius_km is None or not math.isfinite(crater_radius_km) or crater_radius_km <= 0:
        raise StageComputationError(
            f"Crater radius not available for blast calculations: {crater_radius_km!r}"
        )

    is_ocean = geographic_risk is not None and geographic_risk.primary_region == "Ocean"
    impact_type = "shallow_water" if is_ocean else "surface"
    yield_mt = kinetic_energy_j / physical.joules_per_megaton

    fb_radius = fireball_radius(yield_mt, constants)
    temperature = constants.fireball_temperature_k * math.pow(
        yield_mt, constants.fireball_temperature_exponent
    )
    fireball = Fireball(
        radius_km=fb_radius,
        diameter_km=fb_radius * 2,
        duration_s=constants.fireball_duration_k * math.pow(yield_mt, constants.fireball_exponent),
        temperature_k=temperature,
        temperature_c=temperature - 273.15,
    )
    cloud = mushroom_cloud(yield_mt, constants)
    zones = compute_blast_zones(yield_mt, impact_type, constants)
    thermal = compute_thermal_zones(yield_mt, fireball, constants)
    ejecta = ejecta_distribution(crater_radius_km, yield_mt, constants)

    max_radius = max(
        zones["glass_breakage"].radius_km,
        thermal["first_degree_burns"].radius_km,
        ejecta.dust_and_vapor.radius_km,
    )
    environment = environmental_effects(yield_mt, max_radius)
    logger.debug(
        "Blast yield %.3g MT (%s), max affected radius %.1f km",
        yield_mt,
        impact_type,
        max_radius,
    )

    return BlastProfile(
        energy_yield=EnergyYield(
            joules=kinetic_energy_j,
            megatons=yield_mt,
            kilotons=yield_mt * 1000,
            comparison=energy_comparison(yield_mt),
        ),
        fireball=fireball,
        mushroom_cloud=cloud,
        blast_zones=zones,
        thermal_zones=thermal,
        ejecta=ejecta,
        zone_summary=ImpactZoneSummary(
            max_affected_radius_km=max_radius,
            total_affected_area_km2=math.pi * max_radius**2,
            impact_type=impact_type,
        ),
        casualties=casualty_estimates(zones),
        environment=environment,
        evacuation_zones=evacuation_zones(zones, max_radius),
        classification=ImpactClassification(
            impact_type=impact_type,
            category=impact_category(yield_mt),
            total_destruction_area_km2=math.pi * zones["total_destruction"].radius_km ** 2,
            severe_destruction_area_km2=math.pi * zones["severe_damage"].radius_km ** 2,
            comparable_event=comparable_event(yield_mt),
        ),
        warnings=blast_warnings(
            max_radius,
            thermal,
            ejecta,
            environment,
            cloud,
            geographic_risk.risk_level if geographic_risk is not None else None,
        ),
    )
