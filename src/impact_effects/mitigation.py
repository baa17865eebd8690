"""Planetary-defense strategy selection driven by warning time."""

from __future__ import annotations

import copy
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime

from impact_effects.constants import DEFAULT_TIMEFRAMES, SECONDS_PER_DAY, MitigationTimeframes
from impact_effects.data.mitigation_catalogue import (
    CURRENT_CAPABILITIES,
    DECISION_PROCESSES,
    FUNDING_MODEL,
    IMPLEMENTATION_TIMELINES,
    KEY_ORGANIZATIONS,
    LEGAL_FRAMEWORK,
    MITIGATION_PRINCIPLES,
    REFERENCES,
    REQUIRED_AGREEMENTS,
    RESOURCE_REQUIREMENTS,
    TECHNOLOGY_STATUS,
)
from impact_effects.geo import as_utc
from impact_effects.models import EnergyProfile, ImpactorSpec, StageComputationError

logger = logging.getLogger(__name__)

MOMENTUM_ENHANCEMENT = 2.0
IMPACTOR_MASS_FRACTION = 1e-4
IMPACTOR_MASS_CAP_KG = 10_000.0


@dataclass(frozen=True)
class VelocityChange:
    delta_v_m_s: float
    delta_v_km_h: float
    note: str = f"Assumes momentum enhancement factor β = {MOMENTUM_ENHANCEMENT} from crater ejecta"


@dataclass(frozen=True)
class Strategy:
    method: str
    description: str
    advantages: list[str]
    disadvantages: list[str]
    effectiveness: str
    technical_requirements: dict[str, str] = field(default_factory=dict)
    estimated_cost: str | None = None
    technology_readiness: str | None = None
    velocity_change: VelocityChange | None = None
    velocity_change_range: str | None = None
    warning: str | None = None
    notes: dict[str, str] = field(default_factory=dict)
    references: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CivilDefenseStrategy:
    priority: int
    strategy: str
    description: str
    actions: list[str]
    timeframe: str
    cost: str | None = None
    benefit: str | None = None
    effectiveness: str | None = None
    urgency: str | None = None
    note: str | None = None
    challenges: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TimelinePhase:
    phase: str
    duration: str
    description: str


@dataclass(frozen=True)
class ImplementationTimeline:
    phases: list[TimelinePhase]
    total_duration: str
    critical_path: str | None = None
    note: str | None = None


@dataclass(frozen=True)
class ResourceRequirements:
    financial: str
    personnel: str
    technical: list[str]
    international: list[str]
    infrastructure: list[str]


@dataclass(frozen=True)
class CoordinationRequirements:
    urgency_level: str
    decision_making_process: str
    key_organizations: list[str]
    required_agreements: list[str]
    funding_model: dict[str, str]
    legal_framework: dict[str, str]


@dataclass(frozen=True)
class Recommendation:
    priority: str
    action: str
    rationale: str


@dataclass(frozen=True)
class AsteroidCharacteristics:
    diameter_m: float
    mass_kg: float
    velocity_km_s: float
    size_category: str


@dataclass(frozen=True)
class MitigationPlan:
    time_available: str
    days_until_impact: int
    characteristics: AsteroidCharacteristics
    recommended_approach: str
    success_probability: str
    deflection_strategies: list[Strategy]
    disruption_strategies: list[Strategy]
    civil_defense_strategies: list[CivilDefenseStrategy]
    implementation_timeline: ImplementationTimeline
    resource_requirements: ResourceRequirements
    international_coordination: CoordinationRequirements
    key_recommendations: list[Recommendation]
    current_capabilities: dict[str, dict] = field(
        default_factory=lambda: copy.deepcopy(CURRENT_CAPABILITIES)
    )
    technology_status: dict[str, list[str]] = field(
        default_factory=lambda: {k: list(v) for k, v in TECHNOLOGY_STATUS.items()}
    )
    mitigation_principles: dict[str, dict] = field(
        default_factory=lambda: copy.deepcopy(MITIGATION_PRINCIPLES)
    )
    references: list[str] = field(default_factory=lambda: list(REFERENCES))


def days_until_impact(spec: ImpactorSpec, now: datetime) -> int:
    """Whole days between ``now`` and the impact, clamped at zero.

    An explicit ``days_until_impact`` on the impactor takes precedence over the date.
    """
    if spec.days_until_impact is not None:
        return spec.days_until_impact
    if spec.impact_date is None:
        raise StageComputationError(
            "No impact date or days-until-impact supplied; cannot select a strategy"
        )
    seconds = (as_utc(spec.impact_date) - as_utc(now)).total_seconds()
    return max(0, math.floor(seconds / SECONDS_PER_DAY))


def format_timeframe(days: int) -> str:
    if days < 1:
        return "Less than 1 day"
    if days < 7:
        return f"{days} days"
    if days < 30:
        return f"{days // 7} weeks"
    if days < 365:
        return f"{days // 30} months"
    return f"{days // 365} years"


def size_category(diameter_m: float) -> str:
    if diameter_m < 25:
        return "Very Small (<25m) - Mostly burns up in atmosphere"
    if diameter_m < 50:
        return "Small (25-50m) - Local damage"
    if diameter_m < 140:
        return "Medium (50-140m) - Regional damage"
    if diameter_m < 1000:
        return "Large (140-1000m) - Continental damage"
    return "Very Large (>1km) - Global catastrophe"


def velocity_change(
    impactor_mass_kg: float, asteroid_mass_kg: float, velocity_km_s: float
) -> VelocityChange:
    """Kinetic-impactor Δv = β * m_i * v / M with β = 2."""
    delta_v = MOMENTUM_ENHANCEMENT * impactor_mass_kg * velocity_km_s * 1000 / asteroid_mass_kg
    return VelocityChange(delta_v_m_s=delta_v, delta_v_km_h=delta_v * 3.6)


def kinetic_impactor_mass(asteroid_mass_kg: float) -> float:
    return min(asteroid_mass_kg * IMPACTOR_MASS_FRACTION, IMPACTOR_MASS_CAP_KG)


def gradual_deflection_methods(diameter_m: float) -> list[Strategy]:
    return [
        Strategy(
            method="Gravity Tractor",
            description="Use spacecraft's gravitational pull to slowly alter asteroid orbit",
            advantages=[
                "Most precise and controllable method",
                "No risk of fragmentation",
                "Can be adjusted in real-time",
                "Works on any composition",
            ],
            disadvantages=[
                "Requires decades of lead time",
                "Very slow process",
                "Requires sustained mission (10-20 years)",
                "High cost for long-duration mission",
            ],
            technical_requirements={
                "spacecraft_mass": "10-20 metric tons",
                "mission_duration": "10-30 years",
                "thruster_type": "Ion propulsion",
                "power_source": "Nuclear or large solar arrays",
            },
            effectiveness="Excellent" if diameter_m < 500 else "Good",
            estimated_cost="$5-15 billion",
            technology_readiness="High (TRL 6-7)",
            references=["NASA DART mission concepts", "ESA Don Quijote mission study"],
        ),
        Strategy(
            method="Ion Beam Deflection",
            description="Use ion beam from spacecraft to ablate asteroid surface and create thrust",
            advantages=[
                "Highly controllable",
                "No physical contact required",
                "Can work on irregular shapes",
                "Continuous thrust application",
            ],
            disadvantages=[
                "Requires long mission duration",
                "High power requirements",
                "Complex spacecraft design",
                "Untested in actual missions",
            ],
            technical_requirements={
                "ion_beam_power": "50-200 kW",
                "spacecraft_distance": "50-100 meters",
                "mission_duration": "5-15 years",
                "power_source": "Nuclear reactor",
            },
            effectiveness="Excellent" if diameter_m < 300 else "Good",
            estimated_cost="$3-10 billion",
            technology_readiness="Medium (TRL 4-5)",
            references=["NASA IBS study", "European space agency concepts"],
        ),
        Strategy(
            method="Solar Sail / Reflector",
            description="Attach reflective material to asteroid to use solar radiation pressure",
            advantages=[
                "Uses free energy source (sunlight)",
                "No propellant required",
                "Scalable to large asteroids",
                "Continuous acceleration",
            ],
            disadvantages=[
                "Very slow process",
                "Requires decades of operation",
                "Complex deployment on asteroid",
                "Vulnerable to micrometeorite damage",
            ],
            technical_requirements={
                "sail_area": f"{round(diameter_m * 2)} - {round(diameter_m * 5)} m²",
                "attachment_method": "Harpoons, anchors, or adhesive",
                "mission_duration": "20-50 years",
                "maintenance_requirement": "Periodic inspection/repair",
            },
            effectiveness="Good" if diameter_m < 200 else "Limited",
            estimated_cost="$4-12 billion",
            technology_readiness="Low-Medium (TRL 3-4)",
            references=["Solar sail mission concepts", "IKAROS mission experience"],
        ),
        Strategy(
            method="Mass Driver",
            description="Land on asteroid and launch excavated material to create thrust",
            advantages=[
                "Uses asteroid's own material",
                "Efficient mass utilization",
                "Can work for extended periods",
                "Scalable thrust",
            ],
            disadvantages=[
                "Complex surface operations",
                "Requires landing and anchoring",
                "Uncertain asteroid composition",
                "High development cost",
            ],
            technical_requirements={
                "excavation_rate": "1-10 kg/s",
                "launch_velocity": "10-100 m/s",
                "power_requirement": "100-500 kW",
                "mission_duration": "5-20 years",
            },
            effectiveness="Good for all sizes if time permits",
            estimated_cost="$8-20 billion",
            technology_readiness="Low (TRL 2-3)",
            references=["O'Neill mass driver concepts", "Asteroid mining studies"],
        ),
    ]


def rapid_deflection_methods(
    diameter_m: float, mass_kg: float, velocity_km_s: float
) -> list[Strategy]:
    impactor = kinetic_impactor_mass(mass_kg)
    return [
        Strategy(
            method="Kinetic Impactor",
            description="High-speed spacecraft collision to change asteroid velocity",
            advantages=[
                "Proven technology (NASA DART mission)",
                "Relatively simple design",
                "Can be launched quickly",
                "High success probability",
            ],
            disadvantages=[
                "Risk of fragmentation for rubble piles",
                "Requires precise targeting",
                "Single attempt (no retry)",
                "Uncertain momentum transfer efficiency",
            ],
            technical_requirements={
                "spacecraft_mass": f"{round(impactor / 1000)} metric tons",
                "impact_velocity": f"{round(velocity_km_s + 10)} km/s",
                "targeting_accuracy": "< 1 meter",
                "launch_window": "1-5 years before impact",
            },
            velocity_change=velocity_change(impactor, mass_kg, velocity_km_s),
            effectiveness="Excellent" if diameter_m < 500 else "Good",
            estimated_cost="$1-3 billion",
            technology_readiness="Very High (TRL 9 - DART mission success)",
            notes={"mission_examples": "NASA DART (2022); ESA Hera follow-up mission"},
            references=["DART mission results", "Dimorphos impact data"],
        ),
        Strategy(
            method="Multiple Kinetic Impactors",
            description="Series of spacecraft impacts to accumulate velocity change",
            advantages=[
                "Higher total momentum transfer",
                "Can adjust strategy between impacts",
                "Redundancy if one fails",
                "Better for larger asteroids",
            ],
            disadvantages=[
                "Higher cost",
                "Complex mission coordination",
                "Longer timeline needed",
                "Risk of fragmentation increases",
            ],
            technical_requirements={
                "number_of_impacts": "3-5" if diameter_m > 300 else "2-3",
                "time_between_impacts": "6-18 months",
                "coordinated_launch": "Multiple launch vehicles",
                "total_mission_duration": "2-5 years",
            },
            velocity_change=velocity_change(impactor * 3, mass_kg, velocity_km_s),
            effectiveness="Excellent for large asteroids",
            estimated_cost="$3-8 billion",
            technology_readiness="High (based on DART)",
            references=["Multiple impactor studies", "NEO deflection scenarios"],
        ),
        Strategy(
            method="Enhanced Kinetic Impactor with Explosive",
            description="Kinetic impactor carrying conventional explosive to enhance crater ejecta",
            advantages=[
                "Greater momentum transfer than pure kinetic",
                "More predictable than nuclear",
                "Can be tested on Earth",
                "Faster than gravity tractor",
            ],
            disadvantages=[
                "Still risk of fragmentation",
                "Limited enhancement over pure kinetic",
                "Complex timing requirements",
                "May destabilize rubble pile asteroids",
            ],
            technical_requirements={
                "explosive_mass": "500-2000 kg TNT equivalent",
                "detonation_timing": "Milliseconds after impact",
                "crater_depth": "10-50 meters",
                "optimal_impact_angle": "30-45 degrees from normal",
            },
            velocity_change=velocity_change(impactor * 2, mass_kg, velocity_km_s),
            effectiveness="Very Good",
            estimated_cost="$2-4 billion",
            technology_readiness="Medium-High (TRL 5-6)",
            references=["Hypervelocity impact studies", "Crater ejecta modeling"],
        ),
    ]


def emergency_deflection_methods(diameter_m: float) -> list[Strategy]:
    root_d = math.sqrt(diameter_m)
    return [
        Strategy(
            method="Nuclear Standoff Burst",
            description=(
                "Detonate nuclear device near (not on) asteroid to vaporize surface "
                "and create thrust"
            ),
            advantages=[
                "Most powerful option available",
                "Can deflect large asteroids",
                "Works within short timeframe",
                "No fragmentation if done correctly",
            ],
            disadvantages=[
                "Political/legal complications (Outer Space Treaty)",
                "Risk of fragmentation if too close",
                "Radioactive contamination concerns",
                "Requires nuclear device in space",
            ],
            technical_requirements={
                "device_yield": "1-10 megatons" if diameter_m > 500 else "100 kilotons - 1 megaton",
                "standoff_distance": f"{diameter_m * 2:g}-{diameter_m * 5:g} meters",
                "detonation_timing": "Months before impact",
                "precursor_mission": "Orbital characterization required",
            },
            velocity_change_range=f"{0.01 * root_d:.3f} - {0.05 * root_d:.3f} km/s",
            effectiveness="Excellent if executed properly",
            estimated_cost="$5-15 billion (including political negotiations)",
            technology_readiness="High (nuclear technology mature)",
            notes={
                "legal_challenges": "Outer Space Treaty Article IV restrictions",
                "international_approval": "UN Security Council approval required",
            },
            references=[
                "National labs nuclear simulation studies",
                "NNSA planetary defense studies",
            ],
        ),
        Strategy(
            method="Laser Ablation (Orbital Platform)",
            description="High-power laser array to vaporize asteroid surface material",
            advantages=[
                "Can be operated remotely",
                "Continuous thrust application",
                "Precise control",
                "No contamination",
            ],
            disadvantages=[
                "Requires pre-positioned infrastructure",
                "Very high power requirements",
                "Limited to smaller asteroids",
                "Technology not yet developed",
            ],
            technical_requirements={
                "laser_power": "50-500 MW",
                "beam_duration": "Continuous for weeks/months",
                "platform_location": "Earth orbit or asteroid vicinity",
                "power_source": "Nuclear reactor or massive solar array",
            },
            effectiveness="Good" if diameter_m < 100 else "Limited",
            estimated_cost="$20-50 billion (infrastructure development)",
            technology_readiness="Very Low (TRL 1-2)",
            notes={"development_time": "15-25 years to deploy"},
            references=["DE-STAR concept studies", "Laser propulsion research"],
        ),
    ]


def disruption_methods(diameter_m: float) -> list[Strategy]:
    return [
        Strategy(
            method="Nuclear Surface Burst",
            description="Detonate nuclear device on or just below asteroid surface to fragment it",
            advantages=[
                "Can break up large asteroids",
                "Disperses fragments over wider area",
                "May reduce individual fragment impacts",
                "Last resort option",
            ],
            disadvantages=[
                "HIGHLY RISKY - May create multiple impacts",
                "Fragments may still hit Earth",
                "Radioactive contamination",
                "Unpredictable fragmentation",
                "Could make situation worse",
            ],
            technical_requirements={
                "device_yield": "1-100 megatons",
                "penetration_depth": "10-100 meters (for subsurface)",
                "detonation_timing": "Critical - too late and fragments still impact",
                "fragment_tracking": "Comprehensive radar/optical network",
            },
            warning="EXTREME RISK - Only use if no other option exists and impact is certain",
            effectiveness="Uncertain - may reduce total damage or create multiple disasters",
            estimated_cost="$3-10 billion",
            technology_readiness=(
                "Medium (nuclear technology mature, but never tested on asteroid)"
            ),
            notes={"ethical_concerns": "High - risk vs. reward analysis critical"},
            references=["National labs disruption studies", "Fragmentation modeling"],
        ),
        Strategy(
            method="Focused Kinetic Impact (Fragmentation)",
            description="Multiple simultaneous kinetic impacts designed to shatter asteroid",
            advantages=[
                "No nuclear devices required",
                "More politically acceptable",
                "Can launch quickly",
                "Proven technology basis",
            ],
            disadvantages=[
                "Fragments may still impact",
                "Requires many spacecraft",
                "Precise coordination needed",
                "May not fully disrupt solid asteroids",
            ],
            technical_requirements={
                "number_of_impactors": "5-20",
                "synchronization": "Within milliseconds",
                "target_points": "Structural weak points",
                "pre_impact_reconnaissance": "Essential for targeting",
            },
            warning="RISK - Fragmentation may create multiple impact zones",
            effectiveness="Moderate" if diameter_m < 300 else "Low",
            estimated_cost="$5-15 billion",
            technology_readiness="Medium-High (TRL 6)",
            references=["Multi-impactor studies", "Asteroid structural analysis"],
        ),
    ]


def last_resort_disruption() -> list[Strategy]:
    return [
        Strategy(
            method="Emergency Nuclear Disruption",
            description="Immediate nuclear fragmentation attempt",
            advantages=[
                "Only option with very short notice",
                "May reduce total impact energy",
                "Could disperse fragments",
            ],
            disadvantages=[
                "EXTREMELY RISKY",
                "Unpredictable results",
                "Multiple fragment impacts likely",
                "May worsen situation",
                "No time for proper mission planning",
            ],
            warning=(
                "SUCCESS PROBABILITY VERY LOW - May create multiple disasters instead of one"
            ),
            effectiveness="Highly uncertain",
            notes={
                "status": "LAST RESORT ONLY",
                "recommendation": "Focus on civil defense and evacuation instead",
            },
        ),
    ]


def civil_defense_strategies(
    days: int,
    energy_megatons: float,
    timeframes: MitigationTimeframes = DEFAULT_TIMEFRAMES,
) -> list[CivilDefenseStrategy]:
    """Civil-defense measures, always present; an immediate-action entry leads when days < 7."""
    strategies = [
        CivilDefenseStrategy(
            priority=1,
            strategy="Early Warning System",
            description="Establish global asteroid detection and tracking network",
            actions=[
                "Expand ground-based telescope networks",
                "Deploy space-based infrared detectors",
                "Improve orbital calculation accuracy",
                "International data sharing protocols",
                "Public alert systems",
            ],
            timeframe="Immediate - ongoing",
            cost="$500 million - $2 billion annually",
            benefit="Maximizes warning time for any detected threat",
        ),
        CivilDefenseStrategy(
            priority=2,
            strategy="Impact Zone Identification",
            description="Calculate precise impact location and effects",
            actions=[
                "Refine orbital calculations",
                "Model atmospheric entry",
                "Calculate ground zero",
                "Map blast radius and effects",
                "Identify populations at risk",
            ],
            timeframe="Weeks before impact" if days > 30 else "Immediately",
            cost="$50-100 million",
            benefit="Enables targeted evacuation and resource deployment",
        ),
        CivilDefenseStrategy(
            priority=3,
            strategy="Mass Evacuation",
            description="Evacuate population from impact zone and surrounding areas",
            actions=[
                "Declare state of emergency",
                "Establish evacuation zones",
                "Coordinate transportation",
                "Set up refugee camps",
                "Medical and food supplies",
                "Security and law enforcement",
            ],
            timeframe="Begin immediately" if days > 7 else "May not be feasible",
            cost="$100+ billion" if energy_megatons > 100 else "$10-50 billion",
            benefit="Save millions of lives in impact zone",
            challenges=[
                "Panic and social disorder",
                "Transportation bottlenecks",
                "Refugee support infrastructure",
                "Duration of displacement",
            ],
        ),
        CivilDefenseStrategy(
            priority=4,
            strategy="Shelter-in-Place Protocols",
            description="For areas where evacuation is not possible",
            actions=[
                "Underground shelter identification",
                "Reinforced building protocols",
                "Supply stockpiling (food, water, medical)",
                "Communication systems",
                "Emergency services preparation",
            ],
            timeframe="Immediate",
            cost="$5-20 billion",
            benefit="Reduce casualties in areas that cannot be evacuated",
            effectiveness="Limited" if energy_megatons > 10 else "Moderate",
        ),
        CivilDefenseStrategy(
            priority=5,
            strategy="Critical Infrastructure Protection",
            description="Protect essential services and prepare for recovery",
            actions=[
                "Backup power generation",
                "Water system protection",
                "Communication network redundancy",
                "Medical facility preparation",
                "Emergency response coordination",
                "Supply chain security",
            ],
            timeframe="Immediate",
            cost="$20-100 billion",
            benefit="Enable faster recovery and reduce secondary casualties",
        ),
        CivilDefenseStrategy(
            priority=6,
            strategy="International Coordination",
            description="Global response and resource sharing",
            actions=[
                "Activate UN disaster response",
                "International aid mobilization",
                "Scientific collaboration",
                "Military logistics support",
                "Financial assistance",
                "Post-impact recovery planning",
            ],
            timeframe="Immediate",
            cost="Variable - international burden sharing",
            benefit="Leverage global resources and expertise",
        ),
    ]

    if days < timeframes.imminent:
        strategies.insert(
            0,
            CivilDefenseStrategy(
                priority=0,
                strategy="IMMEDIATE ACTIONS - LIMITED TIME",
                description="Critical actions when impact is imminent",
                actions=[
                    "Issue emergency alerts to all affected populations",
                    "Order immediate shelter in underground facilities",
                    "Position emergency services outside impact zone",
                    "Prepare trauma centers for mass casualties",
                    "Begin documentation for post-impact recovery",
                    "Activate military disaster response",
                ],
                timeframe="NOW - Hours remaining",
                urgency="CRITICAL",
                note=(
                    "With less than one week, deflection is impossible. Focus entirely on "
                    "saving lives through shelter and emergency response."
                ),
            ),
        )
    return strategies


def implementation_timeline(approach: str) -> ImplementationTimeline:
    phases, total, critical_path, note = IMPLEMENTATION_TIMELINES[approach]
    return ImplementationTimeline(
        phases=[TimelinePhase(phase=p, duration=d, description=desc) for p, d, desc in phases],
        total_duration=total,
        critical_path=critical_path,
        note=note,
    )


def resource_requirements(approach: str) -> ResourceRequirements:
    entry = RESOURCE_REQUIREMENTS[approach]
    return ResourceRequirements(
        financial=str(entry["financial"]),
        personnel=str(entry["personnel"]),
        technical=list(entry["technical"]),
        international=list(entry["international"]),
        infrastructure=list(entry["infrastructure"]),
    )


def coordination_requirements(days: int) -> CoordinationRequirements:
    if days < 365:
        urgency = "URGENT"
    elif days < 3650:
        urgency = "HIGH"
    else:
        urgency = "NORMAL"
    return CoordinationRequirements(
        urgency_level=urgency,
        decision_making_process=DECISION_PROCESSES[urgency],
        key_organizations=list(KEY_ORGANIZATIONS),
        required_agreements=list(REQUIRED_AGREEMENTS),
        funding_model=dict(FUNDING_MODEL),
        legal_framework=dict(LEGAL_FRAMEWORK),
    )


def key_recommendations(days: int, diameter_m: float) -> list[Recommendation]:
    if days > 3650:
        recs = [
            Recommendation(
                "HIGH",
                "Begin reconnaissance mission immediately",
                "Time allows for detailed characterization before deflection",
            ),
            Recommendation(
                "HIGH",
                "Develop gravity tractor or ion beam deflection mission",
                "Gentle deflection methods have highest success probability",
            ),
            Recommendation(
                "MEDIUM",
                "Establish international coordination framework",
                "Adequate time for proper international cooperation",
            ),
        ]
    elif days > 365:
        recs = [
            Recommendation(
                "CRITICAL",
                "Design and launch kinetic impactor mission immediately",
                "Proven technology with good success probability",
            ),
            Recommendation(
                "CRITICAL",
                "Begin civil defense preparations in parallel",
                "Must have backup plan if deflection fails",
            ),
            Recommendation(
                "HIGH",
                "Secure emergency international approval and funding",
                "Limited time requires fast-track processes",
            ),
        ]
    elif days > 30:
        recs = [
            Recommendation(
                "CRITICAL",
                "Evaluate nuclear standoff burst option",
                "May be only deflection option with remaining time",
            ),
            Recommendation(
                "CRITICAL",
                "Focus primarily on mass evacuation",
                "Civil defense is now primary life-saving strategy",
            ),
            Recommendation(
                "CRITICAL",
                "Emergency UN Security Council authorization",
                "Any deflection attempt requires immediate approval",
            ),
        ]
    else:
        recs = [
            Recommendation(
                "CRITICAL",
                "EVACUATE impact zone immediately",
                "Insufficient time for deflection - focus on saving lives",
            ),
            Recommendation(
                "CRITICAL",
                "Activate all emergency response systems",
                "Prepare for immediate post-impact rescue and recovery",
            ),
            Recommendation(
                "CRITICAL",
                "Position resources outside impact zone",
                "Emergency services must survive to respond",
            ),
        ]

    if diameter_m > 1000:
        recs.append(
            Recommendation(
                "CRITICAL",
                "This is a potential extinction-level event",
                "Global response required - survival of humanity at stake",
            )
        )
    return recs


def select_approach(
    days: int, timeframes: MitigationTimeframes = DEFAULT_TIMEFRAMES
) -> tuple[str, str]:
    """Return (recommended approach, success probability) for the warning time."""
    if days >= timeframes.decades:
        return "GRADUAL_DEFLECTION", "Very High (90-99%)"
    if days >= timeframes.years:
        return "RAPID_DEFLECTION", "High (70-90%)"
    if days >= timeframes.months:
        return "EMERGENCY_DEFLECTION_OR_DISRUPTION", "Moderate (40-70%)"
    if days >= timeframes.weeks:
        return "LAST_RESORT_DISRUPTION", "Low to Moderate (20-50%)"
    return "CIVIL_DEFENSE_ONLY", "Deflection not possible"


def compute_mitigation(
    spec: ImpactorSpec,
    energy: EnergyProfile,
    now: datetime,
    timeframes: MitigationTimeframes = DEFAULT_TIMEFRAMES,
) -> MitigationPlan:
    """Select a mitigation approach and assemble its strategy catalogue."""
    days = days_until_impact(spec, now)
    approach, success = select_approach(days, timeframes)
    logger.debug("Mitigation: %d days until impact -> %s", days, approach)

    deflection: list[Strategy] = []
    disruption: list[Strategy] = []
    if approach == "GRADUAL_DEFLECTION":
        deflection = gradual_deflection_methods(spec.diameter_m)
    elif approach == "RAPID_DEFLECTION":
        deflection = rapid_deflection_methods(
            spec.diameter_m, energy.mass_kg, spec.velocity_km_s
        )
    elif approach == "EMERGENCY_DEFLECTION_OR_DISRUPTION":
        disruption = disruption_methods(spec.diameter_m)
        deflection = emergency_deflection_methods(spec.diameter_m)
    elif approach == "LAST_RESORT_DISRUPTION":
        disruption = last_resort_disruption()

    return MitigationPlan(
        time_available=format_timeframe(days),
        days_until_impact=days,
        characteristics=AsteroidCharacteristics(
            diameter_m=spec.diameter_m,
            mass_kg=energy.mass_kg,
            velocity_km_s=spec.velocity_km_s,
            size_category=size_category(spec.diameter_m),
        ),
        recommended_approach=approach,
        success_probability=success,
        deflection_strategies=deflection,
        disruption_strategies=disruption,
        civil_defense_strategies=civil_defense_strategies(days, energy.megatons, timeframes),
        implementation_timeline=implementation_timeline(approach),
        resource_requirements=resource_requirements(approach),
        international_coordination=coordination_requirements(days),
        key_recommendations=key_recommendations(days, spec.diameter_m),
    )
