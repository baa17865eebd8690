"""Mass, energy, crater and impact-probability kernels."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from impact_effects.constants import (
    DEFAULT_PHYSICAL,
    DEFAULT_PROBABILITY,
    SECONDS_PER_DAY,
    SECONDS_PER_YEAR,
    PhysicalConstants,
    ProbabilityThresholds,
)
from impact_effects.models import (
    CraterEstimate,
    EnergyProfile,
    ImpactorSpec,
    ImpactProbability,
    InvalidParameter,
    NextPassEstimate,
)


def sphere_mass(diameter_m: float, density_kg_m3: float) -> float:
    """Mass (kg) of a homogeneous sphere."""
    if diameter_m <= 0:
        raise InvalidParameter(f"diameter_m must be > 0, got {diameter_m!r}")
    if density_kg_m3 <= 0:
        raise InvalidParameter(f"density_kg_m3 must be > 0, got {density_kg_m3!r}")
    radius = diameter_m / 2
    return density_kg_m3 * (4 / 3) * math.pi * radius**3


def kinetic_energy(mass_kg: float, velocity_m_s: float) -> float:
    """Kinetic energy in joules, ``0.5 * m * v**2``."""
    if velocity_m_s <= 0:
        raise InvalidParameter(f"velocity must be > 0, got {velocity_m_s!r}")
    return 0.5 * mass_kg * velocity_m_s**2


def compute_energy(
    spec: ImpactorSpec, constants: PhysicalConstants = DEFAULT_PHYSICAL
) -> EnergyProfile:
    """Resolve the impactor mass and convert its kinetic energy to TNT equivalents.

    A mass carried on the impactor wins over the diameter/density estimate.
    Raises :class:`InvalidParameter` when the energy is not a finite float.
    """
    try:
        if spec.mass_kg is not None:
            mass = spec.mass_kg
            source = "supplied"
        else:
            mass = sphere_mass(spec.diameter_m, spec.density_kg_m3)
            source = "derived"
        energy = kinetic_energy(mass, spec.velocity_m_s)
    except OverflowError as exc:
        raise InvalidParameter(f"kinetic energy out of range: {exc}") from exc
    if not math.isfinite(mass) or not math.isfinite(energy):
        raise InvalidParameter(
            f"kinetic energy out of range: mass {mass!r} kg, energy {energy!r} J"
        )

    return EnergyProfile(
        mass_kg=mass,
        kinetic_energy_j=energy,
        megatons=energy / constants.joules_per_megaton,
        kilotons=energy / constants.joules_per_kiloton,
        mass_source=source,
    )


def crater_diameter(
    kinetic_energy_j: float, constants: PhysicalConstants = DEFAULT_PHYSICAL
) -> float:
    """Final crater diameter (m) from the empirical energy scaling law.

        D = 0.2 * (E / g) ** (1 / 3.4)
    """
    energy_term = kinetic_energy_j / constants.gravity_m_s2
    return constants.crater_scaling_constant * math.pow(energy_term, constants.crater_exponent)


def estimate_crater(
    kinetic_energy_j: float, constants: PhysicalConstants = DEFAULT_PHYSICAL
) -> CraterEstimate:
    diameter = crater_diameter(kinetic_energy_j, constants)
    return CraterEstimate(diameter_m=diameter, radius_m=diameter / 2)


def impact_probability(
    miss_distance_km: float,
    diameter_km: float,
    constants: PhysicalConstants = DEFAULT_PHYSICAL,
    thresholds: ProbabilityThresholds = DEFAULT_PROBABILITY,
) -> float:
    """Heuristic impact probability from the miss distance.

    A miss distance inside the Earth's radius is a direct hit (1.0). Up to a
    critical distance of ``R + 10 * d_km`` the probability decays as
    ``exp(-5 * (miss - R) / (10 * d_km))``; beyond it a floor of 1e-6 applies.
    """
    earth_radius_km = constants.earth_radius_km
    if miss_distance_km <= earth_radius_km:
        return 1.0

    margin = thresholds.diameter_margin * diameter_km
    if miss_distance_km <= earth_radius_km + margin:
        ratio = (miss_distance_km - earth_radius_km) / margin
        return math.exp(-thresholds.decay_rate * ratio)
    return thresholds.floor


def risk_level(
    probability: float,
    is_hazardous: bool,
    thresholds: ProbabilityThresholds = DEFAULT_PROBABILITY,
) -> str:
    """Map an impact probability to its risk label. Bounds are inclusive."""
    if probability >= thresholds.critical:
        return "CRITICAL"
    if probability >= thresholds.high:
        return "HIGH"
    if probability >= thresholds.moderate:
        return "MODERATE"
    if is_hazardous:
        return "LOW-HAZARDOUS"
    return "MINIMAL"


def assess_probability(
    spec: ImpactorSpec,
    constants: PhysicalConstants = DEFAULT_PHYSICAL,
    thresholds: ProbabilityThresholds = DEFAULT_PROBABILITY,
) -> ImpactProbability:
    value = impact_probability(
        spec.miss_distance_km, spec.diameter_m / 1000, constants, thresholds
    )
    return ImpactProbability(
        value=value,
        percentage=f"{value * 100:.8f}",
        risk_level=risk_level(value, spec.is_hazardous, thresholds),
    )


def semi_major_axis(
    velocity_m_s: float,
    distance_m: float,
    constants: PhysicalConstants = DEFAULT_PHYSICAL,
) -> float:
    """Vis-viva semi-major axis (m). Non-positive for unbound orbits."""
    term = 2 / distance_m - velocity_m_s**2 / constants.sun_gm
    if term == 0:
        return math.inf
    return 1 / term


def orbital_period(
    semi_major_axis_m: float, constants: PhysicalConstants = DEFAULT_PHYSICAL
) -> float:
    """Kepler's third law period in seconds."""
    return 2 * math.pi * math.sqrt(semi_major_axis_m**3 / constants.sun_gm)


def estimate_next_pass(
    velocity_km_s: float,
    last_pass: datetime | None,
    constants: PhysicalConstants = DEFAULT_PHYSICAL,
) -> NextPassEstimate | None:
    """Estimate the next close approach assuming a circular 1 AU reference orbit.

    Returns None when the velocity is at or above solar escape speed at 1 AU.
    """
    a = semi_major_axis(velocity_km_s * 1000, constants.astronomical_unit_m, constants)
    if not math.isfinite(a) or a <= 0:
        return None

    period = orbital_period(a, constants)
    next_pass = None
    if last_pass is not None:
        try:
            next_pass = (last_pass + timedelta(seconds=period)).date().isoformat()
        except OverflowError:
            # beyond datetime's year 9999 limit
            next_pass = None

    return NextPassEstimate(
        period_seconds=period,
        period_days=period / SECONDS_PER_DAY,
        period_years=period / SECONDS_PER_YEAR,
        next_pass_date=next_pass,
    )
