"""Physical constants and fixed model tables.

Each table is a frozen dataclass so that kernels receive their constants as
an explicit argument. The module-level ``DEFAULT_*`` instances are what the
pipeline injects when nothing else is given.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicalConstants:
    """Shared physical constants and unit conversions."""

    gravitational_constant: float = 6.674e-11  # m^3 kg^-1 s^-2
    sun_mass_kg: float = 1.989e30
    astronomical_unit_m: float = 1.496e11
    earth_radius_m: float = 6_371_000.0
    gravity_m_s2: float = 9.8
    default_density_kg_m3: float = 3000.0
    crater_scaling_constant: float = 0.2
    crater_exponent: float = 1 / 3.4
    joules_per_megaton: float = 4.184e15
    joules_per_kiloton: float = 4.184e12
    sidereal_day_hours: float = 23.9344696

    @property
    def earth_radius_km(self) -> float:
        return self.earth_radius_m / 1000

    @property
    def degrees_per_hour(self) -> float:
        return 360 / self.sidereal_day_hours

    @property
    def sun_gm(self) -> float:
        return self.gravitational_constant * self.sun_mass_kg


@dataclass(frozen=True)
class ProbabilityThresholds:
    """Impact-probability bands. A probability equal to a bound takes the higher tier."""

    critical: float = 0.01
    high: float = 0.001
    moderate: float = 0.0001
    floor: float = 1e-6
    diameter_margin: float = 10.0  # critical distance = R_earth + margin * d_km
    decay_rate: float = 5.0


@dataclass(frozen=True)
class SeismicConstants:
    """Energy-to-magnitude conversion and attenuation parameters."""

    richter_conversion: float = 2 / 3
    richter_offset: float = 2.9
    moment_offset: float = 10.7
    moment_adjustment: float = 8.0
    efficiency_land: float = 0.005
    efficiency_ocean: float = 0.002
    beta_land: float = 2.0
    beta_ocean: float = 2.5
    reference_distance_km: float = 100.0
    magnitude_switch: float = 6.5
    tsunami_threshold: float = 7.0
    omori_c_hours: float = 0.1
    omori_p: float = 1.1
    forecast_hours: float = 24.0
    largest_aftershock_drop: float = 1.2
    pga_a: float = 0.5
    pga_b: float = 1.0
    pga_c: float = 0.5
    regional_distances_km: tuple[tuple[str, float], ...] = (
        ("epicenter", 10.0),
        ("near_field", 100.0),
        ("far_field", 500.0),
        ("distant", 2000.0),
    )


@dataclass(frozen=True)
class BlastConstants:
    """Overpressure, thermal and fireball scaling parameters (yield in megatons)."""

    # (psi, scaling constant k) ordered from highest to lowest overpressure
    overpressure_scaling: tuple[tuple[float, float], ...] = (
        (20.0, 0.28),
        (10.0, 0.40),
        (5.0, 0.61),
        (2.0, 1.04),
        (1.0, 1.50),
        (0.5, 2.20),
    )
    impact_efficiency: tuple[tuple[str, float], ...] = (
        ("surface", 1.0),
        ("airburst", 1.5),
        ("shallow_water", 0.7),
        ("deep_water", 0.5),
    )
    psi_to_kpa: float = 6.895
    # cal/cm^2
    vaporization_fluence: float = 500.0
    third_degree_fluence: float = 100.0
    second_degree_fluence: float = 40.0
    ignition_fluence: float = 20.0
    first_degree_fluence: float = 10.0
    thermal_k: float = 1.8
    thermal_exponent: float = 0.41
    atmospheric_transmission: float = 0.5
    fireball_k: float = 0.09
    fireball_exponent: float = 0.4
    fireball_duration_k: float = 0.3
    fireball_temperature_k: float = 5700.0
    fireball_temperature_exponent: float = 0.1
    mushroom_threshold_mt: float = 0.1
    mushroom_height_k: float = 6.0
    mushroom_cap_k: float = 3.0
    stratosphere_km: float = 15.0
    wind_reference_psi: float = 10.0
    wind_reference_k: float = 0.40
    wind_attenuation_exponent: float = 1.5
    dust_cloud_cap_km: float = 1000.0

    def efficiency(self, impact_type: str) -> float:
        return dict(self.impact_efficiency).get(impact_type, 1.0)

    def scaling_constant(self, overpressure_psi: float) -> float:
        """Lookup k(P): the first table row whose threshold the pressure reaches."""
        for threshold, k in self.overpressure_scaling:
            if overpressure_psi >= threshold:
                return k
        return self.overpressure_scaling[-1][1]


@dataclass(frozen=True)
class MitigationTimeframes:
    """Days-until-impact lower bounds for each strategy bucket."""

    decades: int = 10950
    years: int = 3650
    months: int = 365
    weeks: int = 30
    imminent: int = 7


DEFAULT_PHYSICAL = PhysicalConstants()
DEFAULT_PROBABILITY = ProbabilityThresholds()
DEFAULT_SEISMIC = SeismicConstants()
DEFAULT_BLAST = BlastConstants()
DEFAULT_TIMEFRAMES = MitigationTimeframes()

DEGREES_PER_RADIAN_APPROX = 57.3
J2000_GMST_DEG = 280.46061837
GMST_RATE_DEG_PER_DAY = 360.98564736629
GMST_RATE_DEG_PER_HOUR = 15.04107
SECONDS_PER_DAY = 86400.0
SECONDS_PER_YEAR = 365.25 * SECONDS_PER_DAY
