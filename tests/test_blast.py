"""Tests for the blast, thermal and ejecta model."""

from __future__ import annotations

import math
from dataclasses import replace

import pytest

from impact_effects.blast import (
    blast_radius,
    compute_blast,
    energy_comparison,
    environmental_effects,
    impact_category,
    mushroom_cloud,
    thermal_radius,
    wind_at_distance,
)
from impact_effects.models import StageComputationError

JOULES_PER_MT = 4.184e15
# 100 m stony body at 25 km/s, ~117 MT
HUNDRED_METRE_ENERGY = 0.5 * 3000 * (4 / 3) * math.pi * 50**3 * 25_000**2
HUNDRED_METRE_CRATER_KM = 0.2 * (HUNDRED_METRE_ENERGY / 9.8) ** (1 / 3.4) / 2 / 1000


@pytest.fixture
def profile():
    return compute_blast(HUNDRED_METRE_ENERGY, HUNDRED_METRE_CRATER_KM)


class TestScalingLaws:
    def test_cube_root_law(self):
        assert blast_radius(1.0, 5.0) == pytest.approx(0.61)
        assert blast_radius(8.0, 5.0) == pytest.approx(1.22)

    def test_unknown_pressure_uses_last_row(self):
        assert blast_radius(1.0, 0.1) == pytest.approx(2.20)

    def test_water_impact_reduces_radius(self):
        assert blast_radius(10.0, 5.0, "shallow_water") < blast_radius(10.0, 5.0, "surface")

    def test_thermal_radius(self):
        expected = 1.8 * (100 * 0.5) ** 0.41 / math.sqrt(1.0)
        assert thermal_radius(100.0, 100.0) == pytest.approx(expected)

    def test_mushroom_cloud_threshold(self):
        assert mushroom_cloud(0.05) is None
        cloud = mushroom_cloud(1000.0)
        assert cloud is not None
        assert cloud.reaches_stratosphere
        assert cloud.global_distribution

    def test_wind_falls_with_distance(self):
        near = wind_at_distance(10.0, 1.0)
        far = wind_at_distance(10.0, 20.0)
        assert near.speed_m_s > far.speed_m_s
        assert near.speed_km_h == pytest.approx(near.speed_m_s * 3.6)


class TestCategories:
    @pytest.mark.parametrize(
        ("megatons", "category"),
        [
            (2_000_000, "PLANETARY EXTINCTION"),
            (21_400, "CONTINENTAL DEVASTATION"),
            (117, "REGIONAL CATASTROPHE"),
            (10, "MAJOR REGIONAL DISASTER"),
            (0.5, "LOCAL DISASTER"),
            (0.01, "LOCALIZED EVENT"),
        ],
    )
    def test_impact_category(self, megatons, category):
        assert impact_category(megatons) == category

    def test_energy_comparison_bands(self):
        assert "Tsar Bomba" in energy_comparison(60)
        assert energy_comparison(0.015).endswith("Hiroshima bomb: 15 KT")


class TestZones:
    def test_blast_radii_strictly_decrease_with_pressure(self, profile):
        zones = list(profile.blast_zones.values())
        pressures = [z.overpressure_psi for z in zones]
        radii = [z.radius_km for z in zones]
        assert pressures == sorted(pressures, reverse=True)
        assert all(a < b for a, b in zip(radii, radii[1:]))

    def test_blast_zone_keys(self, profile):
        assert list(profile.blast_zones) == [
            "total_destruction",
            "severe_damage",
            "moderate_damage",
            "light_damage",
            "minor_damage",
            "glass_breakage",
        ]

    def test_thermal_radii_grow_with_lower_fluence(self, profile):
        thermal = profile.thermal_zones
        assert thermal["vaporization"].radius_km <= thermal["third_degree_burns"].radius_km
        assert (
            thermal["third_degree_burns"].radius_km
            < thermal["second_degree_burns"].radius_km
            < thermal["ignition"].radius_km
            < thermal["first_degree_burns"].radius_km
        )

    def test_vaporization_capped_by_fireball(self, profile):
        assert profile.thermal_zones["vaporization"].radius_km <= profile.fireball.radius_km * 1.2

    def test_evacuation_zones_nested(self, profile):
        evac = profile.evacuation_zones
        radii = [evac[c].radius_km for c in ("red", "orange", "yellow", "green", "blue")]
        assert radii == sorted(radii)
        assert evac["blue"].radius_km == profile.zone_summary.max_affected_radius_km
        assert evac["red"].color == "#FF0000"

    def test_max_radius_covers_every_zone(self, profile):
        max_radius = profile.zone_summary.max_affected_radius_km
        assert max_radius >= profile.blast_zones["glass_breakage"].radius_km
        assert max_radius >= profile.thermal_zones["first_degree_burns"].radius_km
        assert max_radius >= profile.ejecta.dust_and_vapor.radius_km

    def test_ejecta_multiples(self, profile):
        ejecta = profile.ejecta
        assert ejecta.continuous_blanket.radius_km == pytest.approx(HUNDRED_METRE_CRATER_KM * 3)
        assert ejecta.discontinuous.radius_km == pytest.approx(HUNDRED_METRE_CRATER_KM * 7)
        assert ejecta.atmospheric

    def test_dust_cloud_capped(self):
        profile = compute_blast(1e24, 200.0)
        assert profile.ejecta.dust_and_vapor.radius_km == 1000.0

    def test_casualty_rings_non_negative(self, profile):
        casualties = profile.casualties
        assert casualties.near_certain_fatality.area_km2 > 0
        assert casualties.high_casualty.area_km2 > 0
        assert casualties.moderate_casualty.area_km2 > 0


class TestEnvironment:
    def test_hundred_megaton_effects(self, profile):
        env = profile.environment
        assert env.dust_duration == "Months"
        assert env.climate_impact is not None
        assert env.climate_impact.severity == "SEVERE"
        assert env.ozone_depletion.severity.startswith("Moderate")
        assert env.acid_rain.radius_km == pytest.approx(
            profile.zone_summary.max_affected_radius_km * 50
        )

    def test_small_yield_has_no_global_effects(self):
        env = environmental_effects(1.0, 5.0)
        assert env.climate_impact is None
        assert env.ozone_depletion is None
        assert env.acid_rain is None
        assert env.dust_duration == "Weeks"


class TestComputeBlast:
    def test_classification(self, profile):
        assert profile.classification.impact_type == "surface"
        assert profile.classification.category == "REGIONAL CATASTROPHE"
        assert profile.energy_yield.megatons == pytest.approx(
            HUNDRED_METRE_ENERGY / JOULES_PER_MT
        )

    def test_ocean_is_shallow_water(self, ocean_risk):
        surface = compute_blast(HUNDRED_METRE_ENERGY, HUNDRED_METRE_CRATER_KM)
        ocean = compute_blast(HUNDRED_METRE_ENERGY, HUNDRED_METRE_CRATER_KM, ocean_risk)
        assert ocean.classification.impact_type == "shallow_water"
        assert (
            ocean.blast_zones["moderate_damage"].radius_km
            < surface.blast_zones["moderate_damage"].radius_km
        )

    def test_warnings_sorted_by_priority(self, profile):
        priorities = [w.priority for w in profile.warnings]
        assert priorities == sorted(priorities)
        assert profile.warnings[-1].category == "ADVISORY"

    def test_extreme_blast_warning(self, profile):
        assert profile.zone_summary.max_affected_radius_km >= 100
        assert any(
            w.severity == "EXTREME" and w.category == "BLAST" for w in profile.warnings
        )

    def test_populated_region_adds_mass_casualty_warning(self, land_risk):
        risk = replace(land_risk, risk_level="CATASTROPHIC")
        profile = compute_blast(HUNDRED_METRE_ENERGY, HUNDRED_METRE_CRATER_KM, risk)
        assert any(w.category == "POPULATION" for w in profile.warnings)

    @pytest.mark.parametrize("energy", [None, 0.0, -5.0, math.nan])
    def test_missing_energy_raises(self, energy):
        with pytest.raises(StageComputationError, match="Kinetic energy"):
            compute_blast(energy, 1.0)

    @pytest.mark.parametrize("radius", [None, 0.0, math.inf])
    def test_missing_crater_raises(self, radius):
        with pytest.raises(StageComputationError, match="Crater radius"):
            compute_blast(HUNDRED_METRE_ENERGY, radius)
