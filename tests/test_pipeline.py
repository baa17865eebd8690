"""Integration tests for the effects pipeline."""

from __future__ import annotations

from unittest.mock import patch

import numpy as np
import pytest

from impact_effects.blast import BlastProfile
from impact_effects.config import ImpactEffectsConfig
from impact_effects.fetchers.neows import extract_specs
from impact_effects.geo import GeographicImpactData
from impact_effects.mitigation import MitigationPlan
from impact_effects.models import (
    ImpactorSpec,
    InvalidParameter,
    StageComputationError,
    StageError,
)
from impact_effects.pipeline import compute_effects, compute_effects_for_feed
from impact_effects.seismic import SeismicProfile


class TestComputeEffects:
    def test_near_miss(self, near_miss_spec, config, now):
        report = compute_effects(near_miss_spec, config, now=now)

        assert report.energy.megatons == pytest.approx(21_400, rel=1e-2)
        assert report.probability.risk_level == "LOW-HAZARDOUS"
        assert report.errors == []

        geo = report.geographic
        assert isinstance(geo, GeographicImpactData)
        assert geo.location.point is None
        assert geo.location.uncertainty_zone is not None
        assert geo.probability_map is not None
        assert geo.probability_map.sample_count == config.probability_map_samples

        # No classified point, so the quake is modelled on land
        assert isinstance(report.seismic, SeismicProfile)
        assert report.seismic.magnitude.impact_type == "Land"
        assert report.seismic.magnitude.richter_magnitude == pytest.approx(8.87, abs=0.02)
        assert report.seismic.magnitude.primary_magnitude == pytest.approx(9.07, abs=0.02)

        assert isinstance(report.blast, BlastProfile)
        assert report.blast.classification.category == "CONTINENTAL DEVASTATION"

        assert isinstance(report.mitigation, MitigationPlan)
        assert report.mitigation.recommended_approach == "RAPID_DEFLECTION"
        assert report.mitigation.deflection_strategies
        assert report.mitigation.disruption_strategies == []

        assert report.summary is not None
        assert report.summary.threat_level == "CATASTROPHIC"

    def test_direct_hit(self, direct_hit_spec, config, now):
        report = compute_effects(direct_hit_spec, config, now=now)

        assert report.energy.kinetic_energy_j == pytest.approx(4.909e17, rel=1e-3)
        assert report.probability.value == 1.0
        assert report.probability.risk_level == "CRITICAL"
        assert report.geographic.location.point is not None
        assert report.geographic.location.point.confidence == "low"
        assert report.geographic.risk is not None

        plan = report.mitigation
        assert plan.recommended_approach == "CIVIL_DEFENSE_ONLY"
        assert plan.civil_defense_strategies[0].strategy == "IMMEDIATE ACTIONS - LIMITED TIME"
        assert report.summary.urgency_level == "IMMEDIATE"

    def test_ocean_impact_generates_tsunami(self, pacific_hit_spec, config, now):
        report = compute_effects(pacific_hit_spec, config, now=now)

        assert report.geographic.risk.primary_region == "Ocean"
        assert report.seismic.magnitude.impact_type == "Ocean"
        assert report.seismic.magnitude.primary_magnitude == pytest.approx(7.3, abs=0.05)
        assert report.seismic.tsunami_warning is not None
        assert report.blast.classification.impact_type == "shallow_water"
        assert report.mitigation.recommended_approach == "EMERGENCY_DEFLECTION_OR_DISRUPTION"

    def test_land_impact_has_no_tsunami(self, europe_report):
        assert europe_report.geographic.risk.primary_region == "Europe"
        assert europe_report.seismic.magnitude.impact_type == "Land"
        assert europe_report.seismic.magnitude.primary_magnitude == pytest.approx(7.56, abs=0.05)
        assert europe_report.seismic.tsunami_warning is None
        assert europe_report.mitigation.days_until_impact == 180

    def test_next_pass_from_approach_date(self, europe_report):
        assert europe_report.next_pass is not None
        assert europe_report.next_pass.next_pass_date > "2026-03-01"

    def test_next_pass_defaults_to_now(self, pacific_hit_spec, config, now):
        report = compute_effects(pacific_hit_spec, config, now=now)
        assert report.next_pass.next_pass_date > now.date().isoformat()


class TestPartialFailure:
    def test_missing_timing_fails_only_mitigation(self, config, now):
        spec = ImpactorSpec(diameter_m=100.0, velocity_km_s=25.0, miss_distance_km=0.0)
        report = compute_effects(spec, config, now=now)

        assert isinstance(report.mitigation, StageError)
        assert report.mitigation.stage == "mitigation"
        assert report.mitigation.error == "Mitigation strategy calculation failed"
        assert "No impact date" in report.mitigation.details
        assert isinstance(report.seismic, SeismicProfile)
        assert isinstance(report.blast, BlastProfile)
        assert report.errors == [report.mitigation]
        assert report.summary.urgency_level == "UNDETERMINED"

    def test_failed_stage_leaves_others_intact(self, europe_hit_spec, config, now):
        with patch(
            "impact_effects.pipeline.compute_seismic",
            side_effect=StageComputationError("no energy"),
        ):
            report = compute_effects(europe_hit_spec, config, now=now)

        assert isinstance(report.seismic, StageError)
        assert report.seismic.error == "Seismic calculation failed"
        assert report.seismic.details == "no energy"
        assert isinstance(report.blast, BlastProfile)
        assert isinstance(report.mitigation, MitigationPlan)
        assert all(w.stage == "blast" for w in report.summary.critical_warnings)

    def test_failed_geography_defaults_to_land(self, pacific_hit_spec, config, now):
        with patch(
            "impact_effects.pipeline.compute_geographic_data",
            side_effect=StageComputationError("no location"),
        ):
            report = compute_effects(pacific_hit_spec, config, now=now)

        assert isinstance(report.geographic, StageError)
        assert report.geographic.error == "Geographic impact calculation failed"
        assert report.seismic.magnitude.impact_type == "Land"
        assert report.seismic.tsunami_warning is None

    def test_energy_overflow_rejected_before_stages(self, config, now):
        spec = ImpactorSpec(diameter_m=100.0, velocity_km_s=1e200, days_until_impact=10)
        with pytest.raises(InvalidParameter, match="out of range"):
            compute_effects(spec, config, now=now)

    def test_unexpected_errors_propagate(self, europe_hit_spec, config, now):
        with (
            patch("impact_effects.pipeline.compute_blast", side_effect=RuntimeError("bug")),
            pytest.raises(RuntimeError),
        ):
            compute_effects(europe_hit_spec, config, now=now)


class TestDeterminism:
    def test_seeded_runs_match(self, direct_hit_spec, now):
        config = ImpactEffectsConfig(random_seed=123)
        a = compute_effects(direct_hit_spec, config, now=now)
        b = compute_effects(direct_hit_spec, config, now=now)
        assert a == b

    def test_parallel_matches_sequential(self, direct_hit_spec, now):
        sequential = compute_effects(
            direct_hit_spec, ImpactEffectsConfig(random_seed=9, parallel_stages=False), now=now
        )
        parallel = compute_effects(
            direct_hit_spec, ImpactEffectsConfig(random_seed=9, parallel_stages=True), now=now
        )
        assert parallel == sequential

    def test_explicit_rng_overrides_seed(self, direct_hit_spec, config, now):
        a = compute_effects(direct_hit_spec, config, now=now, rng=np.random.default_rng(1))
        b = compute_effects(direct_hit_spec, config, now=now, rng=np.random.default_rng(1))
        assert a.geographic == b.geographic


class TestComputeEffectsForFeed:
    def test_feed_result(self, sample_neows_feed, config, now):
        specs = extract_specs(sample_neows_feed)
        result = compute_effects_for_feed(specs, config, now=now)

        assert len(result.reports) == 2
        assert result.summary.total_objects == 2
        assert result.summary.hazardous_count == 1
        assert [r.spec.name for r in result.reports] == ["465633 (2009 JR5)", "(2010 PK9)"]

    def test_feed_objects_use_approach_date(self, sample_neows_feed, config, now):
        result = compute_effects_for_feed(extract_specs(sample_neows_feed), config, now=now)
        for report in result.reports:
            # Mitigation timing comes from the close-approach date
            assert isinstance(report.mitigation, MitigationPlan)
            assert report.mitigation.days_until_impact in (0, 1)

    def test_empty_batch(self, config, now):
        result = compute_effects_for_feed([], config, now=now)
        assert result.reports == []
        assert result.summary.total_objects == 0
