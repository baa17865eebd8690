"""Shared fixtures for impact_effects tests."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
import pytest

from impact_effects.config import ImpactEffectsConfig
from impact_effects.geo import GeographicRisk
from impact_effects.models import EffectsReport, ImpactorSpec
from impact_effects.pipeline import compute_effects

FIXTURES_DIR = Path(__file__).parent / "fixtures"

FIXED_NOW = datetime(2025, 9, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_neows_feed() -> dict:
    return json.loads((FIXTURES_DIR / "neows_feed_sample.json").read_text())


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def config() -> ImpactEffectsConfig:
    return ImpactEffectsConfig(random_seed=42, cache_enabled=False)


@pytest.fixture
def near_miss_spec() -> ImpactorSpec:
    """500 m hazardous object passing 25,000 km from Earth."""
    return ImpactorSpec(
        diameter_m=500.0,
        density_kg_m3=3000.0,
        velocity_km_s=30.2,
        miss_distance_km=25000.0,
        is_hazardous=True,
        days_until_impact=5000,
        name="Near miss",
    )


@pytest.fixture
def direct_hit_spec() -> ImpactorSpec:
    """100 m object on a direct impact path, five days out."""
    return ImpactorSpec(
        diameter_m=100.0,
        velocity_km_s=25.0,
        miss_distance_km=0.0,
        days_until_impact=5,
        name="Direct hit",
    )


@pytest.fixture
def europe_hit_spec() -> ImpactorSpec:
    """User-located 100 m impact in central Europe."""
    return ImpactorSpec(
        diameter_m=100.0,
        velocity_km_s=25.0,
        latitude=50.0,
        longitude=10.0,
        impact_date=datetime(2026, 3, 1, tzinfo=timezone.utc),
        name="Europe hit",
    )


@pytest.fixture
def pacific_hit_spec() -> ImpactorSpec:
    """User-located 100 m impact in the open Pacific."""
    return ImpactorSpec(
        diameter_m=100.0,
        velocity_km_s=25.0,
        latitude=0.0,
        longitude=-150.0,
        days_until_impact=400,
        name="Pacific hit",
    )


@pytest.fixture
def land_risk() -> GeographicRisk:
    return GeographicRisk(
        primary_region="Europe",
        continent="Europe",
        latitude=50.0,
        longitude=10.0,
        crater_radius_km=0.9,
        affected_area_km2=22.9,
        risk_level="LOW",
    )


@pytest.fixture
def ocean_risk() -> GeographicRisk:
    return GeographicRisk(
        primary_region="Ocean",
        continent=None,
        latitude=0.0,
        longitude=-150.0,
        crater_radius_km=0.9,
        affected_area_km2=22.9,
        risk_level="LOW",
    )


@pytest.fixture
def europe_report(europe_hit_spec, config, now) -> EffectsReport:
    return compute_effects(europe_hit_spec, config, now=now)


@pytest.fixture
def sample_reports(europe_hit_spec, pacific_hit_spec, near_miss_spec, config, now) -> list[
    EffectsReport
]:
    """One land impact, one ocean impact and one near miss."""
    rng = np.random.default_rng(7)
    return [
        compute_effects(spec, config, now=now, rng=rng)
        for spec in (europe_hit_spec, pacific_hit_spec, near_miss_spec)
    ]
