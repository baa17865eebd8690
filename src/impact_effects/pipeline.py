"""Pipeline orchestrator: energy -> crater/probability -> geography -> effects -> summary."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

import numpy as np

from impact_effects.blast import compute_blast
from impact_effects.config import ImpactEffectsConfig
from impact_effects.geo import GeographicImpactData, compute_geographic_data
from impact_effects.mitigation import compute_mitigation
from impact_effects.models import (
    EffectsReport,
    FeedResult,
    ImpactorSpec,
    StageComputationError,
    StageError,
)
from impact_effects.physics import (
    assess_probability,
    compute_energy,
    estimate_crater,
    estimate_next_pass,
)
from impact_effects.seismic import compute_seismic
from impact_effects.summary import build_summary, summarize_feed

logger = logging.getLogger(__name__)

_STAGE_ERRORS = {
    "geographic": "Geographic impact calculation failed",
    "seismic": "Seismic calculation failed",
    "blast": "Blast radius calculation failed",
    "mitigation": "Mitigation strategy calculation failed",
}


def _run_stage(stage: str, func: Callable[..., Any], *args: Any) -> Any:
    """Run one stage, turning a StageComputationError into a StageError marker."""
    try:
        return func(*args)
    except StageComputationError as exc:
        logger.warning("%s stage failed: %s", stage, exc)
        return StageError(stage=stage, error=_STAGE_ERRORS[stage], details=str(exc))


def compute_effects(
    spec: ImpactorSpec,
    config: ImpactEffectsConfig | None = None,
    *,
    now: datetime | None = None,
    rng: np.random.Generator | None = None,
) -> EffectsReport:
    """Compute the full effects report for one impactor.

    Steps:
    1. Mass and kinetic energy
    2. Crater, impact probability and next-pass estimate
    3. Impact point, regional risk and probability map
    4. Seismic, blast and mitigation stages (optionally concurrent)
    5. Summary

    A stage that cannot run leaves a :class:`StageError` in its slot; the
    remaining stages still run.
    """
    if config is None:
        config = ImpactEffectsConfig()
    if now is None:
        now = datetime.now(timezone.utc)
    if rng is None:
        rng = np.random.default_rng(config.random_seed)
    approach_time = spec.impact_date or now

    # Steps 1-2: InvalidParameter here means the energy overflowed
    energy = compute_energy(spec)
    crater = estimate_crater(energy.kinetic_energy_j)
    report = EffectsReport(
        spec=spec,
        energy=energy,
        crater=crater,
        probability=assess_probability(spec),
        next_pass=estimate_next_pass(spec.velocity_km_s, approach_time),
    )
    logger.debug(
        "%s: %.3g J (%.3g MT), crater %.0f m, risk %s",
        spec.name,
        energy.kinetic_energy_j,
        energy.megatons,
        crater.diameter_m,
        report.probability.risk_level,
    )

    # Step 3: geography feeds the ocean/land switch of the effect stages
    geographic = _run_stage(
        "geographic",
        compute_geographic_data,
        spec,
        crater.radius_km,
        approach_time,
        rng,
        config.probability_map_samples,
        config.uncertainty_km,
    )
    report = replace(report, geographic=geographic)
    risk = geographic.risk if isinstance(geographic, GeographicImpactData) else None

    # Step 4: independent effect stages
    stages: dict[str, tuple[Callable[..., Any], tuple[Any, ...]]] = {
        "seismic": (compute_seismic, (energy.kinetic_energy_j, risk)),
        "blast": (compute_blast, (energy.kinetic_energy_j, crater.radius_km, risk)),
        "mitigation": (compute_mitigation, (spec, energy, now)),
    }
    if config.parallel_stages:
        with ThreadPoolExecutor(max_workers=len(stages)) as executor:
            futures = {
                name: executor.submit(_run_stage, name, func, *args)
                for name, (func, args) in stages.items()
            }
            results = {name: future.result() for name, future in futures.items()}
    else:
        results = {name: _run_stage(name, func, *args) for name, (func, args) in stages.items()}
    report = replace(report, **results)

    # Step 5: summary
    return replace(report, summary=build_summary(report))


def compute_effects_for_feed(
    specs: list[ImpactorSpec],
    config: ImpactEffectsConfig | None = None,
    *,
    now: datetime | None = None,
    rng: np.random.Generator | None = None,
) -> FeedResult:
    """Compute reports for a batch of impactors and summarise them.

    One random generator is shared across the batch so a seeded run is
    reproducible end to end.
    """
    if config is None:
        config = ImpactEffectsConfig()
    if now is None:
        now = datetime.now(timezone.utc)
    if rng is None:
        rng = np.random.default_rng(config.random_seed)

    logger.info("Computing effects for %d objects...", len(specs))
    reports = [compute_effects(spec, config, now=now, rng=rng) for spec in specs]
    failed = sum(1 for r in reports if r.errors)
    if failed:
        logger.warning("%d of %d reports have failed stages", failed, len(reports))

    return FeedResult(reports=reports, summary=summarize_feed(reports))
