"""Configuration model for the impact effects pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from impact_effects.constants import DEFAULT_PHYSICAL

OutputFormat = Literal["json", "geojson", "csv", "markdown"]


class ImpactEffectsConfig(BaseSettings):
    """All configurable parameters for the impact effects pipeline.

    Values can be set via constructor arguments, environment variables
    prefixed with IMPACT_EFFECTS_, or defaults.  Physical constants and
    classification thresholds are deliberately not part of this model.
    """

    model_config = {"env_prefix": "IMPACT_EFFECTS_"}

    default_density_kg_m3: float = Field(
        default=DEFAULT_PHYSICAL.default_density_kg_m3,
        gt=0.0,
        description="Density assumed when none is supplied.",
    )
    probability_map_samples: int = Field(
        default=50, ge=1, le=10000, description="Monte Carlo samples per probability map."
    )
    uncertainty_km: float = Field(
        default=1000.0, gt=0.0, description="Assumed positional uncertainty (km)."
    )
    random_seed: int | None = Field(
        default=None, description="Seed for the impact-point sampler. Unseeded when unset."
    )
    parallel_stages: bool = Field(
        default=False,
        description="Run the seismic, blast and mitigation stages concurrently.",
    )
    nasa_api_key: str = Field(
        default="DEMO_KEY", description="API key for the NASA NeoWs feed."
    )
    request_timeout: int = Field(
        default=30, ge=5, le=300, description="HTTP request timeout in seconds."
    )
    cache_enabled: bool = Field(
        default=True, description="Enable disk caching of NeoWs feed responses."
    )
    output_file: Path = Field(
        default=Path("impact_effects_output.json"), description="Output file path."
    )
    output_format: OutputFormat = Field(
        default="json", description="Output format: json, geojson, csv, or markdown."
    )
