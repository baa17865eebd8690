"""FastAPI wrapper for the impact effects pipeline."""

from __future__ import annotations

import json
import logging
import tempfile
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Annotated, Any

import requests
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from impact_effects import __version__
from impact_effects.config import ImpactEffectsConfig, OutputFormat
from impact_effects.exporters import export_csv, export_geojson, export_markdown
from impact_effects.exporters.json_export import json_default, report_to_dict
from impact_effects.fetchers.neows import extract_specs, fetch_neo_feed
from impact_effects.models import EffectsReport, FeedSummary, ImpactorSpec, InvalidParameter
from impact_effects.pipeline import compute_effects, compute_effects_for_feed

logger = logging.getLogger(__name__)

_CONTENT_TYPES: dict[str, str] = {
    "json": "application/json",
    "geojson": "application/geo+json",
    "csv": "text/csv; charset=utf-8",
    "markdown": "text/markdown; charset=utf-8",
}

_SUFFIX: dict[str, str] = {
    "geojson": ".geojson",
    "csv": ".csv",
    "markdown": ".md",
}

_EXPORTERS: dict[str, Any] = {
    "geojson": export_geojson,
    "csv": export_csv,
    "markdown": export_markdown,
}


class CustomHitRequest(BaseModel):
    """Body of ``POST /custom-hit``.

    Range checks live on :class:`ImpactorSpec`; violations come back as 400
    with the constraint that failed.
    """

    model_config = ConfigDict(populate_by_name=True)

    diameter: float = Field(description="Diameter in metres.")
    velocity: float = Field(description="Velocity in km/s.")
    density: float | None = Field(default=None, description="Density in kg/m³.")
    mass: float | None = Field(default=None, description="Mass in kg; overrides density.")
    miss: float = Field(default=0.0, description="Miss distance in km.")
    approach: float | None = Field(default=None, description="Approach in lunar distances.")
    hazard: bool = Field(default=False, description="Potentially hazardous flag.")
    date: datetime | None = Field(default=None, description="Impact date/time (UTC if naive).")
    days_until_impact: int | None = Field(default=None, description="Overrides date.")
    lat: float | None = Field(default=None, description="Impact latitude.")
    lon: float | None = Field(default=None, alias="long", description="Impact longitude.")
    name: str = "Custom impact scenario"
    seed: int | None = Field(default=None, description="Seed for the impact-point sampler.")

    def to_spec(self, default_density: float) -> ImpactorSpec:
        impact_date = self.date
        if impact_date is not None and impact_date.tzinfo is None:
            impact_date = impact_date.replace(tzinfo=timezone.utc)
        return ImpactorSpec(
            diameter_m=self.diameter,
            velocity_km_s=self.velocity,
            density_kg_m3=self.density if self.density is not None else default_density,
            mass_kg=self.mass,
            miss_distance_km=self.miss,
            approach_lunar_distances=self.approach,
            is_hazardous=self.hazard,
            impact_date=impact_date,
            days_until_impact=self.days_until_impact,
            latitude=self.lat,
            longitude=self.lon,
            name=self.name,
        )


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncGenerator[None, None]:
    """Store startup state for the /health endpoint."""
    application.state.start_time = datetime.now(tz=timezone.utc)
    application.state.report_count = 0
    yield


app = FastAPI(
    title="Impact Effects API",
    description="Physical-effects reports for near-Earth object impacts.",
    version=__version__,
    lifespan=lifespan,
)


def _to_json(data: Any) -> JSONResponse:
    # Round-trip through json so datetimes in reports serialise consistently
    return JSONResponse(content=json.loads(json.dumps(data, default=json_default)))


def _export(
    reports: list[EffectsReport],
    fmt: OutputFormat,
    summary: FeedSummary | None = None,
) -> Response:
    """Serialize reports into the requested format."""
    if fmt == "json":
        payload: Any = [report_to_dict(r) for r in reports]
        if summary is not None:
            payload = {"summary": asdict(summary), "reports": payload}
        return _to_json(payload)

    exporter = _EXPORTERS[fmt]
    kwargs: dict[str, Any] = {}
    if summary is not None and fmt == "markdown":
        kwargs["summary"] = summary

    with tempfile.NamedTemporaryFile(suffix=_SUFFIX[fmt], delete=False) as tmp:
        tmp_path = Path(tmp.name)
    try:
        exporter(reports, tmp_path, **kwargs)
        content = tmp_path.read_text(encoding="utf-8")
    finally:
        tmp_path.unlink(missing_ok=True)

    return Response(content=content, media_type=_CONTENT_TYPES[fmt])


@app.get("/health")
def health() -> dict[str, Any]:
    """Server health check with uptime, version, and report count."""
    now = datetime.now(tz=timezone.utc)
    return {
        "status": "ok",
        "version": __version__,
        "uptime_seconds": round((now - app.state.start_time).total_seconds(), 1),
        "report_count": app.state.report_count,
    }


@app.post("/custom-hit")
def custom_hit(
    body: CustomHitRequest,
    format: Annotated[OutputFormat, Query(description="Output format.")] = "json",
) -> Response:
    """Compute the effects report for a user-defined impact scenario."""
    config = ImpactEffectsConfig(random_seed=body.seed)
    try:
        spec = body.to_spec(config.default_density_kg_m3)
        report = compute_effects(spec, config)
    except InvalidParameter as exc:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    app.state.report_count += 1
    return _export([report], format)


@app.get("/scan")
def scan(
    start: Annotated[
        date | None, Query(description="Feed start date (default: today)."),
    ] = None,
    end: Annotated[
        date | None, Query(description="Feed end date (default: start + 7 days)."),
    ] = None,
    format: Annotated[OutputFormat, Query(description="Output format.")] = "json",
    seed: Annotated[int | None, Query(description="Seed for the impact-point sampler.")] = None,
    no_cache: Annotated[bool, Query(description="Disable disk caching.")] = False,
) -> Response:
    """Fetch the NeoWs feed for a date range and report on every object."""
    config = ImpactEffectsConfig(random_seed=seed, cache_enabled=not no_cache)
    start_date = start or datetime.now(tz=timezone.utc).date()
    end_date = end or start_date + timedelta(days=7)

    try:
        feed = fetch_neo_feed(
            start_date,
            end_date,
            api_key=config.nasa_api_key,
            timeout=config.request_timeout,
            use_cache=config.cache_enabled,
        )
    except requests.RequestException as exc:
        logger.exception("NeoWs feed request failed")
        return JSONResponse(
            status_code=502,
            content={"detail": f"Upstream feed error: {exc}"},
        )
    except ValueError as exc:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    result = compute_effects_for_feed(extract_specs(feed, config.default_density_kg_m3), config)
    app.state.report_count += len(result.reports)
    return _export(result.reports, format, result.summary)
