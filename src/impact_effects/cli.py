"""CLI interface using Typer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Annotated, Any

import requests
import typer
from rich.console import Console
from rich.table import Table

from impact_effects import __version__
from impact_effects.config import ImpactEffectsConfig, OutputFormat
from impact_effects.exporters import export_csv, export_geojson, export_json, export_markdown
from impact_effects.fetchers.neows import extract_specs, fetch_neo_feed
from impact_effects.models import EffectsReport, FeedSummary, ImpactorSpec, InvalidParameter
from impact_effects.pipeline import compute_effects, compute_effects_for_feed

EXPORTERS: dict[str, Callable[..., Path]] = {
    "json": export_json,
    "geojson": export_geojson,
    "csv": export_csv,
    "markdown": export_markdown,
}

# Formats whose exporter accepts a feed summary
_SUMMARY_FORMATS = frozenset({"json", "markdown"})

_THREAT_STYLES = {
    "EXTINCTION-LEVEL": "bold magenta",
    "CATASTROPHIC": "red",
    "SEVERE": "dark_orange",
    "HIGH": "yellow",
    "MODERATE": "cyan",
    "MINIMAL": "green",
}

app = typer.Typer(
    name="impact-effects",
    help="Physical-effects reports for near-Earth object impacts.",
    add_completion=False,
)
console = Console()

FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format: json, geojson, csv, markdown."),
]
OutputOption = Annotated[
    Path,
    typer.Option("--output", "-o", help="Output file path."),
]
SeedOption = Annotated[
    int | None,
    typer.Option("--seed", help="Seed for the impact-point sampler."),
]
ParallelOption = Annotated[
    bool,
    typer.Option("--parallel", help="Run seismic, blast and mitigation stages concurrently."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging."),
]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"impact-effects {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )


def _parse_datetime(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"Not an ISO-8601 date/time: {value}") from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _write(
    reports: list[EffectsReport], config: ImpactEffectsConfig, summary: FeedSummary | None = None
) -> None:
    exporter = EXPORTERS[config.output_format]
    kwargs: dict[str, Any] = {}
    if summary is not None and config.output_format in _SUMMARY_FORMATS:
        kwargs["summary"] = summary
    exporter(reports, config.output_file, **kwargs)


def _print_table(reports: list[EffectsReport], title: str) -> None:
    table = Table(title=title)
    table.add_column("Object", style="bold")
    table.add_column("Energy (MT)", justify="right")
    table.add_column("Crater (km)", justify="right")
    table.add_column("Risk")
    table.add_column("Threat")
    table.add_column("Urgency")
    table.add_column("Failed", style="dim")

    for r in reports:
        threat = r.summary.threat_level if r.summary else "-"
        style = _THREAT_STYLES.get(threat)
        table.add_row(
            r.spec.name,
            f"{r.energy.megatons:,.2f}",
            f"{r.crater.diameter_m / 1000:,.2f}",
            r.probability.risk_level,
            f"[{style}]{threat}[/{style}]" if style else threat,
            r.summary.urgency_level if r.summary else "-",
            ", ".join(e.stage for e in r.errors) or "-",
        )

    console.print()
    console.print(table)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Impact Effects: energy, crater, seismic, blast and mitigation reports for NEO impacts."""


@app.command()
def scenario(
    diameter: Annotated[float, typer.Option("--diameter", "-d", help="Diameter in metres.")],
    velocity: Annotated[float, typer.Option("--velocity", help="Velocity in km/s.")],
    density: Annotated[
        float | None,
        typer.Option("--density", help="Density in kg/m³ (config default when omitted)."),
    ] = None,
    mass: Annotated[
        float | None,
        typer.Option("--mass", help="Mass in kg; overrides diameter/density."),
    ] = None,
    miss_distance: Annotated[
        float,
        typer.Option("--miss-distance", help="Miss distance in km (0 = direct hit)."),
    ] = 0.0,
    hazardous: Annotated[
        bool, typer.Option("--hazardous", help="Flag as potentially hazardous."),
    ] = False,
    impact_date: Annotated[
        str | None,
        typer.Option("--impact-date", help="Impact date/time, ISO-8601 (UTC if naive)."),
    ] = None,
    days: Annotated[
        int | None,
        typer.Option("--days", help="Days until impact; overrides --impact-date."),
    ] = None,
    lat: Annotated[float | None, typer.Option("--lat", help="Impact latitude.")] = None,
    lon: Annotated[float | None, typer.Option("--lon", help="Impact longitude.")] = None,
    name: Annotated[
        str, typer.Option("--name", help="Scenario name."),
    ] = "Custom impact scenario",
    output: OutputOption = Path("impact_effects_output.json"),
    output_format: FormatOption = "json",
    seed: SeedOption = None,
    parallel: ParallelOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Compute the effects report for a custom impact scenario."""
    _configure_logging(verbose)

    config = ImpactEffectsConfig(
        output_file=output,
        output_format=output_format,
        random_seed=seed,
        parallel_stages=parallel,
    )
    try:
        spec = ImpactorSpec(
            diameter_m=diameter,
            velocity_km_s=velocity,
            density_kg_m3=density if density is not None else config.default_density_kg_m3,
            mass_kg=mass,
            miss_distance_km=miss_distance,
            is_hazardous=hazardous,
            impact_date=_parse_datetime(impact_date),
            days_until_impact=days,
            latitude=lat,
            longitude=lon,
            name=name,
        )
        report = compute_effects(spec, config)
    except InvalidParameter as exc:
        console.print(f"[red]Invalid scenario:[/red] {exc}")
        raise typer.Exit(code=2) from None

    _write([report], config)
    _print_table([report], "Impact Effects")

    if report.summary is not None:
        for w in report.summary.critical_warnings:
            console.print(f"[red]{w.severity}[/red] ({w.stage}) {w.message}")
    console.print(
        f"\n{config.output_format.upper()} written to [bold]{config.output_file}[/bold]"
    )


@app.command()
def scan(
    start: Annotated[
        str | None,
        typer.Option("--start", help="Feed start date YYYY-MM-DD (default: today)."),
    ] = None,
    end: Annotated[
        str | None,
        typer.Option("--end", help="Feed end date YYYY-MM-DD (default: start + 7 days)."),
    ] = None,
    api_key: Annotated[
        str | None,
        typer.Option("--api-key", help="NASA API key (default from IMPACT_EFFECTS_NASA_API_KEY)."),
    ] = None,
    no_cache: Annotated[
        bool,
        typer.Option("--no-cache", help="Disable disk caching of feed responses."),
    ] = False,
    output: OutputOption = Path("impact_effects_output.json"),
    output_format: FormatOption = "json",
    seed: SeedOption = None,
    parallel: ParallelOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Fetch the NeoWs close-approach feed and report on every object."""
    _configure_logging(verbose)

    config = ImpactEffectsConfig(
        output_file=output,
        output_format=output_format,
        random_seed=seed,
        parallel_stages=parallel,
        cache_enabled=not no_cache,
    )
    try:
        start_date = date.fromisoformat(start) if start else datetime.now(timezone.utc).date()
        end_date = date.fromisoformat(end) if end else start_date + timedelta(days=7)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from None

    try:
        feed = fetch_neo_feed(
            start_date,
            end_date,
            api_key=api_key or config.nasa_api_key,
            timeout=config.request_timeout,
            use_cache=config.cache_enabled,
        )
    except (requests.RequestException, ValueError) as exc:
        console.print(f"[red]Feed fetch failed:[/red] {exc}")
        raise typer.Exit(code=1) from None

    specs = extract_specs(feed, config.default_density_kg_m3)
    if not specs:
        console.print("[yellow]No near-Earth objects in the requested range.[/yellow]")
        raise typer.Exit()

    result = compute_effects_for_feed(specs, config)
    _write(result.reports, config, result.summary)
    _print_table(result.reports, f"NEO close approaches {start_date} to {end_date}")

    summary = result.summary
    console.print(
        f"\n{config.output_format.upper()} written to [bold]{config.output_file}[/bold]"
    )
    console.print(
        f"Total objects: {summary.total_objects} ({summary.hazardous_count} hazardous)"
    )
    if summary.most_dangerous is not None:
        console.print(
            f"Most dangerous: {summary.most_dangerous.name}"
            f" ({summary.most_dangerous.risk_level})"
        )
