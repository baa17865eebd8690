"""Markdown exporter for effects reports."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from impact_effects.blast import BlastProfile
from impact_effects.geo import GeographicImpactData
from impact_effects.mitigation import MitigationPlan
from impact_effects.models import EffectsReport, FeedSummary
from impact_effects.seismic import SeismicProfile


def _location_line(geo: GeographicImpactData) -> str:
    point = geo.location.point
    if point is None:
        zone = geo.location.uncertainty_zone
        return f"- **Impact point**: none ({zone.note if zone else 'not estimated'})"
    line = f"- **Impact point**: {point.latitude:.4f}, {point.longitude:.4f} ({point.confidence})"
    if geo.risk is not None:
        line += f", {geo.risk.primary_region}, regional risk {geo.risk.risk_level}"
    return line


def _report_section(report: EffectsReport) -> list[str]:
    spec = report.spec
    lines = [
        f"## {spec.name}",
        "",
        f"- **Diameter**: {spec.diameter_m:,.1f} m at {spec.velocity_km_s:.2f} km/s",
        f"- **Energy**: {report.energy.megatons:,.2f} MT TNT"
        f" ({report.energy.kinetic_energy_j:.3e} J)",
        f"- **Crater**: {report.crater.diameter_m / 1000:,.2f} km",
        f"- **Impact probability**: {report.probability.percentage}%"
        f" ({report.probability.risk_level})",
    ]
    if report.summary is not None:
        lines.append(
            f"- **Threat**: {report.summary.threat_level},"
            f" urgency {report.summary.urgency_level}"
        )
    if isinstance(report.geographic, GeographicImpactData):
        lines.append(_location_line(report.geographic))

    if isinstance(report.seismic, SeismicProfile):
        mag = report.seismic.magnitude
        lines.append(f"- **Seismic**: M{mag.primary_magnitude:.2f} ({mag.magnitude_class})")
        if report.seismic.tsunami_warning is not None:
            lines.append(
                f"- **Tsunami**: {report.seismic.tsunami_warning.estimated_wave_height}"
            )

    if isinstance(report.blast, BlastProfile):
        lines.extend([
            "",
            "| Zone | Radius (km) | Overpressure (psi) | Survivability |",
            "|:-----|------------:|-------------------:|:--------------|",
        ])
        for name, zone in report.blast.blast_zones.items():
            lines.append(
                f"| {name.replace('_', ' ')} | {zone.radius_km:,.2f}"
                f" | {zone.overpressure_psi:g} | {zone.survivability} |"
            )

    if isinstance(report.mitigation, MitigationPlan):
        plan = report.mitigation
        lines.extend([
            "",
            f"**Mitigation**: {plan.recommended_approach}"
            f" ({plan.time_available}, success {plan.success_probability})",
            "",
        ])
        for rec in plan.key_recommendations:
            lines.append(f"- [{rec.priority}] {rec.action}")

    if report.summary is not None and report.summary.critical_warnings:
        lines.extend(["", "**Critical warnings**:", ""])
        for w in report.summary.critical_warnings:
            lines.append(f"- {w.severity} ({w.stage}): {w.message}")

    errors = report.errors
    if errors:
        lines.extend(["", "**Failed stages**:", ""])
        for e in errors:
            lines.append(f"- {e.stage}: {e.error} - {e.details}")

    lines.append("")
    return lines


def export_markdown(
    reports: list[EffectsReport],
    output_path: Path,
    *,
    summary: FeedSummary | None = None,
) -> Path:
    """Export reports as Markdown with an overview table and one section per impactor."""
    timestamp = datetime.now(tz=timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    lines: list[str] = [
        "# Impact Effects Report",
        f"Generated: {timestamp}",
        "",
    ]

    if summary is not None:
        lines.extend([
            "## Feed Summary",
            "",
            f"- Objects: {summary.total_objects}"
            f" ({summary.hazardous_count} hazardous, {summary.non_hazardous_count} not)",
            f"- Largest crater: {summary.max_crater_diameter_m:,.1f} m",
            f"- Highest impact probability: {summary.highest_impact_percentage}%",
        ])
        if summary.most_dangerous is not None:
            md = summary.most_dangerous
            lines.append(f"- Most dangerous: {md.name} ({md.date}, {md.risk_level})")
        lines.append("")

    lines.extend([
        "## Overview",
        "",
        "| Object | Energy (MT) | Crater (km) | Risk | Threat | Urgency |",
        "|:-------|------------:|------------:|:-----|:-------|:--------|",
    ])
    for r in reports:
        threat = r.summary.threat_level if r.summary else "-"
        urgency = r.summary.urgency_level if r.summary else "-"
        lines.append(
            f"| {r.spec.name} | {r.energy.megatons:,.2f}"
            f" | {r.crater.diameter_m / 1000:,.2f}"
            f" | {r.probability.risk_level} | {threat} | {urgency} |"
        )
    lines.append("")

    for r in reports:
        lines.extend(_report_section(r))

    with open(output_path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))

    return output_path
