"""CSV exporter for effects reports."""

from __future__ import annotations

import csv
from pathlib import Path

from impact_effects.blast import BlastProfile
from impact_effects.geo import GeographicImpactData
from impact_effects.mitigation import MitigationPlan
from impact_effects.models import EffectsReport
from impact_effects.seismic import SeismicProfile

FIELDNAMES = [
    "name",
    "neo_id",
    "diameter_m",
    "velocity_km_s",
    "miss_distance_km",
    "is_hazardous",
    "impact_date",
    "mass_kg",
    "energy_megatons",
    "crater_diameter_m",
    "impact_probability",
    "risk_level",
    "impact_latitude",
    "impact_longitude",
    "region",
    "regional_risk",
    "primary_magnitude",
    "tsunami",
    "max_affected_radius_km",
    "impact_category",
    "recommended_approach",
    "days_until_impact",
    "threat_level",
    "urgency_level",
    "failed_stages",
]


def export_csv(
    reports: list[EffectsReport],
    output_path: Path,
) -> Path:
    """Export reports as a flat CSV with one row per impactor.

    Columns from a failed or absent stage are left empty.
    """
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()

        for report in reports:
            spec = report.spec
            row: dict[str, object] = {
                "name": spec.name,
                "neo_id": spec.neo_id,
                "diameter_m": spec.diameter_m,
                "velocity_km_s": spec.velocity_km_s,
                "miss_distance_km": spec.miss_distance_km,
                "is_hazardous": spec.is_hazardous,
                "impact_date": spec.impact_date.isoformat() if spec.impact_date else "",
                "mass_kg": report.energy.mass_kg,
                "energy_megatons": round(report.energy.megatons, 4),
                "crater_diameter_m": round(report.crater.diameter_m, 1),
                "impact_probability": report.probability.value,
                "risk_level": report.probability.risk_level,
                "failed_stages": ";".join(e.stage for e in report.errors),
            }

            geo = report.geographic
            if isinstance(geo, GeographicImpactData) and geo.risk is not None:
                row["impact_latitude"] = geo.risk.latitude
                row["impact_longitude"] = geo.risk.longitude
                row["region"] = geo.risk.primary_region
                row["regional_risk"] = geo.risk.risk_level
            if isinstance(report.seismic, SeismicProfile):
                row["primary_magnitude"] = report.seismic.magnitude.primary_magnitude
                row["tsunami"] = report.seismic.tsunami_warning is not None
            if isinstance(report.blast, BlastProfile):
                row["max_affected_radius_km"] = round(
                    report.blast.zone_summary.max_affected_radius_km, 1
                )
                row["impact_category"] = report.blast.classification.category
            if isinstance(report.mitigation, MitigationPlan):
                row["recommended_approach"] = report.mitigation.recommended_approach
                row["days_until_impact"] = report.mitigation.days_until_impact
            if report.summary is not None:
                row["threat_level"] = report.summary.threat_level
                row["urgency_level"] = report.summary.urgency_level

            writer.writerow(row)

    return output_path
