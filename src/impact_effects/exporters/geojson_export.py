"""GeoJSON exporter for effects reports."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from impact_effects.blast import BlastProfile, EvacuationZone
from impact_effects.geo import GeographicImpactData, GeographicImpactPoint, ProbabilitySample
from impact_effects.models import EffectsReport


def _point(longitude: float, latitude: float) -> dict[str, Any]:
    return {"type": "Point", "coordinates": [longitude, latitude]}


def _make_impact_feature(point: GeographicImpactPoint, report: EffectsReport) -> dict[str, Any]:
    """Create a GeoJSON Feature for a (nominal) impact point."""
    geo = report.geographic
    risk = geo.risk if isinstance(geo, GeographicImpactData) else None
    return {
        "type": "Feature",
        "geometry": _point(point.longitude, point.latitude),
        "properties": {
            "feature_type": "impact_point",
            "name": report.spec.name,
            "neo_id": report.spec.neo_id,
            "confidence": point.confidence,
            "timestamp": point.timestamp,
            "energy_megatons": report.energy.megatons,
            "crater_diameter_m": report.crater.diameter_m,
            "region": risk.primary_region if risk else None,
            "regional_risk": risk.risk_level if risk else None,
            "affected_area_km2": risk.affected_area_km2 if risk else None,
            "threat_level": report.summary.threat_level if report.summary else None,
        },
    }


def _make_sample_feature(sample: ProbabilitySample, report: EffectsReport) -> dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": _point(sample.longitude, sample.latitude),
        "properties": {
            "feature_type": "probability_sample",
            "name": report.spec.name,
            "probability": sample.probability,
            "distance_from_nominal_km": sample.distance_from_nominal_km,
        },
    }


def _make_evacuation_feature(
    color: str, zone: EvacuationZone, point: GeographicImpactPoint, report: EffectsReport
) -> dict[str, Any]:
    """Evacuation ring centred on ground zero; consumers buffer by ``radius_km``."""
    return {
        "type": "Feature",
        "geometry": _point(point.longitude, point.latitude),
        "properties": {
            "feature_type": "evacuation_zone",
            "name": report.spec.name,
            "zone": color,
            "radius_km": zone.radius_km,
            "priority": zone.priority,
            "timeframe": zone.timeframe,
            "description": zone.description,
        },
    }


def export_geojson(
    reports: list[EffectsReport],
    output_path: Path,
) -> Path:
    """Export reports as a GeoJSON FeatureCollection.

    Creates a FeatureCollection with three feature types:
    - "impact_point": Estimated or user-provided ground zero
    - "probability_sample": Monte Carlo samples around the nominal point
    - "evacuation_zone": One ring per evacuation colour, centred on ground zero

    Reports without an impact point (uncertainty zone or failed stage)
    contribute probability samples only.
    """
    features: list[dict[str, Any]] = []
    impact_count = 0

    for report in reports:
        geo = report.geographic
        if not isinstance(geo, GeographicImpactData):
            continue

        point = geo.location.point
        if point is not None:
            features.append(_make_impact_feature(point, report))
            impact_count += 1
            if isinstance(report.blast, BlastProfile):
                for color, zone in report.blast.evacuation_zones.items():
                    features.append(_make_evacuation_feature(color, zone, point, report))

        if geo.probability_map is not None:
            for sample in geo.probability_map.samples:
                features.append(_make_sample_feature(sample, report))

    geojson = {
        "type": "FeatureCollection",
        "metadata": {
            "generated": datetime.now(tz=timezone.utc).isoformat(),
            "source": "impact-effects",
            "report_count": len(reports),
            "impact_point_count": impact_count,
        },
        "features": features,
    }

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(geojson, f, indent=2, ensure_ascii=False)

    return output_path
