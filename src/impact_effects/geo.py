"""Geographic utilities: impact-point estimation, probability maps and region risk."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone

import numpy as np

from impact_effects.constants import (
    DEFAULT_PHYSICAL,
    DEGREES_PER_RADIAN_APPROX,
    GMST_RATE_DEG_PER_DAY,
    GMST_RATE_DEG_PER_HOUR,
    J2000_GMST_DEG,
    SECONDS_PER_DAY,
    PhysicalConstants,
)
from impact_effects.models import ImpactorSpec, StageComputationError

logger = logging.getLogger(__name__)

J2000 = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)

_LOCATION_NOTE = (
    "This is a simplified estimate. Actual impact location requires precise "
    "orbital integration."
)
_MAP_NOTE = "Real calculations require full orbital covariance analysis."
_ROTATION_NOTE = (
    "Earth rotation affects the exact impact location within the uncertainty window"
)

# (lat_min, lat_max, lon_min, lon_max, region, continent); bounds are exclusive
# and the first matching row wins.
REGION_RULES: tuple[tuple[float, float, float, float, str, str], ...] = (
    (35, 70, -10, 40, "Europe", "Europe"),
    (35, 70, 40, 180, "Asia", "Asia"),
    (35, 70, -130, -60, "North America", "North America"),
    (-35, 35, -20, 55, "Africa", "Africa"),
    (-35, 35, 90, 150, "Southeast Asia", "Asia"),
    (-35, 35, -90, -30, "South America", "South America"),
    (-90, -35, 110, 180, "Australia", "Australia"),
)
UNPOPULATED_REGIONS = frozenset({"Ocean", "Antarctica"})

# (minimum area km², populated tier, unpopulated tier)
_AREA_TIERS: tuple[tuple[float, str, str], ...] = (
    (100_000, "CATASTROPHIC", "SEVERE"),
    (10_000, "SEVERE", "HIGH"),
    (1_000, "HIGH", "MODERATE"),
    (100, "MODERATE", "LOW"),
)


@dataclass(frozen=True)
class GeographicImpactPoint:
    latitude: float
    longitude: float
    confidence: str  # "user-provided" | "low"
    timestamp: str
    coordinate_system: str = "WGS84"
    note: str = ""


@dataclass(frozen=True)
class UncertaintyZone:
    """Terminal "no impact" state for approaches that pass well clear of Earth."""

    zone_type: str
    note: str
    timestamp: str


@dataclass(frozen=True)
class ImpactLocation:
    """Holds exactly one of ``point`` or ``uncertainty_zone``."""

    point: GeographicImpactPoint | None = None
    uncertainty_zone: UncertaintyZone | None = None


@dataclass(frozen=True)
class ProbabilitySample:
    latitude: float
    longitude: float
    probability: float
    distance_from_nominal_km: float


@dataclass(frozen=True)
class ProbabilityMap:
    samples: list[ProbabilitySample]
    sample_count: int
    uncertainty_km: float
    method: str = "Monte Carlo simulation (simplified)"
    note: str = _MAP_NOTE


@dataclass(frozen=True)
class GeographicRisk:
    primary_region: str
    continent: str | None
    latitude: float
    longitude: float
    crater_radius_km: float
    affected_area_km2: float
    risk_level: str


@dataclass(frozen=True)
class EarthRotation:
    rotation_period_hours: float
    degrees_per_hour: float
    note: str = _ROTATION_NOTE


@dataclass(frozen=True)
class GeographicImpactData:
    location: ImpactLocation
    earth_rotation: EarthRotation
    risk: GeographicRisk | None = None
    probability_map: ProbabilityMap | None = None
    notes: list[str] = field(default_factory=list)


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the great-circle distance in km between two points on Earth."""
    earth_radius_km = 6371.0
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return earth_radius_km * 2 * math.asin(math.sqrt(a))


def as_utc(when: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones."""
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


def normalize_longitude(longitude: float) -> float:
    """Wrap a longitude into [-180, 180]."""
    longitude = math.fmod(longitude, 360.0)
    if longitude > 180:
        longitude -= 360
    elif longitude < -180:
        longitude += 360
    return longitude


def greenwich_mean_sidereal_time(when: datetime) -> float:
    """Simplified GMST in degrees, in [0, 360).

    The linear J2000 term is evaluated at the exact instant and the hour of day
    is then added on top of it, so the time of day is counted twice. Downstream
    longitudes depend on this behaviour.
    """
    when = as_utc(when)
    days_since_j2000 = (when - J2000).total_seconds() / SECONDS_PER_DAY
    hour_of_day = when.hour + when.minute / 60 + when.second / 3600
    gmst = J2000_GMST_DEG + GMST_RATE_DEG_PER_DAY * days_since_j2000
    return (gmst + GMST_RATE_DEG_PER_HOUR * hour_of_day) % 360


def _nominal_coordinates(
    spec: ImpactorSpec, when: datetime, rng: np.random.Generator
) -> tuple[float, float]:
    """Sub-object point at the approach instant."""
    gmst = greenwich_mean_sidereal_time(when)
    if spec.right_ascension_deg is not None:
        longitude = spec.right_ascension_deg - gmst
    else:
        # No approach geometry: spread longitude by the approach speed
        longitude = -gmst + (spec.velocity_km_s % 60) - 30
    longitude = normalize_longitude(longitude)

    if spec.declination_deg is not None:
        latitude = spec.declination_deg
    else:
        # Most NEOs have low inclination; bias towards the equator
        latitude = (rng.random() - 0.5) * 60 * 0.7
    return round(latitude, 4), round(longitude, 4)


def estimate_impact_location(
    spec: ImpactorSpec,
    when: datetime,
    rng: np.random.Generator,
    constants: PhysicalConstants = DEFAULT_PHYSICAL,
) -> tuple[ImpactLocation, tuple[float, float] | None]:
    """Estimate where the object would strike.

    Returns the location plus the nominal coordinates used to centre the
    probability map (None when the object passes too far for any mapping).
    """
    timestamp = as_utc(when).isoformat()
    radius_km = constants.earth_radius_km

    if spec.latitude is not None and spec.longitude is not None:
        point = GeographicImpactPoint(
            latitude=spec.latitude,
            longitude=spec.longitude,
            confidence="user-provided",
            timestamp=timestamp,
            note="Impact point supplied with the scenario.",
        )
        return ImpactLocation(point=point), (spec.latitude, spec.longitude)

    nominal = None
    if spec.miss_distance_km < radius_km * 5:
        nominal = _nominal_coordinates(spec, when, rng)

    if spec.miss_distance_km < radius_km * 2 and nominal is not None:
        point = GeographicImpactPoint(
            latitude=nominal[0],
            longitude=nominal[1],
            confidence="low",
            timestamp=timestamp,
            note=_LOCATION_NOTE,
        )
        return ImpactLocation(point=point), nominal

    zone = UncertaintyZone(
        zone_type="global",
        note=(
            f"Miss distance of {spec.miss_distance_km:.0f} km indicates no impact. "
            "Location calculation not applicable."
        ),
        timestamp=timestamp,
    )
    return ImpactLocation(uncertainty_zone=zone), nominal


def build_probability_map(
    nominal_latitude: float,
    nominal_longitude: float,
    samples: int,
    uncertainty_km: float,
    rng: np.random.Generator,
    constants: PhysicalConstants = DEFAULT_PHYSICAL,
) -> ProbabilityMap:
    """Scatter ``samples`` equally weighted points around the nominal impact point.

    The positional uncertainty is converted to an angular span of
    ``uncertainty_km / R * 57.3`` degrees; each sample is offset by
    ``(u - 0.5) * span`` in latitude and in longitude.
    """
    if samples < 1:
        raise ValueError(f"samples must be >= 1, got {samples}")

    span = uncertainty_km / constants.earth_radius_km * DEGREES_PER_RADIAN_APPROX
    offsets = (rng.random((samples, 2)) - 0.5) * span
    probability = 1 / samples

    points: list[ProbabilitySample] = []
    for dlat, dlon in offsets:
        lat = min(90.0, max(-90.0, nominal_latitude + float(dlat)))
        lon = normalize_longitude(nominal_longitude + float(dlon))
        points.append(
            ProbabilitySample(
                latitude=round(lat, 4),
                longitude=round(lon, 4),
                probability=probability,
                distance_from_nominal_km=round(
                    haversine(nominal_latitude, nominal_longitude, lat, lon), 1
                ),
            )
        )

    return ProbabilityMap(samples=points, sample_count=samples, uncertainty_km=uncertainty_km)


def classify_region(latitude: float, longitude: float) -> tuple[str, str | None]:
    """Return (region, continent) from the coarse bounding-box table."""
    for lat_min, lat_max, lon_min, lon_max, region, continent in REGION_RULES:
        if lat_min < latitude < lat_max and lon_min < longitude < lon_max:
            return region, continent
    return "Ocean", None


def regional_risk_level(region: str, affected_area_km2: float) -> str:
    """Tier the affected area; unpopulated regions sit one tier lower."""
    populated = region not in UNPOPULATED_REGIONS
    for min_area, populated_tier, unpopulated_tier in _AREA_TIERS:
        if affected_area_km2 > min_area:
            return populated_tier if populated else unpopulated_tier
    return "LOW"


def assess_geographic_risk(
    point: GeographicImpactPoint, crater_radius_km: float
) -> GeographicRisk:
    region, continent = classify_region(point.latitude, point.longitude)
    # Blast effects reach roughly three crater radii
    area = math.pi * (crater_radius_km * 3) ** 2
    return GeographicRisk(
        primary_region=region,
        continent=continent,
        latitude=point.latitude,
        longitude=point.longitude,
        crater_radius_km=crater_radius_km,
        affected_area_km2=area,
        risk_level=regional_risk_level(region, area),
    )


def compute_geographic_data(
    spec: ImpactorSpec,
    crater_radius_km: float,
    when: datetime,
    rng: np.random.Generator,
    samples: int = 50,
    uncertainty_km: float = 1000.0,
    constants: PhysicalConstants = DEFAULT_PHYSICAL,
) -> GeographicImpactData:
    """Impact location, regional risk and probability map for one approach."""
    if not math.isfinite(crater_radius_km) or crater_radius_km <= 0:
        raise StageComputationError(
            f"Crater radius not available for geographic risk: {crater_radius_km!r}"
        )
    location, nominal = estimate_impact_location(spec, when, rng, constants)

    risk = None
    if location.point is not None:
        risk = assess_geographic_risk(location.point, crater_radius_km)
        logger.debug(
            "Impact point %.4f, %.4f classified as %s (%s)",
            risk.latitude,
            risk.longitude,
            risk.primary_region,
            risk.risk_level,
        )

    probability_map = None
    notes: list[str] = []
    if nominal is not None and spec.miss_distance_km < constants.earth_radius_km * 5:
        probability_map = build_probability_map(
            nominal[0], nominal[1], samples, uncertainty_km, rng, constants
        )
    else:
        notes.append(
            "Object passes too far from Earth for meaningful impact probability mapping"
        )

    return GeographicImpactData(
        location=location,
        earth_rotation=EarthRotation(
            rotation_period_hours=constants.sidereal_day_hours,
            degrees_per_hour=constants.degrees_per_hour,
        ),
        risk=risk,
        probability_map=probability_map,
        notes=notes,
    )
