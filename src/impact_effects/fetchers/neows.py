"""NASA NeoWs close-approach feed fetcher."""

from __future__ import annotations

import json
import logging
from datetime import date, datetime, timezone
from typing import Any

from requests import Session

from impact_effects.cache import NEOWS_TTL, cache_get, cache_key, cache_put
from impact_effects.http import create_session
from impact_effects.models import ImpactorSpec, InvalidParameter

logger = logging.getLogger(__name__)

NEOWS_FEED_URL = "https://api.nasa.gov/neo/rest/v1/feed"

# NeoWs rejects feed requests spanning more than a week
MAX_FEED_DAYS = 7


def fetch_neo_feed(
    start_date: date,
    end_date: date,
    api_key: str = "DEMO_KEY",
    timeout: int = 30,
    session: Session | None = None,
    use_cache: bool = True,
) -> dict[str, Any]:
    """Fetch the raw NeoWs feed for an inclusive date range.

    Raises ValueError for an empty or over-long range and
    ``requests.HTTPError`` when the feed answers with an error status.
    """
    if end_date < start_date:
        raise ValueError(f"end_date {end_date} is before start_date {start_date}")
    if (end_date - start_date).days > MAX_FEED_DAYS:
        raise ValueError(f"NeoWs feed ranges are limited to {MAX_FEED_DAYS} days")

    key = cache_key("neows-feed", start=start_date.isoformat(), end=end_date.isoformat())
    if use_cache:
        cached = cache_get(key, NEOWS_TTL)
        if cached is not None:
            logger.info("Using cached NeoWs feed for %s..%s", start_date, end_date)
            return json.loads(cached)

    if session is None:
        session = create_session()

    resp = session.get(
        NEOWS_FEED_URL,
        params={
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
            "api_key": api_key,
        },
        timeout=timeout,
    )
    resp.raise_for_status()

    if use_cache:
        cache_put(key, resp.content)
    return resp.json()


def _parse_approach_time(approach: dict[str, Any]) -> datetime | None:
    full = approach.get("close_approach_date_full")
    if full:
        try:
            return datetime.strptime(full, "%Y-%b-%d %H:%M").replace(tzinfo=timezone.utc)
        except ValueError:
            logger.debug("Unparseable close_approach_date_full %r", full)
    day = approach.get("close_approach_date")
    if day:
        return datetime.strptime(day, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    return None


def neo_to_spec(neo: dict[str, Any], density_kg_m3: float = 3000.0) -> ImpactorSpec:
    """Build an ImpactorSpec from one NeoWs object using its first close approach.

    The diameter is the mean of the catalogue's min/max estimate in metres.
    Raises InvalidParameter when the record lacks usable size or approach data.
    """
    meters = neo.get("estimated_diameter", {}).get("meters", {})
    diameter = (
        float(meters.get("estimated_diameter_min", 0))
        + float(meters.get("estimated_diameter_max", 0))
    ) / 2

    approaches = neo.get("close_approach_data") or []
    if not approaches:
        raise InvalidParameter(f"NEO {neo.get('id', '?')} has no close approach data")
    approach = approaches[0]
    velocity = float(approach.get("relative_velocity", {}).get("kilometers_per_second", 0))
    miss = approach.get("miss_distance", {})
    lunar = miss.get("lunar")

    return ImpactorSpec(
        diameter_m=diameter,
        velocity_km_s=velocity,
        density_kg_m3=density_kg_m3,
        miss_distance_km=float(miss.get("kilometers", 0)),
        approach_lunar_distances=float(lunar) if lunar is not None else None,
        is_hazardous=bool(neo.get("is_potentially_hazardous_asteroid", False)),
        impact_date=_parse_approach_time(approach),
        name=neo.get("name", ""),
        neo_id=str(neo.get("id", "")),
    )


def extract_specs(feed: dict[str, Any], density_kg_m3: float = 3000.0) -> list[ImpactorSpec]:
    """Convert a NeoWs feed into specs, ordered by approach date.

    Objects that fail validation are skipped with a warning.
    """
    specs: list[ImpactorSpec] = []
    near_earth_objects = feed.get("near_earth_objects", {})
    for day in sorted(near_earth_objects):
        for neo in near_earth_objects[day]:
            try:
                specs.append(neo_to_spec(neo, density_kg_m3))
            except (TypeError, ValueError) as exc:
                logger.warning("Skipping NEO %s: %s", neo.get("id", "?"), exc)
    logger.info("Extracted %d of %d feed objects", len(specs), feed.get("element_count", len(specs)))
    return specs
