"""NASA NeoWs (Near Earth Object Web Service) fetchers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

from requests import Session

from asteroid_impact.cache import (
    NEO_FEED_TTL,
    NEO_LOOKUP_TTL,
    cache_key,
    load_cached,
    store_cached,
)
from asteroid_impact.http import create_session
from asteroid_impact.models import ImpactParameters

logger = logging.getLogger(__name__)

NEO_API_BASE = "https://api.nasa.gov/neo/rest/v1"


@dataclass(frozen=True)
class NearEarthObject:
    """One NEO with its first listed close approach."""

    id: str
    name: str
    is_potentially_hazardous: bool
    diameter_min_m: float
    diameter_max_m: float
    velocity_km_s: float
    miss_distance_km: float
    close_approach_date: str

    @property
    def diameter_m(self) -> float:
        return (self.diameter_min_m + self.diameter_max_m) / 2

    def to_impact_parameters(
        self,
        latitude: float = 0.0,
        longitude: float = 0.0,
        density_kg_m3: float = 2500.0,
    ) -> ImpactParameters:
        """Treat this object as an impactor striking (latitude, longitude)."""
        return ImpactParameters(
            diameter_m=self.diameter_m,
            velocity_km_s=self.velocity_km_s,
            density_kg_m3=density_kg_m3,
            latitude=latitude,
            longitude=longitude,
        )


def parse_neo(raw: dict[str, Any]) -> NearEarthObject | None:
    """Parse a NeoWs object; returns None when it has no close-approach data."""
    approaches = raw.get("close_approach_data") or []
    if not approaches:
        return None
    approach = approaches[0]
    meters = raw["estimated_diameter"]["meters"]
    return NearEarthObject(
        id=str(raw["id"]),
        name=raw.get("name", ""),
        is_potentially_hazardous=bool(raw.get("is_potentially_hazardous_asteroid", False)),
        diameter_min_m=float(meters["estimated_diameter_min"]),
        diameter_max_m=float(meters["estimated_diameter_max"]),
        velocity_km_s=float(approach["relative_velocity"]["kilometers_per_second"]),
        miss_distance_km=float(approach["miss_distance"]["kilometers"]),
        close_approach_date=approach.get("close_approach_date", ""),
    )


def fetch_neo_feed(
    start_date: date,
    end_date: date,
    api_key: str = "DEMO_KEY",
    timeout: int = 30,
    base_url: str = NEO_API_BASE,
    session: Session | None = None,
    use_cache: bool = True,
) -> list[NearEarthObject]:
    """Fetch NEOs with close approaches between start_date and end_date.

    NeoWs limits a feed query to 7 days. Raw responses are cached on disk
    (1-hour TTL). HTTP errors propagate.
    """
    key = cache_key("feed", start_date.isoformat(), end_date.isoformat())
    data = load_cached(key, NEO_FEED_TTL) if use_cache else None

    if data is None:
        if session is None:
            session = create_session(api_key=api_key)
        logger.info("Fetching NEO feed %s..%s", start_date, end_date)
        resp = session.get(
            f"{base_url}/feed",
            params={
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
            },
            timeout=timeout,
        )
        resp.raise_for_status()
        data = resp.json()
        if use_cache:
            store_cached(key, data)

    objects: list[NearEarthObject] = []
    for day in sorted(data.get("near_earth_objects", {})):
        for raw in data["near_earth_objects"][day]:
            neo = parse_neo(raw)
            if neo is None:
                logger.debug("Skipping %s: no close approach", raw.get("name"))
                continue
            objects.append(neo)

    logger.info("Retrieved %d near-Earth objects", len(objects))
    return objects


def fetch_neo(
    asteroid_id: str,
    api_key: str = "DEMO_KEY",
    timeout: int = 30,
    base_url: str = NEO_API_BASE,
    session: Session | None = None,
    use_cache: bool = True,
) -> NearEarthObject | None:
    """Look up one NEO by its NeoWs id (24-hour cache)."""
    key = cache_key("lookup", asteroid_id)
    data = load_cached(key, NEO_LOOKUP_TTL) if use_cache else None

    if data is None:
        if session is None:
            session = create_session(api_key=api_key)
        resp = session.get(
            f"{base_url}/neo/{asteroid_id}",
            timeout=timeout,
        )
        resp.raise_for_status()
        data = resp.json()
        if use_cache:
            store_cached(key, data)

    return parse_neo(data)


def browse_neos(
    page: int = 0,
    size: int = 20,
    api_key: str = "DEMO_KEY",
    timeout: int = 30,
    base_url: str = NEO_API_BASE,
    session: Session | None = None,
    use_cache: bool = True,
) -> list[NearEarthObject]:
    """Page through the full NeoWs catalogue (/neo/browse, 24-hour cache).

    Objects with no recorded close approach are skipped.
    """
    key = cache_key("browse", str(page), str(size))
    data = load_cached(key, NEO_LOOKUP_TTL) if use_cache else None

    if data is None:
        if session is None:
            session = create_session(api_key=api_key)
        logger.info("Browsing NEO catalogue page %d (size %d)", page, size)
        resp = session.get(
            f"{base_url}/neo/browse",
            params={"page": page, "size": size},
            timeout=timeout,
        )
        resp.raise_for_status()
        data = resp.json()
        if use_cache:
            store_cached(key, data)

    objects = [parse_neo(raw) for raw in data.get("near_earth_objects", [])]
    return [o for o in objects if o is not None]
