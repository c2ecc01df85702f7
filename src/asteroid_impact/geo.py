"""Geographic utilities: ocean/land band classification and damage rings."""

from __future__ import annotations

import math

import reverse_geocoder as rg

from asteroid_impact.models import ImpactType

EARTH_RADIUS_KM = 6371.0


def classify_impact(lat: float, lng: float) -> ImpactType:
    """Classify an impact point as OCEAN or LAND using coarse lat/lng bands.

    This is a band approximation, not a coastline lookup: the Pacific band
    covers every longitude west of -70, so e.g. the US east coast reads as
    ocean.
    """
    in_band = -60 < lat < 60

    # Pacific
    if in_band and (lng > 120 or lng < -70):
        return "OCEAN"
    # Atlantic
    if in_band and -70 < lng < 20:
        return "OCEAN"
    # Indian
    if -60 < lat < 30 and 20 < lng < 120:
        return "OCEAN"

    if abs(lat) < 60 and (lng < -30 or lng > 120):
        return "OCEAN"
    return "LAND"


def destination_point(
    lat: float, lon: float, bearing_deg: float, distance_km: float
) -> tuple[float, float]:
    """Point reached travelling distance_km along a great circle from (lat, lon)."""
    delta = distance_km / EARTH_RADIUS_KM
    theta = math.radians(bearing_deg)
    phi1 = math.radians(lat)
    lam1 = math.radians(lon)

    phi2 = math.asin(
        math.sin(phi1) * math.cos(delta)
        + math.cos(phi1) * math.sin(delta) * math.cos(theta)
    )
    lam2 = lam1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )
    lon2 = (math.degrees(lam2) + 540) % 360 - 180
    return math.degrees(phi2), lon2


def circle_ring(
    lat: float, lon: float, radius_km: float, points: int = 64
) -> list[list[float]]:
    """Closed GeoJSON ring ([lon, lat] pairs) approximating a circle."""
    ring: list[list[float]] = []
    for i in range(points):
        la, lo = destination_point(lat, lon, 360.0 * i / points, radius_km)
        ring.append([round(lo, 6), round(la, 6)])
    ring.append(ring[0])
    return ring


def nearest_place(lat: float, lng: float) -> str:
    """Label a coordinate with its nearest populated place: name, region, country."""
    hit = rg.search([(lat, lng)])[0]
    parts = [hit.get("name", ""), hit.get("admin1", ""), hit.get("cc", "")]
    return ", ".join(p for p in parts if p)
