"""GeoJSON exporter: impact point plus one ring per damage radius."""

from __future__ import annotations

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from asteroid_impact import __version__
from asteroid_impact.geo import circle_ring
from asteroid_impact.models import DamageRadii, ImpactAnalysis


def _make_impact_feature(analysis: ImpactAnalysis) -> dict[str, Any]:
    """Create the Point feature for the impact site."""
    p = analysis.parameters
    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": [p.longitude, p.latitude],
        },
        "properties": {
            "feature_type": "impact",
            "diameter_m": p.diameter_m,
            "velocity_km_s": p.velocity_km_s,
            "density_kg_m3": p.density_kg_m3,
            "impact_type": analysis.impact_type,
            "energy_kilotons": analysis.energy.kilotons,
            "energy_megatons": analysis.energy.megatons,
            "severity": analysis.summary.severity,
            "primary_threat": analysis.summary.primary_threat,
            "historical_comparison": analysis.historical.comparison_text,
        },
    }


def _make_ring_feature(
    analysis: ImpactAnalysis, zone: str, radius_km: float
) -> dict[str, Any]:
    """Create a Polygon feature for a single damage zone."""
    p = analysis.parameters
    return {
        "type": "Feature",
        "geometry": {
            "type": "Polygon",
            "coordinates": [circle_ring(p.latitude, p.longitude, radius_km)],
        },
        "properties": {
            "feature_type": "damage_zone",
            "zone": zone,
            "radius_km": round(radius_km, 3),
        },
    }


def export_geojson(analysis: ImpactAnalysis, output_path: Path) -> Path:
    """Export an analysis as a GeoJSON FeatureCollection.

    Zones are written largest first so that smaller rings draw on top.
    Zero-radius zones are omitted.
    """
    radii = asdict(analysis.radii)
    zones = sorted(
        (f.name for f in fields(DamageRadii) if radii[f.name] > 0),
        key=lambda name: radii[name],
        reverse=True,
    )
    features = [_make_ring_feature(analysis, z, radii[z]) for z in zones]
    features.append(_make_impact_feature(analysis))

    collection = {
        "type": "FeatureCollection",
        "features": features,
        "metadata": {
            "source": "asteroid-impact",
            "version": __version__,
            "zone_count": len(zones),
        },
    }
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(collection, f, indent=2, ensure_ascii=False)
    return output_path
