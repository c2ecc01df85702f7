"""Shared fixtures for asteroid_impact tests."""

from __future__ import annotations

from typing import Any

import pytest

from asteroid_impact.analysis import analyze_impact
from asteroid_impact.models import ImpactAnalysis, ImpactParameters


@pytest.fixture(autouse=True)
def isolated_cache(monkeypatch, tmp_path):
    """Keep every test away from the real ~/.cache directory."""
    cache_dir = tmp_path / "cache"
    monkeypatch.setattr("asteroid_impact.cache._CACHE_DIR", cache_dir)
    return cache_dir


@pytest.fixture
def chelyabinsk_params() -> ImpactParameters:
    return ImpactParameters(
        diameter_m=20,
        velocity_km_s=19,
        density_kg_m3=3300,
        latitude=54.8,
        longitude=61.1,
    )


@pytest.fixture
def pacific_params() -> ImpactParameters:
    """100 m stony impactor in the mid-Pacific (~63 Mt)."""
    return ImpactParameters(
        diameter_m=100,
        velocity_km_s=20,
        density_kg_m3=2500,
        latitude=0.0,
        longitude=-150.0,
    )


@pytest.fixture
def chelyabinsk_analysis(chelyabinsk_params) -> ImpactAnalysis:
    return analyze_impact(chelyabinsk_params)


@pytest.fixture
def pacific_analysis(pacific_params) -> ImpactAnalysis:
    return analyze_impact(pacific_params)


def _neo(
    neo_id: str,
    name: str,
    dmin: float,
    dmax: float,
    km_s: str,
    hazardous: bool = False,
    approaches: bool = True,
) -> dict[str, Any]:
    return {
        "id": neo_id,
        "neo_reference_id": neo_id,
        "name": name,
        "is_potentially_hazardous_asteroid": hazardous,
        "estimated_diameter": {
            "meters": {"estimated_diameter_min": dmin, "estimated_diameter_max": dmax},
            "kilometers": {
                "estimated_diameter_min": dmin / 1000,
                "estimated_diameter_max": dmax / 1000,
            },
        },
        "close_approach_data": [
            {
                "close_approach_date": "2024-03-01",
                "relative_velocity": {
                    "kilometers_per_second": km_s,
                    "kilometers_per_hour": str(float(km_s) * 3600),
                },
                "miss_distance": {"kilometers": "7480000.5", "astronomical": "0.05"},
                "orbiting_body": "Earth",
            }
        ]
        if approaches
        else [],
    }


@pytest.fixture
def sample_neo_feed() -> dict[str, Any]:
    """NeoWs /feed response with two days and one object lacking approaches."""
    return {
        "element_count": 3,
        "near_earth_objects": {
            "2024-03-02": [
                _neo("3542519", "(2010 PK9)", 100.0, 300.0, "12.5", hazardous=True),
            ],
            "2024-03-01": [
                _neo("2099942", "99942 Apophis (2004 MN4)", 310.0, 700.0, "7.42", hazardous=True),
                _neo("54321", "(2020 XY)", 10.0, 20.0, "15.0", approaches=False),
            ],
        },
    }


@pytest.fixture
def sample_neo_lookup() -> dict[str, Any]:
    return _neo("2101955", "101955 Bennu (1999 RQ36)", 450.0, 560.0, "6.2", hazardous=True)
