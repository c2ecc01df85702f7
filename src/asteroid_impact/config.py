"""Configuration model for the impact estimation tools."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

OutputFormat = Literal["json", "geojson", "markdown"]


class ImpactConfig(BaseSettings):
    """All configurable parameters for the CLI, API and NEO fetcher.

    Values can be set via constructor arguments, environment variables
    prefixed with ASTEROID_IMPACT_, or defaults.
    """

    model_config = {"env_prefix": "ASTEROID_IMPACT_"}

    default_density: float = Field(
        default=2500.0, gt=0.0, description="Impactor density (kg/m³) when none is given."
    )
    nasa_api_key: str = Field(
        default="DEMO_KEY", description="api.nasa.gov key for the NEO feed."
    )
    request_timeout: int = Field(
        default=30, ge=5, le=300, description="HTTP request timeout in seconds."
    )
    cache_enabled: bool = Field(
        default=True, description="Enable disk caching for NEO feed responses."
    )
    output_file: Path = Field(
        default=Path("impact_analysis.json"), description="Output file path."
    )
    output_format: OutputFormat = Field(
        default="json", description="Output format: json, geojson, or markdown."
    )
    km_per_scene_unit: float = Field(
        default=1000.0, gt=0.0, description="Kilometres represented by one scene unit."
    )
    planet_radius_units: float = Field(
        default=6.371, gt=0.0, description="Planet radius in scene units."
    )
