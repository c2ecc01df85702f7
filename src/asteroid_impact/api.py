"""FastAPI wrapper for the impact estimation pipeline."""

from __future__ import annotations

import logging
import tempfile
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Annotated, Any

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, Response

from asteroid_impact import __version__
from asteroid_impact.analysis import analyze_impact
from asteroid_impact.config import ImpactConfig, OutputFormat
from asteroid_impact.crater import estimate_crater
from asteroid_impact.exceptions import InvalidParameterError
from asteroid_impact.exporters import export_geojson, export_markdown
from asteroid_impact.history import HISTORICAL_EVENTS
from asteroid_impact.models import ImpactAnalysis, ImpactParameters

logger = logging.getLogger(__name__)

_CONTENT_TYPES: dict[str, str] = {
    "json": "application/json",
    "geojson": "application/geo+json",
    "markdown": "text/markdown; charset=utf-8",
}

_SUFFIX: dict[str, str] = {
    "geojson": ".geojson",
    "markdown": ".md",
}

_EXPORTERS: dict[str, Any] = {
    "geojson": export_geojson,
    "markdown": export_markdown,
}


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncGenerator[None, None]:
    """Store startup state for the /health endpoint."""
    application.state.start_time = datetime.now(tz=timezone.utc)
    application.state.analysis_count = 0
    application.state.config = ImpactConfig()
    yield


app = FastAPI(
    title="Asteroid Impact API",
    description="Energy, damage zones and consequences of an asteroid impact.",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(InvalidParameterError)
async def invalid_parameter_handler(
    request: Request, exc: InvalidParameterError
) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "parameter": exc.parameter},
    )


def _export(analysis: ImpactAnalysis, fmt: OutputFormat) -> Response:
    """Serialize an analysis into the requested format."""
    if fmt == "json":
        return JSONResponse(content=asdict(analysis))

    exporter = _EXPORTERS[fmt]
    suffix = _SUFFIX[fmt]

    with tempfile.NamedTemporaryFile(suffix=suffix, delete=False) as tmp:
        tmp_path = Path(tmp.name)
    try:
        exporter(analysis, tmp_path)
        content = tmp_path.read_text(encoding="utf-8")
    finally:
        tmp_path.unlink(missing_ok=True)

    return Response(content=content, media_type=_CONTENT_TYPES[fmt])


@app.get("/health")
def health() -> dict[str, Any]:
    """Server health check with uptime, version, and analysis count."""
    now = datetime.now(tz=timezone.utc)
    return {
        "status": "ok",
        "version": __version__,
        "uptime_seconds": round((now - app.state.start_time).total_seconds(), 1),
        "analysis_count": app.state.analysis_count,
    }


@app.get("/impact")
def get_impact(
    diameter: Annotated[float, Query(description="Impactor diameter in metres.")],
    velocity: Annotated[float, Query(description="Impact velocity in km/s.")],
    density: Annotated[
        float | None, Query(description="Impactor density in kg/m³."),
    ] = None,
    lat: Annotated[float, Query(description="Impact latitude.")] = 0.0,
    lng: Annotated[float, Query(description="Impact longitude.")] = 0.0,
    format: Annotated[
        OutputFormat, Query(description="Output format."),
    ] = "json",
) -> Response:
    """Analyse one impact.

    Out-of-range parameters are answered with 422 and the name of the
    offending parameter.
    """
    config: ImpactConfig = app.state.config
    analysis = analyze_impact(
        ImpactParameters(
            diameter_m=diameter,
            velocity_km_s=velocity,
            density_kg_m3=density if density is not None else config.default_density,
            latitude=lat,
            longitude=lng,
        )
    )
    app.state.analysis_count += 1
    return _export(analysis, format)


@app.get("/crater")
def get_crater(
    mass: Annotated[float, Query(description="Impactor mass in kg.")],
    scene_velocity: Annotated[float, Query(description="Scene speed (0.2-2.0).")] = 1.1,
    planet_radius: Annotated[
        float | None, Query(description="Planet radius in scene units."),
    ] = None,
) -> dict[str, Any]:
    """Crater size and mesh radius for the 3D scene."""
    config: ImpactConfig = app.state.config
    estimate = estimate_crater(
        mass,
        scene_velocity,
        planet_radius if planet_radius is not None else config.planet_radius_units,
        km_per_unit=config.km_per_scene_unit,
    )
    return asdict(estimate)


@app.get("/history/events")
def get_history_events() -> list[dict[str, Any]]:
    """The reference events used for historical comparison."""
    return [asdict(ev) for ev in HISTORICAL_EVENTS]
