"""Impact analysis facade: validate -> energy -> radii -> classify -> consequences -> compare."""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from asteroid_impact.consequences import compute_consequences
from asteroid_impact.damage import compute_damage_radii
from asteroid_impact.energy import JOULES_PER_KILOTON, compute_energy, convert_energy
from asteroid_impact.exceptions import InvalidParameterError
from asteroid_impact.geo import classify_impact
from asteroid_impact.history import compare_with_history
from asteroid_impact.models import ImpactAnalysis, ImpactParameters, ImpactSummary, ImpactType

logger = logging.getLogger(__name__)


def validate_parameters(params: ImpactParameters) -> None:
    """Raise InvalidParameterError for the first parameter out of range."""
    for name in ("diameter_m", "velocity_km_s", "density_kg_m3"):
        value = getattr(params, name)
        if not math.isfinite(value) or value <= 0:
            raise InvalidParameterError(name, value, "must be a finite number > 0")

    if not math.isfinite(params.latitude) or not -90 <= params.latitude <= 90:
        raise InvalidParameterError("latitude", params.latitude, "must be within [-90, 90]")
    if not math.isfinite(params.longitude) or not -180 <= params.longitude <= 180:
        raise InvalidParameterError(
            "longitude", params.longitude, "must be within [-180, 180]"
        )


def primary_threat(energy_kilotons: float, impact_type: ImpactType) -> str:
    if impact_type == "OCEAN":
        return "Tsunami"
    if energy_kilotons > 10_000:
        return "Global Climate Change"
    if energy_kilotons > 1_000:
        return "Regional Devastation"
    return "Local Destruction"


def analysis_from_energy(
    energy_kilotons: float,
    parameters: ImpactParameters,
) -> ImpactAnalysis:
    """Build the full analysis from an already-known energy figure.

    Shared by local computation and the backend adapter so both produce
    the same canonical shape.
    """
    energy = convert_energy(energy_kilotons)
    radii = compute_damage_radii(energy.kilotons)
    impact_type = classify_impact(parameters.latitude, parameters.longitude)
    consequences = compute_consequences(
        energy.kilotons,
        parameters.diameter_m,
        radii,
        parameters.latitude,
        parameters.longitude,
        is_ocean=impact_type == "OCEAN",
    )
    historical = compare_with_history(energy.kilotons)

    return ImpactAnalysis(
        parameters=parameters,
        energy=energy,
        radii=radii,
        impact_type=impact_type,
        consequences=consequences,
        historical=historical,
        summary=ImpactSummary(
            severity=historical.severity_label,
            primary_threat=primary_threat(energy.kilotons, impact_type),
        ),
    )


def analyze_impact(params: ImpactParameters) -> ImpactAnalysis:
    """Compute the complete impact assessment for one set of parameters."""
    validate_parameters(params)
    energy = compute_energy(params.diameter_m, params.velocity_km_s, params.density_kg_m3)
    logger.debug(
        "Impact D=%.1fm v=%.1fkm/s rho=%.0f -> %.3g kt",
        params.diameter_m,
        params.velocity_km_s,
        params.density_kg_m3,
        energy.kilotons,
    )
    return analysis_from_energy(energy.kilotons, params)


def _backend_energy_kilotons(payload: dict[str, Any]) -> float | None:
    energy = payload.get("energy")
    if isinstance(energy, dict) and energy.get("kilotons") is not None:
        return float(energy["kilotons"])
    if isinstance(energy, (int, float)):
        return float(energy)
    if payload.get("energy_kilotons") is not None:
        return float(payload["energy_kilotons"])
    if payload.get("energy_megatons") is not None:
        return float(payload["energy_megatons"]) * 1000
    if payload.get("energy_joules") is not None:
        return float(payload["energy_joules"]) / JOULES_PER_KILOTON
    return None


def analysis_from_backend(payload: dict[str, Any]) -> ImpactAnalysis:
    """Map a remote simulation backend response onto the canonical ImpactAnalysis.

    The backend echoes its request (diameter_m, velocity_km_s, density,
    impact_location) next to the energy it computed; energy may be
    reported as kilotons, megatons or joules.
    """
    kilotons = _backend_energy_kilotons(payload)
    if kilotons is None:
        raise InvalidParameterError("energy", None, "backend response has no energy figure")
    if not math.isfinite(kilotons * JOULES_PER_KILOTON) or kilotons <= 0:
        raise InvalidParameterError("energy", kilotons, "must be a finite number > 0")

    location = payload.get("impact_location") or {}
    params = ImpactParameters(
        diameter_m=float(payload.get("diameter_m", math.nan)),
        velocity_km_s=float(payload.get("velocity_km_s", math.nan)),
        density_kg_m3=float(payload.get("density") or 2500.0),
        latitude=float(location.get("lat", 0.0)),
        longitude=float(location.get("lon", location.get("lng", 0.0))),
    )
    validate_parameters(params)
    logger.debug("Adapted backend response: %.3g kt", kilotons)
    return analysis_from_energy(kilotons, params)


def sweep_diameters(
    min_diameter_m: float,
    max_diameter_m: float,
    steps: int,
    velocity_km_s: float,
    density_kg_m3: float = 2500.0,
    latitude: float = 0.0,
    longitude: float = 0.0,
) -> list[ImpactAnalysis]:
    """Analyse impacts over a geometric grid of diameters, smallest first."""
    if steps < 2:
        raise InvalidParameterError("steps", steps, "must be at least 2")
    if not math.isfinite(min_diameter_m) or min_diameter_m <= 0:
        raise InvalidParameterError(
            "min_diameter_m", min_diameter_m, "must be a finite number > 0"
        )
    if not math.isfinite(max_diameter_m) or not min_diameter_m < max_diameter_m:
        raise InvalidParameterError(
            "max_diameter_m", max_diameter_m, "must be greater than min_diameter_m"
        )

    diameters = np.geomspace(min_diameter_m, max_diameter_m, num=steps)
    return [
        analyze_impact(
            ImpactParameters(
                diameter_m=float(d),
                velocity_km_s=velocity_km_s,
                density_kg_m3=density_kg_m3,
                latitude=latitude,
                longitude=longitude,
            )
        )
        for d in diameters
    ]
