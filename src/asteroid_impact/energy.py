"""Kinetic impact energy and TNT-equivalent unit conversion."""

from __future__ import annotations

import math

from asteroid_impact.exceptions import InvalidParameterError
from asteroid_impact.models import EnergyResult

JOULES_PER_KILOTON = 4.184e12
HIROSHIMA_KILOTONS = 15.0
DEFAULT_DENSITY_KG_M3 = 2500.0


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(name, value, "must be a finite number > 0")


def kinetic_energy_joules(mass_kg: float, velocity_km_s: float) -> float:
    """E = 0.5 * m * v^2 with velocity converted to m/s."""
    velocity_ms = velocity_km_s * 1000.0
    return 0.5 * mass_kg * velocity_ms * velocity_ms


def sphere_mass_kg(diameter_m: float, density_kg_m3: float) -> float:
    radius = diameter_m / 2
    volume = (4 / 3) * math.pi * radius * radius * radius
    return volume * density_kg_m3


def impact_energy_kilotons(
    diameter_m: float,
    velocity_km_s: float,
    density_kg_m3: float = DEFAULT_DENSITY_KG_M3,
) -> float:
    """Kinetic energy of a spherical impactor in kilotons of TNT.

    Raises InvalidParameterError for non-finite or non-positive inputs.
    """
    _require_positive("diameter_m", diameter_m)
    _require_positive("velocity_km_s", velocity_km_s)
    _require_positive("density_kg_m3", density_kg_m3)

    mass = sphere_mass_kg(diameter_m, density_kg_m3)
    if not math.isfinite(mass):
        raise InvalidParameterError("diameter_m", diameter_m, "impactor mass overflows a float")
    velocity_ms = velocity_km_s * 1000.0
    if not math.isfinite(velocity_ms * velocity_ms):
        raise InvalidParameterError(
            "velocity_km_s", velocity_km_s, "impact energy overflows a float"
        )

    joules = kinetic_energy_joules(mass, velocity_km_s)
    if not math.isfinite(joules):
        raise InvalidParameterError("diameter_m", diameter_m, "impact energy overflows a float")
    return joules / JOULES_PER_KILOTON


def convert_energy(kilotons: float) -> EnergyResult:
    """Fan a kiloton figure out into megatons, joules, TJ and Hiroshima units."""
    joules = kilotons * JOULES_PER_KILOTON
    return EnergyResult(
        kilotons=kilotons,
        megatons=kilotons / 1000,
        joules=joules,
        terajoules=joules / 1e12,
        hiroshimas_equivalent=kilotons / HIROSHIMA_KILOTONS,
    )


def compute_energy(
    diameter_m: float,
    velocity_km_s: float,
    density_kg_m3: float = DEFAULT_DENSITY_KG_M3,
) -> EnergyResult:
    """Compute impact energy and its unit fan-out in one call."""
    return convert_energy(impact_energy_kilotons(diameter_m, velocity_km_s, density_kg_m3))
