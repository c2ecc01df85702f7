"""Crater sizing for the 3D scene.

This is a separate empirical chain from the blast radii in
``asteroid_impact.damage``: crater diameter scales as E^(1/3.4) in joules,
destruction radii as E^(1/3) in kilotons. The two are not reconciled.
"""

from __future__ import annotations

import math

from asteroid_impact.energy import kinetic_energy_joules
from asteroid_impact.exceptions import InvalidParameterError
from asteroid_impact.models import CraterEstimate

MIN_SCENE_SPEED = 0.2
MAX_SCENE_SPEED = 2.0
MIN_IMPACT_KM_S = 11.0
MAX_IMPACT_KM_S = 70.0

TRANSIENT_COEFFICIENT = 0.032
TRANSIENT_EXPONENT = 1 / 3.4
FINAL_TO_TRANSIENT = 1.3

KM_PER_SCENE_UNIT = 1000.0
MIN_EXAGGERATION = 0.7
MAX_EXAGGERATION = 4.8


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def scene_speed_to_km_s(scene_speed: float) -> float:
    """Map a 0.2-2.0 scene speed linearly onto a 11-70 km/s impact velocity."""
    span = MAX_SCENE_SPEED - MIN_SCENE_SPEED
    km_s = MIN_IMPACT_KM_S + ((scene_speed - MIN_SCENE_SPEED) / span) * (
        MAX_IMPACT_KM_S - MIN_IMPACT_KM_S
    )
    return _clamp(km_s, MIN_IMPACT_KM_S, MAX_IMPACT_KM_S)


def exaggeration_factor(energy_joules: float) -> float:
    """Visual exaggeration growing with log10(E), clamped to [0.7, 4.8]."""
    return _clamp(
        1 + (math.log10(energy_joules) - 14) * 0.25,
        MIN_EXAGGERATION,
        MAX_EXAGGERATION,
    )


def estimate_crater(
    mass_kg: float,
    scene_velocity: float,
    planet_radius_units: float,
    km_per_unit: float = KM_PER_SCENE_UNIT,
) -> CraterEstimate:
    """Estimate crater diameters and the radius of the crater mesh in scene units.

    The scene radius is clamped to
    [max(planet_radius * 0.0025, 0.02), planet_radius * 0.12]; that clamp
    is a display constraint only.
    """
    for name, value in (
        ("mass_kg", mass_kg),
        ("scene_velocity", scene_velocity),
        ("planet_radius_units", planet_radius_units),
        ("km_per_unit", km_per_unit),
    ):
        if not math.isfinite(value) or value <= 0:
            raise InvalidParameterError(name, value, "must be a finite number > 0")

    km_s = scene_speed_to_km_s(scene_velocity)
    energy = kinetic_energy_joules(mass_kg, km_s)
    if not math.isfinite(energy):
        raise InvalidParameterError("mass_kg", mass_kg, "impact energy overflows a float")
    transient = TRANSIENT_COEFFICIENT * energy**TRANSIENT_EXPONENT
    final = transient * FINAL_TO_TRANSIENT

    exaggeration = exaggeration_factor(energy)
    radius_units = (final / 2 / 1000) / km_per_unit * exaggeration
    radius_units = _clamp(
        radius_units,
        max(planet_radius_units * 0.0025, 0.02),
        planet_radius_units * 0.12,
    )

    return CraterEstimate(
        velocity_km_s=km_s,
        energy_joules=energy,
        transient_diameter_m=transient,
        final_diameter_m=final,
        scene_radius_units=radius_units,
        exaggeration_factor=exaggeration,
    )
