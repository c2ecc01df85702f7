"""Secondary consequence estimators: tsunami, seismic, atmospheric, fire, population.

Each estimator is independent: it reads only the shared energy, radii,
location and diameter inputs, never another estimator's output.
"""

from __future__ import annotations

import math

from asteroid_impact.models import (
    AtmosphericEffect,
    ConsequenceSet,
    DamageRadii,
    FireRisk,
    PopulationEstimate,
    RiskLevel,
    SeismicActivity,
    TsunamiRisk,
)

BASE_POPULATION_DENSITY = 60.0  # people/km^2, world average

# (energy threshold kt, level), checked in order with strict ">"
_TSUNAMI_TIERS: list[tuple[float, RiskLevel]] = [
    (10_000, "CATASTROPHIC"),
    (1_000, "VERY_HIGH"),
    (100, "HIGH"),
    (10, "MODERATE"),
]

_SEISMIC_DESCRIPTIONS: list[tuple[float, str]] = [
    (9.0, "Mega-scale earthquake, continental devastation"),
    (8.0, "Great earthquake, regional destruction"),
    (7.0, "Major earthquake, extensive damage"),
    (6.0, "Strong earthquake, structural damage"),
    (5.0, "Moderate earthquake, minor damage"),
]

# (energy threshold kt, level, description, cooling years, dust tons per metre of diameter)
_ATMOSPHERIC_TIERS = [
    (1e8, "MASS_EXTINCTION", "Impact winter, global darkness for decades", 10.0, 1_000_000),
    (1e6, "NUCLEAR_WINTER", "Severe global cooling lasting years", 5.0, 100_000),
    (1e5, "HIGH", "Global dust cloud, temporary cooling", 2.0, 10_000),
    (1e4, "MODERATE", "Regional dust cloud, local climate effects", 0.5, 1_000),
]


def tsunami_risk(energy_kilotons: float, is_ocean: bool) -> TsunamiRisk:
    """Wave height ~ E^0.4 and affected coastline ~ E^0.5 for ocean impacts."""
    if not is_ocean:
        return TsunamiRisk(
            risk_level="LOW",
            wave_height_m=0.0,
            affected_coastline_km=0.0,
            description="Land impact - no tsunami risk",
        )

    energy = max(energy_kilotons, 0.0)
    wave_height = (energy / 100) ** 0.4 * 10
    coastline = math.sqrt(energy) * 5

    level: RiskLevel = "LOW"
    for threshold, tier in _TSUNAMI_TIERS:
        if energy > threshold:
            level = tier
            break

    return TsunamiRisk(
        risk_level=level,
        wave_height_m=wave_height,
        affected_coastline_km=coastline,
        description=f"Waves of ~{wave_height:.0f} m affecting {coastline:.0f} km of coastline",
    )


def seismic_activity(energy_kilotons: float) -> SeismicActivity:
    """Equivalent Richter magnitude from log10(E_kgTNT) = 1.5 * M + 4.8."""
    if energy_kilotons > 0:
        raw = (math.log10(energy_kilotons * 1e6) - 4.8) / 1.5
    else:
        raw = 0.0

    description = "Light seismic activity"
    for threshold, text in _SEISMIC_DESCRIPTIONS:
        if raw >= threshold:
            description = text
            break

    felt_km: float | None = None
    if raw > 4:
        felt_km = 10 ** (raw - 3)
        felt = f"Felt up to {felt_km:.0f} km"
    else:
        felt = "Local impact"

    return SeismicActivity(
        magnitude=round(max(0.0, raw), 1),
        description=description,
        felt_radius_description=felt,
        felt_radius_km=felt_km,
    )


def atmospheric_effect(energy_kilotons: float, diameter_m: float) -> AtmosphericEffect:
    """Tiered dust, cooling and ozone estimate."""
    for threshold, level, description, cooling, dust_per_m in _ATMOSPHERIC_TIERS:
        if energy_kilotons > threshold:
            break
    else:
        level = "MINIMAL"
        description = "No significant atmospheric effects"
        cooling = 0.0
        dust_per_m = 10

    return AtmosphericEffect(
        risk_level=level,
        description=description,
        dust_tons=diameter_m * dust_per_m,
        cooling_years=cooling,
        ozone_depletion=energy_kilotons > 50_000,
    )


def fire_risk(energy_kilotons: float, fireball_radius_km: float) -> FireRisk:
    """Mass fires above 100 kt, firestorm above 1 Mt."""
    high = energy_kilotons > 100
    if high:
        description = f"Mass fires within a {fireball_radius_km:.1f} km radius"
    else:
        description = "Minimal risk of widespread fires"
    return FireRisk(
        risk_level="HIGH" if high else "LOW",
        description=description,
        firestorm=energy_kilotons > 1_000,
        radius_km=fireball_radius_km,
    )


def population_density(lat: float, lng: float) -> float:
    """Crude people/km^2 heuristic; the regional multipliers compound."""
    factor = 1.0
    if abs(lat) < 40:  # tropics and subtropics
        factor *= 2
    if 0 < lng < 150:  # Asia
        factor *= 2
    if -100 < lng < -30:  # Americas
        factor *= 1.5
    return BASE_POPULATION_DENSITY * factor


def population_at_risk(radii: DamageRadii, lat: float, lng: float) -> PopulationEstimate:
    density = population_density(lat, lng)

    def people_within(radius_km: float) -> int:
        return round(math.pi * radius_km**2 * density)

    return PopulationEstimate(
        total_at_risk=people_within(radii.moderate),
        severe_zone=people_within(radii.severe),
        critical_zone=people_within(radii.total),
        evacuation_radius_km=radii.light,
        density_per_km2=density,
    )


def compute_consequences(
    energy_kilotons: float,
    diameter_m: float,
    radii: DamageRadii,
    lat: float,
    lng: float,
    is_ocean: bool,
) -> ConsequenceSet:
    """Run all five estimators over the same shared inputs."""
    return ConsequenceSet(
        tsunami=tsunami_risk(energy_kilotons, is_ocean),
        seismic=seismic_activity(energy_kilotons),
        atmospheric=atmospheric_effect(energy_kilotons, diameter_m),
        population=population_at_risk(radii, lat, lng),
        fire=fire_risk(energy_kilotons, radii.fireball),
    )
