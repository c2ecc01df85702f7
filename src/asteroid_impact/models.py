"""Data models for the impact estimation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ImpactType = Literal["OCEAN", "LAND"]
RiskLevel = Literal["LOW", "MODERATE", "HIGH", "VERY_HIGH", "CATASTROPHIC"]
AtmosphericRisk = Literal["MINIMAL", "MODERATE", "HIGH", "NUCLEAR_WINTER", "MASS_EXTINCTION"]
SeverityLabel = Literal["LIGHT", "MODERATE", "SEVERE", "CATASTROPHIC"]


@dataclass(frozen=True)
class ImpactParameters:
    """Physical parameters of an impactor and where it strikes."""

    diameter_m: float
    velocity_km_s: float
    density_kg_m3: float = 2500.0
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(frozen=True)
class EnergyResult:
    """Impact energy fanned out into display units, all derived from kilotons."""

    kilotons: float
    megatons: float
    joules: float
    terajoules: float
    hiroshimas_equivalent: float


@dataclass(frozen=True)
class DamageRadii:
    """Concentric damage radii in km."""

    total: float
    severe: float
    moderate: float
    light: float
    thermal: float
    fireball: float


@dataclass(frozen=True)
class TsunamiRisk:
    risk_level: RiskLevel
    wave_height_m: float
    affected_coastline_km: float
    description: str


@dataclass(frozen=True)
class SeismicActivity:
    """Equivalent earthquake magnitude for the impact."""

    magnitude: float
    description: str
    felt_radius_description: str
    felt_radius_km: float | None = None


@dataclass(frozen=True)
class AtmosphericEffect:
    risk_level: AtmosphericRisk
    description: str
    dust_tons: float
    cooling_years: float
    ozone_depletion: bool


@dataclass(frozen=True)
class PopulationEstimate:
    """People inside the moderate, severe and total-destruction zones."""

    total_at_risk: int
    severe_zone: int
    critical_zone: int
    evacuation_radius_km: float
    density_per_km2: float


@dataclass(frozen=True)
class FireRisk:
    risk_level: RiskLevel
    description: str
    firestorm: bool
    radius_km: float


@dataclass(frozen=True)
class ConsequenceSet:
    """Independent secondary-effect estimates for one impact."""

    tsunami: TsunamiRisk
    seismic: SeismicActivity
    atmospheric: AtmosphericEffect
    population: PopulationEstimate
    fire: FireRisk


@dataclass(frozen=True)
class HistoricalEvent:
    """A reference impact or airburst from the historical record."""

    name: str
    date_description: str
    diameter_m: float
    velocity_km_s: float
    energy_kilotons: float
    location_name: str
    casualties_description: str
    description: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class HistoricalComparison:
    event: HistoricalEvent
    ratio: float
    comparison_text: str
    severity_label: SeverityLabel


@dataclass(frozen=True)
class ImpactSummary:
    severity: SeverityLabel
    primary_threat: str


@dataclass(frozen=True)
class ImpactAnalysis:
    """Complete impact assessment returned to presentation code."""

    parameters: ImpactParameters
    energy: EnergyResult
    radii: DamageRadii
    impact_type: ImpactType
    consequences: ConsequenceSet
    historical: HistoricalComparison
    summary: ImpactSummary


@dataclass(frozen=True)
class CraterEstimate:
    """Crater size for on-screen mesh sizing, with its scene-unit radius."""

    velocity_km_s: float
    energy_joules: float
    transient_diameter_m: float
    final_diameter_m: float
    scene_radius_units: float
    exaggeration_factor: float
