"""Markdown exporter for impact analysis results."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from asteroid_impact.models import ImpactAnalysis


def _fmt_int(value: float) -> str:
    return f"{round(value):,}"


def export_markdown(
    analysis: ImpactAnalysis,
    output_path: Path,
    *,
    place: str | None = None,
) -> Path:
    """Export an analysis as a Markdown report with energy, zone and consequence tables."""
    timestamp = datetime.now(tz=timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    p = analysis.parameters
    e = analysis.energy
    c = analysis.consequences
    location = f"{p.latitude:.4f}, {p.longitude:.4f}"
    if place:
        location += f" (near {place})"

    lines: list[str] = [
        "# Asteroid Impact Report",
        f"Generated: {timestamp}",
        "",
        f"**Impactor**: {p.diameter_m:g} m at {p.velocity_km_s:g} km/s,"
        f" density {p.density_kg_m3:g} kg/m³",
        f"**Location**: {location} ({analysis.impact_type.lower()})",
        f"**Severity**: {analysis.summary.severity}"
        f" | **Primary threat**: {analysis.summary.primary_threat}",
        "",
        "## Energy",
        "",
        "| Kilotons | Megatons | Joules | Hiroshima bombs |",
        "|---:|---:|---:|---:|",
        f"| {e.kilotons:,.1f} | {e.megatons:,.3f} | {e.joules:.3e}"
        f" | {e.hiroshimas_equivalent:,.1f} |",
        "",
        "## Damage Zones",
        "",
        "| Zone | Radius (km) |",
        "|---|---:|",
    ]

    r = analysis.radii
    for zone, radius in (
        ("Total destruction", r.total),
        ("Fireball", r.fireball),
        ("Severe damage", r.severe),
        ("Moderate damage", r.moderate),
        ("Thermal radiation", r.thermal),
        ("Light damage", r.light),
    ):
        lines.append(f"| {zone} | {radius:,.2f} |")

    lines.extend([
        "",
        "## Consequences",
        "",
        "| Effect | Level | Detail |",
        "|---|---|---|",
        f"| Tsunami | {c.tsunami.risk_level} | {c.tsunami.description} |",
        f"| Seismic | M{c.seismic.magnitude:.1f} | {c.seismic.description};"
        f" {c.seismic.felt_radius_description} |",
        f"| Atmosphere | {c.atmospheric.risk_level} | {c.atmospheric.description} |",
        f"| Fire | {c.fire.risk_level} | {c.fire.description} |",
        "",
        "## Population at Risk",
        "",
        f"- Moderate-damage zone: {_fmt_int(c.population.total_at_risk)}",
        f"- Severe-damage zone: {_fmt_int(c.population.severe_zone)}",
        f"- Total-destruction zone: {_fmt_int(c.population.critical_zone)}",
        f"- Evacuation radius: {c.population.evacuation_radius_km:,.1f} km",
        "",
        "## Historical Comparison",
        "",
    ])

    ev = analysis.historical.event
    lines.append(
        f"{analysis.historical.comparison_text[0].upper()}"
        f"{analysis.historical.comparison_text[1:]}"
        f" ({ev.date_description}, {ev.location_name}: {ev.casualties_description})."
    )
    lines.append("")

    output_path.write_text("\n".join(lines), encoding="utf-8")
    return output_path
