"""CLI interface using Typer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, timedelta
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from asteroid_impact import __version__
from asteroid_impact.analysis import analyze_impact, sweep_diameters
from asteroid_impact.config import ImpactConfig, OutputFormat
from asteroid_impact.crater import estimate_crater
from asteroid_impact.exceptions import InvalidParameterError
from asteroid_impact.exporters import export_geojson, export_json, export_markdown
from asteroid_impact.models import ImpactAnalysis, ImpactParameters

Exporter = Callable[[ImpactAnalysis, Path], Path]

EXPORTERS: dict[str, Exporter] = {
    "json": export_json,
    "geojson": export_geojson,
    "markdown": export_markdown,
}

SEVERITY_STYLES: dict[str, str] = {
    "CATASTROPHIC": "bold red",
    "SEVERE": "red",
    "MODERATE": "yellow",
    "LIGHT": "green",
}

app = typer.Typer(
    name="asteroid-impact",
    help="Estimate the consequences of an asteroid impact.",
    add_completion=False,
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"asteroid-impact {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Asteroid Impact: energy, damage zones and consequences of an impact."""


@app.command()
def analyze(
    diameter: Annotated[
        float, typer.Option("--diameter", "-d", help="Impactor diameter in metres."),
    ],
    velocity: Annotated[
        float, typer.Option("--velocity", "-v", help="Impact velocity in km/s."),
    ],
    density: Annotated[
        float | None,
        typer.Option("--density", help="Impactor density in kg/m³ (default from config)."),
    ] = None,
    lat: Annotated[float, typer.Option("--lat", help="Impact latitude.")] = 0.0,
    lng: Annotated[float, typer.Option("--lng", help="Impact longitude.")] = 0.0,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path."),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format: json, geojson, markdown."),
    ] = None,
    locate: Annotated[
        bool,
        typer.Option("--locate", help="Label the impact site with the nearest place."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Analyse a single impact and write a report."""
    _setup_logging(verbose)
    overrides: dict[str, object] = {}
    if output is not None:
        overrides["output_file"] = output
    if output_format is not None:
        overrides["output_format"] = output_format
    config = ImpactConfig(**overrides)

    params = ImpactParameters(
        diameter_m=diameter,
        velocity_km_s=velocity,
        density_kg_m3=density if density is not None else config.default_density,
        latitude=lat,
        longitude=lng,
    )
    try:
        analysis = analyze_impact(params)
    except InvalidParameterError as exc:
        console.print(f"[red]Invalid input:[/red] {exc}")
        raise typer.Exit(code=2) from None

    place = None
    if locate:
        from asteroid_impact.geo import nearest_place

        place = nearest_place(lat, lng)

    if config.output_format == "markdown":
        export_markdown(analysis, config.output_file, place=place)
    else:
        EXPORTERS[config.output_format](analysis, config.output_file)

    e = analysis.energy
    c = analysis.consequences
    severity = analysis.summary.severity
    style = SEVERITY_STYLES[severity]

    console.print()
    table = Table(title="Impact Analysis", show_header=False)
    table.add_column("Quantity", style="bold")
    table.add_column("Value", justify="right")
    if place:
        table.add_row("Nearest place", place)
    table.add_row("Impact type", analysis.impact_type)
    table.add_row("Energy", f"{e.kilotons:,.1f} kt ({e.megatons:,.3f} Mt)")
    table.add_row("Hiroshima equivalents", f"{e.hiroshimas_equivalent:,.0f}")
    table.add_row("Total destruction radius", f"{analysis.radii.total:,.2f} km")
    table.add_row("Light damage radius", f"{analysis.radii.light:,.2f} km")
    table.add_row("Seismic magnitude", f"{c.seismic.magnitude:.1f}")
    table.add_row("Tsunami", c.tsunami.risk_level)
    table.add_row("Atmosphere", c.atmospheric.risk_level)
    table.add_row("Population at risk", f"{c.population.total_at_risk:,}")
    table.add_row("Severity", f"[{style}]{severity}[/{style}]")
    table.add_row("Primary threat", analysis.summary.primary_threat)
    table.add_row("Historical", analysis.historical.comparison_text)
    console.print(table)
    console.print(
        f"\n{config.output_format.upper()} written to [bold]{config.output_file}[/bold]"
    )


@app.command()
def crater(
    mass: Annotated[float, typer.Option("--mass", "-m", help="Impactor mass in kg.")],
    scene_velocity: Annotated[
        float,
        typer.Option("--scene-velocity", "-s", help="Scene speed (0.2-2.0)."),
    ] = 1.1,
    planet_radius: Annotated[
        float | None,
        typer.Option("--planet-radius", help="Planet radius in scene units."),
    ] = None,
) -> None:
    """Estimate crater size for the 3D scene."""
    config = ImpactConfig()
    try:
        est = estimate_crater(
            mass,
            scene_velocity,
            planet_radius if planet_radius is not None else config.planet_radius_units,
            km_per_unit=config.km_per_scene_unit,
        )
    except InvalidParameterError as exc:
        console.print(f"[red]Invalid input:[/red] {exc}")
        raise typer.Exit(code=2) from None

    table = Table(title="Crater Estimate", show_header=False)
    table.add_column("Quantity", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Impact velocity", f"{est.velocity_km_s:.1f} km/s")
    table.add_row("Energy", f"{est.energy_joules:.3e} J")
    table.add_row("Transient diameter", f"{est.transient_diameter_m:,.0f} m")
    table.add_row("Final diameter", f"{est.final_diameter_m:,.0f} m")
    table.add_row("Exaggeration", f"{est.exaggeration_factor:.2f}×")
    table.add_row("Scene radius", f"{est.scene_radius_units:.4f} units")
    console.print(table)


@app.command()
def sweep(
    min_diameter: Annotated[
        float, typer.Option("--min-diameter", help="Smallest diameter in metres."),
    ] = 10.0,
    max_diameter: Annotated[
        float, typer.Option("--max-diameter", help="Largest diameter in metres."),
    ] = 10_000.0,
    steps: Annotated[int, typer.Option("--steps", "-n", help="Number of diameters.")] = 10,
    velocity: Annotated[
        float, typer.Option("--velocity", "-v", help="Impact velocity in km/s."),
    ] = 20.0,
    density: Annotated[
        float | None, typer.Option("--density", help="Impactor density in kg/m³."),
    ] = None,
    lat: Annotated[float, typer.Option("--lat", help="Impact latitude.")] = 0.0,
    lng: Annotated[float, typer.Option("--lng", help="Impact longitude.")] = 0.0,
) -> None:
    """Tabulate impact severity over a geometric range of diameters."""
    config = ImpactConfig()
    try:
        analyses = sweep_diameters(
            min_diameter,
            max_diameter,
            steps,
            velocity,
            density if density is not None else config.default_density,
            lat,
            lng,
        )
    except InvalidParameterError as exc:
        console.print(f"[red]Invalid input:[/red] {exc}")
        raise typer.Exit(code=2) from None

    table = Table(title=f"Impact Sweep at {velocity:g} km/s")
    table.add_column("Diameter (m)", justify="right")
    table.add_column("Energy (Mt)", justify="right")
    table.add_column("Light radius (km)", justify="right")
    table.add_column("Magnitude", justify="right")
    table.add_column("Severity")
    table.add_column("Closest event")
    for a in analyses:
        style = SEVERITY_STYLES[a.summary.severity]
        table.add_row(
            f"{a.parameters.diameter_m:,.1f}",
            f"{a.energy.megatons:,.3g}",
            f"{a.radii.light:,.1f}",
            f"{a.consequences.seismic.magnitude:.1f}",
            f"[{style}]{a.summary.severity}[/{style}]",
            a.historical.event.name,
        )
    console.print(table)


@app.command()
def neo(
    days: Annotated[
        int, typer.Option("--days", "-d", min=1, max=7, help="Days of feed to fetch."),
    ] = 1,
    lat: Annotated[float, typer.Option("--lat", help="Hypothetical impact latitude.")] = 0.0,
    lng: Annotated[float, typer.Option("--lng", help="Hypothetical impact longitude.")] = 0.0,
    browse: Annotated[
        int | None,
        typer.Option("--browse", min=0, help="Score catalogue page N instead of the feed."),
    ] = None,
    hazardous_only: Annotated[
        bool, typer.Option("--hazardous-only", help="Only potentially hazardous objects."),
    ] = False,
    no_cache: Annotated[
        bool, typer.Option("--no-cache", help="Disable disk caching of the NEO feed."),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Score near-Earth objects from today's feed (or a catalogue page) as impactors."""
    from asteroid_impact.fetchers.neo import browse_neos, fetch_neo_feed

    _setup_logging(verbose)
    config = ImpactConfig()
    start = date.today()
    use_cache = config.cache_enabled and not no_cache
    try:
        if browse is not None:
            objects = browse_neos(
                browse,
                api_key=config.nasa_api_key,
                timeout=config.request_timeout,
                use_cache=use_cache,
            )
        else:
            objects = fetch_neo_feed(
                start,
                start + timedelta(days=days - 1),
                api_key=config.nasa_api_key,
                timeout=config.request_timeout,
                use_cache=use_cache,
            )
    except Exception as exc:
        console.print(f"[red]NEO feed failed:[/red] {exc}")
        raise typer.Exit(code=1) from None

    if hazardous_only:
        objects = [o for o in objects if o.is_potentially_hazardous]
    if not objects:
        console.print("[yellow]No near-Earth objects in the requested window.[/yellow]")
        raise typer.Exit()

    scored = [
        (o, analyze_impact(o.to_impact_parameters(lat, lng, config.default_density)))
        for o in objects
    ]
    scored.sort(key=lambda pair: pair[1].energy.kilotons, reverse=True)

    table = Table(title="Near-Earth Objects as Hypothetical Impactors")
    table.add_column("Name", style="bold")
    table.add_column("PHA")
    table.add_column("Diameter (m)", justify="right")
    table.add_column("Velocity (km/s)", justify="right")
    table.add_column("Energy (Mt)", justify="right", style="red")
    table.add_column("Severity")
    for o, a in scored:
        table.add_row(
            o.name,
            "yes" if o.is_potentially_hazardous else "",
            f"{o.diameter_m:,.0f}",
            f"{o.velocity_km_s:.1f}",
            f"{a.energy.megatons:,.3g}",
            a.summary.severity,
        )
    console.print(table)
    console.print(f"Total objects: {len(scored)}")
