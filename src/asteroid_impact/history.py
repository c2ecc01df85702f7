"""Historical impact events and nearest-event comparison."""

from __future__ import annotations

import math

from asteroid_impact.exceptions import InvalidParameterError
from asteroid_impact.models import HistoricalComparison, HistoricalEvent, SeverityLabel

HISTORICAL_EVENTS: tuple[HistoricalEvent, ...] = (
    HistoricalEvent(
        name="Chelyabinsk",
        date_description="2013",
        diameter_m=20,
        velocity_km_s=19,
        energy_kilotons=500,
        location_name="Russia",
        casualties_description="1,500+ injured",
        description="Meteor that exploded over Russia causing widespread damage",
        latitude=54.8,
        longitude=61.1,
    ),
    HistoricalEvent(
        name="Tunguska",
        date_description="1908",
        diameter_m=60,
        velocity_km_s=15,
        energy_kilotons=15_000,
        location_name="Siberia, Russia",
        casualties_description="2,000 km² of forest flattened",
        description="Airburst that felled 80 million trees",
        latitude=60.9,
        longitude=101.9,
    ),
    HistoricalEvent(
        name="Chicxulub",
        date_description="66 million years ago",
        diameter_m=10_000,
        velocity_km_s=20,
        energy_kilotons=100_000_000,
        location_name="Yucatán Peninsula, Mexico",
        casualties_description="Mass extinction (75% of species)",
        description="Impact that ended the age of the dinosaurs",
        latitude=21.4,
        longitude=-89.5,
    ),
    HistoricalEvent(
        name="Barringer Crater",
        date_description="50,000 years ago",
        diameter_m=50,
        velocity_km_s=12.8,
        energy_kilotons=2_500,
        location_name="Arizona, USA",
        casualties_description="1.2 km wide crater",
        description="One of the best-preserved impact craters on Earth",
        latitude=35.0,
        longitude=-111.0,
    ),
)


def severity_label(energy_kilotons: float) -> SeverityLabel:
    if energy_kilotons > 15_000:
        return "CATASTROPHIC"
    if energy_kilotons > 500:
        return "SEVERE"
    if energy_kilotons > 50:
        return "MODERATE"
    return "LIGHT"


def compare_with_history(energy_kilotons: float) -> HistoricalComparison:
    """Compare an energy against the closest historical event on a log scale.

    Ties keep the earlier table entry.
    """
    if not math.isfinite(energy_kilotons) or energy_kilotons <= 0:
        raise InvalidParameterError(
            "energy_kilotons", energy_kilotons, "must be a finite number > 0"
        )

    log_e = math.log10(energy_kilotons)
    closest = min(
        HISTORICAL_EVENTS,
        key=lambda ev: abs(log_e - math.log10(ev.energy_kilotons)),
    )
    ratio = energy_kilotons / closest.energy_kilotons

    if ratio > 2:
        text = f"{ratio:.1f}× more powerful than {closest.name}"
    elif ratio > 0.5:
        text = f"similar to {closest.name}"
    else:
        text = f"{1 / ratio:.1f}× smaller than {closest.name}"

    return HistoricalComparison(
        event=closest,
        ratio=ratio,
        comparison_text=text,
        severity_label=severity_label(energy_kilotons),
    )
