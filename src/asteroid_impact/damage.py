"""Damage radii from cube-root blast scaling."""

from __future__ import annotations

from asteroid_impact.models import DamageRadii

# km per kt^(1/3)
RADIUS_MULTIPLIERS: dict[str, float] = {
    "total": 0.5,  # > 20 psi overpressure, total destruction
    "severe": 1.0,  # 5-20 psi, severe structural damage
    "moderate": 1.5,  # 1-5 psi
    "light": 3.0,  # broken windows, light injuries
    "thermal": 2.5,  # third-degree burns
    "fireball": 0.8,  # mass fires
}


def compute_damage_radii(energy_kilotons: float) -> DamageRadii:
    """Scale each damage radius as multiplier * cbrt(energy).

    Negative energy is clamped to zero, so the result is never NaN.
    """
    cbrt = max(energy_kilotons, 0.0) ** (1 / 3)
    return DamageRadii(**{name: cbrt * k for name, k in RADIUS_MULTIPLIERS.items()})
