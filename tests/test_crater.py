"""Tests for crater sizing."""

import math

import pytest

from asteroid_impact.crater import (
    estimate_crater,
    exaggeration_factor,
    scene_speed_to_km_s,
)
from asteroid_impact.exceptions import InvalidParameterError


class TestSceneSpeed:
    @pytest.mark.parametrize(
        "scene, km_s",
        [(0.2, 11.0), (2.0, 70.0), (1.1, 40.5)],
    )
    def test_linear_mapping(self, scene, km_s):
        assert scene_speed_to_km_s(scene) == pytest.approx(km_s)

    def test_clamped_below(self):
        assert scene_speed_to_km_s(0.05) == 11.0

    def test_clamped_above(self):
        assert scene_speed_to_km_s(5.0) == 70.0


class TestExaggeration:
    def test_reference_energy(self):
        assert exaggeration_factor(1e14) == pytest.approx(1.0)

    def test_lower_clamp(self):
        assert exaggeration_factor(1e6) == 0.7

    def test_upper_clamp(self):
        assert exaggeration_factor(1e40) == 4.8


class TestEstimateCrater:
    def test_reference_scenario(self):
        est = estimate_crater(1e9, 1.1, 6.371)
        energy = 0.5 * 1e9 * 40_500**2
        assert est.velocity_km_s == pytest.approx(40.5)
        assert est.energy_joules == pytest.approx(energy)
        assert est.transient_diameter_m == pytest.approx(0.032 * energy ** (1 / 3.4))
        assert est.final_diameter_m == pytest.approx(est.transient_diameter_m * 1.3)
        assert est.final_diameter_m > 0
        assert 6.371 * 0.0025 <= est.scene_radius_units <= 6.371 * 0.12

    def test_exaggeration_reported(self):
        est = estimate_crater(1e9, 1.1, 6.371)
        expected = 1 + (math.log10(0.5 * 1e9 * 40_500**2) - 14) * 0.25
        assert est.exaggeration_factor == pytest.approx(expected)

    def test_small_impact_hits_minimum_radius(self):
        est = estimate_crater(1e9, 1.1, 6.371)
        assert est.scene_radius_units == pytest.approx(0.02)

    def test_huge_impact_hits_maximum_radius(self):
        est = estimate_crater(1e16, 2.0, 6.371)
        assert est.scene_radius_units == pytest.approx(6.371 * 0.12)

    def test_unclamped_radius(self):
        # 1e13 kg at 40.5 km/s: ~116 km crater, exaggerated x3.0 -> ~0.17 units
        est = estimate_crater(1e13, 1.1, 6.371)
        expected = est.final_diameter_m / 2 / 1000 / 1000 * est.exaggeration_factor
        assert est.scene_radius_units == pytest.approx(expected)
        assert 0.02 < est.scene_radius_units < 6.371 * 0.12

    def test_minimum_follows_planet_radius(self):
        est = estimate_crater(1e3, 0.2, 20.0)
        assert est.scene_radius_units == pytest.approx(20.0 * 0.0025)

    def test_diameter_grows_with_mass(self):
        small = estimate_crater(1e9, 1.0, 6.371)
        large = estimate_crater(1e12, 1.0, 6.371)
        assert large.final_diameter_m > small.final_diameter_m

    @pytest.mark.parametrize(
        "mass, speed, radius, bad",
        [
            (0, 1.0, 6.371, "mass_kg"),
            (-1, 1.0, 6.371, "mass_kg"),
            (1e9, 0, 6.371, "scene_velocity"),
            (1e9, 1.0, 0, "planet_radius_units"),
            (float("nan"), 1.0, 6.371, "mass_kg"),
            (1e305, 2.0, 6.371, "mass_kg"),
        ],
    )
    def test_rejects_invalid_inputs(self, mass, speed, radius, bad):
        with pytest.raises(InvalidParameterError) as info:
            estimate_crater(mass, speed, radius)
        assert info.value.parameter == bad
