"""Tests for the energy model."""

import math

import pytest

from asteroid_impact.energy import (
    JOULES_PER_KILOTON,
    compute_energy,
    convert_energy,
    impact_energy_kilotons,
    kinetic_energy_joules,
    sphere_mass_kg,
)
from asteroid_impact.exceptions import InvalidParameterError


class TestComputeEnergy:
    def test_chelyabinsk_order_of_magnitude(self):
        energy = compute_energy(20, 19, 3300)
        assert 400 < energy.kilotons < 800

    def test_matches_closed_form(self):
        mass = (4 / 3) * math.pi * 50**3 * 2500
        expected = 0.5 * mass * 20_000**2 / 4.184e12
        assert compute_energy(100, 20).kilotons == pytest.approx(expected)

    def test_default_density_is_2500(self):
        assert compute_energy(50, 15).kilotons == compute_energy(50, 15, 2500).kilotons

    def test_monotonic_in_diameter(self):
        assert compute_energy(10, 20).kilotons < compute_energy(11, 20).kilotons

    def test_monotonic_in_velocity(self):
        assert compute_energy(50, 12).kilotons < compute_energy(50, 30).kilotons

    def test_scales_with_diameter_cubed(self):
        small = compute_energy(10, 20).kilotons
        large = compute_energy(20, 20).kilotons
        assert large / small == pytest.approx(8.0)

    @pytest.mark.parametrize(
        "diameter, velocity, density, bad",
        [
            (0, 20, 2500, "diameter_m"),
            (-5, 20, 2500, "diameter_m"),
            (float("nan"), 20, 2500, "diameter_m"),
            (10, 0, 2500, "velocity_km_s"),
            (10, float("inf"), 2500, "velocity_km_s"),
            (10, 20, 0, "density_kg_m3"),
            (1e200, 20, 2500, "diameter_m"),
            (1e100, 20, 2500, "diameter_m"),
            (10, 1e200, 2500, "velocity_km_s"),
        ],
    )
    def test_rejects_invalid_inputs(self, diameter, velocity, density, bad):
        with pytest.raises(InvalidParameterError) as info:
            compute_energy(diameter, velocity, density)
        assert info.value.parameter == bad

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError, match="diameter_m"):
            impact_energy_kilotons(0, 20)


class TestConvertEnergy:
    def test_megatons(self):
        assert convert_energy(15_000).megatons == 15.0

    def test_hiroshimas(self):
        assert convert_energy(150).hiroshimas_equivalent == pytest.approx(10.0)

    def test_joules_and_terajoules(self):
        e = convert_energy(1.0)
        assert e.joules == JOULES_PER_KILOTON
        assert e.terajoules == pytest.approx(4.184)

    def test_zero(self):
        e = convert_energy(0.0)
        assert e.megatons == e.joules == e.hiroshimas_equivalent == 0.0

    @pytest.mark.parametrize("kt", [0.001, 1.0, 596.3, 1e8])
    def test_unit_consistency(self, kt):
        e = convert_energy(kt)
        assert e.megatons * 1000 == pytest.approx(e.kilotons)


class TestHelpers:
    def test_sphere_mass(self):
        assert sphere_mass_kg(2, 1000) == pytest.approx(4 / 3 * math.pi * 1000)

    def test_kinetic_energy_uses_metres_per_second(self):
        assert kinetic_energy_joules(2.0, 1.0) == pytest.approx(1e6)
