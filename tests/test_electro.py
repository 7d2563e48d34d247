"""
Unit tests for the electromagnetism and Newtonian mechanics formulas.
"""

import pytest

from spacefaring.electro import energy_density
from spacefaring.errors import DimensionMismatch, DomainError
from spacefaring.physics import kinetic_energy
from spacefaring.units import Quantity


class TestEnergyDensity:
    """Tests for magnetic field energy density."""

    def test_one_tesla(self):
        u = energy_density(Quantity(1, "T"))
        assert u.unit.symbol == "J/m^3"
        assert u.value == pytest.approx(397887.36, rel=1e-6)

    def test_gauss_input(self):
        u = energy_density(Quantity(1e4, "gauss"))
        assert u.value == pytest.approx(397887.36, rel=1e-6)

    def test_scales_with_field_squared(self):
        u1 = energy_density(Quantity(2, "mT"))
        u2 = energy_density(Quantity(4, "mT"))
        assert u2.value / u1.value == pytest.approx(4.0)

    def test_rejects_non_field(self):
        with pytest.raises(DimensionMismatch):
            energy_density(Quantity(1, "m"))


class TestKineticEnergy:
    """Tests for Newtonian kinetic energy."""

    def test_half_m_v_squared(self):
        ke = kinetic_energy(Quantity(2, "kg"), Quantity(3, "m/s"))
        assert ke.value == pytest.approx(9.0)

    def test_mixed_units(self):
        ke = kinetic_energy(Quantity(1, "t"), Quantity(36, "km/h"))
        assert ke.to("kJ").value == pytest.approx(50.0)

    def test_negative_mass(self):
        with pytest.raises(DomainError):
            kinetic_energy(Quantity(-1, "kg"), Quantity(1, "m/s"))
