"""
Unit tests for bodies, orbits and stellar radiation.

Tests cover:
- Body/Orbit records and their validation
- Body-level compositions of the gravity formulas
- Stellar luminosity, irradiance and equilibrium temperature
- The built-in solar system table
"""

import dataclasses

import numpy as np
import pytest

from spacefaring import solar_system
from spacefaring.errors import DimensionMismatch, DomainError
from spacefaring.physics import kinetic_energy
from spacefaring.planetary import (
    Body,
    Orbit,
    escape_velocity_from_body,
    gravity_from_body,
    heliocentric_distance,
    hill_sphere_from_body,
    hill_sphere_from_orbit,
    kinetic_energy_from_body,
    kinetic_energy_from_orbit,
    orbital_period_from_body,
    orbital_period_from_orbit,
    orbital_radius_from_body,
    orbital_velocity_from_body,
    planetary_equilibrium_temperature,
    planetary_equilibrium_temperature_from_star,
    planetary_mass_from_body,
    planetary_radius_from_body,
    relativistic_kinetic_energy_from_body,
    root_body,
    stellar_irradiance,
    stellar_luminosity,
)
from spacefaring.solar_system import BODIES, SOLAR_LUMINOSITY, earth, moon, sun
from spacefaring.units import Quantity


class TestBodyRecords:
    """Tests for Body and Orbit construction."""

    def test_spherical_defaults(self):
        body = Body.spherical("Rock", Quantity(1e12, "kg"), Quantity(1, "km"), 0.1)
        assert body.polar_radius is body.equatorial_radius
        assert body.orbit is None
        assert body.rotation is None

    def test_polar_radius_defaults_to_equatorial(self):
        assert solar_system.venus.polar_radius == solar_system.venus.equatorial_radius

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            earth.mass = Quantity(1, "kg")

    def test_wrong_mass_dimension(self):
        with pytest.raises(DimensionMismatch):
            Body("Bad", Quantity(1, "m"), Quantity(1, "km"))

    def test_wrong_orbit_angle(self):
        with pytest.raises(DimensionMismatch):
            Orbit(sun, Quantity(1, "AU"), 0.0, Quantity(1, "km"))

    def test_repr(self):
        assert "Moon" in repr(moon)
        assert "Earth" in repr(moon)


class TestBodyFormulas:
    """Tests for formulas evaluated on bodies and orbits."""

    def test_moon_gravity(self):
        assert gravity_from_body(moon).value == pytest.approx(1.62, abs=0.01)

    def test_mass_and_radius_accessors(self):
        assert planetary_mass_from_body(earth) is earth.mass
        assert planetary_radius_from_body(earth) is earth.equatorial_radius
        assert orbital_radius_from_body(moon) is moon.orbit.semi_major_axis

    def test_earth_year(self):
        assert orbital_period_from_body(earth).to("d").value == pytest.approx(365.25, rel=1e-3)
        assert orbital_period_from_orbit(earth.orbit).value == orbital_period_from_body(earth).value

    def test_moon_month(self):
        # The Moon's own mass is neglected, so this runs slightly long
        assert orbital_period_from_body(moon).to("d").value == pytest.approx(27.3, rel=0.01)

    def test_earth_orbital_speed(self):
        assert orbital_velocity_from_body(earth).to("km/s").value == pytest.approx(29.78, rel=1e-3)

    def test_earth_escape_velocity(self):
        assert escape_velocity_from_body(earth).to("km/s").value == pytest.approx(11.18, abs=0.02)

    def test_earth_hill_sphere(self):
        r = hill_sphere_from_body(earth)
        assert r.to("km").value == pytest.approx(1.47e6, rel=0.01)
        assert hill_sphere_from_orbit(earth.orbit, earth.mass).value == r.value

    def test_kinetic_energy(self):
        ke = kinetic_energy_from_body(earth)
        expected = kinetic_energy(earth.mass, orbital_velocity_from_body(earth))
        assert ke.value == pytest.approx(expected.value)
        assert kinetic_energy_from_orbit(earth.mass, earth.orbit).value == ke.value

    def test_relativistic_kinetic_energy(self):
        ke = kinetic_energy_from_body(earth)
        rke = relativistic_kinetic_energy_from_body(earth)
        assert rke > ke
        assert rke.value == pytest.approx(ke.value, rel=1e-7)

    def test_relativistic_kinetic_energy_extended(self):
        plain = relativistic_kinetic_energy_from_body(earth)
        extended = relativistic_kinetic_energy_from_body(earth, extended=True)
        assert float(extended.value) == pytest.approx(plain.value, rel=1e-12)

    def test_no_orbit(self):
        with pytest.raises(ValueError, match="Sun has no orbit"):
            orbital_period_from_body(sun)
        with pytest.raises(ValueError):
            hill_sphere_from_body(sun)

    def test_root_and_heliocentric_distance(self):
        assert root_body(moon) is sun
        assert root_body(sun) is sun
        assert heliocentric_distance(moon) is earth.orbit.semi_major_axis
        assert heliocentric_distance(earth) is earth.orbit.semi_major_axis
        with pytest.raises(ValueError):
            heliocentric_distance(sun)


class TestStellarRadiation:
    """Tests for luminosity, irradiance and equilibrium temperature."""

    def test_solar_luminosity(self):
        l_sun = stellar_luminosity(Quantity(1, "Rsun"), Quantity(5772, "K"))
        assert l_sun.to("W").value == pytest.approx(3.828e26, rel=0.01)

    def test_luminosity_scales_with_t4(self):
        l1 = stellar_luminosity(Quantity(1, "Rsun"), Quantity(3000, "K"))
        l2 = stellar_luminosity(Quantity(1, "Rsun"), Quantity(6000, "K"))
        assert l2.value / l1.value == pytest.approx(16.0)

    def test_earth_irradiance(self):
        a = earth.orbit.semi_major_axis
        r = earth.equatorial_radius
        power = stellar_irradiance(SOLAR_LUMINOSITY, a, r)
        ratio = r.to("m").value / a.to("m").value
        assert power.value == pytest.approx(3.828e26 * ratio ** 2 / 4, rel=1e-6)

    def test_solar_constant(self):
        a = earth.orbit.semi_major_axis
        r = earth.equatorial_radius
        flux = stellar_irradiance(SOLAR_LUMINOSITY, a, r) / (np.pi * r ** 2)
        assert flux.to("W/m^2").value == pytest.approx(1361, rel=0.01)

    def test_earth_equilibrium_temperature(self):
        t = planetary_equilibrium_temperature(Quantity(1361, "W/m^2"), 0.306)
        assert t.value == pytest.approx(254, abs=1.5)

    def test_black_body_is_warmest(self):
        flux = Quantity(1361, "W/m^2")
        assert planetary_equilibrium_temperature(flux, 0.0) > planetary_equilibrium_temperature(flux, 0.5)
        assert planetary_equilibrium_temperature(flux, 1.0).value == 0.0

    def test_from_star_matches_flux_form(self):
        a = earth.orbit.semi_major_axis
        t_star = planetary_equilibrium_temperature_from_star(SOLAR_LUMINOSITY, a, earth.equatorial_radius, 0.306)
        flux = SOLAR_LUMINOSITY / (4 * np.pi * a ** 2)
        t_flux = planetary_equilibrium_temperature(flux, 0.306)
        assert t_star.value == pytest.approx(t_flux.value, rel=1e-6)

    @pytest.mark.parametrize("albedo", [-0.1, 1.1])
    def test_albedo_domain(self, albedo):
        with pytest.raises(DomainError):
            planetary_equilibrium_temperature(Quantity(1361, "W/m^2"), albedo)

    def test_irradiance_must_be_a_flux(self):
        with pytest.raises(DimensionMismatch):
            planetary_equilibrium_temperature(Quantity(1361, "W"), 0.3)


class TestSolarSystem:
    """Tests for the built-in body table."""

    def test_lookup_by_lowercase_name(self):
        assert BODIES["moon"] is moon
        assert len(BODIES) == 12

    def test_read_only(self):
        with pytest.raises(TypeError):
            BODIES["pluto"] = moon

    def test_parents_are_heavier_and_known(self):
        known = list(BODIES.values())
        for body in known:
            if body.orbit is None:
                continue
            assert any(body.orbit.parent is other for other in known)
            assert body.mass < body.orbit.parent.mass

    def test_orbits_clear_parents(self):
        for body in BODIES.values():
            if body.orbit is None:
                continue
            periapsis = body.orbit.semi_major_axis * (1 - body.orbit.eccentricity)
            assert periapsis > body.orbit.parent.equatorial_radius + body.equatorial_radius
