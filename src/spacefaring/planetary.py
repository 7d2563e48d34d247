"""
Celestial bodies, their orbits, and body-level formulas.

Body, Orbit and Rotation are immutable records. An Orbit holds a plain
reference to its parent Body; the parent never refers back to the bodies
orbiting it, so there is no ownership cycle.

The *_from_body / *_from_orbit functions are thin compositions of the
gravity, physics and relativity formulas. Stellar luminosity, irradiance and
equilibrium temperature live here as well.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from spacefaring import constants as const
from spacefaring.errors import check_domain
from spacefaring.geometry import spherical_cap_solid_angle_of_cone
from spacefaring.gravity import (
    escape_velocity,
    gravity,
    hill_sphere,
    orbital_period,
    orbital_velocity,
)
from spacefaring.physics import kinetic_energy
from spacefaring.relativity import relativistic_kinetic_energy
from spacefaring.units import Quantity

ZERO_DEGREES = Quantity(0.0, "deg")


@dataclass(frozen=True)
class Rotation:
    """Spin state of a body."""

    moment_of_inertia: Optional[float]  # normalized, I / (M R²)
    rotation_period: Quantity  # sidereal
    axial_tilt: Quantity  # angle

    def __post_init__(self):
        self.rotation_period.to("s")
        self.axial_tilt.to("rad")


@dataclass(frozen=True)
class Orbit:
    """
    Keplerian orbit around a parent body.

    Angles are Quantities in any angle unit. The inclination is measured
    against the equator of the parent body.
    """

    parent: 'Body'
    semi_major_axis: Quantity
    eccentricity: float = 0.0
    inclination: Quantity = ZERO_DEGREES
    mean_anomaly: Optional[Quantity] = None
    ascending_node: Optional[Quantity] = None
    periapsis: Optional[Quantity] = None

    def __post_init__(self):
        self.semi_major_axis.to("m")
        for angle in (self.inclination, self.mean_anomaly, self.ascending_node, self.periapsis):
            if angle is not None:
                angle.to("rad")


@dataclass(frozen=True)
class Body:
    """
    A celestial body.

    The polar radius defaults to the equatorial radius.
    """

    name: str
    mass: Quantity
    equatorial_radius: Quantity
    polar_radius: Optional[Quantity] = None
    bond_albedo: float = 0.0
    orbit: Optional[Orbit] = None
    rotation: Optional[Rotation] = None

    def __post_init__(self):
        self.mass.to("kg")
        self.equatorial_radius.to("m")
        if self.polar_radius is None:
            object.__setattr__(self, "polar_radius", self.equatorial_radius)
        else:
            self.polar_radius.to("m")

    @classmethod
    def spherical(cls, name: str, mass: Quantity, radius: Quantity, bond_albedo: float) -> 'Body':
        """A non-orbiting, non-rotating sphere."""
        return cls(name, mass, radius, radius, bond_albedo)

    def __repr__(self):
        parent = self.orbit.parent.name if self.orbit is not None else None
        return f"Body({self.name!r}, mass={self.mass.to('kg'):.4e}, parent={parent!r})"


def _orbit_of(body: Body) -> Orbit:
    if body.orbit is None:
        raise ValueError(f"{body.name} has no orbit")
    return body.orbit


def root_body(body: Body) -> Body:
    """Follow the chain of orbit parents up to the body that orbits nothing."""
    while body.orbit is not None:
        body = body.orbit.parent
    return body


def heliocentric_distance(body: Body) -> Quantity:
    """
    Semi-major axis of the orbit, in the chain starting at `body`, that
    goes directly around the root body.

    For a moon this is its planet's distance from the star.
    """
    _orbit_of(body)
    while body.orbit.parent.orbit is not None:
        body = body.orbit.parent
    return body.orbit.semi_major_axis


# ==============================================================================
# BODY / ORBIT FORMULAS
# ==============================================================================


def gravity_from_body(body: Body) -> Quantity:
    """
    Surface gravity of `body` at its equator.

    Example:
        >>> gravity_from_body(solar_system.moon).to("m/s^2")   # ~1.62 m/s²
    """
    return gravity(body.mass, body.equatorial_radius)


def planetary_mass_from_body(body: Body) -> Quantity:
    return body.mass


def planetary_radius_from_body(body: Body) -> Quantity:
    return body.equatorial_radius


def orbital_period_from_orbit(orbit: Orbit) -> Quantity:
    """Kepler's third law using the parent body's mass."""
    return orbital_period(orbit.parent.mass, orbit.semi_major_axis)


def orbital_period_from_body(body: Body) -> Quantity:
    return orbital_period_from_orbit(_orbit_of(body))


def orbital_radius_from_orbit(orbit: Orbit) -> Quantity:
    return orbit.semi_major_axis


def orbital_radius_from_body(body: Body) -> Quantity:
    return orbital_radius_from_orbit(_orbit_of(body))


def orbital_velocity_from_orbit(orbit: Orbit) -> Quantity:
    return orbital_velocity(orbit.semi_major_axis, orbital_period_from_orbit(orbit), orbit.eccentricity)


def orbital_velocity_from_body(body: Body) -> Quantity:
    return orbital_velocity_from_orbit(_orbit_of(body))


def escape_velocity_from_body(body: Body) -> Quantity:
    return escape_velocity(body.mass, body.equatorial_radius)


def hill_sphere_from_body(body: Body) -> Quantity:
    orbit = _orbit_of(body)
    return hill_sphere(orbit.parent.mass, body.mass, orbit.semi_major_axis, orbit.eccentricity)


def hill_sphere_from_orbit(orbit: Orbit, mass: Quantity) -> Quantity:
    """Hill sphere of a body of `mass` placed on `orbit`."""
    return hill_sphere(orbit.parent.mass, mass, orbit.semi_major_axis, orbit.eccentricity)


def kinetic_energy_from_orbit(mass: Quantity, orbit: Orbit) -> Quantity:
    """Newtonian kinetic energy of `mass` moving at the orbit's mean speed."""
    return kinetic_energy(mass, orbital_velocity_from_orbit(orbit))


def kinetic_energy_from_body(body: Body) -> Quantity:
    return kinetic_energy_from_orbit(body.mass, _orbit_of(body))


def relativistic_kinetic_energy_from_body(body: Body, extended: bool = False) -> Quantity:
    return relativistic_kinetic_energy(body.mass, orbital_velocity_from_body(body), extended=extended)


# ==============================================================================
# STELLAR RADIATION
# ==============================================================================


def stellar_luminosity(r_star, t_surface):
    """
    Approximate luminosity of a star treated as a black body.

    L = 4π × r² × σ × T⁴

    Args:
        r_star: Stellar radius
        t_surface: Effective surface temperature

    Returns:
        Quantity: Luminosity [W]
    """
    check_domain(r_star > 0, "stellar radius must be positive")
    check_domain(t_surface >= 0, "surface temperature must be non-negative")
    return (4 * np.pi * r_star ** 2 * const.sigma * t_surface ** 4).to("W")


def stellar_irradiance(l_stellar, r_orbit, r_body):
    """
    Power from a star of luminosity `l_stellar` falling on a circular body
    of radius `r_body` at distance `r_orbit`.

    P = L × Ω / 4π

    where Ω is the solid angle of the body seen from the star (a cone of
    height r_orbit and base radius r_body).

    Returns:
        Quantity: Intercepted power [W]
    """
    check_domain(l_stellar >= 0, "luminosity must be non-negative")
    check_domain(r_orbit > 0, "orbit radius must be positive")
    omega = spherical_cap_solid_angle_of_cone(r_orbit, r_body)  # steradians
    return (l_stellar * omega / (4 * np.pi)).to("W")


def planetary_equilibrium_temperature(irradiance, bond_albedo):
    """
    Black-body equilibrium temperature of a fast-rotating body.

    T = ((F × (1 - A)) / (4σ))^¼

    Args:
        irradiance: Incident flux F [W/m²]
        bond_albedo: Bond albedo A, 0 <= A <= 1

    Returns:
        Quantity: Temperature [K]
    """
    check_domain(np.logical_and(np.greater_equal(bond_albedo, 0), np.less_equal(bond_albedo, 1)),
                 f"Bond albedo must be between 0 and 1, got {bond_albedo}")
    check_domain(irradiance >= 0, "irradiance must be non-negative")
    return (((irradiance * (1 - bond_albedo)) / (4 * const.sigma)) ** 0.25).to("K")


def planetary_equilibrium_temperature_from_star(l_stellar, r_orbit, r_body, bond_albedo):
    """
    Equilibrium temperature of a body of radius `r_body` orbiting a star of
    luminosity `l_stellar` at distance `r_orbit`.

    The flux is the intercepted power over the body's cross-section πr².
    """
    check_domain(r_body > 0, "body radius must be positive")
    flux = stellar_irradiance(l_stellar, r_orbit, r_body) / (np.pi * r_body ** 2)
    return planetary_equilibrium_temperature(flux, bond_albedo)
