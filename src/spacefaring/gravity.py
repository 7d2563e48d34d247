"""
Newtonian gravity and two-body orbit formulas.

All functions take Quantity arguments (eccentricity is a plain ratio) and
return Quantity results in SI units. Out-of-domain inputs raise DomainError.
"""

import numpy as np

from spacefaring import constants as const
from spacefaring.errors import check_domain
from spacefaring.units import cbrt, sqrt

# Coefficients of the mean orbital speed series in e² (Ramanujan-style
# expansion of the ellipse perimeter): 1 - e²/4 - 3e⁴/64 - 5e⁶/256 - 175e⁸/16384
_MEAN_SPEED_SERIES = (1.0, -1.0 / 4.0, -3.0 / 64.0, -5.0 / 256.0, -175.0 / 16384.0)


def _check_eccentricity(e):
    check_domain(np.logical_and(np.greater_equal(e, 0), np.less(e, 1)),
                 f"eccentricity must satisfy 0 <= e < 1 for a closed orbit, got {e}")


def gravity(mass, radius):
    """
    Surface gravity of a body with mass `mass` and radius `radius`.

    g = G × M / r²

    Returns:
        Quantity: Acceleration [m/s²]
    """
    check_domain(mass >= 0, "mass must be non-negative")
    check_domain(radius > 0, "radius must be positive")
    return (const.G * mass / radius ** 2).to("m/s^2")


def planetary_mass(surface_gravity, radius):
    """Mass of a body from its surface gravity and radius: M = g·r²/G [kg]."""
    check_domain(surface_gravity >= 0, "surface gravity must be non-negative")
    check_domain(radius > 0, "radius must be positive")
    return (surface_gravity * radius ** 2 / const.G).to("kg")


def planetary_radius(surface_gravity, mass):
    """Radius of a body from its surface gravity and mass: r = sqrt(G·M/g) [m]."""
    check_domain(surface_gravity > 0, "surface gravity must be positive")
    check_domain(mass >= 0, "mass must be non-negative")
    return sqrt(const.G * mass / surface_gravity).to("m")


def orbital_period(parent_mass, semi_major_axis):
    """
    Orbital period from Kepler's third law.

    T = 2π × sqrt(a³ / (G × M))

    Args:
        parent_mass: Mass of the central body
        semi_major_axis: Semi-major axis of the orbit

    Returns:
        Quantity: Period [s]

    Notes:
        - The orbiting body's own mass is neglected (m << M)
    """
    check_domain(parent_mass > 0, "parent mass must be positive")
    check_domain(semi_major_axis > 0, "semi-major axis must be positive")
    return (2 * np.pi * sqrt(semi_major_axis ** 3 / (const.G * parent_mass))).to("s")


def orbital_radius(parent_mass, period):
    """
    Semi-major axis for a given period, inverting Kepler's third law.

    a = cbrt(G × M × T² / 4π²)

    Returns:
        Quantity: Semi-major axis [m]
    """
    check_domain(parent_mass > 0, "parent mass must be positive")
    check_domain(period > 0, "period must be positive")
    return cbrt(const.G * parent_mass * period ** 2 / (4 * np.pi ** 2)).to("m")


def orbital_velocity(semi_major_axis, period, eccentricity=0.0):
    """
    Mean orbital speed over one revolution.

    v = (2πa / T) × (1 - e²/4 - 3e⁴/64 - 5e⁶/256 - 175e⁸/16384)

    The bracket is the series for the ellipse perimeter divided by 2πa, so
    for a circular orbit this reduces to 2πa/T.

    Args:
        semi_major_axis: Semi-major axis
        period: Orbital period
        eccentricity: Orbital eccentricity, 0 <= e < 1

    Returns:
        Quantity: Mean speed [m/s]
    """
    _check_eccentricity(eccentricity)
    check_domain(semi_major_axis > 0, "semi-major axis must be positive")
    check_domain(period > 0, "period must be positive")

    e_squared = np.square(eccentricity)
    correction = 0.0
    for coefficient in reversed(_MEAN_SPEED_SERIES):
        correction = correction * e_squared + coefficient

    return (2 * np.pi * semi_major_axis / period * correction).to("m/s")


def escape_velocity(mass, radius):
    """
    Escape velocity from the surface of a body.

    v_esc = sqrt(2 × G × M / r)

    Returns:
        Quantity: Speed [m/s]
    """
    check_domain(mass >= 0, "mass must be non-negative")
    check_domain(radius > 0, "radius must be positive")
    return sqrt(2 * const.G * mass / radius).to("m/s")


def hill_sphere(parent_mass, body_mass, semi_major_axis, eccentricity=0.0):
    """
    Radius of the Hill sphere of a body orbiting a more massive parent.

    r_H = a × (1 - e) × cbrt(m / (3 × M))

    Args:
        parent_mass: Mass of the parent body M
        body_mass: Mass of the orbiting body m
        semi_major_axis: Semi-major axis a
        eccentricity: Orbital eccentricity, 0 <= e < 1

    Returns:
        Quantity: Hill radius [m], evaluated at periapsis
    """
    _check_eccentricity(eccentricity)
    check_domain(parent_mass > 0, "parent mass must be positive")
    check_domain(body_mass >= 0, "body mass must be non-negative")
    check_domain(semi_major_axis > 0, "semi-major axis must be positive")
    return (semi_major_axis * (1 - eccentricity) * cbrt(body_mass / (3 * parent_mass))).to("m")
