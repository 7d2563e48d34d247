"""
Volumes, their algebraic inverses, and cone/spherical-cap solid angles.
"""

import numpy as np

from spacefaring.errors import check_domain
from spacefaring.units import atan2, cbrt, sin, sqrt


def sphere_volume(r):
    """Volume of a sphere of radius `r`: (4π/3)·r³ [m³]."""
    check_domain(r >= 0, "sphere radius must be non-negative")
    return ((4 * np.pi / 3) * r ** 3).to("m^3")


def sphere_radius(v):
    """Radius of a sphere of volume `v` [m]."""
    check_domain(v >= 0, "sphere volume must be non-negative")
    return cbrt(3 * v / (4 * np.pi)).to("m")


def cylinder_volume(r, h):
    """Volume of a cylinder with radius `r` and length `h`: π·r²·h [m³]."""
    check_domain(r >= 0, "cylinder radius must be non-negative")
    check_domain(h >= 0, "cylinder length must be non-negative")
    return (np.pi * r ** 2 * h).to("m^3")


def cylinder_radius(v, h):
    """Radius of a cylinder of volume `v` and length `h` [m]."""
    check_domain(v >= 0, "cylinder volume must be non-negative")
    check_domain(h > 0, "cylinder length must be positive")
    return sqrt(v / (np.pi * h)).to("m")


def cylinder_length(v, r):
    """Length of a cylinder of volume `v` and radius `r` [m]."""
    check_domain(v >= 0, "cylinder volume must be non-negative")
    check_domain(r > 0, "cylinder radius must be positive")
    return (v / (np.pi * r ** 2)).to("m")


def spherical_cap_solid_angle(theta):
    """
    Solid angle of a cone with apex angle 2θ, seen from its apex.

    Ω = 2π(1 - cos θ) = 4π sin²(θ/2)

    Evaluated in the half-angle form, which does not cancel for small θ.

    Args:
        theta: Half-angle of the cone; a plain number is taken as radians,
            a Quantity may be in any angle unit

    Returns:
        float: Solid angle in steradians (2π for a hemisphere, 4π for the
        full sphere)

    See https://en.wikipedia.org/wiki/Solid_angle#Cone,_spherical_cap,_hemisphere
    """
    return 4 * np.pi * sin(theta / 2) ** 2


def spherical_cap_solid_angle_of_cone(h_cone, r_cone):
    """
    Solid angle of a cone with height `h_cone` and base radius `r_cone`,
    seen from its apex.

    The half-angle is θ = atan2(r_cone, h_cone).

    Returns:
        float: Solid angle in steradians
    """
    check_domain(h_cone >= 0, "cone height must be non-negative")
    check_domain(r_cone >= 0, "cone radius must be non-negative")
    return spherical_cap_solid_angle(atan2(r_cone, h_cone))
