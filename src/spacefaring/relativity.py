"""
Special-relativity formulas for fast travel and rocketry.

All functions take Quantity arguments and return Quantity results (or plain
floats for dimensionless factors).

Precision:
    1 - (v/c)² cancels catastrophically for v << c. The Lorentz factor and the
    relativistic kinetic energy accept `extended=True` to evaluate in
    numpy.longdouble (80-bit on x86 Linux), and the kinetic energy always
    uses the cancellation-free form

        γ - 1 = β² / (s × (1 + s)),    s = sqrt(1 - β²)

    so that it tends smoothly to ½mv² as v/c → 0.
"""

import warnings

import numpy as np

from spacefaring import constants as const
from spacefaring.errors import check_domain
from spacefaring.units import acosh1p, log, sqrt, tanh

# Below this β², 1 - β² rounds to 1 in float64 and γ - 1 carries no digits
_FLOAT64_BETA_SQUARED_FLOOR = np.finfo(np.float64).eps


def _beta(velocity, extended=False):
    """Speed as a fraction of c, optionally in extended precision."""
    v = velocity.to("m/s").value
    if extended:
        return np.asarray(v, dtype=np.longdouble) / np.longdouble(const.c.value)
    return np.asarray(v, dtype=np.float64) / const.c.value


def _check_subluminal(beta):
    check_domain(np.abs(beta) < 1, "velocity must be less than the speed of light")


def lorentz_factor(velocity, extended=False):
    """
    Calculate the Lorentz factor γ for a speed.

    γ(v) = 1 / sqrt(1 - v²/c²)

    Args:
        velocity: Speed (Quantity), |v| < c
        extended: Evaluate in numpy.longdouble

    Returns:
        float: Lorentz factor γ >= 1.0 (np.longdouble when `extended`)

    Raises:
        DomainError: If |v| >= c

    Notes:
        - For v << c: γ ≈ 1.0, and in float64 γ - 1 is lost entirely once
          β² falls below machine epsilon; a RuntimeWarning suggests
          `extended=True` in that case
        - For v → c: γ → ∞
    """
    beta = _beta(velocity, extended)
    _check_subluminal(beta)
    beta_squared = beta * beta

    if not extended and np.any((beta_squared > 0) & (beta_squared < _FLOAT64_BETA_SQUARED_FLOOR)):
        warnings.warn(
            "Lorentz factor evaluated in float64 for v/c below "
            f"{np.sqrt(_FLOAT64_BETA_SQUARED_FLOOR):.1e}; gamma - 1 is lost to rounding. "
            "Pass extended=True for more precision.",
            RuntimeWarning,
            stacklevel=2,
        )

    return 1 / np.sqrt(1 - beta_squared)


def lorentz_factor_from_time(t, acc):
    """
    Lorentz factor after accelerating at constant proper acceleration `acc`
    for coordinate time `t`, starting at rest.

    γ = sqrt(1 + (a × t / c)²)
    """
    check_domain(t >= 0, "time must be non-negative")
    return float(sqrt(1 + (acc * t / const.c) ** 2))


def lorentz_factor_from_distance(d, acc):
    """
    Lorentz factor after accelerating at constant proper acceleration `acc`
    over coordinate distance `d`, starting at rest.

    γ = 1 + a × d / c²
    """
    check_domain(d >= 0, "distance must be non-negative")
    return float(1 + acc * d / const.c_squared)


def lorentz_velocity(gamma):
    """
    Speed corresponding to a Lorentz factor.

    v = c × sqrt(1 - 1/γ²)

    Args:
        gamma: Lorentz factor, γ >= 1

    Returns:
        Quantity: Speed in units of c
    """
    check_domain(np.greater_equal(gamma, 1), "Lorentz factor must be >= 1")
    return (np.sqrt(1 - (1 / np.square(gamma))) * const.c).to("c")


def relativistic_kinetic_energy(mass, velocity, extended=False):
    """
    Kinetic energy including relativistic corrections.

    KE = (γ - 1) × m × c²

    Args:
        mass: Rest mass (Quantity)
        velocity: Speed (Quantity), |v| < c
        extended: Evaluate γ - 1 in numpy.longdouble

    Returns:
        Quantity: Kinetic energy [J]

    Notes:
        - γ - 1 is computed as β²/(s(1+s)) with s = sqrt(1 - β²), which does
          not cancel for small β; at v/c → 0 the result matches ½mv²
    """
    check_domain(mass >= 0, "mass must be non-negative")
    beta = _beta(velocity, extended)
    _check_subluminal(beta)

    beta_squared = beta * beta
    s = np.sqrt(1 - beta_squared)
    gamma_minus_one = beta_squared / (s * (1 + s))

    return (mass * const.c_squared * gamma_minus_one).to("J")


def relativistic_velocity(mass, ke):
    """
    Speed of a particle of rest mass `mass` carrying kinetic energy `ke`.

    x = 1 + KE / (m × c²)   (this is γ)
    v = c × sqrt(1 - 1/x²) = c × sqrt(k(k + 2)) / (1 + k),   k = x - 1

    The second form keeps its digits when KE << m × c².

    Returns:
        Quantity: Speed [m/s]
    """
    check_domain(mass > 0, "mass must be positive")
    check_domain(ke >= 0, "kinetic energy must be non-negative")
    k = (ke / (mass * const.c_squared)).si.value
    return (const.c * (np.sqrt(k * (k + 2)) / (1 + k))).to("m/s")


def relativistic_velocity_from_acceleration(t, acc):
    """
    Speed reached after constant proper acceleration `acc` for coordinate
    time `t`, starting at rest.

    v = a × t / sqrt(1 + (a × t / c)²)

    Returns:
        Quantity: Speed [m/s]
    """
    check_domain(t >= 0, "time must be non-negative")
    at = acc * t
    return (at / sqrt(1 + (at / const.c) ** 2)).to("m/s")


def relativistic_brachistochrone_transit_time(dist, acc):
    """
    Coordinate (rest-frame) time for a brachistochrone transit: accelerate at
    `acc` to the midpoint, then decelerate at `acc` to rest.

    t = 2 × sqrt((d/2c)² + 2 × (d/2) / a)

    Args:
        dist: Total distance, d >= 0
        acc: Proper acceleration, a > 0

    Returns:
        Quantity: Transit time [s]
    """
    check_domain(acc > 0, "acceleration must be positive")
    check_domain(dist >= 0, "distance must be non-negative")
    hd = dist / 2
    return (2 * sqrt((hd / const.c) ** 2 + (2 * hd / acc))).to("s")


def proper_relativistic_brachistochrone_transit_time(dist, acc):
    """
    Proper (shipboard) time for a brachistochrone transit.

    τ = 2 × (c / a) × acosh(a × (d/2) / c² + 1)

    The acosh is evaluated as acosh1p(a × (d/2) / c²) so that short trips
    reduce to the Newtonian 2 × sqrt(d / a).

    Args:
        dist: Total distance, d >= 0
        acc: Proper acceleration, a > 0

    Returns:
        Quantity: Transit time experienced aboard [s]
    """
    check_domain(acc > 0, "acceleration must be positive")
    check_domain(dist >= 0, "distance must be non-negative")
    hd = dist / 2
    return (2 * (const.c / acc) * acosh1p((acc * hd) / const.c_squared)).to("s")


def relativistic_delta_v(ve, mr):
    """
    Delta-v of a rocket, accounting for relativistic effects.

    Δv = c × tanh((ve / c) × ln(mr))

    Args:
        ve: Exhaust velocity (Quantity)
        mr: Mass ratio m_initial / m_final (plain number), mr > 0

    Returns:
        Quantity: Delta-v [m/s]; always below c, and below the Newtonian
        estimate ve × ln(mr) for mr > 1
    """
    check_domain(np.greater(mr, 0), "mass ratio must be positive")
    return (const.c * tanh((ve / const.c) * log(mr))).to("m/s")
