"""
Electromagnetism formulas.
"""

from spacefaring import constants as const


def energy_density(b):
    """
    Energy density of a magnetic field.

    u = B² / (2·μ₀)

    Args:
        b: Magnetic flux density (e.g. Quantity(1.0, "T"))

    Returns:
        Quantity: Energy density [J/m³]
    """
    return (b ** 2 / (2 * const.mu_0)).to("J/m^3")
