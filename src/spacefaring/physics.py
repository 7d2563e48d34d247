"""
Newtonian mechanics shared by the gravity and planetary modules.
"""

from spacefaring.errors import check_domain


def kinetic_energy(mass, velocity):
    """
    Calculate non-relativistic kinetic energy.

    KE = ½ × m × v²

    Args:
        mass: Mass (Quantity)
        velocity: Speed (Quantity)

    Returns:
        Quantity: Kinetic energy [J]

    Notes:
        - Accurate for v << c; see relativity.relativistic_kinetic_energy
          for the corrected form
    """
    check_domain(mass >= 0, "mass must be non-negative")
    return (0.5 * mass * velocity ** 2).to("J")
