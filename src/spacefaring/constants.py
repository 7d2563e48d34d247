"""
Physical constants used throughout the formula modules.

All values are CODATA 2018, expressed as Quantity objects in SI units:
- c: speed of light in vacuum [m/s] (exact)
- G: Newtonian constant of gravitation [m³/(kg·s²)]
- sigma: Stefan-Boltzmann constant [W/(m²·K⁴)]
- mu_0: vacuum magnetic permeability [N/A²]
- g_n: standard acceleration of gravity [m/s²] (exact)

These are process-wide, read-only reference data.
"""

from spacefaring.units import Quantity

# Speed of light in vacuum (exact by definition of the metre)
c = Quantity(299792458.0, "m/s")
c_squared = c ** 2

# Gravitational constant
G = Quantity(6.67430e-11, "m^3 kg^-1 s^-2")

# Stefan-Boltzmann constant
sigma = Quantity(5.670374419e-8, "W m^-2 K^-4")

# Vacuum magnetic permeability (no longer exactly 4π×10⁻⁷ since the 2019 SI)
mu_0 = Quantity(1.25663706212e-6, "N A^-2")

# Standard gravity (exact)
g_n = Quantity(9.80665, "m/s^2")
