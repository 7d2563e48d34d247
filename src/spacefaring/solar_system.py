"""
Reference data for the Sun, the planets and a few moons.

Values from the NASA planetary fact sheets (mass, radii, Bond albedo,
orbital elements, sidereal rotation) and the IAU 2015 nominal solar values.
Planetary inclinations are measured against the Sun's equator; the Moon's
is against the ecliptic.

All bodies are immutable and created once at import time.
"""

from types import MappingProxyType
from typing import Mapping

from spacefaring.planetary import Body, Orbit, Rotation
from spacefaring.units import Quantity

# Nominal solar values (IAU 2015 Resolution B3)
SOLAR_LUMINOSITY = Quantity(3.828e26, "W")
SOLAR_EFFECTIVE_TEMPERATURE = Quantity(5772, "K")

sun = Body(
    "Sun",
    mass=Quantity(1.98847e30, "kg"),
    equatorial_radius=Quantity(695700, "km"),
    bond_albedo=0.0,
    rotation=Rotation(0.070, Quantity(25.38, "d"), Quantity(7.25, "deg")),
)

mercury = Body(
    "Mercury",
    mass=Quantity(0.330103e24, "kg"),
    equatorial_radius=Quantity(2440.5, "km"),
    polar_radius=Quantity(2438.3, "km"),
    bond_albedo=0.068,
    orbit=Orbit(sun, Quantity(57.909e6, "km"), 0.205630, Quantity(3.38, "deg")),
    rotation=Rotation(0.346, Quantity(1407.6, "h"), Quantity(0.034, "deg")),
)

venus = Body(
    "Venus",
    mass=Quantity(4.86731e24, "kg"),
    equatorial_radius=Quantity(6051.8, "km"),
    bond_albedo=0.76,
    orbit=Orbit(sun, Quantity(108.210e6, "km"), 0.006772, Quantity(3.86, "deg")),
    rotation=Rotation(0.33, Quantity(5832.6, "h"), Quantity(177.36, "deg")),  # retrograde
)

earth = Body(
    "Earth",
    mass=Quantity(5.97217e24, "kg"),
    equatorial_radius=Quantity(6378.137, "km"),
    polar_radius=Quantity(6356.752, "km"),
    bond_albedo=0.306,
    orbit=Orbit(sun, Quantity(149.598e6, "km"), 0.0167086, Quantity(7.155, "deg")),
    rotation=Rotation(0.3307, Quantity(23.9345, "h"), Quantity(23.4393, "deg")),
)

moon = Body(
    "Moon",
    mass=Quantity(7.342e22, "kg"),
    equatorial_radius=Quantity(1738.1, "km"),
    polar_radius=Quantity(1736.0, "km"),
    bond_albedo=0.11,
    orbit=Orbit(earth, Quantity(384399, "km"), 0.0549, Quantity(5.145, "deg")),
    rotation=Rotation(0.3929, Quantity(27.321661, "d"), Quantity(6.687, "deg")),
)

mars = Body(
    "Mars",
    mass=Quantity(0.641691e24, "kg"),
    equatorial_radius=Quantity(3396.2, "km"),
    polar_radius=Quantity(3376.2, "km"),
    bond_albedo=0.25,
    orbit=Orbit(sun, Quantity(227.956e6, "km"), 0.0935, Quantity(5.65, "deg")),
    rotation=Rotation(0.3662, Quantity(24.6229, "h"), Quantity(25.19, "deg")),
)

phobos = Body(
    "Phobos",
    mass=Quantity(1.0659e16, "kg"),
    equatorial_radius=Quantity(11.2667, "km"),
    bond_albedo=0.071,
    orbit=Orbit(mars, Quantity(9376, "km"), 0.0151, Quantity(1.093, "deg")),
    rotation=Rotation(None, Quantity(7.66, "h"), Quantity(0, "deg")),  # tidally locked
)

deimos = Body(
    "Deimos",
    mass=Quantity(1.4762e15, "kg"),
    equatorial_radius=Quantity(6.2, "km"),
    bond_albedo=0.068,
    orbit=Orbit(mars, Quantity(23463.2, "km"), 0.00033, Quantity(0.93, "deg")),
    rotation=Rotation(None, Quantity(30.312, "h"), Quantity(0, "deg")),
)

jupiter = Body(
    "Jupiter",
    mass=Quantity(1898.125e24, "kg"),
    equatorial_radius=Quantity(71492, "km"),
    polar_radius=Quantity(66854, "km"),
    bond_albedo=0.343,
    orbit=Orbit(sun, Quantity(778.479e6, "km"), 0.0489, Quantity(6.09, "deg")),
    rotation=Rotation(0.254, Quantity(9.925, "h"), Quantity(3.13, "deg")),
)

saturn = Body(
    "Saturn",
    mass=Quantity(568.317e24, "kg"),
    equatorial_radius=Quantity(60268, "km"),
    polar_radius=Quantity(54364, "km"),
    bond_albedo=0.342,
    orbit=Orbit(sun, Quantity(1432.041e6, "km"), 0.0565, Quantity(5.51, "deg")),
    rotation=Rotation(0.210, Quantity(10.656, "h"), Quantity(26.73, "deg")),
)

uranus = Body(
    "Uranus",
    mass=Quantity(86.8099e24, "kg"),
    equatorial_radius=Quantity(25559, "km"),
    polar_radius=Quantity(24973, "km"),
    bond_albedo=0.300,
    orbit=Orbit(sun, Quantity(2867.043e6, "km"), 0.04717, Quantity(6.48, "deg")),
    rotation=Rotation(0.225, Quantity(17.24, "h"), Quantity(97.77, "deg")),
)

neptune = Body(
    "Neptune",
    mass=Quantity(102.4092e24, "kg"),
    equatorial_radius=Quantity(24764, "km"),
    polar_radius=Quantity(24341, "km"),
    bond_albedo=0.290,
    orbit=Orbit(sun, Quantity(4514.953e6, "km"), 0.008678, Quantity(6.43, "deg")),
    rotation=Rotation(0.23, Quantity(16.11, "h"), Quantity(28.32, "deg")),
)

BODIES: Mapping[str, Body] = MappingProxyType({
    body.name.lower(): body
    for body in (sun, mercury, venus, earth, moon, mars, phobos, deimos,
                 jupiter, saturn, uranus, neptune)
})
