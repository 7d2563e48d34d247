"""
Engineering material constants.

Each Material is an immutable record of density and (where it is meaningful)
yield strength. The module-level instances are read-only reference data.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from spacefaring.errors import check_domain
from spacefaring.units import Quantity


@dataclass(frozen=True)
class Material:
    """Bulk material properties."""

    density: Quantity  # mass / volume
    yield_strength: Optional[Quantity] = None  # pressure; None if not applicable

    def __post_init__(self):
        # Conversions double as dimension checks
        self.density.to("kg/m^3")
        if self.yield_strength is not None:
            self.yield_strength.to("Pa")

    def mass_of(self, volume: Quantity) -> Quantity:
        """Mass of `volume` of this material [kg]."""
        check_domain(volume >= 0, "volume must be non-negative")
        return (self.density * volume).to("kg")

    @property
    def specific_strength(self) -> Optional[Quantity]:
        """Yield strength per unit density [N·m/kg], or None."""
        if self.yield_strength is None:
            return None
        return (self.yield_strength / self.density).to("N m/kg")


aluminium = Material(Quantity(2.7, "g/cm^3"), Quantity(270, "MPa"))  # 6061 alloy, https://en.wikipedia.org/wiki/6061_aluminium_alloy
iron = Material(Quantity(7.874, "g/cm^3"))
steel = Material(Quantity(7700, "kg/m^3"), Quantity(350, "MPa"))  # 1020 steel, http://www.matweb.com/search/datasheet.aspx?bassnum=MS0001
titanium = Material(Quantity(4.506, "g/cm^3"), Quantity(140, "MPa"))  # http://www.matweb.com/search/datasheet.aspx?bassnum=METi00
titanium_alloy = Material(Quantity(4.51, "g/cm^3"), Quantity(830, "MPa"))  # 6% Al, 4% V, https://en.wikipedia.org/wiki/Yield_(engineering)
tungsten = Material(Quantity(19.25, "g/cm^3"), Quantity(550, "MPa"))  # annealed
water = Material(Quantity(997, "kg/m^3"), Quantity(0, "Pa"))
ice = Material(Quantity(0.9168, "g/cm^3"), Quantity(0, "Pa"))

MATERIALS: Mapping[str, Material] = MappingProxyType({
    "aluminium": aluminium,
    "iron": iron,
    "steel": steel,
    "titanium": titanium,
    "titanium_alloy": titanium_alloy,
    "tungsten": tungsten,
    "water": water,
    "ice": ice,
})
