"""
Closed-form physics formulas over dimension-checked quantities.

Modules:
- units: Quantity, Unit, Dimension and dimension-checked math
- constants: physical constants (CODATA 2018)
- geometry, electro, physics, gravity, relativity: formula functions
- materials, solar_system: read-only reference tables
- planetary: Body/Orbit/Rotation records and body-level formulas
- config, report, visualization: YAML settings/catalogs, text reports, plots
"""

from spacefaring.errors import DimensionError, DimensionMismatch, DomainError, UnitParseError
from spacefaring.units import Quantity, parse_quantity, parse_unit

__version__ = "0.1.0"

__all__ = [
    "DimensionError",
    "DimensionMismatch",
    "DomainError",
    "UnitParseError",
    "Quantity",
    "parse_quantity",
    "parse_unit",
]
