"""
Configuration management for the spacefaring tools.

This module handles:
- Report settings (log level, precision, display units) loaded from YAML
- User catalogs of bodies and materials loaded from YAML, with every value
  written as "<number> <unit>" and parsed into a Quantity
- Sanity checks returning ERROR/WARNING messages instead of raising

The formula modules never read configuration; only the report and the
scripts do.
"""

import logging
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from spacefaring import solar_system
from spacefaring.errors import DimensionMismatch, UnitParseError
from spacefaring.materials import Material
from spacefaring.planetary import Body, Orbit, Rotation
from spacefaring.units import Quantity, parse_quantity, parse_unit

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Report field -> default display unit (also fixes the field's dimension)
DEFAULT_DISPLAY_UNITS: Dict[str, str] = {
    "mass": "kg",
    "equatorial_radius": "km",
    "surface_gravity": "m/s^2",
    "escape_velocity": "km/s",
    "semi_major_axis": "km",
    "orbital_period": "d",
    "orbital_velocity": "km/s",
    "hill_sphere": "km",
    "kinetic_energy": "J",
    "relativistic_kinetic_energy": "J",
    "equilibrium_temperature": "K",
}


def configure_logging(level: str = "INFO"):
    """Configure the root logger for script use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _read_yaml(filepath) -> Dict[str, Any]:
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")
    with open(path, 'r') as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{filepath}: top level must be a mapping")
    return data


def to_bool(value: Any) -> bool:
    """Convert value to bool, accepting YAML-ish strings."""
    if isinstance(value, str):
        return value.lower() in ('true', 'yes', '1')
    return bool(value)


@dataclass
class Settings:
    """
    Settings for body reports.

    Attributes:
        log_level: Logging level name for scripts
        extended_precision: Evaluate relativistic energies in numpy.longdouble
        display_units: Report field -> unit expression
    """

    log_level: str = "INFO"
    extended_precision: bool = False
    display_units: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_DISPLAY_UNITS))

    def unit_for(self, name: str) -> str:
        return self.display_units.get(name, DEFAULT_DISPLAY_UNITS[name])

    def validate(self) -> List[str]:
        """
        Perform sanity checks on the settings.

        Returns:
            List of messages prefixed ERROR/WARNING. Empty list if all checks pass.
        """
        messages = []

        if self.log_level.upper() not in LOG_LEVELS:
            messages.append(f"ERROR: log_level must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'")

        for name, expression in self.display_units.items():
            if name not in DEFAULT_DISPLAY_UNITS:
                messages.append(f"WARNING: display unit for unknown report field '{name}' is ignored")
                continue
            try:
                unit = parse_unit(expression)
            except UnitParseError as exc:
                messages.append(f"ERROR: display unit for '{name}': {exc}")
                continue
            expected = parse_unit(DEFAULT_DISPLAY_UNITS[name])
            if not unit.is_compatible(expected):
                messages.append(
                    f"ERROR: display unit '{expression}' for '{name}' has dimension "
                    f"[{unit.dimension}], expected [{expected.dimension}]"
                )

        return messages

    @classmethod
    def from_yaml(cls, filepath) -> 'Settings':
        """
        Load settings from a YAML file.

        Missing keys keep their defaults; display_units entries are merged
        over DEFAULT_DISPLAY_UNITS.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If a section has the wrong shape
        """
        config = _read_yaml(filepath)

        display_units = dict(DEFAULT_DISPLAY_UNITS)
        overrides = config.get('display_units', {}) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"{filepath}: display_units must be a mapping")
        display_units.update({str(k): str(v) for k, v in overrides.items()})

        return cls(
            log_level=str(config.get('log_level', 'INFO')),
            extended_precision=to_bool(config.get('extended_precision', False)),
            display_units=display_units,
        )


# ==============================================================================
# CATALOGS
# ==============================================================================


def _quantity(entry: Dict[str, Any], key: str, unit: str, where: str,
              required: bool = True) -> Optional[Quantity]:
    """Parse entry[key] as a quantity with the same dimension as `unit`."""
    if key not in entry or entry[key] is None:
        if required:
            raise ValueError(f"{where}: missing '{key}'")
        return None
    try:
        quantity = parse_quantity(entry[key])
        quantity.to(unit)
    except (UnitParseError, DimensionMismatch) as exc:
        raise ValueError(f"{where}: invalid '{key}': {exc}") from exc
    return quantity


def _angle(entry: Dict[str, Any], key: str, where: str) -> Quantity:
    """Optional angle, defaulting to 0 deg."""
    angle = _quantity(entry, key, "rad", where, required=False)
    return Quantity(0.0, "deg") if angle is None else angle


def _ratio(entry: Dict[str, Any], key: str, where: str, default: float = 0.0) -> float:
    try:
        return float(entry.get(key, default))
    except (TypeError, ValueError):
        raise ValueError(f"{where}: '{key}' must be a number, got {entry.get(key)!r}") from None


@dataclass
class Catalog:
    """
    User-supplied bodies and materials.

    Lookups fall back to the built-in solar_system table.
    """

    bodies: Dict[str, Body] = field(default_factory=dict)
    materials: Dict[str, Material] = field(default_factory=dict)

    def lookup(self, name: str) -> Body:
        """Find a body by case-insensitive name, catalog first."""
        key = name.lower()
        if key in self.bodies:
            return self.bodies[key]
        if key in solar_system.BODIES:
            return solar_system.BODIES[key]
        raise KeyError(f"Unknown body: {name}")

    def validate(self) -> List[str]:
        """
        Perform sanity checks on catalog entries.

        Returns:
            List of messages prefixed ERROR/WARNING. Empty list if all checks pass.
        """
        messages = []

        for body in self.bodies.values():
            if body.mass <= 0:
                messages.append(f"ERROR: {body.name} mass must be positive")
            if body.equatorial_radius <= 0 or body.polar_radius <= 0:
                messages.append(f"ERROR: {body.name} radii must be positive")
            elif body.polar_radius > body.equatorial_radius:
                messages.append(f"WARNING: {body.name} polar radius exceeds equatorial radius")
            if not 0.0 <= body.bond_albedo <= 1.0:
                messages.append(f"ERROR: {body.name} Bond albedo must be in [0, 1], got {body.bond_albedo}")

            orbit = body.orbit
            if orbit is None:
                continue

            if not 0.0 <= orbit.eccentricity < 1.0:
                messages.append(
                    f"ERROR: {body.name} eccentricity must satisfy 0 <= e < 1, got {orbit.eccentricity}"
                )
                continue
            if orbit.semi_major_axis <= 0:
                messages.append(f"ERROR: {body.name} semi-major axis must be positive")
                continue

            periapsis = orbit.semi_major_axis * (1 - orbit.eccentricity)
            if periapsis <= orbit.parent.equatorial_radius + body.equatorial_radius:
                messages.append(
                    f"ERROR: {body.name} periapsis ({periapsis.to('km'):.0f}) intersects "
                    f"{orbit.parent.name}"
                )
            if body.mass >= orbit.parent.mass:
                messages.append(f"WARNING: {body.name} is not lighter than its parent {orbit.parent.name}")

        for name, material in self.materials.items():
            if material.density <= 0:
                messages.append(f"ERROR: material '{name}' density must be positive")
            if material.yield_strength is not None and material.yield_strength < 0:
                messages.append(f"ERROR: material '{name}' yield strength must be non-negative")

        return messages

    @classmethod
    def from_yaml(cls, filepath) -> 'Catalog':
        """
        Load a catalog from a YAML file.

        Expected layout:

            materials:
              regolith: {density: "1.5 g/cm^3", yield_strength: "1 MPa"}
            bodies:
              - name: Ceres
                mass: "9.3835e20 kg"
                equatorial_radius: "482.1 km"
                bond_albedo: 0.09
                orbit: {parent: Sun, semi_major_axis: "2.7675 AU", eccentricity: 0.0758}

        Bodies are read in order; an orbit's parent must be an earlier entry
        or a built-in body.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If an entry is malformed or a parent is unknown
        """
        config = _read_yaml(filepath)
        catalog = cls()

        for name, entry in (config.get('materials') or {}).items():
            where = f"material '{name}'"
            if not isinstance(entry, dict):
                raise ValueError(f"{where}: entry must be a mapping")
            catalog.materials[str(name)] = Material(
                _quantity(entry, 'density', "kg/m^3", where),
                _quantity(entry, 'yield_strength', "Pa", where, required=False),
            )

        for entry in config.get('bodies') or []:
            if not isinstance(entry, dict) or 'name' not in entry:
                raise ValueError(f"{filepath}: every body needs a 'name'")
            name = str(entry['name'])
            where = f"body '{name}'"

            if name.lower() in solar_system.BODIES:
                warnings.warn(f"Catalog body '{name}' shadows the built-in body of the same name")

            orbit = None
            if entry.get('orbit') is not None:
                orbit_data = entry['orbit']
                try:
                    parent = catalog.lookup(str(orbit_data['parent']))
                except KeyError as exc:
                    raise ValueError(f"{where}: unknown or missing orbit parent ({exc})") from None
                orbit = Orbit(
                    parent=parent,
                    semi_major_axis=_quantity(orbit_data, 'semi_major_axis', "m", where),
                    eccentricity=_ratio(orbit_data, 'eccentricity', where),
                    inclination=_angle(orbit_data, 'inclination', where),
                    mean_anomaly=_quantity(orbit_data, 'mean_anomaly', "rad", where, required=False),
                    ascending_node=_quantity(orbit_data, 'ascending_node', "rad", where, required=False),
                    periapsis=_quantity(orbit_data, 'periapsis', "rad", where, required=False),
                )

            rotation = None
            if entry.get('rotation') is not None:
                rotation_data = entry['rotation']
                moment = rotation_data.get('moment_of_inertia')
                rotation = Rotation(
                    moment_of_inertia=None if moment is None else float(moment),
                    rotation_period=_quantity(rotation_data, 'period', "s", where),
                    axial_tilt=_angle(rotation_data, 'axial_tilt', where),
                )

            catalog.bodies[name.lower()] = Body(
                name=name,
                mass=_quantity(entry, 'mass', "kg", where),
                equatorial_radius=_quantity(entry, 'equatorial_radius', "m", where),
                polar_radius=_quantity(entry, 'polar_radius', "m", where, required=False),
                bond_albedo=_ratio(entry, 'bond_albedo', where),
                orbit=orbit,
                rotation=rotation,
            )

        logger.debug("Loaded %d bodies and %d materials from %s",
                     len(catalog.bodies), len(catalog.materials), filepath)
        return catalog


def load_catalog(filepath) -> Catalog:
    """Shorthand for Catalog.from_yaml."""
    return Catalog.from_yaml(filepath)
