"""
Unit tests for settings and catalog loading.
"""

import pytest
from pathlib import Path

from spacefaring import solar_system
from spacefaring.config import (
    DEFAULT_DISPLAY_UNITS,
    Catalog,
    Settings,
    load_catalog,
    to_bool,
)

CONFIGS = Path(__file__).parent.parent / 'configs'


def _write(tmp_path, text, name='config.yaml'):
    path = tmp_path / name
    path.write_text(text)
    return path


# ==============================================================================
# SETTINGS
# ==============================================================================


def test_default_settings_are_valid():
    settings = Settings()
    assert settings.validate() == []
    assert settings.extended_precision is False
    assert settings.unit_for('orbital_period') == 'd'


def test_load_settings_file():
    """Test loading the bundled settings file."""
    settings = Settings.from_yaml(str(CONFIGS / 'settings.yaml'))

    assert settings.log_level == "INFO"
    assert settings.extended_precision is True
    assert settings.unit_for('mass') == "Mearth"
    assert settings.unit_for('semi_major_axis') == "AU"
    assert settings.validate() == []


def test_partial_display_units_merge_with_defaults(tmp_path):
    path = _write(tmp_path, "display_units:\n  hill_sphere: Rearth\n")
    settings = Settings.from_yaml(path)

    assert settings.unit_for('hill_sphere') == "Rearth"
    assert settings.unit_for('mass') == DEFAULT_DISPLAY_UNITS['mass']
    assert settings.log_level == "INFO"


def test_empty_settings_file(tmp_path):
    settings = Settings.from_yaml(_write(tmp_path, ""))
    assert settings.display_units == DEFAULT_DISPLAY_UNITS


def test_settings_validation_messages():
    settings = Settings(
        log_level="LOUD",
        display_units={
            'mass': 'furlongs',
            'surface_gravity': 'km',
            'colour': 'K',
        },
    )
    messages = settings.validate()

    errors = [m for m in messages if m.startswith("ERROR")]
    warnings = [m for m in messages if m.startswith("WARNING")]
    assert len(errors) == 3
    assert any("log_level" in m for m in errors)
    assert any("'mass'" in m for m in errors)
    assert any("surface_gravity" in m and "dimension" in m for m in errors)
    assert len(warnings) == 1
    assert "colour" in warnings[0]


def test_settings_missing_file():
    with pytest.raises(FileNotFoundError):
        Settings.from_yaml('does_not_exist.yaml')


def test_settings_top_level_must_be_mapping(tmp_path):
    with pytest.raises(ValueError):
        Settings.from_yaml(_write(tmp_path, "- a\n- b\n"))


def test_to_bool():
    assert to_bool("yes") is True
    assert to_bool("False") is False
    assert to_bool(1) is True
    assert to_bool(None) is False


# ==============================================================================
# CATALOGS
# ==============================================================================


def test_load_example_catalog():
    """Test loading the example catalog."""
    catalog = load_catalog(CONFIGS / 'example_catalog.yaml')

    assert set(catalog.bodies) == {'ceres', 'pluto', 'charon'}
    assert set(catalog.materials) == {'regolith', 'basalt'}

    ceres = catalog.bodies['ceres']
    assert ceres.name == "Ceres"
    assert ceres.mass.to('kg').value == pytest.approx(9.3835e20)
    assert ceres.orbit.semi_major_axis.to('AU').value == pytest.approx(2.7675)
    assert ceres.orbit.eccentricity == pytest.approx(0.0758)
    assert ceres.orbit.parent is solar_system.sun
    assert ceres.rotation.moment_of_inertia == pytest.approx(0.37)
    assert ceres.rotation.rotation_period.to('h').value == pytest.approx(9.074)

    pluto = catalog.bodies['pluto']
    assert pluto.polar_radius is pluto.equatorial_radius
    assert pluto.rotation.moment_of_inertia is None


def test_catalog_parents_resolve_to_earlier_entries():
    catalog = Catalog.from_yaml(CONFIGS / 'example_catalog.yaml')
    assert catalog.bodies['charon'].orbit.parent is catalog.bodies['pluto']


def test_catalog_materials():
    catalog = Catalog.from_yaml(CONFIGS / 'example_catalog.yaml')

    assert catalog.materials['regolith'].yield_strength is None
    assert catalog.materials['basalt'].yield_strength.to('MPa').value == pytest.approx(100.0)
    assert catalog.materials['basalt'].density.to('kg/m^3').value == pytest.approx(3000.0)


def test_example_catalog_is_valid():
    catalog = Catalog.from_yaml(CONFIGS / 'example_catalog.yaml')
    assert catalog.validate() == []


def test_invalid_catalog_messages():
    """Every out-of-range value in the invalid catalog is reported."""
    catalog = Catalog.from_yaml(CONFIGS / 'invalid_catalog.yaml')
    messages = catalog.validate()

    errors = [m for m in messages if m.startswith("ERROR")]
    warnings = [m for m in messages if m.startswith("WARNING")]

    assert any("Rogue" in m and "albedo" in m for m in errors)
    assert any("Rogue" in m and "eccentricity" in m for m in errors)
    assert any("Grazer" in m and "intersects Mars" in m for m in errors)
    assert any("foam" in m and "density" in m for m in errors)
    assert any("Grazer" in m and "polar radius" in m for m in warnings)


def test_lookup():
    catalog = Catalog.from_yaml(CONFIGS / 'example_catalog.yaml')

    assert catalog.lookup('CERES') is catalog.bodies['ceres']
    assert catalog.lookup('Moon') is solar_system.moon
    with pytest.raises(KeyError):
        catalog.lookup('Vulcan')


def test_unknown_parent(tmp_path):
    path = _write(tmp_path, """
bodies:
  - name: Orphan
    mass: 1e18 kg
    equatorial_radius: 10 km
    orbit:
      parent: Nemesis
      semi_major_axis: 1 AU
""")
    with pytest.raises(ValueError, match="Orphan"):
        Catalog.from_yaml(path)


def test_wrong_dimension_in_catalog(tmp_path):
    path = _write(tmp_path, """
bodies:
  - name: Confused
    mass: 3 km
    equatorial_radius: 10 km
""")
    with pytest.raises(ValueError, match="mass"):
        Catalog.from_yaml(path)


def test_unparseable_unit_in_catalog(tmp_path):
    path = _write(tmp_path, """
materials:
  cheese:
    density: 1 stone/pint
""")
    with pytest.raises(ValueError, match="cheese"):
        Catalog.from_yaml(path)


def test_missing_mass(tmp_path):
    path = _write(tmp_path, """
bodies:
  - name: Ghost
    equatorial_radius: 10 km
""")
    with pytest.raises(ValueError, match="missing 'mass'"):
        Catalog.from_yaml(path)


def test_body_without_name(tmp_path):
    path = _write(tmp_path, """
bodies:
  - mass: 1 kg
    equatorial_radius: 1 m
""")
    with pytest.raises(ValueError):
        Catalog.from_yaml(path)


def test_shadowing_builtin_warns(tmp_path):
    path = _write(tmp_path, """
bodies:
  - name: Moon
    mass: 1e20 kg
    equatorial_radius: 500 km
""")
    with pytest.warns(UserWarning, match="shadows"):
        catalog = Catalog.from_yaml(path)

    assert catalog.lookup('moon') is catalog.bodies['moon']
    assert catalog.lookup('moon') is not solar_system.moon
