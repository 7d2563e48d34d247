"""
Body summaries built from the planetary formulas.

summarize_body() evaluates every formula that applies to a body and returns
plain floats in the configured display units; format_body_report() renders
that dictionary as a fixed-width text report.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from spacefaring import solar_system
from spacefaring.config import Settings
from spacefaring.planetary import (
    Body,
    escape_velocity_from_body,
    gravity_from_body,
    heliocentric_distance,
    hill_sphere_from_body,
    kinetic_energy_from_body,
    orbital_period_from_body,
    orbital_velocity_from_body,
    planetary_equilibrium_temperature_from_star,
    relativistic_kinetic_energy_from_body,
    root_body,
)
from spacefaring.units import Quantity

logger = logging.getLogger(__name__)

# (summary key, label) in report order
_REPORT_ROWS = (
    ("mass", "Mass"),
    ("equatorial_radius", "Equatorial Radius"),
    ("surface_gravity", "Surface Gravity"),
    ("escape_velocity", "Escape Velocity"),
    ("semi_major_axis", "Semi-major Axis"),
    ("orbital_period", "Orbital Period"),
    ("orbital_velocity", "Mean Orbital Speed"),
    ("hill_sphere", "Hill Sphere Radius"),
    ("kinetic_energy", "Orbital Kinetic Energy"),
    ("relativistic_kinetic_energy", "Relativistic Kinetic Energy"),
    ("equilibrium_temperature", "Equilibrium Temperature"),
)


def summarize_body(body: Body, settings: Optional[Settings] = None,
                   star_luminosity: Optional[Quantity] = None) -> Dict[str, Any]:
    """
    Evaluate the body-level formulas for `body`.

    Args:
        body: Body to summarize
        settings: Display units and precision (defaults: Settings())
        star_luminosity: Luminosity of the star at the root of the orbit
            chain; defaults to the nominal solar luminosity when that root is
            the built-in Sun

    Returns:
        Dictionary with keys:
        - 'name', 'parent' (None if the body does not orbit anything)
        - one float per applicable entry of DEFAULT_DISPLAY_UNITS, in the
          unit given by settings.unit_for(key)
        Orbital entries are omitted for non-orbiting bodies, and the
        equilibrium temperature is omitted when no luminosity is known.
    """
    settings = settings or Settings()
    values = {
        "mass": body.mass,
        "equatorial_radius": body.equatorial_radius,
        "surface_gravity": gravity_from_body(body),
        "escape_velocity": escape_velocity_from_body(body),
    }

    if body.orbit is not None:
        values["semi_major_axis"] = body.orbit.semi_major_axis
        values["orbital_period"] = orbital_period_from_body(body)
        values["orbital_velocity"] = orbital_velocity_from_body(body)
        values["hill_sphere"] = hill_sphere_from_body(body)
        values["kinetic_energy"] = kinetic_energy_from_body(body)
        values["relativistic_kinetic_energy"] = relativistic_kinetic_energy_from_body(
            body, extended=settings.extended_precision
        )

        star = root_body(body)
        if star_luminosity is None and star is solar_system.sun:
            star_luminosity = solar_system.SOLAR_LUMINOSITY
        if star_luminosity is not None:
            values["equilibrium_temperature"] = planetary_equilibrium_temperature_from_star(
                star_luminosity, heliocentric_distance(body), body.equatorial_radius, body.bond_albedo
            )
        else:
            logger.info("No luminosity known for %s; skipping equilibrium temperature", star.name)

    summary = {
        "name": body.name,
        "parent": body.orbit.parent.name if body.orbit is not None else None,
    }
    for key, quantity in values.items():
        summary[key] = float(quantity.to(settings.unit_for(key)).value)
    if values.get("kinetic_energy", 0) > 0:
        # (γ - 1) / (β²/2) - 1, about 3β²/4 at orbital speeds
        summary["relativistic_correction"] = float(
            values["relativistic_kinetic_energy"] / values["kinetic_energy"] - 1
        )

    logger.debug("Summarized %s (%d quantities)", body.name, len(values))
    return summary


def format_body_report(summary: Dict[str, Any], settings: Optional[Settings] = None) -> str:
    """
    Render a summary from summarize_body() as text.

    Args:
        summary: Output of summarize_body()
        settings: Settings used to produce the summary (for unit labels)

    Returns:
        str: Report text
    """
    settings = settings or Settings()

    lines = []
    lines.append("=" * 70)
    lines.append(f"BODY REPORT - {summary['name'].upper()}")
    lines.append("=" * 70)
    lines.append("")
    lines.append(f"Parent Body: {summary['parent'] or '(none)'}")
    lines.append("-" * 70)

    for key, label in _REPORT_ROWS:
        if key not in summary:
            continue
        lines.append(f"{label + ':':<30} {summary[key]:>16.6g} {settings.unit_for(key)}")

    if "relativistic_correction" in summary:
        lines.append(f"{'Relativistic Correction:':<30} {summary['relativistic_correction']:>16.6g}")

    lines.append("")
    lines.append("=" * 70)
    return "\n".join(lines)


def write_body_report(body: Body, output_path, settings: Optional[Settings] = None):
    """Summarize `body` and write the text report to `output_path`."""
    settings = settings or Settings()
    report_text = format_body_report(summarize_body(body, settings), settings)
    Path(output_path).write_text(report_text, encoding='utf-8')
    logger.info("Wrote report for %s to %s", body.name, output_path)
