"""
Tests for visualization module.
"""

import numpy as np

from spacefaring.units import Quantity
from spacefaring.visualization import plot_lorentz_factor, plot_transit_times


def test_plot_transit_times(tmp_path):
    """Test that the transit time plot is created."""
    output_path = tmp_path / "transit_times.png"
    distances = Quantity(np.logspace(-2, 3, 20), "ly")

    plot_transit_times(distances, Quantity(1, "g0"), str(output_path))

    assert output_path.exists()
    assert output_path.stat().st_size > 0


def test_plot_transit_times_other_units(tmp_path):
    """Distances and acceleration may be in any compatible unit."""
    output_path = tmp_path / "transit_times_pc.png"
    distances = Quantity(np.linspace(0.1, 10, 10), "pc")

    plot_transit_times(distances, Quantity(20, "m/s^2"), str(output_path))

    assert output_path.exists()


def test_plot_lorentz_factor(tmp_path):
    """Test that the Lorentz factor plot is created."""
    output_path = tmp_path / "lorentz_factor.png"

    plot_lorentz_factor(str(output_path), beta_max=0.99, n_points=50)

    assert output_path.exists()
    assert output_path.stat().st_size > 0
