"""
Plots of relativistic travel curves.

- Brachistochrone transit time (coordinate and proper) vs distance
- Lorentz factor vs speed

All plots are saved as PNG files with publication-quality settings (300 DPI).
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for saving files
import matplotlib.pyplot as plt

from spacefaring import constants as const
from spacefaring.relativity import (
    lorentz_factor,
    proper_relativistic_brachistochrone_transit_time,
    relativistic_brachistochrone_transit_time,
)
from spacefaring.units import Quantity


# Set publication-quality plot defaults
plt.rcParams['figure.dpi'] = 300
plt.rcParams['savefig.dpi'] = 300
plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10


def plot_transit_times(distances: Quantity, acceleration: Quantity, output_path: str):
    """
    Plot brachistochrone transit times against distance.

    Args:
        distances: Array-valued Quantity of trip distances
        acceleration: Constant proper acceleration of the ship
        output_path: Path to save PNG plot

    Creates a log-log plot with:
    - X-axis: Distance (ly)
    - Y-axis: Transit time (yr), coordinate frame and shipboard
    """
    distances_ly = distances.to("ly").value
    coordinate_yr = relativistic_brachistochrone_transit_time(distances, acceleration).to("yr").value
    proper_yr = proper_relativistic_brachistochrone_transit_time(distances, acceleration).to("yr").value

    fig, ax = plt.subplots(figsize=(10, 6))

    ax.loglog(distances_ly, coordinate_yr, color='blue', label='Coordinate time')
    ax.loglog(distances_ly, proper_yr, color='red', linestyle='--', label='Proper (shipboard) time')

    accel_g = float(acceleration / const.g_n)
    ax.set_xlabel('Distance (ly)')
    ax.set_ylabel('Transit Time (yr)')
    ax.set_title(f'Brachistochrone Transit at {accel_g:.2g} g')
    ax.legend()
    ax.grid(True, which='both', alpha=0.3)

    # Save
    plt.tight_layout()
    plt.savefig(output_path, dpi=300, bbox_inches='tight')
    plt.close(fig)


def plot_lorentz_factor(output_path: str, beta_max: float = 0.999, n_points: int = 500):
    """
    Plot the Lorentz factor γ against β = v/c.

    Args:
        output_path: Path to save PNG plot
        beta_max: Largest β plotted (must be < 1)
        n_points: Number of samples
    """
    betas = np.linspace(0.0, beta_max, n_points)
    gammas = lorentz_factor(Quantity(betas, "c"))

    fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(betas, gammas, color='blue')

    ax.set_xlabel('Speed (fraction of c)')
    ax.set_ylabel('Lorentz Factor γ')
    ax.set_title('Lorentz Factor vs Speed')
    ax.set_yscale('log')
    ax.grid(True, alpha=0.3)

    # Save
    plt.tight_layout()
    plt.savefig(output_path, dpi=300, bbox_inches='tight')
    plt.close(fig)
