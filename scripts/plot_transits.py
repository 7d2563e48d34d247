"""
Plot brachistochrone transit times and the Lorentz factor curve.

Usage:
    python scripts/plot_transits.py --acceleration 1 --output-dir plots
"""

import sys
import argparse
from pathlib import Path

import numpy as np

# Add src to path so the package imports without installation
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from spacefaring.units import Quantity
from spacefaring.visualization import plot_lorentz_factor, plot_transit_times


def main():
    parser = argparse.ArgumentParser(
        description='Plot relativistic travel curves'
    )
    parser.add_argument(
        '--acceleration',
        type=float,
        default=1.0,
        help='Ship proper acceleration in standard gravities (default: 1 g)'
    )
    parser.add_argument(
        '--max-distance',
        type=float,
        default=1.0e5,
        help='Largest trip distance in light-years (default: 1e5)'
    )
    parser.add_argument(
        '--output-dir',
        type=str,
        default='plots',
        help='Directory for PNG files'
    )
    args = parser.parse_args()

    if args.acceleration <= 0:
        parser.error("--acceleration must be positive")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    distances = Quantity(np.logspace(-3, np.log10(args.max_distance), 200), "ly")
    acceleration = Quantity(args.acceleration, "g0")

    print("Generating plots...")
    plot_transit_times(distances, acceleration, str(output_dir / 'transit_times.png'))
    print(f"  Saved {output_dir / 'transit_times.png'}")
    plot_lorentz_factor(str(output_dir / 'lorentz_factor.png'))
    print(f"  Saved {output_dir / 'lorentz_factor.png'}")


if __name__ == '__main__':
    main()
