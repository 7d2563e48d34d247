"""
Pytest configuration for the spacefaring tests.

This file ensures the spacefaring package is importable from tests without
installation.
"""

import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))
