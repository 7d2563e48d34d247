"""
Validate a body/material catalog file and report any issues.

Usage:
    python scripts/validate_catalog.py configs/example_catalog.yaml
"""

import sys
from pathlib import Path

# Add src to path so the package imports without installation
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from spacefaring.config import Catalog


def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/validate_catalog.py <catalog.yaml>")
        sys.exit(1)

    catalog_path = sys.argv[1]

    print(f"Validating catalog: {catalog_path}")
    print("=" * 70)

    try:
        catalog = Catalog.from_yaml(catalog_path)
    except FileNotFoundError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"[ERROR] loading catalog: {e}")
        sys.exit(1)

    print(f"[OK] Catalog loaded: {len(catalog.bodies)} bodies, {len(catalog.materials)} materials")
    print()

    messages = catalog.validate()

    if not messages:
        print("[OK] All validation checks passed!")
        for body in catalog.bodies.values():
            print(f"  {body!r}")
        sys.exit(0)

    errors = [m for m in messages if m.startswith("ERROR")]
    warns = [m for m in messages if m.startswith("WARNING")]

    if errors:
        print(f"[ERROR] {len(errors)} ERROR(S) found:")
        for error in errors:
            print(f"  {error}")
        print()

    if warns:
        print(f"[WARN] {len(warns)} WARNING(S):")
        for warn in warns:
            print(f"  {warn}")
        print()

    if errors:
        print("Catalog has ERRORS; its bodies will fail in the orbital formulas.")
        sys.exit(1)
    else:
        print("Catalog has warnings but may be usable.")
        sys.exit(0)


if __name__ == '__main__':
    main()
