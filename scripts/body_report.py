"""
Print (or save) a summary report for a celestial body.

Usage:
    python scripts/body_report.py moon
    python scripts/body_report.py ceres --catalog configs/example_catalog.yaml \
        --settings configs/settings.yaml --output ceres.txt
"""

import sys
import argparse
import logging
from pathlib import Path

# Add src to path so the package imports without installation
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from spacefaring.config import Catalog, Settings, configure_logging
from spacefaring.errors import SpacefaringError
from spacefaring.report import format_body_report, summarize_body

logger = logging.getLogger("body_report")


def main():
    parser = argparse.ArgumentParser(
        description='Summarize gravity, orbit and radiation figures for a body'
    )
    parser.add_argument(
        'body',
        type=str,
        help='Body name (built-in solar system or catalog entry)'
    )
    parser.add_argument(
        '--catalog',
        type=str,
        default=None,
        help='YAML catalog with additional bodies'
    )
    parser.add_argument(
        '--settings',
        type=str,
        default=None,
        help='YAML settings file (display units, precision, log level)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Write the report to this file instead of stdout'
    )
    args = parser.parse_args()

    try:
        settings = Settings.from_yaml(args.settings) if args.settings else Settings()
    except (FileNotFoundError, ValueError) as e:
        print(f"[ERROR] loading settings: {e}")
        sys.exit(1)
    configure_logging(settings.log_level)

    problems = settings.validate()
    for message in problems:
        logger.warning(message)
    if any(m.startswith("ERROR") for m in problems):
        sys.exit(1)

    try:
        catalog = Catalog.from_yaml(args.catalog) if args.catalog else Catalog()
    except (FileNotFoundError, ValueError) as e:
        logger.error("Cannot load catalog: %s", e)
        sys.exit(1)

    try:
        body = catalog.lookup(args.body)
    except KeyError as e:
        logger.error("%s", e)
        sys.exit(1)

    try:
        summary = summarize_body(body, settings)
    except SpacefaringError as e:
        logger.error("Cannot summarize %s: %s", body.name, e)
        sys.exit(1)

    report_text = format_body_report(summary, settings)

    if args.output:
        Path(args.output).write_text(report_text, encoding='utf-8')
        logger.info("Report saved to %s", args.output)
    else:
        print(report_text)


if __name__ == '__main__':
    main()
