#!/usr/bin/env python3
"""
check_catalog.py - Validate a course catalog before publishing it.

Loads the catalog the same way the app does, then reports per-year counts
and prerequisite problems (unknown ids, self-references, cycles).

Usage:
  python scripts/check_catalog.py
  python scripts/check_catalog.py --catalog https://example.org/materias.json
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from correlativas.config import load_settings
from correlativas.tracker import CatalogLoadError, find_catalog_issues, load_catalog

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Validate a course catalog"
    )
    parser.add_argument(
        "--catalog",
        default=settings.catalog_source,
        help=f"Catalog path or URL (default: {settings.catalog_source})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.request_timeout,
        help="HTTP timeout in seconds"
    )
    args = parser.parse_args(argv)

    try:
        catalog = load_catalog(args.catalog, timeout=args.timeout)
    except CatalogLoadError as e:
        logger.error(f"Catalog failed to load: {e}")
        return 1

    for year, courses in catalog.by_year().items():
        logger.info(f"  Year {year}: {len(courses)} courses")

    issues = find_catalog_issues(catalog)
    if issues:
        logger.warning(f"Found {len(issues)} catalog issues:")
        for issue in issues:
            logger.warning(f"  - {issue}")
        return 1

    logger.info("  All catalog checks passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
