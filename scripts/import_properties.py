#!/usr/bin/env python3
"""
Listing Importer

Imports property listings from a JSON or CSV export into the catalog.

Usage:
    python scripts/import_properties.py --file listings.csv
    python scripts/import_properties.py --file listings.json --dry-run

CSV columns / JSON keys:
    title, description, price, location, type, bedrooms, bathrooms,
    area, image_url, category

type accepts sale/rental (or venta/alquiler); category accepts
house/apartment/land/commercial (or casa/apartamento/terreno/comercial).
"""

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(REPO_ROOT))

from puntohogar.core.database import PuntoHogarDatabase
from puntohogar.core.exceptions import InvalidPropertyError
from puntohogar.core.importer import import_properties, load_properties
from puntohogar.utils.config import get_db_path, load_config
from puntohogar.utils.logging import setup_logging


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Import property listings')
    parser.add_argument('--file', required=True, help='JSON or CSV file to import')
    parser.add_argument('--db', help='Database path (default: from config)')
    parser.add_argument('--dry-run', action='store_true', help='Validate without writing')
    args = parser.parse_args(argv)

    config = load_config()
    logger = setup_logging(level=config.get('logging', {}).get('level', 'INFO'))

    try:
        records = load_properties(args.file)
    except (OSError, ValueError, InvalidPropertyError) as e:
        logger.error(f"Could not read {args.file}: {e}")
        return 1

    with PuntoHogarDatabase(args.db or get_db_path(config)) as db:
        result = import_properties(db, records, dry_run=args.dry_run)

    for error in result.errors:
        print(f"  row {error['index'] + 1}: {error['error']}")
    print(f"{'Would import' if args.dry_run else 'Imported'} {result.inserted} properties, "
          f"{result.failed} rejected")

    return 0 if result.ok else 2


if __name__ == "__main__":
    sys.exit(main())
