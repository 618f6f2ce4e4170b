#!/usr/bin/env python3
"""
Initialize Punto Hogar Database

Creates the SQLite database with the properties table and, unless told
otherwise, loads the sample catalog into an empty table.

Usage:
    python scripts/init_database.py
    python scripts/init_database.py --no-seed

Run from the repository root.
"""

import argparse
import sys
from pathlib import Path

# Determine repo root (parent of scripts/)
REPO_ROOT = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(REPO_ROOT))

from puntohogar.core.database import PuntoHogarDatabase
from puntohogar.core.seed import sample_properties
from puntohogar.utils.config import get_db_path, load_config
from puntohogar.utils.logging import setup_logging


def main(argv=None) -> int:
    """Initialize the database."""
    parser = argparse.ArgumentParser(description='Create the Punto Hogar listings database')
    parser.add_argument('--db', help='Database path (default: from config)')
    parser.add_argument('--no-seed', action='store_true', help='Do not load the sample catalog')
    args = parser.parse_args(argv)

    config = load_config()
    log_config = config.get('logging', {})
    logger = setup_logging(
        level=log_config.get('level', 'INFO'),
        log_file=log_config.get('file')
    )

    db_path = args.db or get_db_path(config)
    logger.info(f"Initializing database at: {db_path}")

    # Tables are created when the store opens
    with PuntoHogarDatabase(db_path) as db:
        seeded = 0 if args.no_seed else db.seed_if_empty(sample_properties())
        total = db.count_properties()

    logger.info(f"Database ready: {total} properties ({seeded} seeded)")
    print(f"✓ Database ready: {Path(db_path).absolute()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
