"""
Listing Importer

Loads property records from JSON or CSV exports and writes them to the
store. Rows that fail validation or the table constraints are reported,
not silently fixed.
"""

import csv
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from puntohogar.core.database import PuntoHogarDatabase
from puntohogar.core.exceptions import InvalidPropertyError
from puntohogar.core.models import Property

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = ('.json', '.csv')


@dataclass
class ImportResult:
    """Outcome of an import run."""
    inserted: int = 0
    failed: int = 0
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed == 0


def _read_rows(path: Path) -> List[Dict[str, Any]]:
    suffix = path.suffix.lower()
    if suffix == '.json':
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if isinstance(data, dict) and 'properties' in data:
            data = data['properties']
        if not isinstance(data, list):
            raise InvalidPropertyError(f"{path}: expected a JSON array of objects")
        return data
    if suffix == '.csv':
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return list(csv.DictReader(f))
    raise InvalidPropertyError(
        f"{path}: unsupported file type (expected one of {', '.join(SUPPORTED_SUFFIXES)})"
    )


def load_properties(path: Union[str, Path]) -> List[Union[Property, InvalidPropertyError]]:
    """
    Parse an export file into Property objects.

    Rows that cannot be parsed come back as InvalidPropertyError instances in
    their original position so the caller can report them by row number.
    """
    rows = _read_rows(Path(path))
    parsed: List[Union[Property, InvalidPropertyError]] = []
    for row in rows:
        if not isinstance(row, dict):
            parsed.append(InvalidPropertyError(f"Expected an object, got {type(row).__name__}"))
            continue
        try:
            parsed.append(Property.from_dict(row))
        except InvalidPropertyError as e:
            parsed.append(e)
    return parsed


def import_properties(
    db: PuntoHogarDatabase,
    records: List[Union[Property, InvalidPropertyError]],
    dry_run: bool = False
) -> ImportResult:
    """
    Insert parsed records into the store.

    Args:
        db: Open store
        records: Output of load_properties()
        dry_run: Validate only; nothing is written

    Returns:
        ImportResult with per-row errors (index is zero-based)
    """
    result = ImportResult()
    for i, record in enumerate(records):
        if isinstance(record, InvalidPropertyError):
            result.failed += 1
            result.errors.append({'index': i, 'error': str(record)})
            continue
        if dry_run:
            result.inserted += 1
            continue
        try:
            db.insert_property(record)
            result.inserted += 1
        except InvalidPropertyError as e:
            result.failed += 1
            result.errors.append({'index': i, 'error': str(e)})

    logger.info(
        f"Import {'(dry run) ' if dry_run else ''}finished: "
        f"{result.inserted} inserted, {result.failed} failed"
    )
    return result
