"""
Punto Hogar Database Module

SQLite store for property listings.
"""

import sqlite3
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union
from contextlib import contextmanager
import logging

from puntohogar.core.exceptions import DatabaseError, InvalidPropertyError, PropertyNotFound
from puntohogar.core.filters import ListingFilter, compile_clauses
from puntohogar.core.models import PROPERTY_COLUMNS, Property

logger = logging.getLogger(__name__)

MEMORY_DB = ':memory:'


def _casefold(value: Optional[str]) -> Optional[str]:
    return value.casefold() if isinstance(value, str) else value


class PuntoHogarDatabase:
    """
    SQLite database manager for the listing catalog.

    Holds one connection for the life of the process. The connection is
    shared across request threads; the service only reads through it.
    Records are written by seeding and imports only.
    """

    def __init__(self, db_path: Union[str, Path]):
        """
        Open the database and create the schema if needed.

        Args:
            db_path: Path to SQLite database file, or ':memory:'
        """
        self.db_path = str(db_path)
        self._conn: Optional[sqlite3.Connection] = None
        if self.db_path != MEMORY_DB:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self.open()

    def open(self) -> None:
        """Open the shared connection and initialize the schema."""
        if self._conn is not None:
            return
        conn = sqlite3.connect(self.db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.create_function('casefold', 1, _casefold, deterministic=True)
        self._conn = conn
        self._init_database()

    def close(self) -> None:
        """Release the shared connection. Safe to call more than once."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info(f"Database connection closed ({self.db_path})")

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def __enter__(self) -> "PuntoHogarDatabase":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _init_database(self) -> None:
        """Create tables if they don't exist."""
        with self._get_connection() as conn:
            if self.db_path != MEMORY_DB:
                conn.execute("PRAGMA journal_mode = WAL")
            conn.execute("PRAGMA busy_timeout = 5000")
            conn.executescript(self._get_tables_schema())
            conn.commit()
            logger.info(f"Database initialized at {self.db_path}")

    @contextmanager
    def _get_connection(self):
        """Yield the shared connection."""
        if self._conn is None:
            raise DatabaseError(f"Database {self.db_path} is closed")
        try:
            yield self._conn
        except sqlite3.IntegrityError:
            raise
        except sqlite3.Error as e:
            raise DatabaseError(str(e)) from e

    def _get_tables_schema(self) -> str:
        """Return the CREATE TABLE statements."""
        return '''
        CREATE TABLE IF NOT EXISTS properties (
            id INTEGER PRIMARY KEY AUTOINCREMENT,   -- never reused
            title TEXT NOT NULL,
            description TEXT,
            price REAL NOT NULL CHECK(price >= 0),
            location TEXT NOT NULL,
            type TEXT NOT NULL CHECK(type IN ('sale', 'rental')),
            bedrooms INTEGER CHECK(bedrooms >= 0),
            bathrooms INTEGER CHECK(bathrooms >= 0),
            area INTEGER CHECK(area >= 0),          -- square meters
            image_url TEXT,
            category TEXT NOT NULL CHECK(category IN ('house', 'apartment', 'land', 'commercial'))
        );
        '''

    # ==========================================
    # PROPERTY OPERATIONS
    # ==========================================

    def list_properties(self, filters: Optional[ListingFilter] = None) -> List[Dict[str, Any]]:
        """
        Get properties matching every criterion in the filter.

        Rows come back in store order (no ORDER BY); callers must not rely
        on it being stable. An empty result is not an error.
        """
        where_clause, params = compile_clauses(filters.clauses() if filters else [])
        query = f"SELECT {', '.join(PROPERTY_COLUMNS)} FROM properties {where_clause}".rstrip()

        with self._get_connection() as conn:
            rows = conn.execute(query, params).fetchall()
            return [dict(row) for row in rows]

    def get_property(self, property_id: Any) -> Dict[str, Any]:
        """
        Get property by ID.

        Raises:
            PropertyNotFound: no row has that identifier
        """
        with self._get_connection() as conn:
            try:
                row = conn.execute(
                    f"SELECT {', '.join(PROPERTY_COLUMNS)} FROM properties WHERE id = ?",
                    (property_id,)
                ).fetchone()
            except OverflowError:
                # Beyond SQLite's integer range, so no row can have it
                row = None
        if row is None:
            raise PropertyNotFound(property_id)
        return dict(row)

    def insert_property(self, prop: Property) -> int:
        """
        Insert a property and return its new ID.

        Any id already set on the object is ignored; the store assigns it.

        Raises:
            InvalidPropertyError: the row violates a table constraint or holds
                a value SQLite can't store
        """
        data = prop.to_dict()
        data.pop('id', None)
        columns = ', '.join(data.keys())
        placeholders = ', '.join(['?' for _ in data])

        with self._get_connection() as conn:
            try:
                cursor = conn.execute(
                    f"INSERT INTO properties ({columns}) VALUES ({placeholders})",
                    list(data.values())
                )
                conn.commit()
            except (sqlite3.IntegrityError, sqlite3.InterfaceError,
                    sqlite3.ProgrammingError, OverflowError) as e:
                conn.rollback()
                raise InvalidPropertyError(f"Rejected property {prop.title!r}: {e}") from e
        return cursor.lastrowid

    def count_properties(self) -> int:
        """Count all stored properties."""
        with self._get_connection() as conn:
            return conn.execute("SELECT COUNT(*) FROM properties").fetchone()[0]

    def seed_if_empty(self, records: Iterable[Property]) -> int:
        """
        Insert records only when the table has no rows.

        Returns:
            Number of records inserted (0 if the table was already populated)
        """
        if self.count_properties() > 0:
            return 0
        inserted = 0
        for record in records:
            self.insert_property(record)
            inserted += 1
        logger.info(f"Seeded {inserted} properties")
        return inserted
