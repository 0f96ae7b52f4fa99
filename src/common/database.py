"""SQLite database utilities for the inventory manager.

Provides connection management and table initialization.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from .config import settings
from .errors import CannotOpenStorage, SchemaCreationFailed

logger = logging.getLogger(__name__)

# SQL for creating the products table
_CREATE_TABLES_SQL = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY,
    name TEXT,
    description TEXT,
    quantity INTEGER,
    price REAL
);

CREATE INDEX IF NOT EXISTS idx_products_name ON products(name);
CREATE INDEX IF NOT EXISTS idx_products_price ON products(price);
"""


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Get a SQLite connection with row factory enabled.

    Raises:
        CannotOpenStorage: If the file or its directory cannot be opened.
    """
    path = Path(db_path) if db_path else settings.database.db_abs_path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(path))
        # sqlite3 opens lazily; touch the file so a bad path fails here
        conn.execute("PRAGMA schema_version").fetchone()
    except (sqlite3.Error, OSError) as e:
        raise CannotOpenStorage(f"Cannot open database {path}: {e}") from e
    conn.row_factory = sqlite3.Row
    logger.debug("Opened database at %s", path)
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create the products table if it doesn't exist (idempotent).

    Raises:
        SchemaCreationFailed: If the DDL cannot be executed.
    """
    try:
        conn.executescript(_CREATE_TABLES_SQL)
        conn.commit()
    except sqlite3.Error as e:
        raise SchemaCreationFailed(f"Cannot create products table: {e}") from e
    logger.debug("Database schema initialized")
