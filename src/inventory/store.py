"""Product store — the single handle on the inventory database.

Usage:
    with InventoryStore.open(db_path) as store:
        product_id = store.insert(ProductDraft(name="Widget", quantity=3, price=9.99))
        for product in store.search_by_name("Wid"):
            print(product)
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Iterator

from src.common.database import get_connection, init_db
from src.common.errors import QueryFailed

from .models import Product, ProductDraft, SortCriterion

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, description, quantity, price"

# ORDER BY clauses cannot be parameterized; map criteria to fixed SQL
_ORDER_BY_SQL = {
    SortCriterion.NAME: "ORDER BY name, id",
    SortCriterion.PRICE: "ORDER BY price, id",
}


def _escape_like(text: str) -> str:
    """Escape LIKE wildcards so user text is matched literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class InventoryStore:
    """Record operations over the products table.

    Owns one SQLite connection. Write operations commit immediately after
    their single statement; read operations stream rows from the cursor.
    """

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    @classmethod
    def open(cls, db_path: str | Path | None = None) -> InventoryStore:
        """Open the database and ensure the products table exists.

        Raises:
            CannotOpenStorage: If the database cannot be opened.
            SchemaCreationFailed: If the table cannot be created.
        """
        conn = get_connection(db_path)
        try:
            init_db(conn)
        except Exception:
            conn.close()
            raise
        return cls(conn)

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()
        logger.debug("Database connection closed")

    def __enter__(self) -> InventoryStore:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False

    # --- Writes ---

    def insert(self, draft: ProductDraft) -> int:
        """Insert a product and return its engine-assigned id."""
        cur = self._execute_write(
            "INSERT INTO products (name, description, quantity, price) VALUES (?, ?, ?, ?)",
            (draft.name, draft.description, draft.quantity, draft.price),
            action="insert product",
        )
        logger.info("Inserted product %d (%s)", cur.lastrowid, draft.name)
        return cur.lastrowid

    def update(self, product_id: int, draft: ProductDraft) -> int:
        """Overwrite every field of a product.

        Returns:
            Number of rows changed. Zero means no product had that id,
            which is not an error.
        """
        cur = self._execute_write(
            "UPDATE products SET name = ?, description = ?, quantity = ?, price = ? WHERE id = ?",
            (draft.name, draft.description, draft.quantity, draft.price, product_id),
            action="update product",
        )
        logger.info("Updated product %d (%d row(s))", product_id, cur.rowcount)
        return cur.rowcount

    def delete(self, product_id: int) -> int:
        """Delete a product by id. Returns the number of rows removed."""
        cur = self._execute_write(
            "DELETE FROM products WHERE id = ?",
            (product_id,),
            action="delete product",
        )
        logger.info("Deleted product %d (%d row(s))", product_id, cur.rowcount)
        return cur.rowcount

    # --- Reads ---

    def list_all(self) -> Iterator[Product]:
        """Yield every product in storage order."""
        return self._stream(f"SELECT {_COLUMNS} FROM products")

    def search_by_name(self, substring: str) -> Iterator[Product]:
        """Yield products whose name contains ``substring``.

        Matching uses SQLite's LIKE: case-insensitive for ASCII letters only.
        """
        return self._stream(
            f"SELECT {_COLUMNS} FROM products "
            "WHERE name LIKE '%' || ? || '%' ESCAPE '\\'",
            (_escape_like(substring),),
        )

    def search_by_price_range(self, min_price: float, max_price: float) -> Iterator[Product]:
        """Yield products priced within [min_price, max_price].

        An inverted range simply matches nothing.
        """
        return self._stream(
            f"SELECT {_COLUMNS} FROM products WHERE price BETWEEN ? AND ?",
            (min_price, max_price),
        )

    def list_sorted(self, criterion: SortCriterion | str) -> Iterator[Product]:
        """Yield every product in ascending order of ``criterion``.

        Raises:
            InvalidCriterion: Raised immediately, before any query runs.
        """
        if not isinstance(criterion, SortCriterion):
            criterion = SortCriterion.parse(criterion)
        return self._stream(f"SELECT {_COLUMNS} FROM products {_ORDER_BY_SQL[criterion]}")

    def count(self) -> int:
        """Number of stored products."""
        try:
            row = self._conn.execute("SELECT COUNT(*) FROM products").fetchone()
        except sqlite3.Error as e:
            raise QueryFailed(f"Failed to count products: {e}") from e
        return row[0]

    # --- Internals ---

    def _execute_write(self, sql: str, params: tuple, *, action: str) -> sqlite3.Cursor:
        try:
            cur = self._conn.execute(sql, params)
            self._conn.commit()
        except (sqlite3.Error, OverflowError) as e:
            raise QueryFailed(f"Failed to {action}: {e}") from e
        return cur

    def _stream(self, sql: str, params: tuple = ()) -> Iterator[Product]:
        # Execute eagerly so bad SQL fails at call time, then hand out rows lazily
        try:
            cur = self._conn.execute(sql, params)
        except (sqlite3.Error, OverflowError) as e:
            raise QueryFailed(f"Failed to query products: {e}") from e
        return self._iter_rows(cur)

    @staticmethod
    def _iter_rows(cur: sqlite3.Cursor) -> Iterator[Product]:
        try:
            for row in cur:
                yield Product.from_row(row)
        except sqlite3.Error as e:
            raise QueryFailed(f"Failed to read products: {e}") from e
        finally:
            cur.close()
