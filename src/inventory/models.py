"""Data models for the inventory storage layer."""

from __future__ import annotations

import sqlite3
from enum import Enum

from pydantic import BaseModel, Field

from src.common.errors import InvalidCriterion

# SQLite INTEGER is a signed 64-bit value
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class SortCriterion(str, Enum):
    """Fields a product listing can be ordered by."""
    NAME = "name"
    PRICE = "price"

    @classmethod
    def parse(cls, text: str) -> SortCriterion:
        """Parse user text into a criterion.

        Accepts the legacy Spanish field names as aliases.

        Raises:
            InvalidCriterion: If the text names no known field.
        """
        key = text.strip().lower()
        key = _CRITERION_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidCriterion(text) from None


_CRITERION_ALIASES = {
    "nombre": "name",
    "precio": "price",
}


class ProductDraft(BaseModel):
    """User-supplied product fields, used for insert and update."""
    name: str = ""
    description: str = ""
    quantity: int = Field(default=0, ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)
    price: float = Field(default=0.0, allow_inf_nan=False)


class Product(ProductDraft):
    """A stored product row."""
    id: int

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> Product:
        # NULL columns come back as None; treat them as empty values
        return cls(
            id=row["id"],
            name=row["name"] or "",
            description=row["description"] or "",
            quantity=row["quantity"] or 0,
            price=row["price"] or 0.0,
        )

