"""Error taxonomy for the inventory manager.

Storage and query failures are raised as tagged exceptions and turned into
console messages only by the menu and the CLI entry point.
"""

from __future__ import annotations


class InventoryError(Exception):
    """Base class for inventory errors."""

    kind = "inventory_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CannotOpenStorage(InventoryError):
    """Raised when the database file cannot be opened."""

    kind = "cannot_open_storage"


class SchemaCreationFailed(InventoryError):
    """Raised when the products table cannot be created."""

    kind = "schema_creation_failed"


class QueryFailed(InventoryError):
    """Raised when a record operation fails inside the engine."""

    kind = "query_failed"


class InvalidCriterion(InventoryError):
    """Raised when a listing is requested with an unknown sort field."""

    kind = "invalid_criterion"

    def __init__(self, criterion: str):
        super().__init__(f"Invalid sort criterion: {criterion!r} (use 'name' or 'price')")
        self.criterion = criterion
