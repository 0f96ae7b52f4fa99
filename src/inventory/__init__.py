"""
Inventory: product records in an embedded SQLite database.

Modules:
- models: Product, ProductDraft and SortCriterion
- store: InventoryStore, the database handle and record operations
- menu: interactive numbered menu over a store
- main: CLI entry point
"""

from .models import Product, ProductDraft, SortCriterion
from .store import InventoryStore

__all__ = ["InventoryStore", "Product", "ProductDraft", "SortCriterion"]
