# Common utilities and shared modules
"""
Shared components used by the inventory package:
- Project configuration
- Logging configuration
- Error taxonomy
- Database utilities
"""

from .config import settings, PROJECT_ROOT, DATA_DIR
from .database import get_connection, init_db
from .errors import (
    CannotOpenStorage,
    InvalidCriterion,
    InventoryError,
    QueryFailed,
    SchemaCreationFailed,
)
from .logging import setup_logging

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "DATA_DIR",
    "get_connection",
    "init_db",
    "setup_logging",
    "InventoryError",
    "CannotOpenStorage",
    "SchemaCreationFailed",
    "QueryFailed",
    "InvalidCriterion",
]
