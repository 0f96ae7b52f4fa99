"""CLI entry point for the inventory manager.

Usage:
    python -m src.inventory.main
    python -m src.inventory.main --db-path data/other.db --log-level INFO
"""

from __future__ import annotations

import argparse
import logging
import sys

from src.common.config import settings
from src.common.errors import CannotOpenStorage, SchemaCreationFailed
from src.common.logging import setup_logging

from .menu import InventoryMenu
from .store import InventoryStore

# Named explicitly: under `python -m` __name__ is "__main__", outside the "src" logger tree
logger = logging.getLogger("src.inventory.main")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inventory Manager — interactive product menu")
    parser.add_argument(
        "--db-path",
        type=str,
        default=None,
        help=f"SQLite database file (default: {settings.database.db_path})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.logging.level,
        help="Logging level for stderr output (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    db_path = args.db_path or settings.database.db_abs_path

    try:
        store = InventoryStore.open(db_path)
    except (CannotOpenStorage, SchemaCreationFailed) as e:
        logger.error("%s", e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    with store:
        logger.info("Inventory opened at %s with %d product(s)", db_path, store.count())
        InventoryMenu(store).run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
