"""Interactive numbered menu over an InventoryStore.

The menu is the only layer that turns errors into console messages. Input
and output are injectable so the loop can be driven from tests.
"""

from __future__ import annotations

import logging
import math
import sys
from enum import IntEnum
from typing import Callable, Iterator, TextIO

from src.common.errors import InvalidCriterion, QueryFailed

from .models import SQLITE_INT_MAX, SQLITE_INT_MIN, Product, ProductDraft, SortCriterion
from .store import InventoryStore

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]


class MenuOption(IntEnum):
    """Numbered menu entries."""
    ADD = 1
    UPDATE = 2
    DELETE = 3
    LIST = 4
    SEARCH_NAME = 5
    SEARCH_PRICE = 6
    LIST_SORTED = 7
    EXIT = 8


MENU_TEXT = """
Select an option:
1. Add product
2. Update product
3. Delete product
4. List products
5. Search product by name
6. Search products by price range
7. List products sorted
8. Exit"""

INVALID_OPTION_MSG = "Invalid option, please try again."
INVALID_NUMBER_MSG = "Invalid number, please try again."


def parse_int(text: str) -> int:
    """Parse an integer that fits in a SQLite INTEGER column."""
    value = int(text)
    if not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        raise ValueError(f"integer out of range: {text}")
    return value


def parse_float(text: str) -> float:
    """Parse a finite float; nan and inf are rejected."""
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite number: {text}")
    return value


def format_product(product: Product) -> str:
    """Render a product as a single console line."""
    return (
        f"ID: {product.id}, Name: {product.name}, Description: {product.description}, "
        f"Quantity: {product.quantity}, Price: {product.price:g}"
    )


class InventoryMenu:
    """Menu loop: await a choice, collect its fields, run it, repeat."""

    def __init__(
        self,
        store: InventoryStore,
        input_fn: InputFn | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        self._store = store
        self._input = input_fn or input
        self._out = out or sys.stdout
        self._err = err or sys.stderr
        self._handlers: dict[MenuOption, Callable[[], None]] = {
            MenuOption.ADD: self._add,
            MenuOption.UPDATE: self._update,
            MenuOption.DELETE: self._delete,
            MenuOption.LIST: self._list,
            MenuOption.SEARCH_NAME: self._search_name,
            MenuOption.SEARCH_PRICE: self._search_price,
            MenuOption.LIST_SORTED: self._list_sorted,
        }

    def run(self) -> None:
        """Run until Exit is chosen or input ends."""
        try:
            while True:
                self._print(MENU_TEXT)
                option = self._parse_option(self._input("Option: "))
                if option is None:
                    self._print(INVALID_OPTION_MSG)
                    continue
                if option is MenuOption.EXIT:
                    break
                self.dispatch(option)
        except (EOFError, KeyboardInterrupt):
            self._print("")
        logger.debug("Menu loop finished")

    def dispatch(self, option: MenuOption) -> None:
        """Collect input for one operation and run it.

        Query failures are reported and swallowed so the loop continues.
        """
        try:
            self._handlers[option]()
        except QueryFailed as e:
            logger.error("%s", e.message)
            print(f"Error: {e.message}", file=self._err)

    @staticmethod
    def _parse_option(text: str) -> MenuOption | None:
        try:
            return MenuOption(int(text.strip()))
        except ValueError:
            return None

    # --- Operations ---

    def _add(self) -> None:
        draft = self._prompt_draft(
            "Product name: ", "Product description: ", "Quantity: ", "Price: "
        )
        product_id = self._store.insert(draft)
        self._print(f"Product added successfully (ID {product_id}).")

    def _update(self) -> None:
        product_id = self._prompt_int("ID of the product to update: ")
        draft = self._prompt_draft(
            "New product name: ", "New product description: ", "New quantity: ", "New price: "
        )
        changed = self._store.update(product_id, draft)
        self._print("Product updated successfully.")
        if not changed:
            self._print(f"No product with id {product_id}.")

    def _delete(self) -> None:
        product_id = self._prompt_int("ID of the product to delete: ")
        removed = self._store.delete(product_id)
        self._print("Product deleted successfully.")
        if not removed:
            self._print(f"No product with id {product_id}.")

    def _list(self) -> None:
        self._print_products(self._store.list_all(), "No products in inventory.")

    def _search_name(self) -> None:
        substring = self._input("Enter the product name: ")
        self._print_products(
            self._store.search_by_name(substring), "No products found with that name."
        )

    def _search_price(self) -> None:
        min_price = self._prompt_float("Enter the minimum price: ")
        max_price = self._prompt_float("Enter the maximum price: ")
        self._print_products(
            self._store.search_by_price_range(min_price, max_price),
            "No products found in that price range.",
        )

    def _list_sorted(self) -> None:
        text = self._input("Sort by? (name/price): ")
        try:
            criterion = SortCriterion.parse(text)
        except InvalidCriterion as e:
            self._print(e.message)
            return
        self._print_products(self._store.list_sorted(criterion), "No products in inventory.")

    # --- Input / output helpers ---

    def _prompt_draft(self, name_prompt: str, desc_prompt: str, qty_prompt: str, price_prompt: str) -> ProductDraft:
        return ProductDraft(
            name=self._input(name_prompt),
            description=self._input(desc_prompt),
            quantity=self._prompt_int(qty_prompt),
            price=self._prompt_float(price_prompt),
        )

    def _prompt_int(self, prompt: str) -> int:
        return self._prompt_number(prompt, parse_int)

    def _prompt_float(self, prompt: str) -> float:
        return self._prompt_number(prompt, parse_float)

    def _prompt_number(self, prompt: str, parse: Callable[[str], int | float]):
        while True:
            text = self._input(prompt).strip()
            try:
                return parse(text)
            except ValueError:
                self._print(INVALID_NUMBER_MSG)

    def _print_products(self, products: Iterator[Product], empty_msg: str) -> None:
        found = False
        for product in products:
            found = True
            self._print(format_product(product))
        if not found:
            self._print(empty_msg)

    def _print(self, line: str) -> None:
        print(line, file=self._out)
