"""Shared test fixtures for the inventory manager."""

import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.inventory.models import ProductDraft
from src.inventory.store import InventoryStore


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def temp_db(tmp_path) -> Path:
    """Path to a temporary SQLite database file (not yet created)."""
    return tmp_path / "test_inventory.db"


@pytest.fixture
def store(temp_db):
    """Provide an open InventoryStore on temp_db."""
    s = InventoryStore.open(temp_db)
    yield s
    s.close()


@pytest.fixture
def sample_drafts() -> list[ProductDraft]:
    """Three products with distinct names and prices."""
    return [
        ProductDraft(name="Wireless Mouse", description="2.4GHz", quantity=12, price=19.99),
        ProductDraft(name="Desk Lamp", description="LED", quantity=8, price=34.5),
        ProductDraft(name="Backpack", description="", quantity=7, price=45.0),
    ]


class ScriptedInput:
    """Input callable that replays answers and records prompts."""

    def __init__(self, answers: list[str]):
        self._answers = iter(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None


@pytest.fixture
def scripted_input():
    """Factory for ScriptedInput instances."""
    return ScriptedInput
