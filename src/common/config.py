"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
DATA_DIR = PROJECT_ROOT / "data"

DB_FILENAME = "inventory.db"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class DatabaseSettings(BaseModel):
    """Database file settings."""
    db_path: str = str(DATA_DIR / DB_FILENAME)

    @property
    def db_abs_path(self) -> Path:
        """Resolve database path relative to project root."""
        p = Path(self.db_path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p


class LoggingSettings(BaseModel):
    """Console logging settings."""
    level: str = "WARNING"


class Settings(BaseModel):
    """Top-level application settings."""
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults.

        INVENTORY_DB_PATH and INVENTORY_LOG_LEVEL override the file values.
        """
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

        if db_path := os.getenv("INVENTORY_DB_PATH"):
            data.setdefault("database", {})["db_path"] = db_path
        if level := os.getenv("INVENTORY_LOG_LEVEL"):
            data.setdefault("logging", {})["level"] = level

        return cls(**data)


# Singleton settings instance
settings = Settings.load()
