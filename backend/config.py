"""
Stockroom backend configuration.
Single source of truth for environment and app settings.
"""

import os
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


def _flag(name: str, default: bool) -> bool:
    raw = (os.environ.get(name) or "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Stockroom API"
    APP_VERSION: str = "1.0.0"
    ALLOWED_ORIGINS: list[str]

    # Storage: JSON listings are written under this directory
    STOCKROOM_DATA_DIR: Path
    # Load sample records into the in-memory stores on startup
    STOCKROOM_SEED: bool = True

    # Finance demo account
    SAVINGS_ACCOUNT_NUMBER: str = "123456"
    SAVINGS_OPENING_BALANCE: Decimal = Decimal("1000")

    def __init__(self):
        origins = os.environ.get("ALLOWED_ORIGINS", "http://localhost:3000")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        self.APP_VERSION = (os.environ.get("APP_VERSION") or "1.0.0").strip()
        self.STOCKROOM_DATA_DIR = Path(os.environ.get("STOCKROOM_DATA_DIR", "data"))
        self.STOCKROOM_SEED = _flag("STOCKROOM_SEED", True)
        self.SAVINGS_ACCOUNT_NUMBER = (os.environ.get("SAVINGS_ACCOUNT_NUMBER") or "123456").strip()
        try:
            self.SAVINGS_OPENING_BALANCE = Decimal(os.environ.get("SAVINGS_OPENING_BALANCE") or "1000")
        except InvalidOperation:
            self.SAVINGS_OPENING_BALANCE = Decimal("1000")
