"""
Inventory log: seed items, save them as JSON, reload into a fresh logger.
Run: python inventory_log.py
"""

import logging
from datetime import datetime
from typing import Optional

from config import get_settings
from repositories import FileStore, InventoryLogger
from schemas.records import InventoryItem

logger = logging.getLogger(__name__)

LISTING_NAME = "inventory"

SAMPLE_ITEMS = [
    ("Laptop", 10),
    ("Mouse", 50),
    ("Keyboard", 30),
    ("Monitor", 15),
    ("Printer", 5),
]


def new_logger(file_store: FileStore) -> InventoryLogger[InventoryItem]:
    return InventoryLogger(file_store, LISTING_NAME, InventoryItem)


def seed_sample_data(inventory: InventoryLogger[InventoryItem], now: Optional[datetime] = None) -> None:
    now = now or datetime.now()
    for i, (name, qty) in enumerate(SAMPLE_ITEMS, start=1):
        inventory.add(InventoryItem(id=i, name=name, quantity=qty, date_added=now))


def run_demo(file_store: Optional[FileStore] = None) -> list[InventoryItem]:
    file_store = file_store or FileStore(get_settings().STOCKROOM_DATA_DIR)
    inventory = new_logger(file_store)
    seed_sample_data(inventory)
    path = inventory.save_to_file()
    print(f"Data saved to {path}")

    inventory = new_logger(file_store)
    if inventory.load_from_file():
        print(f"Data loaded from {path}")
    else:
        print("No file found to load data.")

    items = inventory.get_all()
    print("\n--- Inventory Items ---")
    for item in items:
        print(f"ID: {item.id}, Name: {item.name}, Qty: {item.quantity}, Added: {item.date_added:%Y-%m-%d %H:%M:%S}")
    return items


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_demo()
