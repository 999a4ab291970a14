"""
Warehouse inventory: one keyed store for electronics, one for groceries.
Run: python warehouse.py
"""

import logging
from datetime import date, timedelta
from typing import Optional

from repositories import (
    DuplicateKeyError,
    InvalidQuantityError,
    KeyedRecordStore,
    RecordNotFoundError,
    StoreError,
)
from schemas.records import ElectronicItem, GroceryItem

logger = logging.getLogger(__name__)


class WarehouseManager:
    def __init__(self):
        self.electronics: KeyedRecordStore[ElectronicItem] = KeyedRecordStore()
        self.groceries: KeyedRecordStore[GroceryItem] = KeyedRecordStore()

    def seed_data(self, today: Optional[date] = None) -> None:
        today = today or date.today()
        self.electronics.insert(ElectronicItem(id=1, name="Laptop", quantity=10, brand="Dell", warranty_months=24))
        self.electronics.insert(ElectronicItem(id=2, name="Smartphone", quantity=15, brand="Samsung", warranty_months=12))
        self.groceries.insert(GroceryItem(id=101, name="Milk", quantity=20, expiry_date=today + timedelta(days=7)))
        self.groceries.insert(GroceryItem(id=102, name="Bread", quantity=50, expiry_date=today + timedelta(days=3)))

    @staticmethod
    def describe_all(repo: KeyedRecordStore) -> list[str]:
        return [item.describe() for item in repo.list_all()]

    @staticmethod
    def increase_stock(repo: KeyedRecordStore, item_id: int, amount: int):
        """Add *amount* to the current quantity. Returns the updated item."""
        item = repo.get(item_id)
        updated = repo.update_quantity(item_id, item.quantity + amount)
        logger.info("Stock increased for %s. New quantity: %d", updated.name, updated.quantity)
        return updated

    @staticmethod
    def remove_item(repo: KeyedRecordStore, item_id: int):
        removed = repo.remove(item_id)
        logger.info("Item with ID %d removed", item_id)
        return removed


def run_demo() -> WarehouseManager:
    manager = WarehouseManager()
    manager.seed_data()

    print("--- Grocery Items ---")
    for line in manager.describe_all(manager.groceries):
        print(line)

    print("\n--- Electronic Items ---")
    for line in manager.describe_all(manager.electronics):
        print(line)

    print("\n--- Testing Exceptions ---")
    try:
        manager.electronics.insert(ElectronicItem(id=1, name="Tablet", quantity=5, brand="Apple", warranty_months=12))
    except DuplicateKeyError as e:
        print(f"Exception: {e}")

    try:
        manager.remove_item(manager.groceries, 999)
    except RecordNotFoundError as e:
        print(f"Exception: {e}")

    try:
        manager.electronics.update_quantity(2, -5)
    except InvalidQuantityError as e:
        print(f"Exception: {e}")

    try:
        manager.increase_stock(manager.groceries, 101, 5)
        print(f"Stock increased for Milk. New quantity: {manager.groceries.get(101).quantity}")
    except StoreError as e:
        print(f"Error increasing stock: {e}")

    return manager


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_demo()
