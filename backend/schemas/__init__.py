"""Pydantic schemas for records and API requests."""

from .records import ElectronicItem, GroceryItem, InventoryItem, Student, Transaction
from .requests import QuantityUpdate, StockIncrease, TransactionCreate

__all__ = [
    "ElectronicItem",
    "GroceryItem",
    "InventoryItem",
    "Student",
    "Transaction",
    "QuantityUpdate",
    "StockIncrease",
    "TransactionCreate",
]
