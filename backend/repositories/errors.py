"""Errors raised by the keyed record store."""

from typing import Optional


class StoreError(Exception):
    """Base class for record store failures. Always recoverable by the caller."""

    def __init__(self, message: str, record_id: Optional[int] = None):
        super().__init__(message)
        self.record_id = record_id


class DuplicateKeyError(StoreError):
    def __init__(self, record_id: int):
        super().__init__(f"Item with ID {record_id} already exists.", record_id)


class RecordNotFoundError(StoreError):
    def __init__(self, record_id: int):
        super().__init__(f"Item with ID {record_id} not found.", record_id)


class InvalidQuantityError(StoreError):
    def __init__(self, quantity: int, record_id: Optional[int] = None):
        super().__init__("Quantity cannot be negative.", record_id)
        self.quantity = quantity
