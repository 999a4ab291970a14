"""Persistence layer: keyed in-memory stores and JSON listing files."""

from .errors import DuplicateKeyError, InvalidQuantityError, RecordNotFoundError, StoreError
from .file_store import FileStore, InventoryLogger, ListingLoadError
from .keyed_store import KeyedRecordStore

__all__ = [
    "DuplicateKeyError",
    "FileStore",
    "InvalidQuantityError",
    "InventoryLogger",
    "KeyedRecordStore",
    "ListingLoadError",
    "RecordNotFoundError",
    "StoreError",
]
