"""FastAPI dependencies and require-helpers for routes."""

from typing import Annotated

from fastapi import Depends, HTTPException

import store
from repositories import KeyedRecordStore


def get_store():
    """Return the store facade. Use in Depends(); tests may override it."""
    return store


def require_collection(
    name: str,
    store_instance: Annotated[object, Depends(get_store)] = None,
) -> KeyedRecordStore:
    """Look up a keyed store by name or raise 404."""
    s = store_instance or store
    records = s.collection(name)
    if records is None:
        raise HTTPException(404, f"Collection '{name}' not found")
    return records
