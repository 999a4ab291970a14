"""
File-based persistence for store listings.
Each listing is one JSON array under the data directory, rewritten whole on
every save.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Generic, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .keyed_store import KeyedRecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ListingLoadError(Exception):
    """A listing file exists but cannot be read back as records."""


class FileStore:
    """JSON listings stored as {data_dir}/{name}.json."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def listing_path(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def _write(self, path: Path, data: list) -> None:
        with self._lock:
            tmp = path.with_suffix(".tmp")
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            tmp.replace(path)

    def save_listing(self, name: str, records: list[BaseModel]) -> Path:
        path = self.listing_path(name)
        self._write(path, [r.model_dump(mode="json") for r in records])
        return path

    def load_listing(self, name: str, model: Type[T]) -> Optional[list[T]]:
        """Return the stored records, or None when nothing was saved under *name*."""
        path = self.listing_path(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            return None
        except json.JSONDecodeError as e:
            raise ListingLoadError(f"{path} is not valid JSON: {e}") from e
        try:
            return TypeAdapter(list[model]).validate_python(raw)
        except ValidationError as e:
            raise ListingLoadError(f"{path} holds invalid records: {e}") from e


class InventoryLogger(Generic[T]):
    """A keyed store paired with one JSON listing file."""

    def __init__(self, file_store: FileStore, name: str, model: Type[T]):
        self.file_store = file_store
        self.name = name
        self.model = model
        self.records: KeyedRecordStore[T] = KeyedRecordStore()

    def add(self, item: T) -> None:
        self.records.insert(item)

    def get_all(self) -> list[T]:
        return self.records.list_all()

    def save_to_file(self) -> Path:
        path = self.file_store.save_listing(self.name, self.records.list_all())
        logger.info("Saved %d %s record(s) to %s", len(self.records), self.name, path)
        return path

    def load_from_file(self) -> bool:
        """Replace the in-memory records with the saved listing. False if nothing was saved."""
        items = self.file_store.load_listing(self.name, self.model)
        if items is None:
            logger.info("No saved %s listing at %s", self.name, self.file_store.listing_path(self.name))
            return False
        self.records.replace_all(items)
        logger.info("Loaded %d %s record(s)", len(items), self.name)
        return True
