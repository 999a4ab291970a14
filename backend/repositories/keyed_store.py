"""
In-memory keyed record store.
One store per record type; records are unique by integer id and kept in
insertion order. Callers only ever see copies, so the quantity field can
change only through update_quantity().
"""

from typing import Generic, Iterable, Iterator, TypeVar

from pydantic import BaseModel

from .errors import DuplicateKeyError, InvalidQuantityError, RecordNotFoundError

T = TypeVar("T", bound=BaseModel)


class KeyedRecordStore(Generic[T]):
    """Unique-by-id collection of pydantic records with validated mutation."""

    def __init__(self, quantity_field: str = "quantity"):
        self.quantity_field = quantity_field
        self._records: dict[int, T] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __iter__(self) -> Iterator[T]:
        return iter(self.list_all())

    def check_quantity(self, quantity, record_id=None) -> None:
        """Raise InvalidQuantityError for a negative value."""
        if quantity < 0:
            raise InvalidQuantityError(quantity, record_id)

    def insert(self, record: T) -> None:
        if record.id in self._records:
            raise DuplicateKeyError(record.id)
        self.check_quantity(getattr(record, self.quantity_field), record.id)
        self._records[record.id] = record.model_copy(deep=True)

    def get(self, record_id: int) -> T:
        try:
            return self._records[record_id].model_copy(deep=True)
        except KeyError:
            raise RecordNotFoundError(record_id) from None

    def remove(self, record_id: int) -> T:
        try:
            return self._records.pop(record_id)
        except KeyError:
            raise RecordNotFoundError(record_id) from None

    def update_quantity(self, record_id: int, new_quantity) -> T:
        """Replace the quantity field only. Negative values fail even for unknown ids."""
        self.check_quantity(new_quantity, record_id)
        if record_id not in self._records:
            raise RecordNotFoundError(record_id)
        updated = self._records[record_id].model_copy(
            update={self.quantity_field: new_quantity}
        )
        self._records[record_id] = updated
        return updated.model_copy(deep=True)

    def list_all(self) -> list[T]:
        return [r.model_copy(deep=True) for r in self._records.values()]

    def replace_all(self, records: Iterable[T]) -> None:
        """Swap the whole contents. The batch is validated first; on failure nothing changes."""
        fresh: dict[int, T] = {}
        for record in records:
            if record.id in fresh:
                raise DuplicateKeyError(record.id)
            self.check_quantity(getattr(record, self.quantity_field), record.id)
            fresh[record.id] = record.model_copy(deep=True)
        self._records = fresh
