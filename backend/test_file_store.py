from datetime import datetime

import pytest

from inventory_log import LISTING_NAME, SAMPLE_ITEMS, new_logger, run_demo, seed_sample_data
from repositories import DuplicateKeyError, FileStore, ListingLoadError
from schemas.records import InventoryItem

NOW = datetime(2026, 3, 1, 12, 0, 0)


@pytest.fixture
def file_store(tmp_path):
    return FileStore(tmp_path / "listings")


def test_save_and_reload_into_fresh_logger(file_store):
    inventory = new_logger(file_store)
    seed_sample_data(inventory, now=NOW)
    path = inventory.save_to_file()
    assert path == file_store.listing_path(LISTING_NAME)
    assert not path.with_suffix(".tmp").exists()

    fresh = new_logger(file_store)
    assert fresh.load_from_file() is True
    items = fresh.get_all()
    assert [(i.name, i.quantity) for i in items] == SAMPLE_ITEMS
    assert [i.id for i in items] == [1, 2, 3, 4, 5]
    assert all(i.date_added == NOW for i in items)


def test_save_overwrites_whole_file(file_store):
    inventory = new_logger(file_store)
    seed_sample_data(inventory, now=NOW)
    inventory.save_to_file()

    smaller = new_logger(file_store)
    smaller.add(InventoryItem(id=9, name="Scanner", quantity=2, date_added=NOW))
    smaller.save_to_file()

    loaded = file_store.load_listing(LISTING_NAME, InventoryItem)
    assert [i.id for i in loaded] == [9]


def test_load_without_file(file_store):
    inventory = new_logger(file_store)
    inventory.add(InventoryItem(id=1, name="Laptop", quantity=10, date_added=NOW))
    assert file_store.load_listing(LISTING_NAME, InventoryItem) is None
    assert inventory.load_from_file() is False
    assert len(inventory.get_all()) == 1


def test_malformed_json_leaves_records_unchanged(file_store):
    file_store.listing_path(LISTING_NAME).write_text("[{not json", encoding="utf-8")
    inventory = new_logger(file_store)
    inventory.add(InventoryItem(id=1, name="Laptop", quantity=10, date_added=NOW))
    with pytest.raises(ListingLoadError):
        inventory.load_from_file()
    assert [i.name for i in inventory.get_all()] == ["Laptop"]


def test_negative_quantity_on_disk_is_rejected(file_store):
    file_store.listing_path(LISTING_NAME).write_text(
        '[{"id": 1, "name": "Laptop", "quantity": -3, "date_added": "2026-03-01T12:00:00"}]',
        encoding="utf-8",
    )
    with pytest.raises(ListingLoadError):
        file_store.load_listing(LISTING_NAME, InventoryItem)


def test_duplicate_ids_on_disk_keep_store_unchanged(file_store):
    row = '{"id": 1, "name": "Laptop", "quantity": 3, "date_added": "2026-03-01T12:00:00"}'
    file_store.listing_path(LISTING_NAME).write_text(f"[{row}, {row}]", encoding="utf-8")
    inventory = new_logger(file_store)
    inventory.add(InventoryItem(id=7, name="Mouse", quantity=1, date_added=NOW))
    with pytest.raises(DuplicateKeyError):
        inventory.load_from_file()
    assert [i.id for i in inventory.get_all()] == [7]


def test_run_demo_prints_items(file_store, capsys):
    items = run_demo(file_store)
    out = capsys.readouterr().out
    assert len(items) == 5
    assert "--- Inventory Items ---" in out
    assert "ID: 5, Name: Printer, Qty: 5" in out
