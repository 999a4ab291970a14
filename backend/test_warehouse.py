from datetime import date

import pytest

from repositories import InvalidQuantityError, RecordNotFoundError
from warehouse import WarehouseManager, run_demo

TODAY = date(2026, 10, 17)


@pytest.fixture
def manager():
    m = WarehouseManager()
    m.seed_data(today=TODAY)
    return m


def test_seed_listings(manager):
    assert manager.describe_all(manager.electronics) == [
        "1: Laptop (Dell), Qty: 10, Warranty: 24 months",
        "2: Smartphone (Samsung), Qty: 15, Warranty: 12 months",
    ]
    assert manager.describe_all(manager.groceries) == [
        "101: Milk, Qty: 20, Expiry: 2026-10-24",
        "102: Bread, Qty: 50, Expiry: 2026-10-20",
    ]


def test_increase_stock(manager):
    updated = manager.increase_stock(manager.electronics, 2, 5)
    assert updated.quantity == 20
    assert manager.electronics.get(2).quantity == 20
    assert manager.electronics.get(2).brand == "Samsung"


def test_increase_stock_unknown_item(manager):
    with pytest.raises(RecordNotFoundError):
        manager.increase_stock(manager.groceries, 999, 1)


def test_increase_stock_below_zero(manager):
    with pytest.raises(InvalidQuantityError):
        manager.increase_stock(manager.groceries, 102, -51)
    assert manager.groceries.get(102).quantity == 50


def test_remove_item(manager):
    removed = manager.remove_item(manager.groceries, 101)
    assert removed.name == "Milk"
    assert [g.id for g in manager.groceries.list_all()] == [102]
    with pytest.raises(RecordNotFoundError):
        manager.remove_item(manager.groceries, 101)


def test_run_demo_reports_each_error(capsys):
    manager = run_demo()
    out = capsys.readouterr().out
    assert "--- Grocery Items ---" in out
    assert "Exception: Item with ID 1 already exists." in out
    assert "Exception: Item with ID 999 not found." in out
    assert "Exception: Quantity cannot be negative." in out
    assert manager.electronics.get(1).name == "Laptop"
    assert manager.electronics.get(2).quantity == 15
