"""
Stockroom persistence facade.
Process-wide keyed stores used by the API, plus the JSON listing directory.
Structure on disk:
  data/
    inventory.json — whole-file snapshot of the inventory log
"""

import logging
from typing import Optional

from config import Settings, get_settings
from finance import Account, FinanceLedger
from inventory_log import new_logger, seed_sample_data
from repositories import FileStore, InventoryLogger, KeyedRecordStore
from schemas.records import InventoryItem
from warehouse import WarehouseManager

logger = logging.getLogger(__name__)

file_store: FileStore
warehouse: WarehouseManager
inventory: InventoryLogger[InventoryItem]
ledger: FinanceLedger


def reset(settings: Optional[Settings] = None) -> None:
    """(Re)build every store from settings. Called at import and by tests."""
    global file_store, warehouse, inventory, ledger
    settings = settings or get_settings()
    file_store = FileStore(settings.STOCKROOM_DATA_DIR)
    warehouse = WarehouseManager()
    inventory = new_logger(file_store)
    ledger = FinanceLedger(
        Account(settings.SAVINGS_ACCOUNT_NUMBER, settings.SAVINGS_OPENING_BALANCE, kind="savings")
    )
    if settings.STOCKROOM_SEED:
        warehouse.seed_data()
        seed_sample_data(inventory)
    logger.info(
        "Stores ready (data_dir=%s, seeded=%s)", settings.STOCKROOM_DATA_DIR, settings.STOCKROOM_SEED
    )


def collection(name: str) -> Optional[KeyedRecordStore]:
    """Return the keyed store exposed under *name*, or None."""
    return {
        "electronics": warehouse.electronics,
        "groceries": warehouse.groceries,
        "inventory": inventory.records,
    }.get(name)


reset()
