"""Keyed record CRUD: list, create, get, delete, set quantity, add stock."""

import logging
from typing import Annotated, Type

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.deps import get_store, require_collection
from api.helpers import listing
from repositories import KeyedRecordStore, ListingLoadError
from schemas.records import ElectronicItem, GroceryItem, InventoryItem
from schemas.requests import QuantityUpdate, StockIncrease
from warehouse import WarehouseManager

import store

logger = logging.getLogger(__name__)


def make_records_router(name: str, model: Type[BaseModel]) -> APIRouter:
    """Build the CRUD router for the keyed store exposed as *name*."""
    router = APIRouter(prefix=f"/api/{name}", tags=[name])

    def records(store_instance: Annotated[object, Depends(get_store)]) -> KeyedRecordStore:
        return require_collection(name, store_instance)

    Records = Annotated[KeyedRecordStore, Depends(records)]

    @router.get("")
    async def list_records(repo: Records):
        return JSONResponse(listing(repo.list_all()))

    @router.post("", status_code=201)
    async def create_record(item: model, repo: Records):  # type: ignore[valid-type]
        repo.insert(item)
        logger.info("%s: inserted id=%s", name, item.id)
        return JSONResponse(item.model_dump(mode="json"), status_code=201)

    @router.get("/{item_id}")
    async def get_record(item_id: int, repo: Records):
        return JSONResponse(repo.get(item_id).model_dump(mode="json"))

    @router.delete("/{item_id}")
    async def delete_record(item_id: int, repo: Records):
        removed = WarehouseManager.remove_item(repo, item_id)
        return JSONResponse({"removed": removed.model_dump(mode="json")})

    @router.put("/{item_id}/quantity")
    async def set_quantity(item_id: int, data: QuantityUpdate, repo: Records):
        updated = repo.update_quantity(item_id, data.quantity)
        logger.info("%s: id=%s quantity=%s", name, item_id, data.quantity)
        return JSONResponse(updated.model_dump(mode="json"))

    @router.post("/{item_id}/stock")
    async def add_stock(item_id: int, data: StockIncrease, repo: Records):
        updated = WarehouseManager.increase_stock(repo, item_id, data.amount)
        return JSONResponse(updated.model_dump(mode="json"))

    return router


electronics_router = make_records_router("electronics", ElectronicItem)
groceries_router = make_records_router("groceries", GroceryItem)
inventory_router = make_records_router("inventory", InventoryItem)


inventory_file_router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@inventory_file_router.post("/save")
async def save_inventory():
    path = store.inventory.save_to_file()
    return JSONResponse({"saved": len(store.inventory.records), "path": str(path)})


@inventory_file_router.post("/load")
async def load_inventory():
    try:
        loaded = store.inventory.load_from_file()
    except ListingLoadError as e:
        logger.error("Inventory load failed: %s", e)
        raise HTTPException(500, f"Inventory load failed: {e}") from e
    if not loaded:
        raise HTTPException(404, "No saved inventory file")
    return JSONResponse(listing(store.inventory.get_all()))
