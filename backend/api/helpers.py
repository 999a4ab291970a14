"""Shared helpers for API routes (error mapping, listing payloads)."""

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from repositories import DuplicateKeyError, InvalidQuantityError, RecordNotFoundError, StoreError

STATUS_BY_ERROR = {
    DuplicateKeyError: 409,
    RecordNotFoundError: 404,
    InvalidQuantityError: 422,
}


def listing(records: list[BaseModel]) -> dict:
    """Build listing dict for API responses."""
    items = [r.model_dump(mode="json") for r in records]
    return {"count": len(items), "items": items}


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    status = STATUS_BY_ERROR.get(type(exc), 400)
    return JSONResponse(
        {"detail": str(exc), "record_id": exc.record_id},
        status_code=status,
    )
