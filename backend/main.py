"""
Stockroom Backend API
Endpoints for warehouse stock, the inventory log, grade reports and the finance ledger
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.helpers import store_error_handler
from api.routes import (
    electronics_router,
    finance_router,
    grading_router,
    groceries_router,
    health_router,
    inventory_file_router,
    inventory_router,
)
from config import get_settings
from repositories import StoreError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_settings()
app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# DuplicateKeyError -> 409, RecordNotFoundError -> 404, InvalidQuantityError -> 422
app.add_exception_handler(StoreError, store_error_handler)

app.include_router(health_router)
app.include_router(inventory_file_router)
app.include_router(electronics_router)
app.include_router(groceries_router)
app.include_router(inventory_router)
app.include_router(grading_router)
app.include_router(finance_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
