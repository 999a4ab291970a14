"""API route modules."""

from .health import router as health_router
from .records import (
    electronics_router,
    groceries_router,
    inventory_file_router,
    inventory_router,
)
from .grading import router as grading_router
from .finance import router as finance_router

__all__ = [
    "health_router",
    "electronics_router",
    "groceries_router",
    "inventory_router",
    "inventory_file_router",
    "grading_router",
    "finance_router",
]
