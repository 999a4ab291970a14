"""Request body models for the Stockroom API."""

from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel


class QuantityUpdate(BaseModel):
    quantity: int


class StockIncrease(BaseModel):
    amount: int


class TransactionCreate(BaseModel):
    id: int
    amount: Decimal
    category: str
    processor: Literal["bank_transfer", "mobile_money", "crypto_wallet"] = "bank_transfer"
    date: Optional[str] = None
