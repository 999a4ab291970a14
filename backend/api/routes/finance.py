"""Savings account and transaction ledger."""

import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.helpers import listing
from finance import InsufficientFundsError
from schemas.records import Transaction
from schemas.requests import TransactionCreate

import store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/finance", tags=["finance"])


@router.get("/account")
async def get_account():
    return JSONResponse(store.ledger.account.to_dict())


@router.get("/transactions")
async def list_transactions():
    return JSONResponse(listing(store.ledger.transactions.list_all()))


@router.post("/transactions", status_code=201)
async def create_transaction(data: TransactionCreate):
    try:
        tx = Transaction(
            id=data.id,
            amount=data.amount,
            category=data.category,
            date=data.date or datetime.now(),
        )
    except ValidationError as e:
        raise HTTPException(422, e.errors(include_url=False, include_context=False, include_input=False)) from e
    try:
        message = store.ledger.record(tx, data.processor)
    except InsufficientFundsError as e:
        raise HTTPException(400, str(e)) from e
    return JSONResponse(
        {
            "message": message,
            "transaction": tx.model_dump(mode="json"),
            "account": store.ledger.account.to_dict(),
        },
        status_code=201,
    )
