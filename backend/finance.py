"""
Finance: payment processors, accounts and a transaction ledger.
Run: python finance.py
"""

import logging
from decimal import Decimal
from typing import Literal

from repositories import DuplicateKeyError, KeyedRecordStore
from schemas.records import Transaction

logger = logging.getLogger(__name__)

PROCESSOR_LABELS = {
    "bank_transfer": "Bank Transfer",
    "mobile_money": "Mobile Money",
    "crypto_wallet": "Crypto Wallet",
}


class InsufficientFundsError(Exception):
    def __init__(self, balance: Decimal, amount: Decimal):
        super().__init__("Insufficient funds")
        self.balance = balance
        self.amount = amount


def format_money(amount: Decimal) -> str:
    return f"${amount:,.2f}"


def process(kind: str, transaction: Transaction) -> str:
    """Return the processor's confirmation line for *transaction*."""
    label = PROCESSOR_LABELS.get(kind)
    if label is None:
        raise ValueError(f"Unknown processor '{kind}'. Use one of: {sorted(PROCESSOR_LABELS)}")
    return f"[{label}] Processed {format_money(transaction.amount)} for {transaction.category}"


class Account:
    """Standard accounts always debit; savings accounts refuse overdrafts."""

    def __init__(
        self,
        account_number: str,
        balance: Decimal,
        kind: Literal["standard", "savings"] = "standard",
    ):
        self.account_number = account_number
        self.balance = Decimal(balance)
        self.kind = kind

    def apply_transaction(self, transaction: Transaction) -> Decimal:
        if self.kind == "savings" and transaction.amount > self.balance:
            raise InsufficientFundsError(self.balance, transaction.amount)
        self.balance -= transaction.amount
        return self.balance

    def to_dict(self) -> dict:
        return {
            "account_number": self.account_number,
            "kind": self.kind,
            "balance": str(self.balance),
        }


class FinanceLedger:
    """Applies transactions to one account and keeps the applied ones by id."""

    def __init__(self, account: Account):
        self.account = account
        self.transactions: KeyedRecordStore[Transaction] = KeyedRecordStore(quantity_field="amount")

    def record(self, transaction: Transaction, kind: str = "bank_transfer") -> str:
        """Process, apply and store *transaction*. Nothing is stored if any step fails."""
        if transaction.id in self.transactions:
            raise DuplicateKeyError(transaction.id)
        self.transactions.check_quantity(transaction.amount, transaction.id)
        message = process(kind, transaction)
        self.account.apply_transaction(transaction)
        self.transactions.insert(transaction)
        logger.info(
            "Transaction %d applied via %s, balance %s",
            transaction.id, kind, self.account.balance,
        )
        return message


def run_demo() -> FinanceLedger:
    ledger = FinanceLedger(Account("123456", Decimal("1000"), kind="savings"))
    for tx, kind in (
        (Transaction(id=1, amount=Decimal("150"), category="Groceries"), "mobile_money"),
        (Transaction(id=2, amount=Decimal("200"), category="Utilities"), "bank_transfer"),
        (Transaction(id=3, amount=Decimal("50"), category="Entertainment"), "crypto_wallet"),
    ):
        try:
            print(ledger.record(tx, kind))
            print(f"Transaction applied. Updated Balance: {format_money(ledger.account.balance)}")
        except InsufficientFundsError as e:
            print(e)

    print("\n--- All Transactions ---")
    for tx in ledger.transactions.list_all():
        print(f"{tx.id}: {tx.category} - {format_money(tx.amount)} on {tx.date:%Y-%m-%d %H:%M:%S}")
    return ledger


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_demo()
