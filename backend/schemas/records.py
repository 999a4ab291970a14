"""Record models held by the keyed stores."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class InventoryItem(BaseModel):
    id: int
    name: str
    quantity: int = Field(ge=0)
    date_added: datetime = Field(default_factory=datetime.now)


class ElectronicItem(BaseModel):
    id: int
    name: str
    quantity: int = Field(ge=0)
    brand: str
    warranty_months: int = Field(ge=0)

    def describe(self) -> str:
        return (
            f"{self.id}: {self.name} ({self.brand}), Qty: {self.quantity}, "
            f"Warranty: {self.warranty_months} months"
        )


class GroceryItem(BaseModel):
    id: int
    name: str
    quantity: int = Field(ge=0)
    expiry_date: date

    def describe(self) -> str:
        return f"{self.id}: {self.name}, Qty: {self.quantity}, Expiry: {self.expiry_date:%Y-%m-%d}"


class Transaction(BaseModel):
    id: int
    date: datetime = Field(default_factory=datetime.now)
    amount: Decimal = Field(ge=0)
    category: str


def grade_for(score: int) -> str:
    if 80 <= score <= 100:
        return "A"
    if score >= 70:
        return "B"
    if score >= 60:
        return "C"
    if score >= 50:
        return "D"
    return "F"


class Student(BaseModel):
    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        return grade_for(self.score)
