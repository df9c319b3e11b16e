# app/schemas/checkout.py
from datetime import datetime

from sqlmodel import SQLModel


class ReceiptLine(SQLModel):
    """
    One order line on a receipt.

    Unresolved products show as "Unknown Item" with price 0.
    """

    name: str
    quantity: int
    price: float


class Receipt(SQLModel):
    """
    Immutable summary returned by checkout. Not persisted.
    """

    order_id: str
    timestamp: datetime
    total: float
    items: list[ReceiptLine]


class CheckoutResponse(SQLModel):
    success: bool = True
    message: str
    order: Receipt
