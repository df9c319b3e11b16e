# app/schemas/cart.py
import uuid
from datetime import datetime
from typing import Any

from pydantic import ConfigDict, model_validator
from sqlmodel import SQLModel, Field

from app.schemas.product import ProductRead


class CartItemSet(SQLModel):
    """
    Payload for adding a product or setting its quantity.

    `quantity` is the absolute value to store, not a delta.
    Accepts `productId` as well, which is what the storefront sends.
    """

    model_config = ConfigDict(extra="forbid")

    product_id: uuid.UUID
    quantity: int = Field(gt=0)

    @model_validator(mode="before")
    @classmethod
    def accept_camel_case(cls, data: Any) -> Any:
        if isinstance(data, dict) and "productId" in data:
            data = dict(data)
            product_id = data.pop("productId")
            data.setdefault("product_id", product_id)
        return data


class CartItemRecord(SQLModel):
    """
    Raw line item, as stored.
    """

    id: uuid.UUID
    product_id: uuid.UUID
    quantity: int
    created_at: datetime


class CartItemRead(CartItemRecord):
    """
    Line item joined to its product.

    `product` is None when the product reference no longer resolves;
    such an item has line_total 0.
    """

    product: ProductRead | None = None
    line_total: float


class CartSummary(SQLModel):
    """
    Full cart response model with totals.
    """

    items: list[CartItemRead]
    total_quantity: int
    total: float


class CartItemRemoved(SQLModel):
    message: str
    removed_item: CartItemRecord
