# app/schemas/product.py
import uuid
from datetime import datetime

from sqlmodel import SQLModel


class ProductRead(SQLModel):
    """
    Product representation for clients.
    """

    id: uuid.UUID
    name: str
    price: float
    image: str
    created_at: datetime
