# app/repositories/product_repo.py
import uuid

from sqlalchemy import func
from sqlmodel import Session, select

from app.database import store_errors
from app.models.product import Product


class ProductRepository:
    """
    Data access layer for the product catalog.

    - Pure DB operations (queries + bootstrap insert).
    - No FastAPI, no business logic.
    """

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        with store_errors(session, "loading product"):
            return session.get(Product, product_id)

    def list_products(self, session: Session) -> list[Product]:
        stmt = select(Product).order_by(Product.created_at)
        with store_errors(session, "fetching products"):
            return session.exec(stmt).all()

    def count(self, session: Session) -> int:
        stmt = select(func.count()).select_from(Product)
        with store_errors(session, "counting products"):
            value = session.exec(stmt).one()
        return int(value or 0)

    def create_many(self, session: Session, products: list[Product]) -> list[Product]:
        with store_errors(session, "inserting products"):
            session.add_all(products)
            session.commit()
            for product in products:
                session.refresh(product)
        return products
