# app/services/product_service.py
import uuid

from sqlmodel import Session

from app.core.exceptions import NotFoundError
from app.models.product import Product
from app.repositories.product_repo import ProductRepository


class ProductService:
    """
    Read-only access to the catalog.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(self, session: Session) -> list[Product]:
        return self.repo.list_products(session)

    def get_product(self, session: Session, product_id: uuid.UUID) -> Product:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise NotFoundError("Product", product_id)
        return product
