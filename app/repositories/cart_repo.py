# app/repositories/cart_repo.py
import uuid

from sqlmodel import Session, select

from app.core.exceptions import NotFoundError, ValidationError
from app.database import store_errors
from app.models.cart import CartItem
from app.models.product import Product


class CartRepository:
    """
    Data access layer for the single global cart.

    Each write commits on its own; nothing here spans more than one
    statement in a transaction.
    """

    # Reads
    def find_by_product(
        self, session: Session, product_id: uuid.UUID
    ) -> CartItem | None:
        stmt = select(CartItem).where(CartItem.product_id == product_id)
        with store_errors(session, "loading cart item"):
            return session.exec(stmt).first()

    def get_by_id(self, session: Session, item_id: uuid.UUID) -> CartItem | None:
        with store_errors(session, "loading cart item"):
            return session.get(CartItem, item_id)

    def list_all(self, session: Session) -> list[CartItem]:
        stmt = select(CartItem).order_by(CartItem.created_at)
        with store_errors(session, "fetching cart"):
            return session.exec(stmt).all()

    def list_with_products(
        self, session: Session
    ) -> list[tuple[CartItem, Product | None]]:
        """
        Every line item joined to its product.

        Outer join: an item whose product no longer exists comes back
        with None in the product slot.
        """
        stmt = (
            select(CartItem, Product)
            .join(Product, CartItem.product_id == Product.id, isouter=True)
            .order_by(CartItem.created_at)
        )
        with store_errors(session, "fetching cart"):
            return [(item, product) for item, product in session.exec(stmt).all()]

    # Writes
    def upsert(
        self,
        session: Session,
        product_id: uuid.UUID,
        quantity: int,
    ) -> CartItem:
        """
        Set the quantity for `product_id`, creating the line item if needed.

        The quantity is overwritten, never added to the existing value.
        """
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1.", field="quantity")

        item = self.find_by_product(session, product_id)

        with store_errors(session, "saving cart item"):
            # Checked on update too: an existing line may point at a deleted product
            if session.get(Product, product_id) is None:
                raise ValidationError("Product does not exist.", field="product_id")

            if item is None:
                item = CartItem(product_id=product_id, quantity=quantity)
            else:
                item.quantity = quantity

            session.add(item)
            session.commit()
            session.refresh(item)
        return item

    def remove(self, session: Session, item_id: uuid.UUID) -> CartItem:
        item = self.get_by_id(session, item_id)
        if item is None:
            raise NotFoundError("Cart item", item_id)

        # Detached copy; the deleted instance is expired on commit
        removed = CartItem(
            id=item.id,
            product_id=item.product_id,
            quantity=item.quantity,
            created_at=item.created_at,
        )

        with store_errors(session, "removing cart item"):
            session.delete(item)
            session.commit()
        return removed

    def clear(self, session: Session) -> int:
        rows = self.list_all(session)
        with store_errors(session, "clearing cart"):
            for row in rows:
                session.delete(row)
            session.commit()
        return len(rows)
