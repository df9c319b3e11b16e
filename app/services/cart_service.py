# app/services/cart_service.py
import uuid
from decimal import Decimal, ROUND_HALF_UP

from sqlmodel import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.models.cart import CartItem
from app.models.product import Product
from app.repositories.cart_repo import CartRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.cart import CartItemRead, CartItemRecord, CartSummary
from app.schemas.product import ProductRead
from app.services.product_service import ProductService

CENT = Decimal("0.01")


def to_money(value: Decimal) -> float:
    """Round half-up to cents."""
    return float(value.quantize(CENT, rounding=ROUND_HALF_UP))


class CartService:
    """
    Business logic for the global cart.

    Responsibilities:
      - validate quantity and product existence before writing
      - join line items to products
      - compute line totals and the cart total

    Quantities are set, not incremented: callers send the absolute
    quantity they want stored.
    """

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository):
        self.cart_repo = cart_repo
        self.product_repo = product_repo
        self.products = ProductService(product_repo)

    # ---- internal helpers ----

    @staticmethod
    def _line_total(item: CartItem, product: Product | None) -> Decimal:
        if product is None:
            return Decimal("0")
        return Decimal(str(product.price)) * item.quantity

    def _build_item_read(
        self, item: CartItem, product: Product | None
    ) -> CartItemRead:
        return CartItemRead(
            id=item.id,
            product_id=item.product_id,
            quantity=item.quantity,
            created_at=item.created_at,
            product=ProductRead.model_validate(product) if product else None,
            line_total=to_money(self._line_total(item, product)),
        )

    # ---- public operations ----

    def get_cart(self, session: Session) -> CartSummary:
        """
        Return full cart summary:
          - items joined to products (None for dangling references)
          - total_quantity over all listed items
          - total over resolvable items only, rounded to cents
        """
        rows = self.cart_repo.list_with_products(session)

        items: list[CartItemRead] = []
        total_qty = 0
        total = Decimal("0")

        for item, product in rows:
            total_qty += item.quantity
            total += self._line_total(item, product)
            items.append(self._build_item_read(item, product))

        return CartSummary(
            items=items,
            total_quantity=total_qty,
            total=to_money(total),
        )

    def add_or_set_quantity(
        self,
        session: Session,
        product_id: uuid.UUID | None,
        quantity: int | None,
    ) -> CartItemRead:
        """
        Put `product_id` in the cart with exactly `quantity` units.

        Rules:
          - product_id is required, quantity must be >= 1 (ValidationError)
          - product must exist (NotFoundError)
          - an existing line item is overwritten, not accumulated
        """
        if product_id is None:
            raise ValidationError("Product ID is required.", field="product_id")
        if quantity is None or quantity < 1:
            raise ValidationError("Quantity must be at least 1.", field="quantity")

        product = self.products.get_product(session, product_id)

        item = self.cart_repo.upsert(session, product_id, quantity)
        return self._build_item_read(item, product)

    def remove_item(self, session: Session, item_id: str) -> CartItemRecord:
        """
        Remove a line item by id.

        A malformed id can't match any row, so it is reported the same way
        as an unknown one.
        """
        try:
            parsed = uuid.UUID(str(item_id))
        except ValueError:
            raise NotFoundError("Cart item", item_id)

        removed = self.cart_repo.remove(session, parsed)
        return CartItemRecord.model_validate(removed)
