# app/services/checkout_service.py
import logging
import uuid
from datetime import datetime, timezone

from sqlmodel import Session

from app.core.exceptions import StoreError, ValidationError
from app.repositories.cart_repo import CartRepository
from app.schemas.checkout import Receipt, ReceiptLine
from app.services.cart_service import CartService

logger = logging.getLogger(__name__)

UNKNOWN_ITEM_NAME = "Unknown Item"


class CheckoutService:
    """
    Mock checkout: no payment, just a receipt and an empty cart.

    Steps:
      1. Read the cart (items + total).
      2. Build the receipt from that snapshot.
      3. Clear the cart.

    The steps are not one transaction. An item added by another client
    between 1 and 3 is cleared without appearing on the receipt.
    """

    def __init__(
        self,
        cart_service: CartService,
        cart_repo: CartRepository,
        allow_empty: bool = True,
    ):
        self.cart_service = cart_service
        self.cart_repo = cart_repo
        self.allow_empty = allow_empty

    def checkout(self, session: Session) -> Receipt:
        # 1) Snapshot the cart
        cart = self.cart_service.get_cart(session)
        if not cart.items and not self.allow_empty:
            raise ValidationError("Cart is empty.")

        # 2) Receipt
        lines = [
            ReceiptLine(
                name=it.product.name if it.product else UNKNOWN_ITEM_NAME,
                quantity=it.quantity,
                price=it.product.price if it.product else 0,
            )
            for it in cart.items
        ]
        receipt = Receipt(
            order_id=str(uuid.uuid4()),
            timestamp=datetime.now(timezone.utc),
            total=cart.total,
            items=lines,
        )

        # 3) Clear cart; the receipt stands even if this fails
        try:
            self.cart_repo.clear(session)
        except StoreError:
            logger.exception(
                "Checkout %s: failed to clear cart after building receipt",
                receipt.order_id,
            )

        logger.info(
            "Checkout %s completed: %d line(s), total %.2f",
            receipt.order_id,
            len(lines),
            receipt.total,
        )
        return receipt
