# app/routers/checkout.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.config import get_settings
from app.database import get_session
from app.repositories.cart_repo import CartRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.checkout import CheckoutResponse
from app.services.cart_service import CartService
from app.services.checkout_service import CheckoutService

router = APIRouter(prefix="/checkout", tags=["Checkout"])

settings = get_settings()

cart_repo = CartRepository()
product_repo = ProductRepository()
service = CheckoutService(
    CartService(cart_repo, product_repo),
    cart_repo,
    allow_empty=settings.ALLOW_EMPTY_CHECKOUT,
)


@router.post("", response_model=CheckoutResponse)
def checkout(session: Session = Depends(get_session)):
    """
    Mock checkout: snapshot the cart into a receipt, then empty the cart.

    No payment is taken.
    """
    receipt = service.checkout(session)
    return CheckoutResponse(
        success=True,
        message="Checkout successful! Thank you for your order.",
        order=receipt,
    )
