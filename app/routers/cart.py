# app/routers/cart.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.database import get_session
from app.repositories.cart_repo import CartRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.cart import CartItemRead, CartItemRemoved, CartItemSet, CartSummary
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["Cart"])

cart_repo = CartRepository()
product_repo = ProductRepository()
service = CartService(cart_repo, product_repo)


@router.get("", response_model=CartSummary)
def get_cart(session: Session = Depends(get_session)):
    """
    Get the cart with every item joined to its product, plus totals.
    """
    return service.get_cart(session)


@router.post(
    "",
    response_model=CartItemRead,
    status_code=status.HTTP_201_CREATED,
)
def add_to_cart(
    payload: CartItemSet,
    session: Session = Depends(get_session),
):
    """
    Add a product to the cart, or overwrite its quantity if already there.

    Returns the stored line item joined to its product.
    """
    return service.add_or_set_quantity(session, payload.product_id, payload.quantity)


@router.put("", response_model=CartItemRead)
def set_cart_quantity(
    payload: CartItemSet,
    session: Session = Depends(get_session),
):
    """
    Same upsert as POST, for clients that treat it as an update.
    """
    return service.add_or_set_quantity(session, payload.product_id, payload.quantity)


@router.delete("/{item_id}", response_model=CartItemRemoved)
def remove_cart_item(
    item_id: str,
    session: Session = Depends(get_session),
):
    """
    Remove a line item by its id (not the product id).
    """
    removed = service.remove_item(session, item_id)
    return CartItemRemoved(message="Item removed from cart.", removed_item=removed)
