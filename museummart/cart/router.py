"""
Route definitions for the cart API.

Every route is scoped to the caller's session, taken from the
``X-Session-Id`` header. A line id that belongs to another session is
reported as not found, the same as an id that does not exist.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..catalog.store import get_product
from ..config import Settings
from ..deps import get_app_settings, get_session_id, get_store
from ..models import CartItem
from ..storage import EntityStore
from .schemas import AddToCartRequest, CartItemWithProduct, CartSummary, UpdateCartItemRequest
from .store import CartManager


router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_cart_manager(store: EntityStore = Depends(get_store)) -> CartManager:
    return CartManager(store)


def _check_quantity(quantity: int, settings: Settings) -> None:
    if quantity > settings.max_cart_quantity:
        raise HTTPException(status_code=400, detail="Invalid quantity")


def _owned_item(cart: CartManager, item_id: int, session_id: str) -> CartItem:
    item = cart.get_cart_item(item_id)
    if item is None or item.session_id != session_id:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return item


@router.get("", response_model=List[CartItemWithProduct])
def get_cart(
    session_id: str = Depends(get_session_id),
    cart: CartManager = Depends(get_cart_manager),
) -> List[CartItemWithProduct]:
    return cart.get_cart_items(session_id)


@router.get("/summary", response_model=CartSummary)
def get_cart_summary(
    session_id: str = Depends(get_session_id),
    cart: CartManager = Depends(get_cart_manager),
) -> CartSummary:
    return cart.summarize(session_id)


@router.post("", response_model=CartItem)
def add_to_cart(
    req: AddToCartRequest,
    session_id: str = Depends(get_session_id),
    cart: CartManager = Depends(get_cart_manager),
    settings: Settings = Depends(get_app_settings),
) -> CartItem:
    _check_quantity(req.quantity, settings)
    if get_product(cart.store, req.product_id) is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return cart.add_to_cart(session_id, req.product_id, req.quantity)


@router.put("/{item_id}", response_model=CartItem)
def update_cart_item(
    item_id: int,
    req: UpdateCartItemRequest,
    session_id: str = Depends(get_session_id),
    cart: CartManager = Depends(get_cart_manager),
    settings: Settings = Depends(get_app_settings),
) -> CartItem:
    _check_quantity(req.quantity, settings)
    with cart.store.lock():
        _owned_item(cart, item_id, session_id)
        updated = cart.update_cart_item(item_id, req.quantity)
    if updated is None:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return updated


@router.delete("/{item_id}")
def remove_from_cart(
    item_id: int,
    session_id: str = Depends(get_session_id),
    cart: CartManager = Depends(get_cart_manager),
):
    with cart.store.lock():
        _owned_item(cart, item_id, session_id)
        removed = cart.remove_from_cart(item_id)
    if not removed:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return {"message": "Item removed from cart"}


@router.delete("")
def clear_cart(
    session_id: str = Depends(get_session_id),
    cart: CartManager = Depends(get_cart_manager),
):
    cart.clear_cart(session_id)
    return {"message": "Cart cleared"}
