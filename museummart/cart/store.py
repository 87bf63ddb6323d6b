"""
Session-scoped shopping carts.

A cart is simply every ``CartItem`` stored under one session id. The
session id is opaque here and is never validated; the request layer
guarantees one is present. Quantities are likewise assumed to be
positive integers: checking them is the request layer's job.

There is at most one line per (session, product) pair. Adding a
product that is already in the cart raises the existing line's
quantity instead of creating a second line. The lookup and the merge
run under the store lock, so two concurrent adds of the same product
end up as a single line with the summed quantity.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from ..catalog.store import join_product
from ..logging import get_logger, sanitize_id_for_logging
from ..models import CartItem, CartItemCreate
from ..storage import EntityKind, EntityStore, ReferentialIntegrityError
from .schemas import CartItemWithProduct, CartSummary


logger = get_logger(__name__)


class CartManager:
    def __init__(self, store: EntityStore):
        self.store = store

    def _find_line(self, session_id: str, product_id: int) -> Optional[CartItem]:
        return next(
            (
                item
                for item in self.store.list(EntityKind.CART_ITEM)
                if item.session_id == session_id and item.product_id == product_id
            ),
            None,
        )

    def _session_items(self, session_id: str) -> List[CartItem]:
        return [i for i in self.store.list(EntityKind.CART_ITEM) if i.session_id == session_id]

    def add_to_cart(self, session_id: str, product_id: int, quantity: int = 1) -> CartItem:
        """Add ``quantity`` of a product, merging into an existing line if there is one.

        Neither an upper bound nor the product's stock quantity is
        checked, and the product id is not resolved here.
        """
        with self.store.lock():
            existing = self._find_line(session_id, product_id)
            if existing is not None:
                merged = existing.model_copy(update={"quantity": existing.quantity + quantity})
                self.store.replace(EntityKind.CART_ITEM, merged)
                logger.info(
                    "Cart %s: product %s quantity %d -> %d",
                    sanitize_id_for_logging(session_id),
                    product_id,
                    existing.quantity,
                    merged.quantity,
                )
                return merged

            item = self.store.create(
                EntityKind.CART_ITEM,
                CartItemCreate(session_id=session_id, product_id=product_id, quantity=quantity),
            )

        logger.info(
            "Cart %s: added product %s x%d as item %s",
            sanitize_id_for_logging(session_id),
            product_id,
            quantity,
            item.id,
        )
        return item

    def get_cart_item(self, item_id: int) -> Optional[CartItem]:
        return self.store.get_cart_item(item_id)

    def update_cart_item(self, item_id: int, quantity: int) -> Optional[CartItem]:
        """Set the quantity of a line. Returns ``None`` when the line does not exist."""
        with self.store.lock():
            item = self.store.get_cart_item(item_id)
            if item is None:
                return None
            updated = item.model_copy(update={"quantity": quantity})
            self.store.replace(EntityKind.CART_ITEM, updated)

        logger.info("Cart item %s quantity set to %d", item_id, quantity)
        return updated

    def remove_from_cart(self, item_id: int) -> bool:
        removed = self.store.delete(EntityKind.CART_ITEM, item_id)
        if removed:
            logger.info("Cart item %s removed", item_id)
        return removed

    def clear_cart(self, session_id: str) -> bool:
        """Drop every line of the session. Always succeeds."""
        with self.store.lock():
            items = self._session_items(session_id)
            for item in items:
                self.store.delete(EntityKind.CART_ITEM, item.id)

        logger.info("Cart %s cleared (%d lines)", sanitize_id_for_logging(session_id), len(items))
        return True

    def get_cart_items(self, session_id: str) -> List[CartItemWithProduct]:
        """Every line of the session joined with its product, museum and category."""
        with self.store.lock():
            joined: List[CartItemWithProduct] = []
            for item in self._session_items(session_id):
                product = self.store.get_raw_product(item.product_id)
                if product is None:
                    raise ReferentialIntegrityError(
                        f"Cart item {item.id} references missing product {item.product_id}"
                    )
                joined.append(
                    CartItemWithProduct(**item.model_dump(), product=join_product(self.store, product))
                )
        return joined

    def summarize(self, session_id: str) -> CartSummary:
        items = self.get_cart_items(session_id)
        subtotal = sum((i.product.price * i.quantity for i in items), Decimal("0.00"))
        return CartSummary(
            lines=len(items),
            total_items=sum(i.quantity for i in items),
            subtotal=subtotal.quantize(Decimal("0.01")),
        )
