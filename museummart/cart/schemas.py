"""Request and response models for the cart API."""

from decimal import Decimal

from pydantic import BaseModel, Field

from ..catalog.schemas import ProductWithMuseum
from ..models import CartItem


class CartItemWithProduct(CartItem):
    """A cart line joined with the full product projection."""

    product: ProductWithMuseum


class AddToCartRequest(BaseModel):
    product_id: int
    quantity: int = Field(1, ge=1)


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(..., ge=1)


class CartSummary(BaseModel):
    """Totals for the header badge and the cart page footer.

    ``subtotal`` is the sum of unit price times quantity across every
    line; lines in different currencies are not converted.
    """

    lines: int
    total_items: int
    subtotal: Decimal = Decimal("0.00")
