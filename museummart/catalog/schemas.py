"""
Pydantic schema definitions for the catalog module.

``ProductFilters`` carries one optional, typed field per filter
predicate; ``None`` means "do not filter on this dimension".
``ProductWithMuseum`` is the read-side projection returned by every
product query: the product itself plus its museum and category
records, built on read and never stored.
"""

from typing import Optional

from pydantic import BaseModel, model_validator
from typing_extensions import Literal

from ..models import Category, Museum, Product


class ProductFilters(BaseModel):
    """Conjunctive filter set for product queries.

    Every supplied field must match for a product to be returned.
    ``material``, ``country_of_origin`` and ``search`` are
    case-insensitive substring matches; ``search`` looks at the name,
    the description and the short description and accepts a product
    when any of the three contains the term. Price bounds are
    inclusive. Empty strings are treated the same as ``None``.
    """

    museum_id: Optional[int] = None
    category_id: Optional[int] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    material: Optional[str] = None
    country_of_origin: Optional[str] = None
    in_stock: Optional[bool] = None
    featured: Optional[bool] = None
    search: Optional[str] = None

    @model_validator(mode="after")
    def _check_price_range(self) -> "ProductFilters":
        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise ValueError("price_min must not exceed price_max")
        return self


class ProductWithMuseum(Product):
    """A product joined with its owning museum and category."""

    museum: Museum
    category: Category


# Presentation-side orderings. "default" keeps store order.
SortField = Literal["default", "featured", "price-asc", "price-desc", "newest"]
