# museummart/models.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MuseumCreate(BaseModel):
    name: str
    location: str
    country: str
    description: Optional[str] = None
    website: Optional[str] = None
    image_url: Optional[str] = None


class Museum(MuseumCreate):
    model_config = ConfigDict(frozen=True)

    id: int


class CategoryCreate(BaseModel):
    name: str
    slug: str = Field(..., min_length=1, description="URL-friendly unique identifier")
    description: Optional[str] = None
    parent_id: Optional[int] = None


class Category(CategoryCreate):
    model_config = ConfigDict(frozen=True)

    id: int


class ProductCreate(BaseModel):
    name: str
    description: str
    short_description: str
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    currency: str = "USD"
    image_url: str
    museum_id: int
    category_id: int
    material: Optional[str] = None
    country_of_origin: Optional[str] = None
    in_stock: bool = True
    stock_quantity: int = Field(0, ge=0)
    featured: bool = False

    @field_validator("price")
    @classmethod
    def _fix_price_scale(cls, value: Decimal) -> Decimal:
        return value.quantize(Decimal("0.01"))


class Product(ProductCreate):
    model_config = ConfigDict(frozen=True)

    id: int
    created_at: datetime


class CartItemCreate(BaseModel):
    session_id: str
    product_id: int
    quantity: int = 1


class CartItem(CartItemCreate):
    model_config = ConfigDict(frozen=True)

    id: int
    created_at: datetime
