"""
Route definitions for the catalogue API.

Endpoints under /api:
- GET  /museums                       : list museums
- GET  /museums/{museum_id}           : one museum
- POST /museums                       : create a museum
- GET  /categories                    : list categories
- GET  /categories/id/{category_id}   : one category by id
- GET  /categories/{slug}             : one category by slug
- GET  /categories/{slug}/children    : direct sub-categories
- POST /categories                    : create a category
- GET  /products                      : filtered product list
- GET  /products/{product_id}         : one product
- POST /products                      : create a product
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from ..deps import get_store
from ..logging import get_logger
from ..models import Category, CategoryCreate, Museum, MuseumCreate, Product, ProductCreate
from ..storage import DuplicateSlugError, EntityKind, EntityStore
from .schemas import ProductFilters, ProductWithMuseum, SortField
from .store import get_product, list_products, sort_products


logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["catalog"])


# ---------------------------------------------------------------------------
# Museums

@router.get("/museums", response_model=List[Museum])
def list_museums(store: EntityStore = Depends(get_store)) -> List[Museum]:
    return store.list(EntityKind.MUSEUM)


@router.get("/museums/{museum_id}", response_model=Museum)
def get_museum(museum_id: int, store: EntityStore = Depends(get_store)) -> Museum:
    museum = store.get_museum(museum_id)
    if museum is None:
        raise HTTPException(status_code=404, detail="Museum not found")
    return museum


@router.post("/museums", response_model=Museum, status_code=201)
def create_museum(req: MuseumCreate, store: EntityStore = Depends(get_store)) -> Museum:
    museum = store.create(EntityKind.MUSEUM, req)
    logger.info("Museum %s created: %s", museum.id, museum.name)
    return museum


# ---------------------------------------------------------------------------
# Categories

@router.get("/categories", response_model=List[Category])
def list_categories(store: EntityStore = Depends(get_store)) -> List[Category]:
    return store.list(EntityKind.CATEGORY)


@router.get("/categories/id/{category_id}", response_model=Category)
def get_category(category_id: int, store: EntityStore = Depends(get_store)) -> Category:
    category = store.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.get("/categories/{slug}", response_model=Category)
def get_category_by_slug(slug: str, store: EntityStore = Depends(get_store)) -> Category:
    category = store.get_category_by_slug(slug)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.get("/categories/{slug}/children", response_model=List[Category])
def list_child_categories(slug: str, store: EntityStore = Depends(get_store)) -> List[Category]:
    parent = store.get_category_by_slug(slug)
    if parent is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return [c for c in store.list(EntityKind.CATEGORY) if c.parent_id == parent.id]


@router.post("/categories", response_model=Category, status_code=201)
def create_category(req: CategoryCreate, store: EntityStore = Depends(get_store)) -> Category:
    if req.parent_id is not None and store.get_category(req.parent_id) is None:
        raise HTTPException(status_code=400, detail="Parent category does not exist")
    try:
        category = store.create(EntityKind.CATEGORY, req)
    except DuplicateSlugError as e:
        raise HTTPException(status_code=409, detail=str(e))
    logger.info("Category %s created with slug %s", category.id, category.slug)
    return category


# ---------------------------------------------------------------------------
# Products

@router.get("/products", response_model=List[ProductWithMuseum])
def list_products_api(
    museum_id: Optional[int] = Query(default=None, description="Owning museum"),
    category_id: Optional[int] = Query(default=None, description="Owning category"),
    category_slug: Optional[str] = Query(default=None, description="Owning category, by slug"),
    price_min: Optional[float] = Query(default=None, ge=0, description="Inclusive lower price bound"),
    price_max: Optional[float] = Query(default=None, ge=0, description="Inclusive upper price bound"),
    material: Optional[str] = Query(default=None, description="Material contains (case-insensitive)"),
    country_of_origin: Optional[str] = Query(default=None, description="Country of origin contains"),
    in_stock: Optional[bool] = Query(default=None),
    featured: Optional[bool] = Query(default=None),
    search: Optional[str] = Query(default=None, description="Search name and descriptions"),
    sort: SortField = Query(default="default", description="Display ordering"),
    store: EntityStore = Depends(get_store),
) -> List[ProductWithMuseum]:
    """
    Returns the products matching every supplied filter.

    ``category_slug`` is resolved to a category id here; when both it
    and ``category_id`` are given they must name the same category or
    nothing matches.
    """
    if category_slug:
        category = store.get_category_by_slug(category_slug)
        if category is None:
            raise HTTPException(status_code=404, detail="Category not found")
        if category_id is not None and category_id != category.id:
            return []
        category_id = category.id

    try:
        filters = ProductFilters(
            museum_id=museum_id,
            category_id=category_id,
            price_min=price_min,
            price_max=price_max,
            material=material,
            country_of_origin=country_of_origin,
            in_stock=in_stock,
            featured=featured,
            search=search,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    return sort_products(list_products(store, filters), sort)


@router.get("/products/{product_id}", response_model=ProductWithMuseum)
def get_product_api(product_id: int, store: EntityStore = Depends(get_store)) -> ProductWithMuseum:
    product = get_product(store, product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("/products", response_model=Product, status_code=201)
def create_product(req: ProductCreate, store: EntityStore = Depends(get_store)) -> Product:
    # The store does not check foreign references, so they are checked here.
    if store.get_museum(req.museum_id) is None:
        raise HTTPException(status_code=400, detail="Museum does not exist")
    if store.get_category(req.category_id) is None:
        raise HTTPException(status_code=400, detail="Category does not exist")
    product = store.create(EntityKind.PRODUCT, req)
    logger.info("Product %s created: %s", product.id, product.name)
    return product
