"""
Product query engine.

Products are filtered in memory against a ``ProductFilters`` set and
then joined with their museum and category. Filtering never reorders:
results come back in store order, and ``sort_products`` is a separate
step for callers that want a particular ordering.

A product whose museum or category cannot be resolved is a broken
invariant (nothing deletes museums or categories), so the join raises
``ReferentialIntegrityError`` instead of dropping or half-filling the
record.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from ..logging import get_logger
from ..models import Product
from ..storage import EntityKind, EntityStore, ReferentialIntegrityError
from .schemas import ProductFilters, ProductWithMuseum, SortField


logger = get_logger(__name__)

Predicate = Callable[[Product], bool]


def _norm(s: Optional[str]) -> str:
    """Lowercase ``s``; ``None`` becomes an empty string. Whitespace is kept."""
    return (s or "").lower()


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle in _norm(haystack)


def _build_predicates(filters: ProductFilters) -> List[Predicate]:
    """Translate each active filter field into a predicate.

    Parameters
    ----------
    filters : ProductFilters
        The requested filter set. Fields left as ``None`` (or empty
        strings for the text filters) contribute no predicate.

    Returns
    -------
    List[Predicate]
        Predicates that must all hold for a product to match.
    """
    predicates: List[Predicate] = []

    if filters.museum_id is not None:
        museum_id = filters.museum_id
        predicates.append(lambda p: p.museum_id == museum_id)

    if filters.category_id is not None:
        category_id = filters.category_id
        predicates.append(lambda p: p.category_id == category_id)

    # Prices are stored as two-place decimals but compared as reals.
    if filters.price_min is not None:
        price_min = filters.price_min
        predicates.append(lambda p: float(p.price) >= price_min)

    if filters.price_max is not None:
        price_max = filters.price_max
        predicates.append(lambda p: float(p.price) <= price_max)

    material = _norm(filters.material)
    if material:
        predicates.append(lambda p: _contains(p.material, material))

    country = _norm(filters.country_of_origin)
    if country:
        predicates.append(lambda p: _contains(p.country_of_origin, country))

    if filters.in_stock is not None:
        in_stock = filters.in_stock
        predicates.append(lambda p: p.in_stock == in_stock)

    if filters.featured is not None:
        featured = filters.featured
        predicates.append(lambda p: p.featured == featured)

    term = _norm(filters.search)
    if term:
        predicates.append(
            lambda p: _contains(p.name, term)
            or _contains(p.description, term)
            or _contains(p.short_description, term)
        )

    return predicates


def join_product(store: EntityStore, product: Product) -> ProductWithMuseum:
    """Attach the museum and category records to ``product``."""
    museum = store.get_museum(product.museum_id)
    if museum is None:
        raise ReferentialIntegrityError(
            f"Product {product.id} references missing museum {product.museum_id}"
        )
    category = store.get_category(product.category_id)
    if category is None:
        raise ReferentialIntegrityError(
            f"Product {product.id} references missing category {product.category_id}"
        )
    return ProductWithMuseum(**product.model_dump(), museum=museum, category=category)


def list_products(
    store: EntityStore, filters: Optional[ProductFilters] = None
) -> List[ProductWithMuseum]:
    """Return every product matching all active filters, joined, in store order."""
    predicates = _build_predicates(filters) if filters is not None else []

    with store.lock():
        products = store.list(EntityKind.PRODUCT)
        matches = [p for p in products if all(pred(p) for pred in predicates)]
        joined = [join_product(store, p) for p in matches]

    logger.debug(
        "Product query with %d active filters matched %d of %d",
        len(predicates),
        len(joined),
        len(products),
    )
    return joined


def get_product(store: EntityStore, product_id: int) -> Optional[ProductWithMuseum]:
    """Return the joined product, or ``None`` when ``product_id`` is unknown."""
    with store.lock():
        product = store.get_raw_product(product_id)
        if product is None:
            return None
        return join_product(store, product)


def sort_products(items: List[ProductWithMuseum], sort: SortField = "default") -> List[ProductWithMuseum]:
    """Order query results for display.

    All orderings are stable: ``featured`` moves featured products to
    the front and otherwise keeps store order, and products with equal
    prices or timestamps keep their relative positions.
    """
    if sort == "featured":
        return sorted(items, key=lambda p: not p.featured)
    if sort == "price-asc":
        return sorted(items, key=lambda p: p.price)
    if sort == "price-desc":
        return sorted(items, key=lambda p: p.price, reverse=True)
    if sort == "newest":
        return sorted(items, key=lambda p: p.created_at, reverse=True)
    # 'default' uses store order (no additional sort)
    return list(items)
