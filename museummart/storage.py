# museummart/storage.py
"""
In-memory entity store.

A single ``EntityStore`` owns the four collections (museums,
categories, products, cart items) and one identifier counter per
collection. Identifiers start at 1 and only ever grow; a deleted id is
never handed out again. Nothing is persisted: a process restart resets
everything, sample data and carts included.

The application builds one store at startup and hands it to the
routers through ``app.state`` (see ``deps.py``), so there is no
module-level mutable state here.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Iterator, List, Optional, Type

from pydantic import BaseModel

from .logging import get_logger
from .models import CartItem, Category, Museum, Product


logger = get_logger(__name__)


class EntityKind(str, Enum):
    MUSEUM = "museum"
    CATEGORY = "category"
    PRODUCT = "product"
    CART_ITEM = "cart_item"


_MODELS: Dict[EntityKind, Type[BaseModel]] = {
    EntityKind.MUSEUM: Museum,
    EntityKind.CATEGORY: Category,
    EntityKind.PRODUCT: Product,
    EntityKind.CART_ITEM: CartItem,
}

# Kinds whose records carry a creation timestamp set by the store.
_TIMESTAMPED = {EntityKind.PRODUCT, EntityKind.CART_ITEM}


class DuplicateSlugError(ValueError):
    """Raised when a category is created with a slug that is already taken."""


class ReferentialIntegrityError(RuntimeError):
    """A stored record points at a museum, category or product that does not exist.

    No exposed operation deletes museums, categories or products, so
    this indicates a broken invariant rather than a user error.
    """


class EntityStore:
    """Owner of every record and identifier counter.

    All public methods are atomic with respect to each other; callers
    that need several calls to behave as one (find-then-update) wrap
    them in ``with store.lock():``.
    """

    def __init__(self) -> None:
        self._records: Dict[EntityKind, Dict[int, BaseModel]] = {kind: {} for kind in EntityKind}
        self._next_ids: Dict[EntityKind, int] = {kind: 1 for kind in EntityKind}
        self._lock = threading.RLock()

    @contextmanager
    def lock(self) -> Iterator[None]:
        with self._lock:
            yield

    def create(self, kind: EntityKind, record: BaseModel) -> BaseModel:
        """Store ``record`` under the next identifier for ``kind``.

        Foreign references are not checked. Category slugs are the only
        uniqueness constraint enforced here.
        """
        model = _MODELS[kind]
        data = record.model_dump()
        with self._lock:
            if kind is EntityKind.CATEGORY and self.get_category_by_slug(data["slug"]) is not None:
                raise DuplicateSlugError(f"Category slug '{data['slug']}' already exists")

            new_id = self._next_ids[kind]
            data["id"] = new_id
            if kind in _TIMESTAMPED:
                data["created_at"] = datetime.now(timezone.utc)
            stored = model(**data)
            self._records[kind][new_id] = stored
            self._next_ids[kind] = new_id + 1

        logger.debug("Created %s %s", kind.value, new_id)
        return stored

    def get(self, kind: EntityKind, record_id: int) -> Optional[BaseModel]:
        with self._lock:
            return self._records[kind].get(record_id)

    def list(self, kind: EntityKind) -> List[BaseModel]:
        """All records of ``kind`` in insertion order."""
        with self._lock:
            return list(self._records[kind].values())

    def replace(self, kind: EntityKind, record: BaseModel) -> Optional[BaseModel]:
        """Swap the stored record with the same id for ``record``.

        Returns ``None`` (and stores nothing) when no such id exists.
        """
        record_id = getattr(record, "id")
        with self._lock:
            if record_id not in self._records[kind]:
                return None
            self._records[kind][record_id] = record
        return record

    def delete(self, kind: EntityKind, record_id: int) -> bool:
        with self._lock:
            return self._records[kind].pop(record_id, None) is not None

    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        with self._lock:
            return next(
                (c for c in self._records[EntityKind.CATEGORY].values() if c.slug == slug),
                None,
            )

    def count(self, kind: EntityKind) -> int:
        with self._lock:
            return len(self._records[kind])

    # -- typed shortcuts ----------------------------------------------------

    def get_museum(self, museum_id: int) -> Optional[Museum]:
        return self.get(EntityKind.MUSEUM, museum_id)

    def get_category(self, category_id: int) -> Optional[Category]:
        return self.get(EntityKind.CATEGORY, category_id)

    def get_raw_product(self, product_id: int) -> Optional[Product]:
        return self.get(EntityKind.PRODUCT, product_id)

    def get_cart_item(self, item_id: int) -> Optional[CartItem]:
        return self.get(EntityKind.CART_ITEM, item_id)
