"""
Tests for the product query engine
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from museummart.catalog.schemas import ProductFilters
from museummart.catalog.store import get_product, list_products, sort_products
from museummart.models import ProductCreate
from museummart.storage import EntityKind, ReferentialIntegrityError


def _ids(items):
    return [p.id for p in items]


class TestJoin:
    """Products come back joined with museum and category"""

    def test_every_product_joins_its_references(self, store):
        for product in store.list(EntityKind.PRODUCT):
            joined = get_product(store, product.id)
            assert joined.museum.id == product.museum_id
            assert joined.category.id == product.category_id

    def test_get_product_missing(self, store):
        assert get_product(store, 999) is None

    def test_join_carries_full_records(self, store):
        joined = get_product(store, 3)
        assert joined.museum.name == "Louvre Museum"
        assert joined.category.slug == "scarves"
        assert joined.price == Decimal("68.00")

    def test_dangling_museum_fails_loudly(self, store):
        """A product pointing at a missing museum is an invariant break, not a skip."""
        orphan = store.create(
            EntityKind.PRODUCT,
            ProductCreate(
                name="Orphan",
                description="No museum",
                short_description="Orphan",
                price=Decimal("1.00"),
                image_url="https://example.com/o.jpg",
                museum_id=99,
                category_id=1,
            ),
        )

        with pytest.raises(ReferentialIntegrityError):
            get_product(store, orphan.id)
        with pytest.raises(ReferentialIntegrityError):
            list_products(store)


class TestFilters:
    """Conjunctive filtering"""

    def test_no_filters_returns_everything_in_store_order(self, store):
        assert _ids(list_products(store)) == [1, 2, 3, 4, 5, 6, 7, 8]
        assert _ids(list_products(store, ProductFilters())) == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_featured_partitions_catalogue(self, store):
        featured = list_products(store, ProductFilters(featured=True))
        regular = list_products(store, ProductFilters(featured=False))

        assert all(p.featured for p in featured)
        assert not any(p.featured for p in regular)
        assert sorted(_ids(featured) + _ids(regular)) == _ids(list_products(store))

    def test_price_bounds_are_inclusive(self, store):
        """24.95 and 45.00 sit exactly on the bounds and are kept."""
        items = list_products(store, ProductFilters(price_min=24.95, price_max=45))

        assert _ids(items) == [1, 2, 4, 6]
        assert all(24.95 <= float(p.price) <= 45 for p in items)

    def test_price_min_only(self, store):
        assert _ids(list_products(store, ProductFilters(price_min=68))) == [3, 5]

    def test_price_range_inverted_is_rejected(self):
        with pytest.raises(ValidationError):
            ProductFilters(price_min=50, price_max=10)

    def test_search_starry(self, store):
        items = list_products(store, ProductFilters(search="starry"))
        assert [p.name for p in items] == ["Van Gogh Starry Night Print"]

    def test_search_is_case_insensitive(self, store):
        assert _ids(list_products(store, ProductFilters(search="STARRY"))) == [1]

    def test_search_matches_short_description(self, store):
        """'postcard set' only appears in the short description of product 8."""
        assert _ids(list_products(store, ProductFilters(search="postcard set"))) == [8]

    def test_search_matches_description(self, store):
        assert _ids(list_products(store, ProductFilters(search="archival inks"))) == [1]

    def test_empty_search_is_ignored(self, store):
        assert len(list_products(store, ProductFilters(search=""))) == 8

    def test_whitespace_search_is_matched_literally(self, store):
        """Search terms are lowercased, not trimmed."""
        assert list_products(store, ProductFilters(search="   ")) == []
        assert _ids(list_products(store, ProductFilters(search=" starry "))) == [1]

    def test_material_substring(self, store):
        assert _ids(list_products(store, ProductFilters(material="cer"))) == [4, 5]

    def test_country_substring(self, store):
        assert _ids(list_products(store, ProductFilters(country_of_origin="usa"))) == [1, 4, 5, 6]

    def test_museum_and_category(self, store):
        assert _ids(list_products(store, ProductFilters(museum_id=1))) == [3, 7]
        assert _ids(list_products(store, ProductFilters(category_id=8))) == [2, 5]

    def test_museum_zero_is_a_real_filter(self, store):
        """0 is a value, not 'absent'."""
        assert list_products(store, ProductFilters(museum_id=0)) == []

    def test_in_stock(self, store):
        assert len(list_products(store, ProductFilters(in_stock=True))) == 8
        assert list_products(store, ProductFilters(in_stock=False)) == []

    def test_filters_combine_with_and(self, store):
        filters = ProductFilters(material="ceramic", featured=True, museum_id=2)
        assert _ids(list_products(store, filters)) == [4]

    def test_search_and_other_filters(self, store):
        """Search ORs over text fields but ANDs with everything else."""
        assert _ids(list_products(store, ProductFilters(search="replica"))) == [2, 5]
        assert _ids(list_products(store, ProductFilters(search="replica", museum_id=3))) == [2]


class TestSorting:
    """Presentation orderings"""

    def test_default_keeps_order(self, store):
        items = list(reversed(list_products(store)))
        assert _ids(sort_products(items)) == [8, 7, 6, 5, 4, 3, 2, 1]

    def test_featured_first_is_stable(self, store):
        items = list(reversed(list_products(store)))
        assert _ids(sort_products(items, "featured")) == [6, 5, 4, 3, 2, 1, 8, 7]

    def test_price_ascending(self, store):
        items = sort_products(list_products(store), "price-asc")
        assert items[0].id == 8
        assert [p.price for p in items] == sorted(p.price for p in items)

    def test_price_descending(self, store):
        items = sort_products(list_products(store), "price-desc")
        assert items[0].id == 5
        assert items[-1].id == 8

    def test_newest_first(self, store):
        new = store.create(
            EntityKind.PRODUCT,
            ProductCreate(
                name="Rosetta Stone Coaster",
                description="Stone coaster",
                short_description="Coaster",
                price=Decimal("9.50"),
                image_url="https://example.com/c.jpg",
                museum_id=3,
                category_id=11,
            ),
        )
        assert sort_products(list_products(store), "newest")[0].id == new.id
