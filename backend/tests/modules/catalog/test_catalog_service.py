"""Tests for the catalog query service."""

import pytest

from modules.catalog.exceptions import EmptyProductNameError
from modules.catalog.service import CatalogService, price_range
from modules.catalog.store import CatalogStore, load_catalog
from shared.config import DEFAULT_CATALOG_PATH

from tests.conftest import make_product


@pytest.fixture(scope="module")
def bundled_service() -> CatalogService:
    return CatalogService(load_catalog(DEFAULT_CATALOG_PATH))


class TestFacets:
    def test_list_categories_distinct(self, catalog_service, sample_store):
        """Categories have no duplicates and all come from products."""
        categories = catalog_service.list_categories()
        assert len(categories) == len(set(categories))
        assert set(categories) == {p.category for p in sample_store.values()}

    def test_list_categories_bundled(self, bundled_service):
        categories = bundled_service.list_categories()
        assert len(categories) == 12
        assert categories[0] == "Grocery"
        assert "Grains" in categories

    def test_categories_with_subcategories(self, catalog_service):
        summaries = {s.category: s.subcategories for s in catalog_service.list_categories_with_subcategories()}
        assert summaries == {
            "Grocery": ["Dairy"],
            "Electronics": ["Mobile Phones"],
            "Grains": [],
        }

    def test_list_subcategories_skips_missing(self, catalog_service):
        assert catalog_service.list_subcategories() == ["Dairy", "Mobile Phones"]

    def test_list_brands(self, catalog_service):
        assert catalog_service.list_brands() == ["Amul", "Mother Dairy", "Apple", "India Gate"]

    def test_list_platforms_across_products(self, catalog_service):
        assert set(catalog_service.list_platforms()) == {"Zepto", "Blinkit", "Instamart", "Amazon"}

    def test_list_product_names_distinct(self, catalog_service):
        assert catalog_service.list_product_names() == ["Milk", "Cheese Slices", "Phone", "Basmati Rice"]

    def test_product_count(self, catalog_service):
        assert catalog_service.product_count() == 5


class TestSearch:
    def test_no_filters_returns_whole_catalog(self, catalog_service, sample_store):
        """Empty filters impose no constraint and keep catalog order."""
        first = catalog_service.search()
        second = catalog_service.search()
        assert [p.id for p in first.products] == list(sample_store)
        assert [p.id for p in first.products] == [p.id for p in second.products]
        assert first.total_count == 5

    def test_query_matches_name_case_insensitive(self, catalog_service):
        result = catalog_service.search(query="MILK")
        assert [p.id for p in result.products] == ["milk_a", "milk_b"]

    def test_query_matches_brand(self, catalog_service):
        result = catalog_service.search(query="amul")
        assert [p.id for p in result.products] == ["milk_a", "cheese"]

    def test_query_matches_subcategory(self, catalog_service):
        result = catalog_service.search(query="mobile")
        assert [p.id for p in result.products] == ["phone"]

    def test_query_milk_on_bundled_catalog(self, bundled_service):
        """Every hit contains 'milk' in its name, brand or subcategory."""
        result = bundled_service.search(query="milk")
        assert result.total_count == 2
        for product in result.products:
            haystack = " ".join(filter(None, [product.name, product.brand, product.subcategory]))
            assert "milk" in haystack.lower()

    def test_category_is_case_sensitive(self, catalog_service):
        assert catalog_service.search(category="Grocery").total_count == 3
        assert catalog_service.search(category="grocery").total_count == 0

    def test_subcategory_exact(self, catalog_service):
        assert [p.id for p in catalog_service.search(subcategory="Mobile Phones").products] == ["phone"]
        assert catalog_service.search(subcategory="Mobile").total_count == 0

    def test_brand_case_insensitive_exact(self, catalog_service):
        assert catalog_service.search(brand="AMUL").total_count == 2
        assert catalog_service.search(brand="Amu").total_count == 0

    def test_platform_case_insensitive(self, catalog_service):
        result = catalog_service.search(platform="amazon")
        assert [p.id for p in result.products] == ["phone"]

    def test_filters_are_conjunctive(self, catalog_service):
        result = catalog_service.search(query="milk", brand="amul", platform="blinkit")
        assert [p.id for p in result.products] == ["milk_a"]

    def test_facets_describe_filtered_result(self, catalog_service):
        result = catalog_service.search(brand="Amul")
        assert result.categories == ["Grocery"]
        assert result.subcategories == ["Dairy"]
        assert result.brands == ["Amul"]

    def test_price_range_bounds_every_price(self, catalog_service):
        result = catalog_service.search(category="Grocery")
        prices = [o.price for p in result.products for o in p.platforms]
        assert result.price_range.min == 50
        assert result.price_range.max == 120
        assert all(result.price_range.min <= price <= result.price_range.max for price in prices)

    def test_empty_result(self, catalog_service):
        """No matches is a valid result with empty facets."""
        result = catalog_service.search(query="xyz-no-match")
        assert result.products == []
        assert result.total_count == 0
        assert result.categories == []
        assert result.brands == []
        assert result.price_range.min == 0
        assert result.price_range.max == 0

    def test_filters_echoed(self, catalog_service):
        result = catalog_service.search(query="milk", platform="Zepto")
        assert result.filters.query == "milk"
        assert result.filters.platform == "Zepto"
        assert result.filters.brand == ""

    def test_products_without_offers_do_not_break_price_range(self):
        store = CatalogStore.from_records([
            make_product("empty", []),
            make_product("milk", [40, 45]),
        ])
        result = CatalogService(store).search()
        assert result.price_range.min == 40
        assert result.price_range.max == 45
        assert price_range([store["empty"]]).max == 0


class TestLookups:
    def test_products_by_category(self, catalog_service):
        assert [p.id for p in catalog_service.get_products_by_category("Grains")] == ["rice"]

    def test_products_by_category_empty(self, catalog_service):
        assert catalog_service.get_products_by_category("Toys") == []

    def test_products_by_subcategory(self, catalog_service):
        assert [p.id for p in catalog_service.get_products_by_subcategory("Dairy")] == ["milk_a", "milk_b", "cheese"]
        assert catalog_service.get_products_by_subcategory("dairy") == []

    def test_get_product(self, catalog_service):
        assert catalog_service.get_product("cheese").brand == "Amul"
        assert catalog_service.get_product("unknown") is None

    def test_get_product_idempotent(self, catalog_service):
        """Repeated lookups return identical data."""
        assert catalog_service.get_product("milk_a") == catalog_service.get_product("milk_a")


class TestLegacySearchByName:
    def test_returns_first_match_offers(self, catalog_service):
        offers = catalog_service.legacy_search_by_name("milk")
        assert [(o.platform, o.price) for o in offers] == [
            ("Zepto", 52), ("Blinkit", 55), ("Instamart", 54),
        ]

    def test_trims_and_ignores_case(self, catalog_service):
        assert catalog_service.legacy_search_by_name("  MILK ") == catalog_service.legacy_search_by_name("milk")

    def test_matches_name_only(self, catalog_service):
        """Brand and subcategory are not consulted."""
        assert catalog_service.legacy_search_by_name("amul") == []
        assert catalog_service.legacy_search_by_name("dairy") == []

    def test_no_match_returns_empty(self, catalog_service):
        assert catalog_service.legacy_search_by_name("xyz-no-match") == []

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, catalog_service, name):
        with pytest.raises(EmptyProductNameError):
            catalog_service.legacy_search_by_name(name)

    def test_bundled_first_milk(self, bundled_service):
        offers = bundled_service.legacy_search_by_name("milk")
        assert [o.price for o in offers] == [52, 55, 54]
