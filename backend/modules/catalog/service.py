"""
Catalog query service.

Answers read-only questions about the catalog: distinct-value facets,
faceted search, direct lookups and the legacy name lookup. Every call
is a single linear scan over the store in catalog order.
"""

from collections.abc import Iterable
from typing import Optional

from .deals import DEFAULT_HOT_DEALS_LIMIT, rank_hot_deals
from .exceptions import EmptyProductNameError
from .interfaces import ICatalogService
from .models import (
    CategorySummary,
    HotDealsResponse,
    PlatformOffer,
    PriceRange,
    Product,
    SearchFilters,
    SearchResult,
)
from .store import CatalogStore


def _distinct(values: Iterable[Optional[str]]) -> list[str]:
    """Distinct non-empty values in first-seen order."""
    return list(dict.fromkeys(value for value in values if value))


def price_range(products: Iterable[Product]) -> PriceRange:
    """Min/max over every offer price; zeros when there are no prices."""
    prices = [price for product in products for price in product.prices]
    if not prices:
        return PriceRange(min=0, max=0)
    return PriceRange(min=min(prices), max=max(prices))


def matches_query(product: Product, query: str) -> bool:
    """Case-insensitive substring match on name, brand or subcategory."""
    term = query.lower()
    return (
        term in product.name.lower()
        or term in product.brand.lower()
        or (product.subcategory is not None and term in product.subcategory.lower())
    )


def offered_on(product: Product, platform: str) -> bool:
    """Whether any offer is from ``platform`` (case-insensitive)."""
    wanted = platform.lower()
    return any(offer.platform.lower() == wanted for offer in product.platforms)


class CatalogService(ICatalogService):
    """
    Implementation of the catalog query service.

    The store is injected so the service can be exercised against any
    catalog, not just the bundled seed data.
    """

    def __init__(self, store: CatalogStore, hot_deals_limit: int = DEFAULT_HOT_DEALS_LIMIT):
        self._store = store
        self._hot_deals_limit = hot_deals_limit

    @property
    def store(self) -> CatalogStore:
        return self._store

    # -------------------------------------------------------------------------
    # Facets
    # -------------------------------------------------------------------------

    def product_count(self) -> int:
        return len(self._store)

    def list_categories(self) -> list[str]:
        return _distinct(p.category for p in self._store.products())

    def list_categories_with_subcategories(self) -> list[CategorySummary]:
        by_category: dict[str, dict[str, None]] = {}
        for product in self._store.products():
            subcategories = by_category.setdefault(product.category, {})
            if product.subcategory:
                subcategories[product.subcategory] = None
        return [
            CategorySummary(category=category, subcategories=list(subcategories))
            for category, subcategories in by_category.items()
        ]

    def list_subcategories(self) -> list[str]:
        return _distinct(p.subcategory for p in self._store.products())

    def list_brands(self) -> list[str]:
        return _distinct(p.brand for p in self._store.products())

    def list_platforms(self) -> list[str]:
        return _distinct(
            offer.platform for p in self._store.products() for offer in p.platforms
        )

    def list_product_names(self) -> list[str]:
        return _distinct(p.name for p in self._store.products())

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def search(
        self,
        query: str = "",
        category: str = "",
        subcategory: str = "",
        brand: str = "",
        platform: str = "",
    ) -> SearchResult:
        """
        Filter the catalog by every supplied criterion (AND).

        Facets and the price range describe the filtered products, not
        the whole catalog.
        """
        results = self._store.products()

        if query:
            results = [p for p in results if matches_query(p, query)]
        if category:
            results = [p for p in results if p.category == category]
        if subcategory:
            results = [p for p in results if p.subcategory == subcategory]
        if brand:
            results = [p for p in results if p.brand.lower() == brand.lower()]
        if platform:
            results = [p for p in results if offered_on(p, platform)]

        return SearchResult(
            products=results,
            total_count=len(results),
            categories=_distinct(p.category for p in results),
            subcategories=_distinct(p.subcategory for p in results),
            brands=_distinct(p.brand for p in results),
            price_range=price_range(results),
            filters=SearchFilters(
                query=query,
                category=category,
                subcategory=subcategory,
                brand=brand,
                platform=platform,
            ),
        )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_products_by_category(self, category: str) -> list[Product]:
        return [p for p in self._store.products() if p.category == category]

    def get_products_by_subcategory(self, subcategory: str) -> list[Product]:
        return [p for p in self._store.products() if p.subcategory == subcategory]

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._store.find(product_id)

    def legacy_search_by_name(self, name: str) -> list[PlatformOffer]:
        """
        Platform offers of the first product whose name contains ``name``.

        Only the name is matched. "First" is catalog order, so the
        answer is stable for a given catalog.
        """
        term = (name or "").strip().lower()
        if not term:
            raise EmptyProductNameError()

        for product in self._store.products():
            if term in product.name.lower():
                return list(product.platforms)
        return []

    def hot_deals(self) -> HotDealsResponse:
        return rank_hot_deals(self._store, limit=self._hot_deals_limit)
