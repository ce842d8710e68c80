"""
Catalog module interface.

Route handlers depend on ICatalogService, not the concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    CategorySummary,
    HotDealsResponse,
    PlatformOffer,
    Product,
    SearchResult,
)


@runtime_checkable
class ICatalogService(Protocol):
    """
    Interface for read-only catalog queries.

    Every operation is synchronous and computed from the catalog on
    each call; implementations must not cache derived results.
    """

    def product_count(self) -> int:
        """Number of products in the catalog."""
        ...

    def list_categories(self) -> list[str]:
        """Distinct category names."""
        ...

    def list_categories_with_subcategories(self) -> list[CategorySummary]:
        """Each category with the distinct subcategories seen under it."""
        ...

    def list_subcategories(self) -> list[str]:
        """Distinct non-empty subcategory names."""
        ...

    def list_brands(self) -> list[str]:
        """Distinct brand names."""
        ...

    def list_platforms(self) -> list[str]:
        """Distinct platform names across all offers."""
        ...

    def list_product_names(self) -> list[str]:
        """Distinct product names."""
        ...

    def search(
        self,
        query: str = "",
        category: str = "",
        subcategory: str = "",
        brand: str = "",
        platform: str = "",
    ) -> SearchResult:
        """
        Filter the catalog and compute facets over the result.

        Empty filters impose no constraint. Never raises for an empty
        result.
        """
        ...

    def get_products_by_category(self, category: str) -> list[Product]:
        """Exact-match category filter; empty list when nothing matches."""
        ...

    def get_products_by_subcategory(self, subcategory: str) -> list[Product]:
        """Exact-match subcategory filter; empty list when nothing matches."""
        ...

    def get_product(self, product_id: str) -> Optional[Product]:
        """Direct lookup by id."""
        ...

    def legacy_search_by_name(self, name: str) -> list[PlatformOffer]:
        """
        Offers of the first product whose name contains ``name``.

        Raises:
            EmptyProductNameError: If ``name`` is blank
        """
        ...

    def hot_deals(self) -> HotDealsResponse:
        """Top products ranked by cross-platform savings."""
        ...
