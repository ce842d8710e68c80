"""
Catalog module.

Serves the static product catalog: facets, faceted search, direct
lookups and hot-deal ranking.

Public API:
- ICatalogService: Interface for catalog queries
- CatalogStore / load_catalog: The immutable product store
- rank_hot_deals: Savings ranking over a store
- Product, PlatformOffer, SearchResult, HotDeal: Wire models
"""

from .interfaces import ICatalogService
from .models import (
    CategorySummary,
    HotDeal,
    HotDealsResponse,
    NutritionalInfo,
    PlatformOffer,
    PriceRange,
    Product,
    SearchFilters,
    SearchResult,
)
from .store import CatalogStore, load_catalog
from .deals import rank_hot_deals
from .exceptions import (
    CatalogLoadError,
    EmptyProductNameError,
)

__all__ = [
    # Interface
    "ICatalogService",
    # Store
    "CatalogStore",
    "load_catalog",
    "rank_hot_deals",
    # Models
    "CategorySummary",
    "HotDeal",
    "HotDealsResponse",
    "NutritionalInfo",
    "PlatformOffer",
    "PriceRange",
    "Product",
    "SearchFilters",
    "SearchResult",
    # Exceptions
    "CatalogLoadError",
    "EmptyProductNameError",
]
