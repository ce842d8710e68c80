"""
Catalog module data models.

Products are immutable once loaded. All wire types serialize with
camelCase keys (packageSize, unitPrice, deliveryTime, ...).
"""

from typing import Optional
from pydantic import ConfigDict, Field

from shared.models import CamelModel


class FrozenCamelModel(CamelModel):
    """Immutable camelCase model for catalog records."""

    model_config = ConfigDict(frozen=True)


class NutritionalInfo(FrozenCamelModel):
    """Per-100g nutrition facts for grocery items."""

    calories: float
    protein: float
    fat: float
    carbs: float


class PlatformOffer(FrozenCamelModel):
    """One delivery platform's price and availability for a product."""

    platform: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    available: bool = True
    delivery_time: str = Field(default="", description="Display only; meaningless when unavailable")


class Product(FrozenCamelModel):
    """
    A catalog product.

    Platform offers are kept in their listed order; that order carries
    no ranking meaning.
    """

    id: str = Field(..., min_length=1)
    name: str
    brand: str
    category: str
    subcategory: Optional[str] = None
    package_size: str = ""
    unit_price: float = 0
    unit: str = ""
    nutritional_info: Optional[NutritionalInfo] = None
    platforms: tuple[PlatformOffer, ...] = ()

    @property
    def prices(self) -> list[float]:
        """Prices of every platform offer, in listed order."""
        return [offer.price for offer in self.platforms]


class CategorySummary(CamelModel):
    """A category with the distinct subcategories seen under it."""

    category: str
    subcategories: list[str] = Field(default_factory=list)


class PriceRange(CamelModel):
    """Lowest and highest platform price in a result set."""

    min: float = 0
    max: float = 0


class SearchFilters(CamelModel):
    """Echo of the filters a search was run with."""

    query: str = ""
    category: str = ""
    subcategory: str = ""
    brand: str = ""
    platform: str = ""


class SearchResult(CamelModel):
    """Filtered products plus facets computed over the filtered set."""

    products: list[Product]
    total_count: int
    categories: list[str]
    subcategories: list[str]
    brands: list[str]
    price_range: PriceRange
    filters: SearchFilters


class HotDeal(Product):
    """A product augmented with its cross-platform savings."""

    min_price: float
    max_price: float
    savings: float
    savings_percentage: float
    best_platform: Optional[PlatformOffer] = None


class HotDealsResponse(CamelModel):
    """Top deals plus the number of qualifying products before truncation."""

    deals: list[HotDeal]
    total_count: int
