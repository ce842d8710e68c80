"""
Hot deal ranking.

A product qualifies when at least two platforms offer it. Savings are
the spread between the most and least expensive offer, expressed as a
percentage of the most expensive one.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .models import HotDeal, HotDealsResponse, PlatformOffer, Product
from .store import CatalogStore

DEFAULT_HOT_DEALS_LIMIT = 10

_ONE_DECIMAL = Decimal("0.1")


def savings_percentage(savings: float, max_price: float) -> float:
    """
    Savings as a percentage of ``max_price``, one decimal, halves rounded up.

    Zero when every offer is free.
    """
    if max_price <= 0:
        return 0.0
    exact = Decimal(savings / max_price * 100)
    return float(exact.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def best_offer(product: Product) -> Optional[PlatformOffer]:
    """First offer carrying the lowest price, None if there are no offers."""
    if not product.platforms:
        return None
    min_price = min(product.prices)
    return next(offer for offer in product.platforms if offer.price == min_price)


def compute_deal(product: Product) -> Optional[HotDeal]:
    """
    Derive savings fields for a product.

    Returns:
        The HotDeal, or None if the product has fewer than two offers
    """
    if len(product.platforms) < 2:
        return None

    prices = product.prices
    min_price = min(prices)
    max_price = max(prices)
    savings = max_price - min_price
    percentage = savings_percentage(savings, max_price)

    return HotDeal(
        **product.model_dump(),
        min_price=min_price,
        max_price=max_price,
        savings=savings,
        savings_percentage=percentage,
        best_platform=best_offer(product),
    )


def rank_hot_deals(
    store: CatalogStore,
    limit: int = DEFAULT_HOT_DEALS_LIMIT,
) -> HotDealsResponse:
    """
    Rank qualifying products by savings percentage.

    Ties are broken by product id so the ranking does not depend on
    catalog order.

    Args:
        store: The catalog to rank
        limit: How many deals to return

    Returns:
        The top deals and the number of qualifying products before
        truncation
    """
    deals = [deal for deal in map(compute_deal, store.products()) if deal is not None]
    deals.sort(key=lambda deal: (-deal.savings_percentage, deal.id))
    return HotDealsResponse(deals=deals[:limit], total_count=len(deals))
