"""
Catalog API endpoints.

Read-only product, facet, search and hot-deal endpoints. These live at
the root path (not under /api) because the storefront calls them there.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_catalog_service

from .interfaces import ICatalogService
from .models import (
    CategorySummary,
    HotDealsResponse,
    PlatformOffer,
    Product,
    SearchResult,
)
from .exceptions import EmptyProductNameError

router = APIRouter()


@router.get("/categories", response_model=list[CategorySummary])
async def list_categories(
    service: ICatalogService = Depends(get_catalog_service),
) -> list[CategorySummary]:
    """
    List every category with its subcategories.
    """
    return service.list_categories_with_subcategories()


@router.get("/subcategories", response_model=list[str])
async def list_subcategories(
    service: ICatalogService = Depends(get_catalog_service),
) -> list[str]:
    return service.list_subcategories()


@router.get("/brands", response_model=list[str])
async def list_brands(
    service: ICatalogService = Depends(get_catalog_service),
) -> list[str]:
    return service.list_brands()


@router.get("/platforms", response_model=list[str])
async def list_platforms(
    service: ICatalogService = Depends(get_catalog_service),
) -> list[str]:
    return service.list_platforms()


@router.get("/hot-deals", response_model=HotDealsResponse)
async def hot_deals(
    service: ICatalogService = Depends(get_catalog_service),
) -> HotDealsResponse:
    """
    Top products by cross-platform savings percentage.

    totalCount is the number of qualifying products, not the number
    returned.
    """
    return service.hot_deals()


@router.get("/products/category/{category}", response_model=list[Product])
async def products_by_category(
    category: str,
    service: ICatalogService = Depends(get_catalog_service),
) -> list[Product]:
    products = service.get_products_by_category(category)
    if not products:
        raise HTTPException(status_code=404, detail="No products found in this category.")
    return products


@router.get("/products/subcategory/{subcategory}", response_model=list[Product])
async def products_by_subcategory(
    subcategory: str,
    service: ICatalogService = Depends(get_catalog_service),
) -> list[Product]:
    products = service.get_products_by_subcategory(subcategory)
    if not products:
        raise HTTPException(status_code=404, detail="No products found in this subcategory.")
    return products


@router.get("/products/search", response_model=SearchResult)
async def search_products(
    q: str = Query(default="", description="Matches name, brand or subcategory"),
    category: str = Query(default="", description="Exact category"),
    subcategory: str = Query(default="", description="Exact subcategory"),
    brand: str = Query(default="", description="Brand, case-insensitive"),
    platform: str = Query(default="", description="Platform, case-insensitive"),
    service: ICatalogService = Depends(get_catalog_service),
) -> SearchResult:
    """
    Faceted product search.

    Always 200: an empty result comes back with empty facets and a
    zero price range.
    """
    return service.search(
        query=q,
        category=category,
        subcategory=subcategory,
        brand=brand,
        platform=platform,
    )


@router.get("/products/list", response_model=list[str])
async def list_product_names(
    service: ICatalogService = Depends(get_catalog_service),
) -> list[str]:
    """Distinct product names."""
    return service.list_product_names()


@router.get("/products/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    service: ICatalogService = Depends(get_catalog_service),
) -> Product:
    product = service.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found.")
    return product


@router.get("/products", response_model=list[PlatformOffer])
async def legacy_product_offers(
    name: str = Query(default="", description="Substring of the product name"),
    service: ICatalogService = Depends(get_catalog_service),
) -> list[PlatformOffer]:
    """
    Platform comparison for the first product whose name matches.

    Kept for older storefront builds.
    """
    try:
        return service.legacy_search_by_name(name)
    except EmptyProductNameError as e:
        raise HTTPException(status_code=400, detail=e.message)
