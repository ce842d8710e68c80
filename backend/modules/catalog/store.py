"""
Catalog store.

An immutable, insertion-ordered mapping from product id to Product.
The store is built once at startup and handed to the query engine
and the deal ranking explicitly; nothing in the catalog module keeps
a process-wide catalog of its own.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import CatalogLoadError
from .models import Product

logger = logging.getLogger(__name__)


class CatalogStore(Mapping[str, Product]):
    """
    Read-only product catalog.

    Iteration order is the order products were supplied in, and it is
    stable across calls. Every lookup key equals the product's id.
    """

    def __init__(self, products: Iterable[Product]) -> None:
        by_id: dict[str, Product] = {}
        for product in products:
            if product.id in by_id:
                raise CatalogLoadError(f"Duplicate product id: {product.id}")
            by_id[product.id] = product
        self._products = MappingProxyType(by_id)

    def __getitem__(self, product_id: str) -> Product:
        return self._products[product_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def products(self) -> list[Product]:
        """All products in catalog order."""
        return list(self._products.values())

    def find(self, product_id: str) -> Optional[Product]:
        """Direct lookup by id, None when absent."""
        return self._products.get(product_id)

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]], source: str = "") -> "CatalogStore":
        """
        Build a store from raw product dicts (camelCase or snake_case keys).

        Args:
            records: Product records as parsed from the seed file
            source: Where the records came from, for error messages

        Raises:
            CatalogLoadError: If a record is malformed or an id repeats
        """
        products = []
        for index, record in enumerate(records):
            try:
                products.append(Product.model_validate(record))
            except PydanticValidationError as e:
                raise CatalogLoadError(
                    f"Invalid product record #{index}: {e}", source=source
                ) from e
        return cls(products)


def load_catalog(path: Path) -> CatalogStore:
    """
    Load the catalog from a YAML seed file.

    The file holds a top-level ``products`` list.

    Args:
        path: Path to the YAML file

    Returns:
        The populated CatalogStore

    Raises:
        CatalogLoadError: If the file is missing, not valid YAML, or
            contains invalid products
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise CatalogLoadError(f"Cannot read catalog file: {e}", source=str(path)) from e
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid catalog YAML: {e}", source=str(path)) from e

    if not isinstance(data, dict) or not isinstance(data.get("products"), list):
        raise CatalogLoadError("Catalog file must contain a 'products' list", source=str(path))

    store = CatalogStore.from_records(data["products"], source=str(path))
    logger.info("Loaded %d products from %s", len(store), path)
    return store
