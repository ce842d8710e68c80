"""
Catalog module exceptions.
"""

from shared.exceptions import (
    PriceBiteError,
    ValidationError,
)


class CatalogLoadError(PriceBiteError):
    """Raised when the seed catalog cannot be read or is inconsistent."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(
            message,
            code="CATALOG_LOAD_FAILED",
            details={"source": source},
        )


class EmptyProductNameError(ValidationError):
    """Raised when a name lookup is given a blank name."""

    def __init__(self):
        super().__init__(
            "Please provide a product name.",
            code="PRODUCT_NAME_REQUIRED",
        )
