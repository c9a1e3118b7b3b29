"""
Commerce backend capability boundary.

The importer only needs these five calls; any service that provides them
can be plugged in (the Medusa admin client, or a fake in tests).
"""

from typing import Protocol, Sequence

from catalog_import.models import (
    CategoryInput,
    CreatedCategory,
    CreatedProduct,
    InventoryLevelInput,
    NormalizedProduct,
    SalesChannel,
    StockLocation,
)


class CommerceBackend(Protocol):
    def list_sales_channels(self, name: str) -> list[SalesChannel]:
        """Return sales channels whose name matches ``name``."""
        ...

    def list_stock_locations(self) -> list[StockLocation]:
        ...

    def create_product_categories(
        self, categories: Sequence[CategoryInput]
    ) -> list[CreatedCategory]:
        ...

    def create_products(
        self, products: Sequence[NormalizedProduct]
    ) -> list[CreatedProduct]:
        """Create products; results must be in the same order as the input."""
        ...

    def create_inventory_levels(
        self, levels: Sequence[InventoryLevelInput]
    ) -> list:
        ...
