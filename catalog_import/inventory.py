"""Inventory level construction for created products."""

from typing import Sequence

from catalog_import.config import DEFAULT_STOCK_QUANTITY
from catalog_import.models import CreatedProduct, InventoryLevelInput, RawCatalogItem


def build_inventory_levels(
    created_products: Sequence[CreatedProduct],
    raw_items: Sequence[RawCatalogItem],
    location_id: str,
    default_stock: int = DEFAULT_STOCK_QUANTITY,
) -> list[InventoryLevelInput]:
    """
    Pair each created product with the raw record at the same position.

    One level is built per variant that has at least one inventory item,
    using the first item. A missing or zero stock value falls back to
    ``default_stock``.
    """
    if len(created_products) != len(raw_items):
        raise ValueError(
            f"Created product count ({len(created_products)}) does not match "
            f"raw record count ({len(raw_items)})"
        )

    levels = []
    for product, raw in zip(created_products, raw_items):
        for variant in product.variants:
            if not variant.inventory_items:
                continue
            levels.append(InventoryLevelInput(
                inventory_item_id=variant.inventory_items[0].inventory_item_id,
                location_id=location_id,
                stocked_quantity=raw.stock or default_stock,
            ))
    return levels
