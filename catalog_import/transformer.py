"""
Transformer module for converting raw catalog records to the commerce product schema.
Pure mapping: no backend calls happen here.
"""

import logging
import math
import re
from typing import Optional

from catalog_import.config import EUR_CONVERSION_RATE
from catalog_import.models import (
    IdReference,
    ImageInput,
    NormalizedProduct,
    PriceInput,
    ProductOptionInput,
    RawCatalogItem,
    VariantInput,
)

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def make_handle(text: str) -> str:
    """
    Convert text to a URL-safe handle.

    Lowercases, collapses every run of characters outside ``[a-z0-9]`` into
    a single hyphen and strips leading/trailing hyphens. Applying it to an
    existing handle returns the handle unchanged.
    """
    if not text:
        return ""
    return _NON_ALNUM.sub("-", text.lower()).strip("-")


def to_minor_units(amount: float) -> int:
    """Convert a major-unit amount to cents, rounding halves up."""
    return int(math.floor(amount * 100 + 0.5))


class ProductTransformer:
    """
    Transforms raw catalog records into NormalizedProduct instances.

    Every product gets one "Default" option, one variant priced in USD and
    EUR, and a reference to the run's sales channel.
    """

    def __init__(
        self,
        category_map: dict[str, str],
        sales_channel_id: str,
        eur_rate: float = EUR_CONVERSION_RATE,
    ):
        self.category_map = category_map
        self.sales_channel_id = sales_channel_id
        self.eur_rate = eur_rate

    def transform_all(self, items: list[RawCatalogItem]) -> list[NormalizedProduct]:
        """Transform every record, preserving source order one-to-one."""
        products = [self.transform(item) for item in items]
        logger.info(f"Transformed {len(products)} products")
        return products

    def transform(self, item: RawCatalogItem) -> NormalizedProduct:
        dimensions = item.dimensions

        return NormalizedProduct(
            title=item.title,
            subtitle=item.brand or "",
            description=item.description,
            handle=make_handle(item.title),
            thumbnail=item.thumbnail,
            images=self._extract_images(item),
            options=[ProductOptionInput(title="Default", values=["Default"])],
            variants=[self._build_variant(item)],
            sales_channels=[IdReference(id=self.sales_channel_id)],
            categories=self._resolve_category(item.category),
            weight=item.weight or 0,
            length=(dimensions.depth if dimensions else None) or 0,
            width=(dimensions.width if dimensions else None) or 0,
            height=(dimensions.height if dimensions else None) or 0,
        )

    def _build_variant(self, item: RawCatalogItem) -> VariantInput:
        return VariantInput(
            sku=item.sku or f"SKU-{item.id}",
            prices=[
                PriceInput(currency_code="usd", amount=to_minor_units(item.price)),
                PriceInput(
                    currency_code="eur",
                    amount=to_minor_units(item.price * self.eur_rate),
                ),
            ],
        )

    def _extract_images(self, item: RawCatalogItem) -> list[ImageInput]:
        """Source image list, or the thumbnail when the list is absent or empty."""
        urls = [url for url in item.images or [] if url]
        if not urls and item.thumbnail:
            urls = [item.thumbnail]
        return [ImageInput(url=url) for url in urls]

    def _resolve_category(self, name: Optional[str]) -> list[IdReference]:
        if name and name in self.category_map:
            return [IdReference(id=self.category_map[name])]
        return []
