"""Category deduplication and creation."""

import logging
from typing import Iterable

from catalog_import.backend import CommerceBackend
from catalog_import.models import CategoryInput, RawCatalogItem
from catalog_import.transformer import make_handle

logger = logging.getLogger(__name__)


def unique_category_names(items: Iterable[RawCatalogItem]) -> list[str]:
    """Distinct non-empty category names, in first-seen order."""
    return list(dict.fromkeys(item.category for item in items if item.category))


def build_category_inputs(names: Iterable[str]) -> list[CategoryInput]:
    # Dedup is by exact name; two names may share a handle.
    return [CategoryInput(name=name, handle=make_handle(name)) for name in names]


def create_categories(
    backend: CommerceBackend,
    items: Iterable[RawCatalogItem],
) -> dict[str, str]:
    """
    Create one category per distinct name in a single backend call.

    Returns:
        Mapping of category name to created category id
    """
    names = unique_category_names(items)
    logger.info(f"Creating {len(names)} product categories...")

    if not names:
        return {}

    created = backend.create_product_categories(build_category_inputs(names))
    return {category.name: category.id for category in created}
