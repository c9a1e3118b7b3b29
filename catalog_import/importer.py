"""
Catalog import pipeline.

Runs a one-shot, strictly sequential load:
fetch -> resolve prerequisites -> create categories -> transform ->
create products (batched) -> create inventory levels (batched) -> report.

Any failure is logged once here and re-raised. Nothing is rolled back:
batches created before a failure stay in the backend.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, TypeVar, Union

from catalog_import.backend import CommerceBackend
from catalog_import.batching import BatchJob, batch_count, iter_batches
from catalog_import.categories import create_categories, unique_category_names
from catalog_import.config import ImportSettings
from catalog_import.exceptions import (
    BackendCallError,
    CatalogImportError,
    ErrorContext,
    PrerequisiteError,
)
from catalog_import.fetcher import CatalogFetcher
from catalog_import.inventory import build_inventory_levels
from catalog_import.logging_config import (
    get_correlation_id,
    set_batch_id,
    set_correlation_id,
)
from catalog_import.models import (
    CreatedProduct,
    InventoryLevelInput,
    NormalizedProduct,
    RawCatalogItem,
    SalesChannel,
    StockLocation,
)
from catalog_import.transformer import ProductTransformer

T = TypeVar("T")


@dataclass
class Prerequisites:
    """Defaults every product and inventory level in the run is attached to."""
    sales_channel: SalesChannel
    stock_location: StockLocation


@dataclass
class ImportSummary:
    """Result of a completed import run."""
    product_count: int = 0
    inventory_level_count: int = 0
    product_batches: int = 0
    inventory_batches: int = 0
    category_names: list[str] = field(default_factory=list)
    correlation_id: str = ""
    duration_ms: float = 0.0

    @property
    def category_count(self) -> int:
        return len(self.category_names)

    def to_dict(self) -> dict:
        return {
            "product_count": self.product_count,
            "category_count": self.category_count,
            "category_names": list(self.category_names),
            "inventory_level_count": self.inventory_level_count,
            "product_batches": self.product_batches,
            "inventory_batches": self.inventory_batches,
            "correlation_id": self.correlation_id,
            "duration_ms": self.duration_ms,
        }


class CatalogImporter:
    """Imports a remote catalog into a commerce backend."""

    def __init__(
        self,
        backend: CommerceBackend,
        fetcher: Optional[CatalogFetcher] = None,
        settings: Optional[ImportSettings] = None,
        logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
    ):
        self.backend = backend
        self.settings = settings or ImportSettings()
        self.fetcher = fetcher or CatalogFetcher(
            self.settings.source_url,
            timeout=self.settings.request_timeout,
        )
        self.logger = logger or logging.getLogger(__name__)

    def run(self) -> ImportSummary:
        start_time = time.perf_counter()
        correlation_id = set_correlation_id()

        self.logger.info(f"Starting import of products from {self.fetcher.url}...")

        try:
            items = self.fetcher.fetch()
            self.logger.info(f"Found {len(items)} products to import")

            prerequisites = self.resolve_prerequisites()
            category_map = self.create_categories(items)

            transformer = ProductTransformer(
                category_map=category_map,
                sales_channel_id=prerequisites.sales_channel.id,
                eur_rate=self.settings.eur_rate,
            )
            products = transformer.transform_all(items)

            created = self.create_products(products)
            self.logger.info(f"Successfully created {len(created)} products")

            levels = build_inventory_levels(
                created,
                items,
                location_id=prerequisites.stock_location.id,
                default_stock=self.settings.default_stock,
            )
            self.logger.info(f"Creating {len(levels)} inventory levels...")
            inventory_batches = self.provision_inventory(levels)
        except CatalogImportError as e:
            if not e.context.correlation_id:
                e.context.correlation_id = correlation_id
            self.logger.error(
                f"Error importing products: {e.message}",
                extra={"error": e.to_dict()},
            )
            raise
        except Exception as e:
            self.logger.error(f"Error importing products: {e}", exc_info=True)
            raise
        finally:
            set_batch_id("")

        summary = ImportSummary(
            product_count=len(created),
            inventory_level_count=len(levels),
            product_batches=batch_count(len(products), self.settings.batch_size),
            inventory_batches=inventory_batches,
            category_names=unique_category_names(items),
            correlation_id=correlation_id,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        self.report(summary)
        return summary

    def resolve_prerequisites(self) -> Prerequisites:
        """
        Look up the default sales channel and stock location.

        Raises:
            PrerequisiteError: If either is missing
        """
        name = self.settings.sales_channel_name
        sales_channels = self._call_backend(
            "list_sales_channels", self.backend.list_sales_channels, name,
        )
        stock_locations = self._call_backend(
            "list_stock_locations", self.backend.list_stock_locations,
        )

        if not sales_channels:
            raise PrerequisiteError(
                message=f"{name} not found. Please run the main seed script first.",
                resource="sales_channel",
            )
        if not stock_locations:
            raise PrerequisiteError(
                message="No stock locations found. Please run the main seed script first.",
                resource="stock_location",
            )

        return Prerequisites(
            sales_channel=sales_channels[0],
            stock_location=stock_locations[0],
        )

    def create_categories(self, items: Sequence[RawCatalogItem]) -> dict[str, str]:
        return self._call_backend(
            "create_product_categories", create_categories, self.backend, items,
        )

    def create_products(
        self, products: Sequence[NormalizedProduct]
    ) -> list[CreatedProduct]:
        """
        Create products batch by batch, in order.

        The combined result lines up index-for-index with ``products``; a
        batch result of the wrong length aborts the run.
        """
        created: list[CreatedProduct] = []

        for batch in iter_batches(products, self.settings.batch_size):
            set_batch_id(f"products-{batch.index}")
            self.logger.info(f"Creating products batch {batch.label}")

            result = self._call_backend(
                "create_products", self.backend.create_products, batch.items,
                batch=batch,
            )
            if len(result) != len(batch):
                raise BackendCallError(
                    message=(
                        f"Backend returned {len(result)} products for a batch "
                        f"of {len(batch)}"
                    ),
                    operation="create_products",
                    context=self._batch_context(batch),
                )
            created.extend(result)

        return created

    def provision_inventory(self, levels: Sequence[InventoryLevelInput]) -> int:
        """Submit inventory levels batch by batch. Returns the batch count."""
        batches = 0

        for batch in iter_batches(levels, self.settings.batch_size):
            set_batch_id(f"inventory-{batch.index}")
            self.logger.info(f"Creating inventory batch {batch.label}")

            self._call_backend(
                "create_inventory_levels", self.backend.create_inventory_levels,
                batch.items, batch=batch,
            )
            batches += 1

        return batches

    def report(self, summary: ImportSummary) -> None:
        self.logger.info(
            f"Successfully imported {summary.product_count} products with "
            f"inventory from {self.fetcher.url} in {summary.duration_ms:.2f}ms",
            extra={"metrics": summary.to_dict()},
        )
        self.logger.info("Product categories imported:")
        for name in summary.category_names:
            self.logger.info(f"- {name}")

    def _call_backend(
        self,
        operation: str,
        func: Callable[..., T],
        *args,
        batch: Optional[BatchJob] = None,
    ) -> T:
        """Invoke a backend capability, wrapping foreign errors as BackendCallError."""
        try:
            return func(*args)
        except CatalogImportError as e:
            if batch is not None and e.context.batch_index is None:
                e.context.batch_index = batch.index
                e.context.batch_count = batch.total
            raise
        except Exception as e:
            raise BackendCallError(
                message=f"{operation} failed: {e}",
                operation=operation,
                context=self._batch_context(batch),
                original_exception=e,
            ) from e

    def _batch_context(self, batch: Optional[BatchJob]) -> ErrorContext:
        ctx = ErrorContext(correlation_id=get_correlation_id() or None)
        if batch is not None:
            ctx.batch_index = batch.index
            ctx.batch_count = batch.total
        return ctx


def import_catalog(
    backend: CommerceBackend,
    fetcher: Optional[CatalogFetcher] = None,
    settings: Optional[ImportSettings] = None,
    logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
) -> ImportSummary:
    """Run a full catalog import against ``backend``."""
    return CatalogImporter(backend, fetcher=fetcher, settings=settings, logger=logger).run()
