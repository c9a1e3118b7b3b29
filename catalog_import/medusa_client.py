"""
Medusa admin REST API client implementing the CommerceBackend capabilities.

Endpoints used:
- GET  /admin/sales-channels?name=...
- GET  /admin/stock-locations
- POST /admin/product-categories            (one category per request)
- POST /admin/products/batch                 {"create": [...]}
- POST /admin/inventory-items/location-levels/batch  {"create": [...]}
"""

import logging
from typing import Any, Optional, Sequence

import requests

from catalog_import.exceptions import BackendCallError
from catalog_import.models import (
    CategoryInput,
    CreatedCategory,
    CreatedProduct,
    InventoryLevelInput,
    NormalizedProduct,
    SalesChannel,
    StockLocation,
)

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = "*variants,*variants.inventory_items"


class MedusaAdminClient:
    """Client for the Medusa admin API using a bearer token."""

    def __init__(
        self,
        base_url: str,
        api_token: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({
            "Authorization": f"Bearer {api_token}",
            "Content-Type": "application/json",
        })

    def list_sales_channels(self, name: str) -> list[SalesChannel]:
        data = self._request(
            "GET", "/admin/sales-channels", "list_sales_channels",
            params={"name": name},
        )
        return [SalesChannel.model_validate(c) for c in data.get("sales_channels", [])]

    def list_stock_locations(self) -> list[StockLocation]:
        data = self._request("GET", "/admin/stock-locations", "list_stock_locations")
        return [StockLocation.model_validate(s) for s in data.get("stock_locations", [])]

    def create_product_categories(
        self, categories: Sequence[CategoryInput]
    ) -> list[CreatedCategory]:
        created = []
        for category in categories:
            data = self._request(
                "POST", "/admin/product-categories", "create_product_categories",
                json=category.model_dump(mode="json"),
            )
            created.append(CreatedCategory.model_validate(data["product_category"]))
        return created

    def create_products(
        self, products: Sequence[NormalizedProduct]
    ) -> list[CreatedProduct]:
        data = self._request(
            "POST", "/admin/products/batch", "create_products",
            params={"fields": PRODUCT_FIELDS},
            json={"create": [p.to_payload() for p in products]},
        )
        return [CreatedProduct.model_validate(p) for p in data.get("created", [])]

    def create_inventory_levels(
        self, levels: Sequence[InventoryLevelInput]
    ) -> list[dict]:
        data = self._request(
            "POST", "/admin/inventory-items/location-levels/batch",
            "create_inventory_levels",
            json={"create": [level.to_payload() for level in levels]},
        )
        return data.get("created", [])

    def _request(self, method: str, path: str, operation: str, **kwargs) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise BackendCallError(
                message=f"{operation} request failed: {e}",
                operation=operation,
                original_exception=e,
            )

        if not response.ok:
            raise BackendCallError(
                message=f"{operation} returned HTTP {response.status_code}: {response.text[:200]}",
                operation=operation,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise BackendCallError(
                message=f"{operation} returned invalid JSON: {e}",
                operation=operation,
                status_code=response.status_code,
                original_exception=e,
            )
