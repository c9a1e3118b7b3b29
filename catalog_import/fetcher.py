"""
Catalog source retrieval.
Downloads the raw product list and validates each record once, at the boundary.
"""

import logging
from typing import Optional

import requests
from pydantic import ValidationError as PydanticValidationError

from catalog_import.config import DEFAULT_SOURCE_URL
from catalog_import.exceptions import FetchError, ValidationError
from catalog_import.models import RawCatalogItem

logger = logging.getLogger(__name__)


class CatalogFetcher:
    """Fetches the flat product list from a remote catalog endpoint."""

    def __init__(
        self,
        url: str = DEFAULT_SOURCE_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch(self) -> list[RawCatalogItem]:
        """
        Retrieve and validate the catalog.

        Returns:
            Records found under the ``products`` field, in source order

        Raises:
            FetchError: If the request, JSON parsing or envelope check fails
            ValidationError: If a record does not match RawCatalogItem
        """
        payload = self._get_json()

        records = payload.get("products") if isinstance(payload, dict) else None
        if not isinstance(records, list):
            raise FetchError(
                message="Catalog response has no 'products' list",
                endpoint=self.url,
            )

        items = [self._validate(record, idx) for idx, record in enumerate(records)]

        logger.info(
            f"Fetched {len(items)} catalog records",
            extra={"metrics": {"raw_product_count": len(items)}},
        )
        return items

    def _get_json(self):
        try:
            response = self._session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except (requests.RequestException, ValueError) as e:
            raise FetchError(
                message=f"Failed to fetch catalog from {self.url}: {e}",
                endpoint=self.url,
                original_exception=e,
            )

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(
                message=f"Catalog response is not valid JSON: {e}",
                endpoint=self.url,
                original_exception=e,
            )

    def _validate(self, record, idx: int) -> RawCatalogItem:
        product_id = record.get("id") if isinstance(record, dict) else None
        try:
            return RawCatalogItem.model_validate(record)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field_name = ".".join(str(part) for part in first["loc"]) or "record"
            raise ValidationError(
                message=f"Invalid catalog record at index {idx}: {first['msg']}",
                endpoint=self.url,
                product_id=str(product_id) if product_id is not None else None,
                field_name=field_name,
                actual=first.get("input"),
                original_exception=e,
            )
