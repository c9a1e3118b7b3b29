"""
Catalog Import - one-shot product catalog load into a commerce backend.

Fetches a flat product list from a remote catalog source, reshapes it into
categories, products, variants, prices and inventory levels, and submits
them to the backend in fixed-size batches.
"""

from catalog_import.backend import CommerceBackend
from catalog_import.config import ImportSettings
from catalog_import.exceptions import (
    BackendCallError,
    CatalogImportError,
    ConfigurationError,
    FetchError,
    PrerequisiteError,
    ValidationError,
)
from catalog_import.fetcher import CatalogFetcher
from catalog_import.importer import CatalogImporter, ImportSummary, import_catalog
from catalog_import.medusa_client import MedusaAdminClient
from catalog_import.models import NormalizedProduct, RawCatalogItem
from catalog_import.transformer import ProductTransformer

__all__ = [
    "import_catalog",
    "CatalogImporter",
    "ImportSummary",
    "ImportSettings",
    "CatalogFetcher",
    "CommerceBackend",
    "MedusaAdminClient",
    "ProductTransformer",
    "RawCatalogItem",
    "NormalizedProduct",
    "CatalogImportError",
    "FetchError",
    "ValidationError",
    "PrerequisiteError",
    "BackendCallError",
    "ConfigurationError",
]

__version__ = "1.0.0"
