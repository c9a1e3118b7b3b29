"""Command-line entry point for a one-shot catalog import."""

import argparse
import sys
from dataclasses import replace
from typing import Optional, Sequence

__all__ = ["main", "parse_args"]

from catalog_import.config import ImportSettings
from catalog_import.exceptions import CatalogImportError, ConfigurationError
from catalog_import.fetcher import CatalogFetcher
from catalog_import.importer import import_catalog
from catalog_import.logging_config import configure_logging
from catalog_import.medusa_client import MedusaAdminClient

EXIT_OK = 0
EXIT_IMPORT_FAILED = 1
EXIT_CONFIG_ERROR = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="catalog-import",
        description="Import a remote product catalog into a Medusa backend.",
    )
    parser.add_argument("--source-url", help="Catalog endpoint (env: CATALOG_SOURCE_URL)")
    parser.add_argument("--backend-url", help="Medusa backend base URL (env: MEDUSA_BACKEND_URL)")
    parser.add_argument("--api-token", help="Medusa admin API token (env: MEDUSA_API_TOKEN)")
    parser.add_argument("--batch-size", type=int, help="Records per backend call (default: 10)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--json-logs", action="store_true", default=None,
                        help="Emit structured JSON log lines")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> ImportSettings:
    """Environment settings overridden by any flags given on the command line."""
    settings = ImportSettings.from_env()
    overrides = {
        "source_url": args.source_url,
        "backend_url": args.backend_url,
        "api_token": args.api_token,
        "batch_size": args.batch_size,
        "log_level": args.log_level,
        "json_logs": args.json_logs,
    }
    settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})

    if not settings.backend_url:
        raise ConfigurationError(
            message="Backend URL is required (--backend-url or MEDUSA_BACKEND_URL)",
            config_key="backend_url",
        )
    if not settings.api_token:
        raise ConfigurationError(
            message="API token is required (--api-token or MEDUSA_API_TOKEN)",
            config_key="api_token",
        )
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = build_settings(args)
    except ConfigurationError as e:
        configure_logging().error(
            f"Configuration error: {e.message}",
            extra={"error": e.to_dict()},
        )
        return EXIT_CONFIG_ERROR

    logger = configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    backend = MedusaAdminClient(
        settings.backend_url,
        settings.api_token,
        timeout=settings.request_timeout,
    )
    fetcher = CatalogFetcher(settings.source_url, timeout=settings.request_timeout)

    try:
        import_catalog(backend, fetcher=fetcher, settings=settings, logger=logger)
    except CatalogImportError:
        # Already logged by the importer.
        return EXIT_IMPORT_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
