"""
Runtime settings for an import run.

Defaults reproduce the fixed behavior of the importer; environment
variables override them for deployments that need to.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from catalog_import.exceptions import ConfigurationError

DEFAULT_SOURCE_URL = "https://dummyjson.com/products"
DEFAULT_SALES_CHANNEL_NAME = "Default Sales Channel"
BATCH_SIZE = 10
EUR_CONVERSION_RATE = 0.85
DEFAULT_STOCK_QUANTITY = 100

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ImportSettings:
    """Settings consumed by the fetcher, transformer and importer."""
    source_url: str = DEFAULT_SOURCE_URL
    backend_url: Optional[str] = None
    api_token: Optional[str] = None
    batch_size: int = BATCH_SIZE
    eur_rate: float = EUR_CONVERSION_RATE
    default_stock: int = DEFAULT_STOCK_QUANTITY
    sales_channel_name: str = DEFAULT_SALES_CHANNEL_NAME
    request_timeout: Optional[float] = None
    log_level: str = "INFO"
    json_logs: bool = False

    def __post_init__(self):
        if self.batch_size < 1:
            raise ConfigurationError(
                message=f"Batch size must be a positive integer, got {self.batch_size}",
                config_key="batch_size",
            )
        if self.eur_rate < 0:
            raise ConfigurationError(
                message=f"EUR conversion rate must not be negative, got {self.eur_rate}",
                config_key="eur_rate",
            )
        if self.default_stock < 0:
            raise ConfigurationError(
                message=f"Default stock quantity must not be negative, got {self.default_stock}",
                config_key="default_stock",
            )
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigurationError(
                message=f"Request timeout must be positive, got {self.request_timeout}",
                config_key="request_timeout",
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ImportSettings":
        """Build settings from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        return cls(
            source_url=env.get("CATALOG_SOURCE_URL", DEFAULT_SOURCE_URL),
            backend_url=env.get("MEDUSA_BACKEND_URL"),
            api_token=env.get("MEDUSA_API_TOKEN"),
            batch_size=_parse_number(env, "IMPORT_BATCH_SIZE", BATCH_SIZE, int),
            eur_rate=_parse_number(env, "EUR_CONVERSION_RATE", EUR_CONVERSION_RATE, float),
            default_stock=_parse_number(env, "DEFAULT_STOCK_QUANTITY", DEFAULT_STOCK_QUANTITY, int),
            request_timeout=_parse_number(env, "REQUEST_TIMEOUT", None, float),
            log_level=env.get("LOG_LEVEL", "INFO"),
            json_logs=env.get("JSON_LOGS", "").lower() in _TRUTHY,
        )


def _parse_number(env: Mapping[str, str], key: str, default, cast):
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(
            message=f"Invalid value for {key}: {raw!r}",
            config_key=key,
        )
