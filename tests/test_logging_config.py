"""Tests for logging configuration."""

import json
import logging

from catalog_import.logging_config import (
    StructuredJsonFormatter,
    get_batch_id,
    get_correlation_id,
    set_batch_id,
    set_correlation_id,
)


def _record(msg="hello", **extra):
    record = logging.LogRecord("catalog_import.test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestContextIds:

    def test_set_correlation_id_generates(self):
        cid = set_correlation_id()
        assert cid
        assert get_correlation_id() == cid

    def test_set_explicit_ids(self):
        set_correlation_id("run-1")
        set_batch_id("products-2")

        assert get_correlation_id() == "run-1"
        assert get_batch_id() == "products-2"
        set_batch_id("")


class TestStructuredJsonFormatter:

    def test_format_includes_context(self):
        set_correlation_id("run-42")
        set_batch_id("inventory-1")

        line = StructuredJsonFormatter("catalog-import").format(
            _record(metrics={"product_count": 3}, error={"error_type": "FetchError"}),
        )
        data = json.loads(line)

        assert data["message"] == "hello"
        assert data["service"] == "catalog-import"
        assert data["correlation_id"] == "run-42"
        assert data["batch_id"] == "inventory-1"
        assert data["metrics"] == {"product_count": 3}
        assert data["error"]["error_type"] == "FetchError"
        set_batch_id("")

