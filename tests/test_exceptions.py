"""Tests for custom exceptions."""

import pytest
from catalog_import.exceptions import (
    BackendCallError,
    CatalogImportError,
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    FetchError,
    PrerequisiteError,
    ValidationError,
)


class TestErrorContext:
    """Tests for ErrorContext."""

    def test_error_context_defaults(self):
        """Test ErrorContext has sensible defaults."""
        ctx = ErrorContext()
        assert ctx.correlation_id is None
        assert ctx.batch_index is None
        assert ctx.timestamp is not None

    def test_error_context_to_dict(self):
        """Test ErrorContext serialization includes extra data."""
        ctx = ErrorContext(
            correlation_id="run-123",
            batch_index=2,
            batch_count=5,
            additional_data={"status_code": 502},
        )
        result = ctx.to_dict()

        assert result["correlation_id"] == "run-123"
        assert result["batch_index"] == 2
        assert result["batch_count"] == 5
        assert result["status_code"] == 502

    def test_zero_actual_value_is_kept(self):
        """Test falsy actual values are still reported."""
        ctx = ErrorContext(actual_value=0)
        assert ctx.to_dict()["actual_value"] == "0"


class TestCatalogImportError:
    """Tests for the base error."""

    def test_to_dict(self):
        error = CatalogImportError(
            message="Test error",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            original_exception=RuntimeError("boom"),
        )
        result = error.to_dict()

        assert str(error) == "Test error"
        assert result["error_type"] == "CatalogImportError"
        assert result["severity"] == "low"
        assert result["category"] == "validation"
        assert result["original_exception"] == "boom"


class TestFetchErrors:
    """Tests for fetch-related errors."""

    def test_fetch_error_records_endpoint(self):
        error = FetchError(message="down", endpoint="https://catalog.test/products")

        assert error.endpoint == "https://catalog.test/products"
        assert error.context.endpoint == "https://catalog.test/products"
        assert error.context.operation == "fetch_catalog"
        assert error.category == ErrorCategory.NETWORK
        assert error.severity == ErrorSeverity.HIGH

    def test_validation_error_is_fetch_error(self):
        error = ValidationError(
            message="bad price",
            endpoint="https://catalog.test/products",
            product_id="7",
            field_name="price",
            actual=-1,
        )

        assert isinstance(error, FetchError)
        assert error.category == ErrorCategory.VALIDATION
        assert error.context.product_id == "7"
        assert error.context.field_name == "price"
        assert error.actual == -1


class TestPipelineErrors:
    """Tests for prerequisite, backend and configuration errors."""

    def test_prerequisite_error(self):
        error = PrerequisiteError(message="missing", resource="stock_location")

        assert error.severity == ErrorSeverity.CRITICAL
        assert error.category == ErrorCategory.PREREQUISITE
        assert error.context.additional_data["resource"] == "stock_location"

    def test_backend_call_error_with_status(self):
        error = BackendCallError(
            message="failed",
            operation="create_products",
            status_code=500,
        )

        assert error.operation == "create_products"
        assert error.status_code == 500
        assert error.to_dict()["context"]["status_code"] == 500

    def test_backend_call_error_without_status(self):
        error = BackendCallError(message="failed", operation="create_products")
        assert "status_code" not in error.context.additional_data

    def test_configuration_error(self):
        error = ConfigurationError(message="bad", config_key="IMPORT_BATCH_SIZE")

        assert error.config_key == "IMPORT_BATCH_SIZE"
        assert error.category == ErrorCategory.CONFIGURATION

    @pytest.mark.parametrize("error_cls", [FetchError, PrerequisiteError, BackendCallError])
    def test_all_errors_share_base(self, error_cls):
        assert issubclass(error_cls, CatalogImportError)
