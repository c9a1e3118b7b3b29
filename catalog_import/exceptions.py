"""
Custom exceptions for the catalog import pipeline.
Provides structured error handling with rich context for debugging and monitoring.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional
from enum import Enum


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors for routing and handling."""
    VALIDATION = "validation"
    NETWORK = "network"
    BACKEND = "backend"
    PREREQUISITE = "prerequisite"
    CONFIGURATION = "configuration"


@dataclass
class ErrorContext:
    """Rich context for error tracking and debugging."""
    correlation_id: Optional[str] = None
    product_id: Optional[str] = None
    field_name: Optional[str] = None
    actual_value: Optional[Any] = None
    batch_index: Optional[int] = None
    batch_count: Optional[int] = None
    operation: Optional[str] = None
    endpoint: Optional[str] = None
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    additional_data: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert context to dictionary for logging."""
        return {
            "correlation_id": self.correlation_id,
            "product_id": self.product_id,
            "field_name": self.field_name,
            "actual_value": str(self.actual_value) if self.actual_value is not None else None,
            "batch_index": self.batch_index,
            "batch_count": self.batch_count,
            "operation": self.operation,
            "endpoint": self.endpoint,
            "timestamp": self.timestamp,
            **self.additional_data,
        }


class CatalogImportError(Exception):
    """Base exception for all catalog import errors."""

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.BACKEND,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category
        self.original_exception = original_exception

    def to_dict(self) -> dict:
        """Serialize exception for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "severity": self.severity.value,
            "category": self.category.value,
            "context": self.context.to_dict(),
            "original_exception": str(self.original_exception) if self.original_exception else None,
        }


class FetchError(CatalogImportError):
    """Raised when the catalog source cannot be retrieved or parsed."""

    def __init__(
        self,
        message: str,
        endpoint: str,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None,
        category: ErrorCategory = ErrorCategory.NETWORK,
    ):
        ctx = context or ErrorContext()
        ctx.endpoint = endpoint
        ctx.operation = ctx.operation or "fetch_catalog"

        super().__init__(
            message=message,
            context=ctx,
            severity=ErrorSeverity.HIGH,
            category=category,
            original_exception=original_exception,
        )
        self.endpoint = endpoint


class ValidationError(FetchError):
    """Raised when a fetched catalog record fails validation."""

    def __init__(
        self,
        message: str,
        endpoint: str,
        product_id: Optional[str],
        field_name: str,
        actual: Any = None,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None,
    ):
        ctx = context or ErrorContext()
        ctx.product_id = product_id
        ctx.field_name = field_name
        ctx.actual_value = actual

        super().__init__(
            message=message,
            endpoint=endpoint,
            context=ctx,
            original_exception=original_exception,
            category=ErrorCategory.VALIDATION,
        )
        self.product_id = product_id
        self.field_name = field_name
        self.actual = actual


class PrerequisiteError(CatalogImportError):
    """Raised when the default sales channel or stock location is missing."""

    def __init__(
        self,
        message: str,
        resource: str,
        context: Optional[ErrorContext] = None,
    ):
        ctx = context or ErrorContext()
        ctx.additional_data["resource"] = resource

        super().__init__(
            message=message,
            context=ctx,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.PREREQUISITE,
        )
        self.resource = resource


class BackendCallError(CatalogImportError):
    """Raised when a commerce backend call fails."""

    def __init__(
        self,
        message: str,
        operation: str,
        status_code: Optional[int] = None,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        if status_code is not None:
            ctx.additional_data["status_code"] = status_code

        super().__init__(
            message=message,
            context=ctx,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.BACKEND,
            original_exception=original_exception,
        )
        self.operation = operation
        self.status_code = status_code


class ConfigurationError(CatalogImportError):
    """Raised when configuration is invalid or missing."""

    def __init__(
        self,
        message: str,
        config_key: str,
        context: Optional[ErrorContext] = None,
    ):
        ctx = context or ErrorContext()
        ctx.additional_data["config_key"] = config_key

        super().__init__(
            message=message,
            context=ctx,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )
        self.config_key = config_key
