"""
Exception hierarchy for FishFinder.

Categorised errors carrying structured details and troubleshooting hints,
logged through the structured logger when they are created.
"""

import time
from enum import Enum
from typing import Any

from .logging import get_logger

logger = get_logger(__name__)


class ErrorCategory(Enum):
    """Categories for error classification."""

    USER_ERROR = "user_error"
    CONFIGURATION_ERROR = "configuration_error"
    NETWORK_ERROR = "network_error"
    DATA_ERROR = "data_error"
    SYSTEM_ERROR = "system_error"


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class FishFinderError(Exception):
    """
    Base exception for all FishFinder errors.

    Carries a category, severity, structured details and a list of
    troubleshooting hints that the CLI shows to the user.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        category: ErrorCategory = ErrorCategory.SYSTEM_ERROR,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        user_message: str | None = None,
        troubleshooting_hints: list[str] | None = None,
        **context: Any,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.category = category
        self.severity = severity
        self.user_message = user_message or message
        self.troubleshooting_hints = troubleshooting_hints or []
        self.context = context
        self.timestamp = time.time()

        self._log_error()

    def _log_error(self) -> None:
        """Log error creation with full context."""
        logger.debug(
            f"Exception created: {self.__class__.__name__}",
            error_message=self.message,
            category=self.category.value,
            severity=self.severity.value,
            **self.details,
            **self.context,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "user_message": self.user_message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.timestamp,
            "details": self.details,
            "troubleshooting_hints": self.troubleshooting_hints,
            "context": self.context,
        }


class ConfigurationError(FishFinderError):
    """Raised when there are configuration issues."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        actual_value: str | None = None,
        **kwargs,
    ):
        hints = [
            "Check your configuration file (.env) for missing or incorrect values",
            "Verify FISHFINDER_* environment variables are properly set",
            "Run 'fishfinder config-validate' to inspect the effective settings",
        ]

        details = kwargs.setdefault("details", {})
        if config_key:
            hints.append(f"Ensure '{config_key}' is properly configured")
            details["config_key"] = config_key
        if actual_value:
            details["actual_value"] = actual_value

        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION_ERROR,
            troubleshooting_hints=kwargs.pop("troubleshooting_hints", None) or hints,
            **kwargs,
        )


class LoadError(FishFinderError):
    """Raised when the fish catalog cannot be fetched or parsed."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        status_code: int | None = None,
        network: bool = False,
        **kwargs,
    ):
        details = kwargs.setdefault("details", {})
        details.update({"source": source, "status_code": status_code})

        if network:
            hints = [
                "Check your internet connection",
                "Verify FISHFINDER_CATALOG_URL points at a reachable JSON document",
                "Try increasing FISHFINDER_HTTP_TIMEOUT if the host is slow",
            ]
        else:
            hints = [
                "Check that the catalog is a JSON object with a 'fish' list",
                "Verify every fish has id, name, lure, spots, circle and eventOnly",
                "Unset FISHFINDER_CATALOG_PATH to fall back to the bundled catalog",
            ]

        super().__init__(
            message,
            category=(
                ErrorCategory.NETWORK_ERROR if network else ErrorCategory.DATA_ERROR
            ),
            severity=ErrorSeverity.HIGH,
            user_message="No fish data available",
            troubleshooting_hints=hints,
            **kwargs,
        )


class DataMappingError(FishFinderError):
    """Raised when a raw catalog entry cannot be mapped to a fish record."""

    def __init__(
        self,
        message: str,
        source_data: Any | None = None,
        expected_format: str | None = None,
        **kwargs,
    ):
        details = kwargs.setdefault("details", {})
        details.update(
            {
                "source_data": source_data,
                "expected_format": expected_format,
            }
        )

        super().__init__(
            message,
            category=ErrorCategory.DATA_ERROR,
            troubleshooting_hints=[
                "Check if the catalog document structure has changed",
                "Check for missing required fields in the fish entry",
            ],
            **kwargs,
        )
