"""
Logging configuration for FishFinder.

Structured logging with correlation IDs, operation context and timing,
rendered through Rich on the console or as JSON lines.
"""

import contextvars
import logging
import time
import uuid
from typing import Any

import structlog
from rich.console import Console
from rich.logging import RichHandler

correlation_id: contextvars.ContextVar[str] = contextvars.ContextVar(
    "correlation_id", default=""
)
operation_context: contextvars.ContextVar[dict[str, Any] | None] = (
    contextvars.ContextVar("operation_context", default=None)
)
operation_start_time: contextvars.ContextVar[float] = contextvars.ContextVar(
    "operation_start_time", default=0.0
)


class CorrelationIDProcessor:
    """Processor to add correlation ID to log records."""

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        correlation_id_value = correlation_id.get()
        if correlation_id_value:
            event_dict["correlation_id"] = correlation_id_value
        return event_dict


class OperationContextProcessor:
    """Processor to add operation context to log records."""

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        context = operation_context.get()
        if context:
            for key, value in context.items():
                event_dict.setdefault(key, value)
        return event_dict


class ElapsedTimeProcessor:
    """Processor to add time elapsed since the current operation started."""

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        start_time = operation_start_time.get()
        if start_time > 0 and "duration_ms" not in event_dict:
            event_dict["elapsed_ms"] = round((time.time() - start_time) * 1000, 2)
        return event_dict


class StructuredLogger:
    """Thin wrapper over a structlog logger with error and audit helpers."""

    def __init__(self, logger_name: str):
        self.logger = structlog.get_logger(logger_name)
        self._logger_name = logger_name

    def with_correlation_id(
        self, correlation_id_value: str | None = None
    ) -> "StructuredLogger":
        """Bind a correlation ID to the current context."""
        correlation_id.set(correlation_id_value or generate_correlation_id())
        return self

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.logger.warning(message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(message, **kwargs)

    def error(
        self, message: str, error: Exception | None = None, **kwargs: Any
    ) -> None:
        """Log an error message, flattening exception details into the event."""
        if error is not None:
            kwargs.update(
                {
                    "error": str(error),
                    "error_type": type(error).__name__,
                }
            )
        self.logger.error(message, **kwargs)

    def performance(self, message: str, duration_ms: float, **kwargs: Any) -> None:
        """Log performance metrics."""
        kwargs["duration_ms"] = round(duration_ms, 2)
        kwargs["performance_metric"] = True
        self.logger.info(message, **kwargs)

    def audit(self, action: str, **kwargs: Any) -> None:
        """Log audit events."""
        kwargs.update({"audit": True, "action": action})
        self.logger.info(f"AUDIT: {action}", **kwargs)


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    json_logs: bool = False,
    log_file: str | None = None,
) -> None:
    """Configure structured logging for the application."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    base_processors = [
        CorrelationIDProcessor(),
        OperationContextProcessor(),
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        ElapsedTimeProcessor(),
    ]

    handlers: list[logging.Handler] = []
    if json_logs:
        processors = [
            *base_processors,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
        if log_file:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        else:
            handlers.append(logging.StreamHandler())
    else:
        processors = [
            *base_processors,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=True),
        ]
        # structlog renders the line, Rich only handles layout
        handlers.append(
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
                show_level=False,
                markup=False,
                rich_tracebacks=True,
                tracebacks_show_locals=verbose,
            )
        )
        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)

    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    configure_third_party_loggers(verbose)


def configure_third_party_loggers(verbose: bool) -> None:
    """Configure third-party library loggers."""
    logging.getLogger("httpx").setLevel(logging.INFO if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("rich").setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name)


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


def get_correlation_id() -> str:
    """Get the current correlation ID."""
    return correlation_id.get()


def clear_context() -> None:
    """Clear all logging context variables."""
    correlation_id.set("")
    operation_context.set(None)
    operation_start_time.set(0.0)


class LoggingContextManager:
    """Context manager that logs the start, end and duration of an operation."""

    def __init__(
        self,
        logger: StructuredLogger,
        operation: str,
        correlation_id_value: str | None = None,
        **context: Any,
    ):
        self.logger = logger
        self.operation = operation
        self.correlation_id_value = (
            correlation_id_value or correlation_id.get() or generate_correlation_id()
        )
        self.context = context
        self._tokens: list[tuple[contextvars.ContextVar, contextvars.Token]] = []

    def __enter__(self) -> StructuredLogger:
        self._tokens = [
            (correlation_id, correlation_id.set(self.correlation_id_value)),
            (
                operation_context,
                operation_context.set({"operation": self.operation, **self.context}),
            ),
            (operation_start_time, operation_start_time.set(time.time())),
        ]
        self.logger.debug(f"Starting operation: {self.operation}")
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = (time.time() - operation_start_time.get()) * 1000

        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation}",
                error=exc_val,
                duration_ms=round(duration_ms, 2),
            )
        else:
            self.logger.performance(
                f"Operation completed: {self.operation}", duration_ms=duration_ms
            )

        for var, token in reversed(self._tokens):
            var.reset(token)
        self._tokens = []


def operation_logger(
    operation_name: str, correlation_id_value: str | None = None, **context: Any
) -> LoggingContextManager:
    """Create a logging context manager for operations."""
    return LoggingContextManager(
        get_logger(__name__), operation_name, correlation_id_value, **context
    )
