"""LoggerProtocol definition for structured logging.

Every log call is a message plus key-value context. Adapters decide how
the record is rendered (console or JSON).

Security:
    - NEVER log passwords or tokens
    - Log ids and emails, not whole request bodies

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("dog_created", dog_id=dog.id, customer_id=dog.customer_id)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("access_denied", resource="dogs")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failed operation, optionally with the exception that caused it."""
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every record."""
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
