"""Custom exception classes for the icon engine."""

from typing import Any


class FoodIconError(Exception):
    """Base exception for icon engine errors."""

    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class CatalogLoadError(FoodIconError):
    """Icon definitions or tag resources could not be loaded."""

    def __init__(self, message: str, source: str | None = None, details: Any = None):
        super().__init__(
            message=message,
            details={"source": source, **(details or {})},
        )
        self.source = source


class CacheStoreError(FoodIconError):
    """Durable cache store operation failed."""

    def __init__(self, message: str, operation: str, key: str | None = None):
        super().__init__(
            message=message,
            details={"operation": operation, "key": key},
        )
        self.operation = operation
        self.key = key
