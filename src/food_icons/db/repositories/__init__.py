"""Cache store implementations."""

from .base import CacheStore, InMemoryCacheStore
from .icon_cache import MongoCacheStore

__all__ = ["CacheStore", "InMemoryCacheStore", "MongoCacheStore"]
