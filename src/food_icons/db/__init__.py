"""Durable storage for the icon resolution cache."""

from .mongo import MongoDB
from .repositories import CacheStore, InMemoryCacheStore, MongoCacheStore

__all__ = ["MongoDB", "CacheStore", "InMemoryCacheStore", "MongoCacheStore"]
