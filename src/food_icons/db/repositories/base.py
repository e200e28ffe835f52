"""Durable key-value store interface for the icon resolution cache."""

from abc import ABC, abstractmethod


class CacheStore(ABC):
    """
    Asynchronous key-value store backing the durable cache tier.

    Values are opaque strings (the cache writes CachedIcon JSON).
    Implementations raise CacheStoreError on backend failures.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        pass

    @abstractmethod
    async def delete_prefix(self, prefix: str) -> int:
        """
        Delete every key starting with `prefix`.

        Returns:
            Number of deleted entries
        """
        pass


class InMemoryCacheStore(CacheStore):
    """Dict-backed store for tests and single-process deployments."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value

    async def delete_prefix(self, prefix: str) -> int:
        doomed = [key for key in self.data if key.startswith(prefix)]
        for key in doomed:
            del self.data[key]
        return len(doomed)
