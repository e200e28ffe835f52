"""
Two-tier icon resolution cache.

Tier 1 is a bounded in-process dict keyed by "<locale>_<normalized name>".
Tier 2 is an optional durable CacheStore, consulted read-through and
written write-through by the async path only. Durable keys carry a
namespace and catalog version so a new catalog release never reads stale
entries.
"""

import logging
import threading
from typing import Protocol

from pydantic import ValidationError

from food_icons.db.repositories.base import CacheStore
from food_icons.models.icons import CachedIcon, LanguageCode
from food_icons.services.language import classify_language
from food_icons.utils.text import normalize_name

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 200

_MISSING = object()


class IconResolver(Protocol):
    """Anything that resolves a name in a locale to an icon (IconMatcher)."""

    def resolve_icon(self, name: str, locale: LanguageCode | str | None = None) -> str | None: ...


class IconResolutionCache:
    """
    Memoizes icon resolution.

    `None` results are cached too, so names without an icon are not
    rescored on every render. When an insert would exceed `capacity` the
    whole in-process map is dropped first; there is no per-entry recency
    tracking.

    Writers (insert, clear) take a lock; reads are plain dict lookups.
    Two callers missing the same key at once may both compute it, the
    later write wins and both get the same answer.
    """

    def __init__(
        self,
        resolver: IconResolver,
        capacity: int = DEFAULT_CAPACITY,
        store: CacheStore | None = None,
        namespace: str = "food_icon",
        version: str = "v1",
        known_icons: frozenset[str] | None = None,
    ):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.resolver = resolver
        self.capacity = capacity
        self.store = store
        self.namespace = namespace
        self.version = version
        self.known_icons = known_icons
        self._entries: dict[str, str | None] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    @property
    def durable_prefix(self) -> str:
        return f"{self.namespace}:{self.version}:"

    @staticmethod
    def make_key(name: str, locale: LanguageCode | str | None = None) -> tuple[str, LanguageCode, str]:
        """
        Build the tier-1 key for a raw name.

        Returns:
            (key, resolved locale, normalized name)
        """
        code = LanguageCode(locale) if locale else classify_language(name)
        normalized = normalize_name(name)
        return f"{code.value}_{normalized}", code, normalized

    def durable_key(self, key: str) -> str:
        return f"{self.durable_prefix}{key}"

    def _store_local(self, key: str, icon: str | None) -> None:
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.capacity:
                logger.debug(f"Icon cache full ({len(self._entries)} entries), clearing")
                self._entries.clear()
            self._entries[key] = icon

    def _compute(self, normalized: str, locale: LanguageCode) -> str | None:
        return self.resolver.resolve_icon(normalized, locale)

    def get_or_resolve(self, name: str, locale: LanguageCode | str | None = None) -> str | None:
        """
        Resolve through the in-process tier only.

        Args:
            name: Raw food name
            locale: Tag locale; classified from `name` if omitted

        Returns:
            Icon identifier or None
        """
        key, code, normalized = self.make_key(name, locale)
        if not normalized:
            return None

        cached = self._entries.get(key, _MISSING)
        if cached is not _MISSING:
            return cached

        icon = self._compute(normalized, code)
        self._store_local(key, icon)
        return icon

    async def _read_durable(self, key: str) -> object:
        try:
            raw = await self.store.get(self.durable_key(key))
        except Exception as e:
            logger.warning(f"Durable icon cache read failed for '{key}', recomputing: {e}")
            return _MISSING

        if raw is None:
            return _MISSING
        try:
            icon = CachedIcon.model_validate_json(raw).icon
        except ValidationError:
            logger.warning(f"Discarding undecodable durable icon cache value for '{key}'")
            return _MISSING

        if icon is not None and self.known_icons is not None and icon not in self.known_icons:
            logger.warning(f"Discarding durable icon '{icon}' for '{key}': not in the catalog")
            return _MISSING
        return icon

    async def _write_durable(self, key: str, icon: str | None) -> None:
        try:
            await self.store.set(self.durable_key(key), CachedIcon(icon=icon).model_dump_json())
        except Exception as e:
            logger.warning(f"Durable icon cache write failed for '{key}': {e}")

    async def aget_or_resolve(self, name: str, locale: LanguageCode | str | None = None) -> str | None:
        """
        Resolve through the in-process tier, then the durable store.

        Store failures are logged and treated as misses; resolution itself
        never fails because of the durable tier.
        """
        if self.store is None:
            return self.get_or_resolve(name, locale)

        key, code, normalized = self.make_key(name, locale)
        if not normalized:
            return None

        cached = self._entries.get(key, _MISSING)
        if cached is not _MISSING:
            return cached

        durable = await self._read_durable(key)
        if durable is not _MISSING:
            self._store_local(key, durable)
            return durable

        icon = self._compute(normalized, code)
        self._store_local(key, icon)
        await self._write_durable(key, icon)
        return icon

    def clear(self) -> None:
        """Empty the in-process tier. The durable store is left untouched."""
        with self._lock:
            self._entries.clear()
        logger.debug("In-process icon cache cleared")

    async def purge_durable(self) -> int:
        """
        Bulk-delete this catalog version's durable entries.

        Returns:
            Number of deleted entries (0 without a durable store)
        """
        if self.store is None:
            return 0
        return await self.store.delete_prefix(self.durable_prefix)
