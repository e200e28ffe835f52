"""
Food icon engine facade.

Wires catalog, matcher, cache and reverse search together and exposes the
surface used by list rendering and library search.
"""

import logging
from collections.abc import Iterable
from functools import lru_cache
from typing import TypeVar

from food_icons.core.config import Settings, get_settings
from food_icons.core.logging_utils import configure_logging
from food_icons.db.mongo import MongoDB
from food_icons.db.repositories import CacheStore, MongoCacheStore
from food_icons.models.icons import LanguageCode, ScoreWeights
from food_icons.services.cache import IconResolutionCache
from food_icons.services.catalog import IconCatalog, get_icon_catalog, load_icon_catalog
from food_icons.services.language import classify_language
from food_icons.services.matcher import IconMatcher
from food_icons.services.search import TagSearch

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FoodIconEngine:
    """
    Public entry point of the icon engine.

    `resolve_icon` is synchronous and uses the in-process cache only;
    `aresolve_icon` is awaitable and also reads and writes the durable
    store when one is configured.
    """

    def __init__(
        self,
        catalog: IconCatalog,
        *,
        cache_capacity: int = 200,
        store: CacheStore | None = None,
        cache_namespace: str = "food_icon",
        cache_version: str = "v1",
        min_phrase_length: int = 2,
        weights: ScoreWeights | None = None,
    ):
        self.catalog = catalog
        self.matcher = IconMatcher(catalog, weights)
        self.cache = IconResolutionCache(
            self.matcher,
            capacity=cache_capacity,
            store=store,
            namespace=cache_namespace,
            version=cache_version,
            known_icons=catalog.icons,
        )
        self.search = TagSearch(catalog, self.cache, min_phrase_length=min_phrase_length)

    @property
    def has_durable_cache(self) -> bool:
        return self.cache.store is not None

    def classify_language(self, text: str) -> LanguageCode:
        return classify_language(text)

    def resolve_icon(self, name: str, locale: LanguageCode | str | None = None) -> str | None:
        return self.cache.get_or_resolve(name, locale)

    async def aresolve_icon(self, name: str, locale: LanguageCode | str | None = None) -> str | None:
        return await self.cache.aget_or_resolve(name, locale)

    def find_by_tag_phrase(self, phrase: str, items: Iterable[T]) -> list[T]:
        return self.search.find_by_tag_phrase(phrase, items)

    async def afind_by_tag_phrase(self, phrase: str, items: Iterable[T]) -> list[T]:
        return await self.search.afind_by_tag_phrase(phrase, items)

    def clear_cache(self) -> None:
        """Empty the in-process cache tier."""
        self.cache.clear()

    async def purge_durable_cache(self) -> int:
        """Delete this catalog version's durable cache entries."""
        return await self.cache.purge_durable()


def build_engine(
    settings: Settings | None = None,
    *,
    catalog: IconCatalog | None = None,
    store: CacheStore | None = None,
) -> FoodIconEngine:
    """
    Build an engine from settings.

    Args:
        settings: Settings to use (global settings if None)
        catalog: Pre-built catalog; loaded from the settings paths if None
        store: Durable store; a MongoCacheStore is created when the durable
            cache is enabled in settings and no store is given

    Returns:
        Configured FoodIconEngine
    """
    settings = settings or get_settings()

    if catalog is None:
        if settings.icon_definitions_path or settings.tag_catalog_dir:
            catalog = load_icon_catalog(settings.icon_definitions_path, settings.tag_catalog_dir)
        else:
            catalog = get_icon_catalog()

    if store is None and settings.is_durable_cache_configured:
        logger.info(f"Connecting durable icon cache at {settings.mongo_uri[:20]}...")
        MongoDB.connect(settings.mongo_uri, settings.db_name, timeout_ms=settings.mongo_timeout_ms)
        store = MongoCacheStore(MongoDB.get_collection(settings.icon_cache_collection))

    return FoodIconEngine(
        catalog,
        cache_capacity=settings.icon_cache_capacity,
        store=store,
        cache_namespace=settings.icon_cache_namespace,
        cache_version=settings.icon_cache_version,
        min_phrase_length=settings.min_search_phrase_length,
    )


@lru_cache(maxsize=1)
def get_engine() -> FoodIconEngine:
    """
    Get the process-wide engine configured from settings.

    Also sets up logging at the configured level.
    """
    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)
    logger.info(f"Initializing {settings.app_name}")
    return build_engine(settings)


def clear_engine_cache() -> None:
    """Clear the cached engine instance (useful for testing)."""
    get_engine.cache_clear()
