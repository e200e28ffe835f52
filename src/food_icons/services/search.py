"""
Reverse tag search.

Given a phrase, find the library foods whose resolved icon is tagged with
it in any supported language. Searching "bread" finds "White Bread" and
"Бородинский хлеб" alike because both resolve to 🍞, whose tags contain
"bread".
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from food_icons.models.icons import SUPPORTED_LOCALES
from food_icons.services.cache import IconResolutionCache
from food_icons.services.catalog import IconCatalog
from food_icons.utils.text import normalize_name

logger = logging.getLogger(__name__)

T = TypeVar("T")

MIN_PHRASE_LENGTH = 2


def item_name(item: Any) -> str | None:
    """Name of a library item: a mapping's "name" key or a `name` attribute."""
    if isinstance(item, Mapping):
        name = item.get("name")
    else:
        name = getattr(item, "name", None)
    return name if isinstance(name, str) else None


class TagSearch:
    """Find library items by the tags of their resolved icons."""

    def __init__(
        self,
        catalog: IconCatalog,
        cache: IconResolutionCache,
        min_phrase_length: int = MIN_PHRASE_LENGTH,
    ):
        self.catalog = catalog
        self.cache = cache
        self.min_phrase_length = min_phrase_length

    def matching_icons(self, phrase: str) -> frozenset[str]:
        """
        Collect icons whose tags contain the phrase in any supported locale.

        Broad combination terms ("fruit", "мясо") add every icon they cover.
        Phrases shorter than the minimum match nothing.
        """
        needle = normalize_name(phrase)
        if len(needle) < self.min_phrase_length:
            return frozenset()

        icons = set(self.catalog.combination_icons(needle))

        for definition in self.catalog:
            for locale in SUPPORTED_LOCALES:
                tags = self.catalog.tags.get_tags(definition.tag_key, locale)
                if any(needle in tag for tag in tags):
                    icons.add(definition.icon)
                    break

        logger.debug(f"Tag phrase '{needle}' matches {len(icons)} icons")
        return frozenset(icons)

    def find_by_tag_phrase(self, phrase: str, items: Iterable[T]) -> list[T]:
        """
        Filter items to those whose icon is tagged with the phrase.

        Args:
            phrase: Search phrase as typed by the user
            items: Library items with a name (mapping key or attribute)

        Returns:
            Matching items in input order
        """
        icons = self.matching_icons(phrase)
        if not icons:
            return []

        matched: list[T] = []
        for item in items:
            name = item_name(item)
            if name is None:
                continue
            icon = self.cache.get_or_resolve(name)
            if icon is not None and icon in icons:
                matched.append(item)
        return matched

    async def afind_by_tag_phrase(self, phrase: str, items: Iterable[T]) -> list[T]:
        """Same as find_by_tag_phrase, resolving through the durable cache tier."""
        icons = self.matching_icons(phrase)
        if not icons:
            return []

        matched: list[T] = []
        for item in items:
            name = item_name(item)
            if name is None:
                continue
            icon = await self.cache.aget_or_resolve(name)
            if icon is not None and icon in icons:
                matched.append(item)
        return matched
