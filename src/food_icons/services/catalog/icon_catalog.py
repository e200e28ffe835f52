"""
Icon catalog: the ordered, immutable set of icon definitions plus the tag
provider that localizes them.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from food_icons.core.exceptions import CatalogLoadError
from food_icons.models.icons import (
    FALLBACK_LOCALE,
    IconDefinition,
    LanguageCode,
)
from food_icons.utils.text import normalize_name

from .base import TagCatalog


class IconCatalog:
    """
    Declaration-ordered icon definitions with their localized tags.

    Icons and tag keys are unique; definition order is the tie-break
    order used by the matcher. Combination terms map broad search words
    ("fruit", "овощи") to the tag keys they cover.
    """

    def __init__(
        self,
        definitions: Iterable[IconDefinition | Mapping[str, Any]],
        tags: TagCatalog,
        combinations: Mapping[str, Sequence[str]] | None = None,
    ):
        self.tags = tags
        self._definitions = self._build_definitions(definitions)
        self._by_tag_key = {d.tag_key: d for d in self._definitions}
        self._combinations = self._build_combinations(combinations or {})

    @staticmethod
    def _build_definitions(
        raw_definitions: Iterable[IconDefinition | Mapping[str, Any]],
    ) -> tuple[IconDefinition, ...]:
        definitions: list[IconDefinition] = []
        seen_icons: set[str] = set()
        seen_keys: set[str] = set()

        for position, raw in enumerate(raw_definitions):
            if isinstance(raw, IconDefinition):
                icon, tag_key = raw.icon, raw.tag_key
            elif isinstance(raw, Mapping):
                icon, tag_key = raw.get("icon"), raw.get("tag_key") or raw.get("tagKey")
            else:
                icon, tag_key = None, None

            if not (isinstance(icon, str) and icon and isinstance(tag_key, str) and tag_key):
                raise CatalogLoadError(
                    f"Icon definition #{position} needs both an icon and a tag key",
                    details={"definition": dict(raw) if isinstance(raw, Mapping) else repr(raw)},
                )
            if icon in seen_icons:
                raise CatalogLoadError(f"Duplicate icon '{icon}' in catalog", details={"tag_key": tag_key})
            if tag_key in seen_keys:
                raise CatalogLoadError(f"Duplicate tag key '{tag_key}' in catalog", details={"icon": icon})

            seen_icons.add(icon)
            seen_keys.add(tag_key)
            definitions.append(IconDefinition(icon=icon, tag_key=tag_key, order=position))

        return tuple(definitions)

    def _build_combinations(
        self,
        raw: Mapping[str, Sequence[str]],
    ) -> dict[str, tuple[str, ...]]:
        combinations: dict[str, tuple[str, ...]] = {}
        for term, tag_keys in raw.items():
            key = normalize_name(term)
            if not key or isinstance(tag_keys, str):
                continue
            unknown = [k for k in tag_keys if k not in self._by_tag_key]
            if unknown:
                raise CatalogLoadError(
                    f"Combination term '{term}' references unknown tag keys",
                    details={"unknown": unknown},
                )
            combinations[key] = tuple(tag_keys)
        return combinations

    def __iter__(self) -> Iterator[IconDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    @property
    def definitions(self) -> tuple[IconDefinition, ...]:
        return self._definitions

    @property
    def icons(self) -> frozenset[str]:
        return frozenset(d.icon for d in self._definitions)

    def get(self, tag_key: str) -> IconDefinition | None:
        """Look up a definition by tag key."""
        return self._by_tag_key.get(tag_key)

    def tags_for(
        self,
        definition: IconDefinition,
        locale: LanguageCode,
    ) -> tuple[LanguageCode, list[str]]:
        """
        Get the tags to score a definition against.

        Falls back to English tags when the requested locale has none.

        Returns:
            (locale actually used, tags)
        """
        tags = self.tags.get_tags(definition.tag_key, locale)
        if not tags and locale != FALLBACK_LOCALE:
            return FALLBACK_LOCALE, self.tags.get_tags(definition.tag_key, FALLBACK_LOCALE)
        return locale, tags

    def combination_icons(self, term: str) -> set[str]:
        """Icons covered by a broad combination term, or an empty set."""
        tag_keys = self._combinations.get(normalize_name(term), ())
        return {self._by_tag_key[k].icon for k in tag_keys}

    @property
    def combination_terms(self) -> frozenset[str]:
        return frozenset(self._combinations)
