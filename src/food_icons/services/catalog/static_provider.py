"""
In-memory tag catalog built from per-locale resource dictionaries.
"""

import logging
from collections.abc import Mapping
from typing import Any

from food_icons.models.icons import LanguageCode

from .base import TagCatalog, coerce_tags

logger = logging.getLogger(__name__)


def _as_locale(locale: LanguageCode | str) -> LanguageCode | None:
    try:
        return LanguageCode(locale)
    except ValueError:
        return None


class StaticTagCatalog(TagCatalog):
    """
    Tag catalog backed by dictionaries loaded once at startup.

    Input shape mirrors the localization resources:
        {"en": {"apple": ["apple", "apples"]}, "ru": {"apple": ["яблоко"]}}

    Unknown locales are skipped and malformed tag lists become empty lists.
    """

    def __init__(self, resources: Mapping[str, Any]):
        self._tags: dict[LanguageCode, dict[str, tuple[str, ...]]] = {}

        for raw_locale, entries in resources.items():
            locale = _as_locale(raw_locale)
            if locale is None:
                logger.warning(f"Skipping tags for unsupported locale '{raw_locale}'")
                continue
            if not isinstance(entries, Mapping):
                logger.warning(f"Tag resource for '{raw_locale}' is not a mapping, treating as empty")
                entries = {}

            self._tags[locale] = {
                str(tag_key): tuple(coerce_tags(raw, source=f"{locale.value}.{tag_key}"))
                for tag_key, raw in entries.items()
            }

    @property
    def locales(self) -> tuple[LanguageCode, ...]:
        return tuple(self._tags)

    def get_tags(self, tag_key: str, locale: LanguageCode | str) -> list[str]:
        code = _as_locale(locale)
        if code is None:
            return []
        return list(self._tags.get(code, {}).get(tag_key, ()))

    def tag_keys(self, locale: LanguageCode | str) -> set[str]:
        """Tag keys that have a resource entry in a locale."""
        code = _as_locale(locale)
        return set(self._tags.get(code, {})) if code else set()
