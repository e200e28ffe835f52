"""
Tag catalog interface.

Tag lists come from a localization resource whose payloads are not
guaranteed to be well formed. Providers coerce them to ordered lists of
normalized strings at load time so the matcher never sees anything else.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from food_icons.models.icons import LanguageCode
from food_icons.utils.text import normalize_name

logger = logging.getLogger(__name__)


def coerce_tags(raw: Any, *, source: str = "") -> list[str]:
    """
    Coerce a raw tag payload to an ordered list of normalized tags.

    Lists and tuples keep their string members in order; blank and
    non-string members are dropped, as are repeated tags. Any other
    payload (None, a bare string, a dict) is treated as "no tags".
    """
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        logger.warning(f"Ignoring malformed tag payload for {source or 'unknown key'}: {type(raw).__name__}")
        return []

    tags: list[str] = []
    seen: set[str] = set()
    for item in raw:
        if not isinstance(item, str):
            logger.warning(f"Dropping non-string tag {item!r} for {source or 'unknown key'}")
            continue
        tag = normalize_name(item)
        if tag and tag not in seen:
            seen.add(tag)
            tags.append(tag)
    return tags


class TagCatalog(ABC):
    """
    Abstract provider of localized tag lists.

    Implementations must return an empty list, never raise, when a tag key
    or locale has no tags.
    """

    @abstractmethod
    def get_tags(self, tag_key: str, locale: LanguageCode | str) -> list[str]:
        """
        Get the tags of an icon definition in one locale.

        Args:
            tag_key: Resource key of the icon definition
            locale: Locale to read

        Returns:
            Ordered, normalized tags (possibly empty)
        """
        pass

    @property
    @abstractmethod
    def locales(self) -> tuple[LanguageCode, ...]:
        """Locales this provider holds tags for."""
        pass
