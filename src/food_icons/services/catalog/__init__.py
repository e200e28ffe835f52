"""
Icon catalog: ordered icon definitions and their localized tag lists.
"""

from .base import TagCatalog, coerce_tags
from .icon_catalog import IconCatalog
from .loader import clear_catalog_cache, get_icon_catalog, load_icon_catalog
from .static_provider import StaticTagCatalog

__all__ = [
    "TagCatalog",
    "StaticTagCatalog",
    "IconCatalog",
    "coerce_tags",
    "load_icon_catalog",
    "get_icon_catalog",
    "clear_catalog_cache",
]
