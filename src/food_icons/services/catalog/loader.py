"""
Loading of icon definitions and tag resources.

The package bundles the catalog as JSON under `food_icons/data`:
    icon_definitions.json   ordered definitions plus combination terms
    tags/<locale>.json      tag key -> list of tags, one file per locale

Settings may point at replacement files with the same layout.
"""

import json
import logging
from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from food_icons.core.config import get_settings
from food_icons.core.exceptions import CatalogLoadError
from food_icons.models.icons import SUPPORTED_LOCALES

from .icon_catalog import IconCatalog
from .static_provider import StaticTagCatalog

logger = logging.getLogger(__name__)


class _DefinitionEntry(BaseModel):
    icon: str = Field(..., min_length=1)
    tag_key: str = Field(..., min_length=1)


class _DefinitionsFile(BaseModel):
    """Schema of icon_definitions.json."""

    definitions: list[_DefinitionEntry]
    combinations: dict[str, list[str]] = Field(default_factory=dict)


def _read_json(source: Path | Traversable) -> Any:
    try:
        return json.loads(source.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CatalogLoadError(f"Failed to read catalog resource: {e}", source=str(source)) from e


def _bundled_data() -> Traversable:
    return resources.files("food_icons") / "data"


def load_definitions_file(path: str | Path | None = None) -> _DefinitionsFile:
    """Read and validate an icon definitions file (bundled one by default)."""
    source = Path(path) if path else _bundled_data() / "icon_definitions.json"
    payload = _read_json(source)
    try:
        return _DefinitionsFile.model_validate(payload)
    except ValidationError as e:
        raise CatalogLoadError(
            "Icon definitions file has an invalid structure",
            source=str(source),
            details={"errors": e.errors(include_url=False)},
        ) from e


def load_tag_resources(tag_dir: str | Path | None = None) -> dict[str, Any]:
    """
    Read per-locale tag files.

    A missing or unreadable locale file is logged and treated as a locale
    without tags, so the matcher falls back to English for it.
    """
    base = Path(tag_dir) if tag_dir else _bundled_data() / "tags"
    resources_by_locale: dict[str, Any] = {}

    for locale in SUPPORTED_LOCALES:
        source = base / f"{locale.value}.json"
        if not source.is_file():
            logger.warning(f"No tag resource for locale '{locale.value}' at {source}")
            continue
        try:
            resources_by_locale[locale.value] = _read_json(source)
        except CatalogLoadError as e:
            logger.warning(f"Ignoring tag resource for '{locale.value}': {e.message}")

    return resources_by_locale


def load_icon_catalog(
    definitions_path: str | Path | None = None,
    tag_dir: str | Path | None = None,
) -> IconCatalog:
    """
    Build an IconCatalog from definition and tag resources.

    Args:
        definitions_path: Replacement icon_definitions.json (bundled if None)
        tag_dir: Directory holding <locale>.json tag files (bundled if None)

    Raises:
        CatalogLoadError: If the definitions file is unreadable or invalid
    """
    definitions_file = load_definitions_file(definitions_path)
    tags = StaticTagCatalog(load_tag_resources(tag_dir))

    catalog = IconCatalog(
        definitions=[entry.model_dump() for entry in definitions_file.definitions],
        tags=tags,
        combinations=definitions_file.combinations,
    )

    untagged = [
        d.tag_key for d in catalog
        if not any(tags.get_tags(d.tag_key, locale) for locale in tags.locales)
    ]
    if untagged:
        logger.warning(f"Icon definitions without any tags: {', '.join(untagged)}")

    logger.info(f"Loaded icon catalog: {len(catalog)} definitions, locales {[code.value for code in tags.locales]}")
    return catalog


@lru_cache(maxsize=1)
def get_icon_catalog() -> IconCatalog:
    """Get the process-wide catalog configured by settings."""
    settings = get_settings()
    return load_icon_catalog(settings.icon_definitions_path, settings.tag_catalog_dir)


def clear_catalog_cache() -> None:
    """Drop the cached catalog (useful for testing)."""
    get_icon_catalog.cache_clear()
