"""Pytest configuration and fixtures."""

import pytest

from food_icons.db.repositories import InMemoryCacheStore
from food_icons.services.catalog import IconCatalog, StaticTagCatalog, load_icon_catalog
from food_icons.services.matcher import IconMatcher


class CountingResolver:
    """Matcher stand-in that records every resolution it is asked for."""

    def __init__(self, answers: dict[str, str | None] | None = None, default: str | None = "🍽️"):
        self.answers = answers or {}
        self.default = default
        self.calls: list[tuple[str, str]] = []

    def resolve_icon(self, name, locale=None):
        self.calls.append((name, locale.value if locale else None))
        return self.answers.get(name, self.default)


@pytest.fixture
def apple_bread_catalog() -> IconCatalog:
    """Two-definition catalog used by the end-to-end scenarios."""
    return IconCatalog(
        definitions=[
            {"icon": "🍎", "tag_key": "apple"},
            {"icon": "🍞", "tag_key": "bread"},
        ],
        tags=StaticTagCatalog({
            "en": {
                "apple": ["apple", "apples"],
                "bread": ["bread", "toast"],
            },
        }),
    )


@pytest.fixture(scope="session")
def bundled_catalog() -> IconCatalog:
    """The catalog shipped as package data."""
    return load_icon_catalog()


@pytest.fixture
def bundled_matcher(bundled_catalog) -> IconMatcher:
    return IconMatcher(bundled_catalog)


@pytest.fixture
def counting_resolver() -> CountingResolver:
    return CountingResolver()


@pytest.fixture
def memory_store() -> InMemoryCacheStore:
    return InMemoryCacheStore()


@pytest.fixture
def library_foods() -> list[dict]:
    """A small food library as list screens pass it in."""
    return [
        {"id": "1", "name": "Red Apple"},
        {"id": "2", "name": "Banana"},
        {"id": "3", "name": "Grilled Chicken Breast"},
        {"id": "4", "name": "Sirloin Steak"},
        {"id": "5", "name": "Garden Salad"},
        {"id": "6", "name": "White Bread"},
    ]
