"""Tests for the icon catalog, tag providers and resource loading."""

import json

import pytest

from food_icons.core.exceptions import CatalogLoadError
from food_icons.models.icons import SUPPORTED_LOCALES, LanguageCode
from food_icons.services.catalog import (
    IconCatalog,
    StaticTagCatalog,
    coerce_tags,
    load_icon_catalog,
)


class TestCoerceTags:
    """Tests for tag payload coercion."""

    def test_normalizes_and_keeps_order(self):
        assert coerce_tags(["  Apple ", "GREEN  apple", "apple"]) == ["apple", "green apple"]

    def test_drops_non_string_members(self):
        assert coerce_tags(["apple", 3, None, {"x": 1}, ""]) == ["apple"]

    @pytest.mark.parametrize("payload", [None, "apple", {"apple": 1}, 42])
    def test_non_list_payload_is_empty(self, payload):
        assert coerce_tags(payload) == []


class TestStaticTagCatalog:
    """Tests for StaticTagCatalog."""

    def test_returns_tags_per_locale(self):
        tags = StaticTagCatalog({"en": {"apple": ["Apple"]}, "ru": {"apple": ["Яблоко"]}})

        assert tags.get_tags("apple", LanguageCode.EN) == ["apple"]
        assert tags.get_tags("apple", "ru") == ["яблоко"]

    def test_missing_key_or_locale_is_empty(self):
        tags = StaticTagCatalog({"en": {"apple": ["apple"]}})

        assert tags.get_tags("bread", "en") == []
        assert tags.get_tags("apple", "he") == []
        assert tags.get_tags("apple", "fr") == []

    def test_malformed_resources_become_empty(self):
        tags = StaticTagCatalog({
            "en": {"apple": "apple", "bread": ["bread"]},
            "ru": ["not", "a", "mapping"],
            "de": {"apple": ["apfel"]},
        })

        assert tags.get_tags("apple", "en") == []
        assert tags.get_tags("bread", "en") == ["bread"]
        assert tags.get_tags("bread", "ru") == []
        assert tags.locales == (LanguageCode.EN, LanguageCode.RU)

    def test_returned_lists_are_copies(self):
        tags = StaticTagCatalog({"en": {"apple": ["apple"]}})
        tags.get_tags("apple", "en").append("pear")
        assert tags.get_tags("apple", "en") == ["apple"]


class TestIconCatalog:
    """Tests for IconCatalog construction and lookups."""

    def test_assigns_declaration_order(self, apple_bread_catalog):
        assert [(d.icon, d.order) for d in apple_bread_catalog] == [("🍎", 0), ("🍞", 1)]
        assert len(apple_bread_catalog) == 2
        assert apple_bread_catalog.get("bread").icon == "🍞"

    def test_accepts_camel_case_tag_key(self):
        catalog = IconCatalog([{"icon": "🍎", "tagKey": "apple"}], StaticTagCatalog({}))
        assert catalog.get("apple").icon == "🍎"

    def test_duplicate_icon_is_rejected(self):
        with pytest.raises(CatalogLoadError, match="Duplicate icon"):
            IconCatalog(
                [{"icon": "🍫", "tag_key": "chocolate"}, {"icon": "🍫", "tag_key": "proteinBar"}],
                StaticTagCatalog({}),
            )

    def test_duplicate_tag_key_is_rejected(self):
        with pytest.raises(CatalogLoadError, match="Duplicate tag key"):
            IconCatalog(
                [{"icon": "🍰", "tag_key": "cake"}, {"icon": "🎂", "tag_key": "cake"}],
                StaticTagCatalog({}),
            )

    def test_incomplete_definition_is_rejected(self):
        with pytest.raises(CatalogLoadError):
            IconCatalog([{"icon": "🍎"}], StaticTagCatalog({}))

    def test_tags_for_falls_back_to_english(self):
        catalog = IconCatalog(
            [{"icon": "🍎", "tag_key": "apple"}],
            StaticTagCatalog({"en": {"apple": ["apple"]}, "he": {"apple": []}}),
        )

        assert catalog.tags_for(catalog.get("apple"), LanguageCode.HE) == (LanguageCode.EN, ["apple"])

    def test_combination_terms(self):
        catalog = IconCatalog(
            [{"icon": "🍎", "tag_key": "apple"}, {"icon": "🍌", "tag_key": "banana"}],
            StaticTagCatalog({}),
            combinations={" Fruit ": ["apple", "banana"]},
        )

        assert catalog.combination_icons("FRUIT") == {"🍎", "🍌"}
        assert catalog.combination_icons("meat") == set()

    def test_combination_with_unknown_key_is_rejected(self):
        with pytest.raises(CatalogLoadError):
            IconCatalog([{"icon": "🍎", "tag_key": "apple"}], StaticTagCatalog({}), combinations={"fruit": ["kiwi"]})


class TestLoadIconCatalog:
    """Tests for loading catalog resources from disk."""

    def test_bundled_catalog_is_complete(self, bundled_catalog):
        assert len(bundled_catalog) > 50
        assert len(bundled_catalog.icons) == len(bundled_catalog)
        for definition in bundled_catalog:
            assert bundled_catalog.tags.get_tags(definition.tag_key, "en"), definition.tag_key

    def test_bundled_catalog_has_all_locales(self, bundled_catalog):
        assert set(bundled_catalog.tags.locales) == set(SUPPORTED_LOCALES)
        assert "хлеб" in bundled_catalog.tags.get_tags("bread", "ru")
        assert "לחם" in bundled_catalog.tags.get_tags("bread", "he")

    def test_bundled_combinations(self, bundled_catalog):
        assert "🍎" in bundled_catalog.combination_icons("fruit")
        assert "🥩" in bundled_catalog.combination_icons("мясо")

    def test_loads_replacement_files(self, tmp_path):
        definitions = tmp_path / "icons.json"
        definitions.write_text(json.dumps({"definitions": [{"icon": "🍎", "tag_key": "apple"}]}), encoding="utf-8")
        tag_dir = tmp_path / "tags"
        tag_dir.mkdir()
        (tag_dir / "en.json").write_text(json.dumps({"apple": ["apple"]}), encoding="utf-8")
        (tag_dir / "ru.json").write_text("{ not json", encoding="utf-8")

        catalog = load_icon_catalog(definitions, tag_dir)

        assert [d.icon for d in catalog] == ["🍎"]
        assert catalog.tags.get_tags("apple", "en") == ["apple"]
        assert catalog.tags.get_tags("apple", "ru") == []

    def test_missing_definitions_file_raises(self, tmp_path):
        with pytest.raises(CatalogLoadError) as exc_info:
            load_icon_catalog(tmp_path / "missing.json", tmp_path)
        assert exc_info.value.source.endswith("missing.json")

    def test_invalid_definitions_structure_raises(self, tmp_path):
        definitions = tmp_path / "icons.json"
        definitions.write_text(json.dumps({"definitions": [{"icon": ""}]}), encoding="utf-8")

        with pytest.raises(CatalogLoadError, match="invalid structure"):
            load_icon_catalog(definitions, tmp_path)
