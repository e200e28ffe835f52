"""Tests for the script classifier."""

import pytest

from food_icons.models.icons import LanguageCode
from food_icons.services.language import classify_language, count_script_letters


class TestClassifyLanguage:
    """Tests for classify_language."""

    @pytest.mark.parametrize("text", ["Chicken Breast", "Apple Pie", "A simple text"])
    def test_latin_is_english(self, text):
        assert classify_language(text) == LanguageCode.EN

    @pytest.mark.parametrize("text", ["Куриная грудка", "Яблочный пирог", "Простой текст"])
    def test_cyrillic_is_russian(self, text):
        assert classify_language(text) == LanguageCode.RU

    @pytest.mark.parametrize("text", ["חזה עוף", "פאי תפוחים", "טקסט פשוט"])
    def test_hebrew_script_is_hebrew(self, text):
        assert classify_language(text) == LanguageCode.HE

    def test_more_letters_wins_in_mixed_text(self):
        """Highest weighted letter count wins; Cyrillic and Hebrew letters count double."""
        assert classify_language("Пирог Apple Pie") == LanguageCode.RU
        assert classify_language("Apple Pie פאי") == LanguageCode.EN
        assert classify_language("Ру פאי") == LanguageCode.HE

    def test_tie_defaults_to_english(self):
        # 4 Latin vs 2 Cyrillic counted double
        assert classify_language("abcd аб") == LanguageCode.EN
        assert classify_language("аб אב") == LanguageCode.EN

    @pytest.mark.parametrize("text", ["", "   ", "12345 !@#$%", "你好世界", "こんにちは"])
    def test_no_recognised_letters_defaults_to_english(self, text):
        assert classify_language(text) == LanguageCode.EN

    def test_none_defaults_to_english(self):
        assert classify_language(None) == LanguageCode.EN

    def test_digits_and_units_are_ignored(self):
        assert classify_language("Chicken Breast 100g") == LanguageCode.EN
        assert classify_language("Курица 100г") == LanguageCode.RU
        assert classify_language("חזה עוף 100 גרם") == LanguageCode.HE

    def test_latin_diacritics_count_as_latin(self):
        assert classify_language("Crème brûlée") == LanguageCode.EN

    def test_hebrew_vowel_points_are_not_letters(self):
        counts = count_script_letters("שָׁלוֹם")
        assert counts[LanguageCode.HE] == 4

    def test_is_deterministic(self):
        text = "Борщ with sour cream"
        assert {classify_language(text) for _ in range(5)} == {classify_language(text)}
        assert classify_language(text) in set(LanguageCode)
