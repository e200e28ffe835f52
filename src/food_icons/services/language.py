"""
Script classifier.

Picks the language of a food name from the dominant Unicode script among
Latin, Cyrillic and Hebrew letters.
"""

from food_icons.models.icons import FALLBACK_LOCALE, LanguageCode


def _is_latin(cp: int) -> bool:
    # Basic Latin, Latin-1 Supplement, Latin Extended-A/B, Latin Extended Additional
    return (
        0x41 <= cp <= 0x5A
        or 0x61 <= cp <= 0x7A
        or 0xC0 <= cp <= 0x24F
        or 0x1E00 <= cp <= 0x1EFF
    )


def _is_cyrillic(cp: int) -> bool:
    return 0x0400 <= cp <= 0x04FF or 0x0500 <= cp <= 0x052F


def _is_hebrew(cp: int) -> bool:
    # Hebrew block and Alphabetic Presentation Forms (Hebrew part)
    return 0x0590 <= cp <= 0x05FF or 0xFB1D <= cp <= 0xFB4F


# Cyrillic and Hebrew letters count double: Latin brand names and units are
# common inside Russian and Hebrew entries ("Пирог Apple Pie" is Russian).
SCRIPT_WEIGHTS: dict[LanguageCode, int] = {
    LanguageCode.EN: 1,
    LanguageCode.RU: 2,
    LanguageCode.HE: 2,
}


def count_script_letters(text: str) -> dict[LanguageCode, int]:
    """Count letters per supported script. Non-letters are ignored."""
    counts = {code: 0 for code in LanguageCode}
    for char in text:
        if not char.isalpha():
            continue
        cp = ord(char)
        if _is_latin(cp):
            counts[LanguageCode.EN] += 1
        elif _is_cyrillic(cp):
            counts[LanguageCode.RU] += 1
        elif _is_hebrew(cp):
            counts[LanguageCode.HE] += 1
    return counts


def classify_language(text: str | None) -> LanguageCode:
    """
    Classify text by its dominant script.

    The script with the strictly highest weighted letter count wins. Any
    tie at the top, including no recognised letters at all, falls back to
    English.

    Examples:
        classify_language("Куриная грудка") -> LanguageCode.RU
        classify_language("Пирог Apple Pie") -> LanguageCode.RU (5x2 vs 8)
        classify_language("Apple Pie аб") -> LanguageCode.EN (8 vs 2x2)
    """
    if not text or not isinstance(text, str):
        return FALLBACK_LOCALE

    scores = {code: count * SCRIPT_WEIGHTS[code] for code, count in count_script_letters(text).items()}
    top = max(scores.values())
    leaders = [code for code, score in scores.items() if score == top]
    if top == 0 or len(leaders) > 1:
        return FALLBACK_LOCALE
    return leaders[0]
