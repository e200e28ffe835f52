"""Text normalization and matching helpers."""

import re
from functools import lru_cache


def normalize_name(text: str | None) -> str:
    """
    Normalize a food name or tag for matching.

    Trims, lowercases and collapses any run of whitespace to a single
    space. Non-Latin scripts pass through untouched apart from lowercasing.
    Idempotent: normalize_name(normalize_name(s)) == normalize_name(s).
    """
    if not text:
        return ""
    return " ".join(str(text).lower().split())


@lru_cache(maxsize=1024)
def _word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(word)}(?!\w)")


def contains_whole_word(text: str, word: str) -> bool:
    """
    Check whether `word` occurs in `text` on word boundaries.

    Boundaries are Unicode-aware, so "курица" is a whole word in
    "курица гриль" but not in "курицами".
    """
    if not word or not text:
        return False
    return _word_pattern(word).search(text) is not None


def _windows(text: str, size: int) -> set[str]:
    return {
        chunk
        for word in text.split()
        for chunk in (word[i:i + size] for i in range(len(word) - size + 1))
    }


def shares_substring(a: str, b: str, min_length: int = 3) -> bool:
    """
    Check whether `a` and `b` share a substring of at least `min_length` chars.

    Shared runs never span whitespace: "pie" and "apple pie" overlap,
    "e p" does not count.
    """
    if len(a) < min_length or len(b) < min_length:
        return False
    shorter, longer = sorted((a, b), key=len)
    windows = _windows(shorter, min_length)
    if not windows:
        return False
    return any(chunk in longer for chunk in windows)
