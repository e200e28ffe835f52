"""Utility functions."""

from .text import contains_whole_word, normalize_name, shares_substring

__all__ = ["contains_whole_word", "normalize_name", "shares_substring"]
