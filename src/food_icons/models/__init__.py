"""Pydantic models."""

from .icons import (
    FALLBACK_LOCALE,
    SUPPORTED_LOCALES,
    CachedIcon,
    IconDefinition,
    IconMatch,
    LanguageCode,
    ScoreWeights,
)

__all__ = [
    "FALLBACK_LOCALE",
    "SUPPORTED_LOCALES",
    "CachedIcon",
    "IconDefinition",
    "IconMatch",
    "LanguageCode",
    "ScoreWeights",
]
