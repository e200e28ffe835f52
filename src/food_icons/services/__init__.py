"""Icon engine services: classifier, matcher, cache and reverse search."""

from .cache import IconResolutionCache
from .engine import FoodIconEngine, build_engine, clear_engine_cache, get_engine
from .language import classify_language
from .matcher import IconMatcher
from .search import TagSearch

__all__ = [
    "FoodIconEngine",
    "IconMatcher",
    "IconResolutionCache",
    "TagSearch",
    "build_engine",
    "classify_language",
    "clear_engine_cache",
    "get_engine",
]
