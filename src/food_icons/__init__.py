"""
Food icon engine.

Maps free-text food names in English, Russian or Hebrew to icons from a
fixed catalog, and finds library foods by the tags of their icons.
"""

from food_icons.models.icons import LanguageCode
from food_icons.services.engine import FoodIconEngine, build_engine, get_engine
from food_icons.services.language import classify_language
from food_icons.utils.text import normalize_name

__version__ = "1.0.0"

__all__ = [
    "FoodIconEngine",
    "LanguageCode",
    "build_engine",
    "classify_language",
    "get_engine",
    "normalize_name",
]
