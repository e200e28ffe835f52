"""
Icon matcher.

Scores a normalized food name against every catalog definition's tags in
one locale and picks the best icon. Pure: no I/O, no state besides the
immutable catalog.
"""

import logging

from food_icons.models.icons import IconMatch, LanguageCode, ScoreWeights
from food_icons.services.catalog import IconCatalog
from food_icons.services.language import classify_language
from food_icons.utils.text import contains_whole_word, normalize_name, shares_substring

logger = logging.getLogger(__name__)


class IconMatcher:
    """
    Resolve food names to catalog icons.

    Usage:
        matcher = IconMatcher(get_icon_catalog())
        matcher.resolve_icon("Apple Pie")  # "🍎"
    """

    def __init__(self, catalog: IconCatalog, weights: ScoreWeights | None = None):
        self.catalog = catalog
        self.weights = weights or ScoreWeights()

    def score_tag(self, name: str, tag: str) -> int:
        """
        Score one normalized tag against a normalized name.

        Highest applicable rule wins: exact, whole word inside the name,
        name inside the tag, then a shared run of `min_overlap` characters.
        """
        w = self.weights
        if not name or not tag:
            return 0
        if tag == name:
            return w.exact
        if contains_whole_word(name, tag):
            return w.whole_word
        if name in tag:
            return w.tag_contains
        if shares_substring(name, tag, w.min_overlap):
            return w.partial
        return 0

    def _best_tag(self, name: str, tags: list[str]) -> tuple[int, str]:
        best_score, best_tag = 0, ""
        for tag in tags:
            score = self.score_tag(name, tag)
            if score > best_score:
                best_score, best_tag = score, tag
                if score == self.weights.exact:
                    break
        return best_score, best_tag

    def find_best_match(
        self,
        name: str,
        locale: LanguageCode | str | None = None,
    ) -> IconMatch | None:
        """
        Find the winning definition for a food name.

        Args:
            name: Raw food name as entered by the user
            locale: Tag locale to search; classified from `name` if omitted

        Returns:
            IconMatch for the highest-scoring definition (first declared wins
            ties), or None when nothing scores above zero
        """
        normalized = normalize_name(name)
        if not normalized:
            return None

        search_locale = LanguageCode(locale) if locale else classify_language(name)

        best: IconMatch | None = None
        for definition in self.catalog:
            used_locale, tags = self.catalog.tags_for(definition, search_locale)
            score, tag = self._best_tag(normalized, tags)
            # Strictly greater keeps the earliest definition on ties
            if score > 0 and (best is None or score > best.score):
                best = IconMatch(
                    icon=definition.icon,
                    tag_key=definition.tag_key,
                    tag=tag,
                    score=score,
                    locale=used_locale,
                )
                if score == self.weights.exact:
                    break

        if best is None:
            logger.debug(f"No icon for '{normalized}' ({search_locale.value})")
        return best

    def resolve_icon(
        self,
        name: str,
        locale: LanguageCode | str | None = None,
    ) -> str | None:
        """Resolve a food name to an icon identifier, or None."""
        match = self.find_best_match(name, locale)
        return match.icon if match else None
