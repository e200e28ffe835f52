"""
Pydantic models for the icon catalog, match results and cache values.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LanguageCode(str, Enum):
    """Script-languages understood by the classifier and the tag catalog."""

    EN = "en"
    RU = "ru"
    HE = "he"


# Order matters: reverse search scans locales in this order.
SUPPORTED_LOCALES: tuple[LanguageCode, ...] = (
    LanguageCode.EN,
    LanguageCode.RU,
    LanguageCode.HE,
)

FALLBACK_LOCALE = LanguageCode.EN


class IconDefinition(BaseModel):
    """A catalog entry: an icon and the resource key of its localized tags."""

    model_config = ConfigDict(frozen=True)

    icon: str = Field(..., min_length=1, description="Icon identifier, e.g. an emoji")
    tag_key: str = Field(..., min_length=1, description="Tag resource key, e.g. 'apple'")
    order: int = Field(0, ge=0, description="Declaration position in the catalog")


class IconMatch(BaseModel):
    """Winning definition of a scored lookup."""

    model_config = ConfigDict(frozen=True)

    icon: str
    tag_key: str
    tag: str = Field(..., description="Tag that produced the score")
    score: int = Field(..., gt=0)
    locale: LanguageCode = Field(..., description="Locale whose tags were searched")


class ScoreWeights(BaseModel):
    """
    Scoring policy for the matcher.

    The defaults rank an exact tag hit above a whole-word hit inside a longer
    name, above a name that is a fragment of a tag, above a loose overlap.
    """

    model_config = ConfigDict(frozen=True)

    exact: int = Field(10, gt=0)
    whole_word: int = Field(5, gt=0)
    tag_contains: int = Field(3, gt=0)
    partial: int = Field(1, gt=0)
    min_overlap: int = Field(3, ge=1, description="Shortest shared substring for a partial hit")

    @model_validator(mode="after")
    def _check_ranking(self) -> "ScoreWeights":
        if not self.exact >= self.whole_word >= self.tag_contains >= self.partial:
            raise ValueError("weights must rank exact >= whole_word >= tag_contains >= partial")
        return self


class CachedIcon(BaseModel):
    """Durable cache value. `icon=None` records a deliberate no-match."""

    icon: str | None = None
