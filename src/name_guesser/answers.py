"""Validated quiz answers.

``AnswerSet`` is the only shape the engine reads. Every question is
optional; multi-select questions accept a single value or a list and are
normalised to tuples. Slider questions accept either the raw slider
position or the option value it maps to.
"""

from typing import Any, Iterable, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import AnswerValidationError
from .models import Gender, IndexPopularity, LengthBucket

PREFER_NOT_TO_SAY = "PREFER_NOT_TO_SAY"

STARTS_WITH = frozenset({"vowel", "consonant"})

POLITICAL_VALUES = frozenset({
    "traditional", "diverse", "community", "progressive", "justice",
    "security", "environment", "economic", "education", "cooperation",
})

LANGUAGES = frozenset({
    "english_only", "spanish", "chinese", "filipino", "vietnamese", "korean",
    "japanese", "hindi", "arabic", "hebrew", "french", "german", "italian",
    "russian", "polish", "greek", "irish", "scandinavian", "yoruba", "amharic",
    "haitian_creole", "portuguese", "multilingual", "other",
})

RELIGIOUS_TRADITIONS = frozenset({
    "christianity", "islam", "judaism", "hinduism", "buddhism", "sikhism",
    "greek", "norse", "celtic", "other_spiritual", "none", "prefer_not_to_say",
})

CULTURAL_BACKGROUNDS = frozenset({
    "north-america", "central-america", "south-america", "europe", "africa",
    "asia", "oceania", "mixed", "prefer_not_to_say",
})

COMMUNITY_TYPES = frozenset({
    "rural", "urban", "suburban", "coastal", "mountain", "agricultural",
    "college", "industrial", "arts", "international", "gated", "walkable",
})

GREW_UP_LOCATIONS = frozenset({
    "rural_grew_up", "urban_grew_up", "suburban_grew_up", "coastal_grew_up",
    "mountain_grew_up", "agricultural_grew_up", "college_grew_up",
    "industrial_grew_up", "international_grew_up", "gated_grew_up",
})

NAME_MEANINGS = frozenset({
    "royal", "nature", "warrior", "light", "love", "wisdom", "music", "water",
    "fire", "moon", "sun", "peace", "creative", "sound",
})

PERCEPTIONS = frozenset({
    "elegant", "strong", "friendly", "intelligent", "creative_perceived",
    "unique", "traditional_perceived", "modern", "natural", "trustworthy",
})

IMPRESSIONS = frozenset({
    "authority", "strength_desired", "warmth", "intelligence_desired",
    "creativity_desired", "uniqueness_desired", "tradition_desired",
    "nature_connection",
})

REACTIONS = frozenset({
    "loved", "spelling_questions", "memorable", "neutral", "jokes",
    "trustworthy_reaction", "old_fashioned", "unique_reaction",
    "traditional_reaction", "modern_reaction", "origin_questions",
    "strong_reaction",
})

CAREERS = frozenset({
    "legal", "medical", "arts", "business", "science", "education",
    "entertainment", "environment", "technology", "engineering",
    "public_service", "culinary", "travel", "writing", "sports", "theater",
    "trades", "entrepreneurship", "film", "real_estate", "design",
})

BAPTISM_STATUSES = frozenset({
    "christian_baptized", "jewish_naming", "hindu_naming", "islamic_naming",
    "buddhist_naming", "sikh_naming", "other_ceremony", "none", "unsure",
    "prefer_not_to_say",
})

# Slider positions as the quiz reports them.
LENGTH_SLIDER = {1: "short", 2: "medium", 3: "long", 4: "extra_long"}
POPULARITY_SLIDER = {1: "uncommon", 2: "popular", 3: "very_popular"}

_MULTI_SELECT = {
    "political_values": POLITICAL_VALUES,
    "language_preference": LANGUAGES,
    "religious_tradition": RELIGIOUS_TRADITIONS,
    "cultural_background": CULTURAL_BACKGROUNDS,
    "grew_up_location": GREW_UP_LOCATIONS,
    "community_type": COMMUNITY_TYPES,
    "name_meaning_preference": NAME_MEANINGS,
    "name_perception": PERCEPTIONS,
    "desired_impression": IMPRESSIONS,
    "name_reactions": REACTIONS,
    "career_path": CAREERS,
    "baptism_status": BAPTISM_STATUSES,
}


def _as_list(value: Any) -> list:
    if value is None or value == "":
        return []
    if isinstance(value, (str, bytes, int, float)):
        return [value]
    return list(value)


def _slider(value: Any, positions: Mapping[int, str]) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # Same rounding the quiz applies to slider positions.
        position = min(max(int(value + 0.5), 1), max(positions))
        return positions[position]
    return value


class AnswerSet(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    gender: Tuple[Gender, ...] = ()
    decade: Optional[int] = Field(default=None, ge=1880, le=2030)
    length: Optional[LengthBucket] = None
    starts_with: Optional[str] = None
    popularity: Optional[IndexPopularity] = None
    state: Optional[str] = None
    political_values: Tuple[str, ...] = ()
    language_preference: Tuple[str, ...] = ()
    religious_tradition: Tuple[str, ...] = ()
    cultural_background: Tuple[str, ...] = ()
    grew_up_location: Tuple[str, ...] = ()
    community_type: Tuple[str, ...] = ()
    family_tradition: Optional[float] = Field(default=None, ge=1, le=3)
    diversity_attitude: Optional[float] = Field(default=None, ge=1, le=3)
    name_meaning_preference: Tuple[str, ...] = ()
    name_perception: Tuple[str, ...] = ()
    desired_impression: Tuple[str, ...] = ()
    name_reactions: Tuple[str, ...] = ()
    career_path: Tuple[str, ...] = ()
    favorite_letter: Optional[str] = None
    # Collected by the quiz; scoring does not use it.
    baptism_status: Tuple[str, ...] = ()

    @field_validator("gender", mode="before")
    @classmethod
    def _normalize_gender(cls, value):
        genders = []
        for g in _as_list(value):
            g = str(g).strip().upper()
            if g == PREFER_NOT_TO_SAY:
                g = Gender.NON_BINARY.value
            if g not in genders:
                genders.append(g)
        return genders

    @field_validator("decade", mode="before")
    @classmethod
    def _normalize_decade(cls, value):
        if isinstance(value, str):
            value = value.strip().rstrip("s") or None
        return value

    @field_validator("length", mode="before")
    @classmethod
    def _normalize_length(cls, value):
        return _slider(value, LENGTH_SLIDER) or None

    @field_validator("popularity", mode="before")
    @classmethod
    def _normalize_popularity(cls, value):
        return _slider(value, POPULARITY_SLIDER) or None

    @field_validator("starts_with", mode="before")
    @classmethod
    def _check_starts_with(cls, value):
        if value is None or value == "":
            return None
        value = str(value).strip().lower()
        if value not in STARTS_WITH:
            raise ValueError(f"expected one of {sorted(STARTS_WITH)}")
        return value

    @field_validator("state", mode="before")
    @classmethod
    def _normalize_state(cls, value):
        if value is None:
            return None
        value = str(value).strip().upper()
        if not value:
            return None
        if len(value) != 2 or not value.isalpha():
            raise ValueError("state must be a two-letter code")
        return value

    @field_validator("favorite_letter", mode="before")
    @classmethod
    def _normalize_letter(cls, value):
        if value is None or value == "":
            return None
        value = str(value).strip().upper()
        if len(value) != 1 or not ("A" <= value <= "Z"):
            raise ValueError("favorite_letter must be a single letter A-Z")
        return value

    @field_validator(*_MULTI_SELECT, mode="before")
    @classmethod
    def _normalize_multi(cls, value, info):
        allowed = _MULTI_SELECT[info.field_name]
        values = []
        for v in _as_list(value):
            v = str(v).strip()
            if v not in allowed:
                raise ValueError(f"unknown option {v!r}")
            if v not in values:
                values.append(v)
        return values

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AnswerSet":
        """Validate a raw answer mapping, raising AnswerValidationError."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            first = e.errors()[0]
            question = str(first["loc"][0]) if first.get("loc") else None
            raise AnswerValidationError(
                f"Invalid answer for {question}: {first['msg']}",
                question=question,
            ).add_context("errors", e.errors()) from e

    def selected(self, question: str) -> Tuple[str, ...]:
        return tuple(getattr(self, question))

    def has_any(self, question: str, options: Iterable[str]) -> bool:
        options = set(options)
        return any(v in options for v in self.selected(question))
