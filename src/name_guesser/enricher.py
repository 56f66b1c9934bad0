"""Derives cultural, linguistic and perceptual metadata for a name.

Everything here is list membership against :mod:`name_guesser.lexicon`,
compared case-insensitively. The functions never raise for unknown names;
they fall back to the documented default tags instead.
"""

from typing import FrozenSet, Iterable, Optional, Tuple, Union

from . import lexicon
from .models import BASE_GENDERS, Enrichment, Gender, Level, PopularityTier

VOWELS = frozenset("aeiou")


def popularity_tier(count: int) -> PopularityTier:
    if count > 10000:
        return PopularityTier.VERY_POPULAR
    if count > 5000:
        return PopularityTier.POPULAR
    if count > 1000:
        return PopularityTier.MODERATE
    if count > 100:
        return PopularityTier.UNCOMMON
    return PopularityTier.RARE


def _as_gender(gender: Union[Gender, str, None]) -> Optional[Gender]:
    try:
        return Gender(gender)
    except ValueError:
        return None


def religions_for(name: str, gender: Union[Gender, str, None]) -> FrozenSet[str]:
    g = _as_gender(gender)
    if g not in BASE_GENDERS:
        return frozenset()
    lowered = name.lower()
    return frozenset(
        religion for religion, by_gender in lexicon.RELIGIOUS_NAMES.items()
        if lowered in by_gender[g.value]
    )


def religious_significance(religions: Iterable[str]) -> Level:
    n = len(set(religions))
    if n >= 3:
        return Level.HIGH
    if n == 2:
        return Level.MEDIUM
    if n == 1:
        return Level.LOW
    return Level.NONE


def language_origin(name: str) -> str:
    lowered = name.lower()
    for language, names in lexicon.LANGUAGE_ORIGINS:
        if lowered in names:
            return language
    return lexicon.DEFAULT_LANGUAGE


def cultural_origins_for(name: str, gender: Union[Gender, str, None], language: str) -> FrozenSet[str]:
    if _as_gender(gender) not in BASE_GENDERS:
        return frozenset()
    lowered = name.lower()
    origins = {origin for origin, names in lexicon.CULTURAL_ORIGINS if lowered in names}
    continents = set(lexicon.LANGUAGE_CONTINENTS.get(language, ()))
    for origin in origins:
        continents.update(lexicon.ORIGIN_CONTINENTS.get(origin, ()))
    return frozenset(origins | continents)


def traditional_significance(name: str, count: int) -> Level:
    lowered = name.lower()
    if lowered in lexicon.CLASSIC_NAMES or count > 5000:
        return Level.HIGH
    if lowered in lexicon.MODERN_NAMES:
        return Level.LOW
    return Level.MEDIUM


def socioeconomic_level(name: str) -> Level:
    lowered = name.lower()
    if lowered in lexicon.ELITE_NAMES:
        return Level.HIGH
    if lowered in lexicon.ASPIRATIONAL_NAMES:
        return Level.LOW
    return Level.MEDIUM


def _tags(name: str, categories: Tuple[Tuple[str, FrozenSet[str]], ...], default: str) -> FrozenSet[str]:
    lowered = name.lower()
    tags = frozenset(tag for tag, names in categories if lowered in names)
    return tags or frozenset([default])


def enrich(name: str, gender: Union[Gender, str, None], count: int, year: Optional[int] = None) -> Enrichment:
    """Build the full metadata profile for one name.

    ``count`` is the aggregate birth count and drives the count-dependent
    fields. ``year`` is accepted so callers can pass a raw file row through
    unchanged; none of the derivations depend on it.
    """
    lowered = name.lower()
    religions = religions_for(name, gender)
    language = language_origin(name)
    return Enrichment(
        name_length=len(name),
        starts_with_vowel=lowered[:1] in VOWELS,
        ends_with_vowel=lowered[-1:] in VOWELS,
        popularity=popularity_tier(count),
        religions=religions,
        cultural_origins=cultural_origins_for(name, gender, language),
        religious_significance=religious_significance(religions),
        cross_religious=lowered in lexicon.CROSS_RELIGIOUS_NAMES,
        language_origin=language,
        traditional_significance=traditional_significance(name, count),
        socioeconomic_level=socioeconomic_level(name),
        perceived_traits=_tags(name, lexicon.PERCEIVED_TRAITS, lexicon.DEFAULT_PERCEIVED_TRAIT),
        desired_traits=_tags(name, lexicon.DESIRED_TRAITS, lexicon.DEFAULT_DESIRED_TRAIT),
        geographic_preference=_tags(name, lexicon.GEOGRAPHIC_PREFERENCES, lexicon.DEFAULT_COMMUNITY),
        name_meaning=_tags(name, lexicon.NAME_MEANINGS, lexicon.DEFAULT_MEANING),
        typical_reactions=_tags(name, lexicon.TYPICAL_REACTIONS, lexicon.DEFAULT_REACTION),
    )
