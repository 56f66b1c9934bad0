#!/usr/bin/env python

"""Rule-based scoring of a candidate name against quiz answers.

Each question contributes independently and the contributions are summed.
Within one question the full match, partial match and penalty branches are
mutually exclusive and checked in that order.
"""

import logging
from typing import List, Optional

from .answers import AnswerSet
from .config import ScoringSettings
from .enricher import VOWELS, enrich
from .models import Candidate, Gender, Level, LengthBucket, NameRecord, NonBinaryCandidate

logger = logging.getLogger(__name__)

TRADITIONAL_VALUES = frozenset({"traditional", "security", "community"})
PROGRESSIVE_VALUES = frozenset({"diverse", "progressive", "justice", "environment"})
IGNORED_RELIGIONS = frozenset({"prefer_not_to_say", "none", "other_spiritual"})
IGNORED_CULTURES = frozenset({"prefer_not_to_say", "mixed"})
HIGH_EDUCATION_CAREERS = frozenset({"legal", "medical", "science", "education", "technology", "engineering"})
RURAL_UPBRINGING = frozenset({"rural_grew_up", "agricultural_grew_up"})
URBAN_UPBRINGING = frozenset({"urban_grew_up", "international_grew_up"})

POPULAR_COUNT = 500
VERY_POPULAR_COUNT = 800

# Five plausible names per gender and length bucket, used when retrieval
# comes back empty.
FALLBACK_BY_LENGTH = {
    Gender.FEMALE: {
        LengthBucket.LONG: ("Elizabeth", "Victoria", "Isabella", "Gabrielle", "Stephanie"),
        LengthBucket.EXTRA_LONG: ("Alexandria", "Christina", "Katherine", "Stephanie", "Elizabeth"),
        LengthBucket.MEDIUM: ("Sarah", "Emma", "Grace", "Faith", "Hope"),
        LengthBucket.SHORT: ("Amy", "Eva", "Ivy", "Joy", "Zoe"),
    },
    Gender.MALE: {
        LengthBucket.LONG: ("Alexander", "Christopher", "Benjamin", "Nathaniel", "Sebastian"),
        LengthBucket.EXTRA_LONG: ("Alexander", "Christopher", "Nathaniel", "Sebastian", "Theodore"),
        LengthBucket.MEDIUM: ("David", "James", "Henry", "Peter", "Lucas"),
        LengthBucket.SHORT: ("Alex", "John", "Paul", "Mark", "Luke"),
    },
    Gender.NON_BINARY: {
        LengthBucket.LONG: ("Alex", "Jordan", "Taylor", "Casey", "Morgan"),
        LengthBucket.EXTRA_LONG: ("Alexandria", "Christopher", "Stephanie", "Nathaniel", "Gabrielle"),
        LengthBucket.MEDIUM: ("Alex", "Jordan", "Taylor", "Casey", "Morgan"),
        LengthBucket.SHORT: ("Alex", "Sam", "Jamie", "Avery", "Riley"),
    },
}
FALLBACK_COUNTS = (1000, 900, 800, 700, 600)
NON_BINARY_FALLBACK_COUNTS = (2000, 1800, 1600, 1400, 1200)


def _is_long(length: Optional[LengthBucket]) -> bool:
    return length in (LengthBucket.LONG, LengthBucket.EXTRA_LONG)


class ScoringEngine:
    def __init__(self, settings: Optional[ScoringSettings] = None):
        self.settings = settings or ScoringSettings()

    def score(self, candidate: Candidate, answers: AnswerSet) -> int:
        info = candidate.profile
        if info is None:
            info = enrich(candidate.name, candidate.gender, candidate.total_count)
        english = info.language_origin == "english"
        name = candidate.name
        first = name[:1].lower()
        score = 0

        if answers.political_values:
            values = set(answers.political_values)
            traditional = bool(values & TRADITIONAL_VALUES)
            progressive = bool(values & PROGRESSIVE_VALUES)
            if english and traditional:
                score += 60
            elif not english and progressive:
                score += 60
            elif english and progressive:
                score += 30
            elif not english and traditional:
                score += 20

        if answers.language_preference:
            langs = answers.language_preference
            if "english_only" in langs and english:
                score += 50
            elif "multilingual" in langs and not english:
                score += 50
            elif info.language_origin in langs:
                score += 45
            elif "english_only" in langs and not english:
                score -= 20

        religions = [r for r in answers.religious_tradition if r not in IGNORED_RELIGIONS]
        if religions:
            if any(r in info.religions for r in religions):
                score += 50
            elif info.cross_religious:
                score += 25

        cultures = [c for c in answers.cultural_background if c not in IGNORED_CULTURES]
        if cultures and any(c in info.cultural_origins for c in cultures):
            score += 45

        if answers.length is not None:
            score += self.length_score(len(name), answers.length)

        if any(g == candidate.gender for g in answers.gender if g != Gender.NON_BINARY):
            score += 25

        if answers.popularity is not None:
            score += self.popularity_score(candidate, answers)

        if answers.starts_with is not None:
            if (answers.starts_with == "vowel") == (first in VOWELS):
                score += 15

        if answers.favorite_letter and first == answers.favorite_letter.lower():
            score += 20

        if answers.career_path:
            high_ed = any(c in HIGH_EDUCATION_CAREERS for c in answers.career_path)
            if high_ed and info.socioeconomic_level == Level.HIGH:
                score += 15
            elif not high_ed and info.socioeconomic_level == Level.MEDIUM:
                score += 10

        tradition = answers.family_tradition
        if tradition is not None:
            significance = info.traditional_significance
            if tradition >= 2.5 and significance == Level.HIGH:
                score += 20
            elif tradition <= 1.5 and significance == Level.LOW:
                score += 20
            elif significance == Level.MEDIUM:
                # Either side of the midpoint counts as a partial match.
                score += 15

        diversity = answers.diversity_attitude
        if diversity is not None:
            if diversity >= 2.5 and not english:
                score += 15
            elif diversity <= 1.5 and english:
                score += 15
            elif diversity >= 2.0 and not english:
                score += 10

        if any(m in info.name_meaning for m in answers.name_meaning_preference):
            score += 15

        if answers.grew_up_location:
            score += self.upbringing_score(answers, info.traditional_significance)

        if any(p in info.perceived_traits for p in answers.name_perception):
            score += 25
        if any(d in info.desired_traits for d in answers.desired_impression):
            score += 25
        if any(r in info.typical_reactions for r in answers.name_reactions):
            score += 25

        if any(f"{c}_community" in info.geographic_preference for c in answers.community_type):
            score += 15

        return score

    @staticmethod
    def length_score(length: int, wanted: LengthBucket) -> int:
        if wanted == LengthBucket.SHORT:
            if length <= 4:
                return 35
            if length <= 5:
                return 20
            return -30
        if wanted == LengthBucket.MEDIUM:
            if 5 <= length <= 6:
                return 35
            if length < 4 or length > 7:
                return -25
            return 0
        if wanted == LengthBucket.LONG:
            if length >= 7:
                return 35
            if length >= 6:
                return 20
            return -40
        if length >= 10:
            return 35
        if length >= 8:
            return 20
        return -40

    @staticmethod
    def upbringing_score(answers: AnswerSet, significance: Level) -> int:
        rural = answers.has_any("grew_up_location", RURAL_UPBRINGING)
        urban = answers.has_any("grew_up_location", URBAN_UPBRINGING)
        # Rural upbringings lean towards less traditional names.
        if rural and significance == Level.LOW:
            return 30
        if urban and significance == Level.HIGH:
            return 30
        if (rural or urban) and significance == Level.MEDIUM:
            return 20
        if rural and significance == Level.HIGH:
            return -15
        if urban and significance == Level.LOW:
            return -10
        return 0

    def popularity_score(self, candidate: Candidate, answers: AnswerSet) -> int:
        wanted = answers.popularity.value
        total = candidate.total_count
        popular = total > POPULAR_COUNT
        very_popular = total > VERY_POPULAR_COUNT

        if answers.decade is not None:
            dp = self.get_decade_popularity(candidate, answers.decade)
            if wanted == "very_popular" and very_popular and dp > 0.7:
                return 20
            if wanted == "popular" and popular and dp > 0.5:
                return 20
            if wanted == "uncommon" and not popular and dp < 0.3:
                return 20
            if wanted == "very_popular" and popular and dp > 0.5:
                return 15
            if wanted == "uncommon" and total < 1000 and dp < 0.5:
                return 15
            return 0

        if wanted == "very_popular" and very_popular:
            return 20
        if wanted == "popular" and popular and not very_popular:
            return 20
        if wanted == "uncommon" and not popular:
            return 20
        if wanted == "very_popular" and popular:
            return 10
        if wanted == "uncommon" and total < 1000:
            return 10
        return 0

    def get_decade_popularity(self, candidate: Candidate, decade: int) -> float:
        """Rough share of a name's popularity that falls in ``decade``.

        The default ``coarse`` mode only looks at the lifetime total. The
        ``per_year`` mode uses the record's year counts where it has any.
        """
        total = candidate.total_count
        if self.settings.decade_mode == "per_year" and candidate.year_counts and total > 0:
            return min(1.0, 10 * candidate.decade_count(decade) / total)
        if total > 1000:
            return 0.8
        if total > 500:
            return 0.6
        if total > 100:
            return 0.4
        return 0.2

    def fallback_candidates(self, answers: AnswerSet) -> List[Candidate]:
        """Fixed English names for the answered gender and length."""
        length = answers.length or LengthBucket.MEDIUM
        genders = list(answers.gender) or [Gender.FEMALE, Gender.MALE]

        out = []
        for gender in genders:
            counts = NON_BINARY_FALLBACK_COUNTS if gender == Gender.NON_BINARY else FALLBACK_COUNTS
            for name, count in zip(FALLBACK_BY_LENGTH[gender][length], counts):
                out.append(self._synthesize(name, gender, count))
        if not answers.gender:
            # Gender-neutral pair after both binary lists.
            if _is_long(length):
                picks = [("Alexandra", Gender.FEMALE), ("Alexander", Gender.MALE)]
            else:
                picks = [("Alex", Gender.MALE), ("Emma", Gender.FEMALE)]
            out.extend(self._synthesize(n, g, FALLBACK_COUNTS[0]) for n, g in picks)

        seen = set()
        unique = []
        for candidate in out:
            if candidate.name.lower() not in seen:
                seen.add(candidate.name.lower())
                unique.append(candidate)
        logger.info("Using %d fallback candidates", len(unique))
        return unique

    @staticmethod
    def _synthesize(name: str, gender: Gender, count: int) -> Candidate:
        if gender == Gender.NON_BINARY:
            half = count // 2
            return NonBinaryCandidate(
                name=name,
                male_count=half,
                female_count=count - half,
                is_curated=True,
                year_counts=[],
                profile=enrich(name, Gender.MALE, count),
            )
        return NameRecord(name=name, gender=gender, total_count=count, profile=enrich(name, gender, count))
