from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple, Union


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    NON_BINARY = "NB"


BASE_GENDERS = (Gender.MALE, Gender.FEMALE)


class PopularityTier(str, Enum):
    """Lifetime popularity tier assigned by the enricher."""
    VERY_POPULAR = "very_popular"
    POPULAR = "popular"
    MODERATE = "moderate"
    UNCOMMON = "uncommon"
    RARE = "rare"


class IndexPopularity(str, Enum):
    """Coarser popularity buckets used by the database indexes and the quiz."""
    VERY_POPULAR = "very_popular"
    POPULAR = "popular"
    UNCOMMON = "uncommon"


class LengthBucket(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    EXTRA_LONG = "extra_long"


class Level(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class GuessSource(str, Enum):
    RULE_BASED = "rule-based"
    HYBRID = "hybrid"
    ML_ONLY = "ml-only"


def length_bucket(length: int) -> LengthBucket:
    if length <= 4:
        return LengthBucket.SHORT
    if length <= 6:
        return LengthBucket.MEDIUM
    if length <= 9:
        return LengthBucket.LONG
    return LengthBucket.EXTRA_LONG


def index_popularity(total_count: int) -> IndexPopularity:
    if total_count > 800:
        return IndexPopularity.VERY_POPULAR
    if total_count > 500:
        return IndexPopularity.POPULAR
    return IndexPopularity.UNCOMMON


@dataclass(frozen=True)
class Enrichment:
    """Metadata derived from a name string and its aggregate count."""
    name_length: int
    starts_with_vowel: bool
    ends_with_vowel: bool
    popularity: PopularityTier
    religions: FrozenSet[str]
    cultural_origins: FrozenSet[str]
    religious_significance: Level
    cross_religious: bool
    language_origin: str
    traditional_significance: Level
    socioeconomic_level: Level
    perceived_traits: FrozenSet[str]
    desired_traits: FrozenSet[str]
    geographic_preference: FrozenSet[str]
    name_meaning: FrozenSet[str]
    typical_reactions: FrozenSet[str]


@dataclass
class NameRecord:
    """One name+gender pair aggregated across every loaded file."""
    name: str
    gender: Gender
    total_count: int = 0
    year_counts: List[Tuple[int, int]] = field(default_factory=list)
    state_counts: Dict[str, int] = field(default_factory=dict)
    profile: Optional[Enrichment] = None

    @property
    def key(self) -> str:
        return record_key(self.name, self.gender)

    def decade_count(self, decade: int) -> int:
        return sum(count for year, count in self.year_counts if decade <= year < decade + 10)


@dataclass
class NonBinaryCandidate:
    """A composite record for a name given to both boys and girls.

    Built per request from the M and F base records; never stored in the
    base table.
    """
    name: str
    male_count: int
    female_count: int
    is_curated: bool
    year_counts: List[Tuple[int, int]]
    profile: Optional[Enrichment]
    gender: Gender = Gender.NON_BINARY

    @property
    def total_count(self) -> int:
        return self.male_count + self.female_count

    @property
    def gender_balance(self) -> float:
        high = max(self.male_count, self.female_count)
        if high == 0:
            return 0.0
        return min(self.male_count, self.female_count) / high

    @property
    def key(self) -> str:
        return record_key(self.name, self.gender)

    def decade_count(self, decade: int) -> int:
        return sum(count for year, count in self.year_counts if decade <= year < decade + 10)


Candidate = Union[NameRecord, NonBinaryCandidate]


@dataclass
class ScoredCandidate:
    candidate: Candidate
    score: int

    @property
    def name(self) -> str:
        return self.candidate.name


@dataclass(frozen=True)
class Guess:
    name: str
    confidence: int
    source: GuessSource
    score: float = 0.0


def record_key(name: str, gender: Union[Gender, str]) -> str:
    return f"{name.lower()}_{Gender(gender).value}"
