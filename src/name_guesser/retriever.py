import logging
from typing import Callable, List, Optional

from .answers import AnswerSet
from .database import RELAXED, STRICT, NameDatabase
from .models import BASE_GENDERS, Candidate, Gender, LengthBucket

logger = logging.getLogger(__name__)

# Length windows used once exact buckets have produced nothing.
RELAXED_LENGTH: dict = {
    LengthBucket.SHORT: lambda n: n <= 5,
    LengthBucket.MEDIUM: lambda n: 4 <= n <= 7,
    LengthBucket.LONG: lambda n: n >= 6,
    LengthBucket.EXTRA_LONG: lambda n: n >= 8,
}


def _length_window(length: Optional[LengthBucket]) -> Callable[[int], bool]:
    if length is None:
        return lambda n: True
    return RELAXED_LENGTH[length]


class CandidateRetriever:
    """Selects the names worth scoring for a set of answers.

    Binary genders go through progressively broader indexes, stopping at
    the first one with any names in it. Non-binary answers draw from the
    non-binary pool instead.
    """

    def __init__(self, database: NameDatabase):
        self.database = database

    def get_candidates(self, answers: AnswerSet) -> List[Candidate]:
        genders = answers.gender or BASE_GENDERS
        candidates = self._collect(genders, lambda g: self._for_gender(g, answers))
        if not candidates:
            logger.info("No candidates from the indexes; trying relaxed lookup")
            candidates = self._collect(genders, lambda g: self._relaxed(g, answers))
        logger.debug("Retrieved %d candidates", len(candidates))
        return candidates

    @staticmethod
    def _collect(genders, lookup) -> List[Candidate]:
        seen = set()
        out = []
        for gender in genders:
            for candidate in lookup(gender):
                lowered = candidate.name.lower()
                if lowered not in seen:
                    seen.add(lowered)
                    out.append(candidate)
        return out

    def _for_gender(self, gender: Gender, answers: AnswerSet) -> List[Candidate]:
        db = self.database
        if gender == Gender.NON_BINARY:
            return db.get_non_binary_names(STRICT, answers.length)

        tiers = (
            ("all criteria", lambda: db.get_names_by_all_criteria(
                answers.state, gender, answers.length, answers.starts_with, answers.popularity)),
            ("state+gender+length", lambda: db.get_names_by_state_gender_and_length(
                answers.state, gender, answers.length)),
            ("gender+length", lambda: db.get_names_by_gender_and_length(gender, answers.length)),
            ("gender", lambda: db.get_names_by_gender(gender)),
        )
        for label, lookup in tiers:
            names = lookup()
            if names:
                logger.debug("%s: %d names from the %s index", gender.value, len(names), label)
                return names
        return []

    def _relaxed(self, gender: Gender, answers: AnswerSet) -> List[Candidate]:
        fits = _length_window(answers.length)
        if gender == Gender.NON_BINARY:
            return [c for c in self.database.get_non_binary_names(RELAXED) if fits(len(c.name))]

        vowel = None if answers.starts_with is None else answers.starts_with == "vowel"
        return [
            r for r in self.database.get_names_by_gender(gender)
            if fits(len(r.name)) and (vowel is None or r.profile.starts_with_vowel == vowel)
        ]
