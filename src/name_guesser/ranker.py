#!/usr/bin/env python

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .answers import AnswerSet
from .config import EngineSettings
from .database import NameDatabase
from .models import Guess, GuessSource, ScoredCandidate
from .predictor import NamePredictor
from .retriever import CandidateRetriever
from .scoring import ScoringEngine
from .sources import NameSource

logger = logging.getLogger(__name__)


@dataclass
class _Blend:
    name: str
    rule_score: float
    ml_score: float
    combined: float
    source: GuessSource


class HybridRanker:
    """Blends rule-based scores with the learned predictor into top-k guesses."""

    def __init__(self, database: NameDatabase, settings: Optional[EngineSettings] = None,
                 predictor: Optional[NamePredictor] = None, rng: Optional[random.Random] = None):
        self.settings = settings or EngineSettings()
        self.database = database
        self.retriever = CandidateRetriever(database)
        self.scorer = ScoringEngine(self.settings.scoring)
        if predictor is None and self.settings.ranking.use_predictor:
            predictor = NamePredictor()
        self.predictor = predictor
        self.rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: EngineSettings, sources: Optional[Sequence[NameSource]] = None,
                      predictor: Optional[NamePredictor] = None) -> "HybridRanker":
        database = NameDatabase(sources, settings.data)
        return cls(database, settings, predictor)

    def score_candidates(self, answers: AnswerSet) -> List[ScoredCandidate]:
        """Every retrieved candidate with its score, best first."""
        candidates = self.retriever.get_candidates(answers)
        if not candidates:
            candidates = self.scorer.fallback_candidates(answers)
        scored = [ScoredCandidate(c, self.scorer.score(c, answers)) for c in candidates]
        scored.sort(key=lambda s: (-s.score, -s.candidate.total_count))
        return scored

    def _ml_predictions(self, answers: AnswerSet, k: int) -> List[tuple]:
        if self.predictor is None:
            return []
        try:
            return self.predictor.top(answers, k)
        except Exception as e:
            logger.warning("Predictor failed, using rule-based guesses only: %s", e)
            return []

    def rank(self, answers: AnswerSet, k: Optional[int] = None) -> List[Guess]:
        k = self.settings.ranking.top_k if k is None else k
        ranking = self.settings.ranking
        rule_guesses = self.score_candidates(answers)[:k]

        # The predictor only refines an existing rule-based pool.
        predictions = self._ml_predictions(answers, k) if rule_guesses else []
        # Without predictions the rule scores are used unweighted.
        rule_weight = ranking.rule_weight if predictions else 1.0

        blended: Dict[str, _Blend] = {}
        for guess in rule_guesses:
            key = guess.name.lower()
            if key not in blended:
                blended[key] = _Blend(
                    guess.name, guess.score, 0.0, guess.score * rule_weight, GuessSource.RULE_BASED
                )

        for name, probability in predictions:
            ml_score = probability * 100
            entry = blended.get(name.lower())
            if entry is not None:
                entry.ml_score = ml_score
                entry.combined = entry.rule_score * ranking.rule_weight + ml_score * ranking.ml_weight
                entry.source = GuessSource.HYBRID
            else:
                blended[name.lower()] = _Blend(
                    name, 0.0, ml_score, ml_score * ranking.ml_weight, GuessSource.ML_ONLY
                )

        ordered = sorted(blended.values(), key=lambda b: b.combined, reverse=True)[:k]
        guesses = [
            Guess(
                name=b.name,
                confidence=self.confidence(b.combined, rank),
                source=b.source,
                score=round(b.combined, 2),
            )
            for rank, b in enumerate(ordered, start=1)
        ]
        logger.debug("Top guesses: %s", [(g.name, g.confidence, g.source.value) for g in guesses])
        return guesses

    def confidence(self, score: float, rank: int) -> int:
        noise_range = self.settings.ranking.confidence_noise
        noise = self.rng.uniform(-noise_range, noise_range) if noise_range else 0.0
        base = min(95.0, max(30.0, score * 0.8))
        return int(max(20, min(95, round(base - (rank - 1) * 8 + noise))))

    async def calculate_top_guesses(self, answers: Union[AnswerSet, Mapping[str, Any]],
                                    k: Optional[int] = None) -> List[Guess]:
        """Load the database if needed, then rank guesses for ``answers``."""
        if not isinstance(answers, AnswerSet):
            answers = AnswerSet.from_mapping(answers)
        await self.database.ensure_loaded()
        return self.rank(answers, k)
