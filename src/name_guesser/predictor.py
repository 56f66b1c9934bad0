#!/usr/bin/env python

"""A small softmax predictor over a fixed vocabulary of neutral names.

Answers are encoded into a 50-slot feature vector; a single dense layer
maps that to a probability for each vocabulary name. Weights start from a
seeded RNG and can be trained in-process or loaded from a ``.npz`` file.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np

from .answers import AnswerSet
from .exceptions import AnswerValidationError, PredictorError
from .models import Gender, IndexPopularity, LengthBucket

logger = logging.getLogger(__name__)

VOCABULARY: Tuple[str, ...] = (
    "Alex", "Jordan", "Taylor", "Casey", "Morgan", "Sam", "Jamie", "Avery", "Riley", "Quinn",
    "Dakota", "Sage", "River", "Skyler", "Phoenix", "Blake", "Cameron", "Drew", "Emery", "Finley",
)

FEATURE_COUNT = 50
MIN_TRAINING_EXAMPLES = 10

GENDER_SLOTS = {Gender.MALE: 0, Gender.FEMALE: 1, Gender.NON_BINARY: 2}
LENGTH_SLOTS = {LengthBucket.SHORT: 0, LengthBucket.MEDIUM: 1, LengthBucket.LONG: 2, LengthBucket.EXTRA_LONG: 2}
POPULARITY_SLOTS = {IndexPopularity.UNCOMMON: 0, IndexPopularity.POPULAR: 1, IndexPopularity.VERY_POPULAR: 2}
POLITICAL_SLOTS = {
    v: i for i, v in enumerate((
        "traditional", "diverse", "community", "progressive", "justice",
        "security", "environment", "economic", "education", "cooperation",
    ))
}
LANGUAGE_SLOTS = {
    v: i for i, v in enumerate((
        "english_only", "spanish", "chinese", "filipino", "vietnamese", "korean",
        "japanese", "hindi", "arabic", "hebrew", "french", "german", "italian",
        "russian", "polish", "greek", "irish", "scandinavian", "yoruba", "amharic",
        "haitian_creole", "portuguese", "multilingual",
    ))
}


def encode_answers(answers: AnswerSet) -> np.ndarray:
    """Encode answers as a fixed-layout feature vector.

    Layout: gender (4), decade (1), length (3), starts_with (2),
    popularity (3), political values (10), languages (23), zero padding.
    """
    features = np.zeros(FEATURE_COUNT, dtype=np.float64)
    offset = 0

    for g in answers.gender:
        features[offset + GENDER_SLOTS[g]] = 1
    offset += 4

    if answers.decade is not None:
        features[offset] = (answers.decade - 1900) / 120
    offset += 1

    if answers.length is not None:
        features[offset + LENGTH_SLOTS[answers.length]] = 1
    offset += 3

    if answers.starts_with is not None:
        features[offset + (0 if answers.starts_with == "vowel" else 1)] = 1
    offset += 2

    if answers.popularity is not None:
        features[offset + POPULARITY_SLOTS[answers.popularity]] = 1
    offset += 3

    for value in answers.political_values:
        features[offset + POLITICAL_SLOTS[value]] = 1
    offset += len(POLITICAL_SLOTS)

    for value in answers.language_preference:
        if value in LANGUAGE_SLOTS:
            features[offset + LANGUAGE_SLOTS[value]] = 1

    return features


def _softmax(logits: np.ndarray) -> np.ndarray:
    shifted = logits - logits.max(axis=-1, keepdims=True)
    exp = np.exp(shifted)
    return exp / exp.sum(axis=-1, keepdims=True)


class NamePredictor:
    def __init__(self, vocabulary: Iterable[str] = VOCABULARY, seed: int = 42):
        self.vocabulary: Tuple[str, ...] = tuple(vocabulary)
        rng = np.random.default_rng(seed)
        self.weights = rng.normal(0.0, 0.1, size=(FEATURE_COUNT, len(self.vocabulary)))
        self.bias = np.zeros(len(self.vocabulary))
        self.trained = False

    def name_for_index(self, index: int) -> str:
        return self.vocabulary[index % len(self.vocabulary)]

    def predict(self, answers: AnswerSet) -> np.ndarray:
        """Probability for every vocabulary name, in vocabulary order."""
        return _softmax(encode_answers(answers) @ self.weights + self.bias)

    def top(self, answers: AnswerSet, k: int) -> List[Tuple[str, float]]:
        probabilities = self.predict(answers)
        order = np.argsort(-probabilities, kind="stable")[:k]
        return [(self.name_for_index(int(i)), float(probabilities[i])) for i in order]

    # --- Persistence ---

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        np.savez(path, weights=self.weights, bias=self.bias, vocabulary=np.array(self.vocabulary))
        # np.savez appends .npz when missing
        return path if path.suffix == ".npz" else path.with_name(path.name + ".npz")

    @classmethod
    def load(cls, path: Union[str, Path]) -> "NamePredictor":
        try:
            with np.load(Path(path), allow_pickle=False) as data:
                vocabulary = [str(v) for v in data["vocabulary"]]
                weights = data["weights"]
                bias = data["bias"]
        except (OSError, KeyError, ValueError) as e:
            raise PredictorError(f"Could not load predictor from {path}: {e}").add_context("path", str(path)) from e

        if weights.shape != (FEATURE_COUNT, len(vocabulary)) or bias.shape != (len(vocabulary),):
            raise PredictorError(
                f"Predictor weights have shape {weights.shape}, expected {(FEATURE_COUNT, len(vocabulary))}"
            ).add_context("path", str(path))

        predictor = cls(vocabulary)
        predictor.weights = weights
        predictor.bias = bias
        predictor.trained = True
        logger.info("Loaded predictor from %s (%d names)", path, len(vocabulary))
        return predictor

    # --- Training ---

    def _examples(self, records: Iterable[Mapping[str, Any]]) -> Tuple[np.ndarray, np.ndarray]:
        index = {name.lower(): i for i, name in enumerate(self.vocabulary)}
        features, labels = [], []
        for record in records:
            guess = record.get("correctGuess") or record.get("correct_guess")
            if not record.get("success") or not guess or not guess.get("name"):
                continue
            label = index.get(str(guess["name"]).lower())
            if label is None:
                continue
            answers = record.get("answers") or {}
            if not isinstance(answers, AnswerSet):
                try:
                    answers = AnswerSet.from_mapping(answers)
                except AnswerValidationError as e:
                    logger.debug("Skipping training record with invalid answers: %s", e)
                    continue
            features.append(encode_answers(answers))
            labels.append(label)
        if not features:
            return np.zeros((0, FEATURE_COUNT)), np.zeros(0, dtype=int)
        return np.vstack(features), np.array(labels, dtype=int)

    def train(self, records: Iterable[Mapping[str, Any]], epochs: int = 50,
              learning_rate: float = 0.5) -> int:
        """Fit on successful quiz records; returns how many examples were used.

        Nothing is trained when fewer than ``MIN_TRAINING_EXAMPLES`` records
        name a vocabulary name as the correct guess.
        """
        x, y = self._examples(records)
        n = len(y)
        if n < MIN_TRAINING_EXAMPLES:
            logger.info("Not training: %d usable example(s), need %d", n, MIN_TRAINING_EXAMPLES)
            return 0

        targets = np.zeros((n, len(self.vocabulary)))
        targets[np.arange(n), y] = 1
        for _ in range(epochs):
            probs = _softmax(x @ self.weights + self.bias)
            grad = (probs - targets) / n
            self.weights -= learning_rate * (x.T @ grad)
            self.bias -= learning_rate * grad.sum(axis=0)

        self.trained = True
        logger.info("Trained predictor on %d example(s) for %d epochs", n, epochs)
        return n


def load_predictor(path: Optional[Union[str, Path]]) -> NamePredictor:
    """Load a saved predictor, or fall back to the seeded one."""
    if path is None or not Path(path).exists():
        return NamePredictor()
    return NamePredictor.load(path)
