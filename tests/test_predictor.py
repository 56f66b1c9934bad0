import numpy as np
import pytest

from name_guesser.answers import AnswerSet
from name_guesser.exceptions import PredictorError
from name_guesser.predictor import (
    FEATURE_COUNT,
    MIN_TRAINING_EXAMPLES,
    VOCABULARY,
    NamePredictor,
    encode_answers,
    load_predictor,
)


def quiz_record(name, success=True, **answers):
    return {"answers": answers, "correctGuess": {"name": name}, "success": success}


def test_encode_answers_layout():
    answers = AnswerSet.from_mapping({
        "gender": ["F", "NB"],
        "decade": 1990,
        "length": "medium",
        "starts_with": "consonant",
        "popularity": "very_popular",
        "political_values": ["diverse"],
        "language_preference": ["english_only", "other"],
    })
    features = encode_answers(answers)
    assert features.shape == (FEATURE_COUNT,)
    assert features[1] == 1 and features[2] == 1 and features[0] == 0
    assert features[4] == pytest.approx(0.75)
    assert features[6] == 1
    assert features[9] == 1
    assert features[12] == 1
    assert features[14] == 1
    assert features[23] == 1
    assert features.sum() == pytest.approx(7.75)


def test_encode_extra_long_shares_long_slot():
    long = encode_answers(AnswerSet(length="long"))
    extra = encode_answers(AnswerSet(length="extra_long"))
    assert np.array_equal(long, extra)
    assert long[7] == 1


def test_untrained_predictor_is_usable():
    predictor = NamePredictor()
    assert not predictor.trained
    probabilities = predictor.predict(AnswerSet())
    assert probabilities.shape == (len(VOCABULARY),)
    assert probabilities.sum() == pytest.approx(1.0)

    top = predictor.top(AnswerSet(gender=["NB"]), 3)
    assert len(top) == 3
    assert all(name in VOCABULARY for name, _ in top)
    assert top[0][1] >= top[1][1] >= top[2][1]


def test_predictor_is_seeded():
    a = AnswerSet(gender=["M"], length="short")
    assert NamePredictor(seed=1).top(a, 5) == NamePredictor(seed=1).top(a, 5)


def test_name_for_index_wraps():
    predictor = NamePredictor(["Alex", "Sam"])
    assert predictor.name_for_index(3) == "Sam"


def test_train_learns_a_preference():
    predictor = NamePredictor()
    records = [quiz_record("quinn", gender=["NB"], length="short") for _ in range(12)]
    assert predictor.train(records) == 12
    assert predictor.trained
    assert predictor.top(AnswerSet(gender=["NB"], length="short"), 1)[0][0] == "Quinn"


def test_train_skips_small_or_unusable_sets():
    predictor = NamePredictor()
    before = predictor.weights.copy()
    records = [quiz_record("Quinn", gender=["NB"]) for _ in range(MIN_TRAINING_EXAMPLES - 1)]
    records += [
        quiz_record("Quinn", success=False, gender=["NB"]),
        quiz_record("Bartholomew", gender=["M"]),
        quiz_record("Quinn", length="gigantic"),
        {"answers": {}, "success": True},
    ]
    assert predictor.train(records) == 0
    assert not predictor.trained
    assert np.array_equal(predictor.weights, before)


def test_save_and_load(tmp_path):
    predictor = NamePredictor(seed=3)
    path = predictor.save(tmp_path / "model")
    assert path.name == "model.npz"

    loaded = NamePredictor.load(path)
    assert loaded.trained
    assert loaded.vocabulary == predictor.vocabulary
    assert np.array_equal(loaded.weights, predictor.weights)
    assert load_predictor(path).vocabulary == predictor.vocabulary


def test_load_rejects_bad_files(tmp_path):
    with pytest.raises(PredictorError):
        NamePredictor.load(tmp_path / "missing.npz")

    bad = tmp_path / "bad.npz"
    np.savez(bad, weights=np.zeros((3, 2)), bias=np.zeros(2), vocabulary=np.array(["Alex", "Sam"]))
    with pytest.raises(PredictorError):
        NamePredictor.load(bad)


def test_load_predictor_without_file(tmp_path):
    assert not load_predictor(None).trained
    assert not load_predictor(tmp_path / "absent.npz").trained
