import asyncio
from pathlib import Path
from unittest.mock import patch

import pytest

from conftest import NATIONAL_2020, build_database, run
from name_guesser.database import RELAXED, STRICT, NameDatabase
from name_guesser.exceptions import DataSourceError
from name_guesser.models import Gender, IndexPopularity, LengthBucket
from name_guesser.sources import STATE, DirectorySource, LinesSource, NameSource


class CountingSource(LinesSource):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.reads = 0

    def read(self):
        self.reads += 1
        return super().read()


class BrokenSource(NameSource):
    label = "broken"

    def read(self):
        raise DataSourceError("unreachable", source=self.label)


# --- Loading ---

def test_concurrent_ensure_loaded_reads_sources_once():
    """Concurrent callers share one load; sources are read exactly once."""
    source = CountingSource(NATIONAL_2020, year=2020)
    db = NameDatabase([source])

    async def load_many():
        return await asyncio.gather(*(db.ensure_loaded() for _ in range(5)))

    results = run(load_many())
    assert results == [True] * 5
    assert source.reads == 1
    assert db.is_loaded

    # Already loaded: no further reads.
    assert run(db.ensure_loaded()) is True
    assert source.reads == 1


def test_aggregation_accumulates_years_and_states():
    db = build_database(
        LinesSource(["Emma,F,900", "Liam,M,10"], year=2020),
        LinesSource(["Emma,F,700", "emma,F,5"], year=2021),
        LinesSource(["CA,F,2021,Emma,50", "NY,F,2021,Emma,20"], fmt=STATE),
    )
    emma = db.get("Emma", "F")
    assert emma.total_count == 900 + 700 + 5 + 50 + 20
    assert sorted(emma.year_counts) == [(2020, 900), (2021, 775)]
    assert sum(count for _, count in emma.year_counts) == emma.total_count
    assert emma.state_counts == {"CA": 50, "NY": 20}
    assert db.get("EMMA", "F") is emma


def test_base_records_are_male_or_female(database):
    assert {r.gender for r in database.records.values()} <= {Gender.MALE, Gender.FEMALE}


def test_derived_tags_never_empty(database):
    for record in database.records.values():
        profile = record.profile
        assert profile.name_meaning
        assert profile.typical_reactions
        assert profile.perceived_traits
        assert profile.desired_traits
        assert profile.geographic_preference


def test_failed_source_is_skipped():
    db = build_database(BrokenSource(), LinesSource(["Emma,F,900"], year=2020))
    assert not db.used_fallback
    assert list(db.records) == ["emma_F"]


def test_total_failure_uses_embedded_names():
    """With no readable source the database still serves the embedded names."""
    db = build_database(BrokenSource())
    assert db.used_fallback
    assert len(db.records) == 10
    assert db.get_names_by_gender("F")[0].name == "Olivia"
    assert db.get_names_by_gender("M")[0].name == "Liam"


def test_unlistable_directory_uses_embedded_names(tmp_path):
    with patch.object(Path, "iterdir", side_effect=PermissionError("denied")):
        db = build_database(DirectorySource(tmp_path))
    assert db.used_fallback
    assert len(db.records) == 10


def test_malformed_counts_do_not_change_totals():
    db = build_database(LinesSource(["Mary,F,100", "Mary,F,-500", "Mary,F,12.7", "Mary,F,5,extra"], year=2020))
    assert db.get("Mary", "F").total_count == 100


# --- Indexes ---

def test_gender_index_sorted_by_total(database):
    totals = [r.total_count for r in database.get_names_by_gender("F")]
    assert totals == sorted(totals, reverse=True)
    assert database.get_names_by_gender("F")[0].name == "Emma"


def test_gender_and_length_index(database):
    names = [r.name for r in database.get_names_by_gender_and_length("F", "medium")]
    assert names == ["Olivia", "Sarah", "Amelia", "Brenda", "Jordan", "Marlo"]
    assert all(5 <= len(n) <= 6 for n in names)


def test_state_index_sorted_by_state_count(database):
    names = [r.name for r in database.get_names_by_state_gender_and_length("CA", "F", None)]
    assert names == ["Olivia", "Emma"]
    assert database.get_names_by_state_gender_and_length("TX", "F", "short") == []
    assert database.states == ["CA"]


def test_all_criteria_uses_national_index_without_state(database):
    names = [r.name for r in database.get_names_by_all_criteria(None, "F", "medium", "vowel", "uncommon")]
    assert names == ["Amelia"]


def test_all_criteria_with_partial_criteria(database):
    names = [r.name for r in database.get_names_by_all_criteria(None, "F", "medium", True, None)]
    assert names == ["Olivia", "Amelia"]
    popular = database.get_names_by_all_criteria(None, Gender.MALE, None, None, IndexPopularity.VERY_POPULAR)
    assert [r.name for r in popular] == ["Liam", "Noah", "Oliver"]


def test_all_criteria_empty_for_unknown_state(database):
    assert database.get_names_by_all_criteria("TX", "F", "medium", "vowel", "uncommon") == []


# --- Non-binary pool ---

def test_strict_policy_thresholds():
    assert STRICT.admits(120, 60, curated=False)
    assert not STRICT.admits(500, 10, curated=False)
    assert STRICT.admits(500, 10, curated=True)
    assert not STRICT.admits(30, 10, curated=True)
    assert not STRICT.admits(100, 0, curated=True)


def test_non_binary_pool_membership_and_order(database):
    """Curated names first, then by total; unbalanced names stay out."""
    pool = database.get_non_binary_names()
    names = [c.name for c in pool]
    assert names == ["Jordan", "Alex", "Sam", "Kendrix"]
    assert "Brixton" not in names
    assert "Marlo" not in names

    alex = pool[1]
    assert alex.gender == Gender.NON_BINARY
    assert alex.total_count == 180
    assert alex.gender_balance == pytest.approx(0.5)
    assert alex.is_curated
    assert not pool[3].is_curated


def test_non_binary_pool_is_fresh_and_not_stored(database):
    first = database.get_non_binary_names()
    second = database.get_non_binary_names()
    assert first[0] is not second[0]
    assert not any(k.endswith("_NB") for k in database.records)


def test_non_binary_pool_length_filter(database):
    names = [c.name for c in database.get_non_binary_names(STRICT, LengthBucket.SHORT)]
    assert names == ["Alex", "Sam"]


def test_relaxed_policy_admits_less_balanced_names(database):
    names = [c.name for c in database.get_non_binary_names(RELAXED)]
    assert "Marlo" in names
    assert "Brixton" not in names


def test_non_binary_candidate_copies_dominant_profile(database):
    jordan = database.get_non_binary_names()[0]
    assert jordan.profile is database.get("Jordan", "M").profile
    assert jordan.year_counts == [(2020, 340)]


def test_gender_lookup_for_non_binary_returns_pool(database):
    assert [c.name for c in database.get_names_by_gender("NB")] == ["Jordan", "Alex", "Sam", "Kendrix"]


# --- Religion / origin queries ---

def test_religion_and_origin_queries(database):
    christian_boys = [r.name for r in database.get_names_by_religion("christianity", "M")]
    assert "Noah" in christian_boys
    assert "Liam" not in christian_boys

    assert "Liam" in [r.name for r in database.get_names_by_cultural_origin("celtic")]
    assert "Liam" in [r.name for r in database.get_names_by_cultural_origin("europe")]

    cross = [r.name for r in database.get_cross_religious_names()]
    assert "Noah" in cross and "Sarah" in cross
    assert "Emma" not in cross


# --- Name details / similar names ---

@pytest.fixture
def history_database():
    return build_database(
        LinesSource(["Mary,F,100", "Anna,F,80", "John,M,90", "William,M,85", "Bryan,M,20", "Brian,M,25"], year=1990),
        LinesSource(["Mary,F,50", "John,M,60", "Jon,M,5"], year=1991),
    )


def test_get_name_details(history_database):
    details = history_database.get_name_details("Mary", "F")
    assert details["Total Births"] == 150
    assert details["First Appearance"] == 1990
    assert details["Peak Year"] == 1990
    assert details["Peak Year Count"] == 100
    assert details["Most Popular Decade"] == "1990s"
    assert details["All-Time Rank"] == {"F": 1}


def test_get_name_details_unknown_name(history_database):
    assert history_database.get_name_details("Zebulon") is None


def test_similar_names_by_spelling(history_database):
    results = history_database.find_similar_names("John", by="spelling", gender="M", max_distance=1)
    assert results[0][0].name == "Jon"
    assert results[0][1] == 1
    assert all(r.name != "John" for r, _ in results)


def test_similar_names_by_sound(history_database):
    """Metaphone matches exclude the source name and non-matches."""
    names = [r.name for r, _ in history_database.find_similar_names("John", by="sound")]
    assert "Jon" in names
    assert "John" not in names
    assert "Brian" not in names


def test_similar_names_rejects_unknown_mode(history_database):
    with pytest.raises(ValueError):
        history_database.find_similar_names("John", by="meaning")
