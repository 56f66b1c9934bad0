import asyncio

import pytest

from name_guesser.config import EngineSettings
from name_guesser.database import NameDatabase
from name_guesser.enricher import enrich
from name_guesser.models import Gender, NameRecord
from name_guesser.sources import STATE, LinesSource

# --- Mock Data ---

NATIONAL_2020 = [
    "Emma,F,900",
    "Olivia,F,850",
    "Amelia,F,300",
    "Brenda,F,300",
    "Ivy,F,300",
    "Isabella,F,700",
    "Sarah,F,650",
    "Liam,M,950",
    "Noah,M,900",
    "Oliver,M,820",
    "Sebastian,M,400",
    "Alex,M,120",
    "Alex,F,60",
    "Kendrix,M,120",
    "Kendrix,F,60",
    "Brixton,M,500",
    "Brixton,F,10",
    "Sam,M,40",
    "Sam,F,15",
    "Jordan,M,300",
    "Jordan,F,40",
    "Marlo,M,300",
    "Marlo,F,40",
]

STATE_LINES = [
    "CA,F,2020,Emma,50",
    "CA,F,2020,Olivia,80",
    "CA,M,2020,Liam,30",
]


def run(coro):
    return asyncio.run(coro)


def make_record(name, gender="F", count=300, years=None):
    """A standalone enriched record, for scoring tests."""
    record = NameRecord(name=name, gender=Gender(gender), total_count=count, year_counts=list(years or []))
    record.profile = enrich(name, gender, count)
    return record


def build_database(*sources, settings=None):
    db = NameDatabase(list(sources), settings.data if settings else None)
    run(db.load())
    return db


@pytest.fixture
def sources():
    return [
        LinesSource(NATIONAL_2020, year=2020, label="yob2020"),
        LinesSource(STATE_LINES, fmt=STATE, label="CA"),
    ]


@pytest.fixture
def database(sources):
    """A NameDatabase loaded from a small, predictable in-memory dataset."""
    return build_database(*sources)


@pytest.fixture
def settings():
    settings = EngineSettings()
    settings.ranking.confidence_noise = 0.0
    settings.ranking.use_predictor = False
    return settings
