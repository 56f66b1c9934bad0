#!/usr/bin/env python

import asyncio
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import jellyfish
import Levenshtein
import pandas as pd

from . import lexicon
from .config import DataSettings
from .enricher import enrich
from .exceptions import DataSourceError
from .models import (
    Gender,
    IndexPopularity,
    LengthBucket,
    NameRecord,
    NonBinaryCandidate,
    index_popularity,
    length_bucket,
    record_key,
)
from .sources import COLUMNS, NameSource, default_sources

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NonBinaryPolicy:
    """Inclusion thresholds for the non-binary pool.

    A name qualifies when it was given to both boys and girls and either
    sits on the curated neutral list with at least ``curated_min_total``
    births, or has a gender balance of at least ``min_ratio`` with at least
    ``min_total`` births.
    """
    name: str
    min_ratio: float
    min_total: int
    curated_min_total: int = 50

    def admits(self, male: int, female: int, curated: bool) -> bool:
        if male <= 0 or female <= 0:
            return False
        total = male + female
        if curated:
            return total >= self.curated_min_total
        return min(male, female) / max(male, female) >= self.min_ratio and total >= self.min_total


STRICT = NonBinaryPolicy("strict", min_ratio=0.43, min_total=100)
RELAXED = NonBinaryPolicy("relaxed", min_ratio=0.1, min_total=100)

GenderLike = Union[Gender, str]
LengthLike = Union[LengthBucket, str, None]
PopularityLike = Union[IndexPopularity, str, None]


def _vowel_flag(vowel: Union[bool, str, None]) -> Optional[bool]:
    if vowel is None or isinstance(vowel, bool):
        return vowel
    return str(vowel).lower() == "vowel"


class NameDatabase:
    """Aggregated, enriched and indexed name records.

    Loading happens once; afterwards every query is a synchronous read of
    the in-memory tables.
    """

    def __init__(self, sources: Optional[Sequence[NameSource]] = None, settings: Optional[DataSettings] = None):
        self.settings = settings or DataSettings()
        self.sources = list(sources) if sources is not None else None
        self.records: Dict[str, NameRecord] = {}
        self.is_loaded = False
        self.used_fallback = False

        self.df: Optional[pd.DataFrame] = None
        self.all_time_totals: Optional[pd.DataFrame] = None
        self.phonetic_df: Optional[pd.DataFrame] = None

        self._index: Dict[tuple, List[NameRecord]] = {}
        self._state_index: Dict[str, Dict[tuple, List[NameRecord]]] = {}
        self._by_name: Dict[str, Dict[Gender, NameRecord]] = {}
        self._load_task: Optional[asyncio.Future] = None

    # --- Loading ---

    def _default_sources(self) -> List[NameSource]:
        s = self.settings
        return default_sources(s.data_dir, s.years, s.state_dir, s.territory_dir)

    async def load(self, sources: Optional[Sequence[NameSource]] = None) -> "NameDatabase":
        """Read every source, then aggregate, enrich and index the rows.

        A source that fails is logged and skipped. If nothing at all could
        be read, the embedded fallback names are loaded instead.
        """
        if sources is None:
            sources = self.sources if self.sources is not None else self._default_sources()

        loop = asyncio.get_running_loop()
        frames = []
        for source in sources:
            try:
                frame = await loop.run_in_executor(None, source.read)
            except DataSourceError as e:
                logger.warning("Source %r failed: %s", source, e)
                continue
            logger.debug("Read %d rows from %r", len(frame), source)
            frames.append(frame)

        self._build(frames)
        return self

    async def ensure_loaded(self) -> bool:
        """Load once; concurrent callers share the same in-flight load."""
        if self.is_loaded:
            return True
        if self._load_task is None:
            self._load_task = asyncio.ensure_future(self.load())
        try:
            await self._load_task
        except Exception:
            self._load_task = None
            raise
        return self.is_loaded

    def _fallback_frame(self) -> pd.DataFrame:
        year = max(self.settings.years) if self.settings.years else None
        return pd.DataFrame(
            [(name, sex, count, year, None) for name, sex, count in lexicon.FALLBACK_NAMES],
            columns=COLUMNS,
        )

    def _build(self, frames: Iterable[pd.DataFrame]) -> None:
        frames = [f for f in frames if f is not None and not f.empty]
        if not frames:
            logger.error("No name data could be loaded; using the embedded fallback names")
            frames = [self._fallback_frame()]
            self.used_fallback = True

        df = pd.concat(frames, ignore_index=True)
        df["Key"] = df["Name"].str.lower() + "_" + df["Sex"]

        names = df.groupby("Key", sort=False).agg(
            Name=("Name", "first"), Sex=("Sex", "first"), Count=("Count", "sum")
        )
        records: Dict[str, NameRecord] = {}
        for key, row in names.iterrows():
            records[key] = NameRecord(name=row["Name"], gender=Gender(row["Sex"]), total_count=int(row["Count"]))

        # Rows without a year count toward the total only.
        dated = df.dropna(subset=["Year"])
        for (key, year), count in dated.groupby(["Key", "Year"])["Count"].sum().items():
            records[key].year_counts.append((int(year), int(count)))

        stated = df.dropna(subset=["State"])
        for (key, state), count in stated.groupby(["Key", "State"])["Count"].sum().items():
            records[key].state_counts[state] = int(count)

        # Count-dependent fields need the aggregate, so enrich last.
        for record in records.values():
            record.profile = enrich(record.name, record.gender, record.total_count)

        self.records = records
        self.df = df.drop(columns=["Key"])
        self.all_time_totals = self.df.groupby(["Name", "Sex"])["Count"].sum().reset_index()
        self.phonetic_df = self.all_time_totals.copy()
        self.phonetic_df["Metaphone"] = self.phonetic_df["Name"].apply(jellyfish.metaphone)

        self._build_indexes()
        self.is_loaded = True
        logger.info(
            "Name database ready: %d records, %d states%s",
            len(self.records), len(self._state_index), " (fallback)" if self.used_fallback else "",
        )

    @staticmethod
    def _index_keys(record: NameRecord) -> List[tuple]:
        g = record.gender
        b = length_bucket(record.profile.name_length)
        v = record.profile.starts_with_vowel
        p = index_popularity(record.total_count)
        return [
            ("gender", g),
            ("length", b),
            ("vowel", v),
            ("popularity", p),
            ("gender_length", g, b),
            ("gender_vowel", g, v),
            ("gender_popularity", g, p),
            ("all", g, b, v, p),
        ]

    def _build_indexes(self) -> None:
        index: Dict[tuple, List[NameRecord]] = defaultdict(list)
        state_index: Dict[str, Dict[tuple, List[NameRecord]]] = defaultdict(lambda: defaultdict(list))
        by_name: Dict[str, Dict[Gender, NameRecord]] = defaultdict(dict)

        for record in self.records.values():
            keys = self._index_keys(record)
            for k in keys:
                index[k].append(record)
            for state in record.state_counts:
                for k in keys:
                    state_index[state][k].append(record)
            by_name[record.name.lower()][record.gender] = record

        for bucket in index.values():
            bucket.sort(key=lambda r: r.total_count, reverse=True)
        for state, buckets in state_index.items():
            for bucket in buckets.values():
                bucket.sort(key=lambda r, s=state: r.state_counts.get(s, 0), reverse=True)

        self._index = dict(index)
        self._state_index = {state: dict(buckets) for state, buckets in state_index.items()}
        self._by_name = dict(by_name)

    # --- Lookups ---

    @property
    def states(self) -> List[str]:
        return sorted(self._state_index)

    def get(self, name: str, gender: GenderLike) -> Optional[NameRecord]:
        return self.records.get(record_key(name, gender))

    def _scope(self, state: Optional[str]) -> Dict[tuple, List[NameRecord]]:
        if state:
            return self._state_index.get(state.upper(), {})
        return self._index

    def get_names_by_gender(self, gender: GenderLike) -> List[Any]:
        gender = Gender(gender)
        if gender == Gender.NON_BINARY:
            return self.get_non_binary_names()
        return list(self._index.get(("gender", gender), []))

    def get_names_by_gender_and_length(self, gender: GenderLike, length: LengthLike) -> List[NameRecord]:
        if length is None:
            return self.get_names_by_gender(gender)
        return list(self._index.get(("gender_length", Gender(gender), LengthBucket(length)), []))

    def get_names_by_state_gender_and_length(self, state: Optional[str], gender: GenderLike,
                                             length: LengthLike) -> List[NameRecord]:
        if not state:
            return []
        scope = self._scope(state)
        if length is None:
            return list(scope.get(("gender", Gender(gender)), []))
        return list(scope.get(("gender_length", Gender(gender), LengthBucket(length)), []))

    def get_names_by_all_criteria(self, state: Optional[str], gender: GenderLike, length: LengthLike = None,
                                  vowel: Union[bool, str, None] = None,
                                  popularity: PopularityLike = None) -> List[NameRecord]:
        """Most specific lookup; uses the national combined index without a state.

        Criteria left as ``None`` are not constrained.
        """
        scope = self._scope(state)
        gender = Gender(gender)
        vowel = _vowel_flag(vowel)
        bucket = LengthBucket(length) if length is not None else None
        pop = IndexPopularity(popularity) if popularity is not None else None

        if bucket is not None and vowel is not None and pop is not None:
            return list(scope.get(("all", gender, bucket, vowel, pop), []))

        if bucket is not None:
            names = scope.get(("gender_length", gender, bucket), [])
        elif vowel is not None:
            names = scope.get(("gender_vowel", gender, vowel), [])
        else:
            names = scope.get(("gender", gender), [])
        return [
            r for r in names
            if (vowel is None or r.profile.starts_with_vowel == vowel)
            and (pop is None or index_popularity(r.total_count) == pop)
        ]

    def _by_total(self, gender: Optional[GenderLike] = None) -> List[NameRecord]:
        if gender is not None:
            return list(self._index.get(("gender", Gender(gender)), []))
        return sorted(self.records.values(), key=lambda r: r.total_count, reverse=True)

    def get_names_by_religion(self, religion: str, gender: Optional[GenderLike] = None) -> List[NameRecord]:
        return [r for r in self._by_total(gender) if religion in r.profile.religions]

    def get_names_by_cultural_origin(self, origin: str, gender: Optional[GenderLike] = None) -> List[NameRecord]:
        return [r for r in self._by_total(gender) if origin in r.profile.cultural_origins]

    def get_cross_religious_names(self, gender: Optional[GenderLike] = None) -> List[NameRecord]:
        return [r for r in self._by_total(gender) if r.profile.cross_religious]

    def get_non_binary_names(self, policy: NonBinaryPolicy = STRICT,
                             length: LengthLike = None) -> List[NonBinaryCandidate]:
        """Build the non-binary pool from the base records.

        Candidates are new objects on every call, sorted curated first, then
        by total births, then by gender balance.
        """
        bucket = LengthBucket(length) if length is not None else None
        pool = []
        for lowered, by_gender in self._by_name.items():
            male = by_gender.get(Gender.MALE)
            female = by_gender.get(Gender.FEMALE)
            if male is None or female is None:
                continue
            curated = lowered in lexicon.CURATED_NEUTRAL_NAMES
            if not policy.admits(male.total_count, female.total_count, curated):
                continue
            if bucket is not None and length_bucket(len(lowered)) != bucket:
                continue
            dominant = male if male.total_count >= female.total_count else female
            pool.append(NonBinaryCandidate(
                name=dominant.name,
                male_count=male.total_count,
                female_count=female.total_count,
                is_curated=curated,
                year_counts=_merge_years(male.year_counts, female.year_counts),
                profile=dominant.profile,
            ))
        pool.sort(key=lambda c: (not c.is_curated, -c.total_count, -c.gender_balance))
        return pool

    # --- Name details ---

    def _name_rows(self, name: str, gender: Optional[GenderLike]) -> pd.DataFrame:
        name_df = self.df[self.df["Name"].str.lower() == name.lower()].copy()
        if gender is not None:
            name_df = name_df[name_df.Sex == Gender(gender).value]
        return name_df

    def get_name_details(self, name: str, gender: Optional[GenderLike] = None) -> Optional[Dict[str, Any]]:
        if self.df is None or self.all_time_totals is None:
            return None

        name_df = self._name_rows(name, gender)
        if name_df.empty:
            return None

        details: Dict[str, Any] = {"Total Births": int(name_df["Count"].sum())}

        dated = name_df.dropna(subset=["Year"]).astype({"Year": int})
        if not dated.empty:
            by_year = dated.groupby("Year")["Count"].sum()
            details["First Appearance"] = int(by_year.index.min())
            details["Peak Year"] = int(by_year.idxmax())
            details["Peak Year Count"] = int(by_year.max())
            decades = by_year.groupby((by_year.index // 10) * 10).sum()
            details["Most Popular Decade"] = f"{int(decades.idxmax())}s"

        ranks = {}
        for sex in name_df["Sex"].unique():
            sex_totals = (
                self.all_time_totals[self.all_time_totals.Sex == sex]
                .sort_values(by="Count", ascending=False).reset_index(drop=True)
            )
            rank_series = sex_totals[sex_totals.Name.str.lower() == name.lower()].index
            if not rank_series.empty:
                ranks[sex] = int(rank_series[0]) + 1
        details["All-Time Rank"] = ranks

        record = self.get(name, gender) if gender is not None else self._dominant(name)
        if record is not None:
            details["Popularity"] = record.profile.popularity.value
            details["Language Origin"] = record.profile.language_origin
            details["Religions"] = sorted(record.profile.religions)
        return details

    def _dominant(self, name: str) -> Optional[NameRecord]:
        by_gender = self._by_name.get(name.lower(), {})
        if not by_gender:
            return None
        return max(by_gender.values(), key=lambda r: r.total_count)

    def find_similar_names(self, name: str, by: str = "spelling", gender: Optional[GenderLike] = None,
                           limit: int = 20, max_distance: int = 2) -> List[Tuple[NameRecord, int]]:
        """Names spelled or sounding like ``name``.

        ``by="spelling"`` ranks by Levenshtein distance (1..max_distance);
        ``by="sound"`` returns names sharing the Metaphone code, with
        distance 0. Ties are broken by total births.
        """
        if self.phonetic_df is None:
            return []
        target = name.lower()
        source_df = self.phonetic_df[self.phonetic_df["Name"].str.lower() != target].copy()
        if gender is not None:
            source_df = source_df[source_df["Sex"] == Gender(gender).value].copy()

        if by == "sound":
            code = jellyfish.metaphone(name)
            if not code:
                return []
            source_df = source_df[source_df["Metaphone"] == code].copy()
            source_df["Distance"] = 0
        elif by == "spelling":
            source_df["Distance"] = source_df["Name"].apply(lambda n: Levenshtein.distance(target, n.lower()))
            source_df = source_df[(source_df["Distance"] > 0) & (source_df["Distance"] <= max_distance)]
        else:
            raise ValueError(f"Unknown similarity mode: {by}")

        results = source_df.sort_values(by=["Distance", "Count"], ascending=[True, False]).head(limit)
        return [
            (self.records[record_key(row.Name, row.Sex)], int(row.Distance))
            for row in results.itertuples(index=False)
        ]


def _merge_years(*series: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
    merged: Dict[int, int] = defaultdict(int)
    for pairs in series:
        for year, count in pairs:
            merged[year] += count
    return sorted(merged.items())
