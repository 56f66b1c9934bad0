#!/usr/bin/env python

"""Readers for SSA baby-name files.

Two line formats exist:

* national ``yobYYYY.txt``: ``name,gender,count``
* state / territory ``XX.TXT``: ``state,gender,year,name,count``

Every source returns a DataFrame with the columns in ``COLUMNS``. Malformed
lines (the wrong number of fields, a count that is not a whole non-negative
number, a gender other than M/F) are dropped during parsing. A source that
cannot be read at all raises :class:`DataSourceError`.
"""

import io
import logging
import re
import zipfile
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import pandas as pd
import requests

from .config import DATA_URL
from .exceptions import DataSourceError

logger = logging.getLogger(__name__)

NATIONAL = "national"
STATE = "state"

FORMAT_COLUMNS = {
    NATIONAL: ["Name", "Sex", "Count"],
    STATE: ["State", "Sex", "Year", "Name", "Count"],
}
COLUMNS = ["Name", "Sex", "Count", "Year", "State"]

YOB_PATTERN = re.compile(r"^yob(\d{4})\.txt$", re.IGNORECASE)
STATE_PATTERN = re.compile(r"^[A-Z]{2}\.TXT$", re.IGNORECASE)

REQUEST_HEADERS = {"User-Agent": "Mozilla/5.0"}


def empty_frame() -> pd.DataFrame:
    return pd.DataFrame({col: pd.Series(dtype=object) for col in COLUMNS})


def parse_lines(lines: Iterable[str], fmt: str = NATIONAL, year: Optional[int] = None) -> pd.DataFrame:
    """Parse raw comma-separated lines into the common frame layout."""
    if fmt not in FORMAT_COLUMNS:
        raise ValueError(f"Unknown name file format: {fmt}")
    columns = FORMAT_COLUMNS[fmt]

    rows = [line.strip().split(",") for line in lines if line and line.strip()]
    rows = [row for row in rows if len(row) == len(columns)]
    if not rows:
        return empty_frame()

    df = pd.DataFrame(rows, columns=columns)

    df["Name"] = df["Name"].str.strip()
    df["Sex"] = df["Sex"].str.strip().str.upper()
    df["Count"] = pd.to_numeric(df["Count"], errors="coerce")
    if fmt == STATE:
        df["Year"] = pd.to_numeric(df["Year"], errors="coerce")
        df["State"] = df["State"].str.strip().str.upper()
    else:
        df["Year"] = year
        df["State"] = None

    required = ["Name", "Sex", "Count", "Year"] if fmt == STATE else ["Name", "Sex", "Count"]
    df = df.dropna(subset=required)
    # Counts must be whole, non-negative numbers.
    df = df[(df["Name"] != "") & df["Sex"].isin(["M", "F"]) & (df["Count"] >= 0) & (df["Count"] % 1 == 0)]
    df = df.astype({"Count": int, "Year": int} if fmt == STATE else {"Count": int})
    return df[COLUMNS].reset_index(drop=True)


def detect_format(filename: str) -> tuple:
    """Return ``(format, year)`` for an SSA file name."""
    base = Path(filename).name
    match = YOB_PATTERN.match(base)
    if match:
        return NATIONAL, int(match.group(1))
    if STATE_PATTERN.match(base):
        return STATE, None
    raise DataSourceError(f"Unrecognised name file: {base}", source=filename).add_suggestion(
        "Expected yobYYYY.txt or a two-letter XX.TXT state file"
    )


class NameSource:
    """Base class; subclasses implement the blocking ``read``."""

    label = "source"

    def read(self) -> pd.DataFrame:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label})"


class LinesSource(NameSource):
    """Lines held in memory, mostly for tests and embedded data."""

    def __init__(self, lines: Sequence[str], fmt: str = NATIONAL, year: Optional[int] = None, label: str = "memory"):
        self.lines = list(lines)
        self.fmt = fmt
        self.year = year
        self.label = label

    def read(self) -> pd.DataFrame:
        return parse_lines(self.lines, self.fmt, self.year)


class FileSource(NameSource):
    def __init__(self, path: Path, fmt: Optional[str] = None, year: Optional[int] = None):
        self.path = Path(path)
        self.label = str(self.path)
        if fmt is None:
            fmt, detected_year = detect_format(self.path.name)
            year = year if year is not None else detected_year
        self.fmt = fmt
        self.year = year

    def read(self) -> pd.DataFrame:
        try:
            text = self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise DataSourceError(f"Could not read {self.path}: {e}", source=self.label) from e
        return parse_lines(text.splitlines(), self.fmt, self.year)


class DirectorySource(NameSource):
    """All national or state files in one directory.

    National files are limited to ``years`` when given. Individual files
    that fail to read are logged and skipped.
    """

    def __init__(self, path: Path, fmt: str = NATIONAL, years: Optional[Iterable[int]] = None):
        self.path = Path(path)
        self.fmt = fmt
        self.years = set(years) if years is not None else None
        self.label = str(self.path)

    def files(self) -> List[Path]:
        pattern = YOB_PATTERN if self.fmt == NATIONAL else STATE_PATTERN
        try:
            entries = sorted(self.path.iterdir())
        except OSError as e:
            raise DataSourceError(f"Could not list {self.path}: {e}", source=self.label) from e
        found = []
        for file_path in entries:
            match = pattern.match(file_path.name)
            if not match:
                continue
            if self.fmt == NATIONAL and self.years is not None and int(match.group(1)) not in self.years:
                continue
            found.append(file_path)
        return found

    def read(self) -> pd.DataFrame:
        if not self.path.is_dir():
            raise DataSourceError(f"Data directory not found: {self.path}", source=self.label).add_suggestion(
                "Download the SSA data first (run_guesser.py --download)"
            )
        frames = []
        error_count = 0
        for file_path in self.files():
            try:
                frames.append(FileSource(file_path, fmt=self.fmt).read())
            except DataSourceError as e:
                error_count += 1
                logger.warning("Skipping %s: %s", file_path.name, e)
        if error_count:
            logger.warning("%d file(s) in %s failed to read", error_count, self.path)
        if not frames:
            return empty_frame()
        return pd.concat(frames, ignore_index=True)


class UrlSource(NameSource):
    def __init__(self, url: str, fmt: str = NATIONAL, year: Optional[int] = None, timeout: float = 30.0):
        self.url = url
        self.fmt = fmt
        self.year = year
        self.timeout = timeout
        self.label = url

    def read(self) -> pd.DataFrame:
        try:
            response = requests.get(self.url, headers=REQUEST_HEADERS, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise DataSourceError(f"Network error fetching {self.url}: {e}", source=self.label) from e
        return parse_lines(response.text.splitlines(), self.fmt, self.year)


class ZipArchiveSource(NameSource):
    """An SSA zip archive, fetched over HTTP or read from disk."""

    def __init__(self, location: str = DATA_URL, fmt: str = NATIONAL, years: Optional[Iterable[int]] = None,
                 timeout: float = 60.0):
        self.location = str(location)
        self.fmt = fmt
        self.years = set(years) if years is not None else None
        self.timeout = timeout
        self.label = self.location

    def _fetch(self) -> bytes:
        if not self.location.startswith(("http://", "https://")):
            try:
                return Path(self.location).read_bytes()
            except OSError as e:
                raise DataSourceError(f"Could not read {self.location}: {e}", source=self.label) from e
        try:
            response = requests.get(self.location, headers=REQUEST_HEADERS, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise DataSourceError(f"Network error downloading data: {e}", source=self.label) from e
        return response.content

    def _wanted(self, member: zipfile.ZipInfo) -> Optional[int]:
        """Year for national members (0 for state members), None to skip."""
        if member.is_dir():
            return None
        base = Path(member.filename).name
        if self.fmt == NATIONAL:
            match = YOB_PATTERN.match(base)
            if not match:
                return None
            year = int(match.group(1))
            if self.years is not None and year not in self.years:
                return None
            return year
        return 0 if STATE_PATTERN.match(base) else None

    def read(self) -> pd.DataFrame:
        payload = self._fetch()
        frames = []
        try:
            with zipfile.ZipFile(io.BytesIO(payload)) as z:
                for member in z.infolist():
                    year = self._wanted(member)
                    if year is None:
                        continue
                    text = z.read(member.filename).decode("utf-8", errors="replace")
                    frames.append(parse_lines(text.splitlines(), self.fmt, year or None))
        except zipfile.BadZipFile as e:
            raise DataSourceError(f"Error processing data file: {e}", source=self.label) from e
        if not frames:
            return empty_frame()
        return pd.concat(frames, ignore_index=True)


def download_and_extract(target_dir: Path, url: str = DATA_URL, pattern: re.Pattern = YOB_PATTERN) -> int:
    """Download an SSA archive and unpack its data files into ``target_dir``.

    Returns the number of files written. An existing directory is left
    untouched.
    """
    target_dir = Path(target_dir)
    if target_dir.exists():
        logger.info("Data directory %s already exists. Skipping download.", target_dir)
        return 0

    logger.info("Downloading %s", url)
    try:
        response = requests.get(url, headers=REQUEST_HEADERS, stream=True, timeout=120)
        response.raise_for_status()
        written = 0
        with zipfile.ZipFile(io.BytesIO(response.content)) as z:
            for member in z.infolist():
                if member.is_dir() or not pattern.match(Path(member.filename).name):
                    continue
                target_path = target_dir / Path(member.filename).name
                target_path.parent.mkdir(parents=True, exist_ok=True)
                with open(target_path, "wb") as f:
                    f.write(z.read(member.filename))
                written += 1
    except requests.exceptions.RequestException as e:
        raise DataSourceError(f"Network error downloading data: {e}", source=url) from e
    except (zipfile.BadZipFile, OSError) as e:
        raise DataSourceError(f"Error processing data file: {e}", source=url) from e
    logger.info("Data download complete: %d file(s) in %s", written, target_dir)
    return written


def default_sources(data_dir: Path, years: Optional[Iterable[int]] = None,
                    state_dir: Optional[Path] = None, territory_dir: Optional[Path] = None) -> List[NameSource]:
    """National files for ``years`` plus any state / territory directories present."""
    sources: List[NameSource] = [DirectorySource(data_dir, NATIONAL, years)]
    for extra in (state_dir, territory_dir):
        if extra is not None and Path(extra).is_dir():
            sources.append(DirectorySource(extra, STATE))
    return sources
