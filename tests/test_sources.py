import io
import logging
import zipfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from name_guesser.config import EngineSettings, RankingSettings
from name_guesser.exceptions import ConfigurationError, DataSourceError, NameGuesserError
from name_guesser.log import LOGGER_NAME, setup_logging
from name_guesser.sources import (
    NATIONAL,
    STATE,
    STATE_PATTERN,
    DirectorySource,
    FileSource,
    UrlSource,
    ZipArchiveSource,
    default_sources,
    detect_format,
    download_and_extract,
    parse_lines,
)


def make_zip(files):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as z:
        for name, text in files.items():
            z.writestr(name, text)
    return buffer.getvalue()


def mock_response(text="", content=b""):
    response = MagicMock()
    response.text = text
    response.content = content
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "yob2020.txt").write_text("Emma,F,900\nLiam,M,950\n")
    (tmp_path / "yob2021.txt").write_text("Emma,F,700\n")
    (tmp_path / "CA.TXT").write_text("CA,F,2020,Emma,50\n")
    (tmp_path / "NationalReadMe.pdf").write_text("not data")
    return tmp_path


# --- Parsing ---

def test_parse_lines_drops_malformed_rows():
    """Wrong field counts, bad counts, unknown genders and empty names are skipped."""
    df = parse_lines([
        "Emma,F,100", "bad line", "Liam,M,abc", "Noa,X,50", "Ava,f,20", ",F,5",
        "Zoe,F,100,extra", "Mary,F,-500", "Anna,F,12.7",
    ], year=2020)
    assert df["Name"].tolist() == ["Emma", "Ava"]
    assert df["Sex"].tolist() == ["F", "F"]
    assert df["Count"].tolist() == [100, 20]
    assert df["Year"].tolist() == [2020, 2020]


def test_parse_state_lines():
    df = parse_lines(["CA,F,1910,Mary,295", "ny,M,1911,John,80", "TX,M,year,Bob,10"], fmt=STATE)
    assert df["State"].tolist() == ["CA", "NY"]
    assert df["Year"].tolist() == [1910, 1911]
    assert df["Name"].tolist() == ["Mary", "John"]


def test_parse_lines_empty_input():
    assert parse_lines([]).empty
    assert parse_lines(["onlyonefield"]).empty


def test_parse_lines_unknown_format():
    with pytest.raises(ValueError):
        parse_lines(["Emma,F,1"], fmt="csv")


def test_detect_format():
    assert detect_format("yob1999.txt") == (NATIONAL, 1999)
    assert detect_format("/data/WY.TXT") == (STATE, None)
    with pytest.raises(DataSourceError) as exc_info:
        detect_format("NationalReadMe.pdf")
    assert exc_info.value.suggestions


# --- Local sources ---

def test_file_source_detects_year(data_dir):
    df = FileSource(data_dir / "yob2021.txt").read()
    assert df["Year"].tolist() == [2021]


def test_file_source_missing_file(tmp_path):
    with pytest.raises(DataSourceError):
        FileSource(tmp_path / "yob2000.txt").read()


def test_directory_source_filters_years(data_dir):
    source = DirectorySource(data_dir, NATIONAL, years=[2021])
    assert [p.name for p in source.files()] == ["yob2021.txt"]
    assert DirectorySource(data_dir, NATIONAL).read()["Count"].sum() == 900 + 950 + 700


def test_directory_source_reads_state_files(data_dir):
    df = DirectorySource(data_dir, STATE).read()
    assert df["State"].tolist() == ["CA"]


def test_directory_source_missing_directory(tmp_path):
    with pytest.raises(DataSourceError) as exc_info:
        DirectorySource(tmp_path / "missing").read()
    assert "--download" in str(exc_info.value)


def test_directory_source_unlistable_directory(tmp_path):
    with patch.object(Path, "iterdir", side_effect=PermissionError("denied")):
        with pytest.raises(DataSourceError) as exc_info:
            DirectorySource(tmp_path).read()
    assert "denied" in str(exc_info.value)


def test_default_sources(data_dir, tmp_path):
    sources = default_sources(data_dir, [2020], state_dir=data_dir, territory_dir=tmp_path / "none")
    assert len(sources) == 2
    assert sources[1].fmt == STATE


# --- Remote sources ---

@patch("name_guesser.sources.requests.get")
def test_url_source(mock_get):
    mock_get.return_value = mock_response(text="Emma,F,5\nLiam,M,6\n")
    df = UrlSource("https://example.org/yob2020.txt", year=2020).read()
    assert df["Name"].tolist() == ["Emma", "Liam"]


@patch("name_guesser.sources.requests.get")
def test_url_source_network_error(mock_get):
    mock_get.side_effect = requests.exceptions.ConnectionError("offline")
    with pytest.raises(DataSourceError) as exc_info:
        UrlSource("https://example.org/yob2020.txt").read()
    assert exc_info.value.context["source"] == "https://example.org/yob2020.txt"


@patch("name_guesser.sources.requests.get")
def test_zip_archive_source_over_http(mock_get):
    payload = make_zip({"yob2020.txt": "Emma,F,900\n", "yob2019.txt": "Emma,F,1\n", "NationalReadMe.pdf": "x"})
    mock_get.return_value = mock_response(content=payload)
    df = ZipArchiveSource("https://example.org/names.zip", years=[2020]).read()
    assert df["Year"].tolist() == [2020]
    assert df["Count"].tolist() == [900]


def test_zip_archive_source_from_disk(tmp_path):
    archive = tmp_path / "namesbystate.zip"
    archive.write_bytes(make_zip({"CA.TXT": "CA,F,2020,Emma,50\n", "StateReadMe.pdf": "x"}))
    df = ZipArchiveSource(archive, fmt=STATE).read()
    assert df["State"].tolist() == ["CA"]


def test_zip_archive_source_bad_archive(tmp_path):
    archive = tmp_path / "names.zip"
    archive.write_bytes(b"definitely not a zip")
    with pytest.raises(DataSourceError):
        ZipArchiveSource(archive).read()


@patch("name_guesser.sources.requests.get")
def test_download_and_extract(mock_get, tmp_path):
    mock_get.return_value = mock_response(content=make_zip({
        "yob2020.txt": "Emma,F,900\n",
        "yob2021.txt": "Emma,F,700\n",
        "NationalReadMe.pdf": "x",
    }))
    target = tmp_path / "names"
    assert download_and_extract(target, "https://example.org/names.zip") == 2
    assert sorted(p.name for p in target.iterdir()) == ["yob2020.txt", "yob2021.txt"]

    # Existing directory: nothing is fetched again.
    mock_get.reset_mock()
    assert download_and_extract(target, "https://example.org/names.zip") == 0
    mock_get.assert_not_called()


@patch("name_guesser.sources.requests.get")
def test_download_state_files(mock_get, tmp_path):
    mock_get.return_value = mock_response(content=make_zip({"CA.TXT": "x", "StateReadMe.pdf": "x"}))
    assert download_and_extract(tmp_path / "states", "https://example.org/s.zip", STATE_PATTERN) == 1


@patch("name_guesser.sources.requests.get")
def test_download_network_error(mock_get, tmp_path):
    mock_get.side_effect = requests.exceptions.Timeout("slow")
    with pytest.raises(DataSourceError):
        download_and_extract(tmp_path / "names", "https://example.org/names.zip")
    assert not (tmp_path / "names").exists()


# --- Configuration ---

def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("NAME_GUESSER_YEARS", "2019, 2020")
    monkeypatch.setenv("NAME_GUESSER_TOP_K", "3")
    monkeypatch.setenv("NAME_GUESSER_DECADE_MODE", "per_year")
    monkeypatch.setenv("NAME_GUESSER_LOG_LEVEL", "debug")
    monkeypatch.setenv("NAME_GUESSER_DATA_DIR", "/srv/names")
    monkeypatch.setenv("NAME_GUESSER_TERRITORY_DIR", "/srv/territories")
    settings = EngineSettings.from_env()
    assert settings.data.years == (2019, 2020)
    assert settings.data.data_dir == Path("/srv/names")
    assert settings.data.territory_dir == Path("/srv/territories")
    assert settings.ranking.top_k == 3
    assert settings.scoring.decade_mode == "per_year"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("variable, value, field", [
    ("NAME_GUESSER_YEARS", "twenty", "data.years"),
    ("NAME_GUESSER_YEARS", "1700", "data.years"),
    ("NAME_GUESSER_TOP_K", "0", "ranking.top_k"),
    ("NAME_GUESSER_DECADE_MODE", "weekly", "scoring.decade_mode"),
])
def test_settings_from_env_rejects_bad_values(monkeypatch, variable, value, field):
    monkeypatch.setenv(variable, value)
    with pytest.raises(ConfigurationError) as exc_info:
        EngineSettings.from_env()
    assert exc_info.value.config_field == field


def test_ranking_weights_must_sum_to_one():
    with pytest.raises(ConfigurationError):
        RankingSettings(rule_weight=0.5, ml_weight=0.6).validate()


def test_error_message_includes_suggestions():
    error = NameGuesserError("boom").add_suggestion("try again").add_context("attempt", 2)
    assert str(error) == "boom -- Suggestions: try again"
    assert error.context == {"attempt": 2}


# --- Logging ---

def test_setup_logging_writes_file(tmp_path):
    logger = setup_logging("debug", log_dir=str(tmp_path), console=False)
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    log_files = list(tmp_path.glob("name_guesser_*.log"))
    assert len(log_files) == 1
    assert "hello" in log_files[0].read_text(encoding="utf-8")
