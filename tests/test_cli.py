import io
import json
import zipfile
from unittest.mock import MagicMock, patch

import pytest

import run_guesser
from name_guesser.config import DATA_URL, STATE_DATA_URL, TERRITORY_DATA_URL


@pytest.fixture
def cli_args(tmp_path):
    data_dir = tmp_path / "names"
    data_dir.mkdir()
    (data_dir / "yob2020.txt").write_text("Emma,F,900\nOlivia,F,850\nAmelia,F,300\nLiam,M,950\nEmmett,M,40\n")
    return [
        "--data-dir", str(data_dir),
        "--state-dir", str(tmp_path / "no-states"),
        "--years", "2020",
        "--no-predictor",
        "--seed", "1",
        "--log-level", "warning",
    ]


def test_details(cli_args, capsys):
    assert run_guesser.main(cli_args + ["--details", "Emma"]) == 0
    out = capsys.readouterr().out
    assert "Total Births: 900" in out
    assert "Similar by spelling" in out


def test_details_for_unknown_name(cli_args, capsys):
    assert run_guesser.main(cli_args + ["--details", "Zzyzx"]) == 0
    assert "No records for Zzyzx." in capsys.readouterr().out


def test_answers(cli_args, tmp_path, capsys):
    answers = tmp_path / "answers.json"
    answers.write_text(json.dumps({"gender": "F", "length": 2, "starts_with": "vowel"}))
    assert run_guesser.main(cli_args + ["--answers", str(answers), "--top", "2"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("1. Olivia")
    assert "(rule-based)" in lines[0]


def test_invalid_answers_exit_code(cli_args, tmp_path, capsys):
    answers = tmp_path / "answers.json"
    answers.write_text(json.dumps({"starts_with": "maybe"}))
    assert run_guesser.main(cli_args + ["--answers", str(answers)]) == 1
    assert "starts_with" in capsys.readouterr().err


def test_requires_an_action():
    with pytest.raises(SystemExit):
        run_guesser.main([])


def zip_response(files):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as z:
        for name, text in files.items():
            z.writestr(name, text)
    response = MagicMock()
    response.content = buffer.getvalue()
    response.raise_for_status.return_value = None
    return response


@patch("name_guesser.sources.requests.get")
def test_download_fetches_national_state_and_territory_data(mock_get, tmp_path):
    archives = {
        DATA_URL: {"yob2020.txt": "Emma,F,900\n"},
        STATE_DATA_URL: {"CA.TXT": "CA,F,2020,Emma,50\n"},
        TERRITORY_DATA_URL: {"PR.TXT": "PR,F,2020,Emma,5\n"},
    }
    mock_get.side_effect = lambda url, **kwargs: zip_response(archives[url])
    names, states, territories = tmp_path / "names", tmp_path / "states", tmp_path / "territories"

    assert run_guesser.main([
        "--download", "--data-dir", str(names), "--state-dir", str(states),
        "--territory-dir", str(territories), "--log-level", "warning",
    ]) == 0
    assert (names / "yob2020.txt").exists()
    assert (states / "CA.TXT").exists()
    assert (territories / "PR.TXT").exists()
    assert [c.args[0] for c in mock_get.call_args_list] == [DATA_URL, STATE_DATA_URL, TERRITORY_DATA_URL]
