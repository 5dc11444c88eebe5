from __future__ import annotations

import json
from pathlib import Path

import pytest

from team_picker.cli import main as cli_main

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def test_groups_from_file_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    cli_main.main(["groups", "--file", str(FIXTURES / "sample_roster.txt"), "--size", "2", "--seed", "1", "--json"])
    captured = capsys.readouterr()
    data = json.loads(captured.out)
    assert len(data["groups"]) == 2
    assert len(data["leftover"]) == 1
    assert captured.err.startswith("[team-picker] Loaded 5 players")


@pytest.mark.parametrize("command", [["matches", "--mode", "1v1"], ["teams"], ["speaker"]])
def test_json_output_from_file_is_a_single_document(capsys: pytest.CaptureFixture[str], command: list[str]) -> None:
    cli_main.main(command + ["--file", str(FIXTURES / "sample_roster.csv"), "--seed", "3", "--json"])
    assert isinstance(json.loads(capsys.readouterr().out), dict)


def test_matches_on_builtin_roster(capsys: pytest.CaptureFixture[str]) -> None:
    cli_main.main(["matches", "--roster", "chess", "--mode", "1v1", "--seed", "4"])
    out = capsys.readouterr().out
    assert out.count("Match ") == 3
    assert "Sitting out this round:" in out


def test_teams_text_output(capsys: pytest.CaptureFixture[str]) -> None:
    cli_main.main(["teams", "--seed", "2"])
    out = capsys.readouterr().out
    assert out.startswith("Team 1:")
    assert "Team 2 reserves:" in out


def test_speaker_with_exclusions(capsys: pytest.CaptureFixture[str]) -> None:
    cli_main.main(["speaker", "--file", str(FIXTURES / "sample_roster.csv"), "--exclude", "Asha", "--exclude", "Ben",
                   "--exclude", "Caro", "--exclude", "Dmitri"])
    assert "Today's speaker: Eun" in capsys.readouterr().out


def test_rosters_listing(capsys: pytest.CaptureFixture[str]) -> None:
    cli_main.main(["rosters", "--sort", "size"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("speakers - Speakers (18 players)")


def test_invalid_group_size_exits_with_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_main.main(["groups", "--roster", "speakers", "--size", "1"])
    assert excinfo.value.code == 2
    assert "Group size must be at least 2" in capsys.readouterr().err
