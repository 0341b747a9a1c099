"""
Tests for the ladder CLI entry points.

Sheets are written under tmp_path; load_dotenv is stubbed so a local .env
cannot change the sheet location.
"""

import csv
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import cli.ladder as ladder  # noqa: E402
from domain import MalformedSourceError  # noqa: E402
from services.ladder_service import calculate_trueskill  # noqa: E402

GAME_ROWS = [
    ["Alice", "Bob"],
    ["Bob", "Alice"],
    ["Alice", "Carol"],
]


def make_sheet(path):
    with path.open("w", encoding="utf-8", newline="") as f:
        csv.writer(f).writerows([
            ["#", "1st", "2nd"],
            *[[str(i), *row] for i, row in enumerate(GAME_ROWS, start=1)],
        ])
    return path


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr(ladder, "load_dotenv", lambda: None)
    ladder.MENUS.clear()


def test_on_open_registers_recalculate_item():
    menus = ladder.on_open()

    assert menus == {"Ladder": {"Recalculate True Skill": ladder.on_recalculate_trueskill}}
    # Calling again does not duplicate the menu
    assert ladder.on_open() == menus


def test_menu_command_prints_menu(capsys):
    ladder.main(["menu"])

    out = capsys.readouterr().out
    assert "Ladder" in out
    assert "Recalculate True Skill -> on_recalculate_trueskill" in out


def test_recalculate_writes_leaderboard(tmp_path, capsys):
    sheet = make_sheet(tmp_path / "ladder.csv")

    ladder.main(["recalculate", "--sheet", str(sheet)])

    with sheet.open("r", encoding="utf-8", newline="") as f:
        rows = list(csv.reader(f))
    expected = [e.player_name for e in calculate_trueskill(GAME_ROWS)]
    assert [row[8] for row in rows[1:4]] == expected
    # Bob's upset in game 2 outweighs Alice's win over a new player
    assert expected[0] == "Bob"
    assert f"1. {expected[0]}" in capsys.readouterr().out


def test_recalculate_uses_env_sheet(tmp_path, monkeypatch):
    sheet = make_sheet(tmp_path / "from_env.csv")
    monkeypatch.setenv("LADDER_SHEET_PATH", str(sheet))

    entries = ladder.on_recalculate_trueskill()

    assert entries == calculate_trueskill(GAME_ROWS)
    with sheet.open("r", encoding="utf-8", newline="") as f:
        assert list(csv.reader(f))[1][8] == entries[0].player_name


def test_dry_run_leaves_sheet_untouched(tmp_path, capsys):
    sheet = make_sheet(tmp_path / "ladder.csv")
    original = sheet.read_bytes()

    ladder.main(["recalculate", "--sheet", str(sheet), "--dry-run", "--show-games"])

    assert sheet.read_bytes() == original
    assert "dry-run" in capsys.readouterr().out


def test_missing_sheet_propagates(tmp_path):
    with pytest.raises(MalformedSourceError):
        ladder.main(["recalculate", "--sheet", str(tmp_path / "missing.csv")])


def test_command_is_required():
    with pytest.raises(SystemExit):
        ladder.main([])


def test_show_games_logs_per_player_changes(tmp_path, caplog):
    sheet = make_sheet(tmp_path / "ladder.csv")

    ladder.main(["recalculate", "--sheet", str(sheet), "--dry-run", "--show-games"])

    assert "Game Alice, Bob" in caplog.text
    assert "Rated Carol (rank 2)" in caplog.text
    assert "exposed=" in caplog.text
