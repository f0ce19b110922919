from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from labyrinth.cli import main
from labyrinth.config import MazeSettings
from labyrinth.logging_config import configure_logging


def test_cli_prints_json_summary(capsys: pytest.CaptureFixture) -> None:
    assert main(["--width", "4", "--height", "3", "--seed", "7"]) == 0
    data = json.loads(capsys.readouterr().out)

    assert data["width"] == 4 and data["height"] == 3
    assert data["spawns"]["goal"] == [3, 2]
    assert data["stats"]["walls_removed"] == 11
    assert len(data["grid"]) == 2 * 3 + 1


def test_cli_output_is_reproducible(capsys: pytest.CaptureFixture) -> None:
    main(["--width", "6", "--height", "6", "--seed", "same"])
    first = capsys.readouterr().out
    main(["--width", "6", "--height", "6", "--seed", "same"])
    second = capsys.readouterr().out
    assert first == second


def test_cli_ascii_mode(capsys: pytest.CaptureFixture) -> None:
    assert main(["--width", "5", "--height", "5", "--seed", "3", "--ascii"]) == 0
    out = capsys.readouterr().out
    lines = out.strip().splitlines()
    assert len(lines) == 11
    assert "P" in out


def test_cli_reads_config_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    path = tmp_path / "maze.yaml"
    MazeSettings(width=7, height=5, seed=9).save(path)
    assert main(["--config", str(path)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert (data["width"], data["height"]) == (7, 5)


@pytest.mark.parametrize("argv", [["--width", "0"], ["--width", "1", "--height", "1"]])
def test_cli_reports_generation_errors(argv, capsys: pytest.CaptureFixture) -> None:
    assert main(argv) == 2
    assert capsys.readouterr().out == ""


def test_cli_missing_config_file(tmp_path: Path) -> None:
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 2


@pytest.mark.parametrize(
    "env_level,expected",
    [("debug", logging.DEBUG), ("ERROR", logging.ERROR), ("loud", logging.INFO)],
)
def test_log_level_env_var(monkeypatch: pytest.MonkeyPatch, env_level, expected) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", env_level)
    configure_logging()
    assert calls[-1]["level"] == expected


def test_cli_log_level_env_overrides_default(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "info")
    assert main(["--width", "3", "--height", "3", "--seed", "1"]) == 0
    capsys.readouterr()
    assert calls[-1]["level"] == logging.INFO
