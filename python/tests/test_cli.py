"""Command line option handling (the interactive frontend is stubbed out)."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

import tilelink.frontend.cli.rich.app as rich_app
from tilelink.main import app
from tilelink.models.difficulty import Difficulty
from tilelink.models.theme import FALLBACK_SYMBOLS, PRESET_THEMES

runner = CliRunner()


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    calls: list[dict] = []
    monkeypatch.setattr(rich_app, "run", lambda **kwargs: calls.append(kwargs))
    return calls


def test_defaults(launched: list[dict]) -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 0, result.output
    assert launched == [
        {"difficulty": Difficulty.MEDIUM, "theme_key": "fruits", "symbols": None}
    ]


def test_difficulty_and_theme(launched: list[dict]) -> None:
    result = runner.invoke(app, ["-d", "hard", "-t", "sports"])
    assert result.exit_code == 0, result.output
    assert launched[0]["difficulty"] is Difficulty.HARD
    assert launched[0]["theme_key"] == "sports"


def test_custom_symbols(launched: list[dict]) -> None:
    result = runner.invoke(app, ["--symbols", "a, b,c,d,e,f,g,h,a"])
    assert result.exit_code == 0, result.output
    assert launched[0]["symbols"] == ["a", "b", "c", "d", "e", "f", "g", "h"]


def test_too_few_custom_symbols(launched: list[dict]) -> None:
    result = runner.invoke(app, ["--symbols", "a,b,c"])
    assert result.exit_code != 0
    assert launched == []


def test_unknown_theme(launched: list[dict]) -> None:
    result = runner.invoke(app, ["--theme", "nope"])
    assert result.exit_code != 0
    assert launched == []


def test_topic_picks_matching_preset(launched: list[dict]) -> None:
    result = runner.invoke(app, ["--topic", "stormy weather"])
    assert result.exit_code == 0, result.output
    assert launched[0]["symbols"] == list(PRESET_THEMES["weather"].symbols)


def test_unknown_topic_uses_fallback(launched: list[dict]) -> None:
    result = runner.invoke(app, ["--topic", "sushi"])
    assert result.exit_code == 0, result.output
    assert launched[0]["symbols"] == list(FALLBACK_SYMBOLS)


def test_symbols_win_over_topic(launched: list[dict]) -> None:
    result = runner.invoke(app, ["--symbols", "a,b,c,d,e,f,g,h", "--topic", "sports"])
    assert result.exit_code == 0, result.output
    assert launched[0]["symbols"] == ["a", "b", "c", "d", "e", "f", "g", "h"]
